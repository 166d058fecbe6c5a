"""Transcoding facility for system-locale formatting output.

Fallback formatters produce output in the system locale encoding; the
response may use another one. ``codec_transcode`` is the default converter:

- ``bytes`` are decoded from the source encoding and re-encoded into the
  target encoding; bytes between aliases of one codec ("UTF8", "UTF-8")
  are returned unchanged.
- ``str`` is already decoded text. It is returned unchanged after checking
  that the target encoding can represent it.

Codec errors (UnicodeError, LookupError) propagate to the caller.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

import codecs
from typing import Protocol, overload

from viewlocale.locale_utils import same_encoding

__all__ = ["Transcoder", "codec_transcode"]


class Transcoder(Protocol):
    """Callable converting a value between two encodings."""

    def __call__(self, from_encoding: str, to_encoding: str, value: str | bytes) -> str | bytes:
        ...  # pylint: disable=unnecessary-ellipsis


@overload
def codec_transcode(from_encoding: str, to_encoding: str, value: str) -> str: ...


@overload
def codec_transcode(from_encoding: str, to_encoding: str, value: bytes) -> bytes: ...


def codec_transcode(from_encoding: str, to_encoding: str, value: str | bytes) -> str | bytes:
    """Convert value from from_encoding into to_encoding.

    Args:
        from_encoding: Encoding the value was produced in
        to_encoding: Encoding the value must be delivered in
        value: Formatter output

    Returns:
        Converted value of the same type as the input

    Raises:
        UnicodeError: If value cannot be decoded or represented
        LookupError: If an encoding name is unknown

    Example:
        >>> codec_transcode("ISO-8859-1", "UTF-8", b"caf\\xe9")
        b'caf\\xc3\\xa9'
        >>> codec_transcode("UTF8", "UTF-8", b"caf\\xc3\\xa9")
        b'caf\\xc3\\xa9'
        >>> codec_transcode("ISO-8859-1", "UTF-8", "café")
        'café'
    """
    if isinstance(value, bytes):
        if same_encoding(from_encoding, to_encoding):
            return value
        return value.decode(from_encoding).encode(to_encoding)
    codecs.lookup(from_encoding)
    value.encode(to_encoding)
    return value
