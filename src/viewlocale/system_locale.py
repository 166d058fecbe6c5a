"""System locale facility for the fallback formatting path.

Wraps the standard ``locale`` module behind a small interface with a
failure marker instead of exceptions:

- ``set_locale(category, value)`` returns the new locale string, or None
- ``get_locale(category)`` returns a ParsedLocale, or None

The process locale is global state. Each set/read-back pair runs under a
module-level lock, so a read-back never observes a half-applied change from
another thread; it does not make concurrent renders that set different
locales safe.

Python 3.11+.
"""

from __future__ import annotations

import locale as locale_module
import logging
from threading import RLock
from typing import Protocol

from viewlocale.locale_utils import ParsedLocale, parse_locale

__all__ = ["SystemLocale", "SystemLocaleFacility", "system_locale_lock"]

logger = logging.getLogger(__name__)

# Guards process-wide setlocale() calls made through SystemLocale.
system_locale_lock = RLock()

_COMPOSITE_ENTRY_SEPARATOR = ";"
_COMPOSITE_KEY_SEPARATOR = "="
_COMPOSITE_PRIMARY_KEY = "LC_CTYPE"


class SystemLocaleFacility(Protocol):
    """Interface consumed by the formatting context."""

    def set_locale(self, category: int, value: str) -> str | None:
        """Set the locale for category; return None on failure."""
        ...  # pylint: disable=unnecessary-ellipsis

    def get_locale(self, category: int) -> ParsedLocale | None:
        """Read back the locale for category; None if unparseable."""
        ...  # pylint: disable=unnecessary-ellipsis


class SystemLocale:
    """SystemLocaleFacility backed by the standard ``locale`` module."""

    __slots__ = ()

    def set_locale(self, category: int, value: str) -> str | None:
        """Set the process locale for one category.

        Args:
            category: ``locale.LC_*`` constant
            value: Locale string, e.g. "en_US.UTF-8"

        Returns:
            Locale string reported by the platform, or None when the
            platform rejects the locale (not installed, bad category).
        """
        with system_locale_lock:
            try:
                return locale_module.setlocale(category, value)
            except (locale_module.Error, ValueError) as e:
                logger.debug("setlocale(%s, %r) failed: %s", category, value, e)
                return None

    def get_locale(self, category: int) -> ParsedLocale | None:
        """Read the current process locale for one category.

        LC_ALL reports a composite string when categories differ
        ("LC_CTYPE=en_US.UTF-8;LC_NUMERIC=C;..."); the LC_CTYPE entry is
        used in that case, as it carries the character encoding.

        Returns:
            ParsedLocale, or None if the locale cannot be read or parsed
        """
        with system_locale_lock:
            try:
                raw = locale_module.setlocale(category)
            except (locale_module.Error, ValueError) as e:
                logger.debug("setlocale(%s) query failed: %s", category, e)
                return None
        if not raw:
            return None
        if _COMPOSITE_ENTRY_SEPARATOR in raw:
            raw = _primary_composite_entry(raw)
            if raw is None:
                return None
        try:
            return parse_locale(raw)
        except ValueError as e:
            logger.debug("Unparseable system locale %r: %s", raw, e)
            return None


def _primary_composite_entry(raw: str) -> str | None:
    for entry in raw.split(_COMPOSITE_ENTRY_SEPARATOR):
        key, _, value = entry.partition(_COMPOSITE_KEY_SEPARATOR)
        if key == _COMPOSITE_PRIMARY_KEY and value:
            return value
    return None
