"""Locale utilities for locale-string parsing and normalization.

Centralizes the small string conventions shared by the formatting context
and the system-locale facility:

- ``join_lang_and_locale``: ("en", "US") -> "en_US"
- ``parse_locale``: "en_US.UTF-8@euro" -> ParsedLocale
- ``normalize_encoding`` / ``same_encoding``: upper-cased encoding names and
  codec-level comparison ("UTF8" and "UTF-8" name the same codec)

Python 3.11+.
"""

from __future__ import annotations

import codecs
import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING

from viewlocale.constants import ENCODING_SEPARATOR, LOCALE_SEPARATOR
from viewlocale.core.babel_compat import get_locale_class

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "ParsedLocale",
    "clear_locale_cache",
    "get_babel_locale",
    "join_lang_and_locale",
    "normalize_encoding",
    "normalize_locale",
    "parse_locale",
    "same_encoding",
]

_MODIFIER_SEPARATOR = "@"


@dataclass(frozen=True, slots=True)
class ParsedLocale:
    """Components of a POSIX locale string.

    Attributes:
        language: Language code ("en"), or the pseudo-locale name ("C", "POSIX")
        territory: Territory code ("US"), None if absent
        encoding: Upper-cased encoding name ("UTF-8"), None if absent
        modifier: Modifier after "@" ("euro"), None if absent
    """

    language: str
    territory: str | None = None
    encoding: str | None = None
    modifier: str | None = None

    def __str__(self) -> str:
        result = join_lang_and_locale(self.language, self.territory) or ""
        if self.encoding is not None:
            result += ENCODING_SEPARATOR + self.encoding
        if self.modifier is not None:
            result += _MODIFIER_SEPARATOR + self.modifier
        return result


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", LOCALE_SEPARATOR)


def join_lang_and_locale(lang: str | None, locale: str | None) -> str | None:
    """Combine language and territory codes into one locale tag.

    Returns None when ``lang`` is None, regardless of ``locale``.

    Example:
        >>> join_lang_and_locale("en", "US")
        'en_US'
        >>> join_lang_and_locale("en", None)
        'en'
        >>> join_lang_and_locale(None, "US") is None
        True
    """
    if lang is None:
        return None
    if locale is None:
        return lang
    return f"{lang}{LOCALE_SEPARATOR}{locale}"


def normalize_encoding(encoding: str | None) -> str | None:
    """Upper-case an encoding name, passing None through."""
    if encoding is None:
        return None
    return encoding.upper()


def same_encoding(first: str, second: str) -> bool:
    """Check whether two encoding names denote the same codec.

    Names unknown to the codec registry are compared case-insensitively.

    Example:
        >>> same_encoding("UTF8", "utf-8")
        True
        >>> same_encoding("ISO-8859-1", "UTF-8")
        False
    """
    if first.upper() == second.upper():
        return True
    try:
        return codecs.lookup(first).name == codecs.lookup(second).name
    except LookupError:
        return False


def parse_locale(value: str) -> ParsedLocale:
    """Parse a POSIX locale string into its components.

    Format: ``language[_territory][.encoding][@modifier]``.

    Args:
        value: Locale string as returned by ``locale.setlocale(category)``

    Returns:
        ParsedLocale with the encoding upper-cased

    Raises:
        ValueError: If value is empty or has no language part

    Example:
        >>> parse_locale("de_DE.utf8@euro")
        ParsedLocale(language='de', territory='DE', encoding='UTF8', modifier='euro')
    """
    rest, _, modifier = value.strip().partition(_MODIFIER_SEPARATOR)
    rest, _, encoding = rest.partition(ENCODING_SEPARATOR)
    language, _, territory = normalize_locale(rest).partition(LOCALE_SEPARATOR)
    if not language:
        msg = f"Invalid locale string '{value}': missing language"
        raise ValueError(msg)
    return ParsedLocale(
        language=language,
        territory=territory or None,
        encoding=normalize_encoding(encoding or None),
        modifier=modifier or None,
    )


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    return get_locale_class().parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the Babel Locale cache."""
    get_babel_locale.cache_clear()
