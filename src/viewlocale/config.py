"""Configuration for LocaleFormattingContext.

Provides a single frozen dataclass holding the fallback settings a
formatting context starts from. Per-instance setters on the context
override these values after construction.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from viewlocale.constants import (
    DEFAULT_ENCODING,
    DEFAULT_LANG_AND_LOCALE,
    DEFAULT_LOCALE_CATEGORIES,
    MAX_FORMATTER_CACHE_SIZE,
)

__all__ = ["FormattingConfig"]


@dataclass(frozen=True, slots=True)
class FormattingConfig:
    """Immutable defaults for locale formatting contexts.

    All fields have sensible defaults; ``FormattingConfig()`` with no
    arguments reproduces the library defaults.

    Attributes:
        default_encoding: Encoding used when the response has none
            (default: "UTF-8"). Stored upper-cased.
        default_lang_and_locale: Fallback (language, territory) pair for
            formatters when no locale can be resolved (default: ("en", "US")).
        locale_categories: ``locale.LC_*`` categories set during system
            locale resolution (default: (locale.LC_ALL,)).
        formatter_cache_size: Maximum memoized formatter instances per
            context (default: 64).

    Example:
        >>> import locale
        >>> config = FormattingConfig(
        ...     default_encoding="iso-8859-2",
        ...     locale_categories=(locale.LC_NUMERIC, locale.LC_TIME),
        ... )
        >>> config.default_encoding
        'ISO-8859-2'
    """

    default_encoding: str = DEFAULT_ENCODING
    default_lang_and_locale: tuple[str, str] = DEFAULT_LANG_AND_LOCALE
    locale_categories: tuple[int, ...] = DEFAULT_LOCALE_CATEGORIES
    formatter_cache_size: int = MAX_FORMATTER_CACHE_SIZE

    def __post_init__(self) -> None:
        """Validate and normalize configuration values.

        Raises:
            ValueError: If default_encoding is empty, default_lang_and_locale
                is not a pair of non-empty strings, locale_categories is
                empty, or formatter_cache_size is not positive.
        """
        if not self.default_encoding:
            msg = "default_encoding must be a non-empty string"
            raise ValueError(msg)
        # frozen dataclass: normalize via object.__setattr__
        object.__setattr__(self, "default_encoding", self.default_encoding.upper())

        pair = tuple(self.default_lang_and_locale)
        if len(pair) != 2 or not all(pair):
            msg = "default_lang_and_locale must be a (language, territory) pair"
            raise ValueError(msg)
        object.__setattr__(self, "default_lang_and_locale", pair)

        categories = tuple(self.locale_categories)
        if not categories:
            msg = "locale_categories must not be empty"
            raise ValueError(msg)
        object.__setattr__(self, "locale_categories", categories)

        if self.formatter_cache_size <= 0:
            msg = "formatter_cache_size must be positive"
            raise ValueError(msg)
