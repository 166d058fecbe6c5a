"""Shared constants for viewlocale.

Centralized defaults used by the formatting context and its configuration
object. Placing them here gives one source of truth for both.

Python 3.11+. Zero external dependencies.
"""

import locale as _locale

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Encoding defaults
    "DEFAULT_ENCODING",
    # Locale defaults
    "DEFAULT_LANG_AND_LOCALE",
    "DEFAULT_LOCALE_CATEGORIES",
    "LOCALE_SEPARATOR",
    "ENCODING_SEPARATOR",
    # Cache limits
    "MAX_FORMATTER_CACHE_SIZE",
]

# ============================================================================
# ENCODING DEFAULTS
# ============================================================================

# Used when the bound response has no encoding configured.
DEFAULT_ENCODING: str = "UTF-8"

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Fallback (language, territory) pair for formatters when no locale resolves.
DEFAULT_LANG_AND_LOCALE: tuple[str, str] = ("en", "US")

# System locale categories set during fallback resolution.
DEFAULT_LOCALE_CATEGORIES: tuple[int, ...] = (_locale.LC_ALL,)

# "en" + "_" + "US" -> "en_US"
LOCALE_SEPARATOR: str = "_"

# "en_US" + "." + "UTF-8" -> "en_US.UTF-8"
ENCODING_SEPARATOR: str = "."

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum memoized formatter instances per context.
# Formatters are locale-bound; the cache is emptied on every locale change,
# so this only bounds formatter variety within one render.
MAX_FORMATTER_CACHE_SIZE: int = 64
