"""Core helpers shared across viewlocale modules.

Python 3.11+.
"""

from .babel_compat import (
    BabelImportError,
    get_locale_class,
    get_unknown_locale_error,
    is_babel_available,
    require_babel,
)

__all__ = [
    "BabelImportError",
    "get_locale_class",
    "get_unknown_locale_error",
    "is_babel_available",
    "require_babel",
]
