"""viewlocale - locale and encoding plumbing for view formatting helpers.

Supplies the state that date, number and currency view helpers need to
format values for the active request: language and territory pulled from
the request on every render, Babel detection, and a system-locale fallback
that converts output into the response encoding.

Public API:
    LocaleFormattingContext - Per-render locale/encoding state
    FormattingConfig - Immutable defaults for new contexts
    ViewHelper - Base class for helpers bound to a view
    SystemLocale - Default system locale facility (standard locale module)
    codec_transcode - Default encoding converter
    is_babel_available - Cached Babel availability check

Exceptions:
    BabelImportError - Babel required but not installed

Submodules:
    viewlocale.locale_utils - Locale string parsing and encoding helpers
    viewlocale.view - Request/Response/View protocols
"""

from .config import FormattingConfig
from .context import LocaleFormattingContext
from .core.babel_compat import BabelImportError, is_babel_available
from .system_locale import SystemLocale
from .transcoding import codec_transcode
from .view import ViewHelper

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("viewlocale")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelImportError",
    "FormattingConfig",
    "LocaleFormattingContext",
    "SystemLocale",
    "ViewHelper",
    "__version__",
    "codec_transcode",
    "is_babel_available",
]
