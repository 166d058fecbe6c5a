"""Locale formatting context for date, number and currency view helpers.

Holds the per-render locale and encoding state that concrete formatting
helpers need. The context itself formats nothing.

Architecture:
    - Bound to a view once per render pass (``bind_view``), pulling language
      and territory from the active request
    - Formatting mode: Babel (CLDR) when importable, otherwise the system
      locale fallback; overridable per instance
    - Fallback path: ``resolve_system_locale`` sets the process locale to
      ``lang_and_locale + "." + response_encoding`` and reads back the
      encoding the platform actually applied; ``encode`` converts fallback
      output into the response encoding when the two differ
    - Babel path: ``babel_locale`` builds a Locale from the bound locale per
      call, with no process-wide state involved

Helpers either subclass LocaleFormattingContext or hold an instance and
call into it; the surface is the same.

Python 3.11+. Babel optional.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Callable, Hashable
from typing import TYPE_CHECKING, Any, Self, TypeVar

from viewlocale.config import FormattingConfig
from viewlocale.constants import DEFAULT_ENCODING, DEFAULT_LANG_AND_LOCALE, ENCODING_SEPARATOR
from viewlocale.core.babel_compat import (
    get_unknown_locale_error,
    is_babel_available,
    require_babel,
)
from viewlocale.locale_utils import (
    get_babel_locale,
    join_lang_and_locale,
    normalize_encoding,
)
from viewlocale.system_locale import SystemLocale, SystemLocaleFacility
from viewlocale.transcoding import Transcoder, codec_transcode
from viewlocale.view import View, ViewHelper

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["LocaleFormattingContext"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LocaleFormattingContext(ViewHelper):
    """Per-render locale and encoding state for formatting helpers.

    Attributes:
        use_extension_formatting: True to format with Babel, False to use the
            system locale fallback. Defaults to Babel availability.
        lang: Language code ("en"), None if unknown
        locale: Territory code ("US"), None if unknown
        lang_and_locale: ``lang`` or ``lang + "_" + locale``; None without lang
        default_encoding: Upper-cased encoding used when the response has none
        default_lang_and_locale: Fallback (language, territory) pair
        locale_categories: ``locale.LC_*`` categories set on resolution
        system_encoding: Encoding the system locale applied, None if unresolved
        response_encoding: Upper-cased response encoding, None if unresolved
        needs_encoding_conversion: None until ``resolve_system_locale`` runs
            after the last locale change, then a bool
        formatter_cache: Memoized formatter instances, keyed by caller

    Example:
        >>> ctx = LocaleFormattingContext().set_lang_and_locale("de", "DE")
        >>> ctx.lang_and_locale
        'de_DE'
        >>> ctx.needs_encoding_conversion is None
        True
    """

    def __init__(
        self,
        config: FormattingConfig | None = None,
        *,
        system_locale: SystemLocaleFacility | None = None,
        transcoder: Transcoder | None = None,
    ) -> None:
        """Create a context with formatting mode set by Babel availability.

        Args:
            config: Fallback settings (default: FormattingConfig())
            system_locale: System locale facility (default: SystemLocale())
            transcoder: Encoding converter (default: codec_transcode)
        """
        super().__init__()
        config = config if config is not None else FormattingConfig()

        self.use_extension_formatting: bool = is_babel_available()

        self.lang: str | None = None
        self.locale: str | None = None
        self.lang_and_locale: str | None = None
        # Values set through set_lang_and_locale() win over the request.
        self._explicit_lang: str | None = None
        self._explicit_locale: str | None = None

        self.default_encoding: str = config.default_encoding
        self.default_lang_and_locale: tuple[str, str] = config.default_lang_and_locale
        self.locale_categories: tuple[int, ...] = config.locale_categories

        self.system_encoding: str | None = None
        self.response_encoding: str | None = None
        self.needs_encoding_conversion: bool | None = None

        self.formatter_cache: OrderedDict[Hashable, Any] = OrderedDict()
        self._formatter_cache_size = config.formatter_cache_size

        self._system_locale: SystemLocaleFacility = (
            system_locale if system_locale is not None else SystemLocale()
        )
        self._transcoder: Transcoder = transcoder if transcoder is not None else codec_transcode

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(lang_and_locale={self.lang_and_locale!r}, "
            f"use_extension_formatting={self.use_extension_formatting!r}, "
            f"needs_encoding_conversion={self.needs_encoding_conversion!r})"
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_extension_formatting(self, enabled: bool = True) -> Self:
        """Force Babel formatting on or off, overriding detection."""
        self.use_extension_formatting = enabled
        return self

    def set_lang_and_locale(self, lang: str | None = None, locale: str | None = None) -> Self:
        """Set language and territory manually.

        Manual values persist across ``bind_view`` calls until overwritten;
        pass None to let the request decide again.

        Args:
            lang: Language code, e.g. "en" or "de"
            locale: Territory code, e.g. "US" or "GB"
        """
        self._explicit_lang = lang
        self._explicit_locale = locale
        return self._apply_lang_and_locale(lang, locale)

    def set_default_encoding(self, encoding: str = DEFAULT_ENCODING) -> Self:
        """Set the encoding used when the response has none (stored upper-cased)."""
        self.default_encoding = encoding.upper()
        return self

    def set_default_lang_and_locale(
        self, lang_and_locale: tuple[str, str] = DEFAULT_LANG_AND_LOCALE
    ) -> Self:
        """Set the fallback (language, territory) pair for formatters.

        Raises:
            ValueError: If the value is not a pair of non-empty strings
        """
        pair = tuple(lang_and_locale)
        if len(pair) != 2 or not all(pair):
            msg = "default_lang_and_locale must be a (language, territory) pair"
            raise ValueError(msg)
        self.default_lang_and_locale = pair  # type: ignore[assignment]
        return self

    def set_locale_categories(self, *categories: int) -> Self:
        """Set the ``locale.LC_*`` categories configured on resolution.

        Raises:
            ValueError: If no category is given
        """
        if not categories:
            msg = "at least one locale category is required"
            raise ValueError(msg)
        self.locale_categories = categories
        self.needs_encoding_conversion = None
        return self

    # ------------------------------------------------------------------
    # View binding
    # ------------------------------------------------------------------

    def bind_view(self, view: View) -> Self:
        """Bind to the view being rendered and take its request locale.

        Manually set language/territory take precedence over the request.
        """
        super().bind_view(view)
        request = self.request
        lang = self._explicit_lang or (request.get_lang() if request is not None else None)
        locale = self._explicit_locale or (
            request.get_locale() if request is not None else None
        )
        return self._apply_lang_and_locale(lang, locale)

    def _apply_lang_and_locale(self, lang: str | None, locale: str | None) -> Self:
        self.lang = lang
        self.locale = locale
        self.lang_and_locale = join_lang_and_locale(lang, locale)
        self.system_encoding = None
        self.response_encoding = None
        self.needs_encoding_conversion = None
        self.formatter_cache.clear()
        logger.debug("Locale set to %r", self.lang_and_locale)
        return self

    # ------------------------------------------------------------------
    # System locale fallback
    # ------------------------------------------------------------------

    def resolve_system_locale(self) -> None:
        """Configure the system locale and decide on encoding conversion.

        Call before formatting with system locale conventions. Sets the
        process locale of every configured category to
        ``lang_and_locale + "." + response_encoding``; ``system_encoding`` is
        taken from the read-back locale only when every category succeeded.

        Never raises for locale failures: categories the platform rejects are
        skipped and conversion is disabled.
        """
        if self.response_encoding is None:
            raw_encoding = self.response.get_encoding() if self.response is not None else None
            self.response_encoding = (
                self.default_encoding if raw_encoding is None else raw_encoding.upper()
            )

        self.system_encoding = None
        if self.lang is not None and self.locale is not None:
            requested = f"{self.lang_and_locale}{ENCODING_SEPARATOR}{self.response_encoding}"
            system_encodings: list[str] = []
            for category in self.locale_categories:
                if self._system_locale.set_locale(category, requested) is None:
                    logger.debug("System locale %r rejected for category %s", requested, category)
                    continue
                parsed = self._system_locale.get_locale(category)
                if parsed is not None and parsed.encoding is not None:
                    system_encodings.append(parsed.encoding)
            if system_encodings and len(system_encodings) == len(self.locale_categories):
                self.system_encoding = normalize_encoding(system_encodings[0])

        self.needs_encoding_conversion = (
            self.system_encoding is not None
            and self.response_encoding is not None
            and self.system_encoding != self.response_encoding
        )
        logger.debug(
            "Resolved system encoding %r, response encoding %r, conversion %s",
            self.system_encoding,
            self.response_encoding,
            self.needs_encoding_conversion,
        )

    def encode(self, value: T) -> T:
        """Convert fallback output from system into response encoding.

        Returns value unchanged unless ``resolve_system_locale`` found that the
        encodings differ. Transcoding errors propagate.
        """
        if self.needs_encoding_conversion:
            # needs_encoding_conversion implies both encodings are resolved
            return self._transcoder(  # type: ignore[return-value]
                self.system_encoding,  # type: ignore[arg-type]
                self.response_encoding,  # type: ignore[arg-type]
                value,  # type: ignore[arg-type]
            )
        return value

    # ------------------------------------------------------------------
    # Babel path
    # ------------------------------------------------------------------

    @property
    def babel_locale(self) -> Locale:
        """Babel Locale for the bound locale, built per call.

        Falls back to ``default_lang_and_locale`` when no language is bound
        or Babel does not know the bound locale.

        Raises:
            BabelImportError: If Babel is not installed
        """
        require_babel("LocaleFormattingContext.babel_locale")
        default_code = join_lang_and_locale(*self.default_lang_and_locale)
        if self.lang_and_locale is None:
            return get_babel_locale(default_code)
        try:
            return get_babel_locale(self.lang_and_locale)
        except (get_unknown_locale_error(), ValueError) as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s",
                self.lang_and_locale,
                e,
                default_code,
            )
            return get_babel_locale(default_code)

    # ------------------------------------------------------------------
    # Formatter cache
    # ------------------------------------------------------------------

    def get_formatter(self, key: Hashable, factory: Callable[[], T]) -> T:
        """Return the cached formatter for key, creating it on first use.

        The cache is emptied on every locale change; the least recently
        used entry is evicted once the configured size is reached.
        """
        if key in self.formatter_cache:
            self.formatter_cache.move_to_end(key)
            return self.formatter_cache[key]  # type: ignore[no-any-return]
        formatter = factory()
        if len(self.formatter_cache) >= self._formatter_cache_size:
            self.formatter_cache.popitem(last=False)
        self.formatter_cache[key] = formatter
        return formatter

    def clear_formatter_cache(self) -> None:
        """Drop all memoized formatters."""
        self.formatter_cache.clear()

    def encoding_state(self) -> dict[str, str | bool | None]:
        """Snapshot of the resolved locale and encoding state."""
        return {
            "lang_and_locale": self.lang_and_locale,
            "system_encoding": self.system_encoding,
            "response_encoding": self.response_encoding,
            "needs_encoding_conversion": self.needs_encoding_conversion,
        }
