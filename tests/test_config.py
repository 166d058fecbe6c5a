"""Tests for FormattingConfig validation and normalization."""

import locale

import pytest

from viewlocale.config import FormattingConfig
from viewlocale.constants import (
    DEFAULT_ENCODING,
    DEFAULT_LANG_AND_LOCALE,
    DEFAULT_LOCALE_CATEGORIES,
    MAX_FORMATTER_CACHE_SIZE,
)


class TestFormattingConfigDefaults:
    def test_defaults(self) -> None:
        config = FormattingConfig()
        assert config.default_encoding == DEFAULT_ENCODING == "UTF-8"
        assert config.default_lang_and_locale == DEFAULT_LANG_AND_LOCALE == ("en", "US")
        assert config.locale_categories == DEFAULT_LOCALE_CATEGORIES == (locale.LC_ALL,)
        assert config.formatter_cache_size == MAX_FORMATTER_CACHE_SIZE

    def test_frozen(self) -> None:
        config = FormattingConfig()
        with pytest.raises(AttributeError):
            config.default_encoding = "ASCII"  # type: ignore[misc]


class TestFormattingConfigNormalization:
    def test_encoding_upper_cased(self) -> None:
        assert FormattingConfig(default_encoding="iso-8859-1").default_encoding == "ISO-8859-1"

    def test_sequences_become_tuples(self) -> None:
        config = FormattingConfig(
            default_lang_and_locale=["cs", "CZ"],  # type: ignore[arg-type]
            locale_categories=[locale.LC_NUMERIC, locale.LC_TIME],  # type: ignore[arg-type]
        )
        assert config.default_lang_and_locale == ("cs", "CZ")
        assert config.locale_categories == (locale.LC_NUMERIC, locale.LC_TIME)


class TestFormattingConfigValidation:
    def test_empty_encoding(self) -> None:
        with pytest.raises(ValueError, match="default_encoding"):
            FormattingConfig(default_encoding="")

    @pytest.mark.parametrize("pair", [("en",), ("en", "US", "x"), ("en", ""), ("", "US")])
    def test_bad_lang_and_locale(self, pair: tuple[str, ...]) -> None:
        with pytest.raises(ValueError, match="default_lang_and_locale"):
            FormattingConfig(default_lang_and_locale=pair)  # type: ignore[arg-type]

    def test_empty_categories(self) -> None:
        with pytest.raises(ValueError, match="locale_categories"):
            FormattingConfig(locale_categories=())

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_cache_size(self, size: int) -> None:
        with pytest.raises(ValueError, match="formatter_cache_size"):
            FormattingConfig(formatter_cache_size=size)
