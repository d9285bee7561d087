"""Tests for locale list configuration."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from localecheck.diagnostics import ConfigurationError, DiagnosticCode
from localecheck.locales import (
    is_known_locale,
    normalize_locale,
    parse_locale_list,
    validate_locale_tags,
)

pytest.importorskip("babel")


class TestParseLocaleList:
    """Test splitting and cleanup."""

    def test_split_and_trim(self) -> None:
        assert parse_locale_list(" de , fr,pt-BR ") == ("de", "fr", "pt_BR")

    def test_empties_dropped(self) -> None:
        assert parse_locale_list(",de,,") == ("de",)

    def test_base_locale_dropped(self) -> None:
        assert parse_locale_list("en,de", base_locale="en") == ("de",)

    def test_duplicates_dropped(self) -> None:
        assert parse_locale_list("de,fr,de") == ("de", "fr")

    def test_none_and_empty(self) -> None:
        assert parse_locale_list(None) == ()
        assert parse_locale_list("") == ()

    def test_iterable_input(self) -> None:
        assert parse_locale_list(["de", " fr", "en"], base_locale="en") == ("de", "fr")

    @given(
        tags=st.lists(st.sampled_from(["de", "fr", "en", "pt_BR", "", " "]), max_size=10)
    )
    def test_result_unique_and_clean(self, tags: list[str]) -> None:
        """PROPERTY: result has no empties, no base locale, no duplicates."""
        result = parse_locale_list(",".join(tags), base_locale="en")
        assert len(set(result)) == len(result)
        assert "en" not in result
        assert all(result)


class TestNormalizeLocale:
    def test_hyphen(self) -> None:
        assert normalize_locale("zh-Hant-TW") == "zh_Hant_TW"


class TestValidateLocaleTags:
    """Test CLDR validation via Babel."""

    def test_known(self) -> None:
        assert validate_locale_tags(["de", "pt_BR"]) == ("de", "pt_BR")
        assert is_known_locale("fr")

    def test_unknown(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            validate_locale_tags(["de", "xx", "zz_QQ"])
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.UNKNOWN_LOCALE
        assert "xx" in str(exc_info.value)
        assert "zz_QQ" in str(exc_info.value)
