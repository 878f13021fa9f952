"""Tests for locale helpers."""

from __future__ import annotations

import locale

import pytest

from tmdbkit.shared.locales import (
    fixed_locale,
    join_language_codes,
    language_code,
    region_code,
    region_filter_code,
    system_locale,
)


class TestLanguageCode:
    @pytest.mark.parametrize(
        ("identifier", "expected"),
        [
            ("en-GB", "en"),
            ("en_GB.UTF-8", "en"),
            ("sr_RS@latin", "sr"),
            ("zh-Hant-TW", "zh"),
            ("fil", "fil"),
            ("DE", "de"),
            (" fr ", "fr"),
        ],
    )
    def test_parses_primary_subtag(self, identifier: str, expected: str) -> None:
        assert language_code(identifier) == expected

    @pytest.mark.parametrize("identifier", ["", None, "C", "POSIX", "123", "-GB"])
    def test_unparsable_returns_none(self, identifier: str | None) -> None:
        assert language_code(identifier) is None


class TestRegionCode:
    @pytest.mark.parametrize(
        ("identifier", "expected"),
        [
            ("en-GB", "GB"),
            ("pt_br", "BR"),
            ("zh-Hant-TW", "TW"),
            ("es-419", "419"),
            ("en", None),
            ("C", None),
        ],
    )
    def test_region_code(self, identifier: str, expected: str | None) -> None:
        assert region_code(identifier) == expected

    def test_region_filter_code_accepts_bare_region(self) -> None:
        assert region_filter_code("kr") == "KR"
        assert region_filter_code("ko-KR") == "KR"
        assert region_filter_code("") is None


class TestJoinLanguageCodes:
    """Test cases for list-valued language filters."""

    def test_order_is_preserved(self) -> None:
        assert join_language_codes(["fr", "en-GB"]) == "fr,en"

    def test_duplicates_are_kept(self) -> None:
        assert join_language_codes(["en-US", "en-GB"]) == "en,en"

    def test_unmapped_entries_render_null_in_place(self) -> None:
        assert join_language_codes(["en", "", "C", "ja"]) == "en,null,null,ja"

    def test_empty_list(self) -> None:
        assert join_language_codes([]) == ""


class TestProviders:
    def test_fixed_locale(self) -> None:
        provider = fixed_locale("it-IT")

        assert provider() == "it-IT"
        assert provider() == "it-IT"

    def test_system_locale_falls_back_to_default(self, mocker) -> None:
        mocker.patch.object(locale, "getlocale", return_value=(None, None))

        assert system_locale() == "en-US"

    def test_system_locale_uses_process_locale(self, mocker) -> None:
        mocker.patch.object(locale, "getlocale", return_value=("de_DE", "UTF-8"))

        assert system_locale() == "de_DE"
