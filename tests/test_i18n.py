"""Tests for the i18n module.

Verifies:
- ``t(key, lang)`` returns correct EN and AR strings.
- Unknown language falls back to English.
- Unknown key returns the key itself and reports it to the hook.
- All EN keys have corresponding AR translations (and vice versa).
- ``direction_of()`` maps Arabic to RTL and everything else to LTR.
"""

from __future__ import annotations

import logging
import re

import pytest

from app.i18n import (
    DEFAULT_LANG,
    STORAGE_KEY,
    MissingTranslationError,
    assert_parity,
    direction_of,
    locale_strings,
    missing_keys,
    parse_language,
    supported_languages,
    t,
)
from app.i18n.check import main as check_main
from app.i18n.locales.ar import STRINGS as AR_STRINGS
from app.i18n.locales.en import STRINGS as EN_STRINGS


# ---------------------------------------------------------------------------
# Basic t() behaviour
# ---------------------------------------------------------------------------


class TestTranslationHelper:
    """Test the t(key, lang) function."""

    def test_en_returns_english(self) -> None:
        assert t("nav.home", "en") == "Home"

    def test_ar_returns_arabic(self) -> None:
        assert t("nav.home", "ar") == "الرئيسية"

    @pytest.mark.parametrize("lang,strings", [("en", EN_STRINGS), ("ar", AR_STRINGS)])
    def test_every_key_resolves_to_dictionary_value(self, lang: str, strings: dict) -> None:
        """For every shared key, t() returns exactly the dictionary value."""
        for key, value in strings.items():
            assert t(key, lang) == value

    def test_case_insensitive_lang(self) -> None:
        assert t("nav.home", "AR") == AR_STRINGS["nav.home"]
        assert t("nav.home", " En ") == EN_STRINGS["nav.home"]

    def test_none_lang_defaults_to_en(self) -> None:
        assert t("nav.home", None) == EN_STRINGS["nav.home"]
        assert t("nav.home") == EN_STRINGS["nav.home"]

    def test_unknown_lang_falls_back_to_en(self) -> None:
        assert t("nav.home", "fr") == EN_STRINGS["nav.home"]
        assert t("nav.home", "zz") == EN_STRINGS["nav.home"]

    def test_unknown_key_returns_key(self) -> None:
        assert t("does.not.exist", "en") == "does.not.exist"
        assert t("does.not.exist", "ar") == "does.not.exist"

    def test_empty_string_key_returns_empty(self) -> None:
        assert t("", "en") == ""


class TestMissingHook:
    """The on_missing hook reports misses without changing the fallback."""

    def test_hook_called_with_key_and_lang(self) -> None:
        seen: list[tuple[str, str]] = []
        result = t("does.not.exist", "ar", on_missing=lambda k, lang: seen.append((k, lang)))
        assert result == "does.not.exist"
        assert seen == [("does.not.exist", "ar")]

    def test_hook_not_called_on_hit(self) -> None:
        seen: list[tuple[str, str]] = []
        t("nav.home", "en", on_missing=lambda k, lang: seen.append((k, lang)))
        assert seen == []

    def test_hook_receives_normalised_lang(self) -> None:
        seen: list[tuple[str, str]] = []
        t("nope", "FR", on_missing=lambda k, lang: seen.append((k, lang)))
        assert seen == [("nope", "en")]

    def test_miss_is_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="app.i18n"):
            t("nope.key", "en")
        record = next(r for r in caplog.records if getattr(r, "event", None) == "translation_missing")
        assert record.key == "nope.key"
        assert record.language == "en"


# ---------------------------------------------------------------------------
# Direction derivation
# ---------------------------------------------------------------------------


class TestDirectionOf:
    def test_arabic_is_rtl(self) -> None:
        assert direction_of("ar") == "rtl"

    @pytest.mark.parametrize("lang", ["en", "fr", "", "AR-x", "he?"])
    def test_everything_else_is_ltr(self, lang: str) -> None:
        assert direction_of(lang) == "ltr"


class TestParseLanguage:
    @pytest.mark.parametrize("raw,expected", [("en", "en"), ("AR", "ar"), (" ar\n", "ar")])
    def test_known_codes(self, raw: str, expected: str) -> None:
        assert parse_language(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "fr", "english", "a r"])
    def test_unknown_codes(self, raw: str | None) -> None:
        assert parse_language(raw) is None


# ---------------------------------------------------------------------------
# Locale completeness
# ---------------------------------------------------------------------------


class TestLocaleCompleteness:
    """Verify both locales have matching keys."""

    def test_all_en_keys_exist_in_ar(self) -> None:
        missing = set(EN_STRINGS) - set(AR_STRINGS)
        assert missing == set(), f"AR locale missing keys: {missing}"

    def test_all_ar_keys_exist_in_en(self) -> None:
        orphan = set(AR_STRINGS) - set(EN_STRINGS)
        assert orphan == set(), f"AR locale has orphan keys not in EN: {orphan}"

    def test_assert_parity_passes_for_shipped_locales(self) -> None:
        assert_parity()

    def test_no_empty_values(self) -> None:
        empty = [k for strings in (EN_STRINGS, AR_STRINGS) for k, v in strings.items() if not v]
        assert empty == [], f"Empty values for keys: {empty}"

    def test_keys_are_dot_namespaced(self) -> None:
        bad = [k for k in EN_STRINGS if "." not in k]
        assert bad == []

    def test_format_placeholders_match(self) -> None:
        """EN and AR format strings must have the same placeholders."""
        placeholder_re = re.compile(r"\{(\w+)\}")
        mismatched: list[str] = []
        for key in EN_STRINGS:
            en_placeholders = set(placeholder_re.findall(EN_STRINGS[key]))
            ar_placeholders = set(placeholder_re.findall(AR_STRINGS.get(key, "")))
            if en_placeholders != ar_placeholders:
                mismatched.append(f"{key}: EN={en_placeholders}, AR={ar_placeholders}")
        assert mismatched == [], "Placeholder mismatch:\n" + "\n".join(mismatched)

    @pytest.mark.parametrize(
        "key",
        [
            "nav.home",
            "nav.packages",
            "hero.title",
            "about.title",
            "services.title",
            "howWeWork.title",
            "whyUs.title",
            "packages.title",
            "booking.title",
            "footer.rights",
        ],
    )
    def test_key_differs_en_ar(self, key: str) -> None:
        """Key has distinct EN and AR values (not just copied)."""
        assert EN_STRINGS[key] != AR_STRINGS[key]


class TestParityCheck:
    """missing_keys / assert_parity over custom locale tables."""

    def test_reports_gaps_per_language(self) -> None:
        locales = {"en": {"a.x": "1", "a.y": "2"}, "ar": {"a.x": "١", "a.z": "٣"}}
        assert missing_keys(locales) == {"en": {"a.z"}, "ar": {"a.y"}}

    def test_raises_with_details(self) -> None:
        locales = {"en": {"a.x": "1", "a.y": "2"}, "ar": {"a.x": "١"}}
        with pytest.raises(MissingTranslationError, match="a.y") as excinfo:
            assert_parity(locales)
        assert excinfo.value.missing == {"ar": {"a.y"}}

    def test_equal_tables_pass(self) -> None:
        assert_parity({"en": {"k.a": "A"}, "ar": {"k.a": "أ"}})

    def test_is_a_lookup_error(self) -> None:
        assert issubclass(MissingTranslationError, LookupError)

    def test_cli_exit_code_zero_for_shipped_locales(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert check_main() == 0
        assert "same keys" in capsys.readouterr().out

    def test_cli_lists_gaps_and_fails(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("app.i18n.check.missing_keys", lambda: {"ar": {"x.y"}, "en": set()})
        assert check_main() == 1
        out = capsys.readouterr().out
        assert "ar: missing 1 key(s)" in out
        assert "  x.y" in out
        assert "en:" not in out


# ---------------------------------------------------------------------------
# Registry helpers
# ---------------------------------------------------------------------------


class TestSupportedLanguages:
    def test_returns_en_and_ar_sorted(self) -> None:
        assert supported_languages() == ["ar", "en"]

    def test_default_lang_is_en(self) -> None:
        assert DEFAULT_LANG == "en"

    def test_storage_key(self) -> None:
        assert STORAGE_KEY == "language"

    def test_locale_strings_is_a_copy(self) -> None:
        strings = locale_strings("ar")
        strings["nav.home"] = "changed"
        assert AR_STRINGS["nav.home"] == "الرئيسية"

    def test_locale_strings_unknown_falls_back(self) -> None:
        assert locale_strings("fr") == EN_STRINGS
