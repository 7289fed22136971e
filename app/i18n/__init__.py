"""Internationalization module: translation lookup and text direction.

Provides the ``t(key, lang)`` translation helper that looks up locale
strings from ``app/i18n/locales/{lang}.py`` dictionaries, and
``direction_of(lang)`` which derives the layout direction.

Fallback behaviour:
- Unknown *lang* → falls back to English.
- Unknown *key* → returns the key itself (visible in the page, never raises).

Usage::

    from app.i18n import t, direction_of

    t("nav.home", "ar")           # → "الرئيسية"
    t("nav.home", "en")           # → "Home"
    t("nav.home", "fr")           # → EN fallback
    t("does.not.exist", "en")     # → "does.not.exist"
    direction_of("ar")            # → "rtl"

The active language per visitor lives in :class:`app.i18n.state.LanguageState`.
"""

from __future__ import annotations

import logging
from typing import Callable, Literal, Mapping

from app.i18n.locales.ar import STRINGS as AR_STRINGS
from app.i18n.locales.en import STRINGS as EN_STRINGS

logger = logging.getLogger(__name__)

Language = Literal["en", "ar"]
Direction = Literal["ltr", "rtl"]

# Called with (key, lang) whenever a lookup misses.
MissingHandler = Callable[[str, str], None]

# Registry of supported locales.  The key is the canonical lower-case
# language code written to the ``language`` cookie.
_LOCALES: dict[str, dict[str, str]] = {
    "en": EN_STRINGS,
    "ar": AR_STRINGS,
}

# Toggle order.
LANGUAGES: tuple[str, ...] = tuple(_LOCALES)

_RTL_LANGUAGES = frozenset({"ar"})

# Default / fallback language.
DEFAULT_LANG: Language = "en"

# Durable-storage key holding the selected language code.
STORAGE_KEY = "language"


class MissingTranslationError(LookupError):
    """Locale dictionaries do not share the same key set."""

    def __init__(self, missing: Mapping[str, set[str]]) -> None:
        self.missing = {lang: set(keys) for lang, keys in missing.items() if keys}
        details = "; ".join(
            f"{lang}: {', '.join(sorted(keys))}" for lang, keys in sorted(self.missing.items())
        )
        super().__init__(f"Locales missing keys: {details}")


def parse_language(value: str | None) -> Language | None:
    """Normalise *value* to a supported language code, or ``None``.

    Matching is case-insensitive and ignores surrounding whitespace.
    """
    if not value:
        return None
    code = value.strip().lower()
    if code in _LOCALES:
        return code  # type: ignore[return-value]
    return None


def direction_of(lang: str) -> Direction:
    """Return ``"rtl"`` for right-to-left languages, ``"ltr"`` otherwise."""
    return "rtl" if lang in _RTL_LANGUAGES else "ltr"


def t(
    key: str,
    lang: str | None = None,
    *,
    on_missing: MissingHandler | None = None,
) -> str:
    """Return the localised string for *key* in *lang*.

    Parameters
    ----------
    key:
        Dot-namespaced locale key, e.g. ``"nav.home"``.
    lang:
        Language code (case-insensitive).  ``None`` or an unknown
        language falls back to English.
    on_missing:
        Optional reporting hook, called with ``(key, lang)`` when the
        key is absent from the selected locale.

    Returns
    -------
    str
        The translated string, or the *key* itself if not found
        (prevents runtime errors, easy to spot in the UI).
    """
    code = parse_language(lang) or DEFAULT_LANG

    value = _LOCALES[code].get(key)
    if value is not None:
        return value

    logger.debug(
        "Missing translation %r for %s",
        key,
        code,
        extra={"event": "translation_missing", "key": key, "language": code},
    )
    if on_missing is not None:
        on_missing(key, code)
    return key


def supported_languages() -> list[str]:
    """Return sorted list of supported language codes."""
    return sorted(_LOCALES.keys())


def locale_strings(lang: str) -> dict[str, str]:
    """Return a copy of the full dictionary for *lang* (default on unknown)."""
    code = parse_language(lang) or DEFAULT_LANG
    return dict(_LOCALES[code])


def missing_keys(
    locales: Mapping[str, Mapping[str, str]] | None = None,
) -> dict[str, set[str]]:
    """Map each language to the keys other locales define but it lacks."""
    locales = _LOCALES if locales is None else locales
    all_keys: set[str] = set()
    for strings in locales.values():
        all_keys.update(strings)
    return {lang: all_keys - set(strings) for lang, strings in locales.items()}


def assert_parity(locales: Mapping[str, Mapping[str, str]] | None = None) -> None:
    """Raise :class:`MissingTranslationError` unless all locales share one key set."""
    missing = missing_keys(locales)
    if any(missing.values()):
        raise MissingTranslationError(missing)
