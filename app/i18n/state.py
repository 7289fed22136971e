"""Per-visitor language state: the single owner of the active language.

``LanguageState`` reads the persisted choice once on construction,
exposes ``language`` / ``direction`` / ``t()`` to consumers, and on
``set_language()`` persists the new code, updates the document
attributes and notifies subscribers synchronously.

Storage is abstracted behind :class:`LanguageStore` so the same holder
works over browser cookies (``app.web.language.CookieStore``) or an
in-memory dict (:class:`MemoryStore`, used in tests and CLI tooling).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Protocol

from app.i18n import (
    DEFAULT_LANG,
    LANGUAGES,
    STORAGE_KEY,
    Direction,
    Language,
    MissingHandler,
    direction_of,
    parse_language,
    supported_languages,
    t,
)

logger = logging.getLogger(__name__)

Subscriber = Callable[[Language, Direction], None]


class UnsupportedLanguageError(ValueError):
    """Raised when ``set_language`` receives a code outside the registry."""

    def __init__(self, code: object) -> None:
        self.code = code
        super().__init__(
            f"Unsupported language {code!r}; expected one of {supported_languages()}"
        )


class LanguageStore(Protocol):
    """Durable key-value storage for the language preference."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Dict-backed :class:`LanguageStore`."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


@dataclass(slots=True)
class DocumentAttributes:
    """Root-element ``lang`` / ``dir`` attributes rendered into ``<html>``."""

    lang: str = DEFAULT_LANG
    dir: Direction = "ltr"


class LanguageState:
    """Active language for one consumer scope (one visitor request, one test)."""

    def __init__(
        self,
        store: LanguageStore,
        *,
        default: Language = DEFAULT_LANG,
        document: DocumentAttributes | None = None,
        on_missing: MissingHandler | None = None,
    ) -> None:
        fallback = parse_language(default)
        if fallback is None:
            raise UnsupportedLanguageError(default)

        self._store = store
        self._on_missing = on_missing
        self._subscribers: list[Subscriber] = []
        self.document = document if document is not None else DocumentAttributes()

        saved = store.get(STORAGE_KEY)
        language = parse_language(saved)
        if language is None:
            if saved is not None:
                logger.warning(
                    "Ignoring invalid stored language %r",
                    saved,
                    extra={"event": "language_invalid_stored", "language": saved},
                )
            language = fallback
        self._language: Language = language
        self._apply_document()

    # --- Read side --------------------------------------------------------
    @property
    def language(self) -> Language:
        return self._language

    def get_language(self) -> Language:
        """Return the active language code."""
        return self._language

    @property
    def direction(self) -> Direction:
        """Layout direction, derived from the language on every access."""
        return direction_of(self._language)

    def t(self, key: str) -> str:
        """Translate *key* in the active language (key itself when missing)."""
        return t(key, self._language, on_missing=self._on_missing)

    # --- Write side -------------------------------------------------------
    def set_language(self, lang: str) -> None:
        """Switch to *lang*, persist it and update the document attributes.

        Raises:
            UnsupportedLanguageError: If *lang* is not a supported code.
                Nothing is persisted or changed in that case.
        """
        code = parse_language(lang)
        if code is None:
            raise UnsupportedLanguageError(lang)

        changed = code != self._language
        self._language = code
        self._store.set(STORAGE_KEY, code)
        self._apply_document()

        if not changed:
            return

        logger.info(
            "Language changed to %s",
            code,
            extra={"event": "language_changed", "language": code, "direction": self.direction},
        )
        for callback in list(self._subscribers):
            callback(code, self.direction)

    def toggle(self) -> Language:
        """Switch to the next supported language (``en`` ↔ ``ar``)."""
        idx = LANGUAGES.index(self._language)
        self.set_language(LANGUAGES[(idx + 1) % len(LANGUAGES)])
        return self._language

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register *callback* for language changes; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _apply_document(self) -> None:
        self.document.lang = self._language
        self.document.dir = self.direction
