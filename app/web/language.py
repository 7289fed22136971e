"""Cookie-backed language storage and the FastAPI dependency that owns it.

Each request gets its own :class:`~app.i18n.state.LanguageState` built
over the visitor's ``language`` cookie.  Writes made through
``set_language()`` are buffered in :class:`CookieStore` and flushed onto
the outgoing response with :meth:`CookieStore.apply`.
"""

from __future__ import annotations

from typing import Mapping

from fastapi import Request, Response

from app.core.config import get_settings
from app.i18n.state import LanguageState


class CookieStore:
    """:class:`~app.i18n.state.LanguageStore` over request/response cookies."""

    def __init__(self, cookies: Mapping[str, str], *, max_age: int) -> None:
        self._cookies = cookies
        self._max_age = max_age
        self.pending: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        if key in self.pending:
            return self.pending[key]
        return self._cookies.get(key)

    def set(self, key: str, value: str) -> None:
        self.pending[key] = value

    def apply(self, response: Response) -> Response:
        """Emit a ``Set-Cookie`` header for every buffered write."""
        for key, value in self.pending.items():
            response.set_cookie(
                key,
                value,
                max_age=self._max_age,
                path="/",
                samesite="lax",
            )
        return response


def get_language_state(request: Request) -> LanguageState:
    """FastAPI dependency: language state for the current visitor."""
    settings = get_settings()
    store = CookieStore(request.cookies, max_age=settings.language_cookie_max_age)
    request.state.language_store = store
    return LanguageState(store, default=settings.DEFAULT_LANGUAGE)  # type: ignore[arg-type]
