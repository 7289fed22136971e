"""FastAPI application: landing page, language switching, i18n API, lifecycle.

The language preference lives in the visitor's ``language`` cookie.
Every request builds its own :class:`~app.i18n.state.LanguageState`
through the ``get_language_state`` dependency; routes that switch the
language flush the buffered cookie onto their response.

Locale key parity is checked once on startup (see ``STRICT_TRANSLATIONS``).
"""

from __future__ import annotations

import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from app.core.config import get_settings
from app.core.logging import request_id_var, setup_logging
from app.i18n import MissingTranslationError, assert_parity, locale_strings, t
from app.i18n.state import LanguageState, UnsupportedLanguageError
from app.web.language import get_language_state
from app.web.render import render_landing

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _check_translations(strict: bool) -> None:
    """Verify every locale defines the same keys.

    Raises :class:`MissingTranslationError` when *strict*; otherwise logs
    the gaps and lets the site start with key-fallback rendering.
    """
    try:
        assert_parity()
    except MissingTranslationError as exc:
        if strict:
            raise
        logger.warning(
            "Locale key sets differ",
            extra={
                "event": "translation_parity",
                "missing": {lang: sorted(keys) for lang, keys in exc.missing.items()},
            },
        )


def _safe_next(target: str | None) -> str:
    """Only allow same-site absolute paths as redirect targets."""
    if not target or not target.startswith("/") or target.startswith("//") or "\\" in target:
        return "/"
    return target


def _switch_response(request: Request, next_path: str | None) -> Response:
    response = RedirectResponse(_safe_next(next_path), status_code=303)
    return request.state.language_store.apply(response)


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup / shutdown lifecycle manager.

    1. Configure logging.
    2. Check locale key parity.
    """
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    _check_translations(settings.STRICT_TRANSLATIONS)
    logger.info(
        "Site started",
        extra={"event": "startup", "language": settings.DEFAULT_LANGUAGE},
    )

    yield

    logger.info("Site stopped", extra={"event": "shutdown"})


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(lifespan=lifespan, docs_url=None, redoc_url=None)


@app.middleware("http")
async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Log one structured line per request with its latency."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    token = request_id_var.set(request_id)
    started = time.perf_counter()
    try:
        response = await call_next(request)
    finally:
        request_id_var.reset(token)
    latency_ms = round((time.perf_counter() - started) * 1000, 2)
    response.headers["X-Request-ID"] = request_id

    # Set by the language dependency on routes that resolve a visitor language.
    state: LanguageState | None = getattr(request.state, "language", None)
    logger.info(
        "%s %s -> %d",
        request.method,
        request.url.path,
        response.status_code,
        extra={
            "event": "request",
            "path": request.url.path,
            "request_id": request_id,
            "status_code": response.status_code,
            "latency_ms": latency_ms,
            "language": state.language if state is not None else None,
            "direction": state.direction if state is not None else None,
        },
    )
    return response


@app.exception_handler(UnsupportedLanguageError)
async def unsupported_language_handler(
    request: Request, exc: UnsupportedLanguageError
) -> JSONResponse:
    """Reject unknown language codes with a localized 400."""
    state: LanguageState | None = getattr(request.state, "language", None)
    message = t("language.unknown", state.language if state is not None else None)
    return JSONResponse(status_code=400, content={"detail": message.format(code=exc.code)})


def _state(request: Request, state: LanguageState = Depends(get_language_state)) -> LanguageState:
    request.state.language = state
    return state


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
async def landing(state: LanguageState = Depends(_state)) -> HTMLResponse:
    """Localized landing page."""
    return HTMLResponse(render_landing(state, get_settings()))


@app.get("/api/i18n")
async def i18n_bundle(state: LanguageState = Depends(_state)) -> dict[str, object]:
    """Active language, direction and full string table for client-side consumers."""
    return {
        "language": state.language,
        "direction": state.direction,
        "strings": locale_strings(state.language),
    }


@app.get("/lang/toggle")
async def toggle_language(
    request: Request,
    next: str | None = None,  # noqa: A002
    state: LanguageState = Depends(_state),
) -> Response:
    """Switch to the other language and redirect back."""
    state.toggle()
    return _switch_response(request, next)


@app.get("/lang/{code}")
async def set_language(
    request: Request,
    code: str,
    next: str | None = None,  # noqa: A002
    state: LanguageState = Depends(_state),
) -> Response:
    """Switch to *code* and redirect back; unknown codes are a 400."""
    state.set_language(code)
    return _switch_response(request, next)


def run() -> None:
    """Serve the site with uvicorn on ``PORT``."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT, log_config=None)
