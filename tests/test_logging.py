"""Tests for the JSON log formatter and startup parity check."""

from __future__ import annotations

import json
import logging

import pytest

from app.core.logging import JSONFormatter, RequestContextFilter, request_id_var, setup_logging
from app.i18n import MissingTranslationError
from app.web import main as web_main


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord("app.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_base_fields(self) -> None:
        payload = json.loads(JSONFormatter().format(_record()))
        assert payload["level"] == "INFO"
        assert payload["logger"] == "app.test"
        assert payload["message"] == "hello world"
        assert "timestamp" in payload

    def test_extra_fields_merged(self) -> None:
        line = JSONFormatter().format(_record(event="language_changed", language="ar", direction="rtl"))
        payload = json.loads(line)
        assert payload["event"] == "language_changed"
        assert payload["language"] == "ar"
        assert payload["direction"] == "rtl"

    def test_unknown_extra_ignored(self) -> None:
        payload = json.loads(JSONFormatter().format(_record(colour="blue")))
        assert "colour" not in payload

    def test_arabic_not_escaped(self) -> None:
        line = JSONFormatter().format(_record(key="nav.home", language="ar", path="/الرئيسية"))
        assert "/الرئيسية" in line

    def test_request_fields_merged(self) -> None:
        payload = json.loads(JSONFormatter().format(_record(request_id="abc123", status_code=303)))
        assert payload["request_id"] == "abc123"
        assert payload["status_code"] == 303


class TestRequestContextFilter:
    def test_stamps_current_request_id(self) -> None:
        token = request_id_var.set("req-1")
        try:
            record = _record()
            assert RequestContextFilter().filter(record) is True
        finally:
            request_id_var.reset(token)
        assert record.request_id == "req-1"

    def test_explicit_request_id_wins(self) -> None:
        token = request_id_var.set("req-1")
        try:
            record = _record(request_id="explicit")
            RequestContextFilter().filter(record)
        finally:
            request_id_var.reset(token)
        assert record.request_id == "explicit"

    def test_outside_request_leaves_field_out(self) -> None:
        record = _record()
        RequestContextFilter().filter(record)
        assert record.request_id is None
        assert "request_id" not in json.loads(JSONFormatter().format(record))


class TestSetupLogging:
    def test_single_json_handler(self) -> None:
        root = logging.getLogger()
        saved = (root.handlers[:], root.level)
        try:
            setup_logging("debug")
            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, JSONFormatter)
            assert root.level == logging.DEBUG
            assert any(isinstance(f, RequestContextFilter) for f in root.handlers[0].filters)
        finally:
            root.handlers[:] = saved[0]
            root.setLevel(saved[1])


class TestStartupParityCheck:
    def test_strict_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def broken() -> None:
            raise MissingTranslationError({"ar": {"nav.extra"}})

        monkeypatch.setattr(web_main, "assert_parity", broken)
        with pytest.raises(MissingTranslationError):
            web_main._check_translations(strict=True)

    def test_lenient_logs(self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
        def broken() -> None:
            raise MissingTranslationError({"ar": {"nav.extra"}})

        monkeypatch.setattr(web_main, "assert_parity", broken)
        with caplog.at_level(logging.WARNING, logger="app.web.main"):
            web_main._check_translations(strict=False)
        record = next(r for r in caplog.records if getattr(r, "event", None) == "translation_parity")
        assert record.missing == {"ar": ["nav.extra"]}

    def test_shipped_locales_pass(self) -> None:
        web_main._check_translations(strict=True)
