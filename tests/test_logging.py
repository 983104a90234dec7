"""Tests for structured log output."""
import json
import logging

from employee_api.api.middleware.request_id import request_id_var
from employee_api.core.logging import JSONFormatter


def _record(msg="hello", **extra):
    record = logging.LogRecord("employee_api.test", logging.INFO, __file__, 1, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_basic_fields(self):
        entry = json.loads(JSONFormatter().format(_record()))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "employee_api.test"
        assert entry["message"] == "hello"
        assert "request_id" not in entry

    def test_includes_request_id(self):
        token = request_id_var.set("req-1")
        try:
            entry = json.loads(JSONFormatter().format(_record()))
        finally:
            request_id_var.reset(token)
        assert entry["request_id"] == "req-1"

    def test_masks_sensitive_extra(self):
        entry = json.loads(
            JSONFormatter().format(_record(password="s3cret", fields=["full_name"]))
        )
        assert entry["extra"]["password"] == "********"
        assert entry["extra"]["fields"] == ["full_name"]
