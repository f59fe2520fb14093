"""Unit tests for StartupContext."""

import json
import logging
from unittest.mock import Mock

import pytest

from di_text_editor.infrastructure.bootstrap.startup_context import StartupContext


class TestStartupContext:
    """Test phase timing and summary emission."""

    def test_phases_are_recorded_in_order(self) -> None:
        # Given
        ctx = StartupContext("di-text-editor")

        # When
        with ctx.phase("config"):
            pass
        with ctx.phase("logging"):
            pass
        summary = ctx.summary_dict()

        # Then
        assert [p["name"] for p in summary["phases"]] == ["config", "logging"]
        assert summary["status"] == "STARTED"
        assert summary["service"] == "di-text-editor"

    def test_failed_phase_is_reported_and_reraised(self) -> None:
        # Given
        ctx = StartupContext("di-text-editor")

        # When
        with pytest.raises(KeyError):
            with ctx.phase("dependency_injection"):
                raise KeyError("missing binding")

        # Then
        summary = ctx.summary_dict()
        assert summary["status"] == "FAILED"
        assert summary["phase_exceptions"] == {"dependency_injection": "KeyError"}
        assert summary["phases"][0]["name"] == "dependency_injection"

    def test_emit_summary_logs_json_payload(self) -> None:
        # Given
        ctx = StartupContext("di-text-editor")
        ctx.attribute("stage", "local")
        log = Mock(spec=logging.Logger)

        # When
        ctx.emit_summary(log)

        # Then
        fmt, payload = log.info.call_args.args
        assert fmt == "STARTUP SUMMARY %s"
        assert json.loads(payload)["attributes"] == {"stage": "local"}
