"""Startup observability for the application context.

Captures phase timings and attributes so the bootstrap can emit one
structured startup summary.
"""
from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator


class StartupContext:
    """Accumulates startup metrics for a service.

    Usage:
        ctx = StartupContext(service_name)
        with ctx.phase("config"):
            ...
        ctx.emit_summary(logger)
    """

    def __init__(self, service_name: str) -> None:
        self.service_name = service_name
        self._start_time = time.time()
        self._phases: Dict[str, float] = {}
        self._phase_starts: Dict[str, float] = {}
        self._attributes: Dict[str, Any] = {}
        self._phase_exceptions: Dict[str, str] = {}

    @contextmanager
    def phase(self, name: str) -> Iterator[None]:
        self.start_phase(name)
        try:
            yield
        except BaseException as e:
            self._phase_exceptions[name] = e.__class__.__name__
            raise
        finally:
            self.end_phase(name)

    def start_phase(self, name: str) -> None:
        self._phase_starts[name] = time.time()

    def end_phase(self, name: str) -> None:
        if name in self._phase_starts and name not in self._phases:
            self._phases[name] = round((time.time() - self._phase_starts.pop(name)) * 1000, 2)

    def attribute(self, key: str, value: Any) -> None:
        self._attributes[key] = value

    @property
    def failed(self) -> bool:
        return bool(self._phase_exceptions)

    def summary_dict(self) -> Dict[str, Any]:
        for pending in list(self._phase_starts):
            self.end_phase(pending)
        return {
            "service": self.service_name,
            "status": "FAILED" if self.failed else "STARTED",
            "total_time_ms": round((time.time() - self._start_time) * 1000, 2),
            "phases": [
                {"name": name, "duration_ms": duration}
                for name, duration in self._phases.items()
            ],
            "attributes": self._attributes,
            "phase_exceptions": self._phase_exceptions,
        }

    def emit_summary(self, log: logging.Logger) -> None:
        log.info("STARTUP SUMMARY %s", json.dumps(self.summary_dict(), sort_keys=True, default=str))
