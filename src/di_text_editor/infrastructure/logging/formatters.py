"""Formatters for the text editor logs: one JSON object per line, or a plain line."""

import json
import logging
from datetime import datetime, timezone


class StructuredFormatter(logging.Formatter):
    """Renders each record as a single JSON object for log collectors."""

    def __init__(self, service_name: str, environment: str = "development"):
        super().__init__()
        self.service_name = service_name
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            'timestamp': datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            'service': self.service_name,
            'environment': self.environment,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f"{record.module}:{record.lineno}",
        }
        if record.exc_info and record.exc_info[0] is not None:
            payload['exception'] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


class HumanReadableFormatter(logging.Formatter):
    """Pipe-separated line for reading logs in a terminal."""

    def __init__(self, service_name: str):
        self.service_name = service_name
        super().__init__(
            f"%(asctime)s | %(levelname)-8s | {service_name} | %(name)s | %(message)s",
            datefmt='%Y-%m-%d %H:%M:%S',
        )
