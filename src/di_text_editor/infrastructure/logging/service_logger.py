"""
Logging setup for the text editor application.

All handlers write to stderr or a file; stdout is left to the editors'
diagnostic lines.
"""

import logging
import logging.config
import os
from typing import Any, Dict, Optional

from di_text_editor.infrastructure.config.service_logging_config import ServiceLoggingConfig
from di_text_editor.infrastructure.logging.formatters import (
    HumanReadableFormatter,
    StructuredFormatter,
)

# Module loggers under this package inherit the configured handlers
PACKAGE_LOGGER_NAME = "di_text_editor"

# JSON output is switched on for these stages regardless of json_format
JSON_STAGES = {'cicd': 'staging', 'prod': 'production'}


class ServiceLogger:
    """Translates a ServiceLoggingConfig into a ``dictConfig`` call."""

    def __init__(
        self,
        service_name: str,
        stage: str,
        config: Optional[ServiceLoggingConfig] = None
    ):
        """
        Args:
            service_name: Name of the service (e.g., 'di-text-editor')
            stage: Deployment stage ('local', 'cicd', 'prod')
            config: Logging settings; defaults apply when omitted
        """
        self.service_name = service_name
        self.stage = stage
        self.config = config or ServiceLoggingConfig()

    @property
    def environment(self) -> str:
        return JSON_STAGES.get(self.stage, 'development')

    @property
    def uses_json(self) -> bool:
        return self.stage in JSON_STAGES or self.config.json_format

    def configure(self) -> None:
        level = self.config.level.upper()
        handlers = self._handlers(level)
        handler_names = list(handlers)

        loggers: Dict[str, Any] = {
            name: {'level': level, 'handlers': handler_names, 'propagate': False}
            for name in (self.service_name, PACKAGE_LOGGER_NAME)
        }
        for name, overrides in self.config.third_party_loggers.items():
            loggers[name] = {
                'level': str(overrides.get('level', 'WARNING')).upper(),
                'handlers': handler_names,
                'propagate': False,
            }

        logging.config.dictConfig({
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {'default': self._formatter()},
            'handlers': handlers,
            'loggers': loggers,
            'root': {'level': 'WARNING', 'handlers': handler_names},
        })

        logging.getLogger(self.service_name).info(
            "Logging configured for %s service (stage=%s, format=%s, level=%s)",
            self.service_name, self.stage, 'json' if self.uses_json else 'text', level,
        )

    def _formatter(self) -> Dict[str, Any]:
        if self.uses_json:
            return {
                '()': StructuredFormatter,
                'service_name': self.service_name,
                'environment': self.environment,
            }
        return {'()': HumanReadableFormatter, 'service_name': self.service_name}

    def _handlers(self, level: str) -> Dict[str, Any]:
        handlers: Dict[str, Any] = {}
        if self.config.console_enabled:
            handlers['console'] = {
                'class': 'logging.StreamHandler',
                'level': level,
                'formatter': 'default',
                'stream': 'ext://sys.stderr',
            }
        if self.config.file_logging:
            log_file = self.log_file_path()
            os.makedirs(os.path.dirname(log_file) or '.', exist_ok=True)
            handlers['file'] = {
                'class': 'logging.handlers.RotatingFileHandler',
                'level': level,
                'formatter': 'default',
                'filename': log_file,
                'maxBytes': self.config.max_file_size,
                'backupCount': self.config.backup_count,
            }
        if not handlers:
            handlers['null'] = {'class': 'logging.NullHandler'}
        return handlers

    def log_file_path(self) -> str:
        return self.config.file_path or os.path.join('logs', f'{self.service_name}.log')

