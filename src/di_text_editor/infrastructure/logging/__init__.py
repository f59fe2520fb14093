"""Logging setup for the text editor: ServiceLogger and its formatters."""

from di_text_editor.infrastructure.logging.formatters import (
    HumanReadableFormatter,
    StructuredFormatter,
)
from di_text_editor.infrastructure.logging.service_logger import ServiceLogger

__all__ = [
    'ServiceLogger',
    'StructuredFormatter',
    'HumanReadableFormatter',
]
