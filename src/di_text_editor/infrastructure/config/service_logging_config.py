"""
Logging configuration schema.

Pydantic model consumed by ServiceLogger; lives under the ``logging`` key of
``application.yaml``.
"""

from typing import Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class ServiceLoggingConfig(BaseModel):
    """Configuration schema for the service logging setup."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(
        default="INFO",
        description="Default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    json_format: bool = Field(
        default=False,
        description="Force JSON formatting (auto-enabled in cicd/prod)"
    )

    console_enabled: bool = Field(
        default=True,
        description="Enable console logging (written to stderr)"
    )

    file_logging: bool = Field(
        default=False,
        description="Write a rotating log file in addition to the console"
    )

    file_path: Optional[str] = Field(
        default=None,
        description="Custom log file path (defaults to logs/{service_name}.log)"
    )

    max_file_size: int = Field(
        default=10485760,  # 10MB
        description="Maximum log file size in bytes before rotation"
    )

    backup_count: int = Field(
        default=5,
        description="Number of backup log files to keep"
    )

    third_party_loggers: Dict[str, Dict[str, Any]] = Field(
        default_factory=dict,
        description="Per-logger overrides for libraries (e.g. injector)"
    )
