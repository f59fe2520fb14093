from pydantic import Field

from di_text_editor.infrastructure.config.base_application_config import (
    BaseApplicationConfig,
)
from di_text_editor.infrastructure.config.service_logging_config import (
    ServiceLoggingConfig,
)


class TextEditorAppConfig(BaseApplicationConfig):
    """Application configuration for the text editor example."""

    app_name: str = "di-text-editor"

    # Instantiate every singleton bean while the context starts, in declaration order
    eager_init: bool = True

    logging: ServiceLoggingConfig = Field(default_factory=ServiceLoggingConfig)
