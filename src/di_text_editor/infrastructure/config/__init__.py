from .base_application_config import BaseApplicationConfig
from .service_logging_config import ServiceLoggingConfig
from .text_editor_app_config import TextEditorAppConfig
from .service_config_loader import ServiceConfigLoader

__all__ = [
    "BaseApplicationConfig",
    "ServiceConfigLoader",
    "ServiceLoggingConfig",
    "TextEditorAppConfig",
]
