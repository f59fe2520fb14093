from .service_bootstrap import ApplicationContextNotActiveError, ServiceBootstrap
from .text_editor_bootstrap import TextEditorBootstrap, bootstrap_text_editor

__all__ = [
    "ApplicationContextNotActiveError",
    "ServiceBootstrap",
    "TextEditorBootstrap",
    "bootstrap_text_editor",
]
