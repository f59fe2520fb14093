"""Application context for the text editor example."""

import logging
from typing import List, Optional

from injector import Module

from di_text_editor.core.service.text_editor_constructor_based_di import (
    TextEditorConstructorBasedDI,
)
from di_text_editor.core.service.text_editor_setter_based_di import (
    TextEditorSetterBasedDI,
)
from di_text_editor.infrastructure.bootstrap.service_bootstrap import ServiceBootstrap
from di_text_editor.infrastructure.config.text_editor_app_config import TextEditorAppConfig
from di_text_editor.infrastructure.di.text_editor_module import TextEditorModule

logger = logging.getLogger(__name__)

SERVICE_NAME = "di-text-editor"


class TextEditorBootstrap(ServiceBootstrap):
    """Bootstrap wiring the spell checker into both text editors.

    The main loop looks up both editors and runs their spell checks,
    setter-based editor first.
    """

    def __init__(self, config: Optional[TextEditorAppConfig] = None) -> None:
        super().__init__(
            service_name=SERVICE_NAME, config_class=TextEditorAppConfig, config=config
        )

    def get_dependency_modules(self, app_config: TextEditorAppConfig) -> List[Module]:  # type: ignore[override]
        return [TextEditorModule(app_config)]

    def get_bean_definitions(self) -> List[type]:
        return list(TextEditorModule.BEAN_DEFINITIONS)

    def _run_main_loop(self) -> None:
        setter_based = self.get_bean(TextEditorSetterBasedDI)
        constructor_based = self.get_bean(TextEditorConstructorBasedDI)

        logger.info("Running spell checks")
        setter_based.spell_check()
        constructor_based.spell_check()


def bootstrap_text_editor() -> None:
    """Run the text editor example end to end."""
    TextEditorBootstrap().start()
