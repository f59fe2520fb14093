"""Dependency injection module wiring the spell checker into both editors."""
import logging
from typing import List, Optional

from injector import Injector, Module, provider, singleton

from di_text_editor.core.service.spell_checker import SpellChecker
from di_text_editor.core.service.text_editor_constructor_based_di import (
    TextEditorConstructorBasedDI,
)
from di_text_editor.core.service.text_editor_setter_based_di import (
    TextEditorSetterBasedDI,
)
from di_text_editor.infrastructure.config.text_editor_app_config import TextEditorAppConfig

logger = logging.getLogger(__name__)


class TextEditorModule(Module):
    """Dependency injection module for the text editor application.

    Every bean is a singleton, so both editors share one SpellChecker.
    """

    # Declaration order; eager pre-instantiation follows it
    BEAN_DEFINITIONS: List[type] = [
        TextEditorConstructorBasedDI,
        TextEditorSetterBasedDI,
        SpellChecker,
    ]

    def __init__(self, config: Optional[TextEditorAppConfig] = None) -> None:
        self._config = config or TextEditorAppConfig()

    @provider
    @singleton
    def provide_text_editor_app_config(self) -> TextEditorAppConfig:
        """Provide the already-loaded application configuration (no reload)."""
        return self._config

    @provider
    @singleton
    def provide_text_editor_constructor_based_di(
        self, spell_checker: SpellChecker
    ) -> TextEditorConstructorBasedDI:
        """Constructor injection: the collaborator is a constructor argument."""
        logger.debug("Creating TextEditorConstructorBasedDI")
        return TextEditorConstructorBasedDI(spell_checker)

    @provider
    @singleton
    def provide_text_editor_setter_based_di(
        self, injector: Injector
    ) -> TextEditorSetterBasedDI:
        """Setter injection: construct first, then let the container call the setter."""
        logger.debug("Creating TextEditorSetterBasedDI")
        text_editor = TextEditorSetterBasedDI()
        injector.call_with_injection(text_editor.set_spell_checker)
        return text_editor

    @provider
    @singleton
    def provide_spell_checker(self) -> SpellChecker:
        logger.debug("Creating SpellChecker")
        return SpellChecker()
