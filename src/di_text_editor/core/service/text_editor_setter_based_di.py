from typing import Optional

from injector import inject

from di_text_editor.core.exception.spell_checker_not_injected_error import (
    SpellCheckerNotInjectedError,
)
from di_text_editor.core.service.spell_checker import SpellChecker


class TextEditorSetterBasedDI:
    """
    Text editor receiving its SpellChecker after construction.

    The container creates the editor with no arguments and then calls
    ``set_spell_checker`` via ``Injector.call_with_injection``.
    """

    def __init__(self) -> None:
        self._spell_checker: Optional[SpellChecker] = None

    @inject
    def set_spell_checker(self, spell_checker: SpellChecker) -> None:
        print("Inside setSpellChecker.")
        self._spell_checker = spell_checker

    def get_spell_checker(self) -> Optional[SpellChecker]:
        return self._spell_checker

    def spell_check(self) -> None:
        print("Inside TextEditorSetterBasedDI.spellCheck().")
        if self._spell_checker is None:
            raise SpellCheckerNotInjectedError(type(self).__name__)
        self._spell_checker.check_spelling()
