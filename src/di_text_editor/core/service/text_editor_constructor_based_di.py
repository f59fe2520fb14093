from injector import inject

from di_text_editor.core.service.spell_checker import SpellChecker


@inject
class TextEditorConstructorBasedDI:
    """Text editor receiving its SpellChecker through the constructor."""

    def __init__(self, spell_checker: SpellChecker) -> None:
        """
        Initializes the editor with its collaborator.

        Args:
            spell_checker: Shared SpellChecker resolved by the container.
        """
        self._spell_checker = spell_checker

    @property
    def spell_checker(self) -> SpellChecker:
        return self._spell_checker

    def spell_check(self) -> None:
        print("Inside TextEditorConstructorBasedDI.spellCheck().")
        self._spell_checker.check_spelling()
