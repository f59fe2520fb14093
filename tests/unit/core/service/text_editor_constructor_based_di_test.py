"""Unit tests for TextEditorConstructorBasedDI."""

from unittest.mock import Mock

import pytest

from di_text_editor.core.service.spell_checker import SpellChecker
from di_text_editor.core.service.text_editor_constructor_based_di import (
    TextEditorConstructorBasedDI,
)


class TestTextEditorConstructorBasedDI:
    """Test constructor-injected text editor."""

    def test_holds_injected_spell_checker(self) -> None:
        # Given
        spell_checker = Mock(spec=SpellChecker)

        # When
        text_editor = TextEditorConstructorBasedDI(spell_checker)

        # Then
        assert text_editor.spell_checker is spell_checker

    def test_spell_check_delegates_to_spell_checker(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        # Given
        spell_checker = Mock(spec=SpellChecker)
        text_editor = TextEditorConstructorBasedDI(spell_checker)

        # When
        text_editor.spell_check()

        # Then
        assert capsys.readouterr().out == "Inside TextEditorConstructorBasedDI.spellCheck().\n"
        spell_checker.check_spelling.assert_called_once_with()

    def test_spell_check_output_order_with_real_collaborator(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        # Given
        text_editor = TextEditorConstructorBasedDI(SpellChecker())
        capsys.readouterr()

        # When
        text_editor.spell_check()

        # Then
        assert capsys.readouterr().out.splitlines() == [
            "Inside TextEditorConstructorBasedDI.spellCheck().",
            "Inside checkSpelling.",
        ]
