from .spell_checker import SpellChecker
from .text_editor_constructor_based_di import TextEditorConstructorBasedDI
from .text_editor_setter_based_di import TextEditorSetterBasedDI

__all__ = [
    "SpellChecker",
    "TextEditorConstructorBasedDI",
    "TextEditorSetterBasedDI",
]
