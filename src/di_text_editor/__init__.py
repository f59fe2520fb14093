"""DI Text Editor example.

Wires a spell checker into two text editors, one through its constructor and
one through a setter, using the ``injector`` container.
"""

__version__ = "0.1.0"

from .core.service.spell_checker import SpellChecker
from .core.service.text_editor_constructor_based_di import TextEditorConstructorBasedDI
from .core.service.text_editor_setter_based_di import TextEditorSetterBasedDI

__all__ = [
    "SpellChecker",
    "TextEditorConstructorBasedDI",
    "TextEditorSetterBasedDI",
]
