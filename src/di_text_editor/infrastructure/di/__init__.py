from .text_editor_module import TextEditorModule

__all__ = ["TextEditorModule"]
