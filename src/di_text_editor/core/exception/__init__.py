from .spell_checker_not_injected_error import SpellCheckerNotInjectedError

__all__ = ["SpellCheckerNotInjectedError"]
