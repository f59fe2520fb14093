class SpellCheckerNotInjectedError(RuntimeError):
    """Raised when an editor is used before its spell checker was injected."""

    def __init__(self, owner: str) -> None:
        super().__init__(
            f"{owner} has no SpellChecker; set_spell_checker() was never called"
        )
        self.owner = owner
