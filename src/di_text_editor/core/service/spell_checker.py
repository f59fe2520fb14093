class SpellChecker:
    """Stateless spell checking service shared by the text editors."""

    def __init__(self) -> None:
        print("Inside SpellChecker constructor.")

    def check_spelling(self) -> None:
        print("Inside checkSpelling.")
