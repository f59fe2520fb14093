"""
Main entry point for the DI text editor example.

Minimal main: the bootstrap owns configuration, logging and wiring.
"""

from di_text_editor.infrastructure.bootstrap.text_editor_bootstrap import bootstrap_text_editor


def main() -> None:
    """Main entry point."""
    bootstrap_text_editor()


if __name__ == "__main__":
    main()
