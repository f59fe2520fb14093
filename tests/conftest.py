"""
Shared test fixtures for di-text-editor tests.

Isolates every test from the caller's environment and from the global
logging configuration applied by ServiceLogger.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Generator, List

import pytest
from injector import Injector

from di_text_editor.infrastructure.config.service_logging_config import ServiceLoggingConfig
from di_text_editor.infrastructure.config.text_editor_app_config import TextEditorAppConfig
from di_text_editor.infrastructure.di.text_editor_module import TextEditorModule

_CONFIGURED_LOGGERS = ["di-text-editor", "di_text_editor", "injector"]


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove configuration variables that would leak into the loader."""
    for name in list(os.environ):
        if name in ("CONFIG_DIR", "STAGE", "APP_NAME") or name.startswith("TEXTEDITORAPPCONFIG__"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers installed during a test so they never outlive capsys streams."""
    yield
    for name in _CONFIGURED_LOGGERS + [""]:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            # Leave pytest's own capture handlers on the root logger alone
            if type(handler).__module__.startswith("_pytest"):
                continue
            logger.removeHandler(handler)
            handler.close()
        if name:
            logger.propagate = True


@pytest.fixture
def expected_output() -> List[str]:
    """Diagnostic lines printed by one full run, in order."""
    return [
        "Inside SpellChecker constructor.",
        "Inside setSpellChecker.",
        "Inside TextEditorSetterBasedDI.spellCheck().",
        "Inside checkSpelling.",
        "Inside TextEditorConstructorBasedDI.spellCheck().",
        "Inside checkSpelling.",
    ]


@pytest.fixture
def temp_config_dir() -> Generator[Path, None, None]:
    """
    Provide a temporary configuration directory.

    Yields:
        Path of an empty directory usable as CONFIG_DIR
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def quiet_config() -> TextEditorAppConfig:
    """Application config with console logging disabled."""
    return TextEditorAppConfig(
        logging=ServiceLoggingConfig(console_enabled=False, file_logging=False)
    )


@pytest.fixture
def injector(quiet_config: TextEditorAppConfig) -> Injector:
    """Fresh container wired with TextEditorModule."""
    return Injector([TextEditorModule(quiet_config)])
