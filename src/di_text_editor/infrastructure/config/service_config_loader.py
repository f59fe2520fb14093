"""Loads the application config from CONFIG_DIR, falling back to model defaults."""
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml
from dotenv import load_dotenv

from di_text_editor.infrastructure.config.base_application_config import (
    BaseApplicationConfig,
)

T = TypeVar('T', bound=BaseApplicationConfig)

logger = logging.getLogger(__name__)

# ${NAME} or ${NAME:default}
PLACEHOLDER_PATTERN = re.compile(r'\$\{([^}:]+)(?::([^}]*))?\}')

CONFIG_EXTENSIONS = ("yaml", "yml")


class ServiceConfigLoader:
    """
    Builds one validated config object from, in order of precedence:

    1. ``application-{STAGE}.yaml`` (optional)
    2. ``{CONFIG_CLASS}__{FIELD}`` environment variables
    3. ``application.yaml``

    ``${NAME:default}`` placeholders in either file are resolved from the
    environment, and ``.env`` in the working directory seeds the environment
    without overriding variables that are already set.
    """

    @staticmethod
    def load_config(config_class: Type[T]) -> T:
        """
        Load the configuration for ``config_class``.

        Raises:
            FileNotFoundError: CONFIG_DIR or its application.yaml does not exist
            ValueError: A file is not a mapping, or a required placeholder is unset
        """
        env_file = Path(".env")
        if env_file.is_file():
            load_dotenv(env_file, override=False)
            logger.debug("Loaded environment from %s", env_file.resolve())

        config_dir = os.environ.get("CONFIG_DIR")
        if not config_dir:
            logger.info("CONFIG_DIR not set; using %s defaults", config_class.__name__)
            return config_class()

        directory = Path(config_dir)
        if not directory.is_dir():
            raise FileNotFoundError(f"Configuration directory not found: {config_dir}")

        base_file = ServiceConfigLoader._find_config_file(directory, "application")
        if base_file is None:
            raise FileNotFoundError(f"Base configuration file not found: application.yaml in {config_dir}")

        raw = ServiceConfigLoader._read_yaml(base_file)
        ServiceConfigLoader._apply_env_overrides(raw, config_class.__name__.upper())

        stage = os.environ.get("STAGE", "local")
        stage_file = ServiceConfigLoader._find_config_file(directory, f"application-{stage}")
        if stage_file is not None:
            ServiceConfigLoader._merge(raw, ServiceConfigLoader._read_yaml(stage_file))
        elif stage != "local":
            logger.warning("No application-%s.yaml in %s; using base config only", stage, config_dir)

        logger.info(
            "Loaded %s from %s (stage=%s, override=%s)",
            config_class.__name__, base_file, stage, stage_file or "none",
        )
        return config_class.model_validate(raw)

    @staticmethod
    def _find_config_file(directory: Path, stem: str) -> Optional[Path]:
        candidates = (directory / f"{stem}.{ext}" for ext in CONFIG_EXTENSIONS)
        return next((path for path in candidates if path.is_file()), None)

    @staticmethod
    def _read_yaml(file_path: Path) -> Dict[str, Any]:
        """Parse a config file and resolve its placeholders; an empty file is ``{}``."""
        with open(file_path, 'r') as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"{file_path} must contain a mapping")
        return resolve_placeholders(data)

    @staticmethod
    def _merge(target: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Merge ``override`` into ``target`` in place; nested mappings merge key by key."""
        for key, value in override.items():
            current = target.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                ServiceConfigLoader._merge(current, value)
            else:
                target[key] = value

    @staticmethod
    def _apply_env_overrides(raw: Dict[str, Any], prefix: str) -> None:
        """
        Apply ``{prefix}__{field}__{nested_field}`` variables to ``raw`` in place.

        Example: TEXTEDITORAPPCONFIG__LOGGING__LEVEL=DEBUG
        """
        marker = f"{prefix}__"
        for name, value in os.environ.items():
            if not name.startswith(marker):
                continue
            *parents, leaf = name[len(marker):].lower().split('__')
            section = raw
            for key in parents:
                if not isinstance(section.get(key), dict):
                    section[key] = {}
                section = section[key]
            section[leaf] = value
            logger.debug("Config override from environment: %s", name)


def resolve_placeholders(value: Any) -> Any:
    """Replace ``${NAME:default}`` in every string of a nested structure."""
    if isinstance(value, dict):
        return {key: resolve_placeholders(item) for key, item in value.items()}
    if isinstance(value, list):
        return [resolve_placeholders(item) for item in value]
    if isinstance(value, str):
        return PLACEHOLDER_PATTERN.sub(_placeholder_value, value)
    return value


def _placeholder_value(match: re.Match) -> str:
    name, default = match.group(1), match.group(2)
    if name in os.environ:
        return os.environ[name]
    if default is None:
        raise ValueError(f"Required secret '{name}' not found in environment and no default provided")
    return default
