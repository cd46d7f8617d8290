"""YAML (de)serialization of render configuration."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from circlesketch.config.settings import RenderConfig
from circlesketch.exceptions import ConfigFileError, ConfigValidationError


def validate_config(data: Any) -> RenderConfig:
    """Validate a parsed configuration mapping.

    Args:
        data: Mapping loaded from YAML (None means an empty file)

    Returns:
        Validated RenderConfig

    Raises:
        ConfigValidationError: If any option is invalid or unknown
    """
    if data is None:
        data = {}
    try:
        return RenderConfig.model_validate(data)
    except ValidationError as e:
        messages = []
        for err in e.errors():
            location = ".".join(str(part) for part in err["loc"])
            messages.append(f"{location}: {err['msg']}" if location else err["msg"])
        raise ConfigValidationError(messages) from e


def load_config(path: Path) -> RenderConfig:
    """Load and validate a YAML configuration file.

    Args:
        path: Path to the YAML file

    Returns:
        Validated RenderConfig

    Raises:
        ConfigFileError: If the file cannot be read or is not valid YAML
        ConfigValidationError: If the configuration values are invalid
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigFileError(str(path), e.strerror or str(e)) from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigFileError(str(path), str(e)) from e

    if data is not None and not isinstance(data, dict):
        raise ConfigFileError(str(path), "top level must be a mapping")

    return validate_config(data)


def resolve_config(explicit: Path | None, default_path: Path, required: bool = False) -> RenderConfig:
    """Pick the configuration for a run.

    An explicitly supplied path must exist. Otherwise the conventional
    ``{stem}-config.yml`` path is used when present; when it is absent the
    built-in defaults apply, unless ``required`` is set.

    Args:
        explicit: Path given on the command line, if any
        default_path: Conventional config path next to the input
        required: Whether a missing default config is an error

    Returns:
        Validated RenderConfig

    Raises:
        ConfigFileError: If a required config file does not exist
    """
    if explicit is not None:
        if not explicit.exists():
            raise ConfigFileError(str(explicit), "file not found")
        return load_config(explicit)

    if default_path.exists():
        return load_config(default_path)

    if required:
        raise ConfigFileError(str(default_path), "file not found")

    return RenderConfig()


def dump_config(config: RenderConfig) -> str:
    """Serialize a configuration to YAML text.

    Args:
        config: Configuration to serialize

    Returns:
        YAML document that load_config reads back to an equal config
    """
    data = config.model_dump(mode="json")
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=None)
