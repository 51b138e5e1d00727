"""Reading and writing .github/dependabot.yaml.

Uses PyYAML for the file format and the Pydantic models in models.py
for validation, so a malformed or off-schema file is rejected instead of
being partially rewritten.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import ConfigError, WriteError
from .models import Dependabot

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(".github") / "dependabot.yaml"


def find_config_path(root: Path) -> Path:
    """Locate the Dependabot config under a repository root.

    Prefers .github/dependabot.yaml and uses .github/dependabot.yml only
    when that is the one present. When neither exists the .yaml path is
    returned, which is where a new file is written.
    """
    path = root / CONFIG_PATH
    alternative = path.with_suffix(".yml")
    if not path.exists() and alternative.exists():
        return alternative
    return path


def load_config(path: Path) -> Dependabot | None:
    """Load and validate an existing Dependabot config.

    Returns:
        The parsed configuration, or None if the file does not exist.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, or does
            not match the Dependabot v2 schema.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.info("No dependabot config at %s, starting from scratch", path)
        return None
    except OSError as exc:
        raise ConfigError(
            f"Failed to read dependabot config ({exc.strerror})", path
        ) from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(
            f"Dependabot config is not valid UTF-8 ({exc.reason})", path
        ) from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse dependabot config ({exc})", path) from exc

    try:
        config = Dependabot.model_validate(data)
    except ValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigError(f"Invalid dependabot config ({errors})", path) from exc

    logger.info("Loaded dependabot config from %s", path)
    return config


def dump_config(config: Dependabot) -> str:
    """Serialize a configuration to YAML, using the file's key names."""
    data = config.model_dump(mode="json", by_alias=True, exclude_none=True)
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)


def write_config(path: Path, config: Dependabot) -> None:
    """Write a configuration to disk, creating parent directories as needed.

    Raises:
        WriteError: If the directory cannot be created or the file written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError(
            f"Failed to create directories ({exc.strerror})", path.parent
        ) from exc
    try:
        path.write_text(dump_config(config), encoding="utf-8")
    except OSError as exc:
        raise WriteError(
            f"Failed to write dependabot config ({exc.strerror})", path
        ) from exc
