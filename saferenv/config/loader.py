"""
Loading of the optional YAML rules file.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from ..constants import CONFIG_ENV_VAR, MAX_CONFIG_SIZE_BYTES
from ..exceptions import ConfigError
from .schemas import SaferenvConfig, validate_config

lg = logging.getLogger(__name__)


def _check_file_size(path: Path) -> None:
    """Check file size limit before reading."""
    file_size = path.stat().st_size
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            f"rules file is {file_size} bytes, exceeding maximum size of "
            f"{MAX_CONFIG_SIZE_BYTES} bytes",
            path=path,
        )


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        loc = ".".join(str(p) for p in item["loc"])
        parts.append(f"{loc}: {item['msg']}" if loc else item["msg"])
    return "; ".join(parts)


def parse_config(text: str, source: str = "<string>") -> SaferenvConfig:
    """
    Parse and validate rules file content.

    An empty document yields the default configuration.

    Raises:
        ConfigError: On YAML syntax errors or schema violations
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML: {e}", path=source) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("rules file must contain a mapping", path=source)

    try:
        return validate_config(data)
    except ValidationError as e:
        raise ConfigError(_format_validation_error(e), path=source) from e


def load_config(path: str | Path) -> SaferenvConfig:
    """
    Load and validate a rules file.

    Args:
        path: Path to the YAML file

    Raises:
        ConfigError: If the file is missing, too large, unreadable or invalid
    """
    path = Path(path)
    try:
        _check_file_size(path)
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            f"cannot read rules file: {e.strerror or e}", path=path
        ) from e

    config = parse_config(text, source=str(path))
    lg.debug("rules file loaded", extra={"path": str(path), "rules": len(config.rules)})
    return config


def resolve_config_path(
    explicit: str | None, environ: Mapping[str, str] | None = None
) -> Path | None:
    """
    Pick the rules file: --config wins, then $SAFERENV_CONFIG, else none.

    An empty --config value or empty variable means no rules file.
    """
    if explicit is not None:
        return Path(explicit) if explicit else None
    env = os.environ if environ is None else environ
    from_env = env.get(CONFIG_ENV_VAR)
    return Path(from_env) if from_env else None
