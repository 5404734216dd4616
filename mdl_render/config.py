"""Runtime configuration for mdl-render.

Settings come from environment variables with defaults. The Mermaid
configuration is read from an optional JSON or YAML file and handed to the
page template as JSON text.
"""

import json
import logging
import os
import shlex
from pathlib import Path
from typing import Optional, Union

import yaml

from mdl_render.exceptions import ConfigError

logger = logging.getLogger(__name__)

# Generation step: argv template, {package} and {out} are substituted
GEN_COMMAND = os.environ.get("MDL_GEN_COMMAND", "mdl gen {package} --out {out}")
GEN_DEBUG_FLAG = os.environ.get("MDL_GEN_DEBUG_FLAG", "--debug")

OUTPUT_DIR = os.environ.get("MDL_OUTPUT_DIR", "gendesign")
MERMAID_CONFIG_PATH = os.environ.get("MDL_MERMAID_CONFIG", "")

YAML_SUFFIXES = (".yaml", ".yml")


def gen_timeout() -> Optional[float]:
    """Read MDL_GEN_TIMEOUT in seconds (unset or empty = no timeout).

    Raises:
        ConfigError: If the value is not a positive number
    """
    raw = os.environ.get("MDL_GEN_TIMEOUT", "").strip()
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError as e:
        raise ConfigError(f"MDL_GEN_TIMEOUT must be a number of seconds, got {raw!r}") from e
    if timeout <= 0:
        raise ConfigError(f"MDL_GEN_TIMEOUT must be positive, got {raw!r}")
    return timeout


def gen_command_argv(command: Optional[str] = None) -> list[str]:
    """Split a generation command template into argv tokens."""
    return shlex.split(command if command is not None else GEN_COMMAND)


def load_mermaid_config(path: Optional[Union[str, Path]]) -> str:
    """Load a Mermaid configuration file and return it as JSON text.

    Args:
        path: JSON or YAML file (None or empty = no config)

    Returns:
        JSON object text, or "" when no path is given

    Raises:
        ConfigError: If the file is unreadable, unparsable or not a mapping
    """
    if not path:
        return ""

    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read Mermaid config {config_path}: {e}", config_path) from e

    if config_path.suffix.lower() in YAML_SUFFIXES:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in Mermaid config {config_path}: {e}", config_path) from e
        if data is None:
            return ""
        if not isinstance(data, dict):
            raise ConfigError(f"Mermaid config {config_path} must be a mapping", config_path)
        return json.dumps(data, separators=(",", ":"))

    text = text.strip()
    if not text:
        return ""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in Mermaid config {config_path}: {e}", config_path) from e
    if not isinstance(data, dict):
        raise ConfigError(f"Mermaid config {config_path} must be a JSON object", config_path)

    logger.debug(f"Loaded Mermaid config from {config_path}")
    return text
