"""
Core configuration settings for gattpath.
"""

import os
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from gattpath.bt_ref.constants import BLUEZ_NAMESPACE, ADAPTER_NAME
from gattpath.core.errors import InvalidArgumentError

# Base paths
DATA_DIR = Path(os.getenv("XDG_DATA_HOME", Path.home() / ".local/share")) / "gattpath"
CONFIG_DIR = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config")) / "gattpath"

# Ensure directories exist
for directory in [DATA_DIR, CONFIG_DIR]:
    directory.mkdir(parents=True, exist_ok=True)

# Logging configuration
LOG_DIR = DATA_DIR / "logs"
LOG_DIR.mkdir(exist_ok=True)

# Log types
LOG__GENERAL = "GENERAL"
LOG__DEBUG = "DEBUG"
LOG__PARSE = "PARSE"

# Settings file (optional)
CONFIG_FILE = CONFIG_DIR / "config.yaml"

# Default adapter path, used by the CLI help text
DEFAULT_ADAPTER_PATH = BLUEZ_NAMESPACE + ADAPTER_NAME

# Output formats understood by the ``tree`` command
OUTPUT_FORMATS = ("text", "json", "yaml")

# Defaults applied when config.yaml is absent or silent on a key
DEFAULT_SETTINGS: Dict[str, Any] = {
    "log_level": "INFO",
    "strict": False,
    "output_format": "text",
}

_log = logging.getLogger("gattpath").getChild("config")


def load_settings(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Return the effective settings, overlaying ``config.yaml`` on the defaults.

    Parameters
    ----------
    path : str | Path, optional
        Settings file to read. Defaults to :data:`CONFIG_FILE`. A missing file
        is not an error.

    Returns
    -------
    dict
        A fresh dictionary with every key of :data:`DEFAULT_SETTINGS`.
    """
    settings = dict(DEFAULT_SETTINGS)
    config_path = Path(path) if path is not None else CONFIG_FILE
    if not config_path.exists():
        return settings

    with open(config_path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if data is None:
        return settings
    if not isinstance(data, dict):
        raise InvalidArgumentError(str(config_path), "settings document must be a mapping")

    for key, value in data.items():
        if key not in DEFAULT_SETTINGS:
            _log.debug(f"Ignoring unknown setting {key!r} in {config_path}")
            continue
        settings[key] = value

    level = settings["log_level"]
    if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
        raise InvalidArgumentError("log_level", f"unknown log level {level!r}")
    if not isinstance(settings["strict"], bool):
        raise InvalidArgumentError("strict", f"expected true or false, got {settings['strict']!r}")
    if settings["output_format"] not in OUTPUT_FORMATS:
        raise InvalidArgumentError(
            "output_format", f"expected one of {', '.join(OUTPUT_FORMATS)}"
        )
    return settings
