"""Configuration loading for procsh."""

import json
import logging
import os
from pathlib import Path

from procsh.models import ProcshConfig

log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".procsh"
CONFIG_FILE = CONFIG_DIR / "config.json"

ENV_OVERRIDES = {
    "PROCSH_POLL_INTERVAL_MS": "poll_interval_ms",
    "PROCSH_GRACEFUL_STOP_TIMEOUT_MS": "graceful_stop_timeout_ms",
    "PROCSH_KILL_STOP_TIMEOUT_MS": "kill_stop_timeout_ms",
    "PROCSH_PID_FILE": "pid_file",
}

__all__ = ["CONFIG_DIR", "CONFIG_FILE", "ProcshConfig", "load_config"]


def _read_config_file(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"Invalid config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config file {path}: expected a JSON object")
    log.debug("loaded config from %s", path)
    return data


def load_config(path: Path | None = None) -> ProcshConfig:
    """Load config from disk, then apply PROCSH_* environment overrides.

    Raises ValueError (including pydantic's ValidationError) when the
    resulting values are invalid.
    """
    data = _read_config_file(path or CONFIG_FILE)
    for env_key, field_name in ENV_OVERRIDES.items():
        value = os.environ.get(env_key, "").strip()
        if value:
            data[field_name] = value
    return ProcshConfig.model_validate(data)
