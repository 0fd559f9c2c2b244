"""User settings stored as JSON.

Uses platformdirs for cross-platform settings location:
  Linux:   ~/.config/cosmos_voyager/settings.json
  macOS:   ~/Library/Application Support/cosmos_voyager/settings.json
  Windows: C:/Users/.../AppData/Local/cosmos_voyager/settings.json

Only display and logging preferences live here; the universe itself is
regenerated every session.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path

import structlog
from platformdirs import user_config_dir

from .constants import FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from .errors import ConfigError

CONFIG_DIR = Path(user_config_dir("cosmos_voyager"))
CONFIG_FILE = CONFIG_DIR / "settings.json"

logger = structlog.get_logger(__name__)


@dataclass
class Settings:
    """Display and logging preferences."""

    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    fps: int = FPS
    pixel_ratio: float = 1.0
    seed: int | None = None  # None = fresh universe every launch
    log_level: str = "INFO"
    log_json: bool = False


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _validated(key: str, value: object) -> object:
    """Check one settings value, returning it in its canonical form."""
    if key in ("width", "height", "fps"):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ConfigError(f"{key} must be a positive integer, got {value!r}")
        return value
    if key == "pixel_ratio":
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ConfigError(f"pixel_ratio must be a positive number, got {value!r}")
        return float(value)
    if key == "seed":
        if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
            raise ConfigError(f"seed must be an integer or null, got {value!r}")
        return value
    if key == "log_level":
        if not isinstance(value, str) or value.upper() not in _LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return value.upper()
    if key == "log_json":
        if not isinstance(value, bool):
            raise ConfigError(f"log_json must be true or false, got {value!r}")
        return value
    raise ConfigError(f"unknown setting {key!r}")


def settings_from_dict(data: dict) -> Settings:
    """Build Settings from parsed JSON, ignoring keys we do not know."""
    known = {f.name for f in fields(Settings)}
    values = {}
    for key, value in data.items():
        if key not in known:
            logger.warning("Ignoring unknown setting", key=key)
            continue
        values[key] = _validated(key, value)
    return Settings(**values)


def load_settings(path: Path | None = None) -> Settings:
    """Read settings from disk. Returns defaults if the file does not exist."""
    path = path or CONFIG_FILE
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError) as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must hold a JSON object")
    return settings_from_dict(data)


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Write settings as JSON and return the path written."""
    path = path or CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(settings), indent=2))
    return path
