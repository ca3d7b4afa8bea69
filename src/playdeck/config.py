"""Configuration persistence for PlayDeck."""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

POPUP_WIDTH_MIN = 20
POPUP_WIDTH_MAX = 100


@dataclass(frozen=True)
class AppConfig:
    """Immutable user configuration loaded from disk."""

    last_library_path: Optional[str] = None
    shuffle_default: bool = False
    popup_width_percent: int = 50


def get_config_dir(app_name: str = "playdeck") -> Path:
    """Return the per-user config directory for the current platform."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        root = Path(base) if base else Path.home() / "AppData" / "Roaming"
        return _ensure_dir(root / app_name)
    if _is_macos():
        return _ensure_dir(Path.home() / "Library" / "Application Support" / app_name)
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return _ensure_dir(root / app_name)


def get_config_path() -> Path:
    return get_config_dir() / "config.json"


def load_config() -> AppConfig:
    """Load configuration from disk, falling back to defaults on error."""
    path = get_config_path()
    if not path.exists():
        return AppConfig()
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        logger.exception("Failed to load config from %s", path)
        return AppConfig()
    if not isinstance(raw, dict):
        logger.warning("Ignoring config at %s: not a JSON object", path)
        return AppConfig()
    return _config_from_mapping(raw)


def save_config(cfg: AppConfig) -> None:
    """Persist configuration to disk atomically."""
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_suffix(".tmp")
    data = {
        "last_library_path": cfg.last_library_path,
        "shuffle_default": cfg.shuffle_default,
        "popup_width_percent": cfg.popup_width_percent,
    }
    temp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    os.replace(temp_path, path)


def _ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def _is_macos() -> bool:
    return os.uname().sysname == "Darwin" if hasattr(os, "uname") else False


def _get_bool(raw: dict[str, Any], key: str, default: bool) -> bool:
    value = raw.get(key, default)
    return value if isinstance(value, bool) else default


def _get_int(
    raw: dict[str, Any],
    key: str,
    default: int,
    *,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    """Fetch an integer value with optional clamping."""
    value = raw.get(key, default)
    if not isinstance(value, int) or isinstance(value, bool):
        value = default
    if min_value is not None:
        value = max(min_value, value)
    if max_value is not None:
        value = min(max_value, value)
    return value


def _config_from_mapping(raw: dict[str, Any]) -> AppConfig:
    """Normalize raw JSON data into an AppConfig."""
    last_library_path = raw.get("last_library_path")
    if not isinstance(last_library_path, str) or not last_library_path:
        last_library_path = None
    return AppConfig(
        last_library_path=last_library_path,
        shuffle_default=_get_bool(raw, "shuffle_default", False),
        popup_width_percent=_get_int(
            raw,
            "popup_width_percent",
            50,
            min_value=POPUP_WIDTH_MIN,
            max_value=POPUP_WIDTH_MAX,
        ),
    )
