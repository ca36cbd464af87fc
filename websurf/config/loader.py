"""Load and persist the websurf configuration file."""

import json
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from websurf.config.schema import Config

CONFIG_DIR_NAME = ".websurf"


def get_config_path() -> Path:
    return Path.home() / CONFIG_DIR_NAME / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Read the JSON config at ``config_path`` (default: ``~/.websurf/config.json``).

    Legacy keys are migrated before validation. A missing file gives the
    defaults; an unreadable or invalid one is logged and also gives the
    defaults, so a bad file never stops the engines from starting.
    """
    path = config_path or get_config_path()
    if not path.is_file():
        return Config()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError("top-level JSON value must be an object")
        return Config.model_validate(_migrate_config(raw))
    except (OSError, ValueError, ValidationError) as e:
        logger.warning("Ignoring invalid config {} ({}); using defaults", path, e)
        return Config()


def save_config(config: Config, config_path: Path | None = None) -> Path:
    """Write ``config`` with camelCase keys and return the path written."""
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
    return path


def _migrate_config(data: dict) -> dict:
    """Migrate old config formats to current."""
    # Move legacy upstreamSearchEngines {"DuckDuckGo": true, ...} -> engines.duckduckgo
    legacy_engines = data.pop("upstreamSearchEngines", None)
    if legacy_engines is None:
        legacy_engines = data.pop("upstream_search_engines", None)
    if isinstance(legacy_engines, dict):
        engines_cfg = data.setdefault("engines", {})
        for name, enabled in legacy_engines.items():
            key = str(name).strip().lower()
            if key not in engines_cfg:
                engines_cfg[key] = bool(enabled)

    # Legacy safe search levels were unbounded; clamp into 0..4
    safe_search = data.get("safeSearch")
    if isinstance(safe_search, int):
        data["safeSearch"] = max(0, min(safe_search, 4))

    return data
