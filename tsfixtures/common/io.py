from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Dict
import yaml

from tsfixtures import CONFIG_PATH
from tsfixtures.common.errors import ConfigurationError

log = logging.getLogger(__name__)

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "fixtures": {"count": 10000, "anchor": 1459795934, "spread": 6},
    "harness": {"targets": ["elm", "javascript"]},
    "artifacts": {"out_dir": ".", "manifest": False},
}


def ensure_dir(p: str | Path) -> Path:
    p = Path(p)
    p.mkdir(parents=True, exist_ok=True)
    return p


def load_cfg(path: str | Path | None = None) -> dict:
    """
    Load project.yaml and fill any missing section keys from DEFAULTS.
    Unreadable or malformed files raise ConfigurationError.
    """
    cfg_path = Path(path) if path is not None else CONFIG_PATH
    try:
        raw = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot read config {cfg_path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config {cfg_path} must be a mapping, got {type(raw).__name__}")

    cfg: Dict[str, Dict[str, Any]] = {}
    for section, defaults in DEFAULTS.items():
        values = raw.get(section) or {}
        if not isinstance(values, dict):
            raise ConfigurationError(f"Config section '{section}' must be a mapping")
        cfg[section] = {**defaults, **values}
    log.debug("Loaded config from %s", cfg_path)
    return cfg


def write_text(path: str | Path, content: str) -> Path:
    p = Path(path)
    ensure_dir(p.parent)
    p.write_text(content, encoding="utf-8")
    return p
