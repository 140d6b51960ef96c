from __future__ import annotations
from pathlib import Path
import json
from datetime import datetime, timezone

MANIFEST_NAME = "manifest.json"


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def write_manifest(path: str | Path, payload: dict) -> Path:
    """Record what a generate run produced; ``path`` is usually ``out / MANIFEST_NAME``."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(payload, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return p
