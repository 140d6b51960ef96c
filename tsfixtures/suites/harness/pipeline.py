# tsfixtures/suites/harness/pipeline.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from tsfixtures.common.io import ensure_dir, write_text
from tsfixtures.common.reporters import MANIFEST_NAME, utc_now, write_manifest
from tsfixtures.suites.fixtures.timestamps import SamplingWindow, generate_timestamps
from .render import render_harness
from .targets import get_target

log = logging.getLogger(__name__)

STAGING_SUFFIX = ".tmp"


def _staging_path(final: Path) -> Path:
    return final.with_name(final.name + STAGING_SUFFIX)


def build_fixtures(
    cfg: dict,
    out_dir: str | Path | None = None,
    seed: Optional[int] = None,
    count: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Generate one timestamp set and write it into every configured harness.

    Every output is first written next to its destination with a ``.tmp``
    suffix and only moved into place once all of them were written, so a
    failed run leaves files from earlier runs untouched. Staging files are
    always removed; the OSError propagates.
    """
    fx = cfg["fixtures"]
    count = fx["count"] if count is None else count
    window = SamplingWindow(anchor=fx["anchor"], spread=fx["spread"])
    formats = [get_target(name) for name in cfg["harness"]["targets"]]

    times = generate_timestamps(count, window.anchor, window.spread, seed=seed)
    rendered = [(fmt, render_harness(times, fmt)) for fmt in formats]

    out = ensure_dir(out_dir if out_dir is not None else cfg["artifacts"]["out_dir"])
    result: Dict[str, Any] = {
        "generated_at": utc_now(),
        "count": count,
        "seed": seed,
        "window": window.as_dict(),
        "outputs": {fmt.name: str(out / fmt.filename) for fmt, _ in rendered},
    }
    # (staging file, destination) pairs
    staged: List[Tuple[Path, Path]] = []
    try:
        for fmt, text in rendered:
            final = out / fmt.filename
            staged.append((_staging_path(final), final))
            write_text(staged[-1][0], text)
        if cfg["artifacts"].get("manifest"):
            final = out / MANIFEST_NAME
            staged.append((_staging_path(final), final))
            write_manifest(staged[-1][0], result)
        for tmp, final in staged:
            os.replace(tmp, final)
            log.info("Wrote %s", final)
    finally:
        for tmp, _ in staged:
            tmp.unlink(missing_ok=True)

    if cfg["artifacts"].get("manifest"):
        result["manifest"] = str(out / MANIFEST_NAME)
    return result
