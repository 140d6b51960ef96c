# tsfixtures/suites/fixtures/summary.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from tsfixtures.common.errors import HarnessVerificationError
from tsfixtures.suites.harness.render import HarnessFormat, extract_list
from .timestamps import SamplingWindow, format_timestamp, parse_timestamp

log = logging.getLogger(__name__)


def summarize(timestamps: Sequence[str]) -> Dict[str, Any]:
    """
    Count, distinct count and earliest/latest instant of a fixture list.

    Works on epoch seconds rather than pandas datetimes, whose
    nanosecond range stops at 1677/2262.
    """
    if not timestamps:
        return {"count": 0, "unique": 0, "earliest": None, "latest": None}
    df = pd.DataFrame({"text": list(timestamps)})
    df["seconds"] = df["text"].map(parse_timestamp).astype("int64")
    return {
        "count": int(len(df)),
        "unique": int(df["text"].nunique()),
        "earliest": format_timestamp(int(df["seconds"].min())),
        "latest": format_timestamp(int(df["seconds"].max())),
    }


def _bad_entries(timestamps: Sequence[str], window: SamplingWindow) -> tuple[List[str], List[str]]:
    malformed, outside = [], []
    for t in timestamps:
        try:
            seconds = parse_timestamp(t)
        except ValueError:
            malformed.append(t)
            continue
        if format_timestamp(seconds) != t:
            malformed.append(t)
        elif not window.contains(seconds):
            outside.append(t)
    return malformed, outside


def verify_harness(
    path: str | Path,
    fmt: HarnessFormat,
    window: SamplingWindow,
    expected_count: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Re-read a rendered harness file and check its embedded list.

    Raises HarnessVerificationError naming every failed check; returns the
    summarize() result otherwise.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        timestamps = extract_list(text, fmt)
    except ValueError as e:
        raise HarnessVerificationError(path, [str(e)]) from e

    failures: List[str] = []
    if expected_count is not None and len(timestamps) != expected_count:
        failures.append(f"expected {expected_count} entries, found {len(timestamps)}")
    duplicates = len(timestamps) - len(set(timestamps))
    if duplicates:
        failures.append(f"{duplicates} duplicate entries")
    malformed, outside = _bad_entries(timestamps, window)
    if malformed:
        failures.append(f"{len(malformed)} malformed entries (first: {malformed[0]!r})")
    if outside:
        failures.append(
            f"{len(outside)} entries outside [{window.low}, {window.high}] (first: {outside[0]!r})"
        )
    if failures:
        raise HarnessVerificationError(path, failures)

    summary = summarize(timestamps)
    log.info("Verified %s: %d timestamps", path, summary["count"])
    return summary
