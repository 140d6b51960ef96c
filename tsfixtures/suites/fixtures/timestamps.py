# tsfixtures/suites/fixtures/timestamps.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from tsfixtures.common.errors import ConfigurationError

log = logging.getLogger(__name__)

# =========================
# Constants
# =========================
DEFAULT_COUNT = 10000
DEFAULT_ANCHOR = 1459795934
DEFAULT_SPREAD = 6

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ISO_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Whole seconds representable as four-digit-year calendar dates.
MIN_SECONDS = (datetime(1, 1, 1, tzinfo=timezone.utc) - EPOCH) // timedelta(seconds=1)
MAX_SECONDS = (datetime(9999, 12, 31, 23, 59, 59, tzinfo=timezone.utc) - EPOCH) // timedelta(seconds=1)


# =========================
# Formatting
# =========================
def format_timestamp(seconds: int) -> str:
    """
    Render whole seconds since the Unix epoch as ``YYYY-MM-DDTHH:MM:SSZ``.

    Arithmetic on EPOCH is used instead of ``datetime.fromtimestamp`` so
    negative values work on every platform.
    """
    dt = EPOCH + timedelta(seconds=seconds)
    return dt.replace(tzinfo=None).isoformat(timespec="seconds") + "Z"


def parse_timestamp(text: str) -> int:
    """Inverse of format_timestamp. Raises ValueError on anything else."""
    dt = datetime.strptime(text, ISO_FORMAT).replace(tzinfo=timezone.utc)
    return (dt - EPOCH) // timedelta(seconds=1)


# =========================
# Sampling window
# =========================
@dataclass(frozen=True)
class SamplingWindow:
    anchor: int = DEFAULT_ANCHOR
    spread: int = DEFAULT_SPREAD

    @property
    def high(self) -> int:
        return self.anchor * 2

    @property
    def low(self) -> int:
        return self.anchor * 2 - self.anchor * self.spread

    @property
    def capacity(self) -> int:
        """Number of distinct whole seconds in [low, high]; 0 when empty."""
        return max(self.high - self.low + 1, 0)

    def contains(self, seconds: int) -> bool:
        return self.low <= seconds <= self.high

    def as_dict(self) -> dict:
        return {
            "anchor": self.anchor,
            "spread": self.spread,
            "low": self.low,
            "high": self.high,
        }


def _require_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")


def validate_window(window: SamplingWindow) -> None:
    """Raise ConfigurationError unless ``window`` is a non-empty interval of calendar seconds."""
    _require_int("anchor", window.anchor)
    _require_int("spread", window.spread)
    if window.high < window.low:
        raise ConfigurationError(
            f"Empty sampling interval [{window.low}, {window.high}] "
            f"(anchor={window.anchor}, spread={window.spread})"
        )
    if window.low < MIN_SECONDS or window.high > MAX_SECONDS:
        raise ConfigurationError(
            f"Sampling interval [{window.low}, {window.high}] falls outside "
            f"the years 0001-9999"
        )


def validate_request(count: int, window: SamplingWindow) -> None:
    """
    Precondition for generate_timestamps: the window must hold at least
    ``count`` distinct formatted values, otherwise the sampling loop would
    never finish.
    """
    _require_int("count", count)
    if count < 1:
        raise ConfigurationError(f"count must be positive, got {count}")
    validate_window(window)
    if count > window.capacity:
        raise ConfigurationError(
            f"Requested {count} unique timestamps but the interval "
            f"[{window.low}, {window.high}] only holds {window.capacity} distinct seconds"
        )


# =========================
# Generation
# =========================
def generate_timestamps(
    count: int = DEFAULT_COUNT,
    anchor: int = DEFAULT_ANCHOR,
    spread: int = DEFAULT_SPREAD,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> List[str]:
    """
    Return ``count`` unique formatted timestamps drawn uniformly from
    ``[anchor*2 - anchor*spread, anchor*2]``, in insertion order.

    Pass ``rng`` or ``seed`` for a reproducible set.
    """
    window = SamplingWindow(anchor=anchor, spread=spread)
    validate_request(count, window)
    if rng is None:
        rng = random.Random(seed)

    log.info("Generating %d timestamps in [%d, %d]", count, window.low, window.high)
    seen = set()
    times: List[str] = []
    while len(times) < count:
        s = format_timestamp(rng.randint(window.low, window.high))
        if s in seen:
            continue
        seen.add(s)
        times.append(s)
    return times
