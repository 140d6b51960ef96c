# tsfixtures/suites/harness/render.py
from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import List, Sequence

COUNT_PLACEHOLDER = "{count}"

# a double-quoted literal with backslash escapes
_QUOTED = re.compile(r'"(?:[^"\\]|\\.)*"')


@dataclass(frozen=True)
class HarnessFormat:
    """
    Layout of one harness source file: ``preamble + list + trailer``.

    ``{count}`` inside the trailer is replaced with the number of
    timestamps. Plain replacement is used because the templates contain
    literal braces.
    """
    name: str
    filename: str
    preamble: str
    separator: str
    trailer: str


def quote(value: str) -> str:
    return json.dumps(value)


def render_list(timestamps: Sequence[str], separator: str) -> str:
    return separator.join(quote(t) for t in timestamps)


def render_harness(timestamps: Sequence[str], fmt: HarnessFormat) -> str:
    count = str(len(timestamps))
    return (
        fmt.preamble
        + render_list(timestamps, fmt.separator)
        + fmt.trailer.replace(COUNT_PLACEHOLDER, count)
    )


def _list_body(text: str, fmt: HarnessFormat) -> str:
    # only the trailer carries {count}; match it up to the placeholder
    tail_head, _, _ = fmt.trailer.partition(COUNT_PLACEHOLDER)
    if not text.startswith(fmt.preamble):
        raise ValueError(f"{fmt.name} harness does not start with the expected preamble")
    end = text.rfind(tail_head)
    if end < len(fmt.preamble):
        raise ValueError(f"{fmt.name} harness is missing its trailer")
    return text[len(fmt.preamble):end]


def extract_list(text: str, fmt: HarnessFormat) -> List[str]:
    """Return the string literals of the list embedded in a rendered harness."""
    body = _list_body(text, fmt)
    return [json.loads(m.group(0)) for m in _QUOTED.finditer(body)]
