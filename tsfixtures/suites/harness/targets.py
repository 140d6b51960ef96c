# tsfixtures/suites/harness/targets.py
from __future__ import annotations

from pathlib import Path
from typing import Dict

from tsfixtures.common.errors import ConfigurationError
from .render import HarnessFormat

ELM = HarnessFormat(
    name="elm",
    filename="Bench.elm",
    preamble=(
        "module Bench where\n"
        "\n"
        "import ISO8601\n"
        "import Debug\n"
        "import ElmTest exposing(..)\n"
        "\n"
        "times =\n"
        "  [\n"
        "    "
    ),
    separator="\n  ,",
    trailer=(
        "\n"
        "  ]\n"
        "\n"
        "all =\n"
        "  suite \"benchmark\"\n"
        "    [\n"
        "    (List.length (List.map (\\ d -> ISO8601.parse d |> ISO8601.toTime) times)) `equals` {count}\n"
        "    ]\n"
    ),
)

JAVASCRIPT = HarnessFormat(
    name="javascript",
    filename="bench.js",
    preamble="var times = [\n  ",
    separator="\n  ,",
    trailer=(
        "\n"
        "]\n"
        "\n"
        "var parsed = times.map(function(t){ return new Date(Date.parse(t)).toISOString()});\n"
        "console.log(parsed.length);\n"
        "if (parsed.length !== {count}) { process.exitCode = 1; }\n"
    ),
)

TARGETS: Dict[str, HarnessFormat] = {t.name: t for t in (ELM, JAVASCRIPT)}


def get_target(name: str) -> HarnessFormat:
    if not isinstance(name, str):
        raise ConfigurationError(f"Harness target must be a name, got {name!r}")
    try:
        return TARGETS[name.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown harness target '{name}'. Known: {', '.join(sorted(TARGETS))}"
        ) from None


def detect_target(path: str | Path) -> HarnessFormat:
    """Pick the target whose output filename matches ``path``."""
    filename = Path(path).name
    for fmt in TARGETS.values():
        if fmt.filename == filename:
            return fmt
    raise ConfigurationError(
        f"Cannot tell harness target from file name '{filename}'; pass --target"
    )
