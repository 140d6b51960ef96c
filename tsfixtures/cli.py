# tsfixtures/cli.py
from __future__ import annotations
import json
from pathlib import Path
from typing import Optional
import typer

from tsfixtures.common.errors import ConfigurationError, HarnessVerificationError
from tsfixtures.common.io import load_cfg

app = typer.Typer(help="ISO-8601 timestamp fixtures and parse-benchmark harnesses")

EXIT_IO = 1
EXIT_CONFIG = 2
EXIT_VERIFY = 3


def _fail(kind: str, err: Exception, code: int) -> None:
    typer.echo(f"{kind}: {err}", err=True)
    raise typer.Exit(code=code)


@app.command("generate")
def cmd_generate(
    out_dir: Optional[Path] = typer.Option(None, "--out-dir", help="Directory for Bench.elm / bench.js"),
    seed: Optional[int] = typer.Option(None, help="Seed for a reproducible set"),
    count: Optional[int] = typer.Option(None, help="Override fixtures.count"),
    config: Optional[Path] = typer.Option(None, help="Alternative project.yaml"),
):
    # lazy import avoids heavy deps at startup
    from tsfixtures.suites.harness.pipeline import build_fixtures
    try:
        cfg = load_cfg(config)
        result = build_fixtures(cfg, out_dir=out_dir, seed=seed, count=count)
    except ConfigurationError as e:
        _fail("ConfigurationError", e, EXIT_CONFIG)
    except OSError as e:
        _fail("IOError", e, EXIT_IO)
    for path in result["outputs"].values():
        typer.echo(path)
    typer.echo(f"{result['count']} timestamps")


@app.command("preview")
def cmd_preview(
    count: int = typer.Option(10, help="How many timestamps to print"),
    seed: Optional[int] = typer.Option(None),
    config: Optional[Path] = typer.Option(None),
):
    from tsfixtures.suites.fixtures.timestamps import generate_timestamps
    try:
        fx = load_cfg(config)["fixtures"]
        times = generate_timestamps(count, fx["anchor"], fx["spread"], seed=seed)
    except ConfigurationError as e:
        _fail("ConfigurationError", e, EXIT_CONFIG)
    for t in times:
        typer.echo(t)


@app.command("verify")
def cmd_verify(
    harness: Path = typer.Argument(..., help="Rendered Bench.elm or bench.js"),
    target: Optional[str] = typer.Option(None, help="elm | javascript (default: from file name)"),
    count: Optional[int] = typer.Option(None, help="Expected entries (default: fixtures.count)"),
    config: Optional[Path] = typer.Option(None),
):
    from tsfixtures.suites.fixtures.summary import verify_harness
    from tsfixtures.suites.fixtures.timestamps import SamplingWindow, validate_request
    from tsfixtures.suites.harness.targets import detect_target, get_target
    try:
        fx = load_cfg(config)["fixtures"]
        fmt = get_target(target) if target else detect_target(harness)
        window = SamplingWindow(anchor=fx["anchor"], spread=fx["spread"])
        expected = fx["count"] if count is None else count
        validate_request(expected, window)
        summary = verify_harness(harness, fmt, window, expected)
    except ConfigurationError as e:
        _fail("ConfigurationError", e, EXIT_CONFIG)
    except HarnessVerificationError as e:
        _fail("HarnessVerificationError", e, EXIT_VERIFY)
    except OSError as e:
        _fail("IOError", e, EXIT_IO)
    typer.echo(json.dumps(summary, indent=2))


def main():
    app()

if __name__ == "__main__":
    main()
