import json
from pathlib import Path
import pytest

from tsfixtures.common.errors import ConfigurationError
from tsfixtures.common.io import load_cfg, write_text
from tsfixtures.suites.fixtures.timestamps import SamplingWindow
from tsfixtures.suites.fixtures.summary import verify_harness
from tsfixtures.suites.harness import pipeline
from tsfixtures.suites.harness.pipeline import build_fixtures
from tsfixtures.suites.harness.targets import ELM, JAVASCRIPT


def test_writes_both_harnesses_with_same_set(tmp_path):
    cfg = load_cfg()
    result = build_fixtures(cfg, out_dir=tmp_path, seed=5, count=100)
    window = SamplingWindow(cfg["fixtures"]["anchor"], cfg["fixtures"]["spread"])

    assert set(result["outputs"]) == {"elm", "javascript"}
    elm = verify_harness(tmp_path / "Bench.elm", ELM, window, 100)
    js = verify_harness(tmp_path / "bench.js", JAVASCRIPT, window, 100)
    assert elm == js

    manifest = json.loads((tmp_path / "manifest.json").read_text())
    assert manifest["count"] == 100
    assert manifest["seed"] == 5
    assert manifest["window"]["low"] == window.low


def test_same_seed_same_files(tmp_path):
    cfg = load_cfg()
    build_fixtures(cfg, out_dir=tmp_path / "a", seed=9, count=20)
    build_fixtures(cfg, out_dir=tmp_path / "b", seed=9, count=20)
    assert (tmp_path / "a" / "bench.js").read_text() == (tmp_path / "b" / "bench.js").read_text()


def _disk_full_on(name):
    """write_text stand-in that writes half of ``name`` and then fails."""
    def write(path, content):
        path = Path(path)
        if path.name.startswith(name):
            path.write_text(content[: len(content) // 2], encoding="utf-8")
            raise OSError(28, "No space left on device")
        return write_text(path, content)
    return write


def test_interrupted_write_leaves_no_partial_output(tmp_path, monkeypatch):
    monkeypatch.setattr(pipeline, "write_text", _disk_full_on("bench.js"))
    with pytest.raises(OSError):
        build_fixtures(load_cfg(), out_dir=tmp_path, seed=1, count=10)
    assert list(tmp_path.iterdir()) == []


def test_failed_run_keeps_previous_outputs(tmp_path, monkeypatch):
    build_fixtures(load_cfg(), out_dir=tmp_path, seed=1, count=10)
    before = {p.name: p.read_text() for p in tmp_path.iterdir()}

    def no_space(path, payload):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(pipeline, "write_manifest", no_space)
    with pytest.raises(OSError):
        build_fixtures(load_cfg(), out_dir=tmp_path, seed=2, count=10)
    assert {p.name: p.read_text() for p in tmp_path.iterdir()} == before


def test_config_errors_happen_before_any_write(tmp_path):
    cfg = load_cfg()
    cfg["harness"]["targets"] = ["elm", "cobol"]
    with pytest.raises(ConfigurationError):
        build_fixtures(cfg, out_dir=tmp_path / "out")
    assert not (tmp_path / "out").exists()


def test_non_string_target_is_a_configuration_error(tmp_path):
    cfg = load_cfg()
    cfg["harness"]["targets"] = ["elm", 1]
    with pytest.raises(ConfigurationError, match="must be a name"):
        build_fixtures(cfg, out_dir=tmp_path / "out")
