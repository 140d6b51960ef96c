from pathlib import Path
import pytest
import yaml


@pytest.fixture
def tiny_cfg_path(tmp_path) -> Path:
    """Config whose window [0, 2] holds exactly three distinct seconds."""
    p = tmp_path / "project.yaml"
    p.write_text(yaml.safe_dump({
        "fixtures": {"count": 3, "anchor": 1, "spread": 2},
        "harness": {"targets": ["elm", "javascript"]},
        "artifacts": {"out_dir": str(tmp_path / "out"), "manifest": True},
    }))
    return p
