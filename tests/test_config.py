import pytest

from tsfixtures.common.errors import ConfigurationError
from tsfixtures.common.io import load_cfg


def test_bundled_config():
    cfg = load_cfg()
    assert cfg["fixtures"] == {"count": 10000, "anchor": 1459795934, "spread": 6}
    assert cfg["harness"]["targets"] == ["elm", "javascript"]


def test_missing_keys_fall_back_to_defaults(tmp_path):
    p = tmp_path / "project.yaml"
    p.write_text("fixtures:\n  count: 25\n")
    cfg = load_cfg(p)
    assert cfg["fixtures"]["count"] == 25
    assert cfg["fixtures"]["anchor"] == 1459795934
    assert cfg["artifacts"]["out_dir"] == "."


@pytest.mark.parametrize("body", ["- just\n- a list\n", "fixtures: [1, 2]\n", "fixtures: {count: [\n"])
def test_bad_config_is_a_configuration_error(tmp_path, body):
    p = tmp_path / "project.yaml"
    p.write_text(body)
    with pytest.raises(ConfigurationError):
        load_cfg(p)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_cfg(tmp_path / "nope.yaml")
