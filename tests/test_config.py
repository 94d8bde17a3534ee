import pytest

from mapinspect import config
from mapinspect.config import InspectorConfig, load_config
from mapinspect.errors import ConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    monkeypatch.delenv(config.ENV_MAX_HEIGHT_FRACTION, raising=False)
    monkeypatch.delenv(config.ENV_ON_REENTRANT, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


def test_defaults_when_no_file(tmp_path):
    cfg = load_config(tmp_path / "missing.ini")
    assert cfg == InspectorConfig()
    assert cfg.max_height_fraction == 0.9
    assert cfg.on_reentrant == "reject"


def test_default_location_is_user_config_dir():
    assert load_config() == InspectorConfig()


def test_reads_inspector_section(tmp_path):
    path = tmp_path / "inspector.ini"
    path.write_text("[inspector]\nmax_height_fraction = 0.75\non_reentrant = Cancel\n")
    cfg = load_config(path)
    assert cfg.max_height_fraction == 0.75
    assert cfg.on_reentrant == "cancel"


def test_environment_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "inspector.ini"
    path.write_text("[inspector]\nmax_height_fraction = 0.75\n")
    monkeypatch.setenv(config.ENV_MAX_HEIGHT_FRACTION, "0.6")
    monkeypatch.setenv(config.ENV_ON_REENTRANT, "cancel")
    cfg = load_config(path)
    assert cfg.max_height_fraction == 0.6
    assert cfg.on_reentrant == "cancel"


def test_malformed_file_is_skipped(tmp_path):
    path = tmp_path / "inspector.ini"
    path.write_text("not an ini file\n")
    assert load_config(path) == InspectorConfig()


def test_undecodable_file_is_skipped(tmp_path, caplog):
    path = tmp_path / "inspector.ini"
    path.write_bytes(b"[inspector]\nmax_height_fraction = caf\xe9\n")
    with caplog.at_level("WARNING", logger="mapinspect.config"):
        assert load_config(path) == InspectorConfig()
    assert "Failed to read config" in caplog.text


def test_unreadable_path_is_skipped(tmp_path):
    path = tmp_path / "inspector.ini"
    path.mkdir()
    assert load_config(path) == InspectorConfig()


@pytest.mark.parametrize(
    "text",
    [
        "[inspector]\nmax_height_fraction = big\n",
        "[inspector]\nmax_height_fraction = 1.5\n",
        "[inspector]\non_reentrant = queue\n",
    ],
)
def test_invalid_values_raise(tmp_path, text):
    path = tmp_path / "inspector.ini"
    path.write_text(text)
    with pytest.raises(ConfigError):
        load_config(path)
