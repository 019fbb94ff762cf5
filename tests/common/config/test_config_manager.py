import pytest
from pathlib import Path
from omegaconf import OmegaConf
from semaforo.common.config import ConfigManager, validate_config
from semaforo.common.exceptions import ConfigurationError

def write_config(tmp_path, text, name="config"):
    (tmp_path / f"{name}.yaml").write_text(text)
    return ConfigManager(tmp_path)

def test_loads_and_fills_defaults(tmp_path):
    manager = write_config(tmp_path, "database:\n  url: sqlite://\nserver:\n  port: 8080\n")
    cfg = manager.load_app_config()
    assert cfg.database.url == "sqlite://"
    assert cfg.database.pool_pre_ping is True
    assert cfg.server.port == 8080
    assert cfg.server.host == "0.0.0.0"
    assert cfg.logging.level == "INFO"

def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        ConfigManager(tmp_path).load_app_config("nope")

def test_missing_required_key(tmp_path):
    manager = write_config(tmp_path, "server:\n  port: 8080\n")
    with pytest.raises(ConfigurationError):
        manager.load_app_config()

def test_wrong_type(tmp_path):
    manager = write_config(tmp_path, "database:\n  url: sqlite://\nserver:\n  port: not-a-port\n")
    with pytest.raises(ConfigurationError):
        manager.load_app_config()

def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///tmp/override.db")
    monkeypatch.setenv("PORT", "4000")
    cfg = validate_config(OmegaConf.create({
        "database": {"url": "${oc.env:DATABASE_URL,sqlite://}"},
        "server": {"port": "${oc.env:PORT,3000}"},
    }))
    assert cfg.database.url == "sqlite:///tmp/override.db"
    assert cfg.server.port == 4000

def test_shipped_config_is_valid(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    cfg = ConfigManager(Path(__file__).parents[3] / "conf").load_app_config()
    assert "database" in cfg
    assert isinstance(cfg.server.port, int)
