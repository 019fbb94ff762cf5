from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException
from pathlib import Path

from .models import AppConfig
from ..exceptions import ConfigurationError

REQUIRED_KEYS = ['database', 'server']

def validate_config(cfg: DictConfig) -> DictConfig:
    """
    Merges a raw config onto the AppConfig schema so missing values get
    defaults and wrongly typed values fail early.
    """
    for key in REQUIRED_KEYS:
        if key not in cfg:
            raise ConfigurationError(f"Missing required config key: {key}")
    try:
        return OmegaConf.merge(OmegaConf.structured(AppConfig), cfg)
    except OmegaConfBaseException as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


class ConfigManager:
    """Centralizes loading and validation of the application config."""

    def __init__(self, config_dir: Path = Path("conf")):
        self.config_dir = Path(config_dir)

    def load_app_config(self, profile: str = "config") -> DictConfig:
        config_path = self.config_dir / f"{profile}.yaml"

        if not config_path.exists():
            raise ConfigurationError(f"Config not found: {config_path}")

        return validate_config(OmegaConf.load(config_path))
