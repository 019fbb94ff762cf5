from .manager import ConfigManager, validate_config
from .models import AppConfig, DatabaseConfig, ServerConfig, LoggingConfig

__all__ = [
    "ConfigManager", "validate_config",
    "AppConfig", "DatabaseConfig", "ServerConfig", "LoggingConfig",
]
