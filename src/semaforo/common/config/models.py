from dataclasses import dataclass, field

@dataclass
class DatabaseConfig:
    url: str = "sqlite:///./semaforo.db"
    echo: bool = False
    pool_pre_ping: bool = True
    create_tables: bool = True

@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 3000

@dataclass
class LoggingConfig:
    level: str = "INFO"

@dataclass
class AppConfig:
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
