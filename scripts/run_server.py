import hydra
import uvicorn
from omegaconf import DictConfig

from semaforo.common.config import validate_config
from semaforo.common.database import build_engine, build_session_factory, init_db
from semaforo.common.logging import setup_logger
from semaforo.records.presentation.api import create_app

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    cfg = validate_config(cfg)
    logger = setup_logger("semaforo", cfg.logging.level)
    logger.info("Configuration loaded.")

    db_cfg = cfg.database
    engine = build_engine(db_cfg.url, echo=db_cfg.echo, pool_pre_ping=db_cfg.pool_pre_ping)
    if db_cfg.create_tables:
        init_db(engine)
        logger.info("Database tables ready")

    app = create_app(build_session_factory(engine))

    server_cfg = cfg.server
    logger.info(f"Starting server at http://{server_cfg.host}:{server_cfg.port}")
    uvicorn.run(app, host=server_cfg.host, port=server_cfg.port)

if __name__ == "__main__":
    main()
