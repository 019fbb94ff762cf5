from .database import Base, init_db, build_engine, build_session_factory
from .models import TrafficDB, PredictionDB

__all__ = [
    "Base", "init_db", "build_engine", "build_session_factory",
    "TrafficDB", "PredictionDB"
]
