from .traffic import TrafficCreate, TrafficUpdate, TrafficRecord
from .prediction import PredictionCreate, PredictionUpdate, PredictionRecord

__all__ = [
    "TrafficCreate",
    "TrafficUpdate",
    "TrafficRecord",
    "PredictionCreate",
    "PredictionUpdate",
    "PredictionRecord",
]
