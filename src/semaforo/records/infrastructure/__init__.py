"""
Infrastructure module initialization.
"""
from .sql_store import SqlRecordStore, traffic_store, prediction_store
from .tolerance_matcher import ToleranceMatcher, DEFAULT_TOLERANCE

__all__ = [
    "SqlRecordStore",
    "traffic_store",
    "prediction_store",
    "ToleranceMatcher",
    "DEFAULT_TOLERANCE",
]
