"""
API for traffic sensor snapshots.
"""
from typing import Optional
from fastapi import HTTPException

from .records import build_record_router
from ....infrastructure import SqlRecordStore
from .....common.schemas import TrafficCreate, TrafficUpdate, TrafficRecord

# Singleton
_store: Optional[SqlRecordStore[TrafficRecord]] = None

def init_store(store: SqlRecordStore[TrafficRecord]):
    global _store
    _store = store

def get_store() -> SqlRecordStore[TrafficRecord]:
    if _store is None:
        raise HTTPException(503, "Traffic store not initialized")
    return _store

router = build_record_router(
    get_store, TrafficCreate, TrafficUpdate,
    label="Traffic data",
)
