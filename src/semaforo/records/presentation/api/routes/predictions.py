"""
API for signal timing predictions, including the tolerance match lookup.
"""
from typing import Optional
from fastapi import Depends, HTTPException

from .records import build_record_router, envelope, not_found
from ....domain import PredictionMatcher, parse_intensity
from ....infrastructure import SqlRecordStore, ToleranceMatcher
from .....common.schemas import PredictionCreate, PredictionUpdate, PredictionRecord

# Singletons
_store: Optional[SqlRecordStore[PredictionRecord]] = None
_matcher: Optional[ToleranceMatcher] = None

def init_store(store: SqlRecordStore[PredictionRecord], matcher: ToleranceMatcher):
    global _store, _matcher
    _store = store
    _matcher = matcher

def get_store() -> SqlRecordStore[PredictionRecord]:
    if _store is None:
        raise HTTPException(503, "Prediction store not initialized")
    return _store

def get_matcher() -> PredictionMatcher:
    if _matcher is None:
        raise HTTPException(503, "Prediction matcher not initialized")
    return _matcher

router = build_record_router(
    get_store, PredictionCreate, PredictionUpdate,
    label="Prediction", plural="Predictions",
)

@router.get("/{traffic_intensity_1}/{traffic_intensity_2}")
def get_by_traffic_intensities(
    traffic_intensity_1: str,
    traffic_intensity_2: str,
    matcher: PredictionMatcher = Depends(get_matcher),
):
    """
    Reuses a stored prediction whose intensities are within the tolerance
    window of the observed pair.
    """
    record = matcher.match(parse_intensity(traffic_intensity_1), parse_intensity(traffic_intensity_2))
    if record is None:
        return not_found("Prediction not found")
    return envelope("Prediction retrieved successfully", record)
