"""
Domain repositories for the record stores.
"""
from typing import Any, List, Mapping, Optional, Protocol, TypeVar, Union

from ...common.schemas import PredictionRecord

RecordT = TypeVar("RecordT", covariant=True)

Identity = Union[int, str]

class RecordStore(Protocol[RecordT]):
    """
    CRUD plus most-recent lookup over one record type.
    Not-found is reported as None / False, never raised.
    """
    def create(self, fields: Mapping[str, Any]) -> RecordT:
        ...

    def get_by_id(self, record_id: Identity) -> Optional[RecordT]:
        ...

    def get_all(self) -> List[RecordT]:
        ...

    def update(self, record_id: Identity, fields: Mapping[str, Any]) -> Optional[RecordT]:
        ...

    def delete(self, record_id: Identity) -> bool:
        ...

    def get_latest(self) -> Optional[RecordT]:
        ...

class PredictionMatcher(Protocol):
    """
    Finds a stored prediction close enough to an observed intensity pair.
    """
    def match(self, traffic_intensity_1: int, traffic_intensity_2: int) -> Optional[PredictionRecord]:
        ...
