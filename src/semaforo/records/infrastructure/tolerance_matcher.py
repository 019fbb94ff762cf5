"""
Approximate lookup of stored predictions by traffic intensity.
"""
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from ...common.database import PredictionDB
from ...common.exceptions import PersistenceError
from ...common.logging import get_logger, log_execution_time
from ...common.schemas import PredictionRecord
from ...common.schemas.fields import INT_MIN, INT_MAX

logger = get_logger(__name__)

# Admissible distance per approach, inclusive on both ends
DEFAULT_TOLERANCE = 15

def clamp_window(low: int, high: int) -> Optional[Tuple[int, int]]:
    """Intersects [low, high] with the column range; None when disjoint."""
    low, high = max(low, INT_MIN), min(high, INT_MAX)
    if low > high:
        return None
    return low, high


class ToleranceMatcher:
    """
    Finds a previously computed prediction whose intensities lie within a
    fixed window of an observed pair, so its timing can be reused.

    Candidates come from a range query on both axes. When several qualify
    the closest wins: smallest Chebyshev distance, then smallest squared
    Euclidean distance, then most recent createdAt, then highest id.
    """

    def __init__(self, session_factory: sessionmaker, tolerance: int = DEFAULT_TOLERANCE):
        self.session_factory = session_factory
        self.tolerance = tolerance

    @staticmethod
    def _distance(record: PredictionRecord, t1: int, t2: int):
        d1 = abs(record.predicted_traffic_1 - t1)
        d2 = abs(record.predicted_traffic_2 - t2)
        return (max(d1, d2), d1 * d1 + d2 * d2)

    def is_candidate(self, record: PredictionRecord, t1: int, t2: int) -> bool:
        return (
            abs(record.predicted_traffic_1 - t1) <= self.tolerance
            and abs(record.predicted_traffic_2 - t2) <= self.tolerance
        )

    @log_execution_time(logger)
    def find_candidates(self, traffic_intensity_1: int, traffic_intensity_2: int) -> List[PredictionRecord]:
        """All predictions inside the window, best match first."""
        t1, t2, delta = traffic_intensity_1, traffic_intensity_2, self.tolerance
        window_1 = clamp_window(t1 - delta, t1 + delta)
        window_2 = clamp_window(t2 - delta, t2 + delta)
        if window_1 is None or window_2 is None:
            # Nothing stored can lie outside the column range
            return []
        query = select(PredictionDB).where(
            PredictionDB.predicted_traffic_1.between(*window_1),
            PredictionDB.predicted_traffic_2.between(*window_2),
        )
        try:
            with self.session_factory() as session:
                rows = session.scalars(query).all()
                candidates = [PredictionRecord.model_validate(row) for row in rows]
        except SQLAlchemyError as e:
            raise PersistenceError(f"Could not match prediction for ({t1}, {t2}): {e}") from e

        # Stable sorts: recency order survives among equally distant candidates
        newest_first = sorted(candidates, key=lambda record: (record.created_at, record.id), reverse=True)
        return sorted(newest_first, key=lambda record: self._distance(record, t1, t2))

    def match(self, traffic_intensity_1: int, traffic_intensity_2: int) -> Optional[PredictionRecord]:
        candidates = self.find_candidates(traffic_intensity_1, traffic_intensity_2)
        if not candidates:
            logger.debug(f"No prediction within {self.tolerance} of ({traffic_intensity_1}, {traffic_intensity_2})")
            return None
        best = candidates[0]
        logger.debug(
            f"Matched prediction {best.id} for ({traffic_intensity_1}, {traffic_intensity_2}) "
            f"out of {len(candidates)} candidates"
        )
        return best
