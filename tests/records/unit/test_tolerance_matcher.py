import pytest
from datetime import datetime
from semaforo.common.exceptions import PersistenceError
from semaforo.records.infrastructure import ToleranceMatcher, DEFAULT_TOLERANCE

def prediction(t1, t2, timing=(30, 20), **extra):
    return {
        "predicted_traffic_1": t1,
        "predicted_traffic_2": t2,
        "suggested_timing_1": timing[0],
        "suggested_timing_2": timing[1],
        **extra,
    }

def test_default_tolerance_is_fifteen():
    assert DEFAULT_TOLERANCE == 15

def test_match_within_window(prediction_repo, matcher):
    stored = prediction_repo.create(prediction(100, 50))

    assert matcher.match(105, 45) == stored
    assert matcher.match(120, 45) is None

def test_empty_store_has_no_match(matcher):
    assert matcher.match(100, 50) is None
    assert matcher.find_candidates(100, 50) == []

@pytest.mark.parametrize("offset_1", [-16, -15, 0, 15, 16])
@pytest.mark.parametrize("offset_2", [-16, -15, 0, 15, 16])
def test_window_is_inclusive_per_axis(prediction_repo, matcher, offset_1, offset_2):
    stored = prediction_repo.create(prediction(200 + offset_1, 80 + offset_2))

    result = matcher.match(200, 80)

    if abs(offset_1) <= 15 and abs(offset_2) <= 15:
        assert result == stored
        assert matcher.is_candidate(stored, 200, 80)
    else:
        assert result is None
        assert not matcher.is_candidate(stored, 200, 80)

def test_negative_and_zero_intensities(prediction_repo, matcher):
    stored = prediction_repo.create(prediction(0, 0))
    assert matcher.match(-10, 15) == stored
    assert matcher.match(-16, 0) is None

def test_closest_candidate_wins(prediction_repo, matcher):
    prediction_repo.create(prediction(100, 50))
    closer = prediction_repo.create(prediction(110, 50))
    prediction_repo.create(prediction(108, 62))

    assert matcher.match(108, 50) == closer

def test_chebyshev_before_euclidean(prediction_repo, matcher):
    # (6, 6): chebyshev 6, squared euclidean 72
    # (0, 7): chebyshev 7, squared euclidean 49
    diagonal = prediction_repo.create(prediction(106, 56))
    prediction_repo.create(prediction(100, 57))

    assert matcher.match(100, 50) == diagonal

def test_equal_distance_prefers_most_recent(prediction_repo, matcher):
    newer = prediction_repo.create(prediction(95, 50, created_at=datetime(2024, 1, 1, 9, 0)))
    prediction_repo.create(prediction(105, 50, created_at=datetime(2024, 1, 1, 8, 0)))

    assert matcher.match(100, 50) == newer

def test_identical_candidates_prefer_highest_id(prediction_repo, matcher):
    when = datetime(2024, 1, 1, 8, 0)
    prediction_repo.create(prediction(100, 50, created_at=when))
    last = prediction_repo.create(prediction(100, 50, created_at=when))

    assert matcher.match(100, 50) == last

def test_find_candidates_orders_best_first(prediction_repo, matcher):
    far = prediction_repo.create(prediction(114, 50))
    near = prediction_repo.create(prediction(101, 50))
    prediction_repo.create(prediction(200, 50))

    assert matcher.find_candidates(100, 50) == [near, far]

def test_match_is_read_only(prediction_repo, matcher):
    stored = prediction_repo.create(prediction(100, 50))
    matcher.match(100, 50)
    assert prediction_repo.get_all() == [stored]

def test_custom_tolerance(prediction_repo, session_factory):
    stored = prediction_repo.create(prediction(100, 50))
    strict = ToleranceMatcher(session_factory, tolerance=2)
    assert strict.match(102, 48) == stored
    assert strict.match(103, 50) is None

def test_intensity_beyond_column_range_has_no_match(prediction_repo, matcher):
    prediction_repo.create(prediction(100, 50))
    assert matcher.match(10**20, 50) is None
    assert matcher.match(100, -10**20) is None
    assert matcher.find_candidates(10**20, -10**20) == []

def test_window_is_clamped_to_column_range(prediction_repo, matcher):
    top = prediction_repo.create(prediction(2**31 - 1, -2**31))
    assert matcher.match(2**31 - 1 + 5, -2**31 - 5) == top
    assert matcher.match(2**31 - 1 + 16, -2**31) is None

def test_unreachable_store_raises(unreachable_session_factory):
    with pytest.raises(PersistenceError):
        ToleranceMatcher(unreachable_session_factory).match(100, 50)
