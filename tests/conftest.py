import pytest
from semaforo.common.database import Base, build_engine, build_session_factory, init_db
from semaforo.records.infrastructure import traffic_store, prediction_store, ToleranceMatcher

@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    init_db(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()

@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)

@pytest.fixture
def traffic_repo(session_factory):
    return traffic_store(session_factory)

@pytest.fixture
def prediction_repo(session_factory):
    return prediction_store(session_factory)

@pytest.fixture
def matcher(session_factory):
    return ToleranceMatcher(session_factory)

@pytest.fixture
def traffic_fields():
    return {
        "traffic_intensity_1": 120,
        "traffic_intensity_2": 80,
        "co2_level": 410,
        "light_level_1": 300,
        "light_level_2": 280,
        "current_green_time_1": 45,
        "current_green_time_2": 30,
        "pedestrian_request_1": False,
        "pedestrian_request_2": True,
    }

@pytest.fixture
def prediction_fields():
    return {
        "predicted_traffic_1": 100,
        "predicted_traffic_2": 50,
        "suggested_timing_1": 30,
        "suggested_timing_2": 20,
    }

@pytest.fixture
def unreachable_session_factory(tmp_path):
    """Session factory whose database file can never be opened."""
    engine = build_engine(f"sqlite:///{tmp_path}/missing/dir/semaforo.db", pool_pre_ping=False)
    yield build_session_factory(engine)
    engine.dispose()
