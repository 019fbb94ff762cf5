"""
Seeds the database with synthetic traffic snapshots and predictions.

Stands in for the field sensors and the external predictor during
development. Rush hour snapshots get higher intensities; each prediction
splits a fixed cycle between the two approaches proportionally to flow.
"""
import argparse
import random

from semaforo.common.config import ConfigManager
from semaforo.common.database import build_engine, build_session_factory, init_db
from semaforo.common.logging import get_logger
from semaforo.records.infrastructure import traffic_store, prediction_store

logger = get_logger("semaforo.seed")

# Simulation Configuration
NUM_SAMPLES = 200
CYCLE_SECONDS = 90
MIN_GREEN_SECONDS = 10

def synthetic_snapshot(rush_hour: bool) -> dict:
    if rush_hour:
        intensity_1 = random.randint(120, 220)
        intensity_2 = random.randint(60, 160)
        co2 = random.randint(600, 900)
    else:
        intensity_1 = random.randint(10, 90)
        intensity_2 = random.randint(5, 70)
        co2 = random.randint(380, 550)

    return {
        "traffic_intensity_1": intensity_1,
        "traffic_intensity_2": intensity_2,
        "co2_level": co2,
        "light_level_1": random.randint(0, 1000),
        "light_level_2": random.randint(0, 1000),
        "current_green_time_1": CYCLE_SECONDS // 2,
        "current_green_time_2": CYCLE_SECONDS // 2,
        "pedestrian_request_1": random.random() < 0.2,
        "pedestrian_request_2": random.random() < 0.2,
    }

def synthetic_prediction(snapshot: dict) -> dict:
    t1 = snapshot["traffic_intensity_1"]
    t2 = snapshot["traffic_intensity_2"]
    share = t1 / (t1 + t2) if (t1 + t2) > 0 else 0.5
    usable = CYCLE_SECONDS - 2 * MIN_GREEN_SECONDS
    green_1 = MIN_GREEN_SECONDS + round(usable * share)
    return {
        "predicted_traffic_1": t1,
        "predicted_traffic_2": t2,
        "suggested_timing_1": green_1,
        "suggested_timing_2": CYCLE_SECONDS - green_1,
    }

def generate_data(num_samples: int = NUM_SAMPLES, database_url: str = None):
    engine = build_engine(database_url)
    init_db(engine)
    session_factory = build_session_factory(engine)
    traffic = traffic_store(session_factory)
    predictions = prediction_store(session_factory)

    logger.info(f"Generating {num_samples} synthetic traffic snapshots...")
    for _ in range(num_samples):
        snapshot = synthetic_snapshot(rush_hour=random.random() > 0.6)
        traffic.create(snapshot)
        predictions.create(synthetic_prediction(snapshot))

    logger.info(f"Done: {len(traffic.get_all())} traffic records, {len(predictions.get_all())} predictions")

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed synthetic traffic data")
    parser.add_argument("--samples", type=int, default=NUM_SAMPLES)
    parser.add_argument("--config-dir", default="conf")
    args = parser.parse_args()

    cfg = ConfigManager(args.config_dir).load_app_config()
    generate_data(args.samples, cfg.database.url)
