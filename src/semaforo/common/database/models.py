from datetime import datetime, timezone
from sqlalchemy import Column, Integer, Boolean, DateTime, Index
from .database import Base

def utcnow() -> datetime:
    # Naive UTC: sqlite drops tzinfo, so every backend stores the same shape
    return datetime.now(timezone.utc).replace(tzinfo=None)

# --- Sensor snapshots ---

class TrafficDB(Base):
    __tablename__ = "traffic"

    id = Column(Integer, primary_key=True, autoincrement=True)
    traffic_intensity_1 = Column("trafficIntensity1", Integer, nullable=False)
    traffic_intensity_2 = Column("trafficIntensity2", Integer, nullable=False)
    co2_level = Column("co2Level", Integer, nullable=False)
    light_level_1 = Column("lightLevel1", Integer, nullable=False)
    light_level_2 = Column("lightLevel2", Integer, nullable=False)
    current_green_time_1 = Column("currentGreenTime1", Integer, nullable=False)
    current_green_time_2 = Column("currentGreenTime2", Integer, nullable=False)
    pedestrian_request_1 = Column("pedestrianRequest1", Boolean, nullable=False)
    pedestrian_request_2 = Column("pedestrianRequest2", Boolean, nullable=False)
    created_at = Column("createdAt", DateTime, nullable=False, default=utcnow, index=True)

    # Keeps sqlite from reusing the ids of deleted rows
    __table_args__ = {"sqlite_autoincrement": True}

# --- Signal timing predictions ---

class PredictionDB(Base):
    __tablename__ = "prediction"

    id = Column(Integer, primary_key=True, autoincrement=True)
    predicted_traffic_1 = Column("predictedTraffic1", Integer, nullable=False)
    predicted_traffic_2 = Column("predictedTraffic2", Integer, nullable=False)
    suggested_timing_1 = Column("suggestedTiming1", Integer, nullable=False)
    suggested_timing_2 = Column("suggestedTiming2", Integer, nullable=False)
    created_at = Column("createdAt", DateTime, nullable=False, default=utcnow, index=True)

    __table_args__ = (
        Index("idx_prediction_traffic", predicted_traffic_1, predicted_traffic_2),
        {"sqlite_autoincrement": True},
    )
