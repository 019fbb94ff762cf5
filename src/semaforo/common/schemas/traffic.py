from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .fields import ColumnInt

class TrafficCreate(BaseModel):
    """
    Sensor snapshot reported for both approaches of the intersection.
    """
    model_config = ConfigDict(populate_by_name=True)

    traffic_intensity_1: ColumnInt = Field(..., alias="trafficIntensity1", description="Vehicle flow on approach 1")
    traffic_intensity_2: ColumnInt = Field(..., alias="trafficIntensity2", description="Vehicle flow on approach 2")
    co2_level: ColumnInt = Field(..., alias="co2Level", description="Ambient CO2 reading")
    light_level_1: ColumnInt = Field(..., alias="lightLevel1", description="Ambient light on approach 1")
    light_level_2: ColumnInt = Field(..., alias="lightLevel2", description="Ambient light on approach 2")
    current_green_time_1: ColumnInt = Field(..., alias="currentGreenTime1", description="Active green time on approach 1 (s)")
    current_green_time_2: ColumnInt = Field(..., alias="currentGreenTime2", description="Active green time on approach 2 (s)")
    pedestrian_request_1: bool = Field(..., alias="pedestrianRequest1", description="Pending crossing request on approach 1")
    pedestrian_request_2: bool = Field(..., alias="pedestrianRequest2", description="Pending crossing request on approach 2")

class TrafficUpdate(BaseModel):
    """
    Partial update; only the fields sent are applied.
    """
    model_config = ConfigDict(populate_by_name=True)

    traffic_intensity_1: Optional[ColumnInt] = Field(None, alias="trafficIntensity1")
    traffic_intensity_2: Optional[ColumnInt] = Field(None, alias="trafficIntensity2")
    co2_level: Optional[ColumnInt] = Field(None, alias="co2Level")
    light_level_1: Optional[ColumnInt] = Field(None, alias="lightLevel1")
    light_level_2: Optional[ColumnInt] = Field(None, alias="lightLevel2")
    current_green_time_1: Optional[ColumnInt] = Field(None, alias="currentGreenTime1")
    current_green_time_2: Optional[ColumnInt] = Field(None, alias="currentGreenTime2")
    pedestrian_request_1: Optional[bool] = Field(None, alias="pedestrianRequest1")
    pedestrian_request_2: Optional[bool] = Field(None, alias="pedestrianRequest2")

class TrafficRecord(TrafficCreate):
    """
    Stored sensor snapshot.
    Corresponds to the traffic table.
    """
    model_config = ConfigDict(populate_by_name=True, from_attributes=True, frozen=True)

    id: int = Field(..., description="Server generated identity")
    created_at: datetime = Field(..., alias="createdAt", description="Insertion instant (UTC)")
