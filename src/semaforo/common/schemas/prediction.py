from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .fields import ColumnInt

class PredictionCreate(BaseModel):
    """
    Signal timing computed by an external predictor for a traffic intensity pair.
    """
    model_config = ConfigDict(populate_by_name=True)

    predicted_traffic_1: ColumnInt = Field(..., alias="predictedTraffic1", description="Forecast intensity on approach 1")
    predicted_traffic_2: ColumnInt = Field(..., alias="predictedTraffic2", description="Forecast intensity on approach 2")
    suggested_timing_1: ColumnInt = Field(..., alias="suggestedTiming1", description="Recommended green time on approach 1 (s)")
    suggested_timing_2: ColumnInt = Field(..., alias="suggestedTiming2", description="Recommended green time on approach 2 (s)")

class PredictionUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    predicted_traffic_1: Optional[ColumnInt] = Field(None, alias="predictedTraffic1")
    predicted_traffic_2: Optional[ColumnInt] = Field(None, alias="predictedTraffic2")
    suggested_timing_1: Optional[ColumnInt] = Field(None, alias="suggestedTiming1")
    suggested_timing_2: Optional[ColumnInt] = Field(None, alias="suggestedTiming2")

class PredictionRecord(PredictionCreate):
    """
    Stored prediction.
    Corresponds to the prediction table.
    """
    model_config = ConfigDict(populate_by_name=True, from_attributes=True, frozen=True)

    id: int = Field(..., description="Server generated identity")
    created_at: datetime = Field(..., alias="createdAt", description="Insertion instant (UTC)")
