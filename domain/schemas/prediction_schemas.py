from pydantic import BaseModel, Field
from typing import Any, List, Optional

from domain.enums import PredictionMode


class ItemPredictionError(BaseModel):
    """Empty item prediction returned when the upstream cannot answer"""

    item: str
    prediction_mode: PredictionMode = PredictionMode.ERROR
    next_occurrences: List[Any] = Field(default_factory=list)
    cycle_probabilities: List[Any] = Field(default_factory=list)
    confidence_windows: List[Any] = Field(default_factory=list)
    error: str


class WeatherPredictionError(BaseModel):
    """Empty weather prediction returned when every name variant failed"""

    weather: str
    prediction_mode: PredictionMode = PredictionMode.ERROR
    next_occurrences: List[Any] = Field(default_factory=list)
    time_window_probabilities: List[Any] = Field(default_factory=list)
    confidence_windows: List[Any] = Field(default_factory=list)
    error: str
    suggestion: Optional[str] = None
