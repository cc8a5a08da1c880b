from pydantic import BaseModel, Field
from typing import Any, List, Optional, Union


class WeatherEvent(BaseModel):
    """The current weather event in the shape the dashboard renders"""

    name: str = Field(..., alias="Name")
    display_name: str = Field(..., alias="DisplayName")
    image: str = Field(..., alias="Image")
    description: str = Field(..., alias="Description")
    last_seen: Union[int, float] = Field(..., alias="LastSeen")
    start_timestamp_unix: Union[int, float]
    end_timestamp_unix: Union[int, float]
    active: bool = False
    duration: int = 3600

    model_config = {"populate_by_name": True}


class EventsResponse(BaseModel):
    """Weather feed; ``events`` and ``nextEvent`` are never populated by the upstream"""

    events: List[Any] = Field(default_factory=list)
    last_seen_events: List[WeatherEvent] = Field(default_factory=list, alias="lastSeenEvents")
    next_event: Optional[Any] = Field(None, alias="nextEvent")
    timestamp: str

    model_config = {"populate_by_name": True}
