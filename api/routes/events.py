"""Weather event proxy routes"""

from fastapi import APIRouter

from domain.enums import Game
from domain.schemas.event_schemas import EventsResponse
from services import EventsService

router = APIRouter(prefix="/proxy/events", tags=["Events"])


@router.get("", response_model=EventsResponse)
def get_events():
    """Current weather event; an empty feed when the upstream is down."""
    return EventsService.get_events(Game.GROW_A_GARDEN.value)


@router.get("/{game}", response_model=EventsResponse)
def get_game_events(game: str):
    return EventsService.get_events(game)
