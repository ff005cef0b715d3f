"""Runtime state derived from the persisted settings."""

from gamepresence.state.deriver import StateDeriver
from gamepresence.state.models import (
    ActivityState,
    GamesState,
    NintendoState,
    PlaystationState,
    ServicesState,
    State,
    SteamState,
    XboxState,
)

__all__ = [
    "ActivityState",
    "GamesState",
    "NintendoState",
    "PlaystationState",
    "ServicesState",
    "State",
    "StateDeriver",
    "SteamState",
    "XboxState",
]
