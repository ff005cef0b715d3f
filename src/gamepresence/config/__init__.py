"""Persisted settings: the on-disk document and the store that owns it."""

from gamepresence.config.models import (
    Activity,
    Config,
    Games,
    Nintendo,
    NintendoData,
    Playstation,
    PlaystationData,
    Services,
    Steam,
    SteamData,
    Twitch,
    TwitchData,
    Xbox,
    XboxData,
)
from gamepresence.config.store import ConfigStore

__all__ = [
    "Activity",
    "Config",
    "ConfigStore",
    "Games",
    "Nintendo",
    "NintendoData",
    "Playstation",
    "PlaystationData",
    "Services",
    "Steam",
    "SteamData",
    "Twitch",
    "TwitchData",
    "Xbox",
    "XboxData",
]
