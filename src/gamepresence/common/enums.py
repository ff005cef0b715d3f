from enum import Enum


class AssetSource(str, Enum):
    """Origins a game's artwork can be fetched from.

    A service's asset priority list is tried in order; the first source
    that yields artwork wins.
    """

    NATIVE = "native"  # the platform's own store/library art
    TWITCH = "twitch"  # Twitch category box art


class ServicePriority(str, Enum):
    """Services that can report presence, used to break ties when more
    than one is active at the same time.

    Twitch is deliberately absent: it only contributes artwork.
    """

    NINTENDO = "nintendo"
    PLAYSTATION = "playstation"
    STEAM = "steam"
    XBOX = "xbox"


class ServiceName(str, Enum):
    """Every integrated service, as named in the settings document."""

    NINTENDO = "nintendo"
    PLAYSTATION = "playstation"
    STEAM = "steam"
    TWITCH = "twitch"
    XBOX = "xbox"
