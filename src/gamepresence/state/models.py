"""Validated runtime view of the settings.

These records are only ever produced by StateDeriver from a Config. They are
frozen: when the settings change a new State is derived instead of editing
the current one. A service that is disabled has no record at all.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from gamepresence.common.enums import AssetSource, ServicePriority


@dataclass(frozen=True)
class NintendoState:
    enabled: bool = True
    username: str | None = None
    assets_priorities: tuple[AssetSource, ...] = (AssetSource.NATIVE,)


@dataclass(frozen=True)
class PlaystationState:
    enabled: bool = True
    username: str | None = None
    assets_priorities: tuple[AssetSource, ...] = (AssetSource.NATIVE,)


@dataclass(frozen=True)
class SteamState:
    """An enabled Steam account with usable Web API credentials."""

    id: str
    key: str
    username: str
    enabled: bool = True
    assets_priorities: tuple[AssetSource, ...] = (AssetSource.NATIVE,)


@dataclass(frozen=True)
class XboxState:
    enabled: bool = True
    username: str | None = None
    assets_priorities: tuple[AssetSource, ...] = (AssetSource.NATIVE,)


@dataclass(frozen=True)
class ServicesState:
    """Active presence sources; ``None`` means the service is off."""

    nintendo: NintendoState | None = None
    playstation: PlaystationState | None = None
    steam: SteamState | None = None
    xbox: XboxState | None = None


@dataclass(frozen=True)
class ActivityState:
    discord_display_presence: bool = False
    twitch_assets_enabled: bool = False
    games_require_whitelisting: bool = False
    polling_active: bool = False
    service_priorities: tuple[ServicePriority, ...] = ()


@dataclass(frozen=True)
class GamesState:
    """Reserved for per-title overrides."""


@dataclass(frozen=True)
class State:
    """Everything the pollers and the presence publisher need to know."""

    services: ServicesState = field(default_factory=ServicesState)
    activity: ActivityState = field(default_factory=ActivityState)
    games: GamesState = field(default_factory=GamesState)

    @classmethod
    def empty(cls) -> State:
        """State with every service off, used until settings validate."""
        return cls()

    def enabled_services(self) -> list[ServicePriority]:
        """Names of the services that have an active record."""
        return [
            service
            for service in ServicePriority
            if getattr(self.services, service.value) is not None
        ]
