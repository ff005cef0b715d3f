"""Derivation of the runtime State from the persisted Config.

Rules:
- A service gets a runtime record only when it is enabled.
- Steam and Twitch cannot be enabled without their credentials.
- Every service that has an asset priority list needs at least one entry,
  whether or not it is enabled.
- The activity service priority list may be empty or name disabled
  services, but may not repeat an entry.

Checks run in a fixed order (services as listed in the document, then
activity) and the first failure is raised, so the same Config always gives
the same State or the same error.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Final

from gamepresence.common.enums import AssetSource, ServiceName, ServicePriority
from gamepresence.config.models import (
    Activity,
    Config,
    Nintendo,
    Playstation,
    Services,
    Steam,
    Twitch,
    Xbox,
)
from gamepresence.errors import (
    DuplicatePriorityEntryError,
    EmptyAssetPriorityListError,
    MissingCredentialsError,
)
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

logger: Final = logging.getLogger(__name__)


class StateDeriver:
    """Validates a Config and projects it onto a State.

    Stateless; every method is pure.

    Examples:
        config = await store.read()
        try:
            state = StateDeriver.derive(config)
        except StateValidationError as err:
            show_settings_problem(err.field, err.message)
    """

    @classmethod
    def derive(cls, config: Config) -> State:
        """Build the runtime state for a settings document.

        Args:
            config: Settings as read from disk

        Returns:
            Validated runtime state

        Raises:
            MissingCredentialsError: An enabled service lacks credentials
            EmptyAssetPriorityListError: A service has no asset source
            DuplicatePriorityEntryError: A service priority is repeated
        """
        services = cls.derive_services(config.services)
        activity = cls.derive_activity(config.activity, config.services.twitch)
        state = State(services=services, activity=activity, games=GamesState())
        logger.debug(
            "Derived state with services: %s",
            ", ".join(s.value for s in state.enabled_services()) or "none",
        )
        return state

    @classmethod
    def derive_services(cls, services: Services) -> ServicesState:
        nintendo = cls._nintendo(services.nintendo)
        playstation = cls._playstation(services.playstation)
        steam = cls._steam(services.steam)
        cls._twitch(services.twitch)
        xbox = cls._xbox(services.xbox)
        return ServicesState(
            nintendo=nintendo,
            playstation=playstation,
            steam=steam,
            xbox=xbox,
        )

    @staticmethod
    def derive_activity(activity: Activity, twitch: Twitch) -> ActivityState:
        seen: set[ServicePriority] = set()
        for entry in activity.service_priorities:
            if entry in seen:
                raise DuplicatePriorityEntryError(entry)
            seen.add(entry)

        return ActivityState(
            discord_display_presence=activity.discord_display_presence,
            twitch_assets_enabled=twitch.enabled,
            games_require_whitelisting=activity.games_require_whitelisting,
            polling_active=activity.polling_active,
            service_priorities=tuple(activity.service_priorities),
        )

    # ---- per-service rules ----
    @staticmethod
    def _assets(service: ServiceName, entries: Sequence[AssetSource]) -> tuple[AssetSource, ...]:
        if not entries:
            raise EmptyAssetPriorityListError(service)
        return tuple(entries)

    @classmethod
    def _nintendo(cls, nintendo: Nintendo) -> NintendoState | None:
        assets = cls._assets(ServiceName.NINTENDO, nintendo.assets_priorities)
        if not nintendo.enabled:
            return None
        username = nintendo.data.username if nintendo.data else None
        return NintendoState(username=username, assets_priorities=assets)

    @classmethod
    def _playstation(cls, playstation: Playstation) -> PlaystationState | None:
        assets = cls._assets(ServiceName.PLAYSTATION, playstation.assets_priorities)
        if not playstation.enabled:
            return None
        username = playstation.data.username if playstation.data else None
        return PlaystationState(username=username, assets_priorities=assets)

    @classmethod
    def _steam(cls, steam: Steam) -> SteamState | None:
        assets = cls._assets(ServiceName.STEAM, steam.assets_priorities)
        if not steam.enabled:
            return None
        if steam.data is None:
            raise MissingCredentialsError(ServiceName.STEAM)
        # blank strings are what the settings form leaves behind
        if not steam.data.id.strip():
            raise MissingCredentialsError(ServiceName.STEAM, "services.steam.data.id")
        if not steam.data.key.strip():
            raise MissingCredentialsError(ServiceName.STEAM, "services.steam.data.key")
        return SteamState(
            id=steam.data.id,
            key=steam.data.key,
            username=steam.data.username,
            assets_priorities=assets,
        )

    @staticmethod
    def _twitch(twitch: Twitch) -> None:
        if not twitch.enabled:
            return
        if twitch.data is None:
            raise MissingCredentialsError(ServiceName.TWITCH)
        if not twitch.data.username.strip():
            raise MissingCredentialsError(ServiceName.TWITCH, "services.twitch.data.username")

    @classmethod
    def _xbox(cls, xbox: Xbox) -> XboxState | None:
        assets = cls._assets(ServiceName.XBOX, xbox.assets_priorities)
        if not xbox.enabled:
            return None
        username = xbox.data.username if xbox.data else None
        return XboxState(username=username, assets_priorities=assets)
