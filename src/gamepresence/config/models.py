"""Typed models for the persisted settings document (config.json).

The document is user-editable, so nothing here enforces cross-field rules:
any value the JSON schema allows is accepted and round-trips unchanged.
Validation of what the settings *mean* happens in gamepresence.state.

Keys are camelCase on disk and snake_case in Python.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from gamepresence.common.enums import AssetSource, ServicePriority
from gamepresence.constants import JSON_INDENT


def _default_assets() -> list[AssetSource]:
    return [AssetSource.NATIVE]


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# ─────────────────────────── per-service credentials ────────────────────────


class NintendoData(CamelModel):
    username: str | None = None


class PlaystationData(CamelModel):
    username: str | None = None


class SteamData(CamelModel):
    """Steam Web API credentials.

    ``id`` is the 64-bit SteamID of the account to watch and ``key`` the
    Web API key used to query it.
    """

    id: str
    key: str
    username: str


class TwitchData(CamelModel):
    username: str


class XboxData(CamelModel):
    username: str | None = None


# ─────────────────────────── services ────────────────────────────────────────


class Nintendo(CamelModel):
    """Nintendo Switch presence settings.

    ``disclaimer_acknowledged`` records that the user accepted the notice
    shown before the integration can be turned on.
    """

    disclaimer_acknowledged: bool = False
    enabled: bool = False
    assets_priorities: list[AssetSource] = Field(default_factory=_default_assets)
    data: NintendoData | None = None


class Playstation(CamelModel):
    enabled: bool = False
    assets_priorities: list[AssetSource] = Field(default_factory=_default_assets)
    data: PlaystationData | None = None


class Steam(CamelModel):
    enabled: bool = False
    assets_priorities: list[AssetSource] = Field(default_factory=_default_assets)
    data: SteamData | None = None


class Twitch(CamelModel):
    """Twitch is only an artwork source, so it has no asset priorities."""

    enabled: bool = False
    data: TwitchData | None = None


class Xbox(CamelModel):
    enabled: bool = False
    assets_priorities: list[AssetSource] = Field(default_factory=_default_assets)
    data: XboxData | None = None


class Services(CamelModel):
    """One settings slot per integrated service."""

    nintendo: Nintendo = Field(default_factory=Nintendo)
    playstation: Playstation = Field(default_factory=Playstation)
    steam: Steam = Field(default_factory=Steam)
    twitch: Twitch = Field(default_factory=Twitch)
    xbox: Xbox = Field(default_factory=Xbox)


# ─────────────────────────── activity & games ────────────────────────────────


class Activity(CamelModel):
    """Global presence toggles.

    ``service_priorities`` breaks ties when several services report a game
    at the same time; earlier entries win.
    """

    polling_active: bool = False
    discord_display_presence: bool = False
    games_require_whitelisting: bool = False
    service_priorities: list[ServicePriority] = Field(default_factory=list)


class Games(CamelModel):
    """Reserved for per-title overrides."""


# ─────────────────────────── root document ───────────────────────────────────


class Config(CamelModel):
    """Root of the settings document."""

    services: Services = Field(default_factory=Services)
    activity: Activity = Field(default_factory=Activity)
    games: Games = Field(default_factory=Games)

    @classmethod
    def default(cls) -> Config:
        """Settings used on first run and after recovering a corrupt file."""
        return cls()

    def to_json(self) -> str:
        """Serialize as pretty-printed JSON.

        Absent ``data`` records are left out of the document rather than
        written as ``null``.

        Returns:
            JSON text with camelCase keys and lowercase enum tokens
        """
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=JSON_INDENT)

    @classmethod
    def from_json(cls, text: str | bytes) -> Config:
        """Parse a settings document.

        Args:
            text: Raw JSON

        Returns:
            Parsed Config

        Raises:
            pydantic.ValidationError: If the JSON is malformed or does not
                match the schema
        """
        return cls.model_validate_json(text)
