"""Exception classes for settings persistence and state derivation.

Two families live here:

- ConfigError and its subclasses are environment failures (no config
  directory, filesystem errors). They are not recoverable by the settings
  layer and are surfaced to the caller.
- StateValidationError and its subclasses are user-fixable problems in the
  settings document. They identify the offending service and field so the
  UI can point at them.
"""

from __future__ import annotations

from typing import Optional

from gamepresence.common.enums import ServiceName, ServicePriority


class GamePresenceError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message


class ConfigError(GamePresenceError):
    """The settings file could not be located, read or written."""

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        """Initialize with the failure details.

        Args:
            message: Description of the failure
            original_error: The original exception that was caught
        """
        super().__init__(message)
        self.original_error = original_error


class DirectoryResolutionError(ConfigError):
    """Raised when the platform does not provide a config directory."""

    pass


class ConfigIOError(ConfigError):
    """Raised when creating, opening, reading, writing or syncing fails."""

    pass


class SerializationError(ConfigError):
    """Raised when a settings document cannot be serialized."""

    pass


class StateValidationError(GamePresenceError):
    """The settings document cannot be turned into a runtime state.

    Attributes:
        service: Service the problem belongs to, if any
        field: camelCase path of the offending setting
    """

    def __init__(
        self,
        message: str,
        service: Optional[ServiceName] = None,
        field: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.service = service
        self.field = field

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StateValidationError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.message == other.message
            and self.service == other.service
            and self.field == other.field
        )

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.service, self.field))


class MissingCredentialsError(StateValidationError):
    """Raised when an enabled service lacks the credentials it needs."""

    def __init__(self, service: ServiceName, field: Optional[str] = None) -> None:
        super().__init__(
            f"{service.value} is enabled but its credentials are missing",
            service=service,
            field=field or f"services.{service.value}.data",
        )


class EmptyAssetPriorityListError(StateValidationError):
    """Raised when a service has no asset source to fall back on."""

    def __init__(self, service: ServiceName) -> None:
        super().__init__(
            f"{service.value} needs at least one asset source",
            service=service,
            field=f"services.{service.value}.assetsPriorities",
        )


class DuplicatePriorityEntryError(StateValidationError):
    """Raised when a service appears twice in the service priority list."""

    def __init__(self, entry: ServicePriority) -> None:
        super().__init__(
            f"{entry.value} is listed more than once in the service priorities",
            field="activity.servicePriorities",
        )
        self.entry = entry
