"""Settings persistence and validation for the game-presence application."""

__version__ = "0.1.0"

from gamepresence.config import Config, ConfigStore
from gamepresence.controller import SettingsController
from gamepresence.errors import (
    ConfigError,
    ConfigIOError,
    DirectoryResolutionError,
    DuplicatePriorityEntryError,
    EmptyAssetPriorityListError,
    GamePresenceError,
    MissingCredentialsError,
    SerializationError,
    StateValidationError,
)
from gamepresence.state import State, StateDeriver

__all__ = [
    "Config",
    "ConfigError",
    "ConfigIOError",
    "ConfigStore",
    "DirectoryResolutionError",
    "DuplicatePriorityEntryError",
    "EmptyAssetPriorityListError",
    "GamePresenceError",
    "MissingCredentialsError",
    "SerializationError",
    "SettingsController",
    "State",
    "StateDeriver",
    "StateValidationError",
]
