"""Single in-process owner of the settings.

The controller ties the ConfigStore to the StateDeriver and keeps the most
recent valid State for the rest of the application. Invalid settings never
replace a good state: the problem is logged and kept in ``last_error`` for
the UI, and the previous state (initially empty) stays in effect.
"""

from __future__ import annotations

import logging
from typing import Final

from gamepresence.config.models import Config
from gamepresence.config.store import ConfigStore
from gamepresence.errors import StateValidationError
from gamepresence.state.deriver import StateDeriver
from gamepresence.state.models import State

logger: Final = logging.getLogger(__name__)


class SettingsController:
    """Loads, updates and validates the application settings.

    Examples:
        controller = SettingsController(ConfigStore())
        state = await controller.load()
        if controller.last_error:
            ui.show_settings_problem(controller.last_error)
    """

    def __init__(self, store: ConfigStore | None = None) -> None:
        """Initialize the controller.

        Args:
            store: Store to use (default: one at the platform location)
        """
        self.store = store or ConfigStore()
        self.config: Config = Config.default()
        self.state: State = State.empty()
        self.last_error: StateValidationError | None = None

    async def load(self) -> State:
        """Read the settings from disk and derive the runtime state.

        Returns:
            The new state, or the previous one if the settings are invalid

        Raises:
            ConfigError: If the settings file cannot be read
        """
        config = await self.store.read()
        return self._apply(config)

    async def update(self, config: Config) -> State:
        """Persist edited settings and derive the runtime state.

        The settings are stored even when they do not validate, so the
        user can keep fixing them.

        Args:
            config: Full settings document to store

        Returns:
            The new state, or the previous one if the settings are invalid

        Raises:
            ConfigError: If the settings file cannot be written
        """
        await self.store.write(config)
        return self._apply(config)

    def _apply(self, config: Config) -> State:
        self.config = config.model_copy(deep=True)
        try:
            self.state = StateDeriver.derive(self.config)
        except StateValidationError as err:
            logger.warning("Settings are invalid, keeping previous state: %s", err.message)
            self.last_error = err
        else:
            self.last_error = None
        return self.state
