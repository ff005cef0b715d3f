import asyncio
from pathlib import Path

from gamepresence.common.enums import ServicePriority
from gamepresence.config import Config, ConfigStore
from gamepresence.controller import SettingsController
from gamepresence.errors import MissingCredentialsError
from gamepresence.state import State


def test_load_first_run(store: ConfigStore, config_path: Path) -> None:
    controller = SettingsController(store)

    state = asyncio.run(controller.load())

    assert state == State.empty()
    assert controller.config == Config.default()
    assert controller.last_error is None
    assert config_path.is_file()


def test_update_persists_and_derives(store: ConfigStore, steam_config: Config) -> None:
    controller = SettingsController(store)

    async def scenario() -> Config:
        await controller.load()
        await controller.update(steam_config)
        return await store.read()

    assert asyncio.run(scenario()) == steam_config
    assert controller.state.enabled_services() == [ServicePriority.STEAM]


def test_invalid_update_keeps_previous_state(store: ConfigStore, steam_config: Config) -> None:
    controller = SettingsController(store)
    broken = steam_config.model_copy(deep=True)
    broken.services.steam.data = None

    async def scenario() -> State:
        good = await controller.update(steam_config)
        kept = await controller.update(broken)
        assert kept is good
        return kept

    state = asyncio.run(scenario())

    assert state.services.steam is not None
    assert isinstance(controller.last_error, MissingCredentialsError)
    # the edited settings are still saved so the user can fix them
    assert controller.config == broken
    assert Config.from_json(store.path.read_text(encoding="utf-8")) == broken


def test_invalid_settings_on_startup_give_empty_state(
    store: ConfigStore, config_path: Path
) -> None:
    config_path.parent.mkdir(parents=True)
    config_path.write_text('{"services": {"steam": {"enabled": true}}}', encoding="utf-8")
    controller = SettingsController(store)

    state = asyncio.run(controller.load())

    assert state == State.empty()
    assert controller.last_error is not None
    assert controller.last_error.field == "services.steam.data"


def test_error_is_cleared_after_fix(store: ConfigStore, steam_config: Config) -> None:
    controller = SettingsController(store)
    broken = Config.default()
    broken.activity.service_priorities = [ServicePriority.XBOX, ServicePriority.XBOX]

    async def scenario() -> None:
        await controller.update(broken)
        assert controller.last_error is not None
        await controller.update(steam_config)

    asyncio.run(scenario())

    assert controller.last_error is None
    assert controller.state.services.steam is not None


def test_config_is_not_shared_with_caller(store: ConfigStore, steam_config: Config) -> None:
    controller = SettingsController(store)
    asyncio.run(controller.update(steam_config))

    steam_config.services.steam.enabled = False

    assert controller.config.services.steam.enabled is True
    assert Config.from_json(store.path.read_text(encoding="utf-8")) == controller.config
