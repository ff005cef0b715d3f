import pytest
from pathlib import Path

from gamepresence.config import Config, ConfigStore, SteamData


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Settings file inside a directory that does not exist yet."""
    return tmp_path / "profile" / "game-presence" / "config.json"


@pytest.fixture
def store(config_path: Path) -> ConfigStore:
    return ConfigStore(config_path)


@pytest.fixture
def steam_config() -> Config:
    """Settings with a fully configured Steam account."""
    config = Config.default()
    config.services.steam.enabled = True
    config.services.steam.data = SteamData(id="1", key="k", username="u")
    return config
