import pytest

from gamepresence.common.enums import ServiceName, ServicePriority
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


@pytest.mark.parametrize(
    "error_type", [ConfigIOError, DirectoryResolutionError, SerializationError]
)
def test_environment_errors_are_config_errors(error_type: type[ConfigError]) -> None:
    err = error_type("boom")
    assert isinstance(err, ConfigError)
    assert isinstance(err, GamePresenceError)
    assert not isinstance(err, StateValidationError)
    assert str(err) == "boom"
    assert err.original_error is None


def test_config_io_error_wraps_exception() -> None:
    try:
        raise PermissionError("denied")
    except PermissionError as e:
        err = ConfigIOError("Unable to write", original_error=e)
        assert err.message == "Unable to write"
        assert isinstance(err.original_error, OSError)


def test_missing_credentials_message() -> None:
    err = MissingCredentialsError(ServiceName.STEAM)
    assert str(err) == "steam is enabled but its credentials are missing"
    assert err.service is ServiceName.STEAM
    assert err.field == "services.steam.data"


def test_empty_asset_priority_list() -> None:
    err = EmptyAssetPriorityListError(ServiceName.XBOX)
    assert err.service is ServiceName.XBOX
    assert err.field == "services.xbox.assetsPriorities"


def test_duplicate_priority_entry() -> None:
    err = DuplicatePriorityEntryError(ServicePriority.NINTENDO)
    assert err.service is None
    assert err.entry is ServicePriority.NINTENDO
    assert "nintendo" in str(err)


def test_validation_errors_compare_by_value() -> None:
    assert MissingCredentialsError(ServiceName.STEAM) == MissingCredentialsError(ServiceName.STEAM)
    assert MissingCredentialsError(ServiceName.STEAM) != MissingCredentialsError(ServiceName.TWITCH)
    assert EmptyAssetPriorityListError(ServiceName.STEAM) != MissingCredentialsError(
        ServiceName.STEAM
    )
