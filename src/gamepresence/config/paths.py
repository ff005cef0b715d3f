"""Platform-specific location of the settings file.

Resolution order:
    1. GAME_PRESENCE_CONFIG_DIR environment variable (used verbatim)
    2. Windows: %APPDATA%\\game-presence
    3. macOS: ~/Library/Application Support/game-presence
    4. Other POSIX: $XDG_CONFIG_HOME/game-presence or ~/.config/game-presence
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Final

from gamepresence.constants import APP_DIR_NAME, CONFIG_DIR_ENV, CONFIG_FILE_NAME
from gamepresence.errors import DirectoryResolutionError

IS_WINDOWS: Final[bool] = sys.platform == "win32"
IS_MACOS: Final[bool] = sys.platform == "darwin"


def _home() -> Path:
    try:
        return Path.home()
    except (KeyError, RuntimeError) as exc:
        raise DirectoryResolutionError(
            "Unable to determine the home directory", original_error=exc
        ) from exc


def platform_config_base() -> Path:
    """Get the per-user configuration directory of the current platform.

    Returns:
        Base directory applications store their settings in

    Raises:
        DirectoryResolutionError: If the platform does not provide one
    """
    if IS_WINDOWS:
        appdata = os.environ.get("APPDATA")
        if not appdata:
            raise DirectoryResolutionError("APPDATA is not set")
        return Path(appdata)

    if IS_MACOS:
        return _home() / "Library" / "Application Support"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    # relative XDG_CONFIG_HOME values must be ignored
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    return _home() / ".config"


def config_dir() -> Path:
    """Directory holding the settings document."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return platform_config_base() / APP_DIR_NAME


def config_file() -> Path:
    """Full path of the settings document."""
    return config_dir() / CONFIG_FILE_NAME
