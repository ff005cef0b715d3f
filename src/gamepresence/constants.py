from typing import Final

# Directory created under the platform config dir
APP_DIR_NAME: Final = "game-presence"

# Settings document inside APP_DIR_NAME
CONFIG_FILE_NAME: Final = "config.json"

# Overrides the platform config dir (the value is used as-is, APP_DIR_NAME is not appended)
CONFIG_DIR_ENV: Final = "GAME_PRESENCE_CONFIG_DIR"

# Indentation of the pretty-printed settings document
JSON_INDENT: Final = 2

# Suffix of the scratch file written before the atomic rename
TEMP_SUFFIX: Final = ".tmp"
