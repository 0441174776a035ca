# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "gleaning"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_ID_MAP_PATH: Path = DATA_PATH / "id_map.yaml"

# Maximum number of projects that may be ongoing (not finished) at once
ACTIVE_PROJECT_CAP = 9

# Swipe-to-reveal geometry, in pixels of horizontal travel
DRAG_DEADZONE = 15
REVEAL_THRESHOLD = 70
MAX_REVEAL = 180

# Content longer than this (or with more lines than LONG_CONTENT_LINES) is
# collapsed in list views
LONG_CONTENT_LIMIT = 80
LONG_CONTENT_LINES = 3


class Configuration(TypedDict):
    show_header: bool
    data_path: Optional[str]
    log_level: str
    clear_ids_on_view: bool


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "data_path": None,
        "log_level": "WARNING",
        "clear_ids_on_view": True,
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are loaded.
    """
    global DATA_PATH, DATA_ID_MAP_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting)
        DATA_ID_MAP_PATH = DATA_PATH / "id_map.yaml"
