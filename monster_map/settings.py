"""
Settings Module for Monster Map

Provides persistent storage for user preferences using JSON.
Settings are stored in config.json in the working directory.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "debug_enabled": False,
    "strategy_name": "roughness",
    "input_path": "data/tiles.txt",
    "pattern_path": None,
}


def load_settings(path: Path = SETTINGS_FILE) -> Dict[str, Any]:
    """
    Load settings from config.json.

    Args:
        path: Settings file to read

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    if not path.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings = json.load(f)

        if not isinstance(settings, dict):
            raise ValueError(f"expected a JSON object, got {type(settings).__name__}")

        # Merge with defaults to handle missing keys
        result = DEFAULT_SETTINGS.copy()
        result.update(settings)
        logger.debug(f"Settings loaded: {result}")
        return result

    except (ValueError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()


def save_settings(settings: Dict[str, Any], path: Path = SETTINGS_FILE) -> None:
    """
    Save settings to config.json.

    Args:
        settings: Settings dictionary to save
        path: Settings file to write
    """
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")
