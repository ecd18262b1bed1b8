# config_manager.py
import os
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent

config_json = Path(os.environ.get("RPNCALC_CONFIG", PROJECT_ROOT / "config.json"))
ui_strings = PROJECT_ROOT / "ui_strings.json"

DEFAULT_SETTINGS = {
    "darkmode": False,
    "decimal_places": 10,
    "after_paste_enter": False,
    "log_level": "INFO",
}


def _read_json(path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a JSON object", path)
        return {}
    return data


def _valid_setting(key_value, value):
    default = DEFAULT_SETTINGS.get(key_value)
    if default is None:
        return True  # unknown keys are passed through untouched
    # type() rather than isinstance: True must not pass as an int
    if type(value) is not type(default):
        return False
    if key_value == "decimal_places" and value < 0:
        return False
    return True


def load_setting_value(key_value):
    settings_dict = dict(DEFAULT_SETTINGS)

    for key, value in _read_json(config_json).items():
        if _valid_setting(key, value):
            settings_dict[key] = value
        else:
            logger.warning("Invalid value %r for setting %s, using default %r",
                           value, key, DEFAULT_SETTINGS[key])

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def load_setting_description(key_value):
    descriptions = _read_json(ui_strings)

    if key_value == "all":
        return descriptions

    else:
        return descriptions.get(key_value, key_value)


def save_setting(settings_dict):
    try:
        with open(config_json, 'w', encoding='utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            logger.info("Settings saved to %s", config_json)
            return settings_dict

    except (OSError, TypeError) as e:
        logger.error("Settings could not be saved: %s", e)
        return {}
