from dataclasses import dataclass, field, is_dataclass
from pathlib import Path
import sys
import tomllib
from typing import Any, TypeVar

from loguru import logger

# --- Constants ---
APP_NAME = "rollingbuffer"
if sys.platform == "win32":
    CONFIG_DIR = Path.home() / "AppData" / "Roaming" / APP_NAME
else:
    CONFIG_DIR = Path.home() / ".config" / APP_NAME

CONFIG_FILE = CONFIG_DIR / "config.toml"

T = TypeVar("T")


# --- Dataclass Models for Settings ---


@dataclass
class GeneralSettings:
    """Logging settings."""

    log_level_console: str = "INFO"
    log_level_file: str = "DEBUG"
    log_directory: str | None = None


@dataclass
class DemoSettings:
    """Settings for the demo driver."""

    capacity: int = 20
    samples: int = 40
    show_lazy: bool = True


@dataclass
class Settings:
    """Root container for all settings."""

    general: GeneralSettings = field(default_factory=GeneralSettings)
    demo: DemoSettings = field(default_factory=DemoSettings)


def field_names(dc_instance: Any) -> list[str]:
    """Helper to get field names from a dataclass instance."""
    return [f.name for f in dc_instance.__dataclass_fields__.values()]


def _value_matches(current: Any, new: Any) -> bool:
    """Checks a config value against the type of the field's current value."""
    if current is None:
        # Optional string fields default to None.
        return isinstance(new, str)
    if isinstance(new, bool) != isinstance(current, bool):
        return False
    return isinstance(new, type(current))


def _update_dataclass(dc_instance: T, data: dict[str, Any]) -> T:
    """Recursively updates a dataclass instance from a dictionary.

    Keys that do not name a field are ignored, as are values whose type does
    not match the field's default.
    """
    for f in field_names(dc_instance):
        if f not in data:
            continue
        field_value = getattr(dc_instance, f)
        if is_dataclass(field_value):
            if isinstance(data[f], dict):
                _update_dataclass(field_value, data[f])
            else:
                logger.warning(f"Ignoring non-table value for section '{f}'.")
        elif _value_matches(field_value, data[f]):
            setattr(dc_instance, f, data[f])
        else:
            logger.warning(
                f"Ignoring '{f}' = {data[f]!r}: expected "
                f"{type(field_value).__name__ if field_value is not None else 'str'}."
            )
    return dc_instance


def load_config(path: Path = CONFIG_FILE) -> Settings:
    """Loads settings from a TOML file, merging them with defaults.

    A missing or unreadable file is not an error; the defaults are returned.

    Args:
        path: The path to the configuration file.

    Returns:
        A populated Settings object.
    """
    settings_obj = Settings()

    if not path.exists():
        logger.debug(f"No configuration file at '{path}'; using defaults.")
        return settings_obj

    logger.info(f"Loading configuration from '{path}'...")
    try:
        with path.open("rb") as f:
            user_config = tomllib.load(f)
        _update_dataclass(settings_obj, user_config)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Error decoding TOML from '{path}': {e}")
        logger.warning("Using default settings due to configuration error.")
        return Settings()
    except OSError as e:
        logger.error(f"Could not read configuration file '{path}': {e}")
        logger.warning("Using default settings due to configuration error.")
        return Settings()

    logger.success("Successfully loaded user configuration.")
    return settings_obj
