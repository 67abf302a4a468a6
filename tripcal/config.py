"""Configuration file management for tripcal."""

import os
import tomllib
from datetime import date, datetime
from pathlib import Path
from typing import Any

import tomli_w

from tripcal.dates import parse_date_from_api
from tripcal.domain.models import CalendarConfig, check_weekday


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "tripcal" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = {
        "calendar": {
            "first_day_of_week": 0,
            "disable_past_dates": True,
            "show_adjacent_months": True,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(default_config, f)

    os.chmod(config_path, 0o600)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def _bound(calendar: dict[str, Any], key: str) -> date | None:
    # TOML has native dates; strings are accepted in API format too
    value = calendar.get(key)
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        parsed = parse_date_from_api(value)
        if parsed is not None:
            return parsed
    raise ValueError(f"Invalid {key} in config: {value!r}")


def _flag(calendar: dict[str, Any], key: str, default: bool) -> bool:
    value = calendar.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"Invalid {key} in config: {value!r} (expected true or false)")
    return value


def calendar_config_from_dict(config: dict[str, Any]) -> CalendarConfig:
    """Build a CalendarConfig from the [calendar] table of a config dictionary.

    Args:
        config: Configuration dictionary as returned by load_config.

    Returns:
        CalendarConfig with defaults for missing keys.

    Raises:
        ValueError: If a value has the wrong type or is out of range.
    """
    calendar = config.get("calendar", {})
    if not isinstance(calendar, dict):
        raise ValueError("Invalid calendar section in config")

    return CalendarConfig(
        min_date=_bound(calendar, "min_date"),
        max_date=_bound(calendar, "max_date"),
        disable_past_dates=_flag(calendar, "disable_past_dates", True),
        show_adjacent_months=_flag(calendar, "show_adjacent_months", True),
        first_day_of_week=check_weekday(calendar.get("first_day_of_week", 0)),
    )


def load_calendar_config(config_path: Path | None = None) -> CalendarConfig:
    """Load calendar defaults, falling back to built-in defaults.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        CalendarConfig from the config file, or defaults if it doesn't exist.

    Raises:
        ValueError: If the config file contains invalid values.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return CalendarConfig()

    try:
        return calendar_config_from_dict(load_config(config_path))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Could not parse {config_path}: {e}") from e
