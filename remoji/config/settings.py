"""Configuration utilities for remoji."""

import os
from pathlib import Path
from typing import Optional, Tuple

from remoji.exceptions import ConfigurationError

from .constants import (
    CACHE_FILENAME,
    EMOJI_TABLE_URL,
    ENV_VAR_DEFINITIONS,
    REMOJI_DATA_DIR,
)


def get_data_dir() -> Path:
    """Get the remoji data directory, respecting REMOJI_HOME."""
    home = os.environ.get("REMOJI_HOME")
    if home:
        return Path(home)
    return REMOJI_DATA_DIR


def get_cache_path() -> Path:
    """Get the emoji cache path, respecting REMOJI_CACHE_FILE.

    When running tests, set REMOJI_CACHE_FILE to a temp file path to keep
    tests away from the real cache.
    """
    cache_file = os.environ.get("REMOJI_CACHE_FILE")
    if cache_file:
        return Path(cache_file)
    return get_data_dir() / CACHE_FILENAME


def get_table_url() -> str:
    """Get the URL of the HTML emoji table to import from."""
    return get_env_var("REMOJI_EMOJI_TABLE_URL") or EMOJI_TABLE_URL


def validate_env_var(name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """Validate a single environment variable value.

    Args:
        name: The environment variable name.
        value: The current value (or None if not set).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS:
        return True, None  # Unknown vars are always valid

    valid_values = ENV_VAR_DEFINITIONS[name].get("valid_values")

    # Unset, or free-form: nothing to check
    if value is None or valid_values is None:
        return True, None

    if value.lower() not in [v.lower() for v in valid_values]:
        return False, f"Invalid value '{value}' for {name}. Valid values: {valid_values}"

    return True, None


def get_env_var(name: str, validate: bool = True) -> Optional[str]:
    """Get an environment variable with optional validation.

    Args:
        name: The environment variable name.
        validate: Whether to validate the value against known definitions.

    Returns:
        The environment variable value, or its default if not set.

    Raises:
        ConfigurationError: If validate=True and the value is invalid.
    """
    value = os.environ.get(name)

    if validate and value is not None:
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            raise ConfigurationError(error, setting=name)

    if value is None and name in ENV_VAR_DEFINITIONS:
        return ENV_VAR_DEFINITIONS[name].get("default")

    return value
