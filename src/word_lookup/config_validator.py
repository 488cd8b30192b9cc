"""
Configuration validation utilities.

Small helpers for reading and checking environment-provided settings.
"""
import os
import warnings
from typing import Optional
from .exceptions import ConfigurationError


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.
    
    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)
    
    if value and _is_placeholder(value):
        # Warn but don't fail for optional configs
        warnings.warn(
            f"{key} appears to be a placeholder. Using default or None.",
            UserWarning
        )
        return default
    
    return value


def parse_float(value: str, key: str, minimum: float = 0.0, maximum: float = 1.0) -> float:
    """
    Parse a bounded float setting.
    
    :param value: Raw string value
    :param key: Setting name (for error messages)
    :param minimum: Lowest accepted value
    :param maximum: Highest accepted value
    :return: Parsed float
    :raises: ConfigurationError if not a number or out of range
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be a number, got {value!r}")
    
    if not minimum <= number <= maximum:
        raise ConfigurationError(
            f"{key} must be between {minimum} and {maximum}, got {number}"
        )
    
    return number


def parse_bool(value: Optional[str]) -> bool:
    """Interpret common truthy strings ("true", "1", "yes", "on")."""
    if value is None:
        return False
    return value.strip().lower() in {"true", "1", "yes", "on"}


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False
    
    placeholder_patterns = [
        "your_",
        "placeholder",
        "replace_me",
        "changeme",
        "xxx",
    ]
    
    value_lower = value.lower()
    return any(pattern in value_lower for pattern in placeholder_patterns)


def validate_path(path: str, path_name: str, must_exist: bool = False) -> str:
    """
    Validate file/directory path.
    
    :param path: Path to validate
    :param path_name: Name of the path (for error messages)
    :param must_exist: Whether path must exist
    :return: Validated path
    :raises: ConfigurationError if invalid
    """
    if not path:
        raise ConfigurationError(f"{path_name} is required.")
    
    if must_exist and not os.path.exists(path):
        raise ConfigurationError(
            f"{path_name} does not exist: {path}\n"
            f"Please check the path and ensure the file exists."
        )
    
    return path
