#!/usr/bin/env python3
"""
Environment variable helpers.

Values copied out of `.env` files frequently carry CRLF line endings or stray
whitespace; these helpers clean them before conversion and fall back to the
supplied default (with a warning) when a value cannot be converted.
"""

import logging
import os

logger = logging.getLogger(__name__)


def getenv_clean(key: str, default: str | None = None, strip: bool = True) -> str | None:
    """
    Get environment variable with automatic cleaning of line endings and whitespace.

    Args:
        key: Environment variable name
        default: Default value if variable is not set
        strip: If True, strip whitespace and line endings (default: True)

    Returns:
        Cleaned environment variable value, or default if not set

    Example:
        >>> # .env file has: HAL_PRETTY_PRINT=true\r\n
        >>> value = getenv_clean("HAL_PRETTY_PRINT", "false")
        >>> # Returns: "true" (without \r\n)
    """
    raw_value = os.getenv(key, default)

    if raw_value is None:
        return None

    if not strip:
        return raw_value

    cleaned = raw_value.strip()

    if raw_value != cleaned:
        logger.warning(
            f"Environment variable {key} had trailing whitespace/line endings: "
            f"raw={repr(raw_value)}, cleaned={repr(cleaned)}"
        )

    return cleaned


def getenv_bool(key: str, default: bool = False) -> bool:
    """
    Get environment variable as boolean with automatic cleaning.

    - "true", "1", "yes", "on" (any case) → True
    - "false", "0", "no", "off", "" (any case) → False
    - anything else → default, with a warning

    Args:
        key: Environment variable name
        default: Default boolean value if variable is not set

    Returns:
        Boolean value
    """
    raw_value = getenv_clean(key, None)

    if raw_value is None:
        return default

    cleaned_lower = raw_value.lower()
    if cleaned_lower in ("true", "1", "yes", "on"):
        return True
    elif cleaned_lower in ("false", "0", "no", "off", ""):
        return False
    else:
        logger.warning(
            f"Environment variable {key} has unexpected boolean value: {repr(raw_value)}. "
            f"Using default: {default}"
        )
        return default


def getenv_int(key: str, default: int) -> int:
    """
    Get environment variable as integer with automatic cleaning.

    Args:
        key: Environment variable name
        default: Default integer value if variable is not set or invalid

    Returns:
        Integer value
    """
    raw_value = getenv_clean(key, None)

    if raw_value is None:
        return default

    try:
        return int(raw_value)
    except ValueError:
        logger.warning(
            f"Environment variable {key} is not a valid integer: {repr(raw_value)}. "
            f"Using default: {default}"
        )
        return default
