#!/usr/bin/env python3
"""
Configuration defaults for decoding and rendering HAL documents.

Every value can be overridden via environment variables. Values are read when
a `HalConfig` is instantiated, so tests can patch the environment and build a
fresh instance.
"""

import logging

from .env_utils import getenv_bool, getenv_clean, getenv_int

logger = logging.getLogger(__name__)


class HalConfig:
    """Decode/render defaults.

    DEFAULT_MAX_DEPTH: embedded levels expanded when a caller does not pass
        a depth. 0 keeps only the top-level resource.
    PRETTY_PRINT: whether renderers indent output when a caller does not say.
    JSON_INDENT: indent width used for pretty JSON.
    LOG_LEVEL: root level installed by `setup_logging`.
    """

    def __init__(self):
        self.DEFAULT_MAX_DEPTH = getenv_int("HAL_DEFAULT_MAX_DEPTH", 0)
        if self.DEFAULT_MAX_DEPTH < 0:
            logger.warning(
                f"HAL_DEFAULT_MAX_DEPTH must not be negative, got {self.DEFAULT_MAX_DEPTH}. Using 0"
            )
            self.DEFAULT_MAX_DEPTH = 0

        self.PRETTY_PRINT = getenv_bool("HAL_PRETTY_PRINT", False)
        self.JSON_INDENT = getenv_int("HAL_JSON_INDENT", 4)
        self.LOG_LEVEL = (getenv_clean("HAL_LOG_LEVEL", "INFO") or "INFO").upper()

    def resolve_max_depth(self, max_depth: int | None) -> int:
        """Return `max_depth`, or the configured default when it is None."""
        if max_depth is None:
            return self.DEFAULT_MAX_DEPTH
        return max_depth

    def resolve_pretty(self, pretty: bool | None) -> bool:
        """Return `pretty`, or the configured default when it is None."""
        if pretty is None:
            return self.PRETTY_PRINT
        return pretty


# Singleton instance
hal_config = HalConfig()
