#!/usr/bin/env python3
"""Errors raised while building or decoding HAL documents."""


class HalError(Exception):
    """Base class for all HAL document errors."""
    pass


class MalformedInputError(HalError, ValueError):
    """Raised when a JSON or XML payload cannot be parsed into a document."""
    pass


class MissingRequiredAttributeError(HalError, KeyError):
    """Raised when a link or embedded resource lacks `rel` or `href`."""

    def __init__(self, element: str, attribute: str):
        self.element = element
        self.attribute = attribute
        super().__init__(f"<{element}> is missing required attribute '{attribute}'")

    def __str__(self) -> str:
        # KeyError quotes its message otherwise
        return self.args[0]


class ReservedKeyError(HalError, ValueError):
    """Raised when resource data carries the reserved `_links` or `_embedded` keys."""
    pass
