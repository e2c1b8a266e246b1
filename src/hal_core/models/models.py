#!/usr/bin/env python3

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

# Link attributes that are structural in the wire formats, never attribute data
STRUCTURAL_LINK_KEYS = ("rel", "href")

# Pydantic Models


class LinkRelation(BaseModel):
    """A single navigable relation: target URI plus RFC 5988 link parameters."""

    model_config = ConfigDict(frozen=True)

    target: str
    attributes: dict[str, Any] = {}  # e.g. templated, name, type, hreflang

    @field_validator("attributes")
    @classmethod
    def _no_structural_keys(cls, value: dict[str, Any]) -> dict[str, Any]:
        for key in STRUCTURAL_LINK_KEYS:
            if key in value:
                raise ValueError(f"'{key}' is structural and cannot be a link attribute")
        return dict(value)

    def __str__(self) -> str:
        return self.target
