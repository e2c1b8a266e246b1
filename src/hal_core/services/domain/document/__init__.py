"""
HAL Document Domain

In-memory resource tree: identity URI, data, relations and embedded resources.
"""

from .document import Document
from .relations import CURIES_REL, RelationIndex

__all__ = ["Document", "RelationIndex", "CURIES_REL"]
