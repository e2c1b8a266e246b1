"""
HAL document model with JSON and XML codecs.

Builds `application/hal+json` and `application/hal+xml` representations from an
in-memory resource tree and decodes them back, expanding embedded resources
to a caller-supplied depth.
"""

from .core.exceptions import (
    HalError,
    MalformedInputError,
    MissingRequiredAttributeError,
    ReservedKeyError,
)
from .models.models import LinkRelation
from .services.domain.document import Document, RelationIndex
from .services.domain.json_to_document import decode_json, document_from_json
from .services.domain.render import JsonRenderer, XmlRenderer
from .services.domain.xml_to_document import decode_xml, document_from_xml

__all__ = [
    "Document",
    "RelationIndex",
    "LinkRelation",
    "decode_json",
    "document_from_json",
    "decode_xml",
    "document_from_xml",
    "JsonRenderer",
    "XmlRenderer",
    "HalError",
    "MalformedInputError",
    "MissingRequiredAttributeError",
    "ReservedKeyError",
]
