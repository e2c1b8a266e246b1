"""
HAL JSON to Document Conversion Domain

Handles decoding of application/hal+json documents into Document trees.
"""

from .converter import decode_json, document_from_json

__all__ = ["decode_json", "document_from_json"]
