"""
HAL XML to Document Conversion Domain

Handles decoding of application/hal+xml documents into Document trees.
"""

from .converter import decode_xml, document_from_xml, element_to_data

__all__ = ["decode_xml", "document_from_xml", "element_to_data"]
