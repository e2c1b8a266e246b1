"""
Domain Layer

This package contains the HAL document model and its codecs. Codecs work on
text or already-parsed trees and never perform I/O.

Domains:
- document: Document tree and CURIE-aware relation index
- json_to_document: application/hal+json decoding
- xml_to_document: application/hal+xml decoding
- render: Document to JSON/XML text
"""
