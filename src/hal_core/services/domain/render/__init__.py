"""
HAL Rendering Domain

Renders Document trees as application/hal+json and application/hal+xml text,
producing the wire shapes the decoders consume.
"""

from .json_renderer import JsonRenderer
from .xml_renderer import XmlRenderer

__all__ = ["JsonRenderer", "XmlRenderer"]
