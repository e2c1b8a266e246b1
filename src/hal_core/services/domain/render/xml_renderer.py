#!/usr/bin/env python3
"""Document to application/hal+xml renderer.

Data mappings follow two conventions inside nested values: `@name` keys become
attributes of the enclosing element and a `value` key becomes its text.
Top-level data keys are always child elements of the resource.
"""

import logging
from typing import Any
from xml.etree.ElementTree import Element, SubElement, indent, tostring

from ..document.document import Document
from ..xml_to_document.converter import ATTRIBUTE_MARKER, LINK_TAG, RESOURCE_TAG, VALUE_KEY

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0"?>'


def xml_text(value: Any) -> str:
    """Format a scalar as XML text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class XmlRenderer:
    """Render a Document as HAL XML."""

    def render(self, document: Document, pretty: bool = False) -> str:
        """Return `document` as HAL XML text.

        Args:
            document: Document to render
            pretty: Indent output (whitespace only, never shape)
        """
        root = Element(RESOURCE_TAG)
        self._resource_for_xml(root, document)
        if pretty:
            indent(root, space="  ")
        return f"{XML_DECLARATION}\n{tostring(root, encoding='unicode')}\n"

    def _resource_for_xml(self, elem: Element, document: Document):
        if document.get_uri():
            elem.set("href", document.get_uri())

        self._links_for_xml(elem, document)

        for key, value in document.get_data().items():
            self._value_for_xml(elem, str(key), value)

        for rel, resources in document.get_resources().items():
            for child in resources:
                child_elem = SubElement(elem, RESOURCE_TAG, {"rel": rel})
                if child is not None:
                    self._resource_for_xml(child_elem, child)

    def _links_for_xml(self, elem: Element, document: Document):
        for rel, links in document.get_links().items():
            for link in links:
                link_elem = SubElement(elem, LINK_TAG, {"rel": rel, "href": link.target})
                for name, value in link.attributes.items():
                    link_elem.set(name, xml_text(value))

    def _value_for_xml(self, parent: Element, tag: str, value: Any):
        """Append `value` to `parent` as one or more `tag` elements."""
        if isinstance(value, list):
            for item in value:
                self._value_for_xml(parent, tag, item)
            return

        child = SubElement(parent, tag)
        if isinstance(value, dict):
            self._mapping_for_xml(child, value)
        else:
            child.text = xml_text(value)

    def _mapping_for_xml(self, elem: Element, data: dict[str, Any]):
        for key, value in data.items():
            key = str(key)
            if key.startswith(ATTRIBUTE_MARKER):
                elem.set(key[1:], xml_text(value))
            elif key == VALUE_KEY:
                elem.text = xml_text(value)
            else:
                self._value_for_xml(elem, key, value)
