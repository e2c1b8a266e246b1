#!/usr/bin/env python3
"""HAL XML to Document converter.

HAL XML represents a resource as an element whose `href` attribute is the
resource URI. Its `link` children are relations, its `resource` children are
embedded resources and every other child is plain data:

<resource href="/orders">
    <link rel="next" href="/orders?page=2"/>
    <total>2</total>
    <resource rel="order" href="/orders/1">
        <status>shipped</status>
    </resource>
</resource>
"""
from typing import Any

# Use defusedxml for secure XML parsing (prevents XXE attacks)
import defusedxml
import defusedxml.ElementTree as ET

# Import Element type from standard library for type hints
from xml.etree.ElementTree import Element

import logging

from ....core.exceptions import MalformedInputError, MissingRequiredAttributeError
from ..document.document import Document

# Initialize logger for this module
logger = logging.getLogger(__name__)

LINK_TAG = "link"
RESOURCE_TAG = "resource"

# Data conventions shared with the XML renderer
ATTRIBUTE_MARKER = "@"
VALUE_KEY = "value"


def require_attribute(elem: Element, attributes: dict[str, str], name: str) -> str:
    """Pop a required attribute, raising if it is missing.

    Raises:
        MissingRequiredAttributeError: If `name` is not present
    """
    try:
        return attributes.pop(name)
    except KeyError as e:
        logger.warning(f"<{elem.tag}> element is missing required attribute '{name}'")
        raise MissingRequiredAttributeError(elem.tag, name) from e


def element_to_data(elem: Element) -> Any:
    """Convert a data element to plain data.

    Text-only elements become their raw text. Elements with attributes or children
    become mappings: attributes under `@name` keys, children keyed by tag
    (repeated tags collected into lists) and any text under `value`.

    Args:
        elem: Data element

    Returns:
        String or nested mapping
    """
    if not elem.attrib and len(elem) == 0:
        return elem.text or ""

    text = (elem.text or "").strip()

    data: dict[str, Any] = {}
    for name, value in elem.attrib.items():
        data[f"{ATTRIBUTE_MARKER}{name}"] = value

    for key, value in children_to_data(list(elem)).items():
        data[key] = value

    if text:
        data[VALUE_KEY] = text
    return data


def children_to_data(children: list[Element]) -> dict[str, Any]:
    """Convert sibling data elements to a mapping keyed by tag."""
    data: dict[str, Any] = {}
    for child in children:
        value = element_to_data(child)
        if child.tag not in data:
            data[child.tag] = value
        elif isinstance(data[child.tag], list):
            data[child.tag].append(value)
        else:
            data[child.tag] = [data[child.tag], value]
    return data


def decode_xml(root: Element, max_depth: int = 0) -> Document:
    """Build a Document from a parsed HAL XML element.

    Embedded `resource` elements are decoded recursively while `max_depth`
    is positive, one level per decrement. At 0 they are discarded without
    being inspected.

    Args:
        root: Resource element
        max_depth: Embedded levels to expand

    Returns:
        Decoded Document

    Raises:
        MissingRequiredAttributeError: If a link lacks rel/href or an expanded
            resource lacks rel
    """
    links = []
    embedded = []
    data_children = []
    for child in root:
        if child.tag == LINK_TAG:
            links.append(child)
        elif child.tag == RESOURCE_TAG:
            embedded.append(child)
        else:
            data_children.append(child)

    uri = root.get("href", "")
    document = Document(uri, children_to_data(data_children))

    for link in links:
        attributes = dict(link.attrib)
        rel = require_attribute(link, attributes, "rel")
        href = require_attribute(link, attributes, "href")
        document.add_link(rel, href, attributes)

    if max_depth > 0:
        for embed in embedded:
            attributes = dict(embed.attrib)
            rel = require_attribute(embed, attributes, "rel")
            # The child reads its own href as identity during its own decode
            attributes.pop("href", None)
            document.add_resource(rel, decode_xml(embed, max_depth - 1))
    elif embedded:
        logger.debug(f"Depth exhausted, dropping {len(embedded)} embedded resources of {uri!r}")

    return document


def document_from_xml(text: "str | bytes | Element", max_depth: int = 0) -> Document:
    """Decode application/hal+xml text (or an already-parsed element).

    Args:
        text: XML text, or a parsed root element
        max_depth: Embedded levels to expand (0 keeps only the top-level resource)

    Returns:
        Decoded Document

    Raises:
        MalformedInputError: If text is not well-formed XML or uses forbidden
            constructs (entity declarations, external references)
        MissingRequiredAttributeError: If a link/resource lacks a required attribute
    """
    if isinstance(text, Element):
        root = text
    else:
        try:
            root = ET.fromstring(text)
        except ET.ParseError as e:
            logger.warning(f"Invalid HAL XML: {e}")
            raise MalformedInputError(f"Invalid XML: {str(e)}") from e
        except defusedxml.DefusedXmlException as e:
            logger.warning(f"Rejected unsafe HAL XML: {e}")
            raise MalformedInputError(f"Unsafe XML: {str(e)}") from e

    document = decode_xml(root, max_depth)
    logger.debug(
        f"Decoded HAL XML {document.get_uri()!r} with {len(document.get_links())} relations "
        f"(max_depth={max_depth})"
    )
    return document
