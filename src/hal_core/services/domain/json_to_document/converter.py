#!/usr/bin/env python3
"""HAL JSON to Document converter.

This module decodes application/hal+json into Document trees. HAL JSON keeps
links and embedded resources under two reserved keys; everything else is
plain resource data:

{
  "total": 2,
  "_links": {
    "self": {"href": "/orders"},
    "curies": [{"name": "acme", "href": "http://example.com/rels/{rel}", "templated": true}],
    "acme:item": [{"href": "/orders/1"}, {"href": "/orders/2"}]
  },
  "_embedded": {
    "acme:order": {"_links": {"self": {"href": "/orders/1"}}, "status": "shipped"}
  }
}

A relation (link or embedded) is either a single object or a list of objects;
both shapes are normalised to lists here so that the Document never sees the
difference.
"""
import json
import logging
from typing import Any

from ....core.exceptions import MalformedInputError, MissingRequiredAttributeError
from ..document.document import EMBEDDED_KEY, LINKS_KEY, Document

logger = logging.getLogger(__name__)

SELF_REL = "self"

# Link object keys that never become link attributes
DROPPED_LINK_KEYS = ("href", "title", "rel")


def as_list(value: Any) -> list[Any]:
    """Normalise a one-or-many relation value to a list.

    Args:
        value: A single object (or null) or a list of objects

    Returns:
        The list itself, or a one-element list wrapping a single value
    """
    if isinstance(value, list):
        return value
    return [value]


def extract_identity(links: dict[str, Any]) -> str:
    """Read the resource URI from the self link, defaulting to an empty string."""
    self_link = links.get(SELF_REL)
    if isinstance(self_link, list):
        self_link = self_link[0] if self_link else None
    if isinstance(self_link, dict):
        href = self_link.get("href")
        return href if isinstance(href, str) else ""
    return ""


def extract_link(rel: str, link: Any) -> tuple[str, dict[str, Any]]:
    """Split a HAL link object into its target and attributes.

    Args:
        rel: Relation name (for error reporting)
        link: Link object such as {"href": "...", "title": "...", "type": "text/html"}

    Returns:
        Tuple of (href, attributes) where attributes exclude href, title and rel

    Raises:
        MissingRequiredAttributeError: If the link has no string href
    """
    if not isinstance(link, dict) or not isinstance(link.get("href"), str):
        logger.warning(f"Link under relation '{rel}' has no string href")
        raise MissingRequiredAttributeError("link", "href")

    attributes = {k: v for k, v in link.items() if k not in DROPPED_LINK_KEYS}
    return link["href"], attributes


def decode_json(value: Any, max_depth: int = 0) -> Document:
    """Build a Document from an already-parsed HAL JSON value.

    Embedded resources are decoded recursively while `max_depth` is positive,
    one level per decrement. At 0 they are discarded entirely.

    Args:
        value: Parsed JSON object
        max_depth: Embedded levels to expand

    Returns:
        Decoded Document

    Raises:
        MalformedInputError: If value is not a JSON object
        MissingRequiredAttributeError: If a link has no href
    """
    if not isinstance(value, dict):
        raise MalformedInputError(
            f"HAL JSON resource must be an object, got {type(value).__name__}"
        )

    # Shallow copy so the caller's parsed value is left intact
    data = dict(value)

    links = data.pop(LINKS_KEY, None)
    if not isinstance(links, dict):
        links = {}
    embedded = data.pop(EMBEDDED_KEY, None)
    if not isinstance(embedded, dict):
        embedded = {}

    uri = extract_identity(links)
    document = Document(uri, data)

    for rel, rel_links in links.items():
        if rel == SELF_REL:
            continue
        for link in as_list(rel_links):
            href, attributes = extract_link(rel, link)
            document.add_link(rel, href, attributes)

    if max_depth > 0:
        for rel, children in embedded.items():
            for child in as_list(children):
                if child is None:
                    document.add_resource(rel, None)
                    continue
                document.add_resource(rel, decode_json(child, max_depth - 1))
    elif embedded:
        logger.debug(f"Depth exhausted, dropping embedded relations {list(embedded)} of {uri!r}")

    return document


def document_from_json(text: str | bytes, max_depth: int = 0) -> Document:
    """Decode application/hal+json text into a Document.

    Args:
        text: JSON text
        max_depth: Embedded levels to expand (0 keeps only the top-level resource)

    Returns:
        Decoded Document

    Raises:
        MalformedInputError: If text is not valid JSON or not a JSON object
    """
    try:
        value = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Invalid HAL JSON: {e}")
        raise MalformedInputError(f"Invalid JSON: {str(e)}") from e

    document = decode_json(value, max_depth)
    logger.debug(
        f"Decoded HAL JSON {document.get_uri()!r} with {len(document.get_links())} relations "
        f"(max_depth={max_depth})"
    )
    return document
