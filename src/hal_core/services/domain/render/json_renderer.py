#!/usr/bin/env python3
"""Document to application/hal+json renderer."""

import json
import logging
from typing import Any

from ....core.config import hal_config
from ..document.document import EMBEDDED_KEY, LINKS_KEY, Document
from ..document.relations import CURIES_REL

logger = logging.getLogger(__name__)

ATTRIBUTE_MARKER = "@"


def strip_attribute_markers(data: Any) -> Any:
    """Remove the XML attribute marker `@` from mapping keys at every level."""
    if isinstance(data, dict):
        return {
            (key[1:] if isinstance(key, str) and key.startswith(ATTRIBUTE_MARKER) else key):
                strip_attribute_markers(value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [strip_attribute_markers(item) for item in data]
    return data


class JsonRenderer:
    """Render a Document as HAL JSON."""

    def render(self, document: Document, pretty: bool = False) -> str:
        """Return `document` as HAL JSON text.

        Args:
            document: Document to render
            pretty: Indent output (whitespace only, never shape)
        """
        indent = hal_config.JSON_INDENT if pretty else None
        separators = None if pretty else (",", ":")
        return json.dumps(
            self.to_dict(document),
            indent=indent,
            separators=separators,
            ensure_ascii=False,
        )

    def to_dict(self, document: Document) -> dict[str, Any]:
        """Build the HAL JSON object for `document` and its embedded resources."""
        result = strip_attribute_markers(document.get_data())

        links = self._links_for_json(document)
        if links:
            result[LINKS_KEY] = links

        embedded = self._resources_for_json(document)
        if embedded:
            result[EMBEDDED_KEY] = embedded

        return result

    def _links_for_json(self, document: Document) -> dict[str, Any]:
        links: dict[str, Any] = {}
        if document.get_uri():
            links["self"] = {"href": document.get_uri()}

        index = document.get_links()
        for rel, rel_links in index.items():
            if rel == "self" and "self" in links:
                logger.debug("Identity URI overrides explicit self link")
                continue
            items = [{"href": link.target, **link.attributes} for link in rel_links]
            if len(items) == 1 and rel != CURIES_REL and not index.is_forced_array(rel):
                links[rel] = items[0]
            else:
                links[rel] = items
        return links

    def _resources_for_json(self, document: Document) -> dict[str, Any]:
        embedded: dict[str, Any] = {}
        for rel, resources in document.get_resources().items():
            items = [None if child is None else self.to_dict(child) for child in resources]
            if len(items) == 1 and not document.is_forced_array_resource(rel):
                embedded[rel] = items[0]
            else:
                embedded[rel] = items
        return embedded
