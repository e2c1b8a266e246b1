#!/usr/bin/env python3
"""HAL resource tree.

A Document holds the resource's identity URI, its plain data, its relations
and the resources embedded in it. Embedded children are owned by exactly one
parent, so a document is always a tree.

Data keys may carry two markers that only affect XML rendering:

- `@name` inside a nested mapping renders as an attribute of that element
  (the `@` is stripped in JSON),
- `value` inside a nested mapping renders as that element's text.
"""

import logging
from typing import Any
from xml.etree.ElementTree import Element

from ....core.config import hal_config
from ....core.exceptions import ReservedKeyError
from ....models.models import LinkRelation
from .relations import CURIES_REL, RelationIndex

logger = logging.getLogger(__name__)

# Keys the JSON wire format uses for links and embedded resources
LINKS_KEY = "_links"
EMBEDDED_KEY = "_embedded"
RESERVED_DATA_KEYS = (LINKS_KEY, EMBEDDED_KEY)


def _check_data(data: dict[str, Any]) -> dict[str, Any]:
    for key in RESERVED_DATA_KEYS:
        if key in data:
            raise ReservedKeyError(
                f"Data must not contain '{key}'; use add_link/add_resource instead"
            )
    return data


class Document:
    """A HAL resource: uri, data, relations and embedded resources."""

    def __init__(self, uri: str | None = None, data: dict[str, Any] | None = None):
        self._uri = uri
        self._data = _check_data(data if data is not None else {})
        self._links = RelationIndex()
        self._resources: dict[str, list["Document | None"]] = {}
        self._array_resource_rels: set[str] = set()

    # Decoding

    @classmethod
    def from_json(cls, text: str, max_depth: int | None = None) -> "Document":
        """Decode an application/hal+json document.

        Args:
            text: JSON text
            max_depth: Embedded levels to expand; None uses HAL_DEFAULT_MAX_DEPTH

        Raises:
            MalformedInputError: If text is not a JSON object
        """
        from ..json_to_document.converter import document_from_json

        return document_from_json(text, hal_config.resolve_max_depth(max_depth))

    @classmethod
    def from_xml(cls, text: "str | bytes | Element", max_depth: int | None = None) -> "Document":
        """Decode an application/hal+xml document from text or a parsed element.

        Raises:
            MalformedInputError: If text is not well-formed XML
            MissingRequiredAttributeError: If a link/resource lacks rel or href
        """
        from ..xml_to_document.converter import document_from_xml

        return document_from_xml(text, hal_config.resolve_max_depth(max_depth))

    # Mutation

    def add_link(
        self,
        rel: str,
        uri: str,
        attributes: dict[str, Any] | None = None,
        force_array: bool = False,
    ) -> "Document":
        """Add a link to the resource, identified by `rel`, located at `uri`.

        Args:
            rel: Relation name
            uri: Target URI
            attributes: Other attributes, as defined by HAL and RFC 5988
            force_array: Render the relation as a list even with one link
        """
        self._links.add(rel, uri, attributes, force_array=force_array)
        return self

    def add_resource(
        self,
        rel: str,
        resource: "Document | None" = None,
        force_array: bool = False,
    ) -> "Document":
        """Embed `resource` under `rel`. A None resource is stored as-is."""
        self._resources.setdefault(rel, []).append(resource)
        if force_array:
            self._array_resource_rels.add(rel)
        return self

    def add_curie(self, name: str, uri: str) -> "Document":
        """Create a CURIE link template used to abbreviate custom relations.

        e.g.
            doc.add_curie("acme", "http://example.com/rels/{rel}")
            doc.add_link("acme:test", "http://example.com/test")
        """
        return self.add_link(CURIES_REL, uri, {"name": name, "templated": True})

    def set_data(self, data: dict[str, Any] | None = None):
        """Replace the resource's data."""
        self._data = _check_data(data if data is not None else {})

    def set_uri(self, uri: str | None):
        self._uri = uri

    # Access

    def get_data(self) -> dict[str, Any]:
        """Shallow copy of the data; use set_data to change it."""
        return dict(self._data)

    def get_uri(self) -> str | None:
        return self._uri

    def get_links(self) -> RelationIndex:
        return self._links

    def get_link(self, rel: str) -> list[LinkRelation] | None:
        """Links for `rel`, resolving CURIEs if required. None if not found."""
        return self._links.get(rel)

    def get_first_link(self, rel: str) -> LinkRelation | None:
        links = self._links.get(rel)
        return links[0] if links else None

    def get_resources(self) -> dict[str, list["Document | None"]]:
        return self._resources

    def get_first_resource(self, rel: str) -> "Document | None":
        resources = self._resources.get(rel)
        return resources[0] if resources else None

    def is_forced_array_resource(self, rel: str) -> bool:
        return rel in self._array_resource_rels

    # Rendering

    def as_json(self, pretty: bool | None = None) -> str:
        """Return the document as application/hal+json."""
        from ..render.json_renderer import JsonRenderer

        return JsonRenderer().render(self, hal_config.resolve_pretty(pretty))

    def as_xml(self, pretty: bool | None = None) -> str:
        """Return the document as application/hal+xml."""
        from ..render.xml_renderer import XmlRenderer

        return XmlRenderer().render(self, hal_config.resolve_pretty(pretty))

    def __repr__(self) -> str:
        return (
            f"Document(uri={self._uri!r}, data={self._data!r}, "
            f"links={list(self._links)!r}, resources={list(self._resources)!r})"
        )
