#!/usr/bin/env python3
"""Ordered relation index with CURIE-aware lookup.

Relation names map to one or more links, kept in insertion order so that a
document renders deterministically. Abbreviated names such as `acme:widgets`
are expanded on lookup through the templates stored under the `curies`
relation:

    {"name": "acme", "href": "http://example.com/rels/{rel}", "templated": true}

Expansion happens in `get`, never in `add`, because a CURIE template may be
added after the links that use it.
"""

import logging
from collections.abc import Iterator
from typing import Any

from ....models.models import LinkRelation

logger = logging.getLogger(__name__)

CURIES_REL = "curies"
CURIE_PLACEHOLDER = "{rel}"


class RelationIndex:
    """Mapping of relation name to a non-empty list of LinkRelation."""

    def __init__(self):
        self._relations: dict[str, list[LinkRelation]] = {}
        self._array_rels: set[str] = set()

    def add(
        self,
        rel: str,
        target: str,
        attributes: dict[str, Any] | None = None,
        force_array: bool = False,
    ) -> LinkRelation:
        """Append a link under `rel`. Duplicate targets are kept.

        Args:
            rel: Relation name
            target: Target URI
            attributes: Link parameters other than rel/href
            force_array: Render this relation as a list even with a single link

        Returns:
            The stored LinkRelation
        """
        link = LinkRelation(target=target, attributes=attributes or {})
        self._relations.setdefault(rel, []).append(link)
        if force_array:
            self._array_rels.add(rel)
        return link

    def get(self, rel: str) -> list[LinkRelation] | None:
        """Look up links for `rel`, expanding CURIEs if there is no exact match.

        Args:
            rel: Relation name, either exact or `prefix:suffix`

        Returns:
            List of LinkRelation, or None when the relation is unknown
        """
        if rel in self._relations:
            return list(self._relations[rel])

        if ":" not in rel:
            return None

        prefix, suffix = rel.split(":", 1)
        for curie in self._relations.get(CURIES_REL, []):
            if curie.attributes.get("name") == prefix:
                expanded = curie.target.replace(CURIE_PLACEHOLDER, suffix)
                logger.debug(f"Resolved CURIE {rel} to {expanded}")
                return [LinkRelation(target=expanded)]

        return None

    def remove(self, rel: str, target: str | None = None) -> int:
        """Remove links under `rel`, all of them or only those pointing at `target`.

        The relation name is dropped once no links remain.

        Returns:
            Number of links removed
        """
        links = self._relations.get(rel)
        if not links:
            return 0

        kept = [] if target is None else [link for link in links if link.target != target]
        removed = len(links) - len(kept)
        if kept:
            self._relations[rel] = kept
        else:
            del self._relations[rel]
            self._array_rels.discard(rel)
        return removed

    def is_forced_array(self, rel: str) -> bool:
        return rel in self._array_rels

    def items(self) -> Iterator[tuple[str, list[LinkRelation]]]:
        for rel, links in self._relations.items():
            yield rel, list(links)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._relations))

    def __contains__(self, rel: object) -> bool:
        return rel in self._relations

    def __len__(self) -> int:
        return len(self._relations)

    def __repr__(self) -> str:
        return f"RelationIndex({self._relations!r})"
