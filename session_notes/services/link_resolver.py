"""
Link Resolver: turns each note's declared "related sessions" into a
directed graph of ids.

Edges are kept exactly as the notes declare them.  A reverse edge only
exists when the other note lists the link too.  Targets that are not in
the store are left out of the graph and reported as
DanglingReferenceWarning objects, unless the resolve is strict.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from session_notes.errors import DanglingReferenceError, DanglingReferenceWarning
from session_notes.services.document_store import DocumentStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinkGraph:
    """Resolved, directed related-session links (ids only)."""
    edges: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    warnings: tuple[DanglingReferenceWarning, ...] = ()

    def targets(self, doc_id: str) -> tuple[str, ...]:
        return self.edges.get(doc_id, ())

    def dangling_for(self, doc_id: str) -> tuple[DanglingReferenceWarning, ...]:
        return tuple(w for w in self.warnings if w.source_id == doc_id)


def resolve(store: DocumentStore, strict: bool = False) -> LinkGraph:
    """
    Resolve every note's related ids against the store in a single pass.

    Returns a best-effort graph plus the dangling references found.  With
    ``strict=True`` any dangling reference raises DanglingReferenceError.
    """
    edges: dict[str, tuple[str, ...]] = {}
    warnings: list[DanglingReferenceWarning] = []

    for doc in store.all():
        resolved = []
        for target in doc.related_ids:
            if target in store:
                resolved.append(target)
            else:
                warning = DanglingReferenceWarning(doc.id, target)
                logger.debug("%s", warning)
                warnings.append(warning)
        edges[doc.id] = tuple(resolved)

    if strict and warnings:
        raise DanglingReferenceError(tuple(warnings))

    logger.info(
        "Resolved %d link(s) across %d notes (%d dangling).",
        sum(len(t) for t in edges.values()),
        len(edges),
        len(warnings),
    )
    return LinkGraph(edges=MappingProxyType(edges), warnings=tuple(warnings))
