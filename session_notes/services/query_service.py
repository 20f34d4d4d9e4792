"""
Index Query Service: read-only lookups over a loaded store, its session
index and its resolved link graph.
"""

from datetime import date

from session_notes.services.document_store import (
    DocumentStore,
    DocumentView,
    NoteDocument,
    parse_date,
)
from session_notes.services.link_resolver import LinkGraph
from session_notes.services.session_index import SessionIndex


class IndexQueryService:
    """Answers date, related-session and title queries.  No side effects."""

    def __init__(self, store: DocumentStore, index: SessionIndex, graph: LinkGraph):
        self.store = store
        self.index = index
        self.graph = graph

    def get(self, doc_id: str) -> NoteDocument:
        return self.store.get(doc_id)

    def by_date(self, day: date | str) -> list[NoteDocument]:
        """Notes attended on ``day``, in attendance order.  Empty if none."""
        day = parse_date(day)
        return [self.store.get(doc_id) for doc_id in self.index.ids_for(day)]

    def related(self, doc_id: str) -> list[NoteDocument]:
        """
        Notes listed as related by ``doc_id``, in the order it lists them.

        Dangling targets are omitted.  Raises NoteNotFoundError if
        ``doc_id`` itself is unknown.
        """
        self.store.get(doc_id)
        return [self.store.get(target) for target in self.graph.targets(doc_id)]

    def search(self, term: str) -> DocumentView:
        """Lazy, restartable case-insensitive title match."""
        # whitespace is part of the substring; only the empty term matches nothing
        needle = (term or "").casefold()
        if not needle:
            return self.store.filter(lambda doc: False)
        return self.store.filter(lambda doc: needle in doc.title.casefold())

    def days(self) -> tuple[date, ...]:
        return self.index.days()
