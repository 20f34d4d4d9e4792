"""
Catalog: ties the services together into one loaded snapshot.

A Snapshot bundles the document store, session index, link graph and
query service built from a single load.  SessionCatalog holds exactly one
live snapshot and replaces it wholesale on reload.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from session_notes import config
from session_notes.errors import DanglingReferenceWarning
from session_notes.services import link_resolver
from session_notes.services.document_store import DocumentStore
from session_notes.services.link_resolver import LinkGraph
from session_notes.services.note_loader import load_records
from session_notes.services.query_service import IndexQueryService
from session_notes.services.session_index import SessionIndex

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Configure root logging for the CLI and the web app."""
    level = (level or config.LOG_LEVEL).upper()
    log_file = config.LOG_FILE if log_file is None else log_file
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=LOG_FORMAT,
        handlers=handlers,
    )


@dataclass(frozen=True)
class Snapshot:
    """One immutable, fully resolved load of the notes."""
    store: DocumentStore
    index: SessionIndex
    graph: LinkGraph
    query: IndexQueryService

    @classmethod
    def build(cls, raw_documents: Iterable, strict: bool = False) -> "Snapshot":
        store = DocumentStore.load(raw_documents)
        index = SessionIndex.build(store)
        graph = link_resolver.resolve(store, strict=strict)
        return cls(
            store=store,
            index=index,
            graph=graph,
            query=IndexQueryService(store, index, graph),
        )

    @property
    def warnings(self) -> tuple[DanglingReferenceWarning, ...]:
        return self.graph.warnings


class SessionCatalog:
    """Owns the live snapshot for a notes source."""

    def __init__(self, notes_path: Path | str | None = None, strict: bool | None = None):
        self.notes_path = Path(notes_path) if notes_path else config.NOTES_PATH
        self.strict = config.STRICT_LINKS if strict is None else strict
        self._snapshot: Snapshot | None = None

    @classmethod
    def from_records(cls, raw_documents: Iterable, strict: bool = False) -> "SessionCatalog":
        """Build a catalog directly from in-memory records."""
        catalog = cls(strict=strict)
        catalog._snapshot = Snapshot.build(raw_documents, strict=strict)
        return catalog

    def load(self) -> Snapshot:
        """
        Read the notes source and swap in a fresh snapshot.

        The new snapshot is built completely before it replaces the old
        one, so a failed reload leaves the previous snapshot live.
        """
        logger.info("Loading session notes from %s", self.notes_path)
        snapshot = Snapshot.build(load_records(self.notes_path), strict=self.strict)
        self._snapshot = snapshot
        return snapshot

    reload = load

    @property
    def snapshot(self) -> Snapshot:
        if self._snapshot is None:
            return self.load()
        return self._snapshot

    @property
    def query(self) -> IndexQueryService:
        return self.snapshot.query

    def close(self) -> None:
        """Drop the live snapshot; the next access reloads from disk."""
        self._snapshot = None
