"""
Document Store: owns the parsed session-note records:

  - Coercing raw records (dicts from front matter, JSON or YAML) into
    immutable NoteDocument objects
  - Rejecting duplicate ids and malformed records (all-or-nothing load)
  - Looking documents up by id and iterating them in load order

Everything else in the package refers to documents by id and goes through
the store to get the record itself.
"""

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from types import MappingProxyType

from session_notes.errors import (
    DuplicateIdError,
    NoteNotFoundError,
    NoteValidationError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Presenter:
    name: str
    role: str = ""

    def __str__(self) -> str:
        return f"{self.name}, {self.role}" if self.role else self.name


@dataclass(frozen=True)
class NoteDocument:
    """One parsed session note.  Immutable once loaded."""
    id: str
    title: str
    date: date
    presenters: tuple[Presenter, ...] = ()
    body_sections: tuple[str, ...] = ()
    related_ids: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    source: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "date": self.date.isoformat(),
            "presenters": [
                {"name": p.name, "role": p.role} for p in self.presenters
            ],
            "body_sections": list(self.body_sections),
            "related_ids": list(self.related_ids),
            "tags": list(self.tags),
            "source": self.source,
        }


# ── Raw record coercion ───────────────────────────────────────────────

def parse_date(value) -> date:
    """Accept a date, a datetime or a YYYY-MM-DD string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    raise ValueError(f"not a date: {value!r}")


def _as_list(value, split_commas: bool = False) -> list:
    if value is None:
        return []
    if isinstance(value, str):
        if split_commas:
            return [part.strip() for part in value.split(",") if part.strip()]
        return [value]
    if isinstance(value, Mapping):
        raise ValueError("expected a list, got a mapping")
    return list(value)


def _dedupe(items: Iterable[str]) -> tuple[str, ...]:
    # dict keeps first-seen order
    return tuple(dict.fromkeys(items))


def _coerce_presenter(value, source: str) -> Presenter:
    if isinstance(value, Presenter):
        return value
    if isinstance(value, Mapping):
        name = str(value.get("name") or "").strip()
        role = str(value.get("role") or "").strip()
    elif isinstance(value, str):
        name, _, role = (part.strip() for part in value.partition(","))
    else:
        raise NoteValidationError(f"invalid presenter {value!r}", source=source)
    if not name:
        raise NoteValidationError("presenter without a name", source=source)
    return Presenter(name=name, role=role)


def coerce_document(record, position: int = 0) -> NoteDocument:
    """
    Turn one raw record into a NoteDocument.

    ``position`` is only used to label records that carry no ``source``.
    """
    if isinstance(record, NoteDocument):
        return record
    if not isinstance(record, Mapping):
        raise NoteValidationError(
            f"record must be a mapping, got {type(record).__name__}",
            source=f"<record {position}>",
        )

    source = str(record.get("source") or f"<record {position}>")

    doc_id = str(record.get("id") or "").strip()
    if not doc_id:
        raise NoteValidationError("missing 'id'", source=source)

    title = str(record.get("title") or "").strip()
    if not title:
        raise NoteValidationError(f"note '{doc_id}' has no title", source=source)

    if record.get("date") is None:
        raise NoteValidationError(f"note '{doc_id}' has no date", source=source)
    try:
        when = parse_date(record["date"])
    except ValueError as exc:
        raise NoteValidationError(
            f"note '{doc_id}' has an invalid date: {exc}", source=source
        ) from exc

    sections = record.get("body_sections", record.get("sections"))
    related = record.get("related_ids", record.get("related"))
    try:
        presenters = tuple(
            _coerce_presenter(p, source) for p in _as_list(record.get("presenters"))
        )
        body_sections = tuple(str(s).strip() for s in _as_list(sections))
        related_ids = _dedupe(str(r).strip() for r in _as_list(related) if str(r).strip())
        tags = _dedupe(
            str(t).strip().lstrip("#")
            for t in _as_list(record.get("tags"), split_commas=True)
        )
    except ValueError as exc:
        raise NoteValidationError(f"note '{doc_id}': {exc}", source=source) from exc

    return NoteDocument(
        id=doc_id,
        title=title,
        date=when,
        presenters=presenters,
        body_sections=body_sections,
        related_ids=related_ids,
        tags=tags,
        source=source,
    )


# ── Lazy views ────────────────────────────────────────────────────────

class DocumentView:
    """
    A lazy, finite and restartable sequence of documents.

    Each iteration walks the store again, so a view can be consumed any
    number of times.
    """

    def __init__(
        self,
        store: "DocumentStore",
        predicate: Callable[[NoteDocument], bool] | None = None,
    ):
        self._store = store
        self._predicate = predicate

    def __iter__(self) -> Iterator[NoteDocument]:
        for doc_id in self._store.ids():
            doc = self._store.get(doc_id)
            if self._predicate is None or self._predicate(doc):
                yield doc

    def __repr__(self) -> str:
        return f"<DocumentView over {len(self._store)} notes>"


# ── Store ─────────────────────────────────────────────────────────────

class DocumentStore:
    """Immutable, id-keyed collection of NoteDocuments in load order."""

    def __init__(self, documents: Mapping[str, NoteDocument]):
        self._documents = MappingProxyType(dict(documents))

    @classmethod
    def load(cls, raw_documents: Iterable) -> "DocumentStore":
        """
        Build a store from raw records in one pass.

        Raises DuplicateIdError or NoteValidationError on the first bad
        record; no store is produced in that case.
        """
        staged: dict[str, NoteDocument] = {}
        for position, record in enumerate(raw_documents):
            doc = coerce_document(record, position)
            if doc.id in staged:
                raise DuplicateIdError(doc.id, staged[doc.id].source, doc.source)
            staged[doc.id] = doc
        logger.info("Document store loaded: %d notes.", len(staged))
        return cls(staged)

    def get(self, doc_id: str) -> NoteDocument:
        try:
            return self._documents[doc_id]
        except KeyError:
            raise NoteNotFoundError(doc_id) from None

    def all(self) -> DocumentView:
        return DocumentView(self)

    def filter(self, predicate: Callable[[NoteDocument], bool]) -> DocumentView:
        return DocumentView(self, predicate)

    def ids(self) -> tuple[str, ...]:
        return tuple(self._documents)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)
