"""Session Index: groups note ids by attendance date, in load order."""

import logging
from collections.abc import Mapping
from datetime import date
from types import MappingProxyType

from session_notes.services.document_store import DocumentStore

logger = logging.getLogger(__name__)


class SessionIndex:
    """Ordered mapping of date → ids.  Holds ids only, never documents."""

    def __init__(self, days: Mapping[date, tuple[str, ...]]):
        self._days = MappingProxyType(dict(days))

    @classmethod
    def build(cls, store: DocumentStore) -> "SessionIndex":
        days: dict[date, list[str]] = {}
        for doc in store.all():
            days.setdefault(doc.date, []).append(doc.id)
        logger.debug("Session index built: %d day(s).", len(days))
        return cls({day: tuple(ids) for day, ids in days.items()})

    def ids_for(self, day: date) -> tuple[str, ...]:
        return self._days.get(day, ())

    def days(self) -> tuple[date, ...]:
        return tuple(self._days)

    def __len__(self) -> int:
        return len(self._days)
