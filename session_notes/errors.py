"""
Errors and warnings raised while loading and querying session notes.

Load-time errors abort the whole load.  Query-time errors are returned to
the caller for that single lookup.  Dangling references are never raised
during a normal resolve; they are collected as warning objects instead.
"""

from __future__ import annotations

__all__ = [
    "SessionNotesError",
    "DuplicateIdError",
    "NoteValidationError",
    "NoteSourceError",
    "NoteNotFoundError",
    "DanglingReferenceError",
    "DanglingReferenceWarning",
]


class SessionNotesError(RuntimeError):
    """Base exception for session-note loading and lookup failures."""


class DuplicateIdError(SessionNotesError):
    """Raised when two records in one load share the same id."""

    def __init__(self, doc_id: str, first_source: str, second_source: str) -> None:
        super().__init__(
            f"duplicate note id '{doc_id}' in {second_source} "
            f"(already defined by {first_source})"
        )
        self.doc_id = doc_id
        self.first_source = first_source
        self.second_source = second_source


class NoteValidationError(SessionNotesError):
    """Raised when a raw record is missing a required field or is malformed."""

    def __init__(self, message: str, *, source: str = "") -> None:
        super().__init__(f"{source}: {message}" if source else message)
        self.source = source


class NoteSourceError(SessionNotesError):
    """Raised when a notes file or directory cannot be read or parsed."""


class NoteNotFoundError(SessionNotesError, KeyError):
    """Raised when a lookup names an id that is not in the store."""

    def __init__(self, doc_id: str) -> None:
        super().__init__(f"unknown note id '{doc_id}'")
        self.doc_id = doc_id

    def __str__(self) -> str:
        # KeyError would otherwise wrap the message in quotes
        return self.args[0]


class DanglingReferenceWarning(UserWarning):
    """A related-session link whose target is not in the store."""

    def __init__(self, source_id: str, target_id: str) -> None:
        super().__init__(
            f"note '{source_id}' references unknown note '{target_id}'"
        )
        self.source_id = source_id
        self.target_id = target_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DanglingReferenceWarning):
            return NotImplemented
        return (self.source_id, self.target_id) == (other.source_id, other.target_id)

    def __hash__(self) -> int:
        return hash((self.source_id, self.target_id))


class DanglingReferenceError(SessionNotesError):
    """Raised by a strict resolve when any reference is dangling."""

    def __init__(self, warnings: tuple[DanglingReferenceWarning, ...]) -> None:
        super().__init__(
            f"{len(warnings)} dangling reference(s): "
            + "; ".join(str(w) for w in warnings)
        )
        self.warnings = warnings
