"""
CLI entry point for the session-notes index.

Usage:
  python -m session_notes list --date 2022-06-07   # Sessions attended that day
  python -m session_notes related <id>             # Sessions a note links to
  python -m session_notes search <term>            # Case-insensitive title search
  python -m session_notes show <id>                # Full record for one note
  python -m session_notes days                     # Every day with its session count
  python -m session_notes check                    # Report dangling related links
"""

import argparse
import sys
from pathlib import Path

from session_notes.catalog import SessionCatalog, Snapshot, setup_logging
from session_notes.errors import NoteNotFoundError, SessionNotesError
from session_notes.services.document_store import NoteDocument, parse_date


def _date_arg(value: str):
    try:
        return parse_date(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid date '{value}' (expected YYYY-MM-DD)"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="session-notes",
        description="Browse an index of conference session notes.",
    )
    parser.add_argument(
        "--notes",
        type=Path,
        default=None,
        help="Notes directory or file (overrides SESSION_NOTES_PATH env var).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail when a related-session link points at a missing note.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (overrides SESSION_NOTES_LOG_LEVEL).",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List sessions attended on a date.")
    list_cmd.add_argument("--date", type=_date_arg, required=True, help="YYYY-MM-DD")

    related = sub.add_parser("related", help="List sessions related to a note.")
    related.add_argument("id", help="Note id.")

    search = sub.add_parser("search", help="Search note titles (case-insensitive).")
    search.add_argument("term", help="Substring to look for.")

    show = sub.add_parser("show", help="Show every field of one note.")
    show.add_argument("id", help="Note id.")

    sub.add_parser("days", help="List every day with its session count.")
    sub.add_parser("check", help="Report dangling related-session links.")

    return parser


def _print_titles(docs) -> None:
    for doc in docs:
        print(doc.title)


def _print_document(doc: NoteDocument) -> None:
    print(f"{doc.title}  ({doc.id})")
    print(f"  date:       {doc.date.isoformat()}")
    if doc.presenters:
        print("  presenters: " + "; ".join(str(p) for p in doc.presenters))
    if doc.tags:
        print("  tags:       " + ", ".join(doc.tags))
    if doc.body_sections:
        print("  sections:")
        for heading in doc.body_sections:
            print(f"    - {heading}")
    if doc.related_ids:
        print("  related:    " + ", ".join(doc.related_ids))
    print(f"  source:     {doc.source}")


def _report_warnings(snapshot: Snapshot) -> None:
    for warning in snapshot.warnings:
        print(f"warning: {warning}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    catalog = SessionCatalog(notes_path=args.notes, strict=args.strict)
    try:
        snapshot = catalog.load()
    except SessionNotesError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    query = snapshot.query

    if args.command == "check":
        _report_warnings(snapshot)
        if snapshot.warnings:
            return 1
        print(f"OK: {len(snapshot.store)} note(s), no dangling references.")
        return 0

    _report_warnings(snapshot)

    if args.command == "list":
        _print_titles(query.by_date(args.date))

    elif args.command == "search":
        _print_titles(query.search(args.term))

    elif args.command == "days":
        for day in query.days():
            print(f"{day.isoformat()}  {len(query.by_date(day))}")

    elif args.command in ("related", "show"):
        try:
            if args.command == "related":
                _print_titles(query.related(args.id))
            else:
                _print_document(query.get(args.id))
        except NoteNotFoundError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
