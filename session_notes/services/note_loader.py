"""
Note Loader: reads raw note records from disk for the Document Store.

Supported inputs:

  - A directory of Markdown notes, each with YAML front matter
  - A single Markdown note
  - A JSON or YAML file holding a list of records (or {"notes": [...]})

Only explicit front-matter fields are trusted.  The loader fills in an id,
a title and the section headings from the file itself, but never scrapes
related sessions out of prose.
"""

import json
import logging
import re
from pathlib import Path

import yaml

from session_notes.errors import NoteSourceError

logger = logging.getLogger(__name__)

FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)
TITLE_RE = re.compile(r"^#[ \t]+(.+?)[ \t]*#*[ \t]*$", re.MULTILINE)
SECTION_RE = re.compile(r"^##[ \t]+(.+?)[ \t]*#*[ \t]*$", re.MULTILINE)


def load_records(path: Path | str) -> list[dict]:
    """Read every raw record found at ``path``, in attendance order."""
    path = Path(path)
    if not path.exists():
        raise NoteSourceError(f"notes path not found: {path}")

    if path.is_dir():
        records = []
        for md_file in sorted(path.rglob("*.md")):
            record = parse_markdown_note(md_file)
            if record is not None:
                records.append(record)
        logger.info("Loaded %d note(s) from %s.", len(records), path)
        return records

    suffix = path.suffix.lower()
    if suffix == ".md":
        record = parse_markdown_note(path)
        return [record] if record is not None else []
    if suffix == ".json":
        return _records_from_data(_read_json(path), path)
    if suffix in (".yaml", ".yml"):
        return _records_from_data(_read_yaml(path), path)
    raise NoteSourceError(f"unsupported notes file type: {path}")


def parse_markdown_note(path: Path) -> dict | None:
    """
    Build a raw record from one Markdown note.

    Returns None when the file has no front matter, since such files are
    READMEs and indexes rather than session notes.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise NoteSourceError(f"cannot read {path}: {exc}") from exc

    fm_match = FRONT_MATTER_RE.match(content)
    if not fm_match:
        logger.debug("No front matter in %s, skipping.", path)
        return None

    try:
        front_matter = yaml.safe_load(fm_match.group(1)) or {}
    except yaml.YAMLError as exc:
        raise NoteSourceError(f"invalid front matter in {path}: {exc}") from exc
    if not isinstance(front_matter, dict):
        raise NoteSourceError(f"front matter in {path} is not a mapping")

    body = content[fm_match.end():]
    record = dict(front_matter)
    record.setdefault("id", path.stem)
    if not record.get("title"):
        title_match = TITLE_RE.search(body)
        record["title"] = title_match.group(1) if title_match else path.stem
    if "sections" not in record and "body_sections" not in record:
        record["sections"] = SECTION_RE.findall(body)
    record["source"] = str(path)
    return record


def _read_json(path: Path):
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise NoteSourceError(f"cannot parse {path}: {exc}") from exc


def _read_yaml(path: Path):
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise NoteSourceError(f"cannot parse {path}: {exc}") from exc


def _records_from_data(data, path: Path) -> list[dict]:
    if isinstance(data, dict) and "notes" in data:
        data = data["notes"]
    if data is None:
        return []
    if not isinstance(data, list):
        raise NoteSourceError(f"{path} must contain a list of notes")

    records = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise NoteSourceError(f"{path}: entry {i} is not a mapping")
        record = dict(item)
        record.setdefault("source", f"{path}#{i}")
        records.append(record)
    logger.info("Loaded %d note(s) from %s.", len(records), path)
    return records
