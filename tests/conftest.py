"""Shared fixtures for the session-notes test suite."""

from __future__ import annotations

import json
import textwrap

import pytest

from app import create_app
from session_notes.catalog import SessionCatalog, Snapshot


SAMPLE_RECORDS = [
    {
        "id": "whats-new-swift",
        "title": "What's new in Swift",
        "date": "2022-06-07",
        "presenters": [
            {"name": "Angela Laar", "role": "Swift Team"},
            "Becca Royal-Gordon, Swift Team",
        ],
        "sections": ["Community update", "Concurrency updates"],
        "related": ["meet-distributed-actors", "eliminate-data-races"],
        "tags": ["swift", "#concurrency"],
    },
    {
        "id": "whats-new-swiftui",
        "title": "What's new in SwiftUI",
        "date": "2022-06-07",
        "related": ["swiftui-navigation"],
    },
    {
        "id": "swiftui-navigation",
        "title": "The SwiftUI cookbook for navigation",
        "date": "2022-06-08",
        "related": ["whats-new-swiftui", "not-attended-yet"],
    },
    {
        "id": "meet-distributed-actors",
        "title": "Meet distributed actors in Swift",
        "date": "2022-06-08",
    },
    {
        "id": "eliminate-data-races",
        "title": "Eliminate data races using Swift Concurrency",
        "date": "2022-06-09",
        "related": ["meet-distributed-actors"],
    },
]


@pytest.fixture
def records():
    return [dict(r) for r in SAMPLE_RECORDS]


@pytest.fixture
def snapshot(records):
    return Snapshot.build(records)


@pytest.fixture
def query(snapshot):
    return snapshot.query


@pytest.fixture
def notes_dir(tmp_path):
    """A small Markdown notes directory with front matter."""
    root = tmp_path / "notes"
    (root / "day1").mkdir(parents=True)
    (root / "day2").mkdir()

    (root / "README.md").write_text("# WWDC 2022 notes\n\nIndex only.\n", encoding="utf-8")
    (root / "day1" / "01-whats-new-swift.md").write_text(
        textwrap.dedent(
            """\
            ---
            id: whats-new-swift
            date: 2022-06-07
            presenters:
              - name: Angela Laar
                role: Swift Team
            related: [meet-distributed-actors]
            ---
            # What's new in Swift

            ## Community update

            Text.

            ## Concurrency updates
            """
        ),
        encoding="utf-8",
    )
    (root / "day1" / "02-whats-new-xcode.md").write_text(
        textwrap.dedent(
            """\
            ---
            date: 2022-06-07
            title: What's new in Xcode
            ---
            Body without headings.
            """
        ),
        encoding="utf-8",
    )
    (root / "day2" / "meet-distributed-actors.md").write_text(
        textwrap.dedent(
            """\
            ---
            date: 2022-06-08
            related:
              - whats-new-swift
              - missing-session
            ---
            # Meet distributed actors in Swift
            """
        ),
        encoding="utf-8",
    )
    return root


@pytest.fixture
def notes_json(tmp_path, records):
    path = tmp_path / "notes.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


@pytest.fixture
def flask_client(records):
    class TestConfig:
        TESTING = True
        SECRET_KEY = "test"

    app = create_app(TestConfig, catalog=SessionCatalog.from_records(records))
    return app.test_client()
