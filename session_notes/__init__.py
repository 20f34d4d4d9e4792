"""
Session Notes is a read-only index over conference session notes.

Loads note records (title, date, presenters, section headings and
related-session links), resolves the related links into a directed graph,
and answers lookups by date, by related session and by title.
"""
