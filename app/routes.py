"""Read-only JSON routes over the session-notes index."""

from flask import Blueprint, current_app, jsonify, request

from session_notes.errors import NoteNotFoundError, SessionNotesError

api_bp = Blueprint("api", __name__)


def _query():
    return current_app.extensions["session_catalog"].query


@api_bp.errorhandler(NoteNotFoundError)
def note_not_found(exc):
    return jsonify({"error": str(exc)}), 404


@api_bp.errorhandler(SessionNotesError)
def notes_unavailable(exc):
    return jsonify({"error": str(exc)}), 500


# ─── Sessions ───────────────────────────────────────────────────────────

@api_bp.route("/sessions", methods=["GET"])
def list_sessions():
    query = _query()
    day = request.args.get("date")
    if day is None:
        return jsonify([d.to_dict() for d in query.store.all()])
    try:
        docs = query.by_date(day)
    except ValueError:
        return jsonify({"error": f"invalid date '{day}' (expected YYYY-MM-DD)"}), 400
    return jsonify([d.to_dict() for d in docs])


@api_bp.route("/sessions/<doc_id>", methods=["GET"])
def get_session(doc_id):
    return jsonify(_query().get(doc_id).to_dict())


@api_bp.route("/sessions/<doc_id>/related", methods=["GET"])
def related_sessions(doc_id):
    return jsonify([d.to_dict() for d in _query().related(doc_id)])


# ─── Search & overview ──────────────────────────────────────────────────

@api_bp.route("/search", methods=["GET"])
def search_sessions():
    term = request.args.get("q", "")
    return jsonify([d.to_dict() for d in _query().search(term)])


@api_bp.route("/days", methods=["GET"])
def list_days():
    query = _query()
    return jsonify([
        {"date": day.isoformat(), "count": len(query.index.ids_for(day))}
        for day in query.days()
    ])


@api_bp.route("/warnings", methods=["GET"])
def list_warnings():
    graph = _query().graph
    return jsonify([
        {"source_id": w.source_id, "target_id": w.target_id, "message": str(w)}
        for w in graph.warnings
    ])
