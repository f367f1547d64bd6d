"""Minimal Flask API in front of a single VotingSystem.

Endpoints:
- POST /init -> the calling identity becomes the owner
- POST /proposals -> owner creates a proposal {"description": ...}
- POST /proposals/<id>/vote -> caller votes once on a proposal
- GET /proposals/<id> -> {"id", "description", "votes"}
- GET /proposals/count -> {"total": n}
- GET /events -> notifications emitted so far, oldest first

The caller identity is taken from a request header (``X-Caller-Identity``
unless configured otherwise). It is trusted as-is.
"""

from typing import Any, Dict, Optional
import logging
import threading

from flask import Flask, jsonify, request

from .config import get_settings
from .contract import VotingSystem
from .errors import VotingError
from .events import FanoutEmitter, LoggingEmitter, RecordingEmitter
from .observability import setup_logging


logger = logging.getLogger(__name__)

app = Flask(__name__)

# One ballot box per process. The lock keeps each call indivisible when the
# server runs threaded.
_LOCK = threading.Lock()
_STATE: Dict[str, Any] = {
    "system": None,
    # recorded notifications, served by /events
    "recorder": None,
}


def reset_state() -> None:
    """Drop the current ballot box so /init can run again (tests only)."""
    with _LOCK:
        _STATE["system"] = None
        _STATE["recorder"] = None


def _caller() -> Optional[str]:
    value = request.headers.get(get_settings().caller_header, "").strip()
    return value or None


def _system() -> Optional[VotingSystem]:
    return _STATE["system"]


@app.errorhandler(VotingError)
def voting_error(e: VotingError):
    logger.warning(
        "%s on %s", e.code, request.path,
        extra={"error_code": e.code, "path": request.path},
    )
    return jsonify(e.to_response()), e.http_status


@app.route("/init", methods=["POST"])
def init_ballot_box():
    """Create the ballot box; the caller becomes its owner."""
    caller = _caller()
    if caller is None:
        return jsonify({"error": "missing caller identity"}), 400
    with _LOCK:
        if _STATE["system"] is not None:
            return jsonify({"error": "already initialized"}), 400
        recorder = RecordingEmitter()
        _STATE["recorder"] = recorder
        _STATE["system"] = VotingSystem(
            owner=caller, emitter=FanoutEmitter([recorder, LoggingEmitter()])
        )
    logger.info("ballot box initialized", extra={"caller": caller})
    return jsonify({"status": "initialized", "owner": caller})


@app.route("/proposals", methods=["POST"])
def create_proposal():
    """Create a proposal: expects JSON {"description": "..."}.

    Only the owner may call this; anyone else gets 403.
    """
    system = _system()
    if system is None:
        return jsonify({"error": "not initialized"}), 400
    caller = _caller()
    if caller is None:
        return jsonify({"error": "missing caller identity"}), 400
    data = request.get_json(silent=True)
    description = data.get("description") if isinstance(data, dict) else None
    if not isinstance(description, str):
        return jsonify({"error": "missing or invalid 'description'"}), 400
    with _LOCK:
        proposal_id = system.create_proposal(caller, description)
    return jsonify({"id": proposal_id}), 201


@app.route("/proposals/<int(signed=True):proposal_id>/vote", methods=["POST"])
def vote(proposal_id: int):
    system = _system()
    if system is None:
        return jsonify({"error": "not initialized"}), 400
    caller = _caller()
    if caller is None:
        return jsonify({"error": "missing caller identity"}), 400
    with _LOCK:
        system.vote(caller, proposal_id)
    return jsonify({"status": "voted", "proposal_id": proposal_id})


@app.route("/proposals/<int(signed=True):proposal_id>", methods=["GET"])
def get_proposal(proposal_id: int):
    system = _system()
    if system is None:
        return jsonify({"error": "not initialized"}), 400
    with _LOCK:
        description, votes = system.get_proposal(proposal_id)
    return jsonify({"id": proposal_id, "description": description, "votes": votes})


@app.route("/proposals/count", methods=["GET"])
def total_proposals():
    system = _system()
    if system is None:
        return jsonify({"error": "not initialized"}), 400
    with _LOCK:
        total = system.total_proposals()
    return jsonify({"total": total})


@app.route("/events", methods=["GET"])
def list_events():
    recorder = _STATE["recorder"]
    if recorder is None:
        return jsonify({"error": "not initialized"}), 400
    with _LOCK:
        events = [e.to_dict() for e in recorder.events]
    return jsonify({"events": events})


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.run(host=settings.host, port=settings.port, threaded=True)


if __name__ == "__main__":
    main()
