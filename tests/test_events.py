import json
import logging
import sys

import pytest

from ballot_box.config import Settings, get_settings
from ballot_box.events import (
    FanoutEmitter,
    LoggingEmitter,
    ProposalCreated,
    RecordingEmitter,
    VoteCast,
)
from ballot_box.observability import JSONFormatter


def test_fanout_forwards_in_order():
    a, b = RecordingEmitter(), RecordingEmitter()
    fan = FanoutEmitter([a, b])
    ev = ProposalCreated(id=0, title="t")
    fan.emit(ev)
    assert a.events == [ev] and b.events == [ev]


def test_recording_filters_by_type():
    rec = RecordingEmitter()
    rec.emit(ProposalCreated(id=0, title="t"))
    rec.emit(VoteCast(proposal_id=0, voter="v"))
    assert rec.of_type(VoteCast) == [VoteCast(proposal_id=0, voter="v")]


def test_logging_emitter_logs_event(caplog):
    with caplog.at_level(logging.INFO, logger="ballot_box.events"):
        LoggingEmitter().emit(VoteCast(proposal_id=3, voter="v"))
    assert "VoteCast" in caplog.text
    assert caplog.records[0].event == {"event": "VoteCast", "proposal_id": 3, "voter": "v"}


def test_json_formatter_includes_extras():
    record = logging.LogRecord("ballot_box.contract", logging.INFO, __file__, 1, "vote cast", None, None)
    record.proposal_id = 2
    record.caller = "v"
    out = json.loads(JSONFormatter().format(record))
    assert out["message"] == "vote cast"
    assert out["proposal_id"] == 2 and out["caller"] == "v"
    assert "error_code" not in out


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("BALLOT_PORT", "8080")
    monkeypatch.setenv("BALLOT_SERVER_URL", "http://example.test:8080/")
    monkeypatch.setenv("BALLOT_LOG_FORMAT", "TEXT")
    get_settings.cache_clear()
    try:
        s = get_settings()
        assert s.port == 8080
        assert s.server_url == "http://example.test:8080"
        assert s.log_format == "text"
    finally:
        get_settings.cache_clear()


def test_settings_reject_unknown_log_format():
    with pytest.raises(ValueError):
        Settings(log_format="xml")


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord(
            "ballot_box.contract", logging.ERROR, __file__, 1, "emitter failed", None, sys.exc_info()
        )
    out = json.loads(JSONFormatter().format(record))
    assert out["level"] == "ERROR"
    assert "RuntimeError: boom" in out["exception"]
