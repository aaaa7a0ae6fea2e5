"""Tests for audit logger module."""

import json
from pathlib import Path

import pytest

from risio.audit import AuditLogger, Level, new_run_id, package_version, sha256_digest
from risio.errors import ParseError, ParseErrorKind


@pytest.fixture
def logger(tmp_path: Path) -> AuditLogger:
    """Create a logger that auto-closes after test."""
    lg = AuditLogger(tmp_path / "events.jsonl", stage="check", run_id="test_run")
    yield lg
    lg.close()


def _read_events(path: Path) -> list[dict]:
    """Read all JSONL events from file."""
    with path.open() as f:
        return [json.loads(line) for line in f if line.strip()]


@pytest.mark.unit
def test_logger_init_creates_file(tmp_path: Path) -> None:
    """Test logger creates parent directories and generates a run id."""
    path = tmp_path / "logs" / "events.jsonl"

    with AuditLogger(path) as lg:
        assert path.exists()
        assert lg.stage is None
        assert "__" in lg.run_id


@pytest.mark.unit
def test_emit_writes_envelope(logger: AuditLogger) -> None:
    """Test emit() writes one JSON line with the full envelope."""
    written = logger.emit("custom", {"key": "value"}, level="WARN", file="a.ris")

    events = _read_events(logger.log_path)

    assert len(events) == 1
    evt = events[0]
    assert evt == {
        "ts": written.ts,
        "run_id": "test_run",
        "level": "WARN",
        "event": "custom",
        "data": {"key": "value"},
        "stage": "check",
        "file": "a.ris",
    }
    assert evt["ts"].endswith("Z")
    assert written.level is Level.WARN


@pytest.mark.unit
def test_emit_rejects_unknown_level(logger: AuditLogger) -> None:
    """Test unknown levels raise ValueError and write nothing."""
    with pytest.raises(ValueError, match="TRACE"):
        logger.emit("custom", level="TRACE")

    assert _read_events(logger.log_path) == []


@pytest.mark.unit
def test_run_success(logger: AuditLogger) -> None:
    """Test run() brackets the body with started and finished events."""
    with logger.run(["risio", "check"], {"files": ["a.ris"]}):
        logger.emit("inside")

    events = _read_events(logger.log_path)

    assert [e["event"] for e in events] == ["run_started", "inside", "run_finished"]
    assert events[0]["data"]["command"] == ["risio", "check"]
    assert events[0]["data"]["parameters"]["files"] == ["a.ris"]
    assert "risio_version" in events[0]["data"]["parameters"]
    assert events[2]["data"]["status"] == "success"
    assert events[2]["data"]["duration_seconds"] >= 0


@pytest.mark.unit
@pytest.mark.parametrize("exception", [RuntimeError("boom"), SystemExit(1)])
def test_run_failure(logger: AuditLogger, exception: BaseException) -> None:
    """Test run() records failure and re-raises, SystemExit included."""
    with pytest.raises(type(exception)):
        with logger.run(["risio"], {}):
            raise exception

    events = _read_events(logger.log_path)

    assert events[-1]["event"] == "run_finished"
    assert events[-1]["data"]["status"] == "failed"


@pytest.mark.unit
def test_file_parsed(logger: AuditLogger) -> None:
    """Test file_parsed records digest, count and encoding."""
    digest = sha256_digest(b"TY  - JOUR\nER  - \n")

    logger.file_parsed("a.ris", digest, 1, "utf-8")

    evt = _read_events(logger.log_path)[0]
    assert evt["file"] == "a.ris"
    assert evt["data"] == {"sha256": digest, "entries": 1, "encoding": "utf-8"}


@pytest.mark.unit
def test_file_written_hashes_disk_bytes(logger: AuditLogger, tmp_path: Path) -> None:
    """Test file_written digests the file as written."""
    output = tmp_path / "out.ris"
    output.write_bytes(b"TY  - JOUR\nER  - \n")

    digest = logger.file_written(output, 1)

    evt = _read_events(logger.log_path)[0]
    assert evt["event"] == "file_written"
    assert evt["file"] == str(output)
    assert evt["data"] == {"sha256": digest, "bytes": 18, "entries": 1}
    assert digest == sha256_digest(output.read_bytes())


@pytest.mark.unit
def test_error_parse_error(logger: AuditLogger) -> None:
    """Test parse errors log their kind and line number."""
    logger.error(ParseError(ParseErrorKind.DUPLICATE_FIELD, 12), file="a.ris")

    evt = _read_events(logger.log_path)[0]

    assert evt["level"] == "ERROR"
    assert evt["file"] == "a.ris"
    assert evt["data"] == {
        "exception_class": "ParseError",
        "message": "Duplicate field at line 12",
        "kind": "duplicate_field",
        "line_no": 12,
    }


@pytest.mark.unit
def test_error_other_exception(logger: AuditLogger) -> None:
    """Test other exceptions log only class and message."""
    logger.error(FileNotFoundError("File not found: x.ris"))

    evt = _read_events(logger.log_path)[0]

    assert evt["data"] == {
        "exception_class": "FileNotFoundError",
        "message": "File not found: x.ris",
    }
    assert evt["file"] is None


@pytest.mark.unit
def test_runs_share_file(tmp_path: Path) -> None:
    """Test reopening the same file appends."""
    path = tmp_path / "events.jsonl"

    with AuditLogger(path, run_id="r1") as lg:
        lg.emit("first")
    with AuditLogger(path, run_id="r2") as lg:
        lg.emit("second")

    assert [e["run_id"] for e in _read_events(path)] == ["r1", "r2"]


@pytest.mark.unit
def test_helpers() -> None:
    """Test digest format, run id uniqueness and version lookup."""
    assert sha256_digest(b"") == (
        "sha256:e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )
    assert new_run_id() != new_run_id()
    assert isinstance(package_version(), str)
