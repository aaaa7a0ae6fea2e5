"""Event record and small helpers shared by the audit log."""

import hashlib
import importlib.metadata
import json
import secrets
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

__all__ = [
    "Level",
    "LogEvent",
    "utc_timestamp",
    "sha256_digest",
    "new_run_id",
    "package_version",
]


class Level(StrEnum):
    """Severity of an audit event."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


@dataclass(frozen=True)
class LogEvent:
    """One line of the audit log.

    Attributes
    ----------
    ts : str
        UTC timestamp, ISO 8601 with a ``Z`` suffix.
    run_id : str
        Identifier shared by all events of one CLI invocation.
    level : Level
        Severity.
    event : str
        Event name: run_started, file_parsed, file_written, error or
        run_finished.
    data : dict[str, Any]
        Event payload.
    stage : str | None
        CLI command that emitted the event.
    file : str | None
        File the event refers to, if any.
    """

    ts: str
    run_id: str
    level: Level
    event: str
    data: dict[str, Any] = field(default_factory=dict)
    stage: str | None = None
    file: str | None = None

    def to_json(self) -> str:
        """Compact single-line JSON for the log file."""
        return json.dumps(asdict(self), ensure_ascii=False, separators=(",", ":"))


def utc_timestamp() -> str:
    """Current UTC time, e.g. ``2026-02-03T12:34:56.123456Z``."""
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


def sha256_digest(data: bytes) -> str:
    """Digest of ``data`` as ``sha256:<hex>``."""
    return "sha256:" + hashlib.sha256(data).hexdigest()


def new_run_id() -> str:
    """Timestamp plus a random suffix, unique per invocation."""
    return f"{utc_timestamp()}__{secrets.token_hex(4)}"


def package_version() -> str:
    """Installed risio version, or ``"unknown"`` when running from a checkout."""
    try:
        return importlib.metadata.version("risio")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"
