"""Audit logging for risio.

The CLI records what it read and wrote as structured JSONL events, one JSON
object per line, so that a batch conversion can be traced afterwards.
"""

from risio.audit.events import Level, LogEvent, new_run_id, package_version, sha256_digest
from risio.audit.logger import AuditLogger

__all__ = [
    "AuditLogger",
    "Level",
    "LogEvent",
    "new_run_id",
    "package_version",
    "sha256_digest",
]
