"""JSONL audit log written by the CLI when ``--log`` is given.

Every event is one JSON object on its own line, appended and flushed as
soon as it is emitted so that a crashed run still leaves a usable trail.
"""

import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from risio.audit.events import (
    Level,
    LogEvent,
    new_run_id,
    package_version,
    sha256_digest,
    utc_timestamp,
)
from risio.errors import ParseError

__all__ = ["AuditLogger"]


class AuditLogger:
    """Audit log for one CLI invocation.

    Several invocations may share a file; their events are told apart by
    ``run_id``.

    Attributes
    ----------
    log_path : Path
        JSONL file events are appended to.
    stage : str | None
        Command name stamped on every event.
    run_id : str
        Identifier of this invocation.
    """

    def __init__(
        self,
        log_path: Path,
        stage: str | None = None,
        run_id: str | None = None,
    ) -> None:
        self.log_path = log_path
        self.stage = stage
        self.run_id = run_id or new_run_id()

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Flush and close the log file."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def emit(
        self,
        event: str,
        data: dict[str, Any] | None = None,
        *,
        level: Level | str = Level.INFO,
        file: str | None = None,
    ) -> LogEvent:
        """Append one event to the log.

        Parameters
        ----------
        event : str
            Event name.
        data : dict[str, Any] | None, optional
            Payload, by default empty.
        level : Level | str, optional
            Severity, by default INFO.
        file : str | None, optional
            File the event refers to.

        Returns
        -------
        LogEvent
            The event as written.

        Raises
        ------
        ValueError
            If ``level`` is not one of DEBUG, INFO, WARN, ERROR.
        """
        log_event = LogEvent(
            ts=utc_timestamp(),
            run_id=self.run_id,
            level=Level(level),
            event=event,
            data=data or {},
            stage=self.stage,
            file=file,
        )
        self._file.write(log_event.to_json() + "\n")
        self._file.flush()
        return log_event

    @contextmanager
    def run(self, command: list[str], options: dict[str, Any]) -> Iterator["AuditLogger"]:
        """Bracket a command with run_started and run_finished events.

        The run is recorded as failed if the body raises anything,
        ``SystemExit`` included, and the exception propagates unchanged.

        Parameters
        ----------
        command : list[str]
            Command line, usually ``sys.argv``.
        options : dict[str, Any]
            Resolved command options; the risio version is added.
        """
        parameters = {**options, "risio_version": package_version()}
        self.emit("run_started", {"command": list(command), "parameters": parameters})
        start = time.perf_counter()
        try:
            yield self
        except BaseException:
            self._run_finished("failed", time.perf_counter() - start)
            raise
        self._run_finished("success", time.perf_counter() - start)

    def _run_finished(self, status: str, duration: float) -> None:
        self.emit("run_finished", {"status": status, "duration_seconds": round(duration, 6)})

    def file_parsed(self, path: str, sha256: str, entries: int, encoding: str) -> None:
        """Record a successfully parsed input file."""
        self.emit(
            "file_parsed",
            {"sha256": sha256, "entries": entries, "encoding": encoding},
            file=path,
        )

    def file_written(self, path: Path, entries: int) -> str:
        """Record an output file, hashing its bytes as they are on disk.

        Returns
        -------
        str
            The ``sha256:<hex>`` digest that was logged.
        """
        data = path.read_bytes()
        digest = sha256_digest(data)
        self.emit(
            "file_written",
            {"sha256": digest, "bytes": len(data), "entries": entries},
            file=str(path),
        )
        return digest

    def error(self, exception: BaseException, file: str | None = None) -> None:
        """Record the error that aborted the command.

        Parse errors also carry their kind and line number.
        """
        data: dict[str, Any] = {
            "exception_class": type(exception).__name__,
            "message": str(exception),
        }
        if isinstance(exception, ParseError):
            data["kind"] = exception.kind.value
            data["line_no"] = exception.line_no

        self.emit("error", data, level=Level.ERROR, file=file)
