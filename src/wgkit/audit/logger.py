"""Structured audit logger for JSONL event logging.

Provides append-only structured event logging to JSONL files with
a persistent file handle.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from wgkit.audit.models import LogEvent
from wgkit.utils import get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """JSONL audit logger with persistent file handle.

    Writes one JSON object per line and flushes after each write.

    Attributes
    ----------
    run_id : str
        Unique run identifier.
    log_path : Path
        Path to JSONL log file.
    command : str | None
        CLI command attached to every event.
    """

    def __init__(self, run_id: str, log_path: Path, command: str | None = None) -> None:
        """Initialize audit logger and open file handle.

        Parameters
        ----------
        run_id : str
            Unique run identifier.
        log_path : Path
            Path to JSONL log file.
        command : str | None, optional
            CLI command name.
        """
        self.run_id = run_id
        self.log_path = log_path
        self.command = command

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close file."""
        self.close()

    def close(self) -> None:
        """Flush and close the log file handle."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
    ) -> None:
        """Write structured event to log.

        Parameters
        ----------
        event_type : str
            Event type identifier (e.g., "run_started").
        data : dict[str, Any] | None, optional
            Event-specific data payload.
        level : str, optional
            Log level ("DEBUG", "INFO", "WARN", "ERROR").
        """
        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data if data is not None else {},
            command=self.command,
        )
        json.dump(asdict(log_event), self._file, ensure_ascii=False, separators=(",", ":"))
        self._file.write("\n")
        self._file.flush()

    def run_started(self, parameters: dict[str, Any]) -> None:
        """Log run_started event."""
        self.event("run_started", data={"parameters": parameters})

    def run_finished(self, status: str, duration_seconds: float) -> None:
        """Log run_finished event.

        Parameters
        ----------
        status : str
            Run status ("success" or "failed").
        duration_seconds : float
            Total execution time in seconds.
        """
        self.event("run_finished", data={"status": status, "duration_seconds": duration_seconds})

    def graph_loaded(self, path: str, num_vertices: int, num_edges: int) -> None:
        """Log graph_loaded event.

        Parameters
        ----------
        path : str
            Graph document path.
        num_vertices : int
            Vertex count.
        num_edges : int
            Edge count as supplied.
        """
        self.event(
            "graph_loaded",
            data={"path": path, "num_vertices": num_vertices, "num_edges": num_edges},
        )

    def result(self, counters: dict[str, int | float]) -> None:
        """Log result event with query-specific counters."""
        self.event("result", data={"counters": counters})

    def error(self, exception_class: str, message: str) -> None:
        """Log error event.

        Parameters
        ----------
        exception_class : str
            Exception class name.
        message : str
            Error message.
        """
        self.event(
            "error",
            data={"exception_class": exception_class, "message": message},
            level="ERROR",
        )
