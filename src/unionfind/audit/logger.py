"""Structured audit logger for JSONL event logging.

Provides append-only structured event logging to JSONL files with
a persistent file handle for efficient I/O.
"""

import json
from collections.abc import Hashable
from dataclasses import asdict
from pathlib import Path
from typing import Any

from unionfind.audit.helpers import to_json_safe
from unionfind.audit.models import LEVELS, LogEvent
from unionfind.utils import get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """JSONL audit logger with persistent file handle.

    Writes structured log events to a JSONL file (one JSON object per line).
    Events are append-only and flushed after each write for durability.

    Attributes
    ----------
    run_id : str
        Unique run identifier.
    log_path : Path
        Path to JSONL log file.
    current_stage : str | None
        Current stage name (e.g., "read", "group", "write"), stamped on
        every event.
    """

    def __init__(self, run_id: str, log_path: Path) -> None:
        """Initialize audit logger and open file handle.

        Parameters
        ----------
        run_id : str
            Unique run identifier.
        log_path : Path
            Path to JSONL log file.
        """
        self.run_id = run_id
        self.log_path = Path(log_path)
        self.current_stage: str | None = None

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close file."""
        self.close()

    @property
    def closed(self) -> bool:
        return self._file.closed

    def close(self) -> None:
        """Flush and close the log file handle."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def set_stage(self, stage: str | None) -> None:
        """Set current stage context.

        Parameters
        ----------
        stage : str | None
            Stage name or None to clear.
        """
        self.current_stage = stage

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        element: Hashable | None = None,
    ) -> None:
        """Write structured event to log.

        Parameters
        ----------
        event_type : str
            Event type identifier (e.g., "sets_merged").
        data : dict[str, Any] | None, optional
            Event-specific data payload.
        level : str, optional
            Log level ("DEBUG", "INFO", "WARN", "ERROR").
        element : Hashable | None, optional
            Element the event is about.

        Raises
        ------
        ValueError
            If level is not a known log level.
        """
        if level not in LEVELS:
            raise ValueError(f"Unknown log level: {level!r}. Valid levels: {sorted(LEVELS)}")

        if data is None:
            data = {}

        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data,
            stage=self.current_stage,
            element=to_json_safe(element) if element is not None else None,
        )

        self._write_event(log_event)

    def _write_event(self, event: LogEvent) -> None:
        """Write event to JSONL file and flush.

        Parameters
        ----------
        event : LogEvent
            Event to write.
        """
        event_dict = asdict(event)
        json.dump(event_dict, self._file, ensure_ascii=False, separators=(",", ":"))
        self._file.write("\n")
        self._file.flush()

    def run_started(self, command: list[str], parameters: dict[str, Any]) -> None:
        """Log run_started event.

        Parameters
        ----------
        command : list[str]
            Command-line arguments.
        parameters : dict[str, Any]
            Configuration parameters.
        """
        self.event(
            "run_started",
            data={"command": command, "parameters": parameters},
        )

    def run_finished(
        self,
        status: str,
        duration_seconds: float,
        elements_processed: int | None = None,
    ) -> None:
        """Log run_finished event.

        Parameters
        ----------
        status : str
            Run status ("success", "failed").
        duration_seconds : float
            Total execution time in seconds.
        elements_processed : int | None, optional
            Total elements seen during the run.
        """
        data: dict[str, Any] = {
            "status": status,
            "duration_seconds": duration_seconds,
        }
        if elements_processed is not None:
            data["elements_processed"] = elements_processed

        self.event("run_finished", data=data)

    def pairs_read(self, path: str, pair_count: int) -> None:
        """Log pairs_read event.

        Parameters
        ----------
        path : str
            Input pairs file.
        pair_count : int
            Number of pairs read.
        """
        self.event("pairs_read", data={"path": path, "pair_count": pair_count})

    def components_written(self, path: str, component_count: int) -> None:
        """Log components_written event.

        Parameters
        ----------
        path : str
            Output components file.
        component_count : int
            Number of components written.
        """
        self.event(
            "components_written",
            data={"path": path, "component_count": component_count},
        )

    def element_added(self, element: Hashable) -> None:
        """Log element_added event at DEBUG level.

        Parameters
        ----------
        element : Hashable
            Newly added element.
        """
        self.event("element_added", level="DEBUG", element=element)

    def sets_merged(self, root: Hashable, absorbed: Hashable, rank: int) -> None:
        """Log sets_merged event.

        Parameters
        ----------
        root : Hashable
            Surviving root of the merged class.
        absorbed : Hashable
            Former root now pointing at root.
        rank : int
            Rank of root after the merge.
        """
        self.event(
            "sets_merged",
            data={"absorbed": to_json_safe(absorbed), "rank": rank},
            element=root,
        )

    def error(
        self,
        exception_class: str,
        message: str,
    ) -> None:
        """Log error event.

        Parameters
        ----------
        exception_class : str
            Exception class name.
        message : str
            Error message.
        """
        data: dict[str, Any] = {
            "exception_class": exception_class,
            "message": message,
        }
        self.event("error", data=data, level="ERROR")
