"""Structured audit logger for JSONL event logging.

Provides append-only structured event logging to JSONL files with
a persistent file handle.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from ufset.audit.helpers import render_key
from ufset.audit.models import LOG_LEVELS, LogEvent
from ufset.utils import get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """JSONL audit logger with persistent file handle.

    Writes structured log events to a JSONL file (one JSON object per line).
    Events are append-only and flushed after each write.

    Attributes
    ----------
    run_id : str
        Unique run identifier.
    log_path : Path
        Path to JSONL log file.
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
            Event type identifier (e.g., "sets_merged").
        data : dict[str, Any] | None, optional
            Event-specific data payload.
        level : str, optional
            Log level ("DEBUG", "INFO", "WARN", "ERROR").

        Raises
        ------
        ValueError
            If ``level`` is not a known log level.
        """
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {level}")

        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data if data is not None else {},
        )

        self._write_event(log_event)

    def _write_event(self, event: LogEvent) -> None:
        event_dict = asdict(event)
        json.dump(
            event_dict,
            self._file,
            ensure_ascii=False,
            separators=(",", ":"),
            default=str,
        )
        self._file.write("\n")
        self._file.flush()

    def sets_merged(
        self,
        key_a: object,
        key_b: object,
        absorbed: object,
        into: object,
        mode: str,
    ) -> None:
        """Log sets_merged event.

        Parameters
        ----------
        key_a : object
            First key passed to union.
        key_b : object
            Second key passed to union.
        absorbed : object
            Key of the root that was attached under another node.
        into : object
            Key of the node it was attached under.
        mode : str
            Container mode.
        """
        self.event(
            "sets_merged",
            data={
                "key_a": render_key(key_a),
                "key_b": render_key(key_b),
                "absorbed": render_key(absorbed),
                "into": render_key(into),
                "mode": mode,
            },
            level="DEBUG",
        )

    def tree_extracted(self, roots: int, nodes: int) -> None:
        """Log tree_extracted event.

        Parameters
        ----------
        roots : int
            Number of trees in the extracted forest.
        nodes : int
            Total number of nodes across the forest.
        """
        self.event("tree_extracted", data={"roots": roots, "nodes": nodes})

    def pairs_loaded(self, path: str, pair_count: int) -> None:
        """Log pairs_loaded event.

        Parameters
        ----------
        path : str
            Input file path.
        pair_count : int
            Number of pairs read.
        """
        self.event("pairs_loaded", data={"path": path, "pair_count": pair_count})

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
