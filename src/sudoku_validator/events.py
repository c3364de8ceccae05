"""Diagnostic event reporters.

Checks describe what they saw as small ``dict`` events and hand them to a
reporter.  A reporter is any callable accepting one event; the result of a
check never depends on it.
"""

from __future__ import annotations

import json
import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List

__all__ = [
    "CollectingReporter",
    "JsonlReporter",
    "LoggingReporter",
    "Reporter",
    "emit",
    "fanout",
]

Reporter = Callable[[Dict[str, Any]], None]

_LOGGER = logging.getLogger(__name__)
_DEFAULT_MAX_BYTES = 100 * 1024 * 1024
_LOCK = threading.Lock()


def _is_ok(event: Dict[str, Any]) -> bool:
    return str(event.get("event", "")).endswith(".ok")


class LoggingReporter:
    """Forward events to :mod:`logging`; failures at WARNING."""

    def __init__(self, logger: logging.Logger | None = None, ok_level: int = logging.DEBUG) -> None:
        self._logger = logger or _LOGGER
        self._ok_level = ok_level

    def __call__(self, event: Dict[str, Any]) -> None:
        level = self._ok_level if _is_ok(event) else logging.WARNING
        self._logger.log(level, "%s", event.get("message", event.get("event")))


class CollectingReporter:
    """Keep events in memory, mostly for tests and reports."""

    def __init__(self) -> None:
        self.events: List[Dict[str, Any]] = []

    def __call__(self, event: Dict[str, Any]) -> None:
        self.events.append(dict(event))

    def names(self) -> List[str]:
        return [event["event"] for event in self.events]

    def failures(self) -> List[Dict[str, Any]]:
        return [event for event in self.events if not _is_ok(event)]

    def messages(self) -> List[str]:
        return [event["message"] for event in self.events]


class JsonlReporter:
    """Append events to dated JSONL files, rotating by size."""

    def __init__(self, base_dir: str | Path, *, max_bytes: int | None = None) -> None:
        self._log_dir = Path(base_dir)
        self._max_bytes = max_bytes or _DEFAULT_MAX_BYTES
        self._current_path: Path | None = None

    @property
    def current_path(self) -> Path | None:
        return self._current_path

    def _date_prefix(self) -> str:
        return datetime.now(timezone.utc).strftime("%Y%m%d")

    def _resolve_log_path(self) -> Path:
        date_dir = self._log_dir / self._date_prefix()
        date_dir.mkdir(parents=True, exist_ok=True)

        current = self._current_path
        if current is not None and current.parent == date_dir and current.exists():
            if current.stat().st_size < self._max_bytes:
                return current

        counter = 0
        while True:
            candidate = date_dir / f"validation_{counter:02d}.jsonl"
            if not candidate.exists() or candidate.stat().st_size < self._max_bytes:
                self._current_path = candidate
                return candidate
            counter += 1

    def __call__(self, event: Dict[str, Any]) -> None:
        payload = dict(event)
        payload.setdefault("ts", datetime.now(timezone.utc).isoformat(timespec="milliseconds"))

        line = json.dumps(payload, sort_keys=True, ensure_ascii=False)
        with _LOCK:
            path = self._resolve_log_path()
            with path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")


def fanout(*reporters: Reporter) -> Reporter:
    """Combine several reporters into one."""

    def _report(event: Dict[str, Any]) -> None:
        for reporter in reporters:
            reporter(event)

    return _report


_DEFAULT_REPORTER = LoggingReporter()


def emit(reporter: Reporter | None, event: str, message: str, **fields: Any) -> None:
    payload: Dict[str, Any] = {"event": event, "message": message}
    payload.update(fields)
    (reporter if reporter is not None else _DEFAULT_REPORTER)(payload)
