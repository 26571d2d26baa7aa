"""Structured JSONL event logging for page actions."""
import json
import logging
import os
import time

log = logging.getLogger(__name__)


class ActionEventLogger:
    """Writes one JSON line per page action to a per-run JSONL file.

    All logging is best-effort — methods never raise exceptions.
    Supports context-manager protocol for automatic close.

    An optional ``session`` field is included in every event when provided
    and omitted otherwise.
    """

    def __init__(self, run_id: str, log_dir: str = "data/logs/actions",
                 session: str | None = None):
        self._run_id = run_id
        self._session = session
        self._f = None
        self.path = ""
        try:
            os.makedirs(log_dir, exist_ok=True)
            safe_run = run_id.replace("/", "_").replace("\\", "_")
            self.path = os.path.join(log_dir, f"actions_{safe_run}.jsonl")
            self._f = open(self.path, "a", encoding="utf-8")
        except Exception as e:
            log.warning(f"ActionEventLogger: failed to open log file: {e}")

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _write(self, event: dict):
        if self._f is None:
            return
        try:
            event["ts"] = time.time()
            event["run_id"] = self._run_id
            if self._session is not None:
                event["session"] = self._session
            self._f.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._f.flush()
        except Exception as e:
            log.warning(f"ActionEventLogger: write failed: {e}")

    def log_navigation(self, action: str, url: str, ok: bool, duration: float,
                       waited_ms: int | None = None):
        """Log a navigation. ``action`` is one of goto, back, forward, reload."""
        self._write({
            "event": "navigation",
            "action": action,
            "url": url,
            "ok": ok,
            "duration": duration,
            "waited_ms": waited_ms,
        })

    def log_interaction(self, action: str, target: str, ok: bool, duration: float,
                        waited_ms: int | None = None, detail: str | None = None):
        """Log an element interaction (click, fill, click_text)."""
        self._write({
            "event": "interaction",
            "action": action,
            "target": target,
            "ok": ok,
            "duration": duration,
            "waited_ms": waited_ms,
            "detail": detail,
        })

    def log_error(self, action: str, target: str, error: str):
        self._write({
            "event": "error",
            "action": action,
            "target": target,
            "error": error,
        })

    def close(self):
        if self._f is not None:
            try:
                self._f.flush()
                self._f.close()
            except Exception as e:
                log.warning(f"ActionEventLogger: close failed: {e}")
            self._f = None
