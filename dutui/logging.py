from __future__ import annotations

import logging
import os
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path


def _resolve_log_dir(settings: object) -> Path | None:
    """Resolve the log directory, or None when file logging is disabled.

    Relative paths are taken from the current working directory.
    """

    raw = getattr(settings, "DUTUI_LOG_DIR", None)
    if raw is None or str(raw).strip() == "":
        return None
    p = raw if isinstance(raw, Path) else Path(str(raw))
    return p.expanduser().resolve()


def setup_logging(settings: object, level: str | None = None) -> Path | None:
    """Configure Python logging for a dutui run.

    Always logs to stderr. When DUTUI_LOG_DIR is set, also writes a daily
    rotating `dutui.log` there and returns its path.

    Notes:
      - `level` overrides DUTUI_LOG_LEVEL (the CLI's --log-level).
      - This function is safe to call multiple times (it resets handlers).
    """

    level_name = str(level or getattr(settings, "DUTUI_LOG_LEVEL", "WARNING") or "WARNING").upper().strip()
    resolved_level = getattr(logging, level_name, logging.WARNING)

    fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(fmt)

    # Reset root handlers so repeated runs in one process don't duplicate output.
    root = logging.getLogger()
    root.handlers = []
    root.setLevel(resolved_level)
    root.addHandler(console_handler)

    log_dir = _resolve_log_dir(settings)
    log_file: Path | None = None
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "dutui.log"
        file_handler = TimedRotatingFileHandler(
            filename=str(log_file),
            when="midnight",
            interval=1,
            backupCount=max(0, int(getattr(settings, "DUTUI_LOG_BACKUP_COUNT", 7) or 0)),
            encoding="utf-8",
            utc=False,
        )
        file_handler.setLevel(resolved_level)
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)

    logging.getLogger("dutui").debug(
        "dutui logging enabled (file=%s, level=%s)",
        os.fspath(log_file) if log_file else None,
        level_name,
    )

    return log_file
