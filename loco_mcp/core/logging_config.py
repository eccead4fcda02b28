from pathlib import Path
import logging
import os
import sys
from typing import Optional
from datetime import datetime


def setup_logging(
    logs_dir: Optional[str | Path] = None,
    log_file_name: str = "server.log",
    level: int | str = logging.INFO,
) -> logging.Logger:
    """Configure root logging to stderr and a file under `logs_dir`.

    Idempotent: calling multiple times won't add duplicate handlers.
    stdout is reserved for the MCP stdio transport, so the stream handler
    always writes to stderr. Relative `logs_dir` values resolve against the
    current working directory. Returns a module-level logger for callers to use.
    """
    if logs_dir is None:
        logs_dir = Path.cwd() / "logs"
    else:
        logs_dir = Path(logs_dir)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")

    base = Path(log_file_name).stem
    ext = Path(log_file_name).suffix or ".log"

    # One server log file per process; each run writes to a timestamped file
    file_handler_exists = False
    for h in root_logger.handlers:
        if isinstance(h, logging.FileHandler) and hasattr(h, "baseFilename"):
            existing = Path(h.baseFilename)
            if (
                existing.parent == Path(os.path.abspath(logs_dir))
                and existing.name.startswith(f"{base}_")
                and existing.suffix == ext
            ):
                file_handler_exists = True
                break

    if not file_handler_exists:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = logs_dir / f"{base}_{timestamp}{ext}"
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_file, encoding="utf-8")
            fh.setFormatter(formatter)
            fh.setLevel(level)
            root_logger.addHandler(fh)
        except OSError:
            # Read-only working directory: stderr only
            pass

    stream_stderr_exists = False
    for h in root_logger.handlers:
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler):
            if getattr(h, "stream", None) is sys.stderr:
                stream_stderr_exists = True
                break

    if not stream_stderr_exists:
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(formatter)
        sh.setLevel(level)
        root_logger.addHandler(sh)

    return logging.getLogger(__name__)

