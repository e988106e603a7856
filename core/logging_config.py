from pathlib import Path
import logging
import sys
from typing import Optional
from datetime import datetime


def setup_logging(
    logs_dir: Optional[str | Path] = None,
    log_file_name: str = "server.log",
    debug: bool = False,
) -> logging.Logger:
    """Configure root logging to stderr and a file under `logs_dir`.

    Idempotent: calling multiple times won't add duplicate handlers.
    stdout is left alone because the stdio transport owns it.
    `debug` lowers the level of every handler to DEBUG.
    """
    if logs_dir is None:
        logs_dir = Path(__file__).resolve().parent.parent / "logs"
    else:
        logs_dir = Path(logs_dir)

    level = logging.DEBUG if debug else logging.INFO

    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        # continue with stderr only
        pass

    # each run writes to its own timestamped file
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    base = Path(log_file_name).stem
    ext = Path(log_file_name).suffix or ".log"
    log_file = logs_dir / f"{base}_{timestamp}{ext}"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")

    file_handler_exists = False
    for h in root_logger.handlers:
        if isinstance(h, logging.FileHandler) and Path(h.baseFilename).resolve() == log_file.resolve():
            file_handler_exists = True
            h.setLevel(level)
            break

    if not file_handler_exists:
        try:
            fh = logging.FileHandler(log_file, encoding="utf-8")
            fh.setFormatter(formatter)
            fh.setLevel(level)
            root_logger.addHandler(fh)
        except OSError:
            # If file handler cannot be created (permissions, etc), fall back to stderr only
            pass

    stream_stderr_exists = False
    for h in root_logger.handlers:
        if type(h) is logging.StreamHandler and getattr(h, "stream", None) is sys.stderr:
            stream_stderr_exists = True
            h.setLevel(level)
            break

    if not stream_stderr_exists:
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(formatter)
        sh.setLevel(level)
        root_logger.addHandler(sh)

    # httpx logs every request at INFO; keep it for debug runs only
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)

    return logging.getLogger(__name__)
