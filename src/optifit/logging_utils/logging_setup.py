# logging_setup.py
"""
Application logging for optifit.
- All modules log through children of the 'optifit' logger (get_logger).
- start_logging() installs a QueueHandler on that logger; a QueueListener
  thread owns the RotatingFileHandler, so callers never block on disk I/O.
- Nothing is configured on import; a library user that never calls
  start_logging() only gets whatever handlers it installs itself.
"""

from __future__ import annotations
import atexit
import logging
import queue
from datetime import datetime
from pathlib import Path
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler

# ------------------------- Paths & constants -------------------------

LOG_DIR = Path.home() / "OptifitLogs"

# Main logger name used across the app
LOGGER_NAME = "optifit"

logging_fmt_console = logging.Formatter("[%(levelname)s] %(message)s")
logging_fmt_file = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s %(message)s")

# ------------------------- Module-level state -------------------------

_queue: queue.Queue | None = None
_listener: QueueListener | None = None
_log_path: Path | None = None
_crash_path: Path | None = None


# ------------------------- Public API -------------------------

def start_logging(log_dir: Path | None = None, level: int = logging.INFO,
                  console: bool = False) -> Path:
    """
    Start the background writer and route the 'optifit' logger through it.
    Safe to call more than once; returns the active log file path.
    """
    global _queue, _listener, _log_path, _crash_path

    # Avoid double-start
    if _listener is not None:
        return _log_path

    log_dir = Path(log_dir) if log_dir is not None else LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    _log_path = log_dir / f"optifit_{timestamp}.log"
    _crash_path = log_dir / f"crash_{timestamp}.log"

    fh = RotatingFileHandler(_log_path, maxBytes=5_000_000, backupCount=5,
                             encoding="utf-8")
    fh.setFormatter(logging_fmt_file)
    handlers: list[logging.Handler] = [fh]
    if console:
        sh = logging.StreamHandler()
        sh.setFormatter(logging_fmt_console)
        handlers.append(sh)

    _queue = queue.Queue(-1)
    _listener = QueueListener(_queue, *handlers, respect_handler_level=True)
    _listener.start()

    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    if not any(isinstance(h, QueueHandler) for h in lg.handlers):
        lg.addHandler(QueueHandler(_queue))

    # Try to shutdown cleanly on normal interpreter exit
    atexit.register(shutdown_logging)
    return _log_path


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return the root app logger ('optifit') or a child under it,
    so all children inherit the handlers attached to 'optifit'.
    """
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)

    # Module names already live under the package
    if name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def shutdown_logging() -> None:
    """
    Flush pending records, stop the writer and detach the queue handler.
    Safe to call multiple times.
    """
    global _queue, _listener

    lg = logging.getLogger(LOGGER_NAME)
    for h in list(lg.handlers):
        if isinstance(h, QueueHandler):
            lg.removeHandler(h)
            h.close()

    if _listener is not None:
        _listener.stop()  # drains the queue
        for h in _listener.handlers:
            h.flush()
            h.close()

    _listener = None
    _queue = None


def install_crash_hooks() -> None:
    """
    Mirrors uncaught exceptions to the app logger and to the crash file.
    Call this once after start_logging().
    """
    import sys
    import threading
    import traceback

    def _excepthook(exc_type, exc, tb):
        get_logger().critical("UNCAUGHT EXCEPTION", exc_info=(exc_type, exc, tb))
        if _crash_path is not None:
            try:
                with open(_crash_path, "a", encoding="utf-8") as f:
                    traceback.print_exception(exc_type, exc, tb, file=f)
            except OSError:
                get_logger().exception("Could not write crash file %s", _crash_path)

    def _thread_excepthook(args):
        _excepthook(args.exc_type, args.exc_value, args.exc_traceback)

    sys.excepthook = _excepthook
    threading.excepthook = _thread_excepthook
