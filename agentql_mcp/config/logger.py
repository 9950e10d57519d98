import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from datetime import datetime, timezone

# --- Configuration ---
LOG_DIR = os.getenv("LOG_DIR", "")
LOG_FILE = os.path.join(LOG_DIR, "agentql-mcp.log") if LOG_DIR else ""
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 5


# --- Formatters ---
class UTCFormatter(logging.Formatter):
    """Custom formatter that enforces UTC timestamps."""

    def formatTime(self, record, datefmt=None):
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return dt.strftime(datefmt) if datefmt else dt.isoformat()


formatter = UTCFormatter(
    "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S %Z",
)


# --- Handlers ---
# stdout belongs to the stdio transport, so the console handler writes to stderr
console_handler = logging.StreamHandler(sys.stderr)
console_handler.setFormatter(formatter)


def _file_handler():
    if not LOG_FILE:
        return None
    os.makedirs(LOG_DIR, exist_ok=True)
    handler = RotatingFileHandler(
        LOG_FILE,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    return handler


# --- Root Logger Setup ---
def setup_logging():
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    handlers = [console_handler]
    file_handler = _file_handler()
    if file_handler is not None:
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        handlers=handlers,
    )

    def handle_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logging.critical(
            "Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback)
        )

    sys.excepthook = handle_exception

    # --- Third-party Logging ---
    logging.getLogger("aiohttp.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


setup_logging()
