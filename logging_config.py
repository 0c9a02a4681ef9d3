"""
Structured logging configuration for the SHACMAN quotation app.
Import and call setup_logging() once at app startup.
"""
import logging
import logging.handlers
import os
import json
from datetime import datetime, timezone

from cotizador.core.paths import LOG_DIR

LOG_FILE = "cotizador.log"


class JSONFormatter(logging.Formatter):
    """Structured JSON log lines for machine parsing."""
    def format(self, record):
        entry = {
            "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "module": record.module,
            "func": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)
        # Merge extra fields
        for key in ("route", "method", "status", "duration_ms", "model", "client"):
            if hasattr(record, key):
                entry[key] = getattr(record, key)
        return json.dumps(entry, default=str, ensure_ascii=False)


class HumanFormatter(logging.Formatter):
    """Readable console format with color."""
    COLORS = {
        "DEBUG": "\033[36m", "INFO": "\033[32m",
        "WARNING": "\033[33m", "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record):
        color = self.COLORS.get(record.levelname, "")
        ts = datetime.now().strftime("%H:%M:%S")
        line = f"{color}{ts} [{record.levelname[0]}] {record.name}: {record.getMessage()}{self.RESET}"
        if record.exc_info and record.exc_info[0]:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(level=None, json_logs=None, log_dir=None):
    """
    Configure logging for the full application.

    Args:
        level: Override log level (default: from LOG_LEVEL env or INFO)
        json_logs: Force JSON format (default: True when LOG_JSON is set)
        log_dir: Rotating log file directory (default: COTIZADOR_LOG_DIR or logs/)
    """
    if level is None:
        level = os.environ.get("LOG_LEVEL", "INFO").upper()
    if json_logs is None:
        json_logs = bool(os.environ.get("LOG_JSON"))
    log_dir = log_dir or LOG_DIR

    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))
    root.handlers.clear()

    # Console handler
    console = logging.StreamHandler()
    console.setFormatter(JSONFormatter() if json_logs else HumanFormatter())
    root.addHandler(console)

    # File handler — rotates at 5MB, keeps 5 backups
    try:
        os.makedirs(log_dir, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, LOG_FILE),
            maxBytes=5_000_000, backupCount=5, encoding="utf-8",
        )
        fh.setFormatter(JSONFormatter())
        root.addHandler(fh)
    except OSError:
        pass  # skip file logging if dir not writable

    # Quiet noisy libs
    for name in ("werkzeug", "PIL", "reportlab", "pypdf"):
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("cotizador").info("Logging initialized (level=%s)", level)
