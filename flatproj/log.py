import json
import logging
import os

# attributes every LogRecord carries; anything else came in through extra=
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """
    One JSON object per line. Fields passed via extra= (e.g. the CLI's
    command name) are copied in as top-level keys.
    """

    def format(self, record):
        entry = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update((k, v) for k, v in vars(record).items() if k not in _RECORD_ATTRS)
        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


_configured = False


def configure_logging():
    """
    Set up root logging from FLATPROJ_LOG_LEVEL (default INFO) and
    FLATPROJ_LOG_FORMAT ("text" or "json").

    The JSON formatter only goes on the handler basicConfig installs; handlers
    already on the root logger are left alone.
    """
    global _configured
    if _configured:
        return
    root = logging.getLogger()
    existing = list(root.handlers)
    level = os.environ.get("FLATPROJ_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    if os.environ.get("FLATPROJ_LOG_FORMAT", "text").lower() == "json":
        for handler in root.handlers:
            if handler not in existing:
                handler.setFormatter(JsonFormatter())
    _configured = True


def get_logger(name):
    configure_logging()
    return logging.getLogger(name)
