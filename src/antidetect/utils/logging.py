"""Logging helpers shared by every engine module.

The engine is a library: it installs a NullHandler on its root logger and
leaves output configuration to the caller via ``setup_logging``.
"""

import json
import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "antidetect"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class JsonFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the engine's namespace.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger named ``antidetect.<name>`` unless already namespaced.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
    stream: Optional[object] = None,
) -> logging.Logger:
    """Attach a stream handler to the engine's root logger.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Log level name.
        json_format: Emit JSON lines instead of plain text.
        stream: Target stream (defaults to stderr).

    Returns:
        The configured root logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(logger.handlers):
        if getattr(handler, "_antidetect_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler._antidetect_handler = True
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
    logger.addHandler(handler)
    return logger
