import logging
from logging.handlers import RotatingFileHandler
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
STREAM_HANDLER_NAME = "chatserver.stdout"
FILE_HANDLER_NAME = "chatserver.file"


def _install(root: logging.Logger, handler: logging.Handler, name: str, formatter) -> None:
    # Repeated startups in one process must not duplicate output.
    if any(h.get_name() == name for h in root.handlers):
        handler.close()
        return
    handler.set_name(name)
    handler.setFormatter(formatter)
    root.addHandler(handler)


def setup_logging(level: str = "INFO", log_file: str | None = None):
    root = logging.getLogger()
    root.setLevel(logging.WARNING)  # Keep third-party loggers quiet
    formatter = logging.Formatter(LOG_FORMAT)

    _install(root, logging.StreamHandler(sys.stdout), STREAM_HANDLER_NAME, formatter)

    # Set up file logging if log_file provided with rotation
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        _install(root, file_handler, FILE_HANDLER_NAME, formatter)

    logging.getLogger("chatserver").setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger("chatserver").info("Logging is set up.")

    return root
