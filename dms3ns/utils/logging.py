import atexit
from datetime import (
    datetime,
)
import logging
import logging.handlers
import os
from pathlib import (
    Path,
)
import queue
import sys
import tempfile
import threading
from typing import (
    Any,
)

DEBUG_ENV_VAR = "DMS3NS_DEBUG"
DEBUG_FILE_ENV_VAR = "DMS3NS_DEBUG_FILE"

ROOT_LOGGER_NAME = "dms3ns"

# Create a log queue
log_queue: "queue.Queue[Any]" = queue.Queue()

# Store the current listener to stop it on exit
_current_listener: logging.handlers.QueueListener | None = None

# Event to track when the listener is ready
_listener_ready = threading.Event()

# Default format for log messages
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _parse_debug_modules(debug_str: str) -> dict[str, int]:
    """
    Parse the DMS3NS_DEBUG environment variable to determine module-specific
    log levels.

    Format examples:
    - "DEBUG"  # All modules at DEBUG level
    - "dms3ns.records.validator:DEBUG"  # Only the validator at DEBUG
    - "records.validator:DEBUG"  # Same as above, dms3ns prefix is optional
    - "dms3ns.records:DEBUG,dms3ns.peer:INFO"  # Multiple modules
    """
    module_levels: dict[str, int] = {}

    if not debug_str or debug_str.isspace():
        return module_levels

    # A plain log level without any colons applies to every module
    if ":" not in debug_str and debug_str.upper() in logging._nameToLevel:
        return {"": getattr(logging, debug_str.upper())}

    for part in debug_str.split(","):
        if ":" not in part:
            continue

        module, level = part.split(":", 1)
        level = level.strip().upper()

        if level not in logging._nameToLevel:
            continue

        module = module.strip()
        # The prefix is added back when the logger is created
        if module.startswith(f"{ROOT_LOGGER_NAME}."):
            module = module[len(ROOT_LOGGER_NAME) + 1 :]
        module = module.replace("/", ".").strip(".")

        module_levels[module] = getattr(logging, level)

    return module_levels


def _disable_logging() -> None:
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.WARNING)
    root_logger.propagate = False


def setup_logging() -> None:
    """
    Set up logging configuration based on environment variables.

    Environment Variables:
        DMS3NS_DEBUG
            Controls logging levels. Examples:
            - "DEBUG" (all modules at DEBUG level)
            - "dms3ns.records.validator:DEBUG" (only the validator at DEBUG)
            - "records.validator:DEBUG" (same as above, dms3ns prefix optional)
            - "dms3ns.records:DEBUG,dms3ns.peer:INFO" (multiple modules)

        DMS3NS_DEBUG_FILE
            If set, specifies the file path for log output. If not set, logs
            go to a timestamped file in the system's temp directory. Logs are
            always written to stderr as well.

    Loggers follow Python's dotted hierarchy under the ``dms3ns`` root; child
    loggers inherit their parent's level unless explicitly set.
    """
    global _current_listener

    _listener_ready.clear()

    if _current_listener is not None:
        _current_listener.stop()
        _current_listener = None

    module_levels = _parse_debug_modules(os.environ.get(DEBUG_ENV_VAR, ""))

    # Unset or unparseable: stay quiet
    if not module_levels:
        _disable_logging()
        _listener_ready.set()
        return

    formatter = logging.Formatter(DEFAULT_LOG_FORMAT)

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    log_file = os.environ.get(DEBUG_FILE_ENV_VAR)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        unique_id = os.urandom(4).hex()
        log_file = str(
            Path(tempfile.gettempdir()) / f"dms3ns_{timestamp}_{unique_id}.log"
        )
        print(f"Logging to: {log_file}", file=sys.stderr)

    file_handler = logging.FileHandler(log_file, mode="w")
    file_handler.setFormatter(formatter)
    handlers.append(file_handler)

    queue_handler = logging.handlers.QueueHandler(log_queue)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.addHandler(queue_handler)
    root_logger.propagate = False
    root_logger.setLevel(module_levels.get("", logging.INFO))

    for module, level in module_levels.items():
        if module:
            logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{module}")
            logger.handlers.clear()
            logger.addHandler(queue_handler)
            logger.setLevel(level)
            logger.propagate = False  # Prevent message duplication

    # Start the listener after all loggers are configured
    _current_listener = logging.handlers.QueueListener(
        log_queue, *handlers, respect_handler_level=True
    )
    _current_listener.start()

    _listener_ready.set()


@atexit.register
def cleanup_logging() -> None:
    """Clean up logging resources on exit."""
    global _current_listener
    if _current_listener is not None:
        _current_listener.stop()
        _current_listener = None
