"""
textseg/logging_config.py
-------------------------
Centralized logging configuration for the textseg toolkit.

Every module obtains its logger through `get_logger(__name__)`, so all
records land under the single "textseg" namespace and share one handler.

Log levels:
    DEBUG   — per-call summaries (chunk counts, run counts, unmatched markers)
    INFO    — CLI / service events (file analysed, request received)
    WARNING — recoverable issues
    ERROR   — report validation failures that propagate to the caller

To change the level at runtime:
    import logging
    logging.getLogger("textseg").setLevel(logging.DEBUG)
"""

import logging
import sys


# ── Configuration ──────────────────────────────────────────────────────────────

_LOG_FORMAT  = "%(asctime)s [%(levelname)-8s] %(name)s — %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_ROOT_NAME   = "textseg"


def configure_logging(level: int = logging.INFO) -> None:
    """
    Attaches a stdout StreamHandler to the 'textseg' logger.

    Calling it again is a no-op once a handler is present.

    Args:
        level: Logging level for the textseg namespace (default: INFO).
    """
    root = logging.getLogger(_ROOT_NAME)

    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger parented under the 'textseg' namespace.

    Module names outside the package (app, service.api, validator.*) are
    prefixed so they share the same handler.

    Args:
        name: Typically __name__ of the calling module.

    Returns:
        A configured logging.Logger instance.
    """
    configure_logging()
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + "."):
        name = f"{_ROOT_NAME}.{name}"
    return logging.getLogger(name)
