"""
Process-wide logging setup. Modules only ever call `logging.getLogger(__name__)`.
"""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"
HANDLER_NAME = "daocore"


def configure_logging(level: str = "INFO") -> None:
    """Install one stream handler on the `daocore` logger at *level*."""
    root = logging.getLogger("daocore")
    root.setLevel(level)
    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
