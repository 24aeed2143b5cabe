import logging
import sys

LOGGER_NAME = "hxheaders"


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Package logger; the stdout handler is attached once on the root "hxheaders" logger."""
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s %(message)s"))
        root.addHandler(h)
        root.setLevel(logging.INFO)
    return logging.getLogger(name)
