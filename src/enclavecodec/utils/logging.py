import logging
import sys
from typing import Optional

from ..config import LOG_LEVEL

ROOT_LOGGER = "enclavecodec"


def _configure(root: logging.Logger) -> None:
    # stdout carries tool output only
    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s"))
    root.addHandler(h)
    root.setLevel(getattr(logging, LOG_LEVEL, logging.WARNING))


def get_logger(name: Optional[str] = None):
    """Return the package logger, or its ``enclavecodec.<name>`` child.

    The stderr handler lives on the package logger only; children propagate.
    """
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        _configure(root)
    return root.getChild(name) if name else root
