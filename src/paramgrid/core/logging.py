from __future__ import annotations

import logging
import sys

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
_HANDLER_NAME = "paramgrid-stdout"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure stdlib logging for paramgrid.

    Calling it again only changes the level; the stdout handler is replaced,
    never duplicated. Unknown level names fall back to INFO.
    """
    numeric_level = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler.setLevel(numeric_level)

    root = logging.getLogger("paramgrid")
    for old in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(old)
    root.setLevel(numeric_level)
    root.addHandler(handler)
    return root
