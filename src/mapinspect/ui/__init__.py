"""User interface for the inspector popup.

This package contains a framework agnostic core layer (:mod:`.core`,
:mod:`.inspector_view`, :mod:`.layout`) and a tkinter front-end in
:mod:`.tk`.  Set ``MAPINSPECT_DEBUG`` to log lifecycle transitions.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger("mapinspect.ui")
if os.environ.get("MAPINSPECT_DEBUG") and not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

__all__ = ["core", "inspector_view", "layout", "tk"]
