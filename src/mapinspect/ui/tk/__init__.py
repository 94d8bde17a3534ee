"""Tk front-end for the inspector popup.

:func:`open_inspector` wires a :class:`~.popup.TkPopupShell`, an
:class:`~mapinspect.ui.inspector_view.InspectorView` rendering into the
shell's table and an :class:`~mapinspect.ui.core.InspectorPopup`
controller publishing on the given event bus.
"""

from __future__ import annotations

from ...config import InspectorConfig, load_config
from ...events import Emitter
from ..core import InspectorPopup
from ..inspector_view import InspectorView
from . import editors  # noqa: F401 - registers the Tk editor widgets
from .popup import TkPopupShell
from .theme import use

try:  # pragma: no cover - tkinter availability depends on the env
    import tkinter as tk
except Exception:  # pragma: no cover - fallback when tkinter missing
    tk = None  # type: ignore


def open_inspector(
    master: tk.Misc,
    events: Emitter,
    *,
    config: InspectorConfig | None = None,
) -> InspectorPopup:
    """Return an inspector controller whose popup is placed over *master*."""

    if tk is None:  # pragma: no cover - environment without tkinter
        raise RuntimeError("tkinter is required for the inspector popup")
    use(master)
    shell = TkPopupShell(master)
    view = InspectorView(shell.table)
    return InspectorPopup(shell, view, events, config=config or load_config())


__all__ = ["TkPopupShell", "open_inspector"]
