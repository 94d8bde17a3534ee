"""Tk implementation of the inspector popup shell."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ...events import EventBus, ListenerToken
from ..layout import PopupGeometry
from .theme import get_palette

try:  # pragma: no cover - importing tkinter is environment dependent
    import tkinter as tk
    from tkinter import ttk
except Exception:  # pragma: no cover - fallback when tkinter missing
    tk = None  # type: ignore
    ttk = None  # type: ignore

logger = logging.getLogger(__name__)

_RESIZE = "resize"


class TkPopupShell:
    """A framed popup placed over *master*.

    The popup has a title row with an "Import layers" link, a table frame
    that hosts the field editors and an OK/Cancel button row.  Resize
    notifications are derived from ``<Configure>`` events on *master*.
    """

    def __init__(
        self,
        master: tk.Misc,
        *,
        ok_text: str = "OK",
        cancel_text: str = "Cancel",
        import_text: str = "Import layers",
    ) -> None:
        if tk is None or ttk is None:  # pragma: no cover - tkinter missing
            raise RuntimeError("tkinter is required for TkPopupShell")
        self.master = master
        self._resize = EventBus()
        self._on_ok: Callable[[], Any] | None = None
        self._on_cancel: Callable[[], Any] | None = None
        self._on_import: Callable[[], Any] | None = None
        self._visible = False

        palette = get_palette()
        self.frame = tk.Frame(
            master,
            bg=palette["card"],
            highlightthickness=1,
            highlightbackground=palette["card_edge"],
            padx=18,
            pady=12,
        )

        header = ttk.Frame(self.frame, style="Inspector.TFrame")
        header.pack(fill="x")
        self.title_label = ttk.Label(header, text="", style="InspectorTitle.TLabel")
        self.title_label.pack(side="left")
        self.import_link = ttk.Label(
            header, text=import_text, style="InspectorLink.TLabel", cursor="hand2"
        )
        self.import_link.pack(side="right")
        self.import_link.bind("<Button-1>", lambda e: self._fire(self._on_import))

        self.table = ttk.Frame(self.frame, style="Inspector.TFrame")
        self.table.pack(fill="both", expand=True, pady=(12, 12))
        self.table.columnconfigure(1, weight=1)

        buttons = ttk.Frame(self.frame, style="Inspector.TFrame")
        buttons.pack(fill="x")
        self.cancel_button = ttk.Button(
            buttons, text=cancel_text, command=lambda: self._fire(self._on_cancel)
        )
        self.cancel_button.pack(side="right")
        self.ok_button = ttk.Button(
            buttons,
            text=ok_text,
            style="InspectorSubmit.TButton",
            command=lambda: self._fire(self._on_ok),
        )
        self.ok_button.pack(side="right", padx=(0, 8))

        master.bind("<Configure>", self._on_configure, add="+")

    # -- PopupShell ----------------------------------------------------
    def set_title(self, text: str) -> None:
        self.title_label.configure(text=text)

    def set_import_visible(self, visible: bool) -> None:
        if visible:
            self.import_link.pack(side="right")
        else:
            self.import_link.pack_forget()

    def bind_actions(
        self,
        *,
        on_ok: Callable[[], Any],
        on_cancel: Callable[[], Any],
        on_import: Callable[[], Any],
    ) -> None:
        self._on_ok = on_ok
        self._on_cancel = on_cancel
        self._on_import = on_import

    def show(self) -> None:
        self.frame.place(x=0, y=0)
        self.frame.lift()
        self._visible = True
        self.frame.update_idletasks()

    def remove(self) -> None:
        self.frame.place_forget()
        self._visible = False

    @property
    def visible(self) -> bool:
        return self._visible

    def width(self) -> int:
        width = self.frame.winfo_width()
        return width if width > 1 else self.frame.winfo_reqwidth()

    def container_size(self) -> tuple[int, int]:
        return self.master.winfo_width(), self.master.winfo_height()

    def apply_geometry(self, geometry: PopupGeometry) -> None:
        height = min(self.frame.winfo_reqheight(), geometry.max_height)
        self.frame.place(x=geometry.left, y=geometry.top, height=height)

    def listen_resize(self, callback: Callable[[tuple[int, int]], Any]) -> ListenerToken:
        return self._resize.on(_RESIZE, lambda payload: callback(payload["size"]))

    def unlisten_resize(self, token: ListenerToken) -> bool:
        return self._resize.unlisten(token)

    @property
    def resize_listener_count(self) -> int:
        return self._resize.listener_count(_RESIZE)

    # -- internals -----------------------------------------------------
    def _on_configure(self, event: tk.Event) -> None:
        if event.widget is not self.master:
            return
        self._resize.emit(_RESIZE, {"size": (event.width, event.height)})

    @staticmethod
    def _fire(callback: Callable[[], Any] | None) -> None:
        if callback is None:
            logger.debug("popup action fired before actions were bound")
            return
        callback()


__all__ = ["TkPopupShell"]
