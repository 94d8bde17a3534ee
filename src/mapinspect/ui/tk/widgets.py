"""Tooltip support for the inspector's editor labels."""

from __future__ import annotations

from .theme import get_palette

try:  # pragma: no cover - importing tkinter is environment dependent
    import tkinter as tk
except Exception:  # pragma: no cover - fallback when tkinter missing
    tk = None  # type: ignore


class FieldTooltip:
    """Show *text* under *anchor* after the pointer rests on it for *delay* ms.

    The tooltip follows the anchor's lifetime: destroying the anchor cancels
    a pending timer and closes an open tip.
    """

    wrap_length = 320
    offset = (4, 6)

    def __init__(self, anchor: tk.Widget, text: str, *, delay: int = 400) -> None:
        self.anchor = anchor
        self.text = text
        self.delay = delay
        self._after: str | None = None
        self.window: tk.Toplevel | None = None
        anchor.bind("<Enter>", lambda e: self.schedule(), add=True)
        anchor.bind("<Leave>", lambda e: self.close(), add=True)
        anchor.bind("<ButtonPress>", lambda e: self.close(), add=True)
        anchor.bind("<Destroy>", self._on_destroy, add=True)

    @property
    def pending(self) -> bool:
        return self._after is not None

    def schedule(self) -> None:
        self.cancel()
        self._after = self.anchor.after(self.delay, self.open)

    def cancel(self) -> None:
        after, self._after = self._after, None
        if after is not None:
            self.anchor.after_cancel(after)

    def open(self) -> None:
        self._after = None
        if self.window is not None or not self.text:
            return
        dx, dy = self.offset
        x = self.anchor.winfo_rootx() + dx
        y = self.anchor.winfo_rooty() + self.anchor.winfo_height() + dy
        palette = get_palette()
        window = tk.Toplevel(self.anchor)
        window.wm_overrideredirect(True)
        window.wm_geometry(f"+{x}+{y}")
        tk.Label(
            window,
            text=self.text,
            bg=palette["tooltip_bg"],
            fg=palette["tooltip_fg"],
            padx=8,
            pady=6,
            justify="left",
            wraplength=self.wrap_length,
        ).pack()
        self.window = window

    def close(self) -> None:
        self.cancel()
        window, self.window = self.window, None
        if window is not None and window.winfo_exists():
            window.destroy()

    def _on_destroy(self, event: tk.Event) -> None:
        # a toplevel anchor also receives <Destroy> for each of its children
        if str(event.widget) == str(self.anchor):
            self.close()


__all__ = ["FieldTooltip"]
