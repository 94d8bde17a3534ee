"""Palette and ttk styles for the inspector popup."""

from __future__ import annotations

from collections.abc import Mapping

try:  # pragma: no cover - importing tkinter is environment dependent
    import tkinter as tk
    from tkinter import ttk
except Exception:  # pragma: no cover - fallback when tkinter missing
    tk = None  # type: ignore
    ttk = None  # type: ignore

_PALETTE: dict[str, str] = {
    "shade": "#2B313B",
    "card": "#FFFFFF",
    "card_edge": "#C8D3E6",
    "ink": "#0E1724",
    "ink_muted": "#586A84",
    "link": "#1E40AF",
    "error": "#B91C1C",
    "primary": "#365DC6",
    "on_primary": "#F7FAFF",
    "tooltip_bg": "#0E1724",
    "tooltip_fg": "#F7FAFF",
}

_ACTIVE_PALETTE: dict[str, str] = {}


def get_palette() -> dict[str, str]:
    """Return the palette most recently applied with :func:`use`."""

    return _ACTIVE_PALETTE if _ACTIVE_PALETTE else _PALETTE


def use(root: tk.Misc, *, palette: Mapping[str, str] | None = None) -> None:
    """Register the inspector styles on *root*."""

    global _ACTIVE_PALETTE
    colors = dict(_PALETTE)
    colors.update(palette or {})
    _ACTIVE_PALETTE = colors

    if ttk is None:  # pragma: no cover - ttk unavailable in some environments
        return
    style = ttk.Style(root)
    style.configure("Inspector.TFrame", background=colors["card"])
    style.configure(
        "InspectorTitle.TLabel",
        background=colors["card"],
        foreground=colors["ink"],
        font=(None, 13, "bold"),
    )
    style.configure(
        "InspectorLink.TLabel",
        background=colors["card"],
        foreground=colors["link"],
        font=(None, 9, "underline"),
    )
    style.configure(
        "InspectorKey.TLabel", background=colors["card"], foreground=colors["ink_muted"]
    )
    style.configure("Inspector.TCheckbutton", background=colors["card"])
    style.configure("InspectorSubmit.TButton", foreground=colors["primary"])


__all__ = ["get_palette", "use"]
