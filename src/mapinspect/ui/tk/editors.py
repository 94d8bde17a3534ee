"""Tk field editors for the inspector table.

Each factory takes ``(table, spec, row)``, lays out a label and an input
widget on ``row`` of *table* and returns an :class:`EditorRow` implementing
the :class:`~mapinspect.ui.inspector_view.EditorWidget` protocol.  Importing
this module registers the factories in
:data:`~mapinspect.editors.EDITOR_TYPES`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

from ...editors import EDITOR_TYPES, EditorSpec
from .theme import get_palette
from .widgets import FieldTooltip

try:  # pragma: no cover - importing tkinter is environment dependent
    import tkinter as tk
    from tkinter import ttk
except Exception:  # pragma: no cover - fallback when tkinter missing
    tk = None  # type: ignore
    ttk = None  # type: ignore


class EditorRow:
    """One labelled editor in the inspector table."""

    def __init__(
        self,
        label: tk.Widget,
        widget: tk.Widget,
        get_value: Callable[[], object | None],
        set_value: Callable[[object | None], None],
        error: ttk.Label,
    ) -> None:
        self.label = label
        self.widget = widget
        self._get = get_value
        self._set = set_value
        self._error = error

    def get_value(self) -> object | None:
        return self._get()

    def set_value(self, value: object | None) -> None:
        self._set(value)

    def set_error(self, msg: str | None) -> None:
        if msg:
            self._error.configure(text=msg)
            self._error.grid()
        else:
            self._error.configure(text="")
            self._error.grid_remove()

    def destroy(self) -> None:
        for w in (self.label, self.widget, self._error):
            w.destroy()


def _require_tk() -> None:
    if tk is None or ttk is None:  # pragma: no cover - tkinter missing
        raise RuntimeError("tkinter is required for editor widgets")


def _label(table: tk.Widget, spec: EditorSpec, row: int) -> ttk.Label:
    label = ttk.Label(table, text=spec.label, style="InspectorKey.TLabel")
    label.grid(row=row * 2, column=0, sticky="nw", padx=(0, 12), pady=4)
    if spec.tooltip:
        FieldTooltip(label, spec.tooltip)
    return label


def _error_label(table: tk.Widget, row: int) -> ttk.Label:
    err = ttk.Label(table, text="", foreground=get_palette()["error"])
    err.grid(row=row * 2 + 1, column=1, sticky="w")
    err.grid_remove()
    return err


def _place(widget: tk.Widget, row: int) -> None:
    widget.grid(row=row * 2, column=1, sticky="ew", pady=4)


def _entry(table, spec: EditorSpec, row: int) -> EditorRow:
    _require_tk()
    label = _label(table, spec, row)
    entry = ttk.Entry(table, width=40)
    _place(entry, row)

    def get_value() -> object | None:
        return entry.get()

    def set_value(value: object | None) -> None:
        entry.delete(0, tk.END)
        if value is not None:
            entry.insert(0, str(value))

    return EditorRow(label, entry, get_value, set_value, _error_label(table, row))


def _multiline(table, spec: EditorSpec, row: int) -> EditorRow:
    _require_tk()
    label = _label(table, spec, row)
    palette = get_palette()
    text = tk.Text(
        table,
        height=int(spec.options.get("rows", 4)),
        width=40,
        wrap="word",
        bg=palette["card"],
        fg=palette["ink"],
        highlightthickness=1,
        highlightbackground=palette["card_edge"],
    )
    _place(text, row)

    def get_value() -> object | None:
        # Text always reports a trailing newline
        return text.get("1.0", "end-1c")

    def set_value(value: object | None) -> None:
        text.delete("1.0", tk.END)
        if value is not None:
            text.insert("1.0", str(value))

    return EditorRow(label, text, get_value, set_value, _error_label(table, row))


def _checkbox(table, spec: EditorSpec, row: int) -> EditorRow:
    _require_tk()
    label = _label(table, spec, row)
    var = tk.BooleanVar(master=table)
    check = ttk.Checkbutton(table, variable=var, style="Inspector.TCheckbutton")
    check.grid(row=row * 2, column=1, sticky="w", pady=4)

    def get_value() -> object | None:
        return var.get()

    def set_value(value: object | None) -> None:
        var.set(bool(value))

    return EditorRow(label, check, get_value, set_value, _error_label(table, row))


def _menu(table, spec: EditorSpec, row: int) -> EditorRow:
    _require_tk()
    label = _label(table, spec, row)
    choices = [str(c) for c in spec.options.get("choices") or ()]
    var = tk.StringVar(master=table)
    box = ttk.Combobox(table, textvariable=var, values=choices, state="readonly")
    _place(box, row)

    def get_value() -> object | None:
        return var.get()

    def set_value(value: object | None) -> None:
        var.set("" if value is None else str(value))

    return EditorRow(label, box, get_value, set_value, _error_label(table, row))


# Register widget implementations with the editor registry
EDITOR_TYPES["text"] = replace(EDITOR_TYPES["text"], value_widget=_entry)
EDITOR_TYPES["html"] = replace(EDITOR_TYPES["html"], value_widget=_multiline)
EDITOR_TYPES["integer"] = replace(EDITOR_TYPES["integer"], value_widget=_entry)
EDITOR_TYPES["number"] = replace(EDITOR_TYPES["number"], value_widget=_entry)
EDITOR_TYPES["checkbox"] = replace(EDITOR_TYPES["checkbox"], value_widget=_checkbox)
EDITOR_TYPES["menu"] = replace(EDITOR_TYPES["menu"], value_widget=_menu)
EDITOR_TYPES["tags"] = replace(EDITOR_TYPES["tags"], value_widget=_entry)


__all__ = ["EditorRow"]
