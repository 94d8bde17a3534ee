"""Table of field editors bound to a draft copy of an entity.

:class:`InspectorView` never touches the entity it is asked to inspect.
Instead it takes a deep-copied snapshot of the entity's properties when
:meth:`InspectorView.inspect` is called, binds the editors to that draft and
reports the difference between the draft and the snapshot from
:meth:`InspectorView.collect_edits`.  This lets the caller apply all edits
at once, or throw them away.

The view is toolkit agnostic.  Editor widgets are produced by a factory
callable ``factory(table, spec, row)``; by default the ``value_widget``
registered for the spec's kind in :data:`~mapinspect.editors.EDITOR_TYPES`
is used.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from ..editors import EDITOR_TYPES, EditorSpec, format_editor_value, parse_editor_value
from ..errors import UnknownEditorError
from ..models import Model

logger = logging.getLogger(__name__)


class EditorWidget(Protocol):
    """Protocol all editor widgets must implement."""

    def get_value(self) -> object | None: ...
    def set_value(self, value: object | None) -> None: ...
    def set_error(self, msg: str | None) -> None: ...
    def destroy(self) -> None: ...


EditorFactory = Callable[[Any, EditorSpec, int], EditorWidget]


@dataclass(slots=True)
class EditResult:
    old_values: dict[str, Any] = field(default_factory=dict)
    new_values: dict[str, Any] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return bool(self.new_values)


def registered_editor(table: Any, spec: EditorSpec, row: int) -> EditorWidget:
    factory = EDITOR_TYPES[spec.type].value_widget
    if factory is None:
        raise UnknownEditorError(f"no widget registered for editor kind {spec.type!r}")
    return factory(table, spec, row)


class InspectorView:
    """Render editors for a list of :class:`EditorSpec` into *table*."""

    def __init__(self, table: Any, factory: EditorFactory | None = None) -> None:
        self.table = table
        self._factory = factory or registered_editor
        self._original: Model | None = None
        self._snapshot: dict[str, Any] = {}
        self._draft: dict[str, Any] = {}
        self._baseline: dict[str, Any] = {}
        self._shown: dict[str, Any] = {}
        self._editors: list[tuple[EditorSpec, EditorWidget]] = []

    @property
    def draft(self) -> dict[str, Any]:
        return self._draft

    def inspect(self, specs: Sequence[EditorSpec], target: Model | None) -> None:
        self.dispose()
        self._original = target
        self._snapshot = target.snapshot() if target is not None else {}
        self._draft = copy.deepcopy(self._snapshot)
        self._baseline = {}
        self._shown = {}
        for row, spec in enumerate(specs):
            widget = self._factory(self.table, spec, row)
            shown = format_editor_value(spec, self._draft.get(spec.key))
            widget.set_value(shown)
            self._shown[spec.key] = shown
            # what the untouched editor will read back as
            try:
                self._baseline[spec.key] = parse_editor_value(spec, shown)
            except (TypeError, ValueError):
                self._baseline[spec.key] = self._draft.get(spec.key)
            self._editors.append((spec, widget))
        logger.debug("inspecting %r with %d editors", target, len(self._editors))

    def collect_edits(self) -> EditResult:
        """Return the properties whose draft value differs from the snapshot."""
        result = EditResult()
        for spec, widget in self._editors:
            raw = widget.get_value()
            # untouched editors keep stored values even if they no longer validate
            if raw == self._shown[spec.key]:
                widget.set_error(None)
                continue
            try:
                value = parse_editor_value(spec, raw)
            except (TypeError, ValueError) as exc:
                logger.warning("invalid value %r for %s: %s", raw, spec.key, exc)
                widget.set_error(str(exc))
                continue
            widget.set_error(None)
            self._draft[spec.key] = value
            if value == self._baseline.get(spec.key):
                continue
            old = self._snapshot.get(spec.key)
            if value != old:
                result.old_values[spec.key] = copy.deepcopy(old)
                result.new_values[spec.key] = copy.deepcopy(value)
        return result

    def get_original(self) -> Model | None:
        return self._original

    def dispose(self) -> None:
        editors, self._editors = self._editors, []
        for _spec, widget in editors:
            widget.destroy()


__all__ = ["EditResult", "EditorFactory", "EditorWidget", "InspectorView", "registered_editor"]
