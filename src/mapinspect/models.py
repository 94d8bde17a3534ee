"""Entity models edited by the inspector and the observable application state."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import Any, ClassVar

from .events import EventBus, ListenerToken


class EntityKind(str, Enum):
    MAP = "map"
    LAYER = "layer"
    TOPIC = "topic"


class Model:
    """A bag of named properties with a fixed entity kind."""

    kind: ClassVar[EntityKind]

    def __init__(self, properties: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        self._properties: dict[str, Any] = dict(properties or {})
        self._properties.update(kwargs)

    @property
    def id(self) -> Any:
        return self._properties.get("id")

    def get(self, key: str, default: Any = None) -> Any:
        return self._properties.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._properties[key] = value

    def update(self, values: Mapping[str, Any]) -> None:
        for key, value in values.items():
            self.set(key, value)

    def snapshot(self) -> dict[str, Any]:
        """Return a deep copy of the current properties."""
        return copy.deepcopy(self._properties)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"


class MapModel(Model):
    kind = EntityKind.MAP


class LayerModel(Model):
    kind = EntityKind.LAYER


class TopicModel(Model):
    kind = EntityKind.TOPIC


class AppState:
    """Application state shared with the inspector.

    Only the set of enabled layers is tracked here.  Listeners registered
    with :meth:`on_change` are notified whenever a property actually
    changes value.
    """

    ENABLED_LAYER_IDS = "enabled_layer_ids"

    def __init__(self, enabled_layer_ids: Iterable[Any] = ()) -> None:
        self._enabled_layer_ids: frozenset[Any] = frozenset(enabled_layer_ids)
        self._changes = EventBus()

    @property
    def enabled_layer_ids(self) -> frozenset[Any]:
        return self._enabled_layer_ids

    def get_layer_enabled(self, layer_id: Any) -> bool:
        return layer_id in self._enabled_layer_ids

    def set_layer_enabled(self, layer_id: Any, enabled: bool) -> None:
        if enabled:
            ids = self._enabled_layer_ids | {layer_id}
        else:
            ids = self._enabled_layer_ids - {layer_id}
        self.set_enabled_layer_ids(ids)

    def set_enabled_layer_ids(self, layer_ids: Iterable[Any]) -> None:
        ids = frozenset(layer_ids)
        if ids == self._enabled_layer_ids:
            return
        self._enabled_layer_ids = ids
        self._changes.emit(self.ENABLED_LAYER_IDS, {"value": ids})

    def on_change(self, prop: str, callback: Callable[[], Any]) -> ListenerToken:
        return self._changes.on(prop, lambda _payload: callback())

    def unlisten(self, token: ListenerToken | None) -> bool:
        return self._changes.unlisten(token)

    def listener_count(self, prop: str) -> int:
        return self._changes.listener_count(prop)


__all__ = ["AppState", "EntityKind", "LayerModel", "MapModel", "Model", "TopicModel"]
