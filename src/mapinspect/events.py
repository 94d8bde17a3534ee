"""Channel names and a tiny callback based event bus.

The inspector never talks to a global application object; it is handed an
:class:`Emitter` at construction time and publishes its outcome events on
the channels defined here.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

logger = logging.getLogger(__name__)

INSPECTOR_VISIBLE = "inspector_visible"
NEW_LAYER = "new_layer"
NEW_TOPIC = "new_topic"
OBJECT_EDITED = "object_edited"
IMPORT = "import"


class Emitter(Protocol):
    def emit(self, channel: str, payload: Mapping[str, Any] | None = None) -> None: ...


@dataclass(eq=False)
class ListenerToken:
    """Handle returned by ``on``/``listen`` style registrations.

    Calling :meth:`release` more than once is harmless; only the first call
    removes the callback.
    """

    channel: str
    callback: Callable[..., Any]
    _release: Callable[[ListenerToken], None] | None = field(default=None, repr=False)

    @property
    def active(self) -> bool:
        return self._release is not None

    def release(self) -> bool:
        release, self._release = self._release, None
        if release is None:
            return False
        release(self)
        return True


class EventBus:
    """Simple channel based pub/sub system."""

    def __init__(self) -> None:
        self._handlers: defaultdict[str, list[ListenerToken]] = defaultdict(list)

    def on(self, channel: str, callback: Callable[[dict[str, Any]], Any]) -> ListenerToken:
        token = ListenerToken(channel, callback, self._remove)
        self._handlers[channel].append(token)
        return token

    def unlisten(self, token: ListenerToken | None) -> bool:
        if token is None:
            return False
        return token.release()

    def emit(self, channel: str, payload: Mapping[str, Any] | None = None) -> None:
        data = dict(payload or {})
        logger.debug("emit %s %s", channel, data)
        for token in list(self._handlers.get(channel, [])):
            token.callback(data)

    def listener_count(self, channel: str) -> int:
        return len(self._handlers.get(channel, []))

    def _remove(self, token: ListenerToken) -> None:
        handlers = self._handlers.get(token.channel)
        if handlers is None:
            return
        try:
            handlers.remove(token)
        except ValueError:
            return
        if not handlers:
            del self._handlers[token.channel]


__all__ = [
    "Emitter",
    "EventBus",
    "ListenerToken",
    "INSPECTOR_VISIBLE",
    "NEW_LAYER",
    "NEW_TOPIC",
    "OBJECT_EDITED",
    "IMPORT",
]
