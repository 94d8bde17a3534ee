"""Framework agnostic inspector popup controller.

:class:`InspectorPopup` drives a single property inspector popup through
its lifecycle::

    CLOSED -> OPEN -> COMMITTING | CANCELLING | AUTO_CLOSING | IMPORTING -> CLOSED

Every exit from ``OPEN`` goes through :meth:`InspectorPopup.dispose`, which
releases the resize listener and the enabled-layer listener owned by the
session, emits the visibility signal and removes the popup.

The controller knows nothing about any widget toolkit.  It talks to a
:class:`PopupShell` for the visual container, to an :class:`EditorHost`
(normally :class:`~mapinspect.ui.inspector_view.InspectorView`) for the
field editors, and publishes its outcome on an injected
:class:`~mapinspect.events.Emitter`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from .. import events as ev
from ..config import InspectorConfig
from ..editors import EditorSpec
from ..errors import InvalidTargetError, SessionActiveError
from ..events import Emitter, ListenerToken
from ..models import AppState, EntityKind, Model
from .inspector_view import EditResult
from .layout import PopupGeometry, compute_geometry

logger = logging.getLogger(__name__)

ContainerSize = tuple[int, int]

# ---------------------------------------------------------------------------
# Collaborator interfaces
# ---------------------------------------------------------------------------


class PopupShell(Protocol):
    """Visual container of the inspector: title, import link, editor table, buttons."""

    def set_title(self, text: str) -> None: ...
    def set_import_visible(self, visible: bool) -> None: ...
    def bind_actions(
        self,
        *,
        on_ok: Callable[[], Any],
        on_cancel: Callable[[], Any],
        on_import: Callable[[], Any],
    ) -> None: ...
    def show(self) -> None: ...
    def remove(self) -> None: ...
    def width(self) -> int: ...
    def container_size(self) -> ContainerSize: ...
    def apply_geometry(self, geometry: PopupGeometry) -> None: ...
    def listen_resize(self, callback: Callable[[ContainerSize], Any]) -> ListenerToken: ...
    def unlisten_resize(self, token: ListenerToken) -> bool: ...


class EditorHost(Protocol):
    def inspect(self, specs: Sequence[EditorSpec], target: Model | None) -> None: ...
    def collect_edits(self) -> EditResult: ...
    def get_original(self) -> Model | None: ...
    def dispose(self) -> None: ...


class AppStateHandle(Protocol):
    def get_layer_enabled(self, layer_id: Any) -> bool: ...
    def on_change(self, prop: str, callback: Callable[[], Any]) -> ListenerToken: ...
    def unlisten(self, token: ListenerToken | None) -> bool: ...


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


class SessionKind(str, Enum):
    MAP = "map"
    LAYER = "layer"
    TOPIC = "topic"
    NEW_LAYER = "new_layer"
    NEW_TOPIC = "new_topic"


class SessionState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"
    COMMITTING = "committing"
    CANCELLING = "cancelling"
    AUTO_CLOSING = "auto_closing"
    IMPORTING = "importing"


_KIND_FOR_ENTITY = {
    EntityKind.MAP: SessionKind.MAP,
    EntityKind.LAYER: SessionKind.LAYER,
    EntityKind.TOPIC: SessionKind.TOPIC,
}


def session_kind(target: Model | None, is_new_layer: bool) -> SessionKind:
    """Return the kind of session for *target*/*is_new_layer*."""
    if target is None:
        return SessionKind.NEW_LAYER if is_new_layer else SessionKind.NEW_TOPIC
    if is_new_layer:
        raise InvalidTargetError("cannot edit an existing entity and create a new layer")
    try:
        return _KIND_FOR_ENTITY[EntityKind(getattr(target, "kind"))]
    except (AttributeError, ValueError) as exc:
        raise InvalidTargetError(f"cannot inspect {target!r}: unknown entity kind") from exc


@dataclass(slots=True)
class InspectorSession:
    """State of one ``inspect()`` ... ``dispose()`` cycle."""

    title: str
    editor_specs: tuple[EditorSpec, ...]
    app_state: AppStateHandle
    target: Model | None
    kind: SessionKind
    state: SessionState = SessionState.OPEN
    geometry: PopupGeometry | None = None
    resize_listener: ListenerToken | None = field(default=None, repr=False)
    enabled_listener: ListenerToken | None = field(default=None, repr=False)

    @property
    def is_new_layer(self) -> bool:
        return self.kind is SessionKind.NEW_LAYER

    @property
    def is_new_topic(self) -> bool:
        return self.kind is SessionKind.NEW_TOPIC


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------


class InspectorPopup:
    """A property inspector.  Call :meth:`inspect` to inspect an entity."""

    def __init__(
        self,
        shell: PopupShell,
        view: EditorHost,
        events: Emitter,
        *,
        config: InspectorConfig | None = None,
    ) -> None:
        self.shell = shell
        self.view = view
        self.events = events
        self.config = config or InspectorConfig()
        self._session: InspectorSession | None = None
        shell.bind_actions(
            on_ok=self.handle_ok,
            on_cancel=self.handle_cancel,
            on_import=self.handle_import_click,
        )

    @property
    def session(self) -> InspectorSession | None:
        return self._session

    @property
    def state(self) -> SessionState:
        return self._session.state if self._session is not None else SessionState.CLOSED

    @property
    def is_open(self) -> bool:
        return self.state is SessionState.OPEN

    def inspect(
        self,
        title: str,
        editor_specs: Sequence[EditorSpec],
        app_state: AppStateHandle,
        target: Model | None = None,
        is_new_layer: bool = False,
    ) -> InspectorSession:
        """Build and show the inspector.

        With a *target* the editors show its properties and OK emits a single
        ``OBJECT_EDITED`` event.  Without one a blank inspector is shown and
        OK emits ``NEW_LAYER`` (``is_new_layer=True``) or ``NEW_TOPIC``.
        Editors are bound to a draft copy of *target* so the original is left
        untouched until the edit event is handled.
        """
        if self._session is not None:
            # a session that is already closing cannot be cancelled again
            if self.config.on_reentrant == "cancel" and self.is_open:
                logger.debug("inspect() while open; cancelling %s session", self._session.kind.value)
                self.handle_cancel()
            else:
                raise SessionActiveError("an inspector session is already open")

        kind = session_kind(target, is_new_layer)
        session = InspectorSession(
            title=title,
            editor_specs=tuple(editor_specs),
            app_state=app_state,
            target=target,
            kind=kind,
        )
        self._session = session
        logger.debug("opening %s inspector %r", kind.value, title)

        self.shell.set_title(title)
        self.shell.set_import_visible(kind is SessionKind.NEW_LAYER)
        try:
            self.view.inspect(session.editor_specs, target)
        except Exception:
            self._session = None
            raise

        try:
            # Close the inspector if the layer being edited gets disabled.
            if target is not None:
                session.enabled_listener = app_state.on_change(
                    AppState.ENABLED_LAYER_IDS, self.cancel_if_layer_disabled
                )
            self.shell.show()
            self.handle_resize()
            session.resize_listener = self.shell.listen_resize(self.handle_resize)
        except Exception:
            logger.debug("failed to show %s inspector; rolling back", kind.value)
            self._release_listeners(session)
            self._session = None
            session.state = SessionState.CLOSED
            try:
                self.view.dispose()
            finally:
                self.shell.remove()
            raise
        self.events.emit(ev.INSPECTOR_VISIBLE, {"value": True})
        return session

    # -- outcomes ------------------------------------------------------
    def handle_ok(self) -> None:
        """Apply the user's edits by emitting one creation or edit event."""
        session = self._open_session("commit")
        if session is None:
            return
        session.state = SessionState.COMMITTING
        try:
            edits = self.view.collect_edits()
            if session.kind is SessionKind.NEW_LAYER:
                self.events.emit(ev.NEW_LAYER, {"properties": edits.new_values})
            elif session.kind is SessionKind.NEW_TOPIC:
                self.events.emit(ev.NEW_TOPIC, {"properties": edits.new_values})
            else:
                original = self.view.get_original()
                self.events.emit(
                    ev.OBJECT_EDITED,
                    {
                        "old_values": edits.old_values,
                        "new_values": edits.new_values,
                        "layer_id": original.id if session.kind is SessionKind.LAYER else None,
                        "topic_id": original.id if session.kind is SessionKind.TOPIC else None,
                    },
                )
        finally:
            self.dispose(True)

    def handle_cancel(self) -> None:
        """Discard the user's edits."""
        self._cancel(SessionState.CANCELLING)

    def cancel_if_layer_disabled(self) -> None:
        """Close the inspector if the layer being edited has been disabled."""
        session = self._session
        if session is None or session.state is not SessionState.OPEN:
            return
        # new layers are never enabled, so only existing layers qualify
        if session.kind is not SessionKind.LAYER:
            return
        original = self.view.get_original()
        if original is not None and not session.app_state.get_layer_enabled(original.id):
            logger.debug("layer %r disabled; closing inspector", original.id)
            self._cancel(SessionState.AUTO_CLOSING)

    def handle_import_click(self) -> None:
        """Switch to the bulk layer importer."""
        session = self._open_session("import")
        if session is None:
            return
        session.state = SessionState.IMPORTING
        try:
            self.events.emit(ev.IMPORT, {})
        finally:
            self.dispose(True)

    # -- layout --------------------------------------------------------
    def handle_resize(self, container_size: ContainerSize | None = None) -> PopupGeometry | None:
        """Cap the popup height and center it in its container.

        Should be called whenever the size of the popup's container changes.
        """
        session = self._session
        if session is None:
            logger.debug("resize ignored; inspector is closed")
            return None
        width, height = container_size or self.shell.container_size()
        geometry = compute_geometry(
            width, height, self.shell.width(), self.config.max_height_fraction
        )
        self.shell.apply_geometry(geometry)
        session.geometry = geometry
        return geometry

    # -- teardown ------------------------------------------------------
    def dispose(self, dispose_popup: bool = True) -> None:
        """Dispose of the editors, and optionally of the popup and session."""
        session = self._session
        if session is None:
            logger.debug("dispose ignored; inspector is closed")
            return
        try:
            self.view.dispose()
        finally:
            if dispose_popup:
                self._close(session)

    # -- helpers -------------------------------------------------------
    def _close(self, session: InspectorSession) -> None:
        self._release_listeners(session)
        self._session = None
        logger.debug("closing %s inspector (%s)", session.kind.value, session.state.value)
        session.state = SessionState.CLOSED
        self.events.emit(ev.INSPECTOR_VISIBLE, {"value": False})
        self.shell.remove()

    def _release_listeners(self, session: InspectorSession) -> None:
        if session.resize_listener is not None:
            self.shell.unlisten_resize(session.resize_listener)
            session.resize_listener = None
        if session.enabled_listener is not None:
            session.app_state.unlisten(session.enabled_listener)
            session.enabled_listener = None

    def _open_session(self, action: str) -> InspectorSession | None:
        session = self._session
        if session is None or session.state is not SessionState.OPEN:
            logger.debug("%s ignored; inspector state is %s", action, self.state.value)
            return None
        return session

    def _cancel(self, reason: SessionState) -> None:
        session = self._open_session("cancel")
        if session is None:
            return
        session.state = reason
        self.dispose(True)


__all__ = [
    "AppStateHandle",
    "EditorHost",
    "InspectorPopup",
    "InspectorSession",
    "PopupShell",
    "SessionKind",
    "SessionState",
    "session_kind",
]
