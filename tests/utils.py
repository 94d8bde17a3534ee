from __future__ import annotations

from mapinspect.events import EventBus
from mapinspect.ui.core import InspectorPopup
from mapinspect.ui.inspector_view import InspectorView


class DummyShell:
    """Headless stand-in for the Tk popup shell."""

    def __init__(self, container=(800, 1000), width=400) -> None:
        self.container = container
        self.popup_width = width
        self.title = None
        self.import_visible = None
        self.visible = False
        self.geometry = None
        self.removed = 0
        self.actions = {}
        self._resize = EventBus()

    def set_title(self, text):
        self.title = text

    def set_import_visible(self, visible):
        self.import_visible = visible

    def bind_actions(self, *, on_ok, on_cancel, on_import):
        self.actions = {"ok": on_ok, "cancel": on_cancel, "import": on_import}

    def show(self):
        self.visible = True

    def remove(self):
        self.visible = False
        self.removed += 1

    def width(self):
        return self.popup_width

    def container_size(self):
        return self.container

    def apply_geometry(self, geometry):
        self.geometry = geometry

    def listen_resize(self, callback):
        return self._resize.on("resize", lambda payload: callback(payload["size"]))

    def unlisten_resize(self, token):
        return self._resize.unlisten(token)

    def resize(self, width, height):
        self.container = (width, height)
        self._resize.emit("resize", {"size": (width, height)})

    def click(self, action):
        self.actions[action]()

    @property
    def resize_listener_count(self):
        return self._resize.listener_count("resize")


class DummyEditor:
    def __init__(self, spec) -> None:
        self.spec = spec
        self.value = None
        self.error = None
        self.destroyed = False

    def get_value(self):
        return self.value

    def set_value(self, value):
        self.value = value

    def set_error(self, msg):
        self.error = msg

    def destroy(self):
        self.destroyed = True


class DummyTable:
    """Collects the editors an :class:`InspectorView` creates."""

    def __init__(self) -> None:
        self.editors: dict[str, DummyEditor] = {}

    def factory(self, table, spec, row):
        editor = DummyEditor(spec)
        self.editors[spec.key] = editor
        return editor

    def type(self, key, value):
        self.editors[key].value = value


class RecordingBus(EventBus):
    def __init__(self) -> None:
        super().__init__()
        self.emitted: list[tuple[str, dict]] = []

    def emit(self, channel, payload=None):
        self.emitted.append((channel, dict(payload or {})))
        super().emit(channel, payload)

    def channels(self):
        return [channel for channel, _ in self.emitted]


def make_popup(config=None, **shell_kw):
    shell = DummyShell(**shell_kw)
    table = DummyTable()
    view = InspectorView(table, factory=table.factory)
    bus = RecordingBus()
    popup = InspectorPopup(shell, view, bus, config=config)
    return popup, shell, table, bus
