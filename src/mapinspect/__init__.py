from .config import InspectorConfig, load_config
from .editors import EditorSpec
from .errors import InspectorError
from .events import EventBus
from .models import AppState, LayerModel, MapModel, TopicModel
from .presets import editors_for, load_presets
from .ui.core import InspectorPopup, SessionKind, SessionState
from .ui.inspector_view import EditResult, InspectorView


__all__ = [
    "AppState",
    "EditResult",
    "EditorSpec",
    "EventBus",
    "InspectorConfig",
    "InspectorError",
    "InspectorPopup",
    "InspectorView",
    "LayerModel",
    "MapModel",
    "SessionKind",
    "SessionState",
    "TopicModel",
    "editors_for",
    "load_config",
    "load_presets",
]
