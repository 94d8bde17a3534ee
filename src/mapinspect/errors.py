class InspectorError(Exception):
    """Base class for inspector errors."""


class SessionActiveError(InspectorError):
    """Raised when an inspector session is opened while another is live."""


class InvalidTargetError(InspectorError):
    """Raised when a session is asked to both edit and create an entity."""


class EditorSpecError(InspectorError):
    """Raised when an editor specification is malformed."""


class UnknownEditorError(EditorSpecError):
    """Raised when an editor kind is not registered."""


class ConfigError(InspectorError):
    """Raised when inspector configuration values are invalid."""
