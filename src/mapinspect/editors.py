"""Editor kinds and declarative editor specifications.

An :class:`EditorSpec` names the property to edit, the kind of editor to
show and any editor specific options.  Each kind is backed by a
:class:`TypeAdapter` that converts between the raw text a widget produces
and the Python value stored on the model.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from .errors import EditorSpecError, UnknownEditorError


@dataclass(frozen=True)
class EditorSpec:
    """Description of one field editor."""

    key: str
    type: str
    label: str = ""
    tooltip: str | None = None
    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.key:
            raise EditorSpecError("editor spec requires a property key")
        if self.type not in EDITOR_TYPES:
            raise UnknownEditorError(f"unknown editor kind {self.type!r} for {self.key!r}")
        if not self.label:
            object.__setattr__(self, "label", self.key.replace("_", " ").capitalize())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EditorSpec:
        try:
            key = data["key"]
            kind = data["type"]
        except KeyError as exc:
            raise EditorSpecError(f"editor spec missing {exc.args[0]!r}: {dict(data)!r}") from exc
        known = {"key", "type", "label", "tooltip"}
        options = dict(data.get("options") or {})
        options.update({k: v for k, v in data.items() if k not in known | {"options"}})
        return cls(
            key=str(key),
            type=str(kind),
            label=str(data.get("label") or ""),
            tooltip=data.get("tooltip"),
            options=options,
        )


####################
##### ADAPTERS #####
####################

class TypeAdapter(Protocol):
    """Adapter for one editor kind.

    Adapters parse raw widget values, validate Python values and serialise
    them back to text for display.
    """

    def parse(self, raw: Any) -> Any:
        """Parse *raw* widget output into a Python value."""

    def serialize(self, value: Any) -> Any:
        """Serialise *value* into something the widget can display."""

    def validate(self, value: Any, spec: EditorSpec) -> None:
        """Raise :class:`TypeError` or :class:`ValueError` if *value* is invalid."""


class TextAdapter:
    """Adapter for single and multi-line text."""

    def parse(self, raw: Any) -> str | None:
        if raw is None:
            return None
        text = str(raw)
        return text if text != "" else None

    def serialize(self, value: Any) -> str:
        return "" if value is None else str(value)

    def validate(self, value: Any, spec: EditorSpec) -> None:
        if value is not None and not isinstance(value, str):
            raise TypeError("expected str")


class IntegerAdapter:
    """Adapter for integer values."""

    def parse(self, raw: Any) -> int | None:
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            return None
        if isinstance(raw, bool):
            raise TypeError("expected int")
        if isinstance(raw, int):
            return raw
        return int(str(raw).strip())

    def serialize(self, value: Any) -> str:
        return "" if value is None else str(value)

    def validate(self, value: Any, spec: EditorSpec) -> None:
        if value is None:
            return
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("expected int")
        minimum = spec.options.get("minimum")
        if minimum is not None and value < minimum:
            raise ValueError(f"value {value} < minimum {minimum}")


class NumberAdapter:
    """Adapter for floating point numbers."""

    def parse(self, raw: Any) -> float | None:
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            return None
        return float(str(raw).strip())

    def serialize(self, value: Any) -> str:
        return "" if value is None else str(value)

    def validate(self, value: Any, spec: EditorSpec) -> None:
        if value is None:
            return
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise TypeError("expected number")
        minimum = spec.options.get("minimum")
        maximum = spec.options.get("maximum")
        if minimum is not None and value < minimum:
            raise ValueError(f"value {value} < minimum {minimum}")
        if maximum is not None and value > maximum:
            raise ValueError(f"value {value} > maximum {maximum}")


class CheckboxAdapter:
    """Adapter for boolean values."""

    def parse(self, raw: Any) -> bool | None:
        if raw is None:
            return None
        if isinstance(raw, bool):
            return raw
        lowered = str(raw).strip().lower()
        if lowered in ("true", "1"):
            return True
        if lowered in ("false", "0"):
            return False
        raise ValueError(f"invalid boolean: {raw!r}")

    def serialize(self, value: Any) -> bool:
        return bool(value)

    def validate(self, value: Any, spec: EditorSpec) -> None:
        if value is not None and not isinstance(value, bool):
            raise TypeError("expected bool")


class MenuAdapter(TextAdapter):
    """Adapter for a choice among ``options['choices']``."""

    def validate(self, value: Any, spec: EditorSpec) -> None:
        super().validate(value, spec)
        choices = spec.options.get("choices") or ()
        if value is not None and choices and value not in choices:
            raise ValueError(f"{value!r} is not one of {list(choices)!r}")


class TagsAdapter:
    """Adapter for comma separated lists of strings."""

    def parse(self, raw: Any) -> list[str]:
        if not raw:
            return []
        if isinstance(raw, list | tuple):
            return [str(p).strip() for p in raw if str(p).strip()]
        return [p.strip() for p in str(raw).split(",") if p.strip()]

    def serialize(self, value: Any) -> str:
        if not value:
            return ""
        return ", ".join(value)

    def validate(self, value: Any, spec: EditorSpec) -> None:
        if value is not None and (
            not isinstance(value, list) or not all(isinstance(p, str) for p in value)
        ):
            raise TypeError("expected list[str]")


@dataclass(frozen=True)
class EditorType:
    """Metadata describing a supported editor kind."""

    adapter: TypeAdapter
    value_widget: Callable[..., Any] | None = None


EDITOR_TYPES: dict[str, EditorType] = {
    "text": EditorType(TextAdapter()),
    "html": EditorType(TextAdapter()),
    "integer": EditorType(IntegerAdapter()),
    "number": EditorType(NumberAdapter()),
    "checkbox": EditorType(CheckboxAdapter()),
    "menu": EditorType(MenuAdapter()),
    "tags": EditorType(TagsAdapter()),
}


def parse_editor_value(spec: EditorSpec, raw: Any) -> Any:
    """Parse and validate *raw* widget output for *spec*."""
    adapter = EDITOR_TYPES[spec.type].adapter
    value = adapter.parse(raw)
    adapter.validate(value, spec)
    return value


def format_editor_value(spec: EditorSpec, value: Any) -> Any:
    return EDITOR_TYPES[spec.type].adapter.serialize(value)


__all__ = [
    "EDITOR_TYPES",
    "EditorSpec",
    "EditorType",
    "TypeAdapter",
    "format_editor_value",
    "parse_editor_value",
]
