"""Default editor tables loaded from YAML.

The tables live in ``mapinspect/data/editors.yaml`` and map an entity kind
(``map``, ``layer`` or ``topic``) to the list of editors the inspector shows
for it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .editors import EditorSpec
from .errors import EditorSpecError
from .models import EntityKind
from .paths import default_presets_file

logger = logging.getLogger(__name__)


def parse_presets(data: Any) -> dict[str, tuple[EditorSpec, ...]]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise EditorSpecError("editor presets must be a mapping of kind -> editors")
    presets: dict[str, tuple[EditorSpec, ...]] = {}
    for kind, entries in data.items():
        if not isinstance(entries, list):
            raise EditorSpecError(f"editors for {kind!r} must be a list")
        presets[str(kind)] = tuple(EditorSpec.from_dict(entry) for entry in entries)
    return presets


def load_presets(path: str | Path | None = None) -> dict[str, tuple[EditorSpec, ...]]:
    """Return editor tables keyed by entity kind."""

    src = Path(path) if path is not None else default_presets_file()
    try:
        data = yaml.safe_load(src.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise EditorSpecError(f"invalid editor presets in {src}: {exc}") from exc
    presets = parse_presets(data)
    logger.debug("loaded %d editor tables from %s", len(presets), src)
    return presets


def editors_for(kind: EntityKind | str, presets: Mapping[str, tuple[EditorSpec, ...]] | None = None) -> tuple[EditorSpec, ...]:
    table = presets if presets is not None else load_presets()
    key = kind.value if isinstance(kind, EntityKind) else str(kind)
    try:
        return table[key]
    except KeyError:
        raise EditorSpecError(f"no editors defined for {key!r}") from None


__all__ = ["editors_for", "load_presets", "parse_presets"]
