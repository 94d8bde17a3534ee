import pytest

from mapinspect.errors import EditorSpecError, UnknownEditorError
from mapinspect.models import EntityKind
from mapinspect.presets import editors_for, load_presets, parse_presets


def test_bundled_presets_cover_every_entity_kind():
    presets = load_presets()
    for kind in EntityKind:
        assert presets[kind.value]
    layer_keys = [spec.key for spec in editors_for(EntityKind.LAYER, presets)]
    assert layer_keys[0] == "title"
    opacity = next(s for s in presets["layer"] if s.key == "opacity")
    assert opacity.options == {"minimum": 0}


def test_load_presets_override_file(tmp_path):
    path = tmp_path / "editors.yaml"
    path.write_text("topic:\n  - key: title\n    type: text\n")
    presets = load_presets(path)
    assert [s.key for s in editors_for("topic", presets)] == ["title"]
    with pytest.raises(EditorSpecError):
        editors_for("map", presets)


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "editors.yaml"
    path.write_text("map: [unclosed\n")
    with pytest.raises(EditorSpecError):
        load_presets(path)


@pytest.mark.parametrize(
    "data, error",
    [
        (["map"], EditorSpecError),
        ({"map": {"key": "title"}}, EditorSpecError),
        ({"map": [{"key": "title", "type": "colour"}]}, UnknownEditorError),
    ],
)
def test_parse_presets_rejects_malformed(data, error):
    with pytest.raises(error):
        parse_presets(data)


def test_parse_presets_empty():
    assert parse_presets(None) == {}
