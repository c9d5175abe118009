import pytest

from cubparse.errors import WARNING_INVALID, WARNING_PLAYER, CubError
from cubparse.scene import MapValidation, SceneData


def test_scene_defaults_are_empty():
    data = SceneData()
    assert data.no is None and data.ea is None
    assert data.map == []
    assert data.colors is False
    assert data.size_textures == 0
    assert data.textures_complete() is False


def test_textures_complete_needs_everything():
    data = SceneData(no="n", so="s", we="w", ea="e", colors=True)
    assert data.textures_complete() is True
    data.colors = False
    assert data.textures_complete() is False


@pytest.mark.parametrize("missing", ["no", "so", "we", "ea"])
def test_textures_complete_false_when_one_missing(missing):
    data = SceneData(no="n", so="s", we="w", ea="e", colors=True)
    setattr(data, missing, None)
    assert data.textures_complete() is False


def test_scene_maps_are_independent():
    first = SceneData()
    second = SceneData()
    first.map.append("111")
    assert second.map == []


def test_validation_invalid_character():
    with pytest.raises(CubError) as info:
        MapValidation(invalid=1, player=1).check()
    assert info.value.message == WARNING_INVALID


@pytest.mark.parametrize("players", [0, 2, 3])
def test_validation_wrong_player_count(players):
    with pytest.raises(CubError) as info:
        MapValidation(player=players).check()
    assert info.value.message == WARNING_PLAYER


def test_validation_invalid_takes_priority():
    with pytest.raises(CubError) as info:
        MapValidation(invalid=2, player=0).check()
    assert info.value.message == WARNING_INVALID


def test_validation_passes_then_fails_after_change():
    validation = MapValidation(player=1)
    validation.check()
    validation.player += 1
    with pytest.raises(CubError) as info:
        validation.check()
    assert info.value.message == WARNING_PLAYER