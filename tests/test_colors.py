import pytest

from cubparse.colors import convert_rgb, parse_rgb, split_rgb
from cubparse.errors import WARNING_INVALID_COLOR, CubError


def test_convert_rgb_black_has_only_alpha():
    assert convert_rgb(0, 0, 0) == 255


def test_convert_rgb_white_is_all_ones():
    assert convert_rgb(255, 255, 255) == 0xFFFFFFFF


@pytest.mark.parametrize("rgb", [(220, 100, 0), (1, 2, 3), (255, 0, 128)])
def test_convert_rgb_components_recoverable(rgb):
    packed = convert_rgb(*rgb)
    assert (packed >> 24, (packed >> 16) & 0xFF, (packed >> 8) & 0xFF) == rgb
    assert packed & 0xFF == 255


def test_parse_rgb_floor_line():
    assert parse_rgb("F 220,100,0\n", "F") == convert_rgb(220, 100, 0)


def test_parse_rgb_with_tab_and_spaces_around_components():
    assert parse_rgb("C\t 10 , 20 ,30 \n", "C") == convert_rgb(10, 20, 30)


def test_parse_rgb_drops_empty_pieces():
    assert parse_rgb("F 1,,2,3", "F") == convert_rgb(1, 2, 3)


def test_split_rgb_trims_components():
    assert split_rgb("C 1 , 2 ,3\n", "C") == ["1", "2", "3"]


@pytest.mark.parametrize(
    "line",
    [
        "F220,100,0",
        "FF 1,2,3",
        "F 1,2",
        "F 1,2,3,4",
        "F 256,0,0",
        "F -1,0,0",
        "F 1a,2,3",
        "F 1 2,3,4",
        "F , ,",
        "F ",
        "F +5,0,0",
    ],
)
def test_parse_rgb_rejects_bad_lines(line):
    with pytest.raises(CubError) as info:
        parse_rgb(line, "F")
    assert info.value.message == WARNING_INVALID_COLOR


def test_split_rgb_rejects_pieces_without_digits():
    with pytest.raises(CubError) as info:
        split_rgb("C a,b,c", "C")
    assert info.value.message == WARNING_INVALID_COLOR