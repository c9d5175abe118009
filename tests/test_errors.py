import pytest

from cubparse.errors import (
    RED,
    RST,
    WARNING_EXT,
    WARNING_MAP,
    CubError,
    format_error,
)


def test_cub_error_keeps_message():
    error = CubError(WARNING_MAP)
    assert error.message == WARNING_MAP
    assert str(error) == WARNING_MAP


def test_cub_error_raised_carries_message_for_reporting():
    error = CubError(WARNING_EXT)
    with pytest.raises(CubError) as info:
        raise error
    assert info.value.message == WARNING_EXT
    assert format_error(info.value.message) == RED + WARNING_EXT + RST


def test_format_error_wraps_message_in_colour():
    text = format_error(WARNING_EXT)
    assert text.startswith(RED)
    assert text.endswith(RST)
    assert text[len(RED):len(text) - len(RST)] == WARNING_EXT


def test_format_error_of_empty_message_is_only_codes():
    assert format_error("") == RED + RST