import pytest

from tilewm.xrdb import COLOR_NAMES, is_valid_color, load_colors, parse_resources


@pytest.mark.parametrize("value", ["#1a2B3c", "#000000", "#FFFFFF", "#abcdef"])
def test_valid_colors(value):
    assert is_valid_color(value) is True


@pytest.mark.parametrize(
    "value", [None, "", "#12345", "#1234567", "#12345g", "123456#", "#12 456", "#GGGGGG"]
)
def test_invalid_colors(value):
    assert is_valid_color(value) is False


def test_parse_resources_basic():
    text = "dwm.normfgcolor:\t#ffffff\n! a comment\n\n*foreground:   #000000\n"
    resources = parse_resources(text)
    assert resources == {"dwm.normfgcolor": "#ffffff", "*foreground": "#000000"}


def test_parse_resources_continuation_and_override():
    text = "dwm.a: one\ndwm.b: par\\\nts\ndwm.a: two\n"
    resources = parse_resources(text)
    assert resources["dwm.a"] == "two"
    assert resources["dwm.b"] == "parts"


def test_load_colors_applies_valid_values():
    colors = {"normfgcolor": "#bbbbbb", "selbgcolor": "#005577", "extra": "keep"}
    resources = parse_resources("dwm.normfgcolor: #123abc\ndwm.selbgcolor: nope\n")
    result = load_colors(resources, colors)
    assert result["normfgcolor"] == "#123abc"
    assert result["selbgcolor"] == "#005577"
    assert result["extra"] == "keep"
    assert colors["normfgcolor"] == "#bbbbbb"


def test_load_colors_wildcard_binding():
    resources = {"*urgbgcolor": "#aabbcc"}
    result = load_colors(resources, {})
    assert result == {"urgbgcolor": "#aabbcc"}


def test_load_colors_ignores_unknown_names():
    resources = {"dwm.notacolor": "#aabbcc"}
    assert load_colors(resources, {}) == {}
    assert "notacolor" not in COLOR_NAMES


def test_load_colors_round_trip_all_names():
    text = "".join(f"dwm.{name}: #0a0b0c\n" for name in COLOR_NAMES)
    result = load_colors(parse_resources(text), {})
    assert set(result) == set(COLOR_NAMES)
    assert set(result.values()) == {"#0a0b0c"}