from cubscene.debug import format_map, format_textures, format_widths
from cubscene.scene import MapInfo, Scene, Textures


def test_format_map_joins_lines():
    lines = ["11\n", "1N\n", "11"]
    assert format_map(lines) == "11\n1N\n11"


def test_format_textures():
    textures = Textures("n", "s", "w", "e", ceiling=(1, 2, 3), floor=(4, 5, 6))
    assert format_textures(textures).splitlines() == [
        "texture NO : n",
        "texture SO : s",
        "texture WE : w",
        "texture EA : e",
        "texture C : 1",
        "texture C : 2",
        "texture C : 3",
        "texture F : 4",
        "texture F : 5",
        "texture F : 6",
    ]


def _scene():
    grid = ["cfg\n"] * 6 + ["11111\n", "111\n"]
    info = MapInfo(grid, [0, 0, 0, 0, 0, 0, 5, 3], 5)
    return Scene(info, Textures("n", "s", "w", "e"))


def test_format_widths_rows():
    lines = format_widths(_scene()).split("\n")
    rows = [line for line in lines if line.startswith("width[")]
    assert rows == ["width[6] = 5", "width[7] = 3"]
    assert "Max width = 5" in lines
    assert "Height =  2" in lines


def test_format_widths_separators():
    text = format_widths(_scene())
    lines = text.split("\n")
    separators = [line for line in lines if line and set(line) == {"-"}]
    assert len(separators) == 3
    assert len(set(separators)) == 1
    assert lines[0] == separators[0]
    assert text.endswith("\n\n")