import pytest

from cubscene.scene import (
    E_ALREADY_FOUND,
    E_BAD_COLOR_USAGE,
    E_OPEN,
    E_WRONG_EXT,
    MapInfo,
    SceneError,
    Textures,
    check_extension,
    compute_widths,
    parse_colors,
    parse_scene,
    parse_textures,
    read_lines,
)

SCENE = (
    "NO ./north.xpm\n"
    "SO ./south.xpm\n"
    "WE ./west.xpm\n"
    "EA ./east.xpm\n"
    "F 220,100,0\n"
    "C 225,30,0\n"
    "\n"
    "1111\n"
    "1N01\n"
    "1111\n"
)

TEXTURE_LINES = ["NO ./n\n", "SO ./s\n", "WE ./w\n", "EA ./e\n"]


def _textures():
    return Textures(no="n", so="s", we="w", ea="e")


def test_check_extension_accepts_cub():
    assert check_extension("maps/map.cub") == "maps/map.cub"


@pytest.mark.parametrize("name", ["map.txt", "map.cub.bak", "mapcub", "./map.cub", "map.cu"])
def test_check_extension_rejects(name):
    with pytest.raises(SceneError) as info:
        check_extension(name)
    assert str(info.value) == E_WRONG_EXT


def test_read_lines_keeps_newlines(tmp_path):
    path = tmp_path / "data"
    path.write_bytes(b"a\nb\n")
    assert read_lines(path) == ["a\n", "b\n"]


def test_read_lines_last_line_without_newline(tmp_path):
    path = tmp_path / "data"
    path.write_bytes(b"a\r\nb")
    assert read_lines(path) == ["a\r\n", "b"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(SceneError) as info:
        read_lines(tmp_path / "absent")
    assert str(info.value) == E_OPEN


def test_compute_widths_example():
    assert compute_widths(["111\n", "1 1\n", "\n"]) == ([2, 1, -1], 2)


def test_compute_widths_invariants():
    lines = SCENE.splitlines(keepends=True)
    widths, max_width = compute_widths(lines)
    assert len(widths) == len(lines)
    assert max_width == max(widths)


def test_compute_widths_empty():
    assert compute_widths([]) == ([], 0)


def test_parse_textures_in_file_order():
    textures = parse_textures(["EA a\n", "NO b\n", "SO c\n", "WE d\n"])
    assert (textures.no, textures.so, textures.we, textures.ea) == ("a", "b", "c", "d")


def test_parse_textures_strips_blanks_and_newline():
    lines = ["NO   \t./n\n", "SO ./s\n", "WE ./w\n", "EA ./e"]
    textures = parse_textures(lines)
    assert textures.no == "./n"
    assert textures.ea == "./e"


def test_parse_textures_ignores_other_lines():
    textures = parse_textures(["F 1,2,3\n", *TEXTURE_LINES, "1111\n"])
    assert textures.so == "./s"


def test_parse_textures_fifth_line():
    with pytest.raises(SceneError) as info:
        parse_textures([*TEXTURE_LINES, "NO ./again\n"])
    assert str(info.value) == E_ALREADY_FOUND


def test_parse_textures_missing_one():
    with pytest.raises(SceneError):
        parse_textures(TEXTURE_LINES[:3])


def test_parse_colors_reads_both():
    textures = parse_colors(["F 220,100,0\n", "C 225,30,0\n"], _textures())
    assert textures.floor == (220, 100, 0)
    assert textures.ceiling == (225, 30, 0)
    assert textures.no == "n"


def test_parse_colors_first_line_is_floor():
    textures = parse_colors(["C 1,2,3\n", "F 4,5,6\n"], _textures())
    assert textures.floor == (1, 2, 3)
    assert textures.ceiling == (4, 5, 6)


def test_parse_colors_allows_blanks_in_fields():
    textures = parse_colors(["F  7, 8 ,9\n", "C 1,2,3\n"], _textures())
    assert textures.floor == (7, 8, 9)


def test_parse_colors_ceiling_not_range_checked():
    textures = parse_colors(["F 1,2,3\n", "C 300,0,0\n"], _textures())
    assert textures.ceiling == (300, 0, 0)


@pytest.mark.parametrize(
    "line",
    ["F 256,0,0\n", "F 1234,0,0\n", "F ,1,2\n", "F 1,2,\n", "F 1,2,3,4\n", "F \n", "F 1,,3\n"],
)
def test_parse_colors_bad_usage(line):
    with pytest.raises(SceneError) as info:
        parse_colors([line, "C 1,2,3\n"], _textures())
    assert str(info.value) == E_BAD_COLOR_USAGE


def test_parse_colors_too_few_components():
    with pytest.raises(SceneError) as info:
        parse_colors(["F 1,2\n", "C 1,2,3\n"], _textures())
    assert str(info.value) != E_BAD_COLOR_USAGE


def test_parse_colors_third_line():
    with pytest.raises(SceneError):
        parse_colors(["F 1,2,3\n", "C 1,2,3\n", "F 4,5,6\n"], _textures())


def test_parse_colors_missing_line():
    with pytest.raises(SceneError):
        parse_colors(["F 1,2,3\n"], _textures())


def test_parse_scene(tmp_path, monkeypatch):
    (tmp_path / "scene.cub").write_text(SCENE)
    monkeypatch.chdir(tmp_path)
    scene = parse_scene("scene.cub")
    lines = SCENE.splitlines(keepends=True)
    assert scene.map.grid == lines
    assert scene.map.height == len(lines)
    assert scene.textures.no == "./north.xpm"
    assert scene.textures.ea == "./east.xpm"
    assert scene.textures.floor == (220, 100, 0)
    assert scene.textures.ceiling == (225, 30, 0)
    assert scene.map.widths == compute_widths(lines)[0]


def test_parse_scene_wrong_extension(tmp_path, monkeypatch):
    (tmp_path / "scene.txt").write_text(SCENE)
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SceneError) as info:
        parse_scene("scene.txt")
    assert str(info.value) == E_WRONG_EXT


def test_map_info_height_follows_grid():
    info = MapInfo(["a\n", "b\n", "c\n"], [0, 0, 0])
    assert info.height == 3