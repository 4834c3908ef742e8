"""Reading and validating ``.cub`` scene descriptions."""

from __future__ import annotations

import os
import re
from collections.abc import Sequence
from dataclasses import dataclass, field, replace

E_WRONG_EXT = "Error :\nFile extension must be .cub\n"
E_ALREADY_FOUND = "Error :\nTextures already found\n"
E_BAD_COLOR_USAGE = (
    "Error :\nEmpty field or bad format. Enter 3 values between 0 and 255\n"
)
E_OPEN = "Error\n"
E_MISSING_TEXTURES = "Error :\nExpected NO, SO, WE and EA textures\n"
E_COLOR_COUNT = "Error :\nExpected one floor and one ceiling colour\n"
E_COLOR_COMPONENTS = "Error :\nA colour needs 3 values\n"

EXTENSION = ".cub"
TEXTURES_FOUND = 4
COLORS_FOUND = 2
COLOR_COMPONENTS = 3
MAX_COMPONENT = 255
MAX_COMPONENT_DIGITS = 3

_WHITESPACE = " \t\n\v\f\r"
_TEXTURE_PREFIXES = ("NO ", "SO ", "EA ", "WE ")
_COLOR_PREFIXES = ("F ", "C ")
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class SceneError(ValueError):
    """Raised when a scene file cannot be read or is malformed."""


@dataclass(frozen=True)
class Textures:
    """Wall texture paths and the floor and ceiling colours."""

    no: str
    so: str
    we: str
    ea: str
    ceiling: tuple[int, int, int] = (0, 0, 0)
    floor: tuple[int, int, int] = (0, 0, 0)


@dataclass
class MapInfo:
    """The raw lines of a scene file and the width of each line."""

    grid: list[str]
    widths: list[int]
    max_width: int = 0
    start_x: int = 0
    start_y: int = 0
    start_dir: str = ""

    @property
    def height(self) -> int:
        return len(self.grid)


@dataclass
class Scene:
    """A parsed scene: its map lines and its textures."""

    map: MapInfo
    textures: Textures = field(repr=True)


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def check_extension(path: str | os.PathLike[str]) -> str:
    """Return ``path`` as a string if everything from its first dot on is ``.cub``."""
    text = os.fspath(path)
    dot = text.find(".")
    if dot == -1 or text[dot:] != EXTENSION:
        raise SceneError(E_WRONG_EXT)
    return text


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a file, each keeping its trailing newline."""
    try:
        with open(path, "rb") as handle:
            return [raw.decode("latin-1") for raw in handle]
    except OSError as exc:
        raise SceneError(E_OPEN) from exc


def _line_width(line: str) -> int:
    text = line.split("\n", 1)[0]
    return sum(char not in _WHITESPACE for char in text) - 1


def compute_widths(lines: Sequence[str]) -> tuple[list[int], int]:
    """Return the width of every line and the largest width (at least 0).

    A line's width is its count of non-blank characters, less one.
    """
    widths = [_line_width(line) for line in lines]
    return widths, max([0, *widths])


def _texture_path(line: str) -> str:
    return line[2:].lstrip(_WHITESPACE).removesuffix("\n")


def parse_textures(lines: Sequence[str]) -> Textures:
    """Collect the four texture lines (``NO``, ``SO``, ``WE``, ``EA`` prefixes).

    The texture lines fill the NO, SO, WE and EA slots in the order they
    appear in the file, whatever their prefix.
    """
    paths: list[str] = []
    for line in lines:
        if line.startswith(_TEXTURE_PREFIXES):
            if len(paths) == TEXTURES_FOUND:
                raise SceneError(E_ALREADY_FOUND)
            paths.append(_texture_path(line))
    if len(paths) != TEXTURES_FOUND:
        raise SceneError(E_MISSING_TEXTURES)
    no, so, we, ea = paths
    return Textures(no=no, so=so, we=we, ea=ea)


def _parse_color(line: str, range_checked: bool) -> tuple[int, int, int]:
    body = line.split("\n", 1)[0][1:]
    values: list[int] = []
    for raw in body.split(","):
        if len(values) == COLOR_COMPONENTS:
            raise SceneError(E_BAD_COLOR_USAGE)
        text = raw.lstrip(_WHITESPACE)
        if not text or len(text) > MAX_COMPONENT_DIGITS:
            raise SceneError(E_BAD_COLOR_USAGE)
        value = _atoi(text)
        if range_checked and value > MAX_COMPONENT:
            raise SceneError(E_BAD_COLOR_USAGE)
        values.append(value)
    if len(values) != COLOR_COMPONENTS:
        raise SceneError(E_COLOR_COMPONENTS)
    red, green, blue = values
    return red, green, blue


def parse_colors(lines: Sequence[str], textures: Textures) -> Textures:
    """Return ``textures`` with the floor and ceiling colours filled in.

    The first ``F``/``C`` line gives the floor and the second the ceiling,
    whatever their letter. Only the floor components are checked against
    the 255 limit.
    """
    colors: list[tuple[int, int, int]] = []
    for line in lines:
        if line.startswith(_COLOR_PREFIXES):
            if len(colors) == COLORS_FOUND:
                raise SceneError(E_COLOR_COUNT)
            colors.append(_parse_color(line, range_checked=not colors))
    if len(colors) != COLORS_FOUND:
        raise SceneError(E_COLOR_COUNT)
    floor, ceiling = colors
    return replace(textures, floor=floor, ceiling=ceiling)


def parse_scene(path: str | os.PathLike[str]) -> Scene:
    """Read and validate a ``.cub`` file."""
    check_extension(path)
    lines = read_lines(path)
    widths, max_width = compute_widths(lines)
    textures = parse_colors(lines, parse_textures(lines))
    return Scene(MapInfo(lines, widths, max_width), textures)