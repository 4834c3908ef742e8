"""Reader for XPM pixmaps, from files or from lists of strings."""

from __future__ import annotations

import os
import re
from collections.abc import Sequence

from cubscene.image import Image, new_image
from cubscene.rgbnames import lookup_color
from cubscene.wordtab import find, find_unquoted, split_words

TRANSPARENT_PIXEL = 0xFF000000
_NAME_BUFFER = 63
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data is malformed."""


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _strtol_hex(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    if not match or not match.group(2):
        return 0
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def strip_comments(text: str) -> str:
    """Blank out C comments that are not inside quotes, keeping the length.

    ``/* ... */`` comments are replaced by spaces, as are ``// ...`` comments
    together with the newline that ends them.
    """
    chars = list(text)
    while True:
        current = "".join(chars)
        begin = find_unquoted(current, "/*", len(current))
        if begin == -1:
            break
        end = find(current[begin + 2:], "*/", len(current) - begin - 2)
        stop = len(chars) if end == -1 else begin + 2 + end + 2
        chars[begin:stop] = " " * (stop - begin)
    while True:
        current = "".join(chars)
        begin = find_unquoted(current, "//", len(current))
        if begin == -1:
            break
        end = find(current[begin + 2:], "\n", len(current) - begin - 2)
        stop = len(chars) if end == -1 else begin + 2 + end + 1
        chars[begin:stop] = " " * (stop - begin)
    return "".join(chars)


def extract_quoted_lines(text: str) -> list[str]:
    """Return the contents of every double-quoted string in ``text``, in order."""
    lines = []
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            break
        end = text.find('"', start + 1)
        if end == -1:
            break
        lines.append(text[start + 1:end])
        pos = end + 1
    return lines


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Turn an XPM colour spec into 0xRRGGBB.

    ``#hex`` specs are read as hexadecimal. Otherwise ``name`` (joined with
    ``end`` by a space when given) is looked up in the colour table; unknown
    names give 0 and ``none`` gives -1.
    """
    if name.startswith("#"):
        return _strtol_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"bad XPM header: {line!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise XpmError(f"bad XPM header: {line!r}")
    return width, height, ncolors, cpp


def _parse_colors(lines: Sequence[str], cpp: int) -> dict[str, int]:
    colors: dict[str, int] = {}
    for line in lines:
        if len(line) < cpp:
            raise XpmError(f"colour line too short: {line!r}")
        words = split_words(line[cpp:])
        try:
            spec = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without 'c' key: {line!r}") from None
        if spec >= len(words):
            raise XpmError(f"colour line without colour: {line!r}")
        end = words[spec + 1] if spec + 1 < len(words) else None
        value = text_to_rgb(words[spec], end)
        key = line[:cpp]
        # Short keys go through a direct table where later entries overwrite;
        # longer keys are searched so the first definition wins.
        if cpp <= 2 or key not in colors:
            colors[key] = value
    return colors


def parse_xpm(lines: Sequence[str]) -> list[list[int]]:
    """Decode XPM strings into rows of 0xRRGGBB pixels.

    Transparent pixels (colour ``none``) come out as 0xFF000000; pixel keys
    with no colour definition come out as 0.
    """
    if not lines:
        raise XpmError("missing XPM header")
    width, height, ncolors, cpp = _parse_header(lines[0])
    color_lines = lines[1:1 + ncolors]
    if len(color_lines) < ncolors:
        raise XpmError("missing colour definitions")
    colors = _parse_colors(color_lines, cpp)
    pixel_lines = lines[1 + ncolors:1 + ncolors + height]
    if len(pixel_lines) < height:
        raise XpmError("missing pixel rows")
    rows = []
    for line in pixel_lines:
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        row = []
        for start in range(0, width * cpp, cpp):
            color = colors.get(line[start:start + cpp], 0)
            row.append(TRANSPARENT_PIXEL if color == -1 else color)
        rows.append(row)
    return rows


def xpm_to_image(lines: Sequence[str]) -> Image:
    """Decode XPM strings into a new image."""
    rows = parse_xpm(lines)
    image = new_image(len(rows[0]), len(rows))
    for y, row in enumerate(rows):
        for x, color in enumerate(row):
            image.set_pixel(x, y, color)
    return image


def xpm_file_to_image(path: str | os.PathLike[str]) -> Image:
    """Read an XPM file, drop its comments and decode it into an image."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return xpm_to_image(extract_quoted_lines(strip_comments(text)))