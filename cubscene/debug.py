"""Text dumps of a parsed scene, for inspection."""

from __future__ import annotations

from collections.abc import Sequence

from cubscene.scene import Scene, Textures

_SEPARATOR = "------------------------------------\n"
_CONFIG_LINES = 6


def format_map(lines: Sequence[str]) -> str:
    """Return the map lines joined as they appear in the file."""
    return "".join(lines)


def format_textures(textures: Textures) -> str:
    """Return the texture paths and colour components, one per line."""
    parts = [
        f"texture NO : {textures.no}\n",
        f"texture SO : {textures.so}\n",
        f"texture WE : {textures.we}\n",
        f"texture EA : {textures.ea}\n",
    ]
    parts.extend(f"texture C : {value}\n" for value in textures.ceiling)
    parts.extend(f"texture F : {value}\n" for value in textures.floor)
    return "".join(parts)


def format_widths(scene: Scene) -> str:
    """Return the widths of the map rows that follow the six settings lines."""
    info = scene.map
    parts = [_SEPARATOR]
    parts.extend(
        f"width[{row}] = {info.widths[row]}\n" for row in range(_CONFIG_LINES, info.height)
    )
    parts.append(_SEPARATOR)
    parts.append(f"Max width = {info.max_width}\n")
    parts.append(f"Height =  {info.height - _CONFIG_LINES}\n")
    parts.append(_SEPARATOR)
    parts.append("\n")
    return "".join(parts)