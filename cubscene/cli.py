"""Command line entry point: load a scene and open the game window."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from enum import IntEnum

from cubscene.debug import format_textures
from cubscene.events import BUTTON_PRESS_MASK, Display, EventType, Window
from cubscene.scene import SceneError, parse_scene

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
WINDOW_TITLE = "CUBE3D"
E_ARGUMENTS = "Number of arguments invalid\n"


class Key(IntEnum):
    """Key symbols the game reacts to."""

    W = 119
    S = 115
    D = 100
    A = 97
    ESCAPE = 65307


class _Session:
    def __init__(self, display: Display) -> None:
        self.display = display
        self.window: Window | None = None
        self.closed = False

    def close(self) -> None:
        if self.window is not None and self.window in self.display.windows:
            self.display.destroy_window(self.window)
        self.window = None
        self.closed = True
        self.display.loop_end()


def _on_key(key: int, session: _Session) -> int:
    if key == Key.ESCAPE:
        session.close()
    return 1


def _on_destroy(session: _Session) -> int:
    session.close()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program; returns 0 after an error or a requested exit."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stderr.write(E_ARGUMENTS)
        return 0
    try:
        scene = parse_scene(args[0])
    except SceneError as exc:
        sys.stderr.write(str(exc))
        return 0
    sys.stdout.write(format_textures(scene.textures))

    display = Display()
    session = _Session(display)
    session.window = display.new_window(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
    session.window.key_hook(_on_key, session)
    session.window.hook(EventType.DESTROY_NOTIFY, BUTTON_PRESS_MASK, _on_destroy, session)
    display.loop()
    return 0 if session.closed else 1


if __name__ == "__main__":
    sys.exit(main())