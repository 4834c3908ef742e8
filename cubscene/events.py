"""Windows, hooks and an event loop that dispatches queued events to them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable


class EventType(IntEnum):
    """Event codes, numbered as in the X protocol."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


MAX_EVENT = 36

KEY_PRESS_MASK = 1 << 0
KEY_RELEASE_MASK = 1 << 1
BUTTON_PRESS_MASK = 1 << 2
BUTTON_RELEASE_MASK = 1 << 3
POINTER_MOTION_MASK = 1 << 6
EXPOSURE_MASK = 1 << 15
STRUCTURE_NOTIFY_MASK = 1 << 17


@dataclass(frozen=True)
class Event:
    """A queued event addressed to a window.

    ``delete_request`` marks a client message asking the window to close.
    """

    type: int
    window: "Window | None"
    key: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    delete_request: bool = False


@dataclass
class _Hook:
    mask: int
    func: Callable[..., Any] | None
    param: Any


class Window:
    """A window with a hook slot per event type."""

    def __init__(self, width: int, height: int, title: str):
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.title = title
        self.hooks: dict[int, _Hook] = {}

    def __repr__(self) -> str:
        return f"Window({self.width}, {self.height}, {self.title!r})"

    def hook(self, event: int, mask: int, func: Callable[..., Any] | None, param: Any = None) -> None:
        """Install ``func`` for ``event``, selecting ``mask`` on the window."""
        if not 0 <= event < MAX_EVENT:
            raise ValueError(f"event code out of range: {event}")
        self.hooks[int(event)] = _Hook(mask, func, param)

    def key_hook(self, func: Callable[..., Any] | None, param: Any = None) -> None:
        """Call ``func(key, param)`` when a key is released."""
        self.hook(EventType.KEY_RELEASE, KEY_RELEASE_MASK, func, param)

    def mouse_hook(self, func: Callable[..., Any] | None, param: Any = None) -> None:
        """Call ``func(button, x, y, param)`` when a mouse button is pressed."""
        self.hook(EventType.BUTTON_PRESS, BUTTON_PRESS_MASK, func, param)

    def expose_hook(self, func: Callable[..., Any] | None, param: Any = None) -> None:
        """Call ``func(param)`` when the window needs redrawing."""
        self.hook(EventType.EXPOSE, EXPOSURE_MASK, func, param)

    def event_mask(self) -> int:
        """Return the union of the masks of all installed hooks."""
        mask = 0
        for hook in self.hooks.values():
            mask |= hook.mask
        return mask


def _deliver(event: Event, hook: _Hook) -> None:
    func = hook.func
    kind = event.type
    if kind in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
        func(event.key, hook.param)
    elif kind in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
        func(event.button, event.x, event.y, hook.param)
    elif kind == EventType.MOTION_NOTIFY:
        func(event.x, event.y, hook.param)
    elif kind == EventType.EXPOSE:
        if not event.count:
            func(hook.param)
    elif kind >= EventType.KEY_PRESS:
        func(hook.param)


class Display:
    """A connection owning windows, an event queue and an optional idle hook."""

    def __init__(self) -> None:
        self.windows: list[Window] = []
        self._queue: deque[Event] = deque()
        self._loop_hook: _Hook | None = None
        self._end_loop = False

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Create a window; its first expose event is queued right away."""
        window = Window(width, height, title)
        self.windows.insert(0, window)
        self.post(Event(EventType.EXPOSE, window))
        return window

    def destroy_window(self, window: Window) -> None:
        """Remove ``window`` from the display."""
        for index, candidate in enumerate(self.windows):
            if candidate is window:
                del self.windows[index]
                return
        raise ValueError(f"{window!r} does not belong to this display")

    def loop_hook(self, func: Callable[..., Any] | None, param: Any = None) -> None:
        """Call ``func(param)`` each time the loop runs out of pending events."""
        self._loop_hook = None if func is None else _Hook(0, func, param)

    def post(self, event: Event) -> None:
        """Queue an event for the loop to deliver."""
        self._queue.append(event)

    def loop(self) -> None:
        """Deliver events until no window is left or :meth:`loop_end` is called.

        Without a loop hook the loop also returns once the queue is empty,
        since nothing else could add events.
        """
        while self.windows and not self._end_loop:
            while not self._end_loop and (self._loop_hook is None or self._queue):
                if not self._queue:
                    return
                self._dispatch(self._queue.popleft())
            if self._loop_hook is not None:
                self._loop_hook.func(self._loop_hook.param)

    def loop_end(self) -> None:
        """Make the running loop return."""
        self._end_loop = True

    def _dispatch(self, event: Event) -> None:
        window = next((w for w in self.windows if w is event.window), None)
        if window is None:
            return
        if event.type == EventType.CLIENT_MESSAGE and event.delete_request:
            closer = window.hooks.get(EventType.DESTROY_NOTIFY)
            if closer is not None and closer.func is not None:
                closer.func(closer.param)
        if event.type < MAX_EVENT:
            hook = window.hooks.get(event.type)
            if hook is not None and hook.func is not None:
                _deliver(event, hook)