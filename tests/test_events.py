import random

import pytest

from cubscene.events import (
    BUTTON_PRESS_MASK,
    EXPOSURE_MASK,
    KEY_RELEASE_MASK,
    POINTER_MOTION_MASK,
    Display,
    Event,
    EventType,
    Window,
)

ESCAPE = 0xFF1B


def test_event_mask_unions_hook_masks():
    win = Window(242, 242, "Title1")
    win.key_hook(lambda key, p: None, None)
    win.mouse_hook(lambda b, x, y, p: None, None)
    win.expose_hook(lambda p: None, None)
    assert win.event_mask() == KEY_RELEASE_MASK | BUTTON_PRESS_MASK | EXPOSURE_MASK


def test_hook_rejects_out_of_range_event():
    win = Window(10, 10, "w")
    with pytest.raises(ValueError):
        win.hook(99, 0, lambda p: None, None)


def test_new_window_is_prepended():
    display = Display()
    first = display.new_window(300, 300, "win1")
    second = display.new_window(600, 600, "win2")
    assert display.windows == [second, first]


def test_destroy_unknown_window_raises():
    display = Display()
    with pytest.raises(ValueError):
        display.destroy_window(Window(5, 5, "stray"))


def test_expose_hook_called_for_first_expose():
    display = Display()
    win = display.new_window(242, 242, "Title1")
    seen = []
    win.expose_hook(seen.append, "win1")
    display.loop()
    assert seen == ["win1"]


def test_expose_with_count_is_skipped():
    display = Display()
    win = display.new_window(10, 10, "w")
    seen = []
    win.expose_hook(seen.append, "p")
    display.post(Event(EventType.EXPOSE, win, count=2))
    display.loop()
    assert seen == ["p"]


def test_mouse_hook_recreates_window():
    random.seed(0)
    display = Display()
    state = {}
    calls = []

    def gere_mouse(button, x, y, param):
        calls.append((button, x, y))
        display.destroy_window(state["win1"])
        state["win1"] = display.new_window(random.randrange(1, 500), random.randrange(1, 500), "new win")
        state["win1"].mouse_hook(gere_mouse, None)

    original = display.new_window(300, 300, "win1")
    state["win1"] = original
    win2 = display.new_window(600, 600, "win2")
    original.mouse_hook(gere_mouse, None)
    win2.mouse_hook(gere_mouse, None)
    display.post(Event(EventType.BUTTON_PRESS, original, button=1, x=4, y=7))
    display.loop()
    assert calls == [(1, 4, 7)]
    assert original not in display.windows
    assert len(display.windows) == 2
    assert state["win1"].title == "new win"


def test_escape_destroys_window_and_ends_loop():
    display = Display()
    win3 = display.new_window(242, 242, "Title3")
    keys = []

    def key_win3(key, param):
        keys.append(key)
        if key == ESCAPE:
            display.destroy_window(win3)

    win3.key_hook(key_win3, None)
    display.post(Event(EventType.KEY_RELEASE, win3, key=ESCAPE))
    ticks = []
    display.loop_hook(ticks.append, "tick")
    display.loop()
    assert keys == [ESCAPE]
    assert display.windows == []
    assert ticks == ["tick"]


def test_key_hook_ignores_key_press():
    display = Display()
    win = display.new_window(10, 10, "w")
    keys = []
    win.key_hook(lambda key, p: keys.append(key), None)
    display.post(Event(EventType.KEY_PRESS, win, key=97))
    display.post(Event(EventType.KEY_RELEASE, win, key=115))
    display.loop()
    assert keys == [115]


def test_motion_hook_receives_position():
    display = Display()
    win3 = display.new_window(242, 242, "Title3")
    moves = []
    win3.hook(EventType.MOTION_NOTIFY, POINTER_MOTION_MASK, lambda x, y, p: moves.append((x, y, p)), "m")
    display.post(Event(EventType.MOTION_NOTIFY, win3, x=12, y=34))
    display.loop()
    assert moves == [(12, 34, "m")]
    assert win3.event_mask() == POINTER_MOTION_MASK


def test_delete_request_calls_destroy_hook():
    display = Display()
    win = display.new_window(10, 10, "w")
    closed = []
    win.hook(EventType.DESTROY_NOTIFY, 1 << 2, closed.append, "cube")
    display.post(Event(EventType.CLIENT_MESSAGE, win, delete_request=True))
    display.loop()
    assert closed == ["cube"]


def test_loop_end_stops_loop_hook():
    display = Display()
    win = display.new_window(10, 10, "w")
    ticks = []

    def tick(param):
        ticks.append(param)
        if len(ticks) == 3:
            display.loop_end()

    display.loop_hook(tick, "t")
    display.loop()
    assert ticks == ["t", "t", "t"]
    assert display.windows == [win]


def test_events_for_other_windows_are_dropped():
    display = Display()
    win = display.new_window(10, 10, "w")
    keys = []
    win.key_hook(lambda key, p: keys.append(key), None)
    display.post(Event(EventType.KEY_RELEASE, Window(5, 5, "other"), key=1))
    display.loop()
    assert keys == []