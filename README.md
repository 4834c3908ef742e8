# cubscene

`cubscene` reads and checks `.cub` scene description files, the kind used by
small first-person raycasting games. Alongside the scene parser it has:

- `cubscene.image`: an in-memory pixel image with 32-bit padded scanlines,
  and a `Visual` that converts `0xRRGGBB` colours to pixel values;
- `cubscene.xpm`: an XPM texture loader;
- `cubscene.rgbnames`: the X11 colour name table used by XPM colour specs;
- `cubscene.events`: an in-memory window, hook and event queue model;
- `cubscene.debug`: text dumps of a parsed scene.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## The scene format

A scene file name must end in `.cub` (everything from the first dot on must
be exactly `.cub`). The file holds four wall textures and two colours,
followed by the map grid:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100001
1000N1
111111
```

The rules the parser applies:

- Lines starting with `NO `, `SO `, `WE ` or `EA ` are texture lines. They
  fill the NO, SO, WE and EA slots in the order they appear. Exactly four are
  required; a fifth one is an error.
- Lines starting with `F ` or `C ` are colour lines. The first one gives the
  floor colour and the second the ceiling colour. Exactly two are required.
- A colour is three comma-separated values of one to three digits each. The
  floor values must not exceed 255.

Every failure raises `cubscene.scene.SceneError`, whose message describes the
problem. The map grid is kept as the file's raw lines in `Scene.map.grid`,
with the width of each line in `Scene.map.widths`; the grid itself is not
validated.

## Command line

```
cubscene maps/map.cub
```

The command parses the scene and prints the textures and colours it found.
When the argument count is wrong or the file is not valid, it writes the
error to standard error and stops.

## Library use

```python
from cubscene.scene import parse_scene, SceneError
from cubscene.debug import format_textures

try:
    scene = parse_scene("maps/map.cub")
except SceneError as err:
    print(err)
else:
    print(format_textures(scene.textures))
```

Loading a texture and reading its pixels (transparent pixels read as
`0xFF000000`):

```python
from cubscene.xpm import xpm_file_to_image

image = xpm_file_to_image("textures/north.xpm")
print(image.width, image.height, hex(image.get_pixel(0, 0)))
```

`xpm_to_image` does the same for a list of XPM strings, and `parse_xpm`
returns the pixels as rows of `0xRRGGBB` values. Malformed data raises
`cubscene.xpm.XpmError`.

Looking up a colour by its X11 name (case-insensitive):

```python
from cubscene.rgbnames import lookup_color

assert lookup_color("Dark Orange") == 0xFF8C00
```

Dispatching events to window hooks:

```python
from cubscene.events import Display, Event, EventType

display = Display()
window = display.new_window(1280, 720, "CUBE3D")
window.key_hook(lambda key, param: print("key", key), None)
display.post(Event(EventType.KEY_RELEASE, window, key=65307))
display.loop_hook(lambda param: display.loop_end(), None)
display.loop()
```

`Display.loop` delivers queued events until no window is left or
`loop_end` is called; without a loop hook it also returns once the queue is
empty.

## What it does not do

There is no renderer and no on-screen window. `Display` and `Window` only
keep hooks and a queue of events posted to them in memory, and the command
line opens such a window only to run that loop; nothing is drawn. The map
grid is not checked for closed walls or a starting position.