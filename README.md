# audiocaster

An interactive 2D acoustic ray caster. A listener follows the mouse. Rays are
cast outwards in a full circle around it and bounce off walls. When a ray
reaches a sound source just as that source's expanding wavefront gets there,
the listener hears the sound. The volume depends on how far the ray travelled
and how much the walls it bounced off reflect. The stereo pan depends on the
direction in which the ray left the listener.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
audiocaster [VERTICES]
```

`VERTICES` is the wall vertex file. It defaults to `resources/vertices.csv`,
relative to the working directory. Only the first line of the file is read.
It holds comma-separated coordinates, `x1,y1,x2,y2,...`. Each pair of
consecutive vertices forms one wall segment. At most 200 vertices are used,
which makes at most 100 walls.

If the file cannot be opened, or a field is not a number, the command prints
an error and exits with status 1.

The two sound sources play `resources/snap.mp3` and `resources/bottle.mp3`.
Both paths are relative to the working directory. The window shows:

- the walls;
- the sound sources, with the wavefronts of their active sounds;
- the rays cast on the current frame;
- the frame rate, the sample size and the bounce limit.

### Controls

| Key          | Action                                                      |
|--------------|-------------------------------------------------------------|
| Space        | Emit the "snap" sound, from a source that follows the mouse |
| W            | Emit the "bottle" sound, from a source fixed at (400, 400)  |
| Up / Down    | Raise / lower the ray sample size by 20                     |
| Left / Right | Lower / raise the maximum number of bounces (1 to 8)        |
| Escape       | Quit                                                        |

## Library use

The simulation does not depend on the window and can be driven directly:

```python
from audiocaster.vec2 import Vec2
from audiocaster.line_object import LineObject
from audiocaster.buffers import LineBuffer, parse_floats, coords_to_vertices
from audiocaster.ray_listener import RayListener

buffer = LineBuffer()
buffer.load_data(coords_to_vertices(parse_floats("0,0,800,0,800,0,800,600")))
source = LineObject.sound_source(Vec2(400, 300), 40, "resources/bottle.mp3")
buffer.lines.append(source)

listener = RayListener(pos=Vec2(200, 200))
source.play_sound(now=0.0)
listener.listen(buffer, dtime=0.016, now=0.1)
listener.play_detected_sounds(lambda file, volume, pan: print(file, volume, pan))
```

### Modules

- `audiocaster.vec2`: `Vec2`, an immutable 2-D vector. It supports `+`, `-`,
  scalar `*`, negation and unpacking, and has `dot`, `length` and
  `normalized`.
- `audiocaster.line_object`: `LineObject`, which is either a wall segment or a
  circular sound source (`LineObject.sound_source`). Each object has an
  `ObjectType`. Sound sources hold up to 10 `ActiveSound`s. `play_sound` starts
  a sound and returns `False` once 10 are active. `delete_old_sounds` drops one
  silent sound, or one older than 5 seconds, per call. The module also provides
  `SoundInfo` and `distance`.
- `audiocaster.buffers`: `parse_floats`, `coords_to_vertices`, `LineBuffer`
  (walls built from vertex pairs) and `VertexBuffer`.
  `VertexBuffer.load_data(path)` reads vertices from the first line of a file.
- `audiocaster.ray_listener`: `RayListener` and `DetectedSound`.
  - `listen(objects, dtime, now)` casts `sample_size` rays around `pos`. It
    records each sound they hear in `detected`, up to 250.
  - Each ray is followed by `cast_ray`. It reflects off walls and also carries
    on straight through them, up to `max_bounces` times.
  - The ray pieces of the last `listen` are kept in `rays`, for drawing.
  - `play_detected_sounds(play)` calls `play(file, volume, pan)` for every
    audible detection, then clears the list. It returns how many sounds it
    played. A ray that left towards +x gets a pan of 0.0, and one that left
    towards -x gets 1.0.
- `audiocaster.app`: the window (`main`), the drawing helpers `draw_objects`
  and `display_stats`, and `SoundBank`. `SoundBank` loads each sound file once.
  It plays sounds through the pygame mixer, splitting the pan between the left
  and right channels. It can be used as a context manager, which calls `close`
  on exit.

## Limitations

- The scene is read from a single line of a vertex file. Walls cannot be
  edited, and scenes cannot be saved, from within the window.
- The two sound sources and their files are fixed.
- Every wall absorbs and reflects half of the sound. Walls do not bend rays;
  the part of a ray that passes through a wall continues in the same direction.