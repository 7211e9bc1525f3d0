# orangekit

Small, dependency-free building blocks for voxel and block-world games.

## What is inside

- `orangekit.noise`: simplex noise in one, two or three dimensions through
  `noise(x, y=None, z=None)`, with results in [-1, 1], and fractal Brownian
  motion through `SimplexNoise(frequency, amplitude, lacunarity, persistence).fractal(octaves, *coords)`.
- `orangekit.vectors`: mutable `Vec2`, `Vec3` and `Vec4` float vectors with
  `+`, `-`, scalar `*` (and `/` for `Vec2` and `Vec4`), indexing, iteration and
  equality. `Vec4 *= s` scales x, y and z only.
- `orangekit.mathutil`: `clamp`, `wrap`, `sign`, `decimal`, `lerp`,
  `cubic_s_curve`, `quintic_s_curve` (both raise `ValueError` outside [0, 1]),
  `degrees_to_radians`, `radians_to_degrees`, `world_to_chunk_space`,
  `chunk_to_world_space`, `hash_key_from_chunk_position` (16-bit coordinates
  only) and a voxel `raycast` that returns the hit point as a `Vec3` or `None`.
  The constants `E`, `PI`, `PI_DIV_2` and `PI_DIV_4` are defined here too.
- `orangekit.clock`: a `Clock` whose `signal()` marks frames; `delta_time()`
  and `time_since_start()` report in any `TimePrecision`. The time source can
  be injected.
- `orangekit.input`: an `Input` state tracker for 256 keys, 16 mouse buttons,
  pointer movement and scroll. Call `update()` once per frame; a click is the
  configured left button going down since the previous frame.
- `orangekit.debug_renderer`: a `DebugRenderer` that collects `ColoredVertex`
  pairs for lines, axis-aligned boxes, icospheres and circles, up to a fixed
  capacity (250000 by default); lines that do not fit are dropped.
- `orangekit.sorted_pool`: a fixed-capacity `SortedPool` that keeps its items
  packed by swapping the last item into a removed slot. Inserting into a full
  pool raises `PoolFullError`.
- `orangekit.log`: a `Log` that writes timestamped messages (`log << "a" << 1`,
  then `log.end()`) to a stream and appends printf-style lines to an output
  file, plus `log_error`, `log_warning`, `log_info` and `log_message` for
  standard output. Colours are shown as terminal escapes only on a terminal.
- `orangekit.scopetimer`: `ScopeTimer`, a context manager that measures a block
  in milliseconds and hands the result to a callback or, in
  `TimerMode.CONSOLE`, writes it to a `Log`.
- `orangekit.filesystem`: a `FileSystem` that indexes the files and directories
  under a root by bare name and answers existence queries.
- `orangekit.memory_tracker`: a `HeapTracker` that records allocations and
  deallocations and reports the allocations never freed
  (`find_memory_leaks`, or `check_memory_leaks`, which raises `MemoryLeakError`).

## What it does not do

orangekit draws nothing: `DebugRenderer` only gathers vertices for a renderer
of your own. `Input` is not connected to any window or event loop; feed it
key, button, movement and scroll events yourself. There are no fonts, textures
or GPU resources, and `HeapTracker` only knows about what you record in it.
There is no command-line program.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from orangekit.noise import SimplexNoise, noise

height = SimplexNoise(frequency=0.01).fractal(4, 12.0, 34.0)
value = noise(0.5, 1.5, 2.5)
```

```python
from orangekit.mathutil import raycast

solid = {(3.0, 0.0, 0.0)}
hit = raycast((0.5, 0.5, 0.5), (1.0, 0.0, 0.0), 10.0, lambda voxel: tuple(voxel) in solid)
```

```python
from orangekit.scopetimer import ScopeTimer

with ScopeTimer("chunk update") as timer:
    ...
print(timer.elapsed_ms())
```

```python
from orangekit.debug_renderer import DebugRenderer

renderer = DebugRenderer(capacity=1000)
renderer.draw_aabb((0, 0, 0), (1, 1, 1), (1.0, 0.0, 0.0, 1.0))
print(renderer.vertex_count())  # 24
```