# survivor

Building blocks for a small top-down survival arcade game drawn with pygame.
The package provides a player that walks around a 1280×720 field with the
arrow keys, a ring of bullets that orbits the player, animated sprites built
from numbered frame images, and menu buttons that react to the mouse.

## Modules

### `survivor.drawing`

- `blit_alpha(target, x, y, image)` draws `image` at `(x, y)` on `target`,
  blending it by its own alpha channel, and returns the affected rectangle.
- `draw_bbox(target, x, y, width, height)` outlines a box in white. It is
  useful for checking collisions by eye.
- `draw_tip_text(target, value, font)` renders `value` as a whole number in
  orange at `(10, 10)` with the given pygame font. This can show, for
  example, the remaining hearts.

### `survivor.atlas`

`Atlas` holds an ordered list of frame surfaces in `frames`. It supports
`len()`, indexing and iteration.

- `Atlas.load(pattern, count)` loads `count` images from the files named
  `pattern % 1` through `pattern % count`. A negative count raises
  `ValueError`.
- `Atlas.derive(source, process_type)` builds a new atlas from `source`:
  - `ProcessType.FLIP` mirrors every frame horizontally, so right-facing
    frames need no image files of their own.
  - `ProcessType.WHITE` turns every pixel that has any alpha into opaque
    white and leaves the rest transparent. This gives the flash shown when
    the player is hurt.

  Deriving from an empty atlas raises `ValueError`.

### `survivor.animation`

`Animation(atlas, interval_ms)` steps through an atlas. An empty atlas
raises `ValueError`.

- `advance(delta)` adds `delta` milliseconds to the timer. Once the timer
  reaches the interval, it moves to the next frame, wrapping round at the
  end, and resets the timer. It returns the frame to show.
- `play(target, x, y, delta)` advances and draws that frame at `(x, y)`.

### `survivor.button`

`Button(region, idle, hovered, pushed)` is an abstract button over a
rectangle. Each image may be a `pygame.Surface` or a path to load. Its
`status` is a `ButtonStatus`: `IDLE`, `HOVERED` or `PUSHED`.

- `hit(x, y)` tests a point against the region, with the right and bottom
  edges counted as inside.
- `process_event(event)` handles pygame mouse events:
  - Motion switches between idle and hovered.
  - A left press inside the region pushes the button.
  - A left release while pushed calls `on_click()`.
- `draw(target)` shows the image for the current status.

`StartButton` and `QuitButton` set their `clicked` attribute to `True` when
clicked.

### `survivor.player`

`Player(frames=None, shadow=None)` takes a left-facing atlas and a shadow
image. If either is omitted, it is loaded from
`assets/imgs/Demon/Demon_IDLE_Left_%d.png` (four frames) or
`assets/imgs/shadow_player.png`, relative to the working directory. The
player starts centred in the 1280×720 window.

- `process_event(event)` tracks which arrow keys are held.
- `move()` steps 13 pixels in the held direction, with diagonals normalised,
  and keeps the 81×71 frame inside the window.
- `draw(target, delta)` draws the shadow and the left- or right-facing
  animation. While `hurt` is true, the frame alternates with the white
  animation until a countdown runs out, and then `hurt` is cleared.
- `position` gives the top-left corner as `(x, y)`. `bbox()` gives
  `(width, height)`.

### `survivor.bullets`

`Bullet(x, y)` is a round bullet with a radius of 10. `draw(target)` draws it
as a filled circle with an outline.

`update_bullets(bullets, player_position, player_bbox, tick_ms)` places the
bullets at even angles on a circle around the player's centre. The radius
swings between 75 and 125 over time, and the ring turns as `tick_ms` grows.

## Example

```python
from survivor.bullets import Bullet, update_bullets

bullets = [Bullet() for _ in range(5)]
update_bullets(bullets, player_position=(600, 325), player_bbox=(81, 71), tick_ms=0)
print(bullets[0].position)  # (640, 460)
```

## What this package does not do

There are no enemies and no collision handling between enemies, bullets and
the player. There is no heart counter, no menu-and-game loop, and no command
that starts a game. The package supplies the pieces listed above. Opening a
window, running the frame loop and supplying the image assets are left to
the program that uses it.

## Requirements

Python 3.10 or newer and pygame 2.