# trexrunner

An endless side-scrolling runner. A small dinosaur runs across a desert
horizon while clouds drift by and obstacles come toward it. Jump over them,
duck under them and see how far you get.

## Installing

```
pip install .
```

The game draws, reads input and plays sound through pygame.

## Playing

The game needs five asset files in one directory: the spritesheet image
`spritesheet.png`, its frame dictionary `spritesheet.json`, and the sound
effects `sfx_achievement.wav`, `sfx_hit.wav` and `sfx_jump.wav`.

Start the game from that directory:

```
trexrunner
```

or point it at the directory with `--assets`:

```
trexrunner --assets path/to/assets
```

Controls:

- **Space** or **Up**: jump. Let go early, once the dinosaur has risen far
  enough, for a shorter jump.
- **Down**: duck while running. Pressed in mid-air, it cancels the jump and
  drops the dinosaur quickly back to the ground.
- **Space** or **Up** after a crash: start a new run.

While waiting, the dinosaur stands and blinks. Landing the first jump starts
the game, and the view widens to the full 600 by 150 window. Obstacles begin
after three seconds of running, and the speed rises slowly from 6 toward a
limit of 13. The score counts distance travelled; every 100 points it
flashes three times and plays the achievement sound. When you crash, the hit
sound plays, the restart prompt appears, and your high score is shown next
to the current score, marked `hi`.

## What it does not do

- No assets are included in the package. Without the five files listed
  above the game does not start.
- The high score lasts only as long as the game is running; it is not saved.
- There are no menus, settings or pause; closing the window ends the game.

## Using the engine

The `trexrunner.core` package holds a small 2D engine that the game is
built on:

- `trexrunner.core.types`: `Vector2` and `Frame`, a rectangle with
  `has_collision`.
- `trexrunner.core.spritesheet`: `Spritesheet`, loaded from
  `SpritesheetFiles(image, dictionary)`. The dictionary is a JSON object
  mapping frame names to objects with integer `x`, `y`, `width` and
  `height`, and an optional `collision` list of rectangles of the same
  shape. `get_frame` and `get_collision_frames` raise `SpritesheetError`
  for missing or malformed frames.
- `trexrunner.core.resource_manager`: `load_spritesheet`,
  `get_spritesheet` and `clear_spritesheets`, a process-wide store of
  spritesheets by ID.
- `trexrunner.core.sprite`: `Sprite` and `SpriteAnimated`, with named
  animations played at a fixed frame rate.
- `trexrunner.core.entity`: `Entity`, a group of sprites with
  `collision_rects` and `has_collision`.
- `trexrunner.core.stage`: `Stage`, an abstract base with `init`, `update`,
  `add_entity`, `remove_entity` and an optional `clip_frame`.
- `trexrunner.core.events`: `get_events()` returns the shared `Events` hub
  with `add_event_listener`, `publish` and `clear`. A listener that cannot
  take the published arguments raises `EventError`.
- `trexrunner.core.window`, `trexrunner.core.audio` and
  `trexrunner.core.game`: `Game(title, width, height)` opens a `Window`,
  sets up `Audio`, and `start(stage)` runs the frame loop until the window
  is closed. `Game` and `Window` work as context managers. Setting
  `Game.draw_collision_frames = True` outlines collision rectangles in red.
- `trexrunner.core.rng.Random` and `trexrunner.core.timer.Timer`: an
  inclusive integer random source and a millisecond stopwatch.

The window publishes `on_quit`, and `on_key_down` / `on_key_up` with the
low byte of the key code; the game listens for `on_play_sound` with a sound
ID.

The game's entities (`Clouds`, `Horizon`, `Obstacles`, `Restart`, `Score`,
`TRex`) and its `MainStage` live in `trexrunner.game`.

## Running the tests

```
pip install ".[test]"
pytest
```