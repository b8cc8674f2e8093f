# solong

A small top-down puzzle game played in a pygame window. Walk the player
around a walled map, pick up every collectable, then step onto the exit.

## Installing

    pip install .

## Playing

    solong path/to/level.ber

The command takes exactly one argument, the map file. Called with no
argument or more than one, it prints a usage line and exits with status 0.

Controls:

- `W` / `Up`: move up
- `S` / `Down`: move down
- `A` / `Left`: move left
- `D` / `Right`: move right
- `Esc` or closing the window: quit

Each successful move prints `Steps Taken: N`. Walls block movement, and the
exit stays closed until every collectable has been picked up. Stepping onto
the open exit prints a congratulation with the number of moves taken and
ends the game.

### Textures

The game draws tiles 40 pixels square from image files read out of a
`textures` directory in the current working directory:

    textures/ground.xpm
    textures/tree.xpm
    textures/player.xpm
    textures/exit.xpm
    textures/collectable.xpm

No images are shipped with the package; you provide them. If one cannot be
loaded, the program prints a message such as `Error loading tree image.` and
stops.

## Map files

Maps are plain text files whose name ends in `.ber`. Each line is one row and
every row must be the same width. The characters allowed are:

| Char | Meaning       |
|------|---------------|
| `1`  | wall          |
| `0`  | empty ground  |
| `P`  | player start  |
| `C`  | collectable   |
| `E`  | exit          |

A map is accepted only if:

- the file can be opened and is not empty,
- it is rectangular,
- the file name ends in `.ber`,
- it is surrounded by walls on every side,
- it holds only the characters above,
- it holds exactly one player, exactly one exit and at least one collectable,
- every collectable and the exit can be reached from the player's start
  (the exit counts as a dead end when looking for paths).

Example:

    1111111
    1P0C0E1
    1111111

A rejected map is reported on standard output as `Error` followed by a short
description, and the program exits with status 1.

## Using it from Python

    from solong.mapfile import read_map
    from solong.validate import check_map
    from solong.game import Game, Direction, MoveOutcome

    rows = read_map("level.ber")        # raises MapError on a bad file
    start = check_map("level.ber", rows)  # raises MapError; returns (x, y)
    game = Game(rows, "level.ber")
    outcome = game.move(Direction.RIGHT)  # MoveOutcome.BLOCKED, MOVED or WON

The modules:

- `solong.game`: `Game` (the grid, player position, `steps_taken`,
  `collectable_count`, `tile()`, `move()`, `lines()`), `Direction`,
  `MoveOutcome`, `MapError` and `direction_for_key()` for key codes.
- `solong.mapfile`: `read_map(path)` and `parse_rows(lines)`.
- `solong.validate`: `check_map(name, rows)` and the separate checks
  `check_map_name`, `check_map_wall`, `check_map_contents`,
  `check_asset_count`, `find_player` and `check_paths`.
- `solong.fmt`: `format_message(template, *args)` and `printf(...)`, a small
  printf-style formatter supporting `%c %s %p %d %i %u %x %X %%`.
- `solong.render`: `Renderer` (draws a game onto a pygame surface and applies
  key presses), `run(game, texture_dir)` which opens the window and plays a
  validated game, and `main(argv=None)` behind the `solong` command.

## Running the tests

    pip install .[test]
    pytest