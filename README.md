# graphquest

A small console adventure. You walk through a labyrinth of rooms described
in a CSV scenario file. You pick up and drop items, and you try to reach a
final room before your time runs out. The game's prompts and messages are
in Spanish.

## Installing

```
pip install .
```

## Playing

```
graphquest
```

You can also name a scenario file so that it is loaded at start:

```
graphquest scenario.csv
```

The menu has two options:

1. **Cargar Escenario**: asks for the path of a CSV file and loads its rooms.
   If the file cannot be opened, an error goes to standard error and the menu
   is shown again. You can load more than one file. A room whose id is
   already loaded is replaced.
2. **Comenzar Juego**: starts a game in room 1. When the game ends, the
   program ends too. If no scenario has been loaded, the program says so and
   ends.

Each turn shows the current room, the items in it, your remaining time,
your load, your points and your inventory. Then it lists the available
choices:

- `1`–`4`: go Up, Down, Left or Right (*Arriba*, *Abajo*, *Izquierda*,
  *Derecha*). Only the directions that lead to a loaded room are listed.
  A move costs `ceil((load + 1) / 10)` time units, so heavy loads slow you down.
- `5`: take the first item in the room.
- `6`: drop an item from your inventory. You choose it by its number, and
  `0` or a non-number cancels. Dropping an item costs one time unit.
- `7`: restart from room 1 with an empty inventory and 10 time units.
- `8`: quit. The end of input also quits.

You win by reaching a room marked as final. Your score is the total points
of the items you carry. You lose when your time reaches zero. If room 1 does
not exist, the game ends at once as interrupted.

## Scenario format

The first line is a header and is skipped. Every other line has these columns:

```
id,name,description,items,up,down,left,right,is_final
```

- `id` is a number from 0 to 127.
- `items` lists items separated by `;`. Each item is written `name,points,weight`.
  Put the field in double quotes, because it contains commas. Inside quotes,
  `""` stands for a literal quote. Spaces around names and numbers are ignored.
- `up`, `down`, `left` and `right` are room ids. Use `-1`, or any id that is
  not loaded, where there is no exit.
- `is_final` is `Si`, `SI` or `si` for a final room. Any other value means
  the room is not final.

Numbers are read leniently. Text with no leading number counts as 0. A row
with fewer than nine fields, or an item without a name, points and weight,
raises `ValueError`. Files are read as UTF-8.

Example:

```
id,name,description,items,up,down,left,right,is_final
1,Entrance,A dark hall,"Lamp,5,2;Coin,10,1",-1,2,-1,-1,No
2,Exit,Daylight,,1,-1,-1,-1,Si
```

## Library use

`graphquest.game` provides these names:

- `Item(label, points, weight)`
- `Room(ident, title, detail, items, link_ids, is_final)`
- `Labyrinth`, with `add`, `link`, `start` and lookup by id
- `Explorer`, with `take_from`, `drop` and `reset`
- `GameSession`, whose `run()` returns an `Outcome`: `FINISHED`, `TIMEOUT`,
  `INTERRUPTED` or `QUIT`
- `parse_scenario`, `load_scenario` and `travel_cost`

You can drive a session with your own input function and output stream:

```python
import io
from graphquest.game import Labyrinth, GameSession, parse_scenario

lab = Labyrinth()
with open("scenario.csv", encoding="utf-8") as fh:
    parse_scenario(fh, lab)
lab.link()

moves = iter(["5", "2"])
out = io.StringIO()
outcome = GameSession(lab, input_func=lambda: next(moves), output=out).run()
```

Call `Labyrinth.link()` after loading. It turns each room's exit ids into
references to the rooms.

The package also holds a few general-purpose helpers:

- `graphquest.csvio`:
  - `read_csv_line` and `read_csv_rows` read quoted CSV.
  - `split_string` splits on any of several delimiter characters and drops
    empty pieces.
  - `clear_screen` runs the shell's `clear` command.
  - `press_to_continue` waits for Enter.
- `graphquest.cursorlist`:
  - `CursorList` is a list with a `first`/`next` cursor.
  - `Queue` and `Stack` return `None` when they are empty.
- `graphquest.heap`: `PriorityHeap` is a max-priority heap. Its `pop` raises
  `IndexError` when the heap is empty.
- `graphquest.keyedmap`:
  - `Map`, `MultiMap` and `KeySet` use your own equality or ordering function.
  - `MapPair` holds one key and its value.

## What it does not do

The game keeps no saved games or high scores. Everything is lost when the
program ends. There is one map per session, with at most 128 rooms.

## Running the tests

```
pip install .[test]
pytest
```