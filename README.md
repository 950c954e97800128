# tetrisgame

A compact falling-blocks puzzle game in a pygame window. Pieces enter a
10 by 20 field at the top, and you move and rotate them to fill complete
rows. A full row of landed blocks is removed and the blocks above it drop
down. The game is over when a new piece has no room to enter the field.

## Installing

```
pip install .
```

This installs `pygame`, which draws the window and reads the keyboard.

## Playing

```
tetrisgame
```

Controls:

| Key        | Action                                          |
|------------|-------------------------------------------------|
| Left       | move the piece one column left                  |
| Right      | move the piece one column right                 |
| Down       | drop the piece as far as it can go and land it  |
| Space      | rotate the piece                                |
| Enter      | start again after the game is over              |
| Escape     | quit from the game-over screen                  |

The piece also falls by one row every 30 frames on its own. The falling
piece is drawn in green with its rotation centre in yellow; landed blocks
are drawn in red. The next piece is shown to the right of the field. When
the game is over the window shows "Try again". Closing the window ends the
program with exit status 3.

If the window cannot be opened, `tetrisgame` prints
`Failed to initialize window.` and exits with status 1.

## Using the model on its own

`tetrisgame.model` holds the game rules and does not need a window:

```python
import random

from tetrisgame.model import Direction, GameModel

model = GameModel(random.Random(1))   # an empty field and a prepared next piece
model.forward_pieces()                # put the next piece into the field
model.attempt_move(Direction.LEFT)    # False if the piece could not move
model.attempt_rotate()
while model.attempt_move(Direction.DOWN):
    pass
model.immobilise_current()            # the piece lands
model.clear_rows()
```

The field is `model.field`, indexed `field[x][y]`; each cell is a byte
whose bits are read with the helpers in `tetrisgame.blocks` (`is_movable`,
`is_axis`, `is_present`, `piece_id`, `rotation`). Piece shapes are in
`tetrisgame.pieces.shape(piece_id, rotation)`.

`tetrisgame.game.Game` wraps the model with the per-frame rules: gravity,
key handling and the game-over state. `Game.step(key)` advances one frame
for a pygame key code (or `None` when no key was pressed) and returns
`False` when the player quits.

Drawing goes through `tetrisgame.primlib.Graphics`, a small layer over a
pygame window, and `tetrisgame.view.View`, which draws a model onto it.

## What it does not do

There is no score, level, speed-up or high-score table, and no pause key;
the fall rate is fixed.

## Tests

```
pip install .[test]
pytest
```