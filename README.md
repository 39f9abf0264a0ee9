# Glitch Bomb

A small push-your-luck game. Your bag starts with fifteen orbs: five
Health, five Point and five Bomb orbs. Each pull removes a random orb
from the bag and applies its effect:

- **Health**: +1 health, up to a maximum of 5 (no effect at full health)
- **Point**: +5 points
- **Bomb**: -2 health (health never drops below 0)

You start with 5 health and 0 points. Reach the milestone of 15 points
to win; drop to 0 health and the game is over. If both happen on the
same pull, reaching the milestone counts as a win.

## Installing

```
pip install .
```

## Playing

```
glitchbomb
```

A window titled "Glitch Bomb" opens on the title screen. Click **START**
to begin, **PULL ORB** to draw from the bag, and **QUIT** to go back to
the menu. On the win or loss screen, **PLAY AGAIN** / **TRY AGAIN**
returns you to the menu. Buttons change colour when hovered and pressed.

The stats panel shows health, points, game ID, milestone, the number of
each orb left in the bag (`Orbs: H:5 P:5 B:5` at the start), level,
moonrocks and cheddah.

Options:

- `--width N`, `--height N`: window size in pixels (default 1280x720)
- `--seed N`: seed the random orb draws, so a game can be replayed
- `--verbose`: log game events (orbs consumed, wins, losses)

## Using the game logic

The rules do not need a window and can be driven from code:

```python
import random

from glitchbomb.player import PlayerGameState
from glitchbomb.systems import Game, check_win_loss, stat_text
from glitchbomb.states import StatType

state = PlayerGameState()
orb = state.pull_orb(random.Random(7))
print(orb, stat_text(state, StatType.HEALTH), check_win_loss(state))
```

- `glitchbomb.player.PlayerGameState` holds health, points, the bag of
  `glitchbomb.orb.Orb` values and the currencies, with methods to add,
  subtract (stopping at zero), count and pull orbs.
- `glitchbomb.systems.Game` is the state machine (`GameState.MENU`,
  `PLAYING`, `GAME_WON`, `GAME_LOST`). `request_state` queues a move that
  takes effect on the next `update`; entering `PLAYING` starts a fresh
  `PlayerGameState` and leaving it discards it.
- `glitchbomb.interface.Interface` lays out the buttons and text of
  each screen and turns pointer positions (`pointer_at`) or actions
  (`press`) into game moves; `tick` runs one frame.
- `glitchbomb.app.GlitchBombApp` draws the interface with pygame.

## What it does not do

Game ID, level, moonrocks and cheddah are shown and can be changed
through `PlayerGameState`, but nothing in play changes them, and the
milestone stays at 15. There is no shop, no progression between games
and no saving: every game starts from the same state.

## Running the tests

```
pip install .[test]
pytest
```