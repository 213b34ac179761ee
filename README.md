# allumettes

Nim with matchsticks, played in the terminal. Each turn a player takes 1, 2 or
3 matches. The on-screen messages are in French.

## Installation

```
pip install .
```

## Commands

### `allumettes`

This opens the main menu:

```
Choisissez un mode de jeu :
[1] Basic IA
[2] Hard IA
[3] 1 vs 1
[0] Voir les règles
```

- **1, Basic IA**: you play against a computer that takes a random number of
  matches, from 0 to 3.
- **2, Hard IA**: you play against a computer that mirrors your move. It takes
  4 minus what you took.
- **3, 1 vs 1**: two people take turns at the same keyboard. If player 2 enters
  an illegal number, that turn is lost.
- **0**: prints the rules.

Games start with 12 matches. Any other menu choice ends the program without
playing. Player 1 is asked again until they enter 1, 2 or 3. Input that is not
a number counts as 0. If input ends partway through a game, the command exits
with status 1.

### `allumettes-duel`

Once it starts, this mode needs no further input. The weak (random) computer
plays against the strong (mirroring) one, and you choose which of them moves
first:

```
[1] IA FAIBLE COMMENCE
[2] IA FORTE COMMENCE
```

### `allumettes-classic`

A single game against the computer. Here, whoever leaves the heap empty loses.
The difficulty is a command-line argument:

```
allumettes-classic            # easy: random computer, 12 matches
allumettes-classic facile     # same as above
allumettes-classic difficile  # hard: mirroring computer, 16 matches
```

## Using it from Python

You can import the engine and the game loops. Input and output are plain
callables, and you can pass in a random generator, so a game can be scripted:

```python
import random
from allumettes.engine import Strategy
from allumettes.game import play_against_ai

moves = iter([1, 2, 3, 1])
player_won = play_against_ai(
    Strategy.HARD,
    read_move=lambda: next(moves),
    write=lambda text: print(text, end=""),
    rng=random.Random(0),
    matches=12,
)
```

- `allumettes.engine` holds the move rules:
  - `validate_take` raises `InvalidMoveError` for any count other than 1, 2 or 3.
  - `random_take` and `mirror_take` are the two computer strategies.
  - `ai_take` picks between them according to a `Strategy` (`BASIC` or `HARD`).
  - `rules_text` returns the rules as text.
- `allumettes.game`:
  - `play_against_ai` returns `True` if the player won.
  - `play_two_players` returns the winner, `1` or `2`.
  - `GameMode` lists the menu entries.
- `allumettes.duel`:
  - `play_ai_duel(starter, write, rng, matches)` returns the `Strategy` of the
    winning computer.
  - `Starter` selects who opens.
- `allumettes.classic`:
  - `play_classic(strategy, read_move, write, rng, matches)` returns `True` if
    the player won.
  - The default heap is 12 matches for `Strategy.BASIC` and 16 for
    `Strategy.HARD`.

## What it does not do

Nothing is saved: no scores, history or settings. The only interface is the
text one, and the messages are in French only.

## Tests

```
pip install .[test]
pytest
```