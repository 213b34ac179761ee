"""Single-opponent game: the player who takes the last match loses."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Sequence

from allumettes.engine import Strategy, ai_take
from allumettes.game import _ask_until_valid, _read_int, _take, _write

ReadMove = Callable[[], int]
Write = Callable[[str], None]

DEFAULT_MATCHES = {Strategy.BASIC: 12, Strategy.HARD: 16}
_LEVELS = {"facile": Strategy.BASIC, "difficile": Strategy.HARD}


def play_classic(
    strategy: Strategy,
    read_move: ReadMove,
    write: Write,
    rng: random.Random | None = None,
    matches: int | None = None,
) -> bool:
    """Play the player against the computer; return True if the player won.

    Without ``matches`` the easy game starts with 12 and the hard one with 16.
    """
    rng = rng if rng is not None else random.Random()
    if matches is None:
        matches = DEFAULT_MATCHES[strategy]
    player_turn = (("Vous avez perdu :(\n", False), ("Vous avez gagné !\n", True))
    ai_turn = (("Vous avez perdu :(((((\n", False), ("L'ordi a perdu ! [:)]\n", True))
    while True:
        taken = _ask_until_valid(read_move, write)
        matches, result = _take(write, matches, taken, *player_turn, unit="")
        if result is not None:
            return result
        matches, result = _take(
            write, matches, ai_take(strategy, taken, rng), *ai_turn, overshoot=True, unit=""
        )
        if result is not None:
            return result


def main(argv: Sequence[str] | None = None) -> int:
    """Run one game at the level given on the command line."""
    parser = argparse.ArgumentParser(description="Jeu des allumettes contre l'ordinateur.")
    parser.add_argument("level", nargs="?", choices=sorted(_LEVELS), default="facile")
    args = parser.parse_args(argv)
    try:
        play_classic(_LEVELS[args.level], _read_int, _write, random.Random())
    except EOFError:
        return 1
    return 0