"""Two computer players, a weak one and a strong one, play against each other."""

from __future__ import annotations

import enum
import random
from collections.abc import Callable, Sequence

from allumettes.engine import (
    MAX_TAKE,
    InvalidMoveError,
    Strategy,
    mirror_take,
    random_take,
)
from allumettes.game import DEFAULT_MATCHES, _run_menu, _take, _write

Write = Callable[[str], None]

BASIC_TURN = "\nl'ordinateur nul joue :\n\n"
HARD_TURN = "\nl'ordinateur fort joue: \n\n"
BASIC_WINS = "\nIA nulle a gagnée\n\n"
HARD_WINS = "\nIA forte a gagnée\n\n"
MENU = "[1] IA FAIBLE COMMENCE \n\n[2] IA FORTE COMMENCE \n\n-->"


class Starter(enum.IntEnum):
    """Which computer player opens the game."""

    BASIC = 1
    HARD = 2


def _reply(basic_take: int, fallback: int) -> int:
    """Mirror the weak player's move; keep ``fallback`` when it took nothing."""
    try:
        return mirror_take(basic_take)
    except InvalidMoveError:
        return fallback


def play_ai_duel(
    starter: Starter,
    write: Write,
    rng: random.Random | None = None,
    matches: int = DEFAULT_MATCHES,
) -> Strategy:
    """Let the two computers play until one wins; return the winner's strategy."""
    rng = rng if rng is not None else random.Random()
    starter = Starter(starter)
    basic_take = 0
    hard_take = 0

    def basic_move() -> int:
        nonlocal basic_take
        write(BASIC_TURN)
        basic_take = random_take(rng)
        return basic_take

    def hard_move() -> int:
        nonlocal hard_take
        write(HARD_TURN)
        fallback = hard_take if starter is Starter.BASIC else MAX_TAKE
        hard_take = _reply(basic_take, fallback)
        return hard_take

    basic_out = (BASIC_WINS, Strategy.BASIC)
    hard_out = (HARD_WINS, Strategy.HARD)
    first, second = (
        (basic_move, hard_move) if starter is Starter.BASIC else (hard_move, basic_move)
    )
    while True:
        matches, winner = _take(write, matches, first(), basic_out, hard_out)
        if winner is not None:
            return winner
        matches, winner = _take(write, matches, second(), hard_out, basic_out, overshoot=True)
        if winner is not None:
            return winner


def main(argv: Sequence[str] | None = None) -> int:
    """Ask which computer starts and run the duel."""
    return _run_menu(
        MENU, Starter, lambda starter: play_ai_duel(starter, _write, random.Random())
    )