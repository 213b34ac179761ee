"""Interactive game against the computer or between two players."""

from __future__ import annotations

import enum
import random
from collections.abc import Callable, Sequence
from typing import TypeVar

from allumettes.engine import (
    InvalidMoveError,
    Strategy,
    ai_take,
    rules_text,
    validate_take,
)

DEFAULT_MATCHES = 12
PROMPT = "Combien d'allumettes voulez-vous enlever ?\n->"
MENU = (
    "Choisissez un mode de jeu :\n"
    "[1] Basic IA\n"
    "[2] Hard IA\n"
    "[3] 1 vs 1\n"
    "[0] Voir les règles\n"
)

ReadMove = Callable[[], int]
Write = Callable[[str], None]
T = TypeVar("T")
C = TypeVar("C")


class GameMode(enum.IntEnum):
    """Entries of the main menu."""

    RULES = 0
    BASIC_AI = 1
    HARD_AI = 2
    TWO_PLAYERS = 3


def _read_int() -> int:
    """Read one integer from standard input; anything else counts as 0."""
    try:
        return int(input().strip())
    except ValueError:
        return 0


def _write(text: str) -> None:
    print(text, end="", flush=True)


def _ask_until_valid(read_move: ReadMove, write: Write, label: str | None = None) -> int:
    """Prompt until the player enters a legal number of matches."""
    while True:
        if label is not None:
            write(f"{label}\n")
        write(PROMPT)
        try:
            return validate_take(read_move())
        except InvalidMoveError as error:
            write(f"{error}\n")


def _judge(
    write: Write,
    matches: int,
    empty: tuple[str, T],
    last: tuple[str, T],
    *,
    overshoot: bool = False,
) -> T | None:
    """Announce and return the winner once the game is over, else None.

    ``empty`` and ``last`` are (message, winner) pairs for an empty heap and a
    single match left; with ``overshoot`` a negative count counts as empty.
    """
    if matches == 0 or (overshoot and matches < 0):
        message, winner = empty
    elif matches == 1:
        message, winner = last
    else:
        return None
    write(message)
    return winner


def _take(
    write: Write,
    matches: int,
    taken: int,
    empty: tuple[str, T],
    last: tuple[str, T],
    *,
    overshoot: bool = False,
    unit: str = " allumettes",
) -> tuple[int, T | None]:
    """Remove ``taken`` matches, report the heap and judge the position."""
    matches -= taken
    write(f"Il reste maintenant {matches}{unit}\n")
    return matches, _judge(write, matches, empty, last, overshoot=overshoot)


def _run_menu(menu: str, parse: Callable[[int], C], play: Callable[[C], object]) -> int:
    """Show ``menu``, read a choice and play it; unknown choices do nothing."""
    _write(menu)
    try:
        try:
            choice = parse(_read_int())
        except ValueError:
            return 0
        play(choice)
    except EOFError:
        return 1
    return 0


def play_against_ai(
    strategy: Strategy,
    read_move: ReadMove,
    write: Write,
    rng: random.Random | None = None,
    matches: int = DEFAULT_MATCHES,
) -> bool:
    """Play the player against the computer; return True if the player won."""
    rng = rng if rng is not None else random.Random()
    basic = strategy is Strategy.BASIC
    write("Tu as choisi le mode simple !" if basic else "Tu as choisi le mode difficile !\n")
    player_wins = ("Vous avez gagné !\n", True)
    player_loses = ("Vous avez perdu !\n", False)
    ai_loses = ("Vous avez gagné\n" if basic else "Vous avez gagné !\n", True)
    while True:
        taken = _ask_until_valid(read_move, write, "Joueur")
        matches, result = _take(write, matches, taken, player_wins, player_loses)
        if result is not None:
            return result
        if basic:
            write("IA\n")
        matches, result = _take(
            write, matches, ai_take(strategy, taken, rng), player_loses, ai_loses, overshoot=True
        )
        if result is not None:
            return result


def play_two_players(
    read_move: ReadMove, write: Write, matches: int = DEFAULT_MATCHES
) -> int:
    """Play two humans against each other; return the winner, 1 or 2.

    Player 2 who enters an illegal number loses the turn.
    """
    write("Tu as choisi le mode un contre un !\n")
    first_wins = ("Le joueur 1 a gagné !\n", 1)
    second_wins = ("Le joueur 2 a gagné !\n", 2)
    while True:
        taken = _ask_until_valid(read_move, write, "Joueur 1")
        matches, winner = _take(write, matches, taken, first_wins, second_wins)
        if winner is not None:
            return winner
        write("Joueur 2\n")
        write(PROMPT)
        try:
            taken = validate_take(read_move())
        except InvalidMoveError as error:
            write(f"{error}\n")
            winner = _judge(write, matches, second_wins, first_wins, overshoot=True)
        else:
            matches, winner = _take(
                write, matches, taken, second_wins, first_wins, overshoot=True
            )
        if winner is not None:
            return winner


def _play_mode(mode: GameMode) -> None:
    if mode is GameMode.RULES:
        _write(rules_text())
    elif mode is GameMode.TWO_PLAYERS:
        play_two_players(_read_int, _write)
    else:
        strategy = Strategy.BASIC if mode is GameMode.BASIC_AI else Strategy.HARD
        play_against_ai(strategy, _read_int, _write, random.Random())


def main(argv: Sequence[str] | None = None) -> int:
    """Show the menu, read a game mode and run it."""
    return _run_menu(MENU, GameMode, _play_mode)