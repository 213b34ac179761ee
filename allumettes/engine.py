"""Move rules and computer strategies for the matchstick game."""

from __future__ import annotations

import enum
import random

MIN_TAKE = 1
MAX_TAKE = 3
INVALID_MOVE_MESSAGE = "Entrez une valeur comprise entre 1 et 3"

_RULES = (
    "Les règles du jeu de NIM sont les suivantes: \n"
    "->Un joueur peut retirer 1, 2 ou 3 allumettes\n"
    "->Le joueur qui retire la dernière allumette gagne la partie\n"
    "->Les joueurs doivent jouer chacun leur tour(le jeu est codé pour)\n"
)


class InvalidMoveError(ValueError):
    """Raised when a number of matches outside 1..3 is taken."""

    def __init__(self, count: object) -> None:
        super().__init__(INVALID_MOVE_MESSAGE)
        self.count = count


class Strategy(enum.Enum):
    """How the computer chooses its move."""

    BASIC = "basic"
    HARD = "hard"


def validate_take(count: int) -> int:
    """Return ``count`` if it is a legal move, else raise InvalidMoveError."""
    if count not in range(MIN_TAKE, MAX_TAKE + 1):
        raise InvalidMoveError(count)
    return count


def random_take(rng: random.Random) -> int:
    """Draw the weak computer's move: anything from 0 to 3 matches."""
    return rng.randrange(MAX_TAKE + 1)


def mirror_take(previous: int) -> int:
    """Answer the opponent's move so that both together take four matches."""
    validate_take(previous)
    return MAX_TAKE + 1 - previous


def ai_take(strategy: Strategy, previous: int, rng: random.Random) -> int:
    """Return the computer's move for ``strategy`` after the opponent took ``previous``."""
    if strategy is Strategy.HARD:
        return mirror_take(previous)
    return random_take(rng)


def rules_text() -> str:
    """Return the rules of the game as displayed to the player."""
    return _RULES