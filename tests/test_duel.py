import io
import re

import pytest

from allumettes.duel import (
    BASIC_TURN,
    BASIC_WINS,
    HARD_TURN,
    HARD_WINS,
    Starter,
    main,
    play_ai_duel,
)
from allumettes.engine import Strategy


class ScriptedRng:
    def __init__(self, values):
        self._values = list(values)

    def randrange(self, stop):
        assert stop == 4
        return self._values.pop(0)


def run(starter, draws, matches=12):
    out = []
    winner = play_ai_duel(starter, out.append, ScriptedRng(draws), matches)
    return winner, "".join(out)


def remaining(text):
    return [int(v) for v in re.findall(r"Il reste maintenant (-?\d+) allumettes", text)]


def test_basic_start_hard_mirrors_to_victory():
    winner, text = run(Starter.BASIC, [3, 3, 3])
    assert winner is Strategy.HARD
    assert text.endswith(HARD_WINS)
    left = remaining(text)
    assert left[-1] == 1
    # every full round removes four matches
    assert [a - b for a, b in zip(left[::2], left[2::2])] == [4, 4]


def test_basic_start_zero_keeps_previous_hard_take():
    winner, text = run(Starter.BASIC, [0, 2, 3, 3])
    assert remaining(text)[:2] == [12, 12]
    assert winner is Strategy.HARD


def test_basic_start_takes_last_match_and_wins():
    winner, text = run(Starter.BASIC, [2], matches=2)
    assert winner is Strategy.BASIC
    assert text == BASIC_TURN + "Il reste maintenant 0 allumettes\n" + BASIC_WINS


def test_hard_start_opens_with_three():
    winner, text = run(Starter.HARD, [1, 1])
    assert text.startswith(HARD_TURN)
    left = remaining(text)
    assert left[0] == 12 - 3
    assert left[-1] == 1
    assert winner is Strategy.HARD


def test_hard_start_emptying_the_heap_counts_for_basic():
    winner, text = run(Starter.HARD, [], matches=3)
    assert winner is Strategy.BASIC
    assert text.endswith(BASIC_WINS)


def test_hard_start_basic_overshoots_and_loses():
    winner, text = run(Starter.HARD, [3], matches=5)
    assert remaining(text) == [2, -1]
    assert winner is Strategy.HARD


def test_turns_alternate():
    _, text = run(Starter.BASIC, [3, 3, 3])
    turns = re.findall(r"l'ordinateur (nul|fort)", text)
    assert set(turns[0::2]) == {"nul"}
    assert set(turns[1::2]) == {"fort"}


@pytest.mark.parametrize(
    "stdin, code, played",
    [("1\n", 0, True), ("2\n", 0, True), ("7\n", 0, False), ("", 1, False)],
)
def test_main(monkeypatch, capsys, stdin, code, played):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    assert main([]) == code
    out = capsys.readouterr().out
    assert "IA FORTE COMMENCE" in out
    assert ("Il reste" in out) is played
    if played:
        assert out.endswith(BASIC_WINS) or out.endswith(HARD_WINS)