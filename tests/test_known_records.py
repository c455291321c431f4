from __future__ import annotations

import known_records as kr
from tests._helpers import EARLY_RECORDS


def test_replay_reproduces_early_records():
    assert [r.tens_exp for r in kr.replay(max_exp=13000)] == EARLY_RECORDS


def test_replay_agrees_with_search(records_to_13000):
    assert list(kr.replay(max_exp=13000)) == records_to_13000


def test_replay_skips_out_of_range_exponents():
    assert [r.tens_exp for r in kr.replay([1, 3, 10**20], max_exp=10)] == [1, 3]


def test_replay_drops_non_improvements():
    assert [r.tens_exp for r in kr.replay([3, 1])] == [3]


def test_main_output(capsys):
    assert kr.main(["--max-exp", "100"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[:2] == ["10**1 ~ 2**3 (20%)", "10**3 ~ 2**10 (2.4%)"]
    assert len(out) == 4


def test_replay_records_carry_both_powers():
    for r in kr.replay(max_exp=700):
        assert r.tens_power == 10**r.tens_exp
        assert r.twos_power == 2**r.twos_exp
