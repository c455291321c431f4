from __future__ import annotations

import math
from fractions import Fraction

import pytest

import almost_equal_powers as aep


def test_prime_bases():
    assert aep.candidate_bases(2, 10, prime_only=True) == [2, 3, 5, 7]
    assert aep.candidate_bases(2, 5) == [2, 3, 4, 5]


def test_only_coprime_pairs():
    pairs = aep.coprime_pairs([2, 3, 4, 9, 10])
    assert (2, 4) not in pairs
    assert (3, 9) not in pairs
    assert (2, 10) not in pairs
    assert (2, 3) in pairs
    assert (9, 10) in pairs
    assert all(b1 < b2 for b1, b2 in pairs)


def test_finds_128_near_125():
    matches = list(aep.explore(2, 5, 1, 10, tolerance=0.025))
    m = aep.Match(2, 7, 128, 5, 3, 125)
    assert m in matches
    assert m.format() == "2**7=128 ~~ 5**3=125 (2.400000%)"


def test_matches_respect_tolerance():
    tol = Fraction(1, 50)
    for m in aep.explore(2, 12, 1, 40, tolerance=0.02):
        assert 1 / (1 + tol) < m.ratio < 1 + tol
        assert math.gcd(m.base1, m.base2) == 1
        assert m.value1 == m.base1**m.power1
        assert m.value2 == m.base2**m.power2


def test_tight_tolerance_small_range_finds_nothing():
    assert list(aep.explore(2, 10, 1, 10)) == []


def test_cache_counts_hits_and_misses():
    cache = aep.PowerCache()
    list(aep.explore(2, 7, 1, 20, cache=cache))
    assert cache.hits > 0
    assert cache.misses > 0
    assert 0 < cache.hit_rate < 1


def test_invalid_ranges():
    with pytest.raises(ValueError):
        list(aep.explore(min_base=1))
    with pytest.raises(ValueError):
        list(aep.explore(min_power=5, max_power=4))
    with pytest.raises(ValueError):
        list(aep.explore(tolerance=0))


def test_main_debug_output(capsys):
    assert aep.main(["--max-base", "10", "--max-power", "5", "--prime-bases", "--debug"]) == 0
    out = capsys.readouterr().out
    assert "bases=[2, 3, 5, 7]" in out
    assert "Cache:" in out


def test_main_reports_bad_range(capsys):
    assert aep.main(["--min-base", "50", "--max-base", "10"]) == 2
    assert "Error:" in capsys.readouterr().err
