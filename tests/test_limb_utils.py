from __future__ import annotations

import numpy as np
import pytest

from limb_utils import (
    WORD_BITS,
    fast_power_of_two,
    int_to_limbs,
    limbs_to_int,
    power_of_two_limbs,
)


def test_fast_power_of_two_matches_exponentiation():
    for e in range(10000):
        assert fast_power_of_two(e) == pow(2, e)


def test_limbs_roundtrip_is_identity():
    for e in range(0, 10000, 7):
        limbs = power_of_two_limbs(e)
        assert np.array_equal(int_to_limbs(pow(2, e)), limbs)
        assert np.array_equal(int_to_limbs(limbs_to_int(limbs)), limbs)


def test_single_bit_after_zero_limbs():
    limbs = power_of_two_limbs(3 * WORD_BITS + 5)
    assert len(limbs) == 4
    assert not limbs[:3].any()
    assert int(limbs[3]) == 1 << 5


def test_top_bit_of_a_word():
    e = 2 * WORD_BITS - 1
    limbs = power_of_two_limbs(e)
    assert len(limbs) == 2
    assert int(limbs[1]) == 1 << (WORD_BITS - 1)
    assert limbs_to_int(limbs) == 2**e


def test_arbitrary_int_roundtrip():
    n = 10**100 + 12345
    assert limbs_to_int(int_to_limbs(n)) == n


def test_zero_has_no_limbs():
    assert len(int_to_limbs(0)) == 0
    assert limbs_to_int(int_to_limbs(0)) == 0


def test_negative_inputs_rejected():
    with pytest.raises(ValueError):
        power_of_two_limbs(-1)
    with pytest.raises(ValueError):
        int_to_limbs(-5)


def test_main_shows_limb_layout(capsys):
    from limb_utils import main

    main([str(WORD_BITS + 3)])
    out = capsys.readouterr().out
    assert f"Word width: {WORD_BITS} bits" in out
    assert "Limbs: 2 (1 zero + 1 with bit 3 set)" in out
    assert "Top limb: 0x8" in out
    assert f"Bits in value: {WORD_BITS + 4}" in out


def test_main_rejects_negative_exponent():
    from limb_utils import main

    with pytest.raises(SystemExit):
        main(["--", "-1"])
