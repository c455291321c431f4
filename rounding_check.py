#!/usr/bin/env python3
"""Check how far ``round(n * log2(10))`` can be trusted to pick the power of two.

The search takes the nearest power of two in log space.  The power with the
smaller *relative* error (relative to ``10**n``) is a slightly different
choice: with ``f`` the fractional part of ``n * log2(10)``, the floor and
ceiling are equally good at ``f = log2(1.5) ≈ 0.585``, not at 0.5.  For
``0.5 < f < 0.585`` rounding therefore picks the worse neighbour (first at
n = 8), but both neighbours are then more than 29% off, which is never a
record once 10**1 ~ 2**3 (20%) has been seen.

This script compares the vectorised float rounding with the exact choice and
reports every disagreement.
"""

import argparse
import sys
from dataclasses import dataclass
from fractions import Fraction

import numpy as np

from limb_utils import fast_power_of_two
from record_search import LOG2_OF_10, neighbour_exponents

FIRST_RECORD_ERROR = Fraction(1, 5)


@dataclass(frozen=True)
class Disagreement:
    tens_exp: int
    rounded_exp: int
    best_exp: int
    rounded_error: Fraction
    best_error: Fraction

    @property
    def matters(self) -> bool:
        """True if the better neighbour could have been a record."""
        return self.best_error < FIRST_RECORD_ERROR


def rounded_exponents(limit: int) -> np.ndarray:
    """``round(n * log2(10))`` for every n in ``[1, limit)``."""
    ns = np.arange(1, limit, dtype=np.float64)
    return np.rint(ns * LOG2_OF_10).astype(np.int64)


def relative_error(tens_exp: int, twos_exp: int) -> Fraction:
    tens_power = 10 ** tens_exp
    return Fraction(abs(fast_power_of_two(twos_exp) - tens_power), tens_power)


def best_neighbour(tens_exp: int) -> tuple[int, Fraction]:
    """Exact pick between the floor and ceiling exponents; ties go to the floor."""
    lower, upper = neighbour_exponents(tens_exp)
    lower_error = relative_error(tens_exp, lower)
    upper_error = relative_error(tens_exp, upper)
    if upper_error < lower_error:
        return upper, upper_error
    return lower, lower_error


def check_rounding(limit: int = 1000) -> list[Disagreement]:
    if limit < 2:
        raise ValueError("limit must be at least 2")
    out = []
    for tens_exp, rounded in zip(range(1, limit), rounded_exponents(limit)):
        rounded = int(rounded)
        best_exp, best_error = best_neighbour(tens_exp)
        if rounded != best_exp:
            out.append(Disagreement(tens_exp, rounded, best_exp,
                                    relative_error(tens_exp, rounded), best_error))
    return out


# ─────────────────────────────────────────────────────────────────────────────
def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Compare round(n*log2(10)) against the exact closest power of two"
    )
    parser.add_argument("--limit", type=int, default=1000,
                        help="Check tens exponents 1 .. limit-1 (default 1000)")
    args = parser.parse_args(argv)

    try:
        disagreements = check_rounding(args.limit)
    except ValueError as e:
        print("Error:", e, file=sys.stderr)
        return 2

    for d in disagreements:
        flag = "  <-- could affect records" if d.matters else ""
        print(f"n={d.tens_exp}: round -> 2**{d.rounded_exp} ({float(100 * d.rounded_error):.3g}%), "
              f"best 2**{d.best_exp} ({float(100 * d.best_error):.3g}%){flag}")

    harmful = sum(d.matters for d in disagreements)
    print(f"{len(disagreements)} disagreements for n < {args.limit}, {harmful} below the first record's error")
    return 1 if harmful else 0


if __name__ == "__main__":
    sys.exit(main())
