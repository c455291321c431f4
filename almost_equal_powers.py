#!/usr/bin/env python3
"""Almost-equal powers: ``base1**power1 ≈ base2**power2`` for small coprime bases.

A bounded brute-force companion to ``record_search.py``.  For every unordered
pair of coprime bases in range, and every ``power1`` in range, the two powers
of ``base2`` straddling ``base1**power1`` are compared exactly and reported
when their ratio lies within ``1 ± tolerance``:

    2**7=128 ~~ 5**3=125 (2.400000%)

Powers are memoised since each one is reused across many base pairs.
"""

import argparse
import math
import sys
from dataclasses import dataclass
from fractions import Fraction
from typing import Iterator

from sympy import isprime
from tqdm import tqdm

# Printing the values can mean thousands of digits
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(1_000_000)

DEFAULT_MIN_BASE, DEFAULT_MAX_BASE = 2, 100
DEFAULT_MIN_POWER, DEFAULT_MAX_POWER = 1, 200
DEFAULT_TOLERANCE = 0.00001


# ─────────────────────────────────────────────────────────────────────────────
# Memoised exponentiation
# ─────────────────────────────────────────────────────────────────────────────
class PowerCache:
    def __init__(self):
        self._values: dict[tuple[int, int], int] = {}
        self.hits = 0
        self.misses = 0

    def __call__(self, base: int, power: int) -> int:
        key = (base, power)
        value = self._values.get(key)
        if value is not None:
            self.hits += 1
            return value
        self.misses += 1
        value = base ** power
        self._values[key] = value
        return value

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0


@dataclass(frozen=True)
class Match:
    base1: int
    power1: int
    value1: int
    base2: int
    power2: int
    value2: int

    @property
    def ratio(self) -> Fraction:
        return Fraction(self.value1, self.value2)

    @property
    def percent(self) -> float:
        return float(100 * (self.ratio - 1))

    def format(self) -> str:
        return (f"{self.base1}**{self.power1}={self.value1} ~~ "
                f"{self.base2}**{self.power2}={self.value2} ({self.percent:.6f}%)")


# ─────────────────────────────────────────────────────────────────────────────
# Search
# ─────────────────────────────────────────────────────────────────────────────
def candidate_bases(min_base: int, max_base: int, prime_only: bool = False) -> list[int]:
    return [b for b in range(min_base, max_base + 1) if not prime_only or isprime(b)]


def coprime_pairs(bases: list[int]) -> list[tuple[int, int]]:
    return [(b1, b2) for b1 in bases for b2 in bases
            if b1 < b2 and math.gcd(b1, b2) == 1]


def explore(min_base: int = DEFAULT_MIN_BASE,
            max_base: int = DEFAULT_MAX_BASE,
            min_power: int = DEFAULT_MIN_POWER,
            max_power: int = DEFAULT_MAX_POWER,
            tolerance: float = DEFAULT_TOLERANCE,
            prime_bases: bool = False,
            cache: PowerCache | None = None,
            verbose: bool = False,
            progress: bool = False) -> Iterator[Match]:
    """Yield every near-equal pair of powers within the given bounds."""
    if min_base < 2 or max_base < min_base:
        raise ValueError("need 2 <= min_base <= max_base")
    if min_power < 1 or max_power < min_power:
        raise ValueError("need 1 <= min_power <= max_power")
    if tolerance <= 0:
        raise ValueError("tolerance must be positive")
    if cache is None:
        cache = PowerCache()

    high = 1 + Fraction(str(tolerance))
    low = 1 / high
    pairs = coprime_pairs(candidate_bases(min_base, max_base, prime_bases))

    for base1, base2 in tqdm(pairs, desc="Base pairs", unit="pair", disable=not progress):
        scale = math.log(base1) / math.log(base2)
        for power1 in range(min_power, max_power + 1):
            value1 = cache(base1, power1)
            power2 = power1 * scale
            neighbours = sorted({math.floor(power2), math.ceil(power2)})
            if verbose:
                lo, hi = neighbours[0], neighbours[-1]
                tqdm.write(f"{base2}**{lo} ({cache(base2, lo)}) < {base1}**{power1} ({value1}) "
                           f"< {base2}**{hi} ({cache(base2, hi)})")
            for p2 in neighbours:
                value2 = cache(base2, p2)
                if low < Fraction(value1, value2) < high:
                    yield Match(base1, power1, value1, base2, p2, value2)


# ─────────────────────────────────────────────────────────────────────────────
# Command-line interface
# ─────────────────────────────────────────────────────────────────────────────
def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Find powers of different coprime bases that are almost equal"
    )
    parser.add_argument("--min-base", type=int, default=DEFAULT_MIN_BASE, help="minimum base")
    parser.add_argument("--max-base", type=int, default=DEFAULT_MAX_BASE, help="maximum base")
    parser.add_argument("--min-power", type=int, default=DEFAULT_MIN_POWER, help="minimum power")
    parser.add_argument("--max-power", type=int, default=DEFAULT_MAX_POWER, help="maximum power")
    parser.add_argument("--tolerance", type=float, default=DEFAULT_TOLERANCE,
                        help="relative tolerance for a match")
    parser.add_argument("--prime-bases", action="store_true", help="consider only prime bases")
    parser.add_argument("--verbose", action="store_true", help="show all comparisons")
    parser.add_argument("--debug", action="store_true", help="show debugging info")
    parser.add_argument("--progress", action="store_true", help="show a progress bar")
    args = parser.parse_args(argv)

    cache = PowerCache()
    if args.debug:
        print(f"bases={candidate_bases(args.min_base, args.max_base, args.prime_bases)}")
    try:
        for match in explore(args.min_base, args.max_base, args.min_power, args.max_power,
                             args.tolerance, args.prime_bases, cache,
                             verbose=args.verbose, progress=args.progress):
            tqdm.write(match.format())
    except ValueError as e:
        print("Error:", e, file=sys.stderr)
        return 2
    if args.debug:
        print(f"Cache: {cache.hits}/{cache.misses}={100 * cache.hit_rate:.1f}%")
    return 0


if __name__ == "__main__":
    sys.exit(main())
