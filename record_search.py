#!/usr/bin/env python3
"""Record search: powers of two that sit unusually close to powers of ten.

For every power of ten ``10**n`` we pick the nearest power of two ``2**m`` with
``m = round(n * log2(10))`` and measure the relative error

    error = |2**m - 10**n| / 10**n

Only records are reported, i.e. errors smaller than every earlier one:

    10**1 ~ 2**3 (20%)
    10**3 ~ 2**10 (2.4%)
    ...

The record exponents run 1, 3, 28, 59, 146, 643, 4004, 8651, 12655, ... and
the search never ends on its own.

Building an exact ``Fraction`` for every n is far too slow once the numbers
reach hundreds of thousands of digits.  The hot loop therefore keeps an
integer stand-in for ``1/error`` (the "estimator"), rounded up so that a true
record is never missed, and only falls back to exact rationals when the
estimator says a record is plausible.
"""

import argparse
import itertools
import math
import sys
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Iterator

from tqdm import tqdm

from limb_utils import fast_power_of_two

# ─────────────────────────────────────────────────────────────────────────────
# Constants
# ─────────────────────────────────────────────────────────────────────────────
LOG2_OF_10 = math.log2(10)
RESOLUTION = 1 << 20  # scale applied before the truncating division


class ExactPowerError(ArithmeticError):
    """Raised if a power of two ever equals a power of ten."""


# ─────────────────────────────────────────────────────────────────────────────
# Per-iteration values and the running bests
# ─────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Candidate:
    tens_exp: int
    twos_exp: int
    tens_power: int
    twos_power: int
    diff: int


@dataclass(frozen=True)
class Record:
    tens_exp: int
    twos_exp: int
    error: Fraction
    # kept out of repr: these run to millions of digits
    tens_power: int = field(repr=False)
    twos_power: int = field(repr=False)

    @property
    def percent(self) -> float:
        return float(100 * self.error)

    def format(self) -> str:
        return f"10**{self.tens_exp} ~ 2**{self.twos_exp} ({self.percent:.2g}%)"


@dataclass
class SearchState:
    """Accumulators owned by one search run; only ever tightened."""

    best_estimator: int = 0
    best_error: Fraction = Fraction(1)
    checked: int = 0
    confirmations: int = 0
    records: int = 0


# ─────────────────────────────────────────────────────────────────────────────
# 1) Candidate generation
# ─────────────────────────────────────────────────────────────────────────────
def twos_exponent_for(tens_exp: int) -> int:
    # see rounding_check.py for how far this can be trusted
    return round(tens_exp * LOG2_OF_10)


def neighbour_exponents(tens_exp: int) -> tuple[int, int]:
    x = tens_exp * LOG2_OF_10
    return math.floor(x), math.ceil(x)


def _closer_neighbour(tens_exp: int, tens_power: int) -> tuple[int, int]:
    lower, upper = neighbour_exponents(tens_exp)
    lower_power = fast_power_of_two(lower)
    if upper == lower:
        return lower, lower_power
    upper_power = fast_power_of_two(upper)
    # same denominator, so the smaller difference is the smaller error
    if abs(upper_power - tens_power) < abs(tens_power - lower_power):
        return upper, upper_power
    return lower, lower_power


def generate_candidates(start: int = 1,
                        stop: int | None = None,
                        both_neighbours: bool = False) -> Iterator[Candidate]:
    """Yield one candidate per tens exponent in ``[start, stop]``.

    ``10**n`` is rolled forward by multiplying by ten rather than recomputed.
    With ``both_neighbours`` the floor and ceiling powers of two are both
    built and the closer one is kept, at about twice the cost.
    """
    if start < 1:
        raise ValueError("start must be at least 1")
    tens_power = 10 ** (start - 1)
    for tens_exp in itertools.count(start):
        if stop is not None and tens_exp > stop:
            return
        tens_power *= 10
        if both_neighbours:
            twos_exp, twos_power = _closer_neighbour(tens_exp, tens_power)
        else:
            twos_exp = twos_exponent_for(tens_exp)
            twos_power = fast_power_of_two(twos_exp)
        yield Candidate(tens_exp, twos_exp, tens_power, twos_power,
                        abs(twos_power - tens_power))


# ─────────────────────────────────────────────────────────────────────────────
# 2) Approximate error estimator
# ─────────────────────────────────────────────────────────────────────────────
def estimate(tens_power: int, diff: int, resolution: int = RESOLUTION) -> int:
    """Scaled inverse error, rounded up.

        estimator =    ceil(resolution / error)
                  =    ceil(resolution * tens_power / diff)
                  = 1+floor(resolution * tens_power / diff)

    The "+1" over-shoots when the division is exact, which only costs an
    extra exact check.
    """
    if diff == 0:
        raise ExactPowerError("a power of two equals a power of ten")
    return resolution * tens_power // diff + 1


def is_plausible_record(state: SearchState, estimator: int) -> bool:
    if estimator < state.best_estimator:
        return False
    state.best_estimator = estimator
    return True


# ─────────────────────────────────────────────────────────────────────────────
# 3) Exact confirmation
# ─────────────────────────────────────────────────────────────────────────────
def confirm_record(state: SearchState, candidate: Candidate) -> Record | None:
    """Return a ``Record`` if ``candidate`` really beats the best error."""
    state.confirmations += 1
    actual_error = Fraction(candidate.diff, candidate.tens_power)
    if actual_error >= state.best_error:
        return None
    state.best_error = actual_error
    state.records += 1
    return Record(candidate.tens_exp, candidate.twos_exp, actual_error,
                  candidate.tens_power, candidate.twos_power)


# ─────────────────────────────────────────────────────────────────────────────
# 4) Search loop
# ─────────────────────────────────────────────────────────────────────────────
def search_records(start: int = 1,
                   stop: int | None = None,
                   resolution: int = RESOLUTION,
                   both_neighbours: bool = False,
                   state: SearchState | None = None,
                   progress: tqdm | None = None) -> Iterator[Record]:
    """Yield each confirmed record in order of discovery.

    With ``stop=None`` this never returns; the caller decides when to stop.
    """
    if resolution < 1:
        raise ValueError("resolution must be positive")
    if state is None:
        state = SearchState()
    for candidate in generate_candidates(start, stop, both_neighbours):
        state.checked += 1
        if progress is not None:
            progress.update()
        estimator = estimate(candidate.tens_power, candidate.diff, resolution)
        if not is_plausible_record(state, estimator):
            continue
        record = confirm_record(state, candidate)
        if record is not None:
            yield record


# ─────────────────────────────────────────────────────────────────────────────
# Command-line interface
# ─────────────────────────────────────────────────────────────────────────────
def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Find powers of ten that are record-close to a power of two"
    )
    parser.add_argument("--start", type=int, default=1,
                        help="First tens exponent to examine (default 1)")
    parser.add_argument("--stop", type=int,
                        help="Last tens exponent to examine (default: run until interrupted)")
    parser.add_argument("--resolution", type=int, default=RESOLUTION,
                        help=f"Estimator scale factor (default {RESOLUTION})")
    parser.add_argument("--both-neighbours", action="store_true",
                        help="Evaluate floor and ceiling powers of two instead of trusting round()")
    parser.add_argument("--progress", action="store_true",
                        help="Show a progress bar on stderr")
    args = parser.parse_args(argv)

    if args.start < 1:
        parser.error("--start must be at least 1")
    if args.stop is not None and args.stop < args.start:
        parser.error("--stop must not be below --start")
    if args.resolution < 1:
        parser.error("--resolution must be positive")

    state = SearchState()
    interrupted = False
    total = None if args.stop is None else args.stop - args.start + 1
    with tqdm(total=total, desc="Searching", unit="n", disable=not args.progress) as bar:
        try:
            for record in search_records(args.start, args.stop, args.resolution,
                                         args.both_neighbours, state, bar):
                tqdm.write(record.format())
        except KeyboardInterrupt:
            interrupted = True

    print(f"Checked {state.checked} powers of ten: {state.records} records, "
          f"{state.confirmations - state.records} rejected by exact check",
          file=sys.stderr)
    return 130 if interrupted else 0


if __name__ == "__main__":
    sys.exit(main())
