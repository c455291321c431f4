#!/usr/bin/env python3
"""Replay the published record exponents without searching.

The record tens exponents appear as OEIS A046104 and A116984 (continued
fraction convergents related to log2(5)).  Given the list we can jump straight
to each one, build both powers exactly and print the same lines the full
search would, which is a quick cross-check of ``record_search.py``.

Only entries up to ``--max-exp`` are replayed: 10**n is materialised exactly,
so the tail of the list is far out of reach.
"""

import argparse
import sys
from fractions import Fraction
from typing import Iterable, Iterator

from limb_utils import fast_power_of_two
from record_search import Record, twos_exponent_for

KNOWN_RECORDS = [
    1, 3, 28, 59, 146, 643, 4004, 8651, 12655, 21306, 76573, 97879, 1838395,
    1936274, 13456039, 15392313, 44240665, 59632978, 103873643, 475127550,
    579001193, 24793177656, 149338067129, 174131244785, 845863046269,
    1865857337323, 6443435058238, 8309292395561, 23062019849360,
    146681411491721, 169743431341081, 655911705514964, 2793390253400937,
    3449301958915901, 30387805924728145, 33837107883644046, 165736237459304329,
    199573345342948375, 564882928145201079, 1329339201633350533,
]
DEFAULT_MAX_EXP = 100_000


def replay(exponents: Iterable[int] = KNOWN_RECORDS,
           max_exp: int = DEFAULT_MAX_EXP) -> Iterator[Record]:
    """Yield a ``Record`` for each exponent that improves on the ones before it."""
    best_error = Fraction(1)
    for tens_exp in exponents:
        if tens_exp > max_exp:
            continue
        tens_power = 10 ** tens_exp
        twos_exp = twos_exponent_for(tens_exp)
        twos_power = fast_power_of_two(twos_exp)
        diff = abs(twos_power - tens_power)
        error = Fraction(diff, tens_power)
        if error < best_error:
            best_error = error
            yield Record(tens_exp, twos_exp, error, tens_power, twos_power)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Replay known 10**n ~ 2**m records")
    parser.add_argument("--max-exp", type=int, default=DEFAULT_MAX_EXP,
                        help=f"Skip tens exponents above this (default {DEFAULT_MAX_EXP})")
    args = parser.parse_args(argv)

    shown = 0
    for record in replay(KNOWN_RECORDS, args.max_exp):
        print(record.format())
        shown += 1
    skipped = sum(1 for n in KNOWN_RECORDS if n > args.max_exp)
    print(f"{shown} records replayed, {skipped} beyond --max-exp", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
