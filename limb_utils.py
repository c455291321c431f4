#!/usr/bin/env python3
"""Limb utilities for building powers of two directly from their bit position.

A big integer is, on the inside, a little-endian run of machine words
("limbs").  ``2**e`` has exactly one set bit, so instead of paying for a
general exponentiation we lay down ``e // W`` zero limbs followed by one limb
holding ``1 << (e % W)`` and reinterpret the buffer as an ``int``.
"""

import argparse
import struct

import numpy as np

# ─────────────────────────────────────────────────────────────────────────────
# Native word layout
# ─────────────────────────────────────────────────────────────────────────────
WORD_BYTES = struct.calcsize("P")
WORD_BITS = 8 * WORD_BYTES
LIMB_DTYPE = np.dtype(f"<u{WORD_BYTES}")


# ─────────────────────────────────────────────────────────────────────────────
# Limb conversions
# ─────────────────────────────────────────────────────────────────────────────
def power_of_two_limbs(e: int) -> np.ndarray:
    """Return the little-endian limbs of ``2**e``."""
    if e < 0:
        raise ValueError("exponent must be non-negative")
    zeros, mod = divmod(e, WORD_BITS)
    limbs = np.zeros(zeros + 1, dtype=LIMB_DTYPE)
    limbs[zeros] = 1 << mod
    return limbs


def limbs_to_int(limbs: np.ndarray) -> int:
    """Reinterpret a little-endian limb array as a non-negative integer."""
    return int.from_bytes(np.asarray(limbs, dtype=LIMB_DTYPE).tobytes(), "little")


def int_to_limbs(n: int) -> np.ndarray:
    """Split ``n`` into the minimal little-endian limb array (empty for 0)."""
    if n < 0:
        raise ValueError("Negative numbers not supported")
    if n == 0:
        return np.zeros(0, dtype=LIMB_DTYPE)
    count = -(-n.bit_length() // WORD_BITS)
    raw = n.to_bytes(count * WORD_BYTES, "little")
    return np.frombuffer(raw, dtype=LIMB_DTYPE).copy()


def fast_power_of_two(e: int) -> int:
    """``2**e`` built from its limbs, bypassing exponentiation."""
    return limbs_to_int(power_of_two_limbs(e))


# ─────────────────────────────────────────────────────────────────────────────
def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Show the limb layout of 2**e")
    parser.add_argument("exp", type=int, help="Exponent e in 2**e")
    args = parser.parse_args(argv)

    try:
        limbs = power_of_two_limbs(args.exp)
    except ValueError as e:
        parser.error(str(e))
    print(f"Word width: {WORD_BITS} bits")
    print(f"Limbs: {len(limbs)} ({len(limbs) - 1} zero + 1 with bit {args.exp % WORD_BITS} set)")
    print(f"Top limb: {int(limbs[-1]):#x}")
    print(f"Bits in value: {fast_power_of_two(args.exp).bit_length()}")


if __name__ == "__main__":
    main()
