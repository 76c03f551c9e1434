"""Polynomial string hash over the alphabet a-z, 0-9."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence

from .mersenne import MT19937

_MASK64 = (1 << 64) - 1
_GROUP_LEN = 6
_GROUPS = 5
MAX_KEY_LENGTH = _GROUP_LEN * _GROUPS

DEBUG_R_VALUES = (983132572, 1468777056, 552714139, 984953261, 261934300)


def letter_digit_to_number(letter: str) -> int:
    """Map a-z (either case) to 0-25 and 0-9 to 26-35."""
    if letter.isascii() and letter.isalpha():
        return ord(letter.lower()) - ord("a")
    return ord(letter) - ord("0") + 26


class StringHash:
    """Hash a string of up to 30 characters by base-36 groups weighted by r-values.

    With ``debug`` true the fixed r-values are used, so results are repeatable;
    otherwise they are drawn from a generator seeded by the system clock.
    """

    def __init__(self, debug: bool = True) -> None:
        self.r_values = list(DEBUG_R_VALUES)
        if not debug:
            self.generate_r_values()

    def __call__(self, key: str) -> int:
        if len(key) > MAX_KEY_LENGTH:
            raise ValueError(f"key longer than {MAX_KEY_LENGTH} characters")
        if not key:
            return 0
        digits = [letter_digit_to_number(ch) for ch in key]
        last = len(digits) - 1
        w = [0] * _GROUPS
        for pos, digit in enumerate(digits):
            group = _GROUPS - 1 - (last - pos) // _GROUP_LEN
            w[group] = w[group] * 36 + digit
        return sum(r * x for r, x in zip(self.r_values, w)) & _MASK64

    def generate_r_values(self) -> None:
        """Replace the r-values with random ones seeded from the clock."""
        seed = time.time_ns() & 0xFFFFFFFF
        generator = MT19937(seed)
        self.r_values = [generator() for _ in range(_GROUPS)]


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Please provide a string to hash")
        return 1
    key = args[0]
    print(f"h({key})={StringHash(True)(key)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())