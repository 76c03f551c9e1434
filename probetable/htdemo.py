"""Small exercise of the hash table with double-hash probing."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from .hashtable import DoubleHashProber, HashTable
from .strhash import StringHash


def run_demo(out: TextIO | None = None) -> None:
    stream = sys.stdout if out is None else out

    def say(line: str) -> None:
        stream.write(line + "\n")

    ht = HashTable(0.7, DoubleHashProber(StringHash()))
    for i in range(10):
        ht.insert(f"hi{i}", i)
    if ht.find("hi1") is not None:
        say("Found hi1")
        ht["hi1"] += 1
        say(f"Incremented hi1's value to: {ht['hi1']}")
    if ht.find("doesnotexist") is None:
        say("Did not find: doesnotexist")
    say(f"HT size: {len(ht)}")
    ht.remove("hi7")
    ht.remove("hi9")
    say(f"HT size: {len(ht)}")
    if ht.find("hi9") is not None:
        say("Found hi9")
    else:
        say("Did not find hi9")
    ht.insert("hi7", 17)
    say(f"size: {len(ht)}")


def main(argv: Sequence[str] | None = None) -> int:
    run_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())