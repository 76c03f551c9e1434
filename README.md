# probetable

A small collection of hashing and search tools:

- `probetable.hashtable`: an open-addressing `HashTable` that grows through a
  fixed list of prime capacities. It takes a `LinearProber` or a
  `DoubleHashProber`, marks removed entries as deleted (tombstones that are
  dropped on the next resize), and counts probe attempts.
- `probetable.strhash`: `StringHash`, a radix-36 hash for strings of up to 30
  letters and digits. Case does not matter. With the default `debug=True` it
  uses fixed multipliers, so values are reproducible; `StringHash(False)` draws
  fresh multipliers from an `MT19937` seeded by the clock.
- `probetable.mersenne`: `MT19937`, a 32-bit Mersenne Twister whose output
  matches the standard `mt19937` engine for a given seed. Call it for the next
  value, or iterate over it for an endless stream.
- `probetable.boggle`: builds a seeded square letter board with Scrabble letter
  frequencies and finds dictionary words that read in a straight line to the
  right, downward or diagonally down-right.
- `probetable.htdemo`: a short run of the hash table with double-hash probing.

## Installation

```
pip install .
```

Tests:

```
pip install ".[test]"
pytest
```

## Using the hash table

```python
from probetable.hashtable import HashTable, DoubleHashProber
from probetable.strhash import StringHash

table = HashTable(0.7, DoubleHashProber(StringHash(True)))
table.insert("hi1", 1)
table["hi1"] += 1
print(table.at("hi1"))       # 2
print(table.find("hi1"))     # ('hi1', 2)
print(table.find("nope"))    # None
print("hi1" in table)        # True
table.remove("hi1")
print(len(table), table.empty())   # 0 True
```

- `HashTable(resize_alpha=0.4, prober=None, hash_func=None)`: without a prober
  it probes linearly; without a hash function it uses Python's `hash`.
- `at(key)` and `table[key]` raise `KeyError` if the key is missing.
  `del table[key]` raises `KeyError` too; `remove(key)` quietly does nothing.
- `insert` raises `RuntimeError` when no free slot can be found, or when the
  table must grow and has no larger capacity left.
- `capacity` is the current number of slots, `total_probes` the number of
  probe attempts since `clear_total_probes()` (or since creation).
- `report_all(out)` writes `Bucket <index>: <key> <value>` for every occupied
  slot, deleted ones included, to `out` or standard output.

## Hashing strings

```python
from probetable.strhash import StringHash, letter_digit_to_number

h = StringHash(True)
h("abc")                     # 9953503400
h("")                        # 0
letter_digit_to_number("Z")  # 25
letter_digit_to_number("0")  # 26
```

Keys longer than 30 characters raise `ValueError`. Results are reduced to
64 bits.

## Boggle

```python
from probetable.boggle import gen_board, format_board, parse_dict, boggle

board = gen_board(4, 42)
print(format_board(board), end="")
words, prefixes = parse_dict("words.txt")
print(sorted(boggle(words, prefixes, board)))
```

`parse_dict` reads whitespace-separated words and returns them together with
all their proper prefixes; it raises `ValueError` if the file cannot be
opened. From each cell and each of the three directions, `boggle` keeps the
longest dictionary word found along that line.

## Commands

Hash a string with the debug multipliers:

```
probetable-strhash abc
```

Generate a board and solve it against a whitespace-separated word list:

```
probetable-boggle <size> <seed> <dictionary file>
```

Run the hash table demonstration:

```
probetable-htdemo
```

## What it does not do

The Boggle solver is not a game: there is no interactive play, no timer and
no scoring, and it only follows straight lines, not arbitrary paths through
adjacent cells. The hash table keeps everything in memory and has no
persistence.