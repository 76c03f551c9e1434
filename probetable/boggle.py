"""Straight-line word search on a random letter board."""

from __future__ import annotations

import sys
from collections.abc import Sequence, Set
from typing import TextIO

from .mersenne import MT19937

# Scrabble tile frequencies for A..Z.
_FREQUENCIES = (9, 2, 2, 4, 12, 2, 3, 2, 9, 1, 1, 4, 2, 6, 8, 2, 1, 6, 4, 6, 4, 2, 2, 1, 2, 1)
_LETTERS = "".join(
    chr(ord("A") + offset) * count for offset, count in enumerate(_FREQUENCIES)
)
_DIRECTIONS = ((0, 1), (1, 0), (1, 1))

Board = list[list[str]]


def gen_board(n: int, seed: int) -> Board:
    """Build an n-by-n board of letters drawn with Scrabble frequencies."""
    rng = MT19937(seed)
    return [[_LETTERS[rng() % len(_LETTERS)] for _ in range(n)] for _ in range(n)]


def format_board(board: Sequence[Sequence[str]]) -> str:
    """Render the board with each letter right-aligned in two columns."""
    return "".join("".join(f"{ch:>2}" for ch in row) + "\n" for row in board)


def print_board(board: Sequence[Sequence[str]], file: TextIO | None = None) -> None:
    (sys.stdout if file is None else file).write(format_board(board))


def parse_dict(path: str) -> tuple[set[str], set[str]]:
    """Read whitespace-separated words; return the words and all their proper prefixes."""
    try:
        with open(path, encoding="utf-8") as fh:
            text = fh.read()
    except OSError as exc:
        raise ValueError("unable to open dictionary file") from exc
    words: set[str] = set()
    prefixes: set[str] = {""}
    for word in text.split():
        words.add(word)
        prefixes.update(word[:i] for i in range(1, len(word)))
    return words, prefixes


def _longest_on_ray(
    dictionary: Set[str],
    prefixes: Set[str],
    board: Sequence[Sequence[str]],
    row: int,
    col: int,
    dr: int,
    dc: int,
) -> str | None:
    rows = len(board)
    cols = len(board[0]) if rows else 0
    word = ""
    best = None
    while row < rows and col < cols:
        word += board[row][col]
        if word in dictionary:
            best = word
        if word not in prefixes:
            break
        row += dr
        col += dc
    return best


def boggle(
    dictionary: Set[str], prefixes: Set[str], board: Sequence[Sequence[str]]
) -> set[str]:
    """Find, from every cell, the longest word reading right, down or diagonally."""
    found: set[str] = set()
    for row in range(len(board)):
        for col in range(len(board)):
            for dr, dc in _DIRECTIONS:
                word = _longest_on_ray(dictionary, prefixes, board, row, col, dr, dc)
                if word is not None:
                    found.add(word)
    return found


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print("Usage: boggle-driver <size> <seed> <dictionary file>")
        return 1
    size = int(args[0])
    seed = int(args[1])
    board = gen_board(size, seed)
    print_board(board)
    dictionary, prefixes = parse_dict(args[2])
    found = boggle(dictionary, prefixes, board)
    print(f"Found {len(found)} words:")
    print(", ".join(sorted(found)))
    return 0


if __name__ == "__main__":
    sys.exit(main())