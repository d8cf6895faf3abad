from __future__ import annotations

from typing import Sequence

from .errors import ConfigError, ErrorKind

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
SIZE = len(ALPHABET)
A_ORD = ord("A")

Table = tuple[int, ...]


def is_az(ch: str) -> bool:
    """True for a single ASCII letter, either case."""
    return len(ch) == 1 and ("A" <= ch <= "Z" or "a" <= ch <= "z")


def char_to_symbol(ch: str) -> int:
    if not is_az(ch):
        raise ValueError(f"{ch!r} is not a letter A-Z.")
    return ord(ch.upper()) - A_ORD


def symbol_to_char(symbol: int) -> str:
    if not 0 <= symbol < SIZE:
        raise ValueError(f"Symbol {symbol} out of range 0-{SIZE - 1}.")
    return chr(A_ORD + symbol)


def identity_table() -> Table:
    return tuple(range(SIZE))


def table_from_wiring(wiring: str) -> Table:
    """
    Build a permutation table from a 26-letter wiring string.
    Position i of the string names the image of the i-th letter, so
    "BACDEFGHIJKLMNOPQRSTUVWXYZ" swaps A and B.
    """
    if len(wiring) != SIZE:
        raise ConfigError(
            ErrorKind.INVALID_WIRING,
            f"Wiring must be {SIZE} letters long, got {len(wiring)}.",
        )
    if not all(is_az(ch) for ch in wiring):
        raise ConfigError(ErrorKind.INVALID_WIRING, f"Wiring {wiring!r} must contain only letters A-Z.")

    table = tuple(char_to_symbol(ch) for ch in wiring)
    if not is_permutation(table):
        raise ConfigError(ErrorKind.INVALID_WIRING, f"Wiring {wiring!r} repeats a letter.")
    return table


def table_to_wiring(table: Sequence[int]) -> str:
    return "".join(symbol_to_char(s) for s in table)


def invert_table(table: Sequence[int]) -> Table:
    inverse = [0] * len(table)
    for i, s in enumerate(table):
        inverse[s] = i
    return tuple(inverse)


def is_permutation(table: Sequence[int]) -> bool:
    return len(table) == SIZE and sorted(table) == list(range(SIZE))


def is_involution(table: Sequence[int]) -> bool:
    return is_permutation(table) and all(table[table[i]] == i for i in range(SIZE))
