from __future__ import annotations

import logging

from enigmasim.core.alphabet import ALPHABET, Table
from enigmasim.core.registry import get_reflector_table, register_reflector

logger = logging.getLogger(__name__)


class Reflector:
    """Fixed turnaround wheel. The table is its own inverse, so one lookup serves both directions."""

    def __init__(self, name: str, table: Table):
        self.name = name
        self.table = table

    @classmethod
    def create(cls, kind: str) -> "Reflector":
        table = get_reflector_table(kind)
        name = kind.strip().upper()
        logger.debug("reflector %s", name)
        return cls(name, table)

    def forward(self, symbol: int) -> int:
        return self.table[symbol]

    def __repr__(self) -> str:
        return f"<Reflector {self.name}>"


_CLASSICAL = (
    ("A", "EJMZALYXVBWFCRQUONTSPIKHGD"),
    ("B", "YRUHQSLDPXNGOKMIEBFZCWVJAT"),
    ("C", "FVPJIAOYEDRZXWGCTKUQSBNMHL"),
    # Straight-through; not a real wheel, handy in tests.
    ("IDENTITY", ALPHABET),
)

for _name, _wiring in _CLASSICAL:
    register_reflector(_name, _wiring)
