from __future__ import annotations

import logging
from typing import Iterable

from enigmasim.core.alphabet import ALPHABET, SIZE, Table, char_to_symbol, is_az
from enigmasim.core.errors import ConfigError, ErrorKind

logger = logging.getLogger(__name__)


class Plugboard:
    def __init__(self, table: Table):
        self.table = table

    @classmethod
    def create(cls, pairs: Iterable[str] = ()) -> "Plugboard":
        """
        Build from pairs like ["AB", "CD"]: A<->B, C<->D, everything else
        unchanged. Letters are case-insensitive; each may be used once.
        """
        wiring = list(range(SIZE))
        used: set[int] = set()

        for raw in pairs:
            if not isinstance(raw, str) or len(raw) != 2 or not all(is_az(ch) for ch in raw):
                raise ConfigError(ErrorKind.MALFORMED_PAIR, f"Plugboard pair {raw!r} must be exactly two letters.")

            a, b = (char_to_symbol(ch) for ch in raw)
            if a in used or b in used or a == b:
                dup = ALPHABET[a] if a in used or a == b else ALPHABET[b]
                raise ConfigError(ErrorKind.DUPLICATE_LETTER, f"Letter {dup!r} is used more than once on the plugboard.")

            wiring[a], wiring[b] = b, a
            used.update((a, b))

        board = cls(tuple(wiring))
        logger.debug("plugboard %s", board.pairs or "(empty)")
        return board

    @classmethod
    def from_connections(cls, connections: str) -> "Plugboard":
        """Parse the space-separated form used on the command line, e.g. "AB CD EF"."""
        return cls.create(connections.split())

    @property
    def pairs(self) -> list[str]:
        return [ALPHABET[i] + ALPHABET[j] for i, j in enumerate(self.table) if i < j]

    def forward(self, symbol: int) -> int:
        return self.table[symbol]

    backward = forward

    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(self.pairs)}>"
