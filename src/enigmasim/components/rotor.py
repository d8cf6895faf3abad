from __future__ import annotations

import logging

from enigmasim.core.alphabet import ALPHABET, SIZE, Table, invert_table
from enigmasim.core.registry import get_rotor_model, register_rotor

logger = logging.getLogger(__name__)


class Rotor:
    """
    One cipher wheel. The wiring is fixed; only `position` changes, and only
    through `turnover()`.

    `ring_setting` shifts the wiring against the alphabet ring, so a wheel at
    position p with ring setting r behaves like the bare wiring rotated by p - r.
    """

    def __init__(self, name: str, wiring: Table, notches: tuple[int, ...], position: int = 0, ring_setting: int = 0):
        self.name = name
        self.wiring = wiring
        self.inverse_wiring = invert_table(wiring)
        self.notches = notches
        self.position = position % SIZE
        self.ring_setting = ring_setting % SIZE

    @classmethod
    def create(cls, name: str, initial_position: int = 0, ring_setting: int = 0) -> "Rotor":
        model = get_rotor_model(name)
        rotor = cls(model.name, model.wiring, model.notches, initial_position, ring_setting)
        logger.debug("rotor %s pos=%d ring=%d", rotor.name, rotor.position, rotor.ring_setting)
        return rotor

    @property
    def letter(self) -> str:
        """Letter showing in the window."""
        return ALPHABET[self.position]

    def at_notch(self) -> bool:
        return self.position in self.notches

    def turnover(self) -> None:
        self.position = (self.position + 1) % SIZE

    def _encipher(self, table: Table, symbol: int) -> int:
        shift = (self.position - self.ring_setting) % SIZE
        return (table[(symbol + shift) % SIZE] - shift) % SIZE

    def forward(self, symbol: int) -> int:
        return self._encipher(self.wiring, symbol)

    def backward(self, symbol: int) -> int:
        return self._encipher(self.inverse_wiring, symbol)

    def __repr__(self) -> str:
        return f"<Rotor {self.name} pos={self.position} ring={self.ring_setting}>"


# Wehrmacht / Kriegsmarine wheels. VI-VIII carry two notches.
_CLASSICAL = (
    ("I", "EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    ("II", "AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    ("III", "BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    ("IV", "ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    ("V", "VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
    ("VI", "JPGVOUMFYQBENHZRDKASXLICTW", "ZM"),
    ("VII", "NZJHGRCXMYSWBOUFAIVLPEKQDT", "ZM"),
    ("VIII", "FKQHTLXOCBJSPDZRAMEWNIUYGV", "ZM"),
)

for _name, _wiring, _notches in _CLASSICAL:
    register_rotor(_name, _wiring, _notches)
