from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .alphabet import ALPHABET, Table, is_involution, table_from_wiring
from .errors import ConfigError, ErrorKind

logger = logging.getLogger(__name__)

_ROMAN_RE = re.compile(r"^[IVXLCDM]+$")
_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


@dataclass(frozen=True)
class RotorModel:
    name: str
    wiring: Table
    notches: tuple[int, ...]

    @property
    def notch_letters(self) -> str:
        return "".join(ALPHABET[n] for n in self.notches)


_ROTORS: dict[str, RotorModel] = {}
_REFLECTORS: dict[str, Table] = {}


def _key(name: str) -> str:
    return (name or "").strip().upper()


def _roman_order(name: str) -> tuple[int, int, str]:
    """Sort I, II, ..., VIII numerically; anything else after, alphabetically."""
    if not _ROMAN_RE.match(name):
        return (1, 0, name)
    total = 0
    prev = 0
    for ch in reversed(name):
        v = _ROMAN_VALUES[ch]
        total = total - v if v < prev else total + v
        prev = v
    return (0, total, name)


def register_rotor(name: str, wiring: str, notches: str) -> RotorModel:
    """
    Add a named wheel to the catalog. `notches` are letters, e.g. "Q" or "ZM";
    they are stored as positions 0..25.
    """
    key = _key(name)
    if not key:
        raise ValueError("Rotor must have a non-empty name.")
    if not notches or any(ch not in ALPHABET for ch in notches.upper()):
        raise ConfigError(ErrorKind.INVALID_WIRING, f"Rotor {key} needs one or more notch letters A-Z.")

    model = RotorModel(
        name=key,
        wiring=table_from_wiring(wiring.upper()),
        notches=tuple(sorted({ALPHABET.index(ch) for ch in notches.upper()})),
    )
    _ROTORS[key] = model
    logger.debug("registered rotor %s notches=%s", key, model.notch_letters)
    return model


def register_reflector(name: str, wiring: str) -> Table:
    key = _key(name)
    if not key:
        raise ValueError("Reflector must have a non-empty name.")

    table = table_from_wiring(wiring.upper())
    if not is_involution(table):
        raise ConfigError(ErrorKind.INVALID_WIRING, f"Reflector {key} wiring is not its own inverse.")
    _REFLECTORS[key] = table
    logger.debug("registered reflector %s", key)
    return table


def list_rotors() -> list[str]:
    return sorted(_ROTORS.keys(), key=_roman_order)


def list_reflectors() -> list[str]:
    return sorted(_REFLECTORS.keys())


def get_rotor_model(name: str) -> RotorModel:
    key = _key(name)
    if key not in _ROTORS:
        raise ConfigError(
            ErrorKind.UNKNOWN_ROTOR,
            f"Unknown rotor '{name}'. Available: {', '.join(list_rotors())}",
        )
    return _ROTORS[key]


def get_reflector_table(name: str) -> Table:
    key = _key(name)
    if key not in _REFLECTORS:
        raise ConfigError(
            ErrorKind.UNKNOWN_REFLECTOR,
            f"Unknown reflector '{name}'. Available: {', '.join(list_reflectors())}",
        )
    return _REFLECTORS[key]
