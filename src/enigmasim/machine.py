from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from enigmasim.components import Plugboard, Reflector, Rotor
from enigmasim.core.alphabet import ALPHABET, char_to_symbol, is_az, symbol_to_char
from enigmasim.core.errors import ConfigError, ErrorKind
from enigmasim.core.settings import DROP, LOWER, PRESERVE, MachineConfig, RotorSpec, TextPolicy

logger = logging.getLogger(__name__)


class Machine:
    """
    A rotor machine: plugboard, wheels (left to right, as installed) and a
    reflector. Rotor positions advance with every enciphered letter and carry
    over from one `encrypt` call to the next.

    Encryption is its own inverse: a second machine built with the same
    settings turns the ciphertext back into the plaintext.
    """

    def __init__(
        self,
        rotors: Sequence[Rotor],
        reflector: Reflector,
        plugboard: Optional[Plugboard] = None,
        policy: Optional[TextPolicy] = None,
    ):
        if not rotors:
            raise ConfigError(ErrorKind.ROTOR_COUNT, "A machine needs at least one rotor.")
        self._rotors = list(rotors)
        self._reflector = reflector
        self._plugboard = plugboard or Plugboard.create()
        self.policy = policy or TextPolicy()

    @classmethod
    def create(
        cls,
        rotor_names: Sequence[str],
        ring_settings: Sequence[int],
        positions: Sequence[int],
        reflector: str,
        plugboard_pairs: Iterable[str] = (),
        policy: Optional[TextPolicy] = None,
    ) -> "Machine":
        config = MachineConfig.from_lists(rotor_names, ring_settings, positions, reflector, plugboard_pairs, policy)
        return cls.from_config(config)

    @classmethod
    def from_specs(
        cls,
        specs: Sequence[RotorSpec],
        reflector: str,
        plugboard_pairs: Iterable[str] = (),
        policy: Optional[TextPolicy] = None,
    ) -> "Machine":
        if not specs:
            raise ConfigError(ErrorKind.ROTOR_COUNT, "A machine needs at least one rotor.")
        rotors = [Rotor.create(s.name, s.position, s.ring_setting) for s in specs]
        machine = cls(rotors, Reflector.create(reflector), Plugboard.create(plugboard_pairs), policy)
        logger.debug("machine ready: %r", machine)
        return machine

    @classmethod
    def from_config(cls, config: MachineConfig) -> "Machine":
        return cls.from_specs(config.rotors, config.reflector, config.plugboard, config.policy)

    # ── state ────────────────────────────────────────────────────

    @property
    def positions(self) -> tuple[int, ...]:
        """Rotor positions, left to right."""
        return tuple(r.position for r in self._rotors)

    @property
    def window(self) -> str:
        """Rotor positions as the letters showing in the windows."""
        return "".join(ALPHABET[p] for p in self.positions)

    # ── mechanism ────────────────────────────────────────────────

    def _step(self) -> None:
        rotors = self._rotors
        last = len(rotors) - 1

        # Notch states must be read before anything moves.
        notched = [r.at_notch() for r in rotors]

        # A wheel is pushed when its right neighbour sits at a notch. A wheel at
        # its own notch is also pushed along with its left neighbour: that is
        # the double step of the middle wheel.
        stepping = [False] * len(rotors)
        stepping[last] = True
        for k in range(last):
            if notched[k + 1] or (notched[k] and k > 0):
                stepping[k] = True

        for k, rotor in enumerate(rotors):
            if stepping[k]:
                rotor.turnover()

        logger.debug("step -> %s", self.window)

    def _signal(self, symbol: int) -> int:
        s = self._plugboard.forward(symbol)
        for rotor in reversed(self._rotors):
            s = rotor.forward(s)
        s = self._reflector.forward(s)
        for rotor in self._rotors:
            s = rotor.backward(s)
        return self._plugboard.backward(s)

    def press(self, letter: str) -> str:
        """Step the wheels and encipher one letter; returns it uppercase."""
        symbol = char_to_symbol(letter)
        self._step()
        return symbol_to_char(self._signal(symbol))

    # ── messages ─────────────────────────────────────────────────

    def encrypt(self, message: str) -> str:
        out = []
        case = self.policy.letter_case
        for ch in message:
            if not is_az(ch):
                if self.policy.non_alpha != DROP:
                    out.append(ch)
                continue

            enc = self.press(ch)
            if case == LOWER or (case == PRESERVE and ch.islower()):
                enc = enc.lower()
            out.append(enc)
        return "".join(out)

    # Reciprocal cipher: decrypting is the same keystrokes.
    decrypt = encrypt

    def __repr__(self) -> str:
        names = "-".join(r.name for r in self._rotors)
        rings = "".join(ALPHABET[r.ring_setting] for r in self._rotors)
        return (
            f"<Machine rotors={names} rings={rings} window={self.window} "
            f"reflector={self._reflector.name} plugs={' '.join(self._plugboard.pairs) or '-'}>"
        )
