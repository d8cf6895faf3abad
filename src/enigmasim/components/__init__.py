from __future__ import annotations

from .plugboard import Plugboard
from .reflector import Reflector
from .rotor import Rotor


def register_all() -> None:
    from . import reflector, rotor  # noqa: F401


__all__ = ["Plugboard", "Reflector", "Rotor", "register_all"]
