"""Rotor cipher machine simulator: plugboard, stepping wheels and a reflector."""

__version__ = "0.1.0"

from .core.errors import ConfigError, ErrorKind
from .core.settings import MachineConfig, RotorSpec, TextPolicy
from .machine import Machine

__all__ = [
    "ConfigError",
    "ErrorKind",
    "Machine",
    "MachineConfig",
    "RotorSpec",
    "TextPolicy",
]
