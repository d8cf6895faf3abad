from .errors import ConfigError, ErrorKind
from .registry import list_reflectors, list_rotors, register_reflector, register_rotor
from .settings import MachineConfig, RotorSpec, TextPolicy, load_config

__all__ = [
    "ConfigError",
    "ErrorKind",
    "MachineConfig",
    "RotorSpec",
    "TextPolicy",
    "list_reflectors",
    "list_rotors",
    "load_config",
    "register_reflector",
    "register_rotor",
]
