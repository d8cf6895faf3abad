from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    UNKNOWN_ROTOR = "unknown_rotor"
    UNKNOWN_REFLECTOR = "unknown_reflector"
    MALFORMED_PAIR = "malformed_pair"
    DUPLICATE_LETTER = "duplicate_letter"
    ROTOR_COUNT = "rotor_count"
    INVALID_WIRING = "invalid_wiring"
    INVALID_POLICY = "invalid_policy"
    INVALID_SETTINGS = "invalid_settings"


class ConfigError(ValueError):
    """
    Raised when a machine (or one of its parts) cannot be built from the
    given settings. Carries a machine-readable `kind` next to the message.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message}

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"
