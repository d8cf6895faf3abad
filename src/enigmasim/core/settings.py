from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Optional

from .errors import ConfigError, ErrorKind

KEEP = "keep"
DROP = "drop"
NON_ALPHA_MODES = (KEEP, DROP)

UPPER = "upper"
LOWER = "lower"
PRESERVE = "preserve"
CASE_MODES = (UPPER, LOWER, PRESERVE)


@dataclass(frozen=True)
class TextPolicy:
    # What happens to characters outside A-Z: passed through or removed.
    # Neither choice steps the rotors.
    non_alpha: str = KEEP
    # Output case for enciphered letters; "preserve" mirrors the input letter.
    letter_case: str = UPPER

    def __post_init__(self) -> None:
        if self.non_alpha not in NON_ALPHA_MODES:
            raise ConfigError(
                ErrorKind.INVALID_POLICY,
                f"non_alpha must be one of {', '.join(NON_ALPHA_MODES)}, got {self.non_alpha!r}.",
            )
        if self.letter_case not in CASE_MODES:
            raise ConfigError(
                ErrorKind.INVALID_POLICY,
                f"letter_case must be one of {', '.join(CASE_MODES)}, got {self.letter_case!r}.",
            )

    def to_dict(self) -> dict[str, Any]:
        return {"non_alpha": self.non_alpha, "letter_case": self.letter_case}


@dataclass(frozen=True)
class RotorSpec:
    name: str
    ring_setting: int = 0
    position: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "ring_setting": self.ring_setting, "position": self.position}


@dataclass(frozen=True)
class MachineConfig:
    rotors: tuple[RotorSpec, ...]
    reflector: str
    plugboard: tuple[str, ...] = ()
    policy: TextPolicy = field(default_factory=TextPolicy)

    @classmethod
    def from_lists(
        cls,
        names: Iterable[str],
        ring_settings: Iterable[int],
        positions: Iterable[int],
        reflector: str,
        plugboard: Iterable[str] = (),
        policy: Optional[TextPolicy] = None,
    ) -> "MachineConfig":
        names, ring_settings, positions = list(names), list(ring_settings), list(positions)
        if not (len(names) == len(ring_settings) == len(positions)):
            raise ConfigError(
                ErrorKind.ROTOR_COUNT,
                f"Got {len(names)} rotor names, {len(ring_settings)} ring settings "
                f"and {len(positions)} positions; the counts must match.",
            )
        specs = tuple(RotorSpec(n, r, p) for n, r, p in zip(names, ring_settings, positions))
        return cls(rotors=specs, reflector=reflector, plugboard=tuple(plugboard), policy=policy or TextPolicy())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MachineConfig":
        required = {"rotors", "reflector"}
        missing = required - data.keys()
        if missing:
            raise ConfigError(
                ErrorKind.INVALID_SETTINGS,
                f"Missing keys in settings: {', '.join(sorted(missing))}",
            )

        try:
            specs = tuple(
                RotorSpec(
                    name=str(r["name"]),
                    ring_setting=int(r.get("ring_setting", 0)),
                    position=int(r.get("position", 0)),
                )
                for r in data["rotors"]
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ConfigError(ErrorKind.INVALID_SETTINGS, f"Bad rotor entry in settings: {e!r}") from e

        plugboard = data.get("plugboard") or ()
        if isinstance(plugboard, str):
            plugboard = plugboard.split()
        elif not isinstance(plugboard, (list, tuple)):
            raise ConfigError(
                ErrorKind.INVALID_SETTINGS,
                f"Settings 'plugboard' must be a string or a list of pairs, got {type(plugboard).__name__}.",
            )

        policy_raw = data.get("policy") or {}
        if not isinstance(policy_raw, dict):
            raise ConfigError(
                ErrorKind.INVALID_SETTINGS,
                f"Settings 'policy' must be an object, got {type(policy_raw).__name__}.",
            )
        policy = TextPolicy(
            non_alpha=policy_raw.get("non_alpha", KEEP),
            letter_case=policy_raw.get("letter_case", UPPER),
        )
        return cls(rotors=specs, reflector=str(data["reflector"]), plugboard=tuple(plugboard), policy=policy)

    def to_dict(self) -> dict[str, Any]:
        return {
            "rotors": [r.to_dict() for r in self.rotors],
            "reflector": self.reflector,
            "plugboard": list(self.plugboard),
            "policy": self.policy.to_dict(),
        }


def load_config(path: str | Path) -> MachineConfig:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(ErrorKind.INVALID_SETTINGS, f"Cannot read settings file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(ErrorKind.INVALID_SETTINGS, f"Settings file {path} must hold a JSON object.")
    return MachineConfig.from_dict(data)


def parse_names(raw: str) -> list[str]:
    """
    Parse rotor names like "I,II,III" or "I II III".
    """
    parts = [p.strip().upper() for p in raw.replace(",", " ").split()]
    if not parts:
        raise ConfigError(ErrorKind.INVALID_SETTINGS, "Expected at least one rotor name, e.g. 'I,II,III'.")
    return parts


def parse_int_list(raw: str) -> list[int]:
    """
    Parse numbers like "1,1,1", "1:1:1" or "1 1 1".
    """
    cleaned = raw.strip().replace(":", ",").replace(" ", ",")
    parts = [p for p in cleaned.split(",") if p]
    if not parts:
        raise ConfigError(ErrorKind.INVALID_SETTINGS, "Expected a comma-separated list of numbers, e.g. '0,0,0'.")
    try:
        return [int(p) for p in parts]
    except ValueError as e:
        raise ConfigError(ErrorKind.INVALID_SETTINGS, f"Expected whole numbers, got {raw!r}.") from e
