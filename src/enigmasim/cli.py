from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from enigmasim.components import register_all
from enigmasim.core.errors import ConfigError, ErrorKind
from enigmasim.core.registry import get_rotor_model, list_reflectors, list_rotors
from enigmasim.core.settings import (
    CASE_MODES,
    DROP,
    MachineConfig,
    TextPolicy,
    load_config,
    parse_int_list,
    parse_names,
)
from enigmasim.machine import Machine

app = typer.Typer(help="enigmasim: encrypt/decrypt text with a simulated rotor cipher machine.")


@app.callback()
def _init(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log machine set-up and stepping to stderr."),
):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            stream=sys.stderr,
        )
    register_all()


@app.command()
def rotors():
    """List the available rotors and their notch letters."""
    for name in list_rotors():
        typer.echo(f"{name:5s} notch={get_rotor_model(name).notch_letters}")


@app.command()
def reflectors():
    """List the available reflectors."""
    for name in list_reflectors():
        typer.echo(name)


def _build_config(
    config: Optional[Path],
    names: Optional[str],
    settings: Optional[str],
    positions: Optional[str],
    reflector: Optional[str],
    connections: Optional[str],
    drop_non_alpha: bool,
    case: Optional[str],
) -> MachineConfig:
    base = load_config(config) if config is not None else None

    if base is None and (names is None or reflector is None):
        raise ConfigError(ErrorKind.INVALID_SETTINGS, "Give --names and --reflector, or a --config file.")

    if names is not None:
        rotor_names = parse_names(names)
    else:
        rotor_names = [r.name for r in base.rotors]

    # Without a file, unset rings and positions are 0. With one, they come from
    # the file and must line up with the rotor names.
    if base is not None:
        default_rings = [r.ring_setting for r in base.rotors]
        default_starts = [r.position for r in base.rotors]
    else:
        default_rings = [0] * len(rotor_names)
        default_starts = [0] * len(rotor_names)
    rings = parse_int_list(settings) if settings is not None else default_rings
    starts = parse_int_list(positions) if positions is not None else default_starts

    refl = reflector if reflector is not None else base.reflector
    plugs = connections.split() if connections is not None else (list(base.plugboard) if base else [])

    base_policy = base.policy if base else TextPolicy()
    policy = TextPolicy(
        non_alpha=DROP if drop_non_alpha else base_policy.non_alpha,
        letter_case=case.lower() if case is not None else base_policy.letter_case,
    )
    return MachineConfig.from_lists(rotor_names, rings, starts, refl, plugs, policy)


def _read_message(message: Optional[str]) -> str:
    if message is not None:
        return message
    # Lines are joined without separators.
    return "".join(line.rstrip("\r\n") for line in sys.stdin)


def _run(
    message: Optional[str],
    config: Optional[Path],
    names: Optional[str],
    settings: Optional[str],
    positions: Optional[str],
    reflector: Optional[str],
    connections: Optional[str],
    drop_non_alpha: bool,
    case: Optional[str],
) -> None:
    try:
        cfg = _build_config(config, names, settings, positions, reflector, connections, drop_non_alpha, case)
        machine = Machine.from_config(cfg)
    except ConfigError as e:
        raise typer.BadParameter(str(e))
    typer.echo(machine.encrypt(_read_message(message)))


@app.command()
def encrypt(
    message: Optional[str] = typer.Argument(None, help="Message to process. Read from stdin if omitted."),
    config: Optional[Path] = typer.Option(None, "--config", help="JSON settings file; explicit options override it."),
    names: Optional[str] = typer.Option(
        None, "--names", "-n", help="Comma-separated rotor names, left to right (e.g. I,II,III)."
    ),
    settings: Optional[str] = typer.Option(None, "--settings", "-s", help="Comma-separated ring settings, one per rotor."),
    positions: Optional[str] = typer.Option(
        None, "--positions", "-p", help="Comma-separated initial rotor positions (taken mod 26)."
    ),
    reflector: Optional[str] = typer.Option(None, "--reflector", "-r", help="Reflector name (A, B, C or IDENTITY)."),
    connections: Optional[str] = typer.Option(
        None, "--connections", "-c", help="Plugboard pairs, space-separated: 'AB CD'."
    ),
    drop_non_alpha: bool = typer.Option(
        False, "--drop-non-alpha", help="Remove characters outside A-Z instead of passing them through."
    ),
    case: Optional[str] = typer.Option(None, "--case", help=f"Output letter case: {', '.join(CASE_MODES)}."),
):
    """Encrypt a message."""
    _run(message, config, names, settings, positions, reflector, connections, drop_non_alpha, case)


# The cipher is reciprocal: decrypting is the same keystrokes with the same settings.
app.command(name="decrypt", help="Decrypt a message (same settings as used to encrypt it).")(encrypt)


def main():
    app()


if __name__ == "__main__":
    main()
