import json
import logging

import pytest
from typer.testing import CliRunner

from enigmasim.cli import app

runner = CliRunner()

CLASSIC = ["-n", "I,II,III", "-s", "1,1,1", "-p", "0,0,0", "-r", "B"]


def test_rotors_lists_catalog():
    result = runner.invoke(app, ["rotors"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0].startswith("I ")
    assert any(line.startswith("VIII") and "notch=MZ" in line for line in lines)


def test_reflectors():
    result = runner.invoke(app, ["reflectors"])
    assert result.exit_code == 0
    assert result.output.split() == ["A", "B", "C", "IDENTITY"]


def test_encrypt_argument():
    result = runner.invoke(app, ["encrypt", *CLASSIC, "HELLOXWORLD"])
    assert result.exit_code == 0
    assert result.output == "LOFUHZZLZOM\n"


def test_decrypt_reverses_encrypt():
    result = runner.invoke(app, ["decrypt", *CLASSIC, "LOFUHZZLZOM"])
    assert result.exit_code == 0
    assert result.output.strip() == "HELLOXWORLD"


def test_encrypt_reads_stdin_and_joins_lines():
    result = runner.invoke(app, ["encrypt", *CLASSIC], input="HELLO\nXWORLD\n")
    assert result.exit_code == 0
    assert result.output.strip() == "LOFUHZZLZOM"


def test_connections_and_policy_flags():
    plain = runner.invoke(app, ["encrypt", *CLASSIC, "-c", "AB CD", "--drop-non-alpha", "--case", "lower", "Hi, there"])
    assert plain.exit_code == 0
    text = plain.output.strip()
    assert text.islower() and len(text) == len("Hithere")

    back = runner.invoke(app, ["decrypt", *CLASSIC, "-c", "AB CD", text])
    assert back.output.strip() == "HITHERE"


def test_ring_and_position_defaults_to_zero():
    result = runner.invoke(app, ["encrypt", "-n", "I,II,III", "-r", "B", "AAAAA"])
    assert result.exit_code == 0
    assert result.output.strip() == "BDZGO"


def test_config_file_with_override(tmp_path):
    path = tmp_path / "m.json"
    path.write_text(
        json.dumps(
            {
                "rotors": [
                    {"name": "I", "ring_setting": 1, "position": 0},
                    {"name": "II", "ring_setting": 1, "position": 0},
                    {"name": "III", "ring_setting": 1, "position": 0},
                ],
                "reflector": "C",
            }
        )
    )
    result = runner.invoke(app, ["encrypt", "--config", str(path), "-r", "B", "AAAAA"])
    assert result.exit_code == 0
    assert result.output.strip() == "EWTYX"


def _write_settings(tmp_path, **extra):
    data = {
        "rotors": [
            {"name": "IV", "ring_setting": 1, "position": 0},
            {"name": "V", "ring_setting": 1, "position": 0},
            {"name": "VI", "ring_setting": 1, "position": 0},
        ],
        "reflector": "B",
    }
    data.update(extra)
    path = tmp_path / "m.json"
    path.write_text(json.dumps(data))
    return str(path)


def test_names_override_keeps_file_rings_and_positions(tmp_path):
    path = _write_settings(tmp_path)
    result = runner.invoke(app, ["encrypt", "--config", path, "-n", "I,II,III", "AAAAA"])
    assert result.exit_code == 0
    assert result.output.strip() == "EWTYX"


def test_names_override_with_other_rotor_count_is_a_usage_error(tmp_path):
    path = _write_settings(tmp_path)
    result = runner.invoke(app, ["encrypt", "--config", path, "-n", "I,II", "AAAAA"])
    assert result.exit_code == 2


def test_names_override_with_explicit_lists(tmp_path):
    path = _write_settings(tmp_path)
    result = runner.invoke(app, ["encrypt", "--config", path, "-n", "I,II", "-s", "0,0", "-p", "0,0", "AAA"])
    assert result.exit_code == 0


@pytest.mark.parametrize(
    "extra",
    [
        {"policy": "drop"},
        {"policy": ["keep"]},
        {"plugboard": 5},
        {"rotors": [{"name": "I", "position": "x"}]},
    ],
)
def test_malformed_settings_file_is_a_usage_error(tmp_path, extra):
    path = _write_settings(tmp_path, **extra)
    result = runner.invoke(app, ["encrypt", "--config", path, "AAA"])
    assert result.exit_code == 2


def test_unknown_rotor_is_a_usage_error():
    result = runner.invoke(app, ["encrypt", "-n", "I,IX,III", "-r", "B", "HELLO"])
    assert result.exit_code == 2


def test_duplicate_plug_is_a_usage_error():
    result = runner.invoke(app, ["encrypt", *CLASSIC, "-c", "AB AC", "HELLO"])
    assert result.exit_code == 2


def test_missing_settings_is_a_usage_error():
    result = runner.invoke(app, ["encrypt", "HELLO"])
    assert result.exit_code == 2


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_verbose_flag(restore_logging):
    result = runner.invoke(app, ["-v", "encrypt", *CLASSIC, "A"])
    assert result.exit_code == 0
    assert result.stdout.strip().endswith("E")
