import pytest

from enigmasim.core.alphabet import (
    ALPHABET,
    char_to_symbol,
    identity_table,
    invert_table,
    is_az,
    is_involution,
    is_permutation,
    symbol_to_char,
    table_from_wiring,
    table_to_wiring,
)
from enigmasim.core.errors import ConfigError, ErrorKind


# ── conversion ────────────────────────────────────────────────────────────────
def test_char_to_symbol_ignores_case():
    assert char_to_symbol("A") == 0
    assert char_to_symbol("a") == 0
    assert char_to_symbol("z") == 25


def test_symbol_to_char_is_uppercase():
    assert [symbol_to_char(i) for i in range(26)] == list(ALPHABET)


@pytest.mark.parametrize("ch", ["1", " ", "!", "é", "ß", "ı", "", "AB"])
def test_non_letters_are_not_converted(ch):
    assert not is_az(ch)
    with pytest.raises(ValueError):
        char_to_symbol(ch)


def test_symbol_out_of_range():
    with pytest.raises(ValueError):
        symbol_to_char(26)


# ── tables ────────────────────────────────────────────────────────────────────
def test_identity_wiring():
    assert table_to_wiring(identity_table()) == ALPHABET


def test_table_from_wiring_swaps():
    table = table_from_wiring("BACDEFGHIJKLMNOPQRSTUVWXYZ")
    assert table[0] == 1 and table[1] == 0
    assert table[2:] == tuple(range(2, 26))


def test_table_from_lowercase_wiring():
    assert table_from_wiring(ALPHABET.lower()) == identity_table()


@pytest.mark.parametrize(
    "wiring",
    [
        "ABC",
        ALPHABET + "A",
        "AACDEFGHIJKLMNOPQRSTUVWXYZ",
        "ABCDEFGHIJKLMNOPQRSTUVWXY1",
    ],
)
def test_bad_wiring_rejected(wiring):
    with pytest.raises(ConfigError) as exc:
        table_from_wiring(wiring)
    assert exc.value.kind is ErrorKind.INVALID_WIRING


def test_invert_table():
    # C->A, A->B, B->C inverts to A->C, B->A, C->B
    table = table_from_wiring("CABDEFGHIJKLMNOPQRSTUVWXYZ")
    assert table_to_wiring(invert_table(table)) == "BCADEFGHIJKLMNOPQRSTUVWXYZ"


def test_permutation_and_involution_checks():
    swap = table_from_wiring("BACDEFGHIJKLMNOPQRSTUVWXYZ")
    cycle = table_from_wiring("CABDEFGHIJKLMNOPQRSTUVWXYZ")
    assert is_permutation(swap) and is_involution(swap)
    assert is_permutation(cycle) and not is_involution(cycle)
    assert not is_permutation((0,) * 26)
