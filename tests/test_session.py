import logging

import pytest

from rotorcipher.batch.common import format_groups
from rotorcipher.batch.config import load_default_config
from rotorcipher.batch.session import SessionHeader, apply_header, log_step, parse_header, process_lines
from rotorcipher.core.errors import InvalidConfiguration, InvalidSetting


@pytest.fixture
def machine():
    return load_default_config().build_machine()


def test_parse_header_full():
    header = parse_header("* B Beta III IV I AXLE BCDE (HQ) (EX) (IP)", 5)
    assert header == SessionHeader(
        rotors=("B", "Beta", "III", "IV", "I"),
        setting="AXLE",
        rings="BCDE",
        plugboard="(HQ) (EX) (IP)",
    )


def test_parse_header_minimal():
    header = parse_header("*B Beta III IV I AXLE", 5)
    assert header.rotors[0] == "B"
    assert header.rings is None
    assert header.plugboard == ""


@pytest.mark.parametrize(
    "line",
    ["B Beta III IV I AXLE", "* B Beta III IV I", "* B Beta III IV I AXLE AAAA EXTRA"],
)
def test_parse_header_errors(line):
    with pytest.raises(InvalidConfiguration):
        parse_header(line, 5)


def test_thin_reflector_with_beta_at_a_matches_three_rotor_machine(machine):
    apply_header(machine, parse_header("* B Beta I II III AAAA", 5))
    assert machine.convert("AAAAA") == "BDZGO"


def test_header_rings(machine):
    apply_header(machine, parse_header("* B Beta I II III AAAA ABBB", 5))
    assert machine.convert("AAAAA") == "EWTYX"


def test_apply_header_rejects_bad_setting(machine):
    with pytest.raises(InvalidSetting):
        apply_header(machine, parse_header("* B Beta I II III AAA", 5))


@pytest.mark.parametrize(
    "line",
    [
        "* C Gamma VI VII VIII AAA (XY)",
        "* C Gamma VI VII VIII AA1A (XY)",
        "* C Gamma VI VII VIII AAAA AAA (XY)",
        "* C Gamma VI VII VIII AAAA AAA? (XY)",
    ],
)
def test_rejected_header_keeps_previous_session(machine, line):
    apply_header(machine, parse_header("* B Beta I II III AAAA (AB)", 5))
    machine.convert("AAA")
    assert machine.positions() == "AAAD"

    with pytest.raises(InvalidSetting):
        apply_header(machine, parse_header(line, 5))

    assert machine.rotor_names() == ["B", "Beta", "I", "II", "III"]
    assert machine.positions() == "AAAD"
    assert str(machine.plugboard) == "(AB)"


def test_process_lines_round_trip(machine):
    plain = ["* B Gamma VIII VII VI QWER (AZ) (BY) (CX)", "HELLO WORLD", "", "ATTACK AT DAWN"]
    encrypted = list(process_lines(machine, plain))
    assert encrypted[1] == ""
    assert [len(g) for g in encrypted[0].split()] == [5, 5]
    assert [len(g) for g in encrypted[2].split()] == [5, 5, 2]

    cipher = [plain[0], encrypted[0], "", encrypted[2]]
    decrypted = list(process_lines(load_default_config().build_machine(), cipher))
    assert decrypted == ["HELLO WORLD", "", "ATTAC KATDA WN"]


def test_each_header_starts_a_new_session(machine):
    lines = ["* B Beta I II III AAAA", "AAAAA", "* B Beta I II III AAAA", "AAAAA"]
    assert list(process_lines(machine, lines)) == ["BDZGO", "BDZGO"]


def test_message_before_header(machine):
    with pytest.raises(InvalidConfiguration):
        list(process_lines(machine, ["HELLO"]))


def test_log_step_traces_conversion(caplog):
    machine = load_default_config().build_machine(observer=log_step)
    apply_header(machine, parse_header("* B Beta I II III AAAA", 5))
    with caplog.at_level(logging.DEBUG, logger="rotorcipher.batch.session"):
        machine.convert("A")
    assert "[AAAB] A -> A -> B" in caplog.text


@pytest.mark.parametrize(
    "text,expected",
    [("ABCDEFG", "ABCDE FG"), ("HELLO WORLD", "HELLO WORLD"), ("AB CD EF", "ABCDE F"), ("", "")],
)
def test_format_groups(text, expected):
    assert format_groups(text) == expected
