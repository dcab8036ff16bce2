import pytest

from rotorcipher.core.errors import InvalidConfiguration, NotInAlphabet
from rotorcipher.core.permutation import Permutation
from rotorcipher.core.rotor import Rotor, RotorKind

ROTOR_I = "EKMFLGDQVZNTOWYHXUSPAIBRCJ"


@pytest.fixture
def rotor_i(upper):
    return Rotor("I", RotorKind.MOVING, Permutation.from_mapping(ROTOR_I, upper), frozenset("Q"))


def test_convert_at_zero_setting(rotor_i, upper):
    assert rotor_i.convert_forward(upper.to_int("A")) == upper.to_int("E")
    assert rotor_i.convert_backward(upper.to_int("E")) == upper.to_int("A")


def test_convert_accounts_for_position(rotor_i, upper):
    rotor_i.set("B")
    assert rotor_i.setting == 1
    assert upper.to_char(rotor_i.convert_forward(upper.to_int("A"))) == "J"
    assert upper.to_char(rotor_i.convert_backward(upper.to_int("J"))) == "A"


def test_convert_accounts_for_ring(rotor_i, upper):
    rotor_i.set_ring("B")
    assert upper.to_char(rotor_i.convert_forward(upper.to_int("A"))) == "K"
    # equal position and ring cancel out
    rotor_i.set("B")
    assert upper.to_char(rotor_i.convert_forward(upper.to_int("A"))) == "E"


def test_forward_and_backward_are_inverse(rotor_i):
    for pos in range(26):
        rotor_i.set(pos)
        rotor_i.set_ring(pos * 7)
        for p in range(26):
            assert rotor_i.convert_backward(rotor_i.convert_forward(p)) == p


def test_moving_rotor_notch_and_advance(rotor_i):
    rotor_i.set("P")
    assert not rotor_i.at_notch()
    rotor_i.advance()
    assert rotor_i.at_notch()
    rotor_i.set("Z")
    rotor_i.advance()
    assert rotor_i.setting == 0


def test_fixed_and_reflector_never_move(upper):
    perm = Permutation("(AB)(CD)", upper)
    fixed = Rotor("F", RotorKind.FIXED, perm)
    refl = Rotor("R", RotorKind.REFLECTOR, perm)
    for rotor in (fixed, refl):
        rotor.set("C")
        rotor.advance()
        assert rotor.setting == 2
        assert not rotor.at_notch()
        assert not rotor.rotates()
    assert refl.reflecting()
    assert not fixed.reflecting()
    refl.set_ring("D")
    assert refl.ring == 3


def test_notch_validation(upper):
    perm = Permutation("", upper)
    with pytest.raises(InvalidConfiguration):
        Rotor("F", RotorKind.FIXED, perm, frozenset("A"))
    with pytest.raises(NotInAlphabet):
        Rotor("M", RotorKind.MOVING, perm, frozenset("a"))


def test_kind_codes():
    assert RotorKind.from_code("m") is RotorKind.MOVING
    assert RotorKind.from_code("N") is RotorKind.FIXED
    assert RotorKind.REFLECTOR.code == "R"
    with pytest.raises(InvalidConfiguration):
        RotorKind.from_code("X")
