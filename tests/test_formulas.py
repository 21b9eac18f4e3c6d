import pytest

from boxgame.scoring.formulas import cantor_pairing, mean


def test_mean_empty_is_zero():
    assert mean([]) == 0.0


def test_mean_basic():
    assert mean([1.0, 2.0]) == 1.5
    assert mean((2, 3, 4)) == 3.0


def test_cantor_pairing_reference_point():
    assert cantor_pairing(0, 1) == 2


def test_cantor_pairing_values():
    assert cantor_pairing(2, 2) == 12.0
    assert cantor_pairing(2, 3) == 18.0
    assert cantor_pairing(0, 0) == 0.0
    assert cantor_pairing(0.5, 1.5) == pytest.approx(4.5)
