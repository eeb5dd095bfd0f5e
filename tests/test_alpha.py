import pytest

from stkit.alpha import adjust_alpha, adjust_unfocused_alpha, clamp


@pytest.mark.parametrize("value, expected", [(-0.5, 0.0), (0.3, 0.3), (1.7, 1.0)])
def test_clamp(value, expected):
    assert clamp(value, 0.0, 1.0) == expected


def test_adjust_alpha_adds_delta():
    assert adjust_alpha(0.5, 0.25, 0.8) == pytest.approx(0.75)


def test_adjust_alpha_zero_delta_resets():
    assert adjust_alpha(0.2, 0, 0.8) == 0.8


def test_adjust_alpha_is_clamped():
    assert adjust_alpha(0.95, 0.25, 0.8) == 1.0
    assert adjust_alpha(0.1, -0.25, 0.8) == 0.0


def test_adjust_unfocused_disabled_stays():
    assert adjust_unfocused_alpha(-1, 0.25, 0.6) == -1


def test_adjust_unfocused_changes():
    assert adjust_unfocused_alpha(0.5, -0.25, 0.6) == pytest.approx(0.25)
    assert adjust_unfocused_alpha(0.5, 0, 0.6) == 0.6