import pytest

from healthsync.core.validation import is_valid_email, positive_float, round_half_up, to_float


@pytest.mark.parametrize("value, expected", [("1.5", 1.5), (2, 2.0), ("", None), (None, None), ("x", None), ("nan", None), ("inf", None)])
def test_to_float(value, expected):
    assert to_float(value) == expected


def test_positive_float():
    assert positive_float("0") is None
    assert positive_float(-1) is None
    assert positive_float("170") == 170.0


@pytest.mark.parametrize("email, ok", [("a@b.co", True), ("  a@b  ", True), ("ab.co", False), ("", False), (None, False)])
def test_is_valid_email(email, ok):
    assert is_valid_email(email) is ok


def test_round_half_up():
    assert round_half_up(2008.5) == 2009
    assert round_half_up(0.25, 1) == round_half_up("0.3", 1)
    assert round_half_up(16.33, 1) == round_half_up(16.3, 1)
