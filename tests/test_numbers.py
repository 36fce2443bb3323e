import pytest

from ftkit.numbers import atoi, int_sqrt, itoa


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -42abc", -42),
        ("\t\n\v\f\r+7", 7),
        ("   123   456", 123),
        ("-0", 0),
    ],
)
def test_atoi_reads_leading_number(text, expected):
    assert atoi(text) == expected


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0


def test_atoi_accepts_single_sign_only():
    assert atoi("-+5") == 0
    assert atoi("+-5") == 0


def test_atoi_large_values_are_not_truncated():
    big = 10**30
    assert atoi(str(big)) == big


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 2147483647, -2147483648])
def test_itoa_round_trips_through_atoi(n):
    assert atoi(itoa(n)) == n


def test_itoa_negative_has_leading_minus():
    result = itoa(-5)
    assert result.startswith("-")
    assert result[1:] == itoa(5)


def test_itoa_rejects_non_integers():
    with pytest.raises(TypeError):
        itoa("5")
    with pytest.raises(TypeError):
        itoa(True)


@pytest.mark.parametrize("nb", [0, -1, -100])
def test_int_sqrt_non_positive_is_zero(nb):
    assert int_sqrt(nb) == 0


def test_int_sqrt_perfect_square_is_one_below_root():
    assert int_sqrt(4) == 1
    assert int_sqrt(1) == 0


@pytest.mark.parametrize("nb", list(range(1, 200)) + [10**6, 2147483647])
def test_int_sqrt_invariant(nb):
    m = int_sqrt(nb)
    assert m * (m + 1) <= nb
    assert (m + 1) * (m + 2) > nb