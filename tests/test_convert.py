import pytest

from ftkit.convert import atodbl, atoi, count_digits, itoa

NUMBERS = [0, 1, -1, 7, 10, -10, 42, 999, -1000, 2147483647, -2147483648]


@pytest.mark.parametrize("n", NUMBERS)
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


@pytest.mark.parametrize("n", NUMBERS)
def test_itoa_matches_int_parsing(n):
    assert int(itoa(n)) == n


@pytest.mark.parametrize("n", NUMBERS)
def test_count_digits_is_text_length(n):
    assert count_digits(n) == len(itoa(n))


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"
    assert count_digits(0) == 1


def test_itoa_rejects_float():
    with pytest.raises(TypeError):
        itoa(1.5)


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42abc") == -42


def test_atoi_plus_sign():
    assert atoi("+17") == 17


@pytest.mark.parametrize("text", ["+-5", "--5", "abc", "", "   "])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_stops_at_nul():
    assert atoi("12\x0034") == 12


def test_atoi_bytes():
    assert atoi(b"  256") == 256


@pytest.mark.parametrize("text", ["12.5", "-3.25", "0.5", "100"])
def test_atodbl_plain_numbers(text):
    assert atodbl(text) == pytest.approx(float(text))


def test_atodbl_sign_runs():
    assert atodbl("--7") == 7.0
    assert atodbl("-+-+-2.5") == -2.5


def test_atodbl_whitespace():
    assert atodbl(" \n+0.5") == 0.5


def test_atodbl_empty_is_zero():
    assert atodbl("") == 0.0


def test_atodbl_leading_dot():
    assert atodbl(".25") == pytest.approx(0.25)


def test_atodbl_symmetry():
    assert atodbl("-8.75") == -atodbl("8.75")