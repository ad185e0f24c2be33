import string

import pytest

from ftkit.chars import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)


def test_isalpha_accepts_all_letters():
    assert all(isalpha(ch) for ch in string.ascii_letters)


def test_isalpha_rejects_digits_and_punctuation():
    assert not any(isalpha(ch) for ch in string.digits + string.punctuation)


def test_isalpha_accepts_integer_codes():
    assert isalpha(ord("q"))
    assert not isalpha(ord("@"))
    assert not isalpha(ord("["))


def test_isdigit_accepts_only_digits():
    assert all(isdigit(ch) for ch in string.digits)
    assert not any(isdigit(ch) for ch in string.ascii_letters + " /:")


def test_isalnum_is_union_of_alpha_and_digit():
    for code in range(-5, 300):
        assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_isascii_bounds():
    assert isascii(0)
    assert isascii(127)
    assert not isascii(128)
    assert not isascii(-1)


def test_isprint_bounds():
    assert isprint(32)
    assert isprint(126)
    assert not isprint(31)
    assert not isprint(127)


def test_isprint_matches_printable_set_without_whitespace_controls():
    visible = string.ascii_letters + string.digits + string.punctuation + " "
    assert all(isprint(ch) for ch in visible)
    assert not any(isprint(ch) for ch in "\t\n\r\x0b\x0c")


def test_toupper_maps_lowercase_alphabet():
    assert "".join(toupper(ch) for ch in string.ascii_lowercase) == string.ascii_uppercase


def test_tolower_maps_uppercase_alphabet():
    assert "".join(tolower(ch) for ch in string.ascii_uppercase) == string.ascii_lowercase


def test_case_conversion_with_integer_codes():
    assert toupper(ord("a")) == ord("A")
    assert tolower(ord("Z")) == ord("z")


@pytest.mark.parametrize("ch", list(string.digits + string.punctuation + " ") + [200, -3])
def test_case_conversion_leaves_non_letters(ch):
    assert toupper(ch) == ch
    assert tolower(ch) == ch


def test_case_conversion_roundtrip():
    for ch in string.ascii_letters:
        assert tolower(toupper(ch)) == tolower(ch)
        assert toupper(tolower(ch)) == toupper(ch)


def test_multi_character_string_is_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")
    with pytest.raises(ValueError):
        toupper("")


def test_non_integer_is_rejected():
    with pytest.raises(TypeError):
        isdigit(1.5)