from string import ascii_lowercase

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bojsolutions.strings import (
    echo_lines,
    first_occurrences,
    missing_isbn_digit,
    most_frequent_letter,
    repeat_characters,
)

lower_words = st.text(alphabet=ascii_lowercase, max_size=40)


@given(lower_words)
def test_first_occurrences_points_at_first_use(word):
    result = first_occurrences(word)
    assert len(result) == 26
    for letter, index in zip(ascii_lowercase, result):
        if letter in word:
            assert word[index] == letter
            assert letter not in word[:index]
        else:
            assert index == -1


def test_first_occurrences_rejects_uppercase():
    with pytest.raises(ValueError):
        first_occurrences("abC")


def test_most_frequent_letter_ignores_case():
    assert most_frequent_letter("zZa") == "Z"


def test_most_frequent_letter_tie():
    assert most_frequent_letter("ab") == "?"


@given(st.text(alphabet=ascii_lowercase, min_size=1, max_size=30))
def test_most_frequent_letter_case_insensitive(word):
    assert most_frequent_letter(word) == most_frequent_letter(word.upper())


@given(st.text(alphabet=ascii_lowercase, min_size=1, max_size=30))
def test_most_frequent_letter_is_strict_maximum(word):
    result = most_frequent_letter(word)
    lowered = word.lower()
    if result != "?":
        best = lowered.count(result.lower())
        assert all(lowered.count(c) < best for c in set(lowered) if c != result.lower())


def test_most_frequent_letter_rejects_digits():
    with pytest.raises(ValueError):
        most_frequent_letter("a1")


def test_echo_lines_stops_at_empty_line():
    assert echo_lines(["a", "b", "", "c"]) == ["a", "b"]


def test_echo_lines_strips_newlines():
    assert echo_lines(["x\n", "\n", "y\n"]) == ["x"]


@given(st.text(max_size=20), st.integers(min_value=0, max_value=8))
def test_repeat_characters_shape(text, times):
    result = repeat_characters(text, times)
    assert len(result) == len(text) * times
    if times:
        assert result[::times] == text


def test_repeat_characters_rejects_negative():
    with pytest.raises(ValueError):
        repeat_characters("abc", -1)


@pytest.mark.parametrize("position", range(13))
def test_missing_isbn_digit_recovers_every_position(position):
    isbn = "9780306406157"
    hidden = isbn[:position] + "*" + isbn[position + 1:]
    assert missing_isbn_digit(hidden) == int(isbn[position])


@given(
    st.text(alphabet="0123456789", min_size=13, max_size=13),
    st.integers(min_value=0, max_value=12),
    st.integers(min_value=0, max_value=12),
)
def test_missing_isbn_digit_completes_valid_code(raw, first, second):
    hidden = raw[:first] + "*" + raw[first + 1:]
    digit = missing_isbn_digit(hidden)
    complete = raw[:first] + str(digit) + raw[first + 1:]
    rehidden = complete[:second] + "*" + complete[second + 1:]
    assert missing_isbn_digit(rehidden) == int(complete[second])


@pytest.mark.parametrize("code", ["9780306406157", "97803064061**", "97803064061*", "97803064a61*7"])
def test_missing_isbn_digit_rejects_bad_codes(code):
    with pytest.raises(ValueError):
        missing_isbn_digit(code)