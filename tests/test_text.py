import string

import pytest

from codekata.text import capitalize_sentences, letter_frequency, parse_decimal


def test_letter_frequency_has_every_letter_in_order():
    counts = letter_frequency("")
    assert list(counts) == list(string.ascii_lowercase)
    assert sum(counts.values()) == 0


def test_letter_frequency_counts_only_lowercase():
    text = "Hello World, abc!"
    counts = letter_frequency(text)
    assert sum(counts.values()) == sum(1 for c in text if c in string.ascii_lowercase)
    assert counts["l"] == text.count("l")
    assert counts["h"] == text.count("h")


def test_capitalize_sentences_after_dots():
    assert capitalize_sentences("hello.world") == "Hello.World"


def test_capitalize_sentences_only_directly_after_dot():
    assert capitalize_sentences("a. b") == "A. b"


def test_capitalize_sentences_keeps_length_and_empty():
    text = "one.two.three"
    result = capitalize_sentences(text)
    assert len(result) == len(text)
    assert result.lower() == text
    assert capitalize_sentences("") == ""


def test_capitalize_sentences_trailing_dot():
    assert capitalize_sentences("end.") == "End."


@pytest.mark.parametrize("value", [0.5, 3.25, 12.0, 99.125])
def test_parse_decimal_round_trip(value):
    assert parse_decimal(f"{value:.3f}") == pytest.approx(value)


def test_parse_decimal_without_fraction_digits():
    assert parse_decimal("7.") == pytest.approx(7.0)


@pytest.mark.parametrize("bad", ["12", "1a.5", "", "1.2.3"])
def test_parse_decimal_rejects_bad_input(bad):
    with pytest.raises(ValueError):
        parse_decimal(bad)