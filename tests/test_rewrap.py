import pytest

from ffconf.rewrap import columns, rewrap, rewrap_at

WORDS = "alpha beta\ngamma delta epsilon\nzeta eta theta iota\nkappa lambda mu"

WORDS_AT_20 = "alpha beta gamma\ndelta epsilon zeta\neta theta iota kappa\nlambda mu"

WORDS_AT_40 = "alpha beta gamma delta epsilon zeta eta\ntheta iota kappa lambda mu"

PARAGRAPHS = "alpha beta gamma delta\n\nepsilon zeta eta theta iota kappa lambda mu"

PARAGRAPHS_AT_20 = "alpha beta gamma\ndelta\n\nepsilon zeta eta\ntheta iota kappa\nlambda mu"

PARAGRAPHS_AT_40 = "alpha beta gamma delta\n\nepsilon zeta eta theta iota kappa lambda\nmu"

PARAGRAPHS_SPLIT = "alpha beta\ngamma delta\n\n\n\nepsilon zeta eta\ntheta iota kappa lambda mu"

PARAGRAPHS_INDENT = "\talpha beta\n\tgamma delta\n\n\tepsilon zeta eta\n\ttheta iota kappa lambda mu"


@pytest.mark.parametrize(
    "text, width, want",
    [
        (WORDS, 20, WORDS_AT_20),
        (WORDS, 40, WORDS_AT_40),
        (WORDS_AT_20, 40, WORDS_AT_40),
        (WORDS_AT_40, 20, WORDS_AT_20),
        (PARAGRAPHS, 20, PARAGRAPHS_AT_20),
        (PARAGRAPHS, 40, PARAGRAPHS_AT_40),
        (PARAGRAPHS_AT_20, 40, PARAGRAPHS_AT_40),
        (PARAGRAPHS_SPLIT, 40, PARAGRAPHS_AT_40),
        (PARAGRAPHS_INDENT, 20, PARAGRAPHS_AT_20),
    ],
)
def test_rewrap_at(text, width, want):
    assert rewrap_at(text, width) == want


def test_rewrap_at_empty():
    assert rewrap_at("", 80) == ""


def test_rewrap_at_field_longer_than_width_starts_new_line():
    assert rewrap_at("abcdef", 3) == "\nabcdef"


def test_rewrap_at_lines_fit_width():
    text = " ".join([WORDS] * 3)
    for line in rewrap_at(text, 12).split("\n"):
        assert len(line) <= 12


def test_columns_is_stable_and_positive():
    first = columns()
    assert first > 0
    assert columns() == first


def test_rewrap_keeps_words_and_paragraphs():
    result = rewrap(PARAGRAPHS)
    assert result.split() == PARAGRAPHS.split()
    assert result.count("\n\n") == 1