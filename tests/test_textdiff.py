import pytest

from ffconf.textdiff import diff_string, unindent_string


def _side(diff, keep):
    lines = diff[1:].split("\n")
    return [line[2:] for line in lines if line[:2] in keep]


def test_unindent_strips_tabs_by_default():
    text = "\n\t\tNAME\n\t\t  fftest\n\n\t\tFLAGS\n"
    assert unindent_string(text) == "NAME\n  fftest\n\nFLAGS"


def test_unindent_with_prefixes():
    text = "    alpha\n    beta\n  gamma"
    assert unindent_string(text, "  ", "  ") == "alpha\nbeta\ngamma"


def test_unindent_prefix_applied_once_per_argument():
    assert unindent_string("x\n....y", "..") == "x\n..y"


def test_diff_identical_has_no_changes():
    text = "one\ntwo\nthree"
    assert diff_string(text, text) == "\n"


def test_diff_single_line_change():
    result = diff_string("a", "b")
    lines = result[1:].split("\n")
    assert sorted(lines) == ["+ b", "- a"]


@pytest.mark.parametrize(
    "a, b",
    [
        ("a\nb\nc", "a\nx\nc"),
        ("a\nb\nc", "a\nb\nc\nd"),
        ("a\nb\nc\nd", "b\nd"),
        ("", "x\ny"),
        ("x\ny", ""),
        ("same\nfoo\nbar\nsame", "same\nbar\nfoo\nsame"),
    ],
)
def test_diff_reconstructs_both_sides(a, b):
    result = diff_string(a, b)
    assert result.startswith("\n")
    assert _side(result, ("- ", "  ")) == a.split("\n")
    assert _side(result, ("+ ", "  ")) == b.split("\n")


def test_diff_marks_common_lines_as_equal():
    result = diff_string("keep\nold", "keep\nnew")
    assert "  keep" in result[1:].split("\n")