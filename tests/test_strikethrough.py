import pytest

from gfmext.strikethrough import (
    OutputFormat,
    accepts_delimiter_run,
    delimiters_match,
    markup,
)


def test_double_tilde_accepted_when_flanking():
    assert accepts_delimiter_run(2, True, False, double_tilde_only=False)
    assert accepts_delimiter_run(2, False, True, double_tilde_only=True)


def test_single_tilde_depends_on_option():
    assert accepts_delimiter_run(1, True, True, double_tilde_only=False)
    assert not accepts_delimiter_run(1, True, True, double_tilde_only=True)


@pytest.mark.parametrize("length", [0, 3, 4, 100])
def test_other_lengths_rejected(length):
    assert not accepts_delimiter_run(length, True, True, double_tilde_only=False)


def test_non_flanking_rejected():
    assert not accepts_delimiter_run(2, False, False, double_tilde_only=False)


def test_delimiters_match():
    assert delimiters_match(2, 2)
    assert delimiters_match(1, 1)
    assert not delimiters_match(1, 2)


def test_html_markup():
    assert markup(OutputFormat.HTML, True) == "<del>"
    assert markup(OutputFormat.HTML, False) == "</del>"


def test_latex_markup():
    assert markup(OutputFormat.LATEX, True) == "\\sout{"
    assert markup(OutputFormat.LATEX, False) == "}"


def test_symmetric_formats():
    for fmt in (OutputFormat.COMMONMARK, OutputFormat.PLAINTEXT):
        assert markup(fmt, True) == markup(fmt, False)
    assert markup("commonmark", True) == "~~"
    assert markup("plaintext", False) == "~"


def test_man_markup_breaks_lines():
    opening = markup(OutputFormat.MAN, True)
    closing = markup(OutputFormat.MAN, False)
    assert opening.startswith("\n")
    assert '.ST "' in opening
    assert closing.endswith("\n")
    assert closing.strip() == '"'


def test_unknown_format():
    with pytest.raises(ValueError):
        markup("rtf", True)