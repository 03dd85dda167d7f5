"""Tests for the argument tokenizer."""

import pytest

from edutrack.application.parser import ParseError, Prefix, tokenize

P_SLASH = Prefix("p/")
DASH_T = Prefix("-t")
HAT_Q = Prefix("^Q")


def test_no_prefixes_whole_string_is_preamble():
    argmap = tokenize("  some random string /t tag with leading and trailing spaces ")
    assert argmap.get_preamble() == "some random string /t tag with leading and trailing spaces"
    assert argmap.get_value(P_SLASH) is None


def test_empty_arguments():
    argmap = tokenize("", P_SLASH)
    assert argmap.get_preamble() == ""
    assert argmap.get_value(P_SLASH) is None
    assert argmap.get_all_values(P_SLASH) == []


def test_one_prefix():
    argmap = tokenize(" Some preamble string p/ Argument value ", P_SLASH)
    assert argmap.get_preamble() == "Some preamble string"
    assert argmap.get_value(P_SLASH) == "Argument value"


def test_only_prefix_no_preamble():
    argmap = tokenize(" p/   Argument value ", P_SLASH)
    assert argmap.get_preamble() == ""
    assert argmap.get_value(P_SLASH) == "Argument value"


def test_multiple_prefixes_in_any_order():
    argmap = tokenize("SomePreamble p/ pSlash joined-tjoined -t not joined^Qjoined", P_SLASH, DASH_T, HAT_Q)
    assert argmap.get_preamble() == "SomePreamble"
    assert argmap.get_value(P_SLASH) == "pSlash joined-tjoined"
    assert argmap.get_value(DASH_T) == "not joined^Qjoined"
    assert argmap.get_value(HAT_Q) is None

    argmap = tokenize("Different Preamble String ^Q111 -t dashT-Value p/pSlash value", P_SLASH, DASH_T, HAT_Q)
    assert argmap.get_preamble() == "Different Preamble String"
    assert argmap.get_value(HAT_Q) == "111"
    assert argmap.get_value(DASH_T) == "dashT-Value"
    assert argmap.get_value(P_SLASH) == "pSlash value"


def test_empty_value_is_kept():
    argmap = tokenize("1 p/", P_SLASH)
    assert argmap.get_preamble() == "1"
    assert argmap.get_value(P_SLASH) == ""


def test_repeated_prefix_values_in_order():
    argmap = tokenize("SomePreamble p/first -t dashT p/second p/third", P_SLASH, DASH_T)
    assert argmap.get_value(P_SLASH) == "third"
    assert argmap.get_all_values(P_SLASH) == ["first", "second", "third"]


def test_prefix_not_preceded_by_whitespace_is_ignored():
    argmap = tokenize("1 a/http://x.com/p/ignored p/kept", P_SLASH)
    assert argmap.get_preamble() == "1 a/http://x.com/p/ignored"
    assert argmap.get_value(P_SLASH) == "kept"


def test_prefix_at_start_of_string():
    argmap = tokenize("p/value", P_SLASH)
    assert argmap.get_preamble() == ""
    assert argmap.get_value(P_SLASH) == "value"


def test_unrecognized_prefix_stays_in_value():
    argmap = tokenize("1 p/one x/two", P_SLASH)
    assert argmap.get_value(P_SLASH) == "one x/two"


def test_verify_no_duplicate_prefixes():
    argmap = tokenize("p/a p/b -t c", P_SLASH, DASH_T)
    argmap.verify_no_duplicate_prefixes_for(DASH_T)
    with pytest.raises(ParseError) as exc:
        argmap.verify_no_duplicate_prefixes_for(P_SLASH, DASH_T)
    assert "p/" in str(exc.value)
    assert "-t" not in str(exc.value)
