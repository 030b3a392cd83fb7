from decimal import Decimal

import pytest

from proptree.translator import StreamTranslator, translator_for


@pytest.mark.parametrize("value", [0, 1, -1, 1824, -987654321, 10**30])
def test_int_round_trip(value):
    tr = StreamTranslator(int)
    assert tr.get_value(tr.put_value(value)) == value


@pytest.mark.parametrize("text,expected", [("42", 42), ("  42", 42), ("42 \n", 42), ("+7", 7), ("-0", 0)])
def test_int_whitespace_and_sign(text, expected):
    assert StreamTranslator(int).get_value(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "12abc", "1 2", "0x10", "- 5", "1.5", "abc"])
def test_int_rejects_garbage(text):
    assert StreamTranslator(int).get_value(text) is None


@pytest.mark.parametrize("value", [0.0, 0.1, -0.1, 123.142, 1.1e134, 1e-300, 3.0])
def test_float_round_trip_exact(value):
    tr = StreamTranslator(float)
    assert tr.get_value(tr.put_value(value)) == value


def test_float_uses_full_precision():
    assert StreamTranslator(float).put_value(0.1) == "0.10000000000000001"


@pytest.mark.parametrize("text,expected", [("1e+0", 1.0), ("1E-0", 1.0), ("-0.1", -0.1), (".5", 0.5), (" 2. ", 2.0)])
def test_float_parses_stream_forms(text, expected):
    assert StreamTranslator(float).get_value(text) == expected


@pytest.mark.parametrize("text", ["", "1e", "inf", "nan", "1_0", "1.0x", "e5"])
def test_float_rejects_garbage(text):
    assert StreamTranslator(float).get_value(text) is None


@pytest.mark.parametrize("text,expected", [("true", True), ("false", False), ("1", True), ("0", False), (" true ", True)])
def test_bool_reads_numeric_and_word(text, expected):
    assert StreamTranslator(bool).get_value(text) is expected


@pytest.mark.parametrize("text", ["2", "yes", "True", "", "truex"])
def test_bool_rejects_other(text):
    assert StreamTranslator(bool).get_value(text) is None


def test_bool_written_as_words():
    tr = StreamTranslator(bool)
    assert tr.put_value(True) == "true"
    assert tr.put_value(False) == "false"


def test_str_is_identity():
    tr = StreamTranslator(str)
    assert tr.get_value("  data  ") == "  data  "
    assert tr.put_value("abc") == "abc"


def test_generic_type_round_trip():
    tr = StreamTranslator(Decimal)
    value = Decimal("12.50")
    assert tr.get_value(tr.put_value(value)) == value


def test_generic_type_rejects_bad_text():
    assert StreamTranslator(Decimal).get_value("not a number") is None


def test_int_put_rejects_unconvertible():
    assert StreamTranslator(int).put_value("abc") is None


def test_translator_for_is_cached_and_typed():
    tr = translator_for(int)
    assert tr is translator_for(int)
    assert tr.type_ is int
    assert translator_for(float).get_value("1.5") == 1.5