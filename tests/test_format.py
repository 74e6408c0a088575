import re

from kitbag.format import format_any


class Duration(int):
    pass


def test_int_and_int_subclass():
    assert format_any(1) == "1"
    assert format_any(Duration(1)) == "1"


def test_negative_int():
    assert format_any(-42) == "-42"


def test_bool():
    assert format_any(True) == "true"
    assert format_any(False) == "false"


def test_none_is_invalid():
    assert format_any(None) == "invalid"


def test_string_is_quoted():
    assert format_any("hi") == '"hi"'
    assert format_any('a "b"\n') == '"a \\"b\\"\\n"'
    assert format_any("h\u00e9\x00") == '"h\u00e9\\x00"'
    assert format_any("\u00a0") == '"\\u00a0"'


def test_reference_values_show_identity():
    first = [1]
    second = [1]
    text = format_any(first)
    assert re.fullmatch(r"list 0x[0-9a-f]+", text)
    assert format_any(first) == text
    assert format_any(second) != text


def test_function_is_reference():
    def fn():
        return None

    text = format_any(fn)
    kind, _, address = text.partition(" 0x")
    assert kind == "function"
    assert address.strip("0123456789abcdef") == ""
    assert format_any(fn) == text


def test_other_values_by_type():
    assert format_any((1, 2)) == "tuple value"
    assert format_any(1.5) == "float value"