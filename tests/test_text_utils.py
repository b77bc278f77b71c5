from pathlib import Path

import pytest

from gluttony.data_types import KeyCode, SystemTime, Version
from gluttony.text_utils import (
    add_spaces,
    bool_to_str,
    count_lines,
    extract_after_marker,
    extract_part_after_delimiter,
    extract_part_before_delimiter,
    extract_variable_name,
    format_string,
    from_string,
    measure_indentation,
    remove_substring,
    str_to_bool,
    str_to_num,
    to_string,
    typename_to_string,
)
from gluttony.unique_id import UUID


def test_extract_variable_name_documented_example():
    assert extract_variable_name("object1->object2.variable") == "variable"


def test_extract_variable_name_without_delimiters():
    assert extract_variable_name("plain") == "plain"


def test_extract_after_and_before_split_the_text():
    text = "left.right"
    before = extract_part_before_delimiter(text, ".")
    after = extract_part_after_delimiter(text, ".")
    assert before + "." + after == text
    assert after == "right"


def test_extract_missing_delimiter_uses_default():
    assert extract_part_after_delimiter("abc", "/", default="keep") == "keep"
    assert extract_part_before_delimiter("abc", "/") == "abc"


def test_bool_strings():
    assert bool_to_str(True) == "true"
    assert bool_to_str(False) == "false"
    assert str_to_bool("true") is True
    assert str_to_bool("True") is False


def test_add_spaces_zero_is_empty():
    assert add_spaces(0, 4) == ""


@pytest.mark.parametrize("levels,width", [(1, 2), (3, 2), (2, 4), (5, 1)])
def test_indentation_round_trip(levels, width):
    assert measure_indentation(add_spaces(levels, width) + "x", width) == levels


def test_count_lines_empty_is_one():
    assert count_lines("") == 1


@pytest.mark.parametrize("text", ["a", "a\nb", "one\ntwo\nthree"])
def test_count_lines_short_text(text):
    assert count_lines(text) == len(text.split("\n"))


def test_extract_after_marker():
    assert extract_after_marker("/home/GLT/src/GLT/engine/file.cpp") == "engine/file.cpp"
    assert extract_after_marker("/home/GLT/engine/file.cpp") == ""


def test_remove_substring_removes_and_swaps_quotes():
    assert remove_substring("abcXYdef", "XY") == "abcdef"
    assert remove_substring('say "hi"', "zz") == "say 'hi'"


def test_remove_substring_empty_remove_keeps_text():
    assert remove_substring("text", "") == "text"


def test_str_to_num_prefix_and_failure():
    assert str_to_num("42abc", int) == 42
    assert str_to_num("abc", int) == 0
    assert str_to_num("-3.5x", float) == -3.5


def test_str_to_num_rejects_unknown_type():
    with pytest.raises(TypeError):
        str_to_num("1", list)


def test_typename_to_string():
    assert typename_to_string(Version) == "Version"


def test_format_string_stream_rules():
    assert format_string("a", 1, True) == "a11"


def test_float_uses_fixed_six_decimals():
    assert to_string(1.5) == "1.500000"


def test_enum_to_string_uses_value():
    assert to_string(KeyCode.key_A) == "65"
    assert from_string(to_string(KeyCode.key_A), KeyCode) is KeyCode.key_A


@pytest.mark.parametrize("value,kind", [
    (Version(1, 2, 3), Version),
    (SystemTime(2025, 3, 14, 5, 9, 26, 53, 589), SystemTime),
    (Path("some/dir/file.yml"), Path),
    (UUID(123456789), UUID),
    ("line one\nline two", str),
    (True, bool),
    (False, bool),
    (17, int),
])
def test_round_trip(value, kind):
    assert from_string(to_string(value), kind) == value


def test_string_newlines_are_escaped():
    assert "\n" not in to_string("a\nb")


def test_vector_round_trip():
    vec = (1.5, -2.0, 0.25)
    assert from_string(to_string(vec), tuple) == vec


def test_vec4_has_four_decimals():
    parts = to_string((1, 2, 3, 4)).split()
    assert len(parts) == 4
    assert all(len(p.split(".")[1]) == 4 for p in parts)


def test_matrix_round_trip_flattens():
    matrix = [[float(r * 4 + c) for c in range(4)] for r in range(4)]
    flat = tuple(v for row in matrix for v in row)
    assert from_string(to_string(matrix), tuple) == flat


def test_unsupported_types_raise():
    with pytest.raises(TypeError):
        to_string(object())
    with pytest.raises(TypeError):
        from_string("x", dict)