from __future__ import annotations

from evoviz.parsing import csv_tokens, numeric_tokens, parse_values


def test_json_array_parses_to_exact_sequence() -> None:
    assert parse_values("[1, 2.5, -3, 1e3]") == [1.0, 2.5, -3.0, 1000.0]


def test_json_empty_array_clears_values() -> None:
    assert parse_values("[]") == []


def test_csv_keeps_only_numeric_tokens_in_order() -> None:
    text = "1,abc,2\nfoo,3.5\n\n-4,,x7,8"
    assert parse_values(text) == [1.0, 2.0, 3.5, -4.0, 8.0]


def test_csv_tokens_trim_whitespace() -> None:
    assert parse_values(" 1 , 2\n 3") == [1.0, 2.0, 3.0]


def test_csv_tokens_skip_empty_lines() -> None:
    assert csv_tokens("a,b\n\nc") == ["a", "b", "c"]


def test_non_finite_tokens_are_dropped() -> None:
    assert numeric_tokens(["inf", "nan", "5"]) == [5.0]


def test_empty_text_yields_empty_list() -> None:
    assert parse_values("") == []
    assert parse_values(None) == []


def test_valid_json_that_is_not_an_array_is_rejected() -> None:
    assert parse_values("42") is None
    assert parse_values('{"x": [1, 2]}') is None


def test_json_array_with_non_numbers_is_rejected() -> None:
    assert parse_values('[1, "two", 3]') is None
    assert parse_values("[true, 1]") is None


def test_unterminated_json_falls_back_to_csv() -> None:
    # "[1" and "2]" are not numbers once JSON parsing fails
    assert parse_values("[1, 2, 3]]") == [2.0]


def test_non_standard_json_constants_fall_back_to_csv() -> None:
    assert parse_values("NaN") == []
    assert parse_values("[NaN, 1]") == []
    assert parse_values("[1, Infinity]") == []
    assert parse_values("-Infinity, 4") == [4.0]


def test_deeply_nested_json_is_rejected() -> None:
    text = "[" * 100_000 + "]" * 100_000
    assert parse_values(text) is None


def test_oversized_csv_cell_is_rejected() -> None:
    assert parse_values('"' + "1" * 200_000) is None
