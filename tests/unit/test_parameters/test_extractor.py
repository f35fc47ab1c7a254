"""Tests for named placeholder extraction."""

import pytest

from sqlpilot.parameters import NAMED_PLACEHOLDER_REGEX, ParameterExtractor, ParameterInfo


@pytest.fixture
def extractor() -> ParameterExtractor:
    return ParameterExtractor()


@pytest.mark.parametrize(
    ("sql", "expected_names"),
    [
        ("SELECT * FROM users WHERE name = :name", ["name"]),
        ("SELECT * FROM users WHERE name = :name AND age = :age", ["name", "age"]),
        ("SELECT :_private, :snake_case, :camelCase, :UPPER", ["_private", "snake_case", "camelCase", "UPPER"]),
        ("SELECT :1, :2", ["1", "2"]),
        ("SELECT :a:b", ["a", "b"]),
        ("SELECT :x::text", ["x", "text"]),
        ("SELECT * FROM users", []),
        ("SELECT * FROM users WHERE id = ?", []),
        ("SELECT : FROM t", []),
        ("SELECT @name, $name, %(name)s", []),
        ("SELECT :ключ", []),
    ],
    ids=[
        "single",
        "multiple",
        "identifier_shapes",
        "digits",
        "adjacent",
        "cast",
        "none",
        "qmark",
        "bare_colon",
        "other_named_styles",
        "non_ascii",
    ],
)
def test_extract_names(extractor: ParameterExtractor, sql: str, expected_names: list[str]) -> None:
    assert [p.name for p in extractor.extract_parameters(sql)] == expected_names


def test_extract_positions_and_ordinals(extractor: ParameterExtractor) -> None:
    sql = "UPDATE t SET a = :a WHERE id = :id"

    params = extractor.extract_parameters(sql)

    assert params == [
        ParameterInfo(name="a", position=17, ordinal=0, placeholder_text=":a"),
        ParameterInfo(name="id", position=31, ordinal=1, placeholder_text=":id"),
    ]
    for param in params:
        assert sql[param.position : param.end] == param.placeholder_text


def test_longest_match_is_taken(extractor: ParameterExtractor) -> None:
    (param,) = extractor.extract_parameters("WHERE id = :user_id_2 ")

    assert param.name == "user_id_2"
    assert param.placeholder_text == ":user_id_2"


def test_repeated_names_are_reported_each_time(extractor: ParameterExtractor) -> None:
    params = extractor.extract_parameters(":x + :x + :x")

    assert [p.ordinal for p in params] == [0, 1, 2]
    assert {p.name for p in params} == {"x"}


def test_count_and_presence(extractor: ParameterExtractor) -> None:
    assert extractor.count_parameters(":a :b :a") == 3
    assert extractor.count_parameters("SELECT 1") == 0
    assert extractor.has_parameters("WHERE x = :x") is True
    assert extractor.has_parameters("WHERE x = ?") is False


def test_parameter_names_deduplicated_in_order(extractor: ParameterExtractor) -> None:
    assert extractor.parameter_names("SELECT :b, :a, :b, :c, :a") == ["b", "a", "c"]


def test_regex_is_ascii_only() -> None:
    match = NAMED_PLACEHOLDER_REGEX.search(":naïve")

    assert match is not None
    assert match.group("name") == "na"
