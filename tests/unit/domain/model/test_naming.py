"""Tests for domain/model/naming.py."""

import math
import re
from fractions import Fraction

import pytest

from sigensure.domain.model.naming import (
    class_display_name,
    describe_value,
    is_nan,
    is_number,
    join_alternatives,
    with_article,
)
from sigensure.domain.model.sentinels import UNDEFINED
from tests.factories import MyClass, NoName


class TestWithArticle:
    """Tests for with_article."""

    @pytest.mark.parametrize(
        ("noun", "expected"),
        [
            ("string", "a string"),
            ("object", "an object"),
            ("array", "an array"),
            ("Elephant instance", "an Elephant instance"),
            ("<anon> instance", "an <anon> instance"),
            ("MyClass instance", "a MyClass instance"),
        ],
    )
    def test_article(self, noun: str, expected: str) -> None:
        assert with_article(noun) == expected


class TestClassDisplayName:
    """Tests for class_display_name."""

    def test_named(self) -> None:
        assert class_display_name("MyClass") == "a MyClass instance"

    def test_anonymous(self) -> None:
        assert class_display_name(None) == "an <anon> instance"
        assert class_display_name("") == "an <anon> instance"


class TestJoinAlternatives:
    """Tests for join_alternatives."""

    def test_single(self) -> None:
        assert join_alternatives(["a string"]) == "a string"

    def test_two(self) -> None:
        assert join_alternatives(["undefined", "an object"]) == "undefined or an object"

    def test_three_uses_serial_comma(self) -> None:
        names = ["a string", "a boolean", "a MyClass instance"]
        assert join_alternatives(names) == "a string, a boolean, or a MyClass instance"

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            join_alternatives([])


class TestNumberChecks:
    """Tests for is_nan and is_number."""

    def test_is_nan(self) -> None:
        assert is_nan(math.nan) is True
        assert is_nan(1.0) is False
        assert is_nan("nan") is False

    @pytest.mark.parametrize("value", [0, 1, -3.5, Fraction(1, 3)])
    def test_numbers(self, value: object) -> None:
        assert is_number(value) is True

    @pytest.mark.parametrize("value", [True, False, math.nan, "1", None, 1j])
    def test_not_numbers(self, value: object) -> None:
        assert is_number(value) is False


class TestDescribeValue:
    """Tests for describe_value."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (UNDEFINED, "undefined"),
            (None, "null"),
            (math.nan, "NaN"),
            (False, "a boolean"),
            (42, "a number"),
            (4.2, "a number"),
            ("foo", "a string"),
            (re.compile("foo"), "a regular expression"),
            ({}, "an object"),
            ([], "an array"),
            ((1, 2), "an array"),
            (len, "a function"),
            (lambda: None, "a function"),
            (MyClass(), "a MyClass instance"),
            (NoName(), "an <anon> instance"),
        ],
    )
    def test_describe(self, value: object, expected: str) -> None:
        assert describe_value(value) == expected
