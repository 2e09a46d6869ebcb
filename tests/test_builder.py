"""Tests for rule construction and transition decoding."""

from __future__ import annotations

import pytest

from nulexgen.builder import bygroups, include, rule, transition_for
from nulexgen.definition import Include, MatchMultiple, MatchSingle, Pop, Push
from nulexgen.tokens import TokenType


class TestTransitionFor:
    def test_none_is_no_transition(self) -> None:
        assert transition_for(None) is None

    def test_empty_string_pops(self) -> None:
        assert transition_for("") == Pop(1)

    def test_name_pushes(self) -> None:
        assert transition_for("interpolation") == Push("interpolation")


class TestSingleTokenRule:
    def test_variable_rule(self) -> None:
        r = rule(r"\$\w+", TokenType.NAME_VARIABLE)
        assert isinstance(r, MatchSingle)
        assert r.pattern == r"\$\w+"
        assert r.token is TokenType.NAME_VARIABLE
        assert r.transition is None

    def test_push(self) -> None:
        r = rule(r"\(", TokenType.LITERAL_STRING_INTERPOL, "interpolation")
        assert r.transition == Push("interpolation")

    def test_pop(self) -> None:
        r = rule(r"\)", TokenType.LITERAL_STRING_INTERPOL, "")
        assert r.transition == Pop(1)

    def test_rejects_plain_string_token(self) -> None:
        with pytest.raises(TypeError):
            rule("x", "Keyword")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        r = rule("x", TokenType.TEXT)
        with pytest.raises(AttributeError):
            r.pattern = "y"  # type: ignore[misc]


class TestByGroupsRule:
    def test_function_definition_head(self) -> None:
        r = bygroups(
            r"(def|alias)(\s+)(\w+)",
            TokenType.KEYWORD,
            TokenType.TEXT_WHITESPACE,
            TokenType.NAME_FUNCTION,
        )
        assert isinstance(r, MatchMultiple)
        assert r.tokens == (
            TokenType.KEYWORD,
            TokenType.TEXT_WHITESPACE,
            TokenType.NAME_FUNCTION,
        )
        assert r.transition is None

    def test_transition_allowed(self) -> None:
        r = bygroups(r"(a)(b)", TokenType.TEXT, TokenType.TEXT, state="data")
        assert r.transition == Push("data")

    def test_rejects_plain_string_token(self) -> None:
        with pytest.raises(TypeError):
            bygroups("(a)", "Text")  # type: ignore[arg-type]


class TestInclude:
    def test_include(self) -> None:
        r = include("root")
        assert r == Include("root")
        assert not hasattr(r, "token")
        assert not hasattr(r, "transition")
