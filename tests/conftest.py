"""Shared test fixtures and helpers."""

from __future__ import annotations

import re

import pytest

from nulexgen.definition import LexerDefinition, MatchMultiple, MatchSingle
from nulexgen.lexer import generate_lexer
from nulexgen.tokens import TokenType
from nulexgen.validate import flatten_rules


@pytest.fixture
def lexer() -> LexerDefinition:
    """The default generated lexer definition."""
    return generate_lexer()


@pytest.fixture
def classify(lexer):
    """Return a helper giving the rule that wins first-match at the start of text.

    Python's re stands in for the highlighting engine here; only rule
    ordering is under test, not regex dialect details.
    """

    def _classify(text: str, state: str = "root") -> tuple[MatchSingle | MatchMultiple, str]:
        for r in flatten_rules(lexer, state):
            m = re.match(r.pattern, text)
            if m:
                return r, m.group(0)
        raise AssertionError(f"no rule in {state!r} matches {text!r}")

    return _classify


def token_of(r: MatchSingle | MatchMultiple) -> TokenType | tuple[TokenType, ...]:
    """Return the single token, or the token tuple for by-groups rules."""
    if isinstance(r, MatchSingle):
        return r.token
    return r.tokens
