"""Rule constructors used by the state tables."""

from __future__ import annotations

from nulexgen.definition import Include, MatchMultiple, MatchSingle, Pop, Push, Transition
from nulexgen.tokens import TokenType


def transition_for(state: str | None) -> Transition | None:
    """Decode a transition hint.

    ``None`` means no transition, ``""`` pops one level, and any other
    name pushes that state.
    """
    if state is None:
        return None
    if state == "":
        return Pop(1)
    return Push(state)


def rule(pattern: str, token: TokenType, state: str | None = None) -> MatchSingle:
    """Single-token rule, optionally pushing or popping a state."""
    return MatchSingle(pattern, token, transition_for(state))


def bygroups(pattern: str, *tokens: TokenType, state: str | None = None) -> MatchMultiple:
    """Rule assigning one token per capture group of *pattern*, left to right."""
    return MatchMultiple(pattern, tokens, transition_for(state))


def include(state: str) -> Include:
    return Include(state)
