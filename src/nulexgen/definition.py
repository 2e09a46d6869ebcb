"""Lexer definition types: transitions, rules, states, and the lexer itself."""

from __future__ import annotations

from dataclasses import dataclass

from nulexgen.tokens import TokenType


@dataclass(frozen=True, slots=True)
class Push:
    """Enter the named state on match."""

    state: str


@dataclass(frozen=True, slots=True)
class Pop:
    """Return to the enclosing state on match."""

    depth: int = 1


Transition = Push | Pop


@dataclass(frozen=True, slots=True)
class MatchSingle:
    """Pattern classified as a whole by one token type."""

    pattern: str
    token: TokenType
    transition: Transition | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.token, TokenType):
            raise TypeError(f"expected TokenType, got {self.token!r}")


@dataclass(frozen=True, slots=True)
class MatchMultiple:
    """Pattern whose capture groups are classified left to right.

    Precondition: ``len(tokens)`` equals the number of capture groups in
    ``pattern``. Checked by ``nulexgen.validate``, not here.
    """

    pattern: str
    tokens: tuple[TokenType, ...]
    transition: Transition | None = None

    def __post_init__(self) -> None:
        for tt in self.tokens:
            if not isinstance(tt, TokenType):
                raise TypeError(f"expected TokenType, got {tt!r}")


@dataclass(frozen=True, slots=True)
class Include:
    """Inline the rules of another state at this position."""

    state: str


Rule = MatchSingle | MatchMultiple | Include


@dataclass(frozen=True, slots=True)
class State:
    """A named, ordered rule list. First matching rule wins."""

    name: str
    rules: tuple[Rule, ...]


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Display metadata for the generated lexer."""

    name: str
    alias: str
    filename: str
    mime_type: str


@dataclass(frozen=True, slots=True)
class LexerDefinition:
    """Complete lexer: metadata plus states in emission order."""

    config: LexerConfig
    states: tuple[State, ...]

    @property
    def state_names(self) -> tuple[str, ...]:
        return tuple(s.name for s in self.states)

    def state(self, name: str) -> State:
        """Return the state called *name*, raising KeyError if absent."""
        for s in self.states:
            if s.name == name:
                return s
        raise KeyError(name)
