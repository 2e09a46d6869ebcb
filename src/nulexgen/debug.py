"""--debug state dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from nulexgen.definition import (
    Include,
    LexerDefinition,
    MatchMultiple,
    MatchSingle,
    Pop,
    Push,
    Rule,
    State,
    Transition,
)


def dump_states(definition: LexerDefinition, *, file: TextIO | None = None) -> None:
    """Print a human-readable tree of states and rules to *file* (default stderr)."""
    if file is None:
        file = sys.stderr
    config = definition.config
    file.write(f"Lexer {config.name} (alias={config.alias}, filename={config.filename})\n")
    for state in definition.states:
        _dump_state(state, 1, file)


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_state(state: State, depth: int, f: TextIO) -> None:
    f.write(f"{_indent(depth)}State {state.name} ({len(state.rules)} rules)\n")
    for r in state.rules:
        _dump_rule(r, depth + 1, f)


def _dump_rule(r: Rule, depth: int, f: TextIO) -> None:
    if isinstance(r, Include):
        f.write(f"{_indent(depth)}Include {r.state}\n")
    elif isinstance(r, MatchSingle):
        f.write(f"{_indent(depth)}Match {r.pattern!r} -> {r.token.value}")
        f.write(_transition_suffix(r.transition))
        f.write("\n")
    elif isinstance(r, MatchMultiple):
        tokens = ", ".join(tt.value for tt in r.tokens)
        f.write(f"{_indent(depth)}ByGroups {r.pattern!r} -> ({tokens})")
        f.write(_transition_suffix(r.transition))
        f.write("\n")


def _transition_suffix(transition: Transition | None) -> str:
    if isinstance(transition, Push):
        return f" push {transition.state}"
    if isinstance(transition, Pop):
        return f" pop {transition.depth}"
    return ""
