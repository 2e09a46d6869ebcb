"""Consistency checks over an assembled lexer definition.

The checks run once, before emission:

- every push and include target names a defined state,
- state names are unique,
- every by-groups rule has one token per capture group,
- no match rule has an empty pattern.

Pairing of pops with earlier pushes is left to the highlighting engine;
the state stack is never simulated here.
"""

from __future__ import annotations

from nulexgen.definition import (
    Include,
    LexerDefinition,
    MatchMultiple,
    MatchSingle,
    Pop,
    Push,
    Rule,
)
from nulexgen.errors import (
    CaptureCountError,
    DefinitionError,
    DuplicateStateError,
    EmptyPatternError,
    UndefinedStateError,
)
from nulexgen.patterns import count_groups


def validate(definition: LexerDefinition) -> LexerDefinition:
    """Raise a DefinitionError for the first inconsistency; return *definition*."""
    seen: set[str] = set()
    for state in definition.states:
        if state.name in seen:
            raise DuplicateStateError(state.name)
        seen.add(state.name)

    for state in definition.states:
        for index, r in enumerate(state.rules, start=1):
            _check_rule(r, state.name, index, seen)

    return definition


def _check_rule(r: Rule, state: str, index: int, defined: set[str]) -> None:
    if isinstance(r, Include):
        if r.state not in defined:
            raise UndefinedStateError(r.state, state, index, f"include {r.state!r}")
        return

    if not r.pattern:
        raise EmptyPatternError(state, index)

    if isinstance(r, MatchMultiple):
        groups = count_groups(r.pattern)
        if groups != len(r.tokens):
            raise CaptureCountError(len(r.tokens), groups, state, index, r.pattern)

    if isinstance(r.transition, Push) and r.transition.state not in defined:
        raise UndefinedStateError(r.transition.state, state, index, r.pattern)
    if isinstance(r.transition, Pop) and r.transition.depth < 1:
        raise DefinitionError(
            f"pop depth must be at least 1, got {r.transition.depth}", state, index, r.pattern
        )


def _targets(r: Rule) -> list[str]:
    if isinstance(r, Include):
        return [r.state]
    if isinstance(r.transition, Push):
        return [r.transition.state]
    return []


def reachable_states(definition: LexerDefinition, start: str = "root") -> set[str]:
    """Return the names of all states reachable from *start* via push or include."""
    names = set(definition.state_names)
    if start not in names:
        raise UndefinedStateError(start, start, 0, "")

    reached = {start}
    pending = [start]
    while pending:
        state = definition.state(pending.pop())
        for index, r in enumerate(state.rules, start=1):
            for target in _targets(r):
                if target not in names:
                    source = r.pattern if isinstance(r, (MatchSingle, MatchMultiple)) else ""
                    raise UndefinedStateError(target, state.name, index, source)
                if target not in reached:
                    reached.add(target)
                    pending.append(target)
    return reached


def flatten_rules(definition: LexerDefinition, name: str) -> tuple[MatchSingle | MatchMultiple, ...]:
    """Return the effective rule order of state *name* with includes inlined.

    An include of a state already being expanded is skipped, so cyclic
    includes terminate.
    """
    result: list[MatchSingle | MatchMultiple] = []
    _flatten(definition, name, (), result)
    return tuple(result)


def _flatten(
    definition: LexerDefinition,
    name: str,
    chain: tuple[str, ...],
    out: list[MatchSingle | MatchMultiple],
) -> None:
    if name in chain:
        return
    try:
        state = definition.state(name)
    except KeyError:
        caller = chain[-1] if chain else name
        raise UndefinedStateError(name, caller, 0, f"include {name!r}") from None
    for r in state.rules:
        if isinstance(r, Include):
            _flatten(definition, r.state, (*chain, name), out)
        else:
            out.append(r)
