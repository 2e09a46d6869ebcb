"""Error types for invalid lexer definitions, with formatted rule context."""

from __future__ import annotations


class DefinitionError(Exception):
    """Raised when an assembled lexer definition is internally inconsistent.

    ``state`` and ``index`` locate the offending rule (index is 1-based,
    0 when the error concerns the state itself). ``source`` is the rule's
    pattern, or a short description for include rules.
    """

    def __init__(self, message: str, state: str, index: int = 0, source: str = "") -> None:
        self.message = message
        self.state = state
        self.index = index
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "lexer") -> str:
        location = f"{filename}:{self.state}"
        if self.index:
            location += f":{self.index}"

        result = f"error: {self.message}\n  --> {location}"
        if not self.source:
            return result

        gutter = str(self.index) if self.index else ""
        gutter_width = len(gutter) + 1
        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{gutter:>{gutter_width - 1}} |"
        carets = "^" * max(1, len(self.source))

        return (
            f"{result}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {self.source}\n"
            f"{blank_gutter} {carets}"
        )


class UndefinedStateError(DefinitionError):
    """A push or include names a state that is not defined."""

    def __init__(self, target: str, state: str, index: int, source: str) -> None:
        self.target = target
        super().__init__(f"reference to undefined state '{target}'", state, index, source)


class DuplicateStateError(DefinitionError):
    """Two states share a name."""

    def __init__(self, state: str) -> None:
        super().__init__(f"state '{state}' is defined more than once", state)


class CaptureCountError(DefinitionError):
    """A by-groups rule's token count differs from its pattern's group count."""

    def __init__(self, tokens: int, groups: int, state: str, index: int, source: str) -> None:
        self.tokens = tokens
        self.groups = groups
        super().__init__(
            f"{tokens} token(s) given for {groups} capture group(s)", state, index, source
        )


class EmptyPatternError(DefinitionError):
    """A match rule has an empty pattern, which would match everywhere."""

    def __init__(self, state: str, index: int) -> None:
        super().__init__("match rule has an empty pattern", state, index)
