"""Lexer assembly: metadata plus the state tables."""

from __future__ import annotations

from nulexgen.definition import LexerConfig, LexerDefinition
from nulexgen.states import build_states
from nulexgen.words import DEFAULT_WORDS, WordLists

DEFAULT_CONFIG = LexerConfig(
    name="Nu",
    alias="nu",
    filename="*.nu",
    mime_type="text/plain",
)


def generate_lexer(
    words: WordLists = DEFAULT_WORDS,
    config: LexerConfig = DEFAULT_CONFIG,
) -> LexerDefinition:
    """Build the lexer definition from *words* and display *config*.

    States are emitted in the order root, basic, data, interpolated_string,
    interpolation. No validation is done here; see ``nulexgen.validate``.
    """
    return LexerDefinition(config, build_states(words))


def build_lexer(
    words: WordLists = DEFAULT_WORDS,
    config: LexerConfig = DEFAULT_CONFIG,
) -> LexerDefinition:
    """Build the lexer definition and validate it before any emission."""
    from nulexgen.validate import validate

    return validate(generate_lexer(words, config))
