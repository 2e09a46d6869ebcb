"""Generator for the Nu shell syntax-highlighting lexer definition."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nulexgen.definition import LexerConfig
    from nulexgen.words import WordLists

__version__ = "0.1.0"


def generate(
    words: WordLists | None = None,
    config: LexerConfig | None = None,
) -> str:
    """Build, validate, and render the lexer definition to XML text."""
    from nulexgen.lexer import DEFAULT_CONFIG, build_lexer
    from nulexgen.render import render
    from nulexgen.words import DEFAULT_WORDS

    return render(build_lexer(words or DEFAULT_WORDS, config or DEFAULT_CONFIG))
