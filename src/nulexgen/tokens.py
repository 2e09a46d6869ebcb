"""Token classifications understood by the highlighting engine."""

from __future__ import annotations

from enum import Enum


class TokenType(Enum):
    # Keywords
    KEYWORD = "Keyword"
    KEYWORD_CONSTANT = "KeywordConstant"
    KEYWORD_NAMESPACE = "KeywordNamespace"
    KEYWORD_TYPE = "KeywordType"

    # Names
    NAME_FUNCTION = "NameFunction"
    NAME_BUILTIN = "NameBuiltin"
    NAME_VARIABLE = "NameVariable"
    NAME_ATTRIBUTE = "NameAttribute"  # flags: --long, -s
    NAME_CONSTANT = "NameConstant"

    # Literals
    LITERAL_NUMBER = "LiteralNumber"  # also durations, file sizes, dates
    LITERAL_STRING = "LiteralString"  # raw strings
    LITERAL_STRING_DOUBLE = "LiteralStringDouble"
    LITERAL_STRING_SINGLE = "LiteralStringSingle"
    LITERAL_STRING_ESCAPE = "LiteralStringEscape"
    LITERAL_STRING_INTERPOL = "LiteralStringInterpol"  # ( ) inside $"..."

    # Comments
    COMMENT_SINGLE = "CommentSingle"
    COMMENT_HASHBANG = "CommentHashbang"

    # Operators and punctuation
    OPERATOR = "Operator"
    PUNCTUATION = "Punctuation"
    PUNCTUATION_SPECIAL = "PunctuationSpecial"

    # Text
    TEXT = "Text"
    TEXT_WHITESPACE = "TextWhitespace"
