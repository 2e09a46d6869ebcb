"""The five lexer states and their rule tables.

Rules within a state are tried top to bottom and the first match wins, so
the order below is significant.
"""

from __future__ import annotations

from nulexgen.builder import bygroups, include, rule
from nulexgen.definition import Rule, State
from nulexgen.patterns import word_boundary_pattern
from nulexgen.tokens import TokenType as T
from nulexgen.words import WordLists

ROOT = "root"
BASIC = "basic"
DATA = "data"
INTERPOLATED_STRING = "interpolated_string"
INTERPOLATION = "interpolation"

STATE_ORDER: tuple[str, ...] = (ROOT, BASIC, DATA, INTERPOLATED_STRING, INTERPOLATION)


def _word_rules(words: tuple[str, ...], token: T) -> list[Rule]:
    """Alternation of *words* followed by trailing whitespace, or nothing if empty."""
    alternation = word_boundary_pattern(words)
    if not alternation:
        return []
    return [bygroups(alternation + r"(\s*)", token, T.TEXT_WHITESPACE)]


def root_rules() -> tuple[Rule, ...]:
    # basic before data: keywords and operators win over the catch-all text
    return (include(BASIC), include(DATA))


def basic_rules(words: WordLists) -> tuple[Rule, ...]:
    rules: list[Rule] = [
        rule(r"\A#!.+\n", T.COMMENT_HASHBANG),
        rule(r"#.*\n", T.COMMENT_SINGLE),
    ]

    rules += _word_rules(words.keywords, T.KEYWORD)
    rules += _word_rules(words.builtins, T.NAME_BUILTIN)
    rules += _word_rules(words.constants, T.KEYWORD_CONSTANT)

    rules += [
        # External commands: ^ls
        bygroups(r"(\^)(\w+)", T.OPERATOR, T.NAME_FUNCTION),
        # Definition heads: def name, alias name
        bygroups(r"(def|alias)(\s+)(\w+)", T.KEYWORD, T.TEXT_WHITESPACE, T.NAME_FUNCTION),
        # Assignment heads: x = 1, $x += 1
        bygroups(
            r"(\$?\w+)(\s*)(=|\+=|-=|\*=|/=|\+\+=)",
            T.NAME_VARIABLE,
            T.TEXT_WHITESPACE,
            T.OPERATOR,
        ),
        rule(r"\$\w+", T.NAME_VARIABLE),
        # Flags, long before short
        rule(r"--\w+(-\w+)*", T.NAME_ATTRIBUTE),
        rule(r"-\w", T.NAME_ATTRIBUTE),
        # Comparison
        rule(r"==|!=|<=|>=|<|>", T.OPERATOR),
        # Arithmetic
        rule(r"\+|-|\*|/|%|\*\*", T.OPERATOR),
        # Word operators
        rule(r"and|or|not|in", T.OPERATOR),
        rule(r"=~|!~|like|not-like", T.OPERATOR),
        rule(r"&&|\|\|", T.OPERATOR),
        # Redirection: plain, append, pipe
        rule(r"o>|out>|e>|err>|e\+o>|err\+out>|o\+e>|out\+err>", T.OPERATOR),
        rule(r"o>>|out>>|e>>|err>>|e\+o>>|err\+out>>|o\+e>>|out\+err>>", T.OPERATOR),
        rule(r"e>\||err>\||e\+o>\||err\+out>\||o\+e>\||out\+err>\|", T.OPERATOR),
        # Ranges
        rule(r"\.\.=?|\.\.<?", T.OPERATOR),
        rule(r"\|", T.OPERATOR),
        rule(r"=>", T.OPERATOR),
        rule(r"[\[\]{}()]", T.PUNCTUATION),
        rule(r"[,;]", T.PUNCTUATION_SPECIAL),
        rule(r"\.\.\.", T.PUNCTUATION_SPECIAL),
        rule(r"[@:]", T.PUNCTUATION_SPECIAL),
        rule(r"->", T.PUNCTUATION_SPECIAL),
    ]
    return tuple(rules)


def data_rules() -> tuple[Rule, ...]:
    return (
        # Numbers
        rule(r"0x[0-9a-fA-F]+", T.LITERAL_NUMBER),
        rule(r"0b[01]+", T.LITERAL_NUMBER),
        rule(r"0o[0-7]+", T.LITERAL_NUMBER),
        rule(r"\d+(\.\d+)?([eE][+-]?\d+)?", T.LITERAL_NUMBER),
        # Durations and file sizes
        rule(r"\d+(\.\d+)?(ns|us|ms|sec|min|hr|day|wk)", T.LITERAL_NUMBER),
        rule(
            r"\d+(\.\d+)?(B|KB|MB|GB|TB|PB|EB|ZB|YB|KiB|MiB|GiB|TiB|PiB|EiB|ZiB|YiB)",
            T.LITERAL_NUMBER,
        ),
        # Dates: zoned timestamp, then bare date
        rule(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})", T.LITERAL_NUMBER),
        rule(r"\d{4}-\d{2}-\d{2}", T.LITERAL_NUMBER),
        # Raw strings: r#"..."# and r'...'
        rule(r'r#"[^"]*"#', T.LITERAL_STRING),
        rule(r"r'[^']*'", T.LITERAL_STRING),
        # Interpolated string: $"...(expr)..."
        rule(r'\$"', T.LITERAL_STRING_DOUBLE, INTERPOLATED_STRING),
        rule(r'"([^"\\]|\\.)*"', T.LITERAL_STRING_DOUBLE),
        rule(r"'([^'\\]|\\.)*'", T.LITERAL_STRING_SINGLE),
        # Escapes
        rule(r"""\\[\\'"nrt0$]""", T.LITERAL_STRING_ESCAPE),
        rule(r"\\x[0-9a-fA-F]{2}", T.LITERAL_STRING_ESCAPE),
        rule(r"\\u\{[0-9a-fA-F]+\}", T.LITERAL_STRING_ESCAPE),
        rule(r"\s+", T.TEXT_WHITESPACE),
        # Catch-all, must stay last
        rule(r"""[^\s\[\]{}()$"'`\\<>&|;#]+""", T.TEXT),
    )


def interpolated_string_rules() -> tuple[Rule, ...]:
    return (
        rule(r'"', T.LITERAL_STRING_DOUBLE, ""),
        rule(r"\(", T.LITERAL_STRING_INTERPOL, INTERPOLATION),
        rule(r'([^"\\(]|\\.)+', T.LITERAL_STRING_DOUBLE),
    )


def interpolation_rules() -> tuple[Rule, ...]:
    # Re-enters root, so the state graph is cyclic here
    return (
        rule(r"\)", T.LITERAL_STRING_INTERPOL, ""),
        include(ROOT),
    )


def build_states(words: WordLists) -> tuple[State, ...]:
    """Assemble all states in emission order."""
    tables = {
        ROOT: root_rules(),
        BASIC: basic_rules(words),
        DATA: data_rules(),
        INTERPOLATED_STRING: interpolated_string_rules(),
        INTERPOLATION: interpolation_rules(),
    }
    return tuple(State(name, tables[name]) for name in STATE_ORDER)
