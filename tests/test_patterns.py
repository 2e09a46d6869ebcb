"""Tests for regex escaping, word alternations, and capture-group counting."""

from __future__ import annotations

import pytest

from nulexgen.patterns import count_groups, escape_regex, word_boundary_pattern
from nulexgen.words import BUILTIN_COMMANDS, CONSTANTS, KEYWORDS

META = "\\.*+?[](){}^$|"


class TestEscapeRegex:
    @pytest.mark.parametrize("ch", list(META))
    def test_each_metachar(self, ch: str) -> None:
        assert escape_regex(ch) == "\\" + ch

    def test_backslash_not_doubled_twice(self) -> None:
        assert escape_regex("\\") == "\\\\"

    def test_plain_word_unchanged(self) -> None:
        assert escape_regex("let-env") == "let-env"

    def test_dot(self) -> None:
        assert escape_regex("a.b") == r"a\.b"

    def test_mixed(self) -> None:
        assert escape_regex(r"a\b(c)") == r"a\\b\(c\)"

    def test_empty(self) -> None:
        assert escape_regex("") == ""


class TestWordBoundaryPattern:
    def test_longer_first(self) -> None:
        assert word_boundary_pattern(["let", "let-env"]) == r"\b(let-env|let)\b"

    def test_empty_input(self) -> None:
        assert word_boundary_pattern([]) == ""

    def test_single_word(self) -> None:
        assert word_boundary_pattern(["true"]) == r"\b(true)\b"

    def test_stable_for_equal_lengths(self) -> None:
        assert word_boundary_pattern(["ab", "cd", "e"]) == r"\b(ab|cd|e)\b"

    def test_words_escaped(self) -> None:
        assert word_boundary_pattern(["a.b", "c"]) == r"\b(a\.b|c)\b"

    def test_empty_words_dropped(self) -> None:
        assert word_boundary_pattern(["", "if", ""]) == r"\b(if)\b"

    def test_only_empty_words(self) -> None:
        assert word_boundary_pattern([""]) == ""

    def test_input_not_mutated(self) -> None:
        words = ["a", "bbb", "cc"]
        word_boundary_pattern(words)
        assert words == ["a", "bbb", "cc"]

    def test_accepts_tuple(self) -> None:
        assert word_boundary_pattern(("do", "done")) == r"\b(done|do)\b"

    @pytest.mark.parametrize("words", [KEYWORDS, BUILTIN_COMMANDS, CONSTANTS])
    def test_prefix_words_come_after_longer_ones(self, words: tuple[str, ...]) -> None:
        alternatives = word_boundary_pattern(words)[3:-3].split("|")
        position = {w: i for i, w in enumerate(alternatives)}
        for short in words:
            for long in words:
                if long != short and long.startswith(short):
                    assert position[long] < position[short], (long, short)


class TestCountGroups:
    def test_no_groups(self) -> None:
        assert count_groups(r"\$\w+") == 0

    def test_simple_groups(self) -> None:
        assert count_groups(r"(def|alias)(\s+)(\w+)") == 3

    def test_escaped_parens_ignored(self) -> None:
        assert count_groups(r"\(\)") == 0

    def test_parens_in_class_ignored(self) -> None:
        assert count_groups(r"[\[\]{}()]") == 0

    def test_leading_bracket_in_class(self) -> None:
        assert count_groups(r"[]()](x)") == 1

    def test_negated_class(self) -> None:
        assert count_groups(r"""[^"\\(]+(a)""") == 1

    def test_non_capturing(self) -> None:
        assert count_groups(r"(?:a|b)(c)") == 1

    def test_lookarounds(self) -> None:
        assert count_groups(r"(?=a)(?!b)(?<=c)(?<!d)") == 0

    def test_named_groups(self) -> None:
        assert count_groups(r"(?P<x>a)(?<y>b)") == 2

    def test_nested(self) -> None:
        assert count_groups(r"\d+(\.\d+)?([eE][+-]?\d+)?") == 2

    def test_word_alternation_with_whitespace(self) -> None:
        assert count_groups(word_boundary_pattern(["if", "else"]) + r"(\s*)") == 2
