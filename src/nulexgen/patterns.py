"""Regex fragment helpers: literal escaping, word alternations, group counting."""

from __future__ import annotations

from collections.abc import Iterable

# Backslash must come first so escapes added below are not escaped again.
_META_CHARS = "\\.*+?[](){}^$|"


def escape_regex(word: str) -> str:
    """Return *word* with every regex metacharacter backslash-escaped."""
    for ch in _META_CHARS:
        word = word.replace(ch, "\\" + ch)
    return word


def word_boundary_pattern(words: Iterable[str]) -> str:
    """Build ``\\b(w1|w2|...)\\b`` matching any of *words*.

    Words are ordered longest first (stable for equal lengths) so that a
    word sharing a prefix with a shorter one, such as ``let-env`` and
    ``let``, is tried before the shorter one. Empty words are dropped. Returns ``""``
    when no words remain.
    """
    ordered = sorted((w for w in words if w), key=len, reverse=True)
    if not ordered:
        return ""
    return r"\b(" + "|".join(escape_regex(w) for w in ordered) + r")\b"


def count_groups(pattern: str) -> int:
    """Count the capturing groups in *pattern*.

    Escaped characters and character classes are skipped. ``(?...)``
    constructs do not capture, except named groups ``(?P<name>`` and
    ``(?<name>``.
    """
    count = 0
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "[":
            i = _skip_class(pattern, i)
            continue
        if ch == "(":
            if pattern.startswith("(?", i):
                if _is_named_group(pattern, i):
                    count += 1
            else:
                count += 1
        i += 1
    return count


def _skip_class(pattern: str, start: int) -> int:
    """Return the index just past the character class opening at *start*."""
    i = start + 1
    n = len(pattern)
    if i < n and pattern[i] == "^":
        i += 1
    # A leading ] is a literal member of the class
    if i < n and pattern[i] == "]":
        i += 1
    while i < n:
        ch = pattern[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "]":
            return i + 1
        i += 1
    return n


def _is_named_group(pattern: str, start: int) -> bool:
    rest = pattern[start + 2 : start + 4]
    if rest.startswith("P<"):
        return True
    # (?<= and (?<! are look-behinds
    return rest.startswith("<") and rest[1:2] not in ("=", "!")
