"""Curated Nu word lists: keywords, builtin commands, and literal constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WordLists:
    """Input word lists for lexer generation. Order is not significant."""

    keywords: tuple[str, ...]
    builtins: tuple[str, ...]
    constants: tuple[str, ...]


# Taken from the tree-sitter-nu highlight queries
KEYWORDS: tuple[str, ...] = (
    "def", "alias", "export-env", "export", "extern", "module",
    "let", "let-env", "mut", "const", "hide-env", "source", "source-env",
    "overlay", "loop", "while", "error", "do", "if", "else", "try", "catch", "match",
    "break", "continue", "return", "hide", "use", "for", "in", "list", "new", "as", "make",
)  # fmt: skip

BUILTIN_COMMANDS: tuple[str, ...] = (
    "all", "ansi", "any", "append", "ast", "bits", "bytes", "cal", "cd", "char", "clear",
    "collect", "columns", "compact", "complete", "config", "cp", "date", "debug",
    "decode", "default", "detect", "dfr", "drop", "du", "each", "encode", "enumerate",
    "every", "exec", "exit", "explain", "explore", "export-env", "fill", "filter",
    "find", "first", "flatten", "fmt", "format", "from", "generate", "get", "glob",
    "grid", "group", "group-by", "hash", "headers", "histogram", "history", "http",
    "input", "insert", "inspect", "interleave", "into", "is-empty", "is-not-empty",
    "is-terminal", "items", "join", "keybindings", "kill", "last", "length",
    "let-env", "lines", "load-env", "ls", "math", "merge", "metadata", "mkdir",
    "mktemp", "move", "mv", "nu-check", "nu-highlight", "open", "panic", "par-each",
    "parse", "path", "plugin", "port", "prepend", "print", "ps", "query", "random",
    "range", "reduce", "reject", "rename", "reverse", "rm", "roll", "rotate",
    "run-external", "save", "schema", "select", "seq", "shuffle", "skip", "sleep",
    "sort", "sort-by", "split", "split-by", "start", "stor", "str", "sys", "table",
    "take", "tee", "term", "timeit", "to", "touch", "transpose", "tutor", "ulimit",
    "uname", "uniq", "uniq-by", "update", "upsert", "url", "values", "view", "watch",
    "where", "which", "whoami", "window", "with-env", "wrap", "zip",
)  # fmt: skip

CONSTANTS: tuple[str, ...] = ("true", "false", "null", "nothing")

DEFAULT_WORDS = WordLists(KEYWORDS, BUILTIN_COMMANDS, CONSTANTS)
