"""XML emitter: writes a lexer definition in the highlighter's declarative format."""

from __future__ import annotations

from pathlib import Path

from nulexgen.definition import (
    Include,
    LexerDefinition,
    MatchMultiple,
    MatchSingle,
    Pop,
    Push,
    Rule,
    State,
)
from nulexgen.tokens import TokenType

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

_INDENT = "  "


def render(definition: LexerDefinition) -> str:
    """Render *definition* to XML text, with no trailing newline."""
    config = definition.config
    parts: list[str] = [XML_DECLARATION, "\n", "<lexer>\n"]

    parts.append(f"{_INDENT}<config>\n")
    for tag, value in (
        ("name", config.name),
        ("alias", config.alias),
        ("filename", config.filename),
        ("mime_type", config.mime_type),
    ):
        parts.append(f"{_INDENT * 2}<{tag}>{_escape(value)}</{tag}>\n")
    parts.append(f"{_INDENT}</config>\n")

    parts.append(f"{_INDENT}<rules>\n")
    for state in definition.states:
        parts.append(_render_state(state, 2))
    parts.append(f"{_INDENT}</rules>\n")

    parts.append("</lexer>")
    return "".join(parts)


def write_definition(definition: LexerDefinition, path: Path) -> str:
    """Render *definition*, write it to *path* as UTF-8, and return the text.

    Parent directories are created. OSError propagates to the caller.
    """
    text = render(definition)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))
    return text


# ---------------------------------------------------------------------------
# Escaping
# ---------------------------------------------------------------------------

# Quotes and control characters become character references. <, > and &
# stay literal so regex patterns read the same in the file as in source.
_ESCAPES = {
    '"': "&#34;",
    "'": "&#39;",
    "\t": "&#x9;",
    "\n": "&#xA;",
    "\r": "&#xD;",
}


def _escape(text: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


# ---------------------------------------------------------------------------
# States and rules
# ---------------------------------------------------------------------------


def _render_state(state: State, depth: int) -> str:
    pad = _INDENT * depth
    parts = [f'{pad}<state name="{_escape(state.name)}">\n']
    for r in state.rules:
        parts.append(_render_rule(r, depth + 1))
    parts.append(f"{pad}</state>\n")
    return "".join(parts)


def _render_rule(r: Rule, depth: int) -> str:
    pad = _INDENT * depth
    if isinstance(r, Include):
        return f'{pad}<rule include="{_escape(r.state)}"></rule>\n'

    attrs = f' pattern="{_escape(r.pattern)}"'
    if isinstance(r.transition, Push):
        attrs += f' push="{_escape(r.transition.state)}"'
    elif isinstance(r.transition, Pop):
        attrs += f' pop="{r.transition.depth}"'

    parts = [f"{pad}<rule{attrs}>\n"]
    if isinstance(r, MatchSingle):
        parts.append(_render_token(r.token, depth + 1))
    elif isinstance(r, MatchMultiple):
        parts.append(f"{pad}{_INDENT}<bygroups>\n")
        for tt in r.tokens:
            parts.append(_render_token(tt, depth + 2))
        parts.append(f"{pad}{_INDENT}</bygroups>\n")
    parts.append(f"{pad}</rule>\n")
    return "".join(parts)


def _render_token(tt: TokenType, depth: int) -> str:
    return f'{_INDENT * depth}<token type="{tt.value}"></token>\n'
