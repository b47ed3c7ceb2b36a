"""
Tokenizer -- split a raw command line into tokens.

Runs of ASCII whitespace (space, tab, newline, carriage return, vertical tab,
form feed) separate tokens outside double quotes; other separator characters
such as U+001C or U+3000 are ordinary token text.  A ``"`` toggles quoting
and is dropped; everything between quotes, spaces included, stays in the
current token.  Quoting may start mid-token, so ``-name="Book One"`` yields
the single token ``-name=Book One``.  An unterminated quote runs to the end
of the line.  Empty tokens are never produced.
"""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\r\v\f")


def split_command_line(line: str) -> list[str]:
    tokens: list[str] = []
    current: list[str] = []
    quoted = False

    for ch in line:
        if quoted:
            if ch == '"':
                quoted = False
            else:
                current.append(ch)
        elif ch == '"':
            quoted = True
        elif ch in _WHITESPACE:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(ch)

    if current:
        tokens.append("".join(current))
    return tokens
