"""
Command line tokenizer.

Splits a raw input line into the command name and its arguments. A
double-quoted span is one token (quotes removed), everything else is
split on whitespace:

    >>> tokenize('cmd "foo bar" baz')
    ['cmd', 'foo bar', 'baz']

An unterminated quote swallows the rest of the line; a lone trailing quote
yields nothing. An explicit ``""`` produces an empty-string token.
"""

from __future__ import annotations

import re

# Alternatives in priority order: closed quote, unterminated quote, bare word
_TOKEN_RE = re.compile(r'"([^"]*)"|"([^"]+)$|([^\s"]+)')


def tokenize(line: str) -> list[str]:
    """Split a command line into tokens.

    Args:
        line: Raw input line (never None).

    Returns:
        List of tokens; empty for an empty or whitespace-only line.
    """
    tokens = []
    for match in _TOKEN_RE.finditer(line):
        quoted, unterminated, word = match.groups()
        if quoted is not None:
            tokens.append(quoted)
        elif unterminated is not None:
            tokens.append(unterminated)
        else:
            tokens.append(word)
    return tokens
