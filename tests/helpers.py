"""Token builders for param_comment tests.

The real tokens come from the host's lexer; these helpers produce the same
kinds from short Puppet snippets so tests can stay readable.
"""

from __future__ import annotations

import re

from param_comment import Declaration, Token, TokenKind

_TOKEN_PATTERNS = [
    (TokenKind.NEWLINE, r"\n"),
    (TokenKind.WHITESPACE, r"[ \t]+"),
    (TokenKind.VARIABLE, r"\$[a-z_][\w:]*"),
    (TokenKind.TYPE, r"[A-Z]\w*(?:::[A-Z]\w*)*"),
    (TokenKind.OTHER, r"=>"),
    (TokenKind.EQUALS, r"="),
    (TokenKind.COMMA, r","),
    (TokenKind.LBRACK, r"\["),
    (TokenKind.RBRACK, r"\]"),
    (TokenKind.LBRACE, r"\{"),
    (TokenKind.RBRACE, r"\}"),
    (TokenKind.OTHER, r"'[^']*'|\"[^\"]*\""),
    (TokenKind.OTHER, r"-?\d+(?:\.\d+)?"),
    (TokenKind.OTHER, r"\w+"),
]
_TOKEN_RE = re.compile("|".join(f"({pattern})" for _, pattern in _TOKEN_PATTERNS))


def lex_params(source: str, line: int = 1) -> list[Token]:
    """Split the text between a declaration's parentheses into tokens."""
    tokens = []
    column = 1
    pos = 0
    while pos < len(source):
        match = _TOKEN_RE.match(source, pos)
        if match is None:
            raise ValueError(f"Can't lex {source[pos:]!r}")
        kind = _TOKEN_PATTERNS[match.lastindex - 1][0]
        text = match.group(0)
        tokens.append(Token(kind, text, line, column))
        if kind is TokenKind.NEWLINE:
            line += 1
            column = 1
        else:
            column += len(text)
        pos = match.end()
    return tokens


def comments(*lines: str, first_line: int = 1) -> list[Token]:
    """Build comment tokens from source lines like ``"# @param name"``.

    The token text is what follows the ``#``, as a Puppet lexer reports it.
    """
    return [
        Token(TokenKind.COMMENT, line.removeprefix("#"), first_line + i, 1)
        for i, line in enumerate(lines)
    ]


def declaration(code: str) -> tuple[list[Token], Declaration]:
    """Tokenize a comment block followed by ``class name (...) {}``.

    Only the parts the check looks at get real tokens: the comments in
    front of the declaration and the parameter list.
    """
    tokens: list[Token] = []
    lines = code.splitlines()
    index = 0
    while index < len(lines) and not lines[index].lstrip().startswith(("class ", "define ")):
        text = lines[index]
        if text.lstrip().startswith("#"):
            tokens.append(Token(TokenKind.COMMENT, text.lstrip()[1:], index + 1, 1))
        tokens.append(Token(TokenKind.NEWLINE, "\n", index + 1, len(text) + 1))
        index += 1

    keyword_line = index + 1
    start = len(tokens)
    header = lines[index].lstrip()
    keyword = header.split(" ", 1)[0]
    tokens.append(Token(TokenKind.OTHER, keyword, keyword_line, 1))

    rest = "\n".join(lines[index:])
    open_paren = rest.index("(")
    close_paren = rest.rindex(")")
    before = rest[: open_paren + 1]
    param_line = keyword_line + before.count("\n")
    param_tokens = lex_params(rest[open_paren + 1 : close_paren], param_line)
    tokens.extend(param_tokens)

    return tokens, Declaration(start=start, param_tokens=param_tokens)
