"""Bracket and brace nesting counter shared by the parsers."""

from __future__ import annotations

from param_comment.models import CLOSE_BRACKETS, OPEN_BRACKETS, Token


class BracketDepth:
    """Running count of open minus close brackets and braces.

    Malformed input can drive the count negative; that is the lexer's
    problem, not this counter's.
    """

    def __init__(self) -> None:
        self.depth = 0

    def update(self, token: Token) -> bool:
        """Track ``token``; return True if it was a bracket or brace."""
        if token.kind in OPEN_BRACKETS:
            self.depth += 1
            return True
        if token.kind in CLOSE_BRACKETS:
            self.depth -= 1
            return True
        return False

    @property
    def nested(self) -> bool:
        return self.depth != 0

    def reset(self) -> None:
        self.depth = 0
