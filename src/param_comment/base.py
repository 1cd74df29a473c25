"""Errors raised by the parameter and comment parsers.

Every error carries the source position of the token or comment that caused
it, so the check driver can turn it into a single finding for the
declaration being analyzed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from param_comment.models import Token


class ParamCommentError(Exception):
    """Base exception for parameter and comment parsing."""

    def __init__(self, message: str, line: int = 1, column: int = 1):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column


class InvalidTokenForState(ParamCommentError):
    """Raised when a parameter token arrives in a state that can't accept it."""

    def __init__(self, token: Token, state: str):
        self.token = token
        self.state = state
        super().__init__(
            f"Can not process the token '{token.text.strip()}' in the state {state}",
            token.line,
            token.column,
        )


class InvalidDefaultForOptional(ParamCommentError):
    """Raised when an Optional parameter has a default other than the null literal."""

    def __init__(self, token: Token, default_value: str, null_default: str = "undef"):
        self.token = token
        self.default_value = default_value
        super().__init__(
            f"Invalid value '{default_value}' for an parameter of type Optional. "
            f"{null_default} is required",
            token.line,
            token.column,
        )


class InvalidCommentForState(ParamCommentError):
    """Raised when a comment line arrives in a state that can't accept it."""

    def __init__(self, comment: Token, state: str):
        self.comment = comment
        self.state = state
        super().__init__(
            f"Invalid state {state} for comment {comment.text.strip()}",
            comment.line,
            comment.column,
        )


class OptionDoesntMatchHash(ParamCommentError):
    """Raised when an @option names a different hash than the open @param."""

    def __init__(self, comment: Token):
        self.comment = comment
        super().__init__(
            f"Option references wrong hash {comment.text.strip()}",
            comment.line,
            comment.column,
        )


class MalformedHeader(ParamCommentError):
    """Raised when an @param or @option line doesn't have the required shape."""

    def __init__(self, comment: Token):
        self.comment = comment
        super().__init__(
            f"Invalid param or hash option header: {comment.text.strip()}",
            comment.line,
            comment.column,
        )
