"""Data models for parameter and comment analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TokenKind(Enum):
    """Token kinds handed in by the lexer."""

    TYPE = "TYPE"
    VARIABLE = "VARIABLE"
    EQUALS = "EQUALS"
    COMMA = "COMMA"
    LBRACK = "LBRACK"
    RBRACK = "RBRACK"
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    COMMENT = "COMMENT"
    NEWLINE = "NEWLINE"
    INDENT = "INDENT"
    WHITESPACE = "WHITESPACE"
    OTHER = "OTHER"


# Kinds that carry layout only
FORMATTING_KINDS = frozenset(
    {TokenKind.NEWLINE, TokenKind.INDENT, TokenKind.WHITESPACE}
)

OPEN_BRACKETS = frozenset({TokenKind.LBRACK, TokenKind.LBRACE})
CLOSE_BRACKETS = frozenset({TokenKind.RBRACK, TokenKind.RBRACE})


@dataclass(frozen=True)
class Token:
    """A classified lexer token with its source position."""

    kind: TokenKind
    text: str
    line: int = 1
    column: int = 1


class ParamCategory(Enum):
    MANDATORY = 1
    WITH_DEFAULT = 2
    OPTIONAL = 3


@dataclass(frozen=True)
class Parameter:
    """A declared parameter of a class or defined type."""

    name: str
    declared_type: str = ""  # Concatenated type fragments, "" if untyped
    category: ParamCategory = ParamCategory.MANDATORY
    default_text: str = ""  # "" if no default
    null_default: str = field(default="undef", compare=False)

    def __post_init__(self):
        if (
            self.category is ParamCategory.OPTIONAL
            and self.default_text
            and self.default_text != self.null_default
        ):
            raise ValueError(
                f"Optional parameter {self.name} must default to "
                f"{self.null_default}, got {self.default_text!r}"
            )
        if self.category is ParamCategory.WITH_DEFAULT and not self.default_text:
            raise ValueError(f"Parameter {self.name} has no default value")
        if self.category is ParamCategory.MANDATORY and self.default_text:
            raise ValueError(
                f"Mandatory parameter {self.name} can't have "
                f"default {self.default_text!r}"
            )


@dataclass(frozen=True)
class OptionDoc:
    """A documented hash option nested under a @param entry."""

    owner_name: str  # The hash parameter this option belongs to
    name: str
    type_annotation: str = ""
    description: str = ""
    line: int = -1


@dataclass(frozen=True)
class ParameterDoc:
    """A documented @param entry with its hash options."""

    name: str
    description: str = ""
    options: tuple[OptionDoc, ...] = ()
    line: int = -1

    def __post_init__(self):
        for option in self.options:
            if option.owner_name != self.name:
                raise ValueError(
                    f"Option {option.name} belongs to {option.owner_name}, "
                    f"not {self.name}"
                )


class FindingKind(Enum):
    MISSING_DOCUMENTATION = "missing_documentation"
    UNDOCUMENTED_EXTRA = "undocumented_extra"
    ORDERING_VIOLATION = "ordering_violation"
    PARSE_ERROR = "parse_error"


@dataclass(frozen=True)
class Finding:
    """A problem to report for one declaration."""

    kind: FindingKind
    message: str
    line: int | None = None  # None lets the caller pick the declaration position
    column: int | None = None
    names: tuple[str, ...] = ()


@dataclass
class Declaration:
    """A class or defined type inside a file's token list.

    ``start`` is the index of the declaration's first token (the ``class`` or
    ``define`` keyword); ``param_tokens`` are the tokens between the
    parameter list's parentheses.
    """

    start: int
    param_tokens: list[Token] = field(default_factory=list)
