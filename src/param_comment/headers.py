"""Classify documentation comment lines before they reach the comment parser."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from param_comment.base import MalformedHeader
from param_comment.config import DEFAULT_CONFIG, CheckConfig
from param_comment.models import Token

# A parameter header: "@param name"
REGEXP_PARAM_HEADER = re.compile(r"^@param (?P<name>[^ ]+)$")

# A hash option header: "@option hash_name [Type] :option_name"
REGEXP_OPTION_HEADER = re.compile(
    r"^@option (?P<hash_name>[^ ]+) \[(?P<type>.+)\] :(?P<name>[^ ]+)$"
)


class LineKind(Enum):
    HEADER = "header"
    OPTION_HEADER = "option_header"
    SEPARATOR = "separator"
    DESCRIPTION = "description"


@dataclass(frozen=True)
class ParamHeader:
    name: str


@dataclass(frozen=True)
class OptionHeader:
    hash_name: str
    type_annotation: str
    name: str


@dataclass(frozen=True)
class CommentLine:
    """A comment token together with what kind of line it is."""

    kind: LineKind
    comment: Token
    header: ParamHeader | OptionHeader | None = None

    @property
    def text(self) -> str:
        return self.comment.text.strip()


def is_header_line(comment: Token) -> bool:
    return "@param" in comment.text or "@option" in comment.text


def parse_header(comment: Token) -> ParamHeader | OptionHeader:
    """Parse an @param or @option line, raising MalformedHeader on a bad shape."""
    text = comment.text.strip()

    match = REGEXP_PARAM_HEADER.match(text)
    if match:
        return ParamHeader(name=match.group("name"))

    match = REGEXP_OPTION_HEADER.match(text)
    if match:
        return OptionHeader(
            hash_name=match.group("hash_name"),
            type_annotation=match.group("type"),
            name=match.group("name"),
        )

    raise MalformedHeader(comment)


def check_headers(comments: list[Token]) -> None:
    """Raise MalformedHeader for the first badly shaped header line."""
    for comment in comments:
        if is_header_line(comment):
            parse_header(comment)


def classify(
    comment: Token, started: bool, config: CheckConfig = DEFAULT_CONFIG
) -> CommentLine | None:
    """Work out what ``comment`` is, or None if the comment parser should skip it.

    Args:
        comment: A single comment token (text after the comment marker)
        started: Whether an @param header has already been seen
        config: Supplies the indentation that marks a description line

    Returns:
        The classified line, or None for lines outside the parameter docs

    Raises:
        MalformedHeader: If an @param/@option line has extra or missing parts
    """
    text = comment.text

    if "@param" in text:
        header = parse_header(comment)
        if not isinstance(header, ParamHeader):
            raise MalformedHeader(comment)
        return CommentLine(LineKind.HEADER, comment, header)

    if not started:
        return None

    if "@option" in text:
        header = parse_header(comment)
        if not isinstance(header, OptionHeader):
            raise MalformedHeader(comment)
        return CommentLine(LineKind.OPTION_HEADER, comment, header)

    if not text.strip():
        return CommentLine(LineKind.SEPARATOR, comment)

    indent = " " * config.min_description_indent
    if re.search(rf"{indent}[^ ]+", text):
        return CommentLine(LineKind.DESCRIPTION, comment)

    return None
