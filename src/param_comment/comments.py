"""Parser for the @param/@option comment block in front of a declaration.

The expected layout is::

    # @param config
    #   Settings for the service
    # @option config [Boolean] :enabled
    #   Whether the service runs
    #
    # @param name
    #   The service name

Every @param entry needs a description and is separated from the next
entry by an empty comment line. Hash options follow their parameter's
description directly, without a separator in between.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from param_comment.base import InvalidCommentForState, OptionDoesntMatchHash
from param_comment.config import DEFAULT_CONFIG, CheckConfig
from param_comment.headers import CommentLine, LineKind, check_headers, classify
from param_comment.models import OptionDoc, ParameterDoc, Token
from param_comment.workflow import Workflow

log = logging.getLogger(__name__)


class CommentState(Enum):
    START = "start"
    AWAITING_HEADER = "awaiting_header"
    AWAITING_DESCRIPTION = "awaiting_description"
    AWAITING_SEPARATOR = "awaiting_separator"
    AWAITING_OPTION_DESCRIPTION = "awaiting_option_description"


class CommentEvent(Enum):
    GOT_HEADER = "got_header"
    GOT_DESCRIPTION = "got_description"
    GOT_SEPARATOR = "got_separator"
    GOT_OPTION_HEADER = "got_option_header"
    GOT_OPTION_DESCRIPTION = "got_option_description"


# event -> [(from, to), ...]
_COMMENT_EVENTS = {
    CommentEvent.GOT_HEADER: [
        (CommentState.START, CommentState.AWAITING_DESCRIPTION),
        (CommentState.AWAITING_HEADER, CommentState.AWAITING_DESCRIPTION),
    ],
    CommentEvent.GOT_DESCRIPTION: [
        (CommentState.AWAITING_DESCRIPTION, CommentState.AWAITING_SEPARATOR),
        # a paragraph after an empty comment line, or a continuation line
        (CommentState.AWAITING_HEADER, CommentState.AWAITING_SEPARATOR),
        (CommentState.AWAITING_SEPARATOR, CommentState.AWAITING_SEPARATOR),
    ],
    CommentEvent.GOT_SEPARATOR: [
        (CommentState.AWAITING_SEPARATOR, CommentState.AWAITING_HEADER),
    ],
    # hash options
    CommentEvent.GOT_OPTION_HEADER: [
        (CommentState.AWAITING_SEPARATOR, CommentState.AWAITING_OPTION_DESCRIPTION),
    ],
    CommentEvent.GOT_OPTION_DESCRIPTION: [
        (CommentState.AWAITING_OPTION_DESCRIPTION, CommentState.AWAITING_SEPARATOR),
        (CommentState.AWAITING_SEPARATOR, CommentState.AWAITING_SEPARATOR),
    ],
}

COMMENT_TRANSITIONS = {
    (source, event): target
    for event, pairs in _COMMENT_EVENTS.items()
    for source, target in pairs
}


@dataclass
class _OptionDraft:
    owner_name: str
    name: str
    type_annotation: str
    line: int
    description: list[str] = field(default_factory=list)

    def build(self) -> OptionDoc:
        return OptionDoc(
            owner_name=self.owner_name,
            name=self.name,
            type_annotation=self.type_annotation,
            description=" ".join(self.description),
            line=self.line,
        )


@dataclass
class _ParamDraft:
    name: str
    line: int
    description: list[str] = field(default_factory=list)
    options: list[OptionDoc] = field(default_factory=list)

    def build(self) -> ParameterDoc:
        return ParameterDoc(
            name=self.name,
            description=" ".join(self.description),
            options=tuple(self.options),
            line=self.line,
        )


@dataclass
class _CommentContext:
    current_param: _ParamDraft | None = None
    current_option: _OptionDraft | None = None
    started: bool = False
    current_comment: Token | None = None

    @property
    def in_option(self) -> bool:
        return self.current_option is not None


class DocumentationParser:
    """Reads a leading comment block into an ordered list of ParameterDoc records.

    Example:
        parser = DocumentationParser()
        docs = parser.process(leading_comments(tokens, declaration.start))

    Raises:
        MalformedHeader: An @param/@option line has the wrong shape
        InvalidCommentForState: A line breaks the expected layout
        OptionDoesntMatchHash: An @option names another parameter
    """

    def __init__(self, config: CheckConfig = DEFAULT_CONFIG):
        self.config = config
        self._ctx = _CommentContext()
        self._params: list[ParameterDoc] = []
        self._workflow = Workflow(
            CommentState,
            CommentEvent,
            COMMENT_TRANSITIONS,
            initial=CommentState.START,
            on_invalid=self._invalid_state,
            handlers={
                CommentEvent.GOT_HEADER: self._got_header,
                CommentEvent.GOT_DESCRIPTION: self._got_description,
                CommentEvent.GOT_OPTION_DESCRIPTION: self._got_description,
                CommentEvent.GOT_OPTION_HEADER: self._got_option_header,
            },
        )

    @property
    def state(self) -> CommentState:
        return self._workflow.current

    def reset(self) -> None:
        self._ctx = _CommentContext()
        self._params = []
        self._workflow.restore()

    def process(self, comments: list[Token]) -> list[ParameterDoc]:
        """Walk the comment tokens and return the documented parameters in order."""
        self.reset()
        check_headers(comments)

        for comment in comments:
            self._ctx.current_comment = comment
            line = classify(comment, self._ctx.started, self.config)
            if line is None:
                continue

            if line.kind is LineKind.HEADER:
                self._workflow.fire(CommentEvent.GOT_HEADER, line)
            elif line.kind is LineKind.OPTION_HEADER:
                self._workflow.fire(CommentEvent.GOT_OPTION_HEADER, line)
            elif line.kind is LineKind.SEPARATOR:
                self._workflow.fire(CommentEvent.GOT_SEPARATOR)
            elif self._ctx.in_option:
                self._workflow.fire(CommentEvent.GOT_OPTION_DESCRIPTION, line)
            else:
                self._workflow.fire(CommentEvent.GOT_DESCRIPTION, line)

        self._flush_option()
        self._flush_param()

        log.debug("Parsed %d documented parameters", len(self._params))
        return list(self._params)

    def _flush_option(self) -> None:
        ctx = self._ctx
        if ctx.current_option is not None and ctx.current_param is not None:
            ctx.current_param.options.append(ctx.current_option.build())
        ctx.current_option = None

    def _flush_param(self) -> None:
        if self._ctx.current_param is not None:
            self._params.append(self._ctx.current_param.build())
        self._ctx.current_param = None

    def _got_header(self, line: CommentLine) -> None:
        self._ctx.started = True
        self._flush_option()
        self._flush_param()
        self._ctx.current_param = _ParamDraft(
            name=line.header.name, line=line.comment.line
        )

    def _got_description(self, line: CommentLine) -> None:
        ctx = self._ctx
        if ctx.current_option is not None:
            ctx.current_option.description.append(line.text)
        elif ctx.current_param is not None:
            ctx.current_param.description.append(line.text)

    def _got_option_header(self, line: CommentLine) -> None:
        self._flush_option()
        header = line.header
        if header.hash_name != self._ctx.current_param.name:
            raise OptionDoesntMatchHash(line.comment)
        self._ctx.current_option = _OptionDraft(
            owner_name=header.hash_name,
            name=header.name,
            type_annotation=header.type_annotation,
            line=line.comment.line,
        )

    def _invalid_state(self, event: CommentEvent, state: CommentState) -> Exception:
        return InvalidCommentForState(self._ctx.current_comment, state.value)


def analyze_comments(
    comments: list[Token], config: CheckConfig = DEFAULT_CONFIG
) -> list[ParameterDoc]:
    """Parse ``comments`` with a fresh DocumentationParser."""
    return DocumentationParser(config).process(comments)
