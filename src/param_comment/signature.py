"""Parser for the parameter list of a class or defined type."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from param_comment.base import InvalidDefaultForOptional, InvalidTokenForState
from param_comment.config import DEFAULT_CONFIG, CheckConfig
from param_comment.depth import BracketDepth
from param_comment.models import (
    FORMATTING_KINDS,
    ParamCategory,
    Parameter,
    Token,
    TokenKind,
)
from param_comment.workflow import Workflow

log = logging.getLogger(__name__)


class SignatureState(Enum):
    START = "start"
    AWAITING_NAME = "awaiting_name"
    AWAITING_DEFAULT = "awaiting_default"


class SignatureEvent(Enum):
    GOT_TYPE = "got_type"
    GOT_NAME = "got_name"
    GOT_EQUALS = "got_equals"
    GOT_END = "got_end"


# event -> [(from, to), ...]
_SIGNATURE_EVENTS = {
    SignatureEvent.GOT_TYPE: [
        (SignatureState.START, SignatureState.AWAITING_NAME),
    ],
    SignatureEvent.GOT_NAME: [
        (SignatureState.START, SignatureState.AWAITING_DEFAULT),  # untyped
        (SignatureState.AWAITING_NAME, SignatureState.AWAITING_DEFAULT),
    ],
    SignatureEvent.GOT_EQUALS: [
        (SignatureState.AWAITING_DEFAULT, SignatureState.AWAITING_DEFAULT),
    ],
    SignatureEvent.GOT_END: [
        (SignatureState.AWAITING_DEFAULT, SignatureState.START),
    ],
}

SIGNATURE_TRANSITIONS = {
    (source, event): target
    for event, pairs in _SIGNATURE_EVENTS.items()
    for source, target in pairs
}


@dataclass
class _SignatureContext:
    """Accumulators for the parameter currently being read."""

    depth: BracketDepth = field(default_factory=BracketDepth)
    type_tokens: list[Token] = field(default_factory=list)
    default_tokens: list[Token] = field(default_factory=list)
    in_type: bool = False
    in_default: bool = False
    name: str = ""
    declared_type: str = ""
    optional: bool = False
    current_token: Token | None = None

    def next_parameter(self) -> None:
        self.type_tokens = []
        self.default_tokens = []
        self.in_type = False
        self.in_default = False
        self.name = ""
        self.declared_type = ""
        self.optional = False


class SignatureParser:
    """Reads parameter tokens into an ordered list of Parameter records.

    Example:
        parser = SignatureParser()
        params = parser.process(declaration.param_tokens)
        [p.name for p in params]  # ["mandatory", "withdefault", "optional"]

    Raises InvalidTokenForState when a token arrives where the parameter
    grammar has no transition, and InvalidDefaultForOptional when an
    Optional parameter defaults to anything but the null literal.
    """

    def __init__(self, config: CheckConfig = DEFAULT_CONFIG):
        self.config = config
        self._ctx = _SignatureContext()
        self._params: list[Parameter] = []
        self._workflow = Workflow(
            SignatureState,
            SignatureEvent,
            SIGNATURE_TRANSITIONS,
            initial=SignatureState.START,
            on_invalid=self._invalid_state,
            handlers={
                SignatureEvent.GOT_NAME: self._got_name,
                SignatureEvent.GOT_EQUALS: self._got_equals,
                SignatureEvent.GOT_END: self._got_end,
            },
        )

    @property
    def state(self) -> SignatureState:
        return self._workflow.current

    def reset(self) -> None:
        self._ctx = _SignatureContext()
        self._params = []
        self._workflow.restore()

    def process(self, tokens: list[Token]) -> list[Parameter]:
        """Walk the parameter tokens and return the declared parameters in order."""
        self.reset()
        ctx = self._ctx

        for token in tokens:
            if token.kind in FORMATTING_KINDS or token.kind is TokenKind.COMMENT:
                continue
            ctx.current_token = token

            if token.kind is TokenKind.TYPE:
                if ctx.in_default:
                    ctx.default_tokens.append(token)
                    continue
                if not ctx.in_type:
                    self._workflow.fire(SignatureEvent.GOT_TYPE)
                ctx.in_type = True
                ctx.type_tokens.append(token)
            elif token.kind is TokenKind.VARIABLE:
                if ctx.in_default:
                    ctx.default_tokens.append(token)
                else:
                    self._workflow.fire(SignatureEvent.GOT_NAME, token)
            elif token.kind is TokenKind.EQUALS:
                if ctx.in_default:
                    ctx.default_tokens.append(token)
                else:
                    self._workflow.fire(SignatureEvent.GOT_EQUALS)
            elif token.kind is TokenKind.COMMA:
                if ctx.in_type:
                    ctx.type_tokens.append(token)
                elif ctx.depth.nested:
                    self._append(token)
                else:
                    self._workflow.fire(SignatureEvent.GOT_END)
            else:
                ctx.depth.update(token)
                self._append(token)

        # A last parameter without a trailing comma
        if self._workflow.current is not SignatureState.START:
            self._workflow.fire(SignatureEvent.GOT_END)

        log.debug("Parsed %d parameters", len(self._params))
        return list(self._params)

    def _append(self, token: Token) -> None:
        """Add ``token`` to whichever accumulator is active, if any."""
        if self._ctx.in_type:
            self._ctx.type_tokens.append(token)
        elif self._ctx.in_default:
            self._ctx.default_tokens.append(token)

    def _got_name(self, token: Token) -> None:
        ctx = self._ctx
        ctx.declared_type = "".join(t.text for t in ctx.type_tokens)
        ctx.optional = bool(ctx.type_tokens) and (
            ctx.type_tokens[0].text == self.config.optional_marker
        )
        ctx.name = token.text.removeprefix("$")
        ctx.in_type = False
        ctx.type_tokens = []

    def _got_equals(self) -> None:
        self._ctx.in_default = True

    def _got_end(self) -> None:
        ctx = self._ctx
        default_text = "".join(t.text for t in ctx.default_tokens)

        if ctx.optional and default_text and default_text != self.config.null_default:
            raise InvalidDefaultForOptional(
                ctx.default_tokens[0], default_text, self.config.null_default
            )

        if ctx.optional:
            category = ParamCategory.OPTIONAL
        elif default_text:
            category = ParamCategory.WITH_DEFAULT
        else:
            category = ParamCategory.MANDATORY

        self._params.append(
            Parameter(
                name=ctx.name,
                declared_type=ctx.declared_type,
                category=category,
                default_text=default_text,
                null_default=self.config.null_default,
            )
        )
        ctx.next_parameter()

    def _invalid_state(self, event: SignatureEvent, state: SignatureState) -> Exception:
        return InvalidTokenForState(self._ctx.current_token, state.value)


def analyze_params(
    param_tokens: list[Token], config: CheckConfig = DEFAULT_CONFIG
) -> list[Parameter]:
    """Parse ``param_tokens`` with a fresh SignatureParser."""
    return SignatureParser(config).process(param_tokens)
