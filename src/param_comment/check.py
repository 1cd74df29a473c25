"""Run the parameter comment check over the declarations of one file.

The lexer and the search for class/defined type declarations belong to the
host. It hands in the file's full token list plus one Declaration per class
or defined type, and gets back findings with a message and position.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from param_comment.base import ParamCommentError
from param_comment.comments import DocumentationParser
from param_comment.config import DEFAULT_CONFIG, CheckConfig
from param_comment.models import Declaration, Finding, FindingKind, Token, TokenKind
from param_comment.reconcile import reconcile
from param_comment.signature import SignatureParser

log = logging.getLogger(__name__)

_BLOCK_KINDS = (TokenKind.COMMENT, TokenKind.NEWLINE)


def leading_comments(tokens: list[Token], start: int) -> list[Token]:
    """Collect the comment block directly above ``tokens[start]``.

    Walks upward over comment and newline tokens and stops at anything
    else. Newlines are dropped and the comments come back in source order.
    """
    comments = []
    pointer = start - 1
    while pointer >= 0 and tokens[pointer].kind in _BLOCK_KINDS:
        if tokens[pointer].kind is TokenKind.COMMENT:
            comments.append(tokens[pointer])
        pointer -= 1
    comments.reverse()
    return comments


def _error_finding(error: ParamCommentError) -> Finding:
    return Finding(
        kind=FindingKind.PARSE_ERROR,
        message=error.message,
        line=error.line,
        column=error.column,
    )


class ParamCommentCheck:
    """Checks that declared parameters and their @param docs agree.

    Example:
        check = ParamCommentCheck()
        for finding in check.check_declarations(tokens, declarations):
            print(f"{finding.line}:{finding.column} {finding.message}")
    """

    def __init__(self, config: CheckConfig = DEFAULT_CONFIG):
        self.config = config

    def check_declaration(
        self, tokens: list[Token], declaration: Declaration
    ) -> list[Finding]:
        """Check one declaration; parse errors become a single finding."""
        try:
            params = SignatureParser(self.config).process(declaration.param_tokens)
            docs = DocumentationParser(self.config).process(
                leading_comments(tokens, declaration.start)
            )
        except ParamCommentError as e:
            log.warning(
                "Skipping declaration at token %d: %s", declaration.start, e.message
            )
            return [_error_finding(e)]

        findings = reconcile(params, docs)

        # Count findings carry no position of their own
        return [
            replace(f, line=1, column=1) if f.line is None else f for f in findings
        ]

    def check_declarations(
        self, tokens: list[Token], declarations: list[Declaration]
    ) -> list[Finding]:
        """Check every declaration in a file and collect all findings."""
        findings: list[Finding] = []
        for declaration in declarations:
            findings.extend(self.check_declaration(tokens, declaration))
        return findings
