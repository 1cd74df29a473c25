"""param_comment - Checks Puppet @param/@option comments against declared parameters."""

from param_comment.base import (
    InvalidCommentForState,
    InvalidDefaultForOptional,
    InvalidTokenForState,
    MalformedHeader,
    OptionDoesntMatchHash,
    ParamCommentError,
)
from param_comment.check import ParamCommentCheck, leading_comments
from param_comment.comments import DocumentationParser, analyze_comments
from param_comment.config import CheckConfig
from param_comment.models import (
    Declaration,
    Finding,
    FindingKind,
    OptionDoc,
    ParamCategory,
    Parameter,
    ParameterDoc,
    Token,
    TokenKind,
)
from param_comment.reconcile import (
    check_parameter_count,
    check_parameter_order,
    reconcile,
)
from param_comment.signature import SignatureParser, analyze_params

__all__ = [
    "CheckConfig",
    "Declaration",
    "DocumentationParser",
    "Finding",
    "FindingKind",
    "InvalidCommentForState",
    "InvalidDefaultForOptional",
    "InvalidTokenForState",
    "MalformedHeader",
    "OptionDoc",
    "OptionDoesntMatchHash",
    "ParamCategory",
    "ParamCommentCheck",
    "ParamCommentError",
    "Parameter",
    "ParameterDoc",
    "SignatureParser",
    "Token",
    "TokenKind",
    "analyze_comments",
    "analyze_params",
    "check_parameter_count",
    "check_parameter_order",
    "leading_comments",
    "reconcile",
]
