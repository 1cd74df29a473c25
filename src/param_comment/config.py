"""Check configuration.

Defaults match Puppet: ``Optional[...]`` marks an optional parameter and
``undef`` is the only default it may have. Each value can be overridden from
the environment:

    PARAM_COMMENT_OPTIONAL_MARKER     (default "Optional")
    PARAM_COMMENT_NULL_DEFAULT        (default "undef")
    PARAM_COMMENT_DESCRIPTION_INDENT  (default 2)
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class CheckConfig:
    optional_marker: str = "Optional"
    null_default: str = "undef"
    min_description_indent: int = 2  # Leading spaces that mark a description line

    def __post_init__(self):
        if not self.optional_marker:
            raise ValueError("optional_marker must not be empty")
        if not self.null_default:
            raise ValueError("null_default must not be empty")
        if self.min_description_indent < 1:
            raise ValueError(
                "min_description_indent must be at least 1, "
                f"got {self.min_description_indent}"
            )

    @classmethod
    def from_env(cls) -> CheckConfig:
        """Build a config from PARAM_COMMENT_* environment variables."""
        indent = os.environ.get("PARAM_COMMENT_DESCRIPTION_INDENT", "2")
        try:
            min_indent = int(indent)
        except ValueError:
            raise ValueError(
                f"PARAM_COMMENT_DESCRIPTION_INDENT must be an integer, got {indent!r}"
            ) from None
        return cls(
            optional_marker=os.environ.get("PARAM_COMMENT_OPTIONAL_MARKER", "Optional"),
            null_default=os.environ.get("PARAM_COMMENT_NULL_DEFAULT", "undef"),
            min_description_indent=min_indent,
        )


DEFAULT_CONFIG = CheckConfig()
