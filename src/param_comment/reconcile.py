"""Compare declared parameters with their documentation."""

from __future__ import annotations

from typing import Sequence

from param_comment.models import Finding, FindingKind, Parameter, ParameterDoc


def missing_parameters(
    long_list: Sequence[Parameter | ParameterDoc],
    short_list: Sequence[Parameter | ParameterDoc],
) -> list[str]:
    """Names from ``long_list`` that don't appear in ``short_list``, in order."""
    present = {entry.name for entry in short_list}
    return [entry.name for entry in long_list if entry.name not in present]


def check_parameter_count(
    params: Sequence[Parameter], docs: Sequence[ParameterDoc]
) -> list[Finding]:
    """Report parameters without docs, or docs without parameters.

    Lists of equal length are never flagged here, even when the names
    differ; check_parameter_order covers that.
    """
    if len(params) > len(docs):
        missing = missing_parameters(params, docs)
        return [
            Finding(
                kind=FindingKind.MISSING_DOCUMENTATION,
                message=f"Missing parameter documentation for {','.join(missing)}",
                names=tuple(missing),
            )
        ]
    if len(params) < len(docs):
        unused = missing_parameters(docs, params)
        return [
            Finding(
                kind=FindingKind.UNDOCUMENTED_EXTRA,
                message=f"Documented but unused parameters found: {','.join(unused)}",
                names=tuple(unused),
            )
        ]
    return []


def check_parameter_order(
    params: Sequence[Parameter], docs: Sequence[ParameterDoc]
) -> list[Finding]:
    """Report the first documented parameter that is out of declaration order."""
    for param, doc in zip(params, docs):
        if param.name != doc.name:
            return [
                Finding(
                    kind=FindingKind.ORDERING_VIOLATION,
                    message="Parameters sorted wrong",
                    line=doc.line,
                    column=1,
                    names=(doc.name,),
                )
            ]
    return []


def reconcile(
    params: Sequence[Parameter], docs: Sequence[ParameterDoc]
) -> list[Finding]:
    """Run the count check, then the order check if the counts agree."""
    findings = check_parameter_count(params, docs)
    if findings:
        return findings
    return check_parameter_order(params, docs)
