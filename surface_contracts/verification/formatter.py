"""Render violations as human-readable text.

One paragraph per violation, each starting with `FAIL:`, paragraphs
separated by a blank line.
"""

from __future__ import annotations

from typing import Sequence

from .violations import (
    InterfaceLoadFailure,
    MissingExport,
    MissingFunction,
    MissingType,
    ModuleNotFound,
    ParameterMismatch,
    TypeMismatch,
    Violation,
)


def format_labels(labels: Sequence[str]) -> str:
    """Render a label sequence as `[a, b, c]`."""
    return f"[{', '.join(labels)}]"


def format_violation(violation: Violation) -> str:
    if isinstance(violation, MissingFunction):
        return (
            f"FAIL: Function `{violation.name}` from `{violation.source_module}` "
            f"is missing in `{violation.target_module}`"
        )
    if isinstance(violation, ParameterMismatch):
        return (
            f"FAIL: Parameter mismatch in `{violation.module}.{violation.function}`\n"
            f"  expected: {format_labels(violation.expected)}\n"
            f"  actual:   {format_labels(violation.actual)}"
        )
    if isinstance(violation, MissingType):
        return f"FAIL: Type `{violation.name}` is missing in `{violation.module}`"
    if isinstance(violation, TypeMismatch):
        return (
            f"FAIL: Type `{violation.name}` differs between "
            f"`{violation.module_a}` and `{violation.module_b}`\n"
            f"  reason: {violation.reason}"
        )
    if isinstance(violation, MissingExport):
        return (
            f"FAIL: Required export `{violation.name}/{violation.arity}` "
            f"is missing in `{violation.module}`"
        )
    if isinstance(violation, ModuleNotFound):
        return f"FAIL: Module `{violation.module}` not found in package interface"
    if isinstance(violation, InterfaceLoadFailure):
        return (
            f"FAIL: Could not {violation.reason} package interface `{violation.path}`\n"
            f"  {violation.detail}"
        )
    raise TypeError(f"Unknown violation: {violation!r}")


def format_violations(violations: Sequence[Violation]) -> str:
    return "\n\n".join(format_violation(v) for v in violations)


def format_report(violations: Sequence[Violation]) -> str:
    """Format a full result, including the success case."""
    if not violations:
        return "PASS: all surface contracts hold"
    return format_violations(violations)
