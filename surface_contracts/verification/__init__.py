"""Verification domain - contract checking, canonicalization and reporting."""

from .violations import (
    MissingFunction,
    ParameterMismatch,
    MissingType,
    TypeMismatch,
    MissingExport,
    ModuleNotFound,
    InterfaceLoadFailure,
    Violation,
)
from .canonical import (
    CanonState,
    canonicalize_type,
    canonicalize_constructor,
    definition_key,
    alias_key,
    type_key,
)
from .service import (
    ContractVerifier,
    verify,
    verify_file,
    build_report,
    # Rule checks
    check_mirror,
    check_required_exports,
    check_shared_types,
    # Mismatch reasons
    DEFINITIONS_DIFFER,
    ALIASES_DIFFER,
    DEFINITION_VS_ALIAS,
    ALIAS_VS_DEFINITION,
)
from .formatter import format_labels, format_violation, format_violations, format_report
from .schemas import VerifyRequest, VerificationReport
from .router import router

__all__ = [
    # Violations
    "MissingFunction",
    "ParameterMismatch",
    "MissingType",
    "TypeMismatch",
    "MissingExport",
    "ModuleNotFound",
    "InterfaceLoadFailure",
    "Violation",
    # Canonicalization
    "CanonState",
    "canonicalize_type",
    "canonicalize_constructor",
    "definition_key",
    "alias_key",
    "type_key",
    # Engine
    "ContractVerifier",
    "verify",
    "verify_file",
    "build_report",
    "check_mirror",
    "check_required_exports",
    "check_shared_types",
    "DEFINITIONS_DIFFER",
    "ALIASES_DIFFER",
    "DEFINITION_VS_ALIAS",
    "ALIAS_VS_DEFINITION",
    # Formatting
    "format_labels",
    "format_violation",
    "format_violations",
    "format_report",
    # API
    "VerifyRequest",
    "VerificationReport",
    "router",
]
