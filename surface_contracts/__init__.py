"""Surface Contracts - structural consistency checks for package interfaces.

Verifies that paired public API surfaces of a package stay consistent:
mirrored modules re-expose each other's functions, required exports exist
with the right labels, and shared types are structurally equal up to
renaming of type variables.
"""

# Interface model
from .interface import (
    PackageInterface,
    Module,
    Function,
    Parameter,
    TypeDefinition,
    TypeAlias,
    InterfaceLoader,
    load_interface,
)

# Rules and constructors
from .rules import (
    MirrorRule,
    RequireExports,
    SharedTypes,
    Rule,
    ContractLoader,
    labeled,
    unlabeled,
    export,
    mirror,
    require_exports,
    shared_types,
    with_exceptions,
)

# Verification engine
from .verification import (
    ContractVerifier,
    Violation,
    verify,
    verify_file,
    format_report,
)

__version__ = "0.1.0"

__all__ = [
    # Interface
    "PackageInterface",
    "Module",
    "Function",
    "Parameter",
    "TypeDefinition",
    "TypeAlias",
    "InterfaceLoader",
    "load_interface",
    # Rules
    "MirrorRule",
    "RequireExports",
    "SharedTypes",
    "Rule",
    "ContractLoader",
    "labeled",
    "unlabeled",
    "export",
    "mirror",
    "require_exports",
    "shared_types",
    "with_exceptions",
    # Verification
    "ContractVerifier",
    "Violation",
    "verify",
    "verify_file",
    "format_report",
]
