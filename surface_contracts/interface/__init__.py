"""Interface domain - decoded package interface and its loader."""

from .schemas import (
    UNLABELED,
    VariableType,
    TupleType,
    NamedType,
    FnType,
    TypeExpr,
    Parameter,
    Function,
    TypeConstructor,
    TypeDefinition,
    TypeAlias,
    Module,
    PackageInterface,
)
from .loader import InterfaceLoader, load_interface

__all__ = [
    # Type expressions
    "UNLABELED",
    "VariableType",
    "TupleType",
    "NamedType",
    "FnType",
    "TypeExpr",
    # Interface models
    "Parameter",
    "Function",
    "TypeConstructor",
    "TypeDefinition",
    "TypeAlias",
    "Module",
    "PackageInterface",
    # Loader
    "InterfaceLoader",
    "load_interface",
]
