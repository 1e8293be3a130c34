"""Pydantic models for a decoded package interface.

The models mirror the package-interface JSON export: a package holds modules,
each module holds functions, custom type definitions and type aliases. All
models are frozen; the verification engine only ever reads them.

Keys the engine does not need (documentation, deprecation, constants,
implementation targets) are ignored on validation.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


UNLABELED = "_"
"""Label sentinel used wherever a parameter carries no label."""


class _InterfaceModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# =============================================================================
# Type Expressions
# =============================================================================


class VariableType(_InterfaceModel):
    """A type variable. Ids are scoped to the enclosing definition or alias."""

    kind: Literal["variable"] = "variable"
    id: int


class TupleType(_InterfaceModel):
    """A tuple of element types."""

    kind: Literal["tuple"] = "tuple"
    elements: tuple[TypeExpr, ...] = ()


class NamedType(_InterfaceModel):
    """A reference to a named type, possibly applied to type parameters."""

    kind: Literal["named"] = "named"
    package: str = ""
    module: str
    name: str
    parameters: tuple[TypeExpr, ...] = ()


class FnType(_InterfaceModel):
    """A function type."""

    kind: Literal["fn"] = "fn"
    parameters: tuple[TypeExpr, ...] = ()
    return_: TypeExpr = Field(..., alias="return")


TypeExpr = Annotated[
    Union[VariableType, TupleType, NamedType, FnType],
    Field(discriminator="kind"),
]


# =============================================================================
# Functions and Types
# =============================================================================


class Parameter(_InterfaceModel):
    """A function or constructor parameter."""

    label: str | None = None
    type: TypeExpr

    @property
    def label_or_sentinel(self) -> str:
        return self.label if self.label is not None else UNLABELED


class Function(_InterfaceModel):
    """An exported function signature."""

    parameters: tuple[Parameter, ...] = ()
    return_: TypeExpr | None = Field(None, alias="return")

    @property
    def labels(self) -> list[str]:
        """Parameter labels in order, with unlabeled parameters as "_"."""
        return [p.label_or_sentinel for p in self.parameters]


class TypeConstructor(_InterfaceModel):
    """A variant constructor of a custom type."""

    name: str
    parameters: tuple[Parameter, ...] = ()


class TypeDefinition(_InterfaceModel):
    """A custom type: its arity and its constructors in declaration order."""

    arity: int = Field(0, alias="parameters")
    constructors: tuple[TypeConstructor, ...] = ()
    opaque: bool = False


class TypeAlias(_InterfaceModel):
    """A type alias: its arity and the aliased expression."""

    arity: int = Field(0, alias="parameters")
    alias: TypeExpr


# =============================================================================
# Modules and Package
# =============================================================================


class Module(_InterfaceModel):
    """One module of the package interface."""

    functions: dict[str, Function] = Field(default_factory=dict)
    types: dict[str, TypeDefinition] = Field(default_factory=dict)
    type_aliases: dict[str, TypeAlias] = Field(default_factory=dict, alias="type-aliases")


class PackageInterface(_InterfaceModel):
    """The decoded public interface of a package, keyed by module path."""

    name: str = ""
    version: str | None = None
    modules: dict[str, Module] = Field(default_factory=dict)

    def get_module(self, path: str) -> Module | None:
        """Get a module by path, or None if the package does not define it."""
        return self.modules.get(path)


TupleType.model_rebuild()
NamedType.model_rebuild()
FnType.model_rebuild()
Parameter.model_rebuild()
Function.model_rebuild()
TypeAlias.model_rebuild()
