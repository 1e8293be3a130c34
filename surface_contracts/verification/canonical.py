"""Type canonicalization for alpha-invariant structural comparison.

Type variable ids are only meaningful inside the definition or alias that
declares them, so two modules can describe the same type with different
numbering. Canonicalization renumbers variables in first-occurrence order and
renders a string key; two types are structurally equal iff their keys are
equal.

The renumbering state is an explicit immutable value threaded through every
step and returned alongside each key, so a whole type definition is a fold
over its constructors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from surface_contracts.interface.schemas import (
    FnType,
    NamedType,
    Parameter,
    TupleType,
    TypeAlias,
    TypeConstructor,
    TypeDefinition,
    TypeExpr,
    VariableType,
)


@dataclass(frozen=True)
class CanonState:
    """Raw variable id to canonical id mapping, plus the next canonical id."""

    ids: dict[int, int] = field(default_factory=dict)
    next_id: int = 0

    def resolve(self, raw_id: int) -> tuple[int, CanonState]:
        """Canonical id for `raw_id`, assigning the next one on first sight."""
        if raw_id in self.ids:
            return self.ids[raw_id], self
        assigned = {**self.ids, raw_id: self.next_id}
        return self.next_id, CanonState(ids=assigned, next_id=self.next_id + 1)


def canonicalize_type(expr: TypeExpr, state: CanonState) -> tuple[str, CanonState]:
    """Render a type expression's key, threading the renumbering state."""
    if isinstance(expr, VariableType):
        canonical, state = state.resolve(expr.id)
        return f"v{canonical}", state

    if isinstance(expr, TupleType):
        keys, state = _canonicalize_all(expr.elements, state)
        return f"tuple({','.join(keys)})", state

    if isinstance(expr, NamedType):
        keys, state = _canonicalize_all(expr.parameters, state)
        return f"named({expr.package}|{expr.module}|{expr.name})<{','.join(keys)}>", state

    if isinstance(expr, FnType):
        keys, state = _canonicalize_all(expr.parameters, state)
        return_key, state = canonicalize_type(expr.return_, state)
        return f"fn({','.join(keys)})->{return_key}", state

    raise TypeError(f"Unknown type expression: {expr!r}")


def _canonicalize_all(exprs: Iterable[TypeExpr], state: CanonState) -> tuple[list[str], CanonState]:
    keys = []
    for expr in exprs:
        key, state = canonicalize_type(expr, state)
        keys.append(key)
    return keys, state


def canonicalize_parameter(param: Parameter, state: CanonState) -> tuple[str, CanonState]:
    type_key, state = canonicalize_type(param.type, state)
    return f"{param.label_or_sentinel}:{type_key}", state


def canonicalize_constructor(
    constructor: TypeConstructor, state: CanonState
) -> tuple[str, CanonState]:
    """Render `Name(label:type,...)`; parameters keep their declared order."""
    keys = []
    for param in constructor.parameters:
        key, state = canonicalize_parameter(param, state)
        keys.append(key)
    return f"{constructor.name}({','.join(keys)})", state


def definition_key(definition: TypeDefinition) -> str:
    """Canonical key of a custom type.

    Constructors are sorted by name first so declaration order does not
    matter. The state is shared across constructors so a type parameter used
    by several constructors keeps a single canonical id.
    """
    state = CanonState()
    keys = []
    for constructor in sorted(definition.constructors, key=lambda c: c.name):
        key, state = canonicalize_constructor(constructor, state)
        keys.append(key)
    return f"type({definition.arity}):{'|'.join(keys)}"


def alias_key(alias: TypeAlias) -> str:
    key, _ = canonicalize_type(alias.alias, CanonState())
    return f"alias({alias.arity}):{key}"


def type_key(declaration: TypeDefinition | TypeAlias) -> str:
    """Canonical key of either a custom type or a type alias."""
    if isinstance(declaration, TypeDefinition):
        return definition_key(declaration)
    if isinstance(declaration, TypeAlias):
        return alias_key(declaration)
    raise TypeError(f"Unknown type declaration: {declaration!r}")
