"""Tests for type canonicalization."""

from __future__ import annotations

import pytest

from surface_contracts.interface import (
    FnType,
    NamedType,
    Parameter,
    TupleType,
    TypeAlias,
    TypeConstructor,
    TypeDefinition,
    VariableType,
)
from surface_contracts.verification import (
    CanonState,
    alias_key,
    canonicalize_constructor,
    canonicalize_type,
    definition_key,
    type_key,
)


def var(id: int) -> VariableType:
    return VariableType(id=id)


def list_of(element) -> NamedType:
    return NamedType(module="gleam", name="List", parameters=(element,))


def ctor(name: str, *params: tuple[str | None, object]) -> TypeConstructor:
    return TypeConstructor(
        name=name,
        parameters=tuple(Parameter(label=label, type=t) for label, t in params),
    )


# =============================================================================
# State
# =============================================================================


class TestCanonState:
    """Test the renumbering state value."""

    def test_first_occurrence_assigns_counter(self):
        state = CanonState()
        first, state = state.resolve(42)
        second, state = state.resolve(7)
        assert (first, second) == (0, 1)
        assert state.next_id == 2

    def test_repeated_id_reuses_canonical(self):
        _, state = CanonState().resolve(42)
        again, after = state.resolve(42)
        assert again == 0
        assert after is state

    def test_resolve_does_not_mutate(self):
        state = CanonState()
        state.resolve(3)
        assert state.ids == {}
        assert state.next_id == 0


# =============================================================================
# Type Expressions
# =============================================================================


class TestCanonicalizeType:
    """Test keys for individual type expressions."""

    def test_variable_renumbered(self):
        key, _ = canonicalize_type(var(9), CanonState())
        assert key == "v0"

    def test_named_includes_qualifiers(self):
        key, _ = canonicalize_type(list_of(var(3)), CanonState())
        assert key == "named(|gleam|List)<v0>"

    def test_named_package_distinguishes(self):
        ours = NamedType(package="ui", module="ui/theme", name="Theme")
        theirs = NamedType(package="other", module="ui/theme", name="Theme")
        assert canonicalize_type(ours, CanonState())[0] != canonicalize_type(theirs, CanonState())[0]

    def test_dotted_module_not_confused_with_name(self):
        dotted_module = NamedType(package="pkg", module="ui.theme", name="Theme")
        dotted_name = NamedType(package="pkg", module="ui", name="theme.Theme")
        assert canonicalize_type(dotted_module, CanonState())[0] != canonicalize_type(dotted_name, CanonState())[0]

    def test_package_separator_not_confused_with_module(self):
        a = NamedType(package="ui:x", module="m", name="T")
        b = NamedType(package="ui", module="x:m", name="T")
        assert canonicalize_type(a, CanonState())[0] != canonicalize_type(b, CanonState())[0]

    def test_tuple_threads_state(self):
        expr = TupleType(elements=(var(5), var(2), var(5)))
        key, state = canonicalize_type(expr, CanonState())
        assert key == "tuple(v0,v1,v0)"
        assert state.next_id == 2

    def test_fn_return_after_parameters(self):
        expr = FnType(parameters=(var(4),), return_=var(8))
        key, _ = canonicalize_type(expr, CanonState())
        assert key == "fn(v0)->v1"

    def test_relative_positions_matter(self):
        same = TupleType(elements=(var(1), var(1)))
        different = TupleType(elements=(var(1), var(2)))
        assert canonicalize_type(same, CanonState())[0] != canonicalize_type(different, CanonState())[0]

    def test_unknown_expression_rejected(self):
        with pytest.raises(TypeError):
            canonicalize_type("Int", CanonState())


# =============================================================================
# Definitions and Aliases
# =============================================================================


class TestDefinitionKey:
    """Test keys for whole type definitions."""

    def test_key_format(self):
        definition = TypeDefinition(
            arity=1,
            constructors=(ctor("Some", (None, var(7))), ctor("None")),
        )
        assert definition_key(definition) == "type(1):None()|Some(_:v0)"

    def test_alpha_invariance(self):
        a = TypeDefinition(arity=1, constructors=(ctor("Box", ("value", list_of(var(7)))),))
        b = TypeDefinition(arity=1, constructors=(ctor("Box", ("value", list_of(var(2)))),))
        assert definition_key(a) == definition_key(b)

    def test_constructor_order_invariance(self):
        ctors = (ctor("On", ("value", var(0))), ctor("Off"), ctor("Unknown", ("why", var(1))))
        forward = TypeDefinition(arity=2, constructors=ctors)
        backward = TypeDefinition(arity=2, constructors=tuple(reversed(ctors)))
        assert definition_key(forward) == definition_key(backward)

    def test_parameter_order_sensitivity(self):
        string = NamedType(module="gleam", name="String")
        a = TypeDefinition(constructors=(ctor("Pair", ("left", var(0)), ("right", string)),))
        b = TypeDefinition(constructors=(ctor("Pair", ("right", string), ("left", var(0))),))
        assert definition_key(a) != definition_key(b)

    def test_labels_matter(self):
        a = TypeDefinition(constructors=(ctor("Box", ("value", var(0))),))
        b = TypeDefinition(constructors=(ctor("Box", ("item", var(0))),))
        assert definition_key(a) != definition_key(b)

    def test_state_shared_across_constructors(self):
        shared = TypeDefinition(arity=1, constructors=(ctor("A", ("x", var(0))), ctor("B", ("y", var(0)))))
        distinct = TypeDefinition(arity=2, constructors=(ctor("A", ("x", var(0))), ctor("B", ("y", var(1)))))
        assert definition_key(shared) == "type(1):A(x:v0)|B(y:v0)"
        assert definition_key(distinct) == "type(2):A(x:v0)|B(y:v1)"

    def test_arity_matters(self):
        a = TypeDefinition(arity=0, constructors=(ctor("Unit"),))
        b = TypeDefinition(arity=1, constructors=(ctor("Unit"),))
        assert definition_key(a) != definition_key(b)

    def test_constructor_key(self):
        key, state = canonicalize_constructor(ctor("Node", ("left", var(3)), (None, var(3))), CanonState())
        assert key == "Node(left:v0,_:v0)"
        assert state.next_id == 1


class TestAliasKey:
    """Test keys for type aliases."""

    def test_key_format(self):
        alias = TypeAlias(arity=1, alias=list_of(var(12)))
        assert alias_key(alias) == "alias(1):named(|gleam|List)<v0>"

    def test_alias_alpha_invariance(self):
        a = TypeAlias(arity=2, alias=FnType(parameters=(var(3),), return_=var(9)))
        b = TypeAlias(arity=2, alias=FnType(parameters=(var(0),), return_=var(1)))
        assert alias_key(a) == alias_key(b)

    def test_type_key_dispatches(self):
        alias = TypeAlias(alias=var(0))
        definition = TypeDefinition(constructors=(ctor("X"),))
        assert type_key(alias).startswith("alias(")
        assert type_key(definition).startswith("type(")
