"""Contract verification engine.

Evaluates contract rules against a decoded package interface:
- MirrorRule: a target module re-exposes every function of a source module
- RequireExports: a module defines functions with given arities and labels
- SharedTypes: two modules define structurally equal types

Every rule is evaluated independently and exhaustively. The result is the
concatenation of each rule's violations in rule order; an empty list means
the interface satisfies every rule. Within a rule, items are visited in
sorted order so output never depends on the interface's mapping order.
"""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Sequence

from surface_contracts.core.errors import InterfaceLoadError
from surface_contracts.interface import (
    InterfaceLoader,
    Module,
    PackageInterface,
    TypeAlias,
    TypeDefinition,
)
from surface_contracts.rules import (
    MirrorRule,
    RequireExports,
    Rule,
    SharedTypes,
    to_label,
)
from .canonical import type_key
from .formatter import format_report
from .schemas import VerificationReport
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

logger = logging.getLogger(__name__)


DEFINITIONS_DIFFER = "type definitions differ structurally"
ALIASES_DIFFER = "type aliases differ structurally"
DEFINITION_VS_ALIAS = "kind mismatch: custom type in the first module, type alias in the second"
ALIAS_VS_DEFINITION = "kind mismatch: type alias in the first module, custom type in the second"


# =============================================================================
# Helpers
# =============================================================================

def _missing_modules(interface: PackageInterface, *paths: str) -> list[Violation]:
    """One ModuleNotFound per path the interface lacks, in argument order."""
    return [ModuleNotFound(module=path) for path in paths if interface.get_module(path) is None]


def _find_type(module: Module, name: str) -> TypeDefinition | TypeAlias | None:
    """Resolve a type name; definitions shadow aliases."""
    definition = module.types.get(name)
    if definition is not None:
        return definition
    return module.type_aliases.get(name)


def _mismatch_reason(a: TypeDefinition | TypeAlias, b: TypeDefinition | TypeAlias) -> str:
    if isinstance(a, TypeDefinition) and isinstance(b, TypeAlias):
        return DEFINITION_VS_ALIAS
    if isinstance(a, TypeAlias) and isinstance(b, TypeDefinition):
        return ALIAS_VS_DEFINITION
    if isinstance(a, TypeAlias):
        return ALIASES_DIFFER
    return DEFINITIONS_DIFFER


# =============================================================================
# Rule Checks
# =============================================================================

def check_mirror(interface: PackageInterface, rule: MirrorRule) -> list[Violation]:
    """Check that `rule.target` re-exposes every function of `rule.source`.

    Functions that exist only in the target are allowed. Return types are
    not compared.
    """
    missing = _missing_modules(interface, rule.source, rule.target)
    if missing:
        return missing

    source = interface.get_module(rule.source)
    target = interface.get_module(rule.target)
    prefix = [to_label(spec) for spec in rule.prefix_params]

    violations: list[Violation] = []
    for name, function in sorted(source.functions.items()):
        target_function = target.functions.get(name)
        if target_function is None:
            violations.append(MissingFunction(
                source_module=rule.source,
                target_module=rule.target,
                name=name,
            ))
            continue

        if name in rule.exceptions:
            continue

        expected = prefix + function.labels
        actual = target_function.labels
        if expected != actual:
            violations.append(ParameterMismatch(
                module=rule.target,
                function=name,
                expected=tuple(expected),
                actual=tuple(actual),
            ))

    return violations


def check_required_exports(interface: PackageInterface, rule: RequireExports) -> list[Violation]:
    """Check that `rule.module` defines every export with its arity and labels.

    Arity and label differences are both reported as ParameterMismatch.
    """
    missing = _missing_modules(interface, rule.module)
    if missing:
        return missing

    module = interface.get_module(rule.module)

    violations: list[Violation] = []
    for spec in sorted(rule.exports, key=lambda e: (e.name, e.arity)):
        function = module.functions.get(spec.name)
        if function is None:
            violations.append(MissingExport(module=rule.module, name=spec.name, arity=spec.arity))
            continue

        expected = [to_label(label) for label in spec.labels]
        actual = function.labels
        if spec.arity != len(actual) or expected != actual:
            violations.append(ParameterMismatch(
                module=rule.module,
                function=spec.name,
                expected=tuple(expected),
                actual=tuple(actual),
            ))

    return violations


def check_shared_types(interface: PackageInterface, rule: SharedTypes) -> list[Violation]:
    """Check that each named type exists, structurally equal, in both modules."""
    missing = _missing_modules(interface, rule.module_a, rule.module_b)
    if missing:
        return missing

    module_a = interface.get_module(rule.module_a)
    module_b = interface.get_module(rule.module_b)

    violations: list[Violation] = []
    for name in sorted(set(rule.type_names)):
        type_a = _find_type(module_a, name)
        type_b = _find_type(module_b, name)

        if type_a is None:
            violations.append(MissingType(module=rule.module_a, name=name))
        if type_b is None:
            violations.append(MissingType(module=rule.module_b, name=name))
        if type_a is None or type_b is None:
            continue

        if type_key(type_a) != type_key(type_b):
            violations.append(TypeMismatch(
                module_a=rule.module_a,
                module_b=rule.module_b,
                name=name,
                reason=_mismatch_reason(type_a, type_b),
            ))

    return violations


# =============================================================================
# Report
# =============================================================================

def build_report(violations: Sequence[Violation]) -> VerificationReport:
    """Summarize a violation list for API consumers."""
    counts = Counter(v.kind for v in violations)
    return VerificationReport(
        ok=not violations,
        violation_count=len(violations),
        violations=list(violations),
        counts=dict(sorted(counts.items())),
        text=format_report(violations),
    )


# =============================================================================
# Main Verification Engine
# =============================================================================

class ContractVerifier:
    """Verifies contract rules against one package interface."""

    def __init__(self, interface: PackageInterface):
        """Initialize the verifier.

        Args:
            interface: The decoded package interface. It is never mutated.
        """
        self.interface = interface

    def check_rule(self, rule: Rule) -> list[Violation]:
        """Run a single rule and return its violations."""
        if isinstance(rule, MirrorRule):
            return check_mirror(self.interface, rule)
        if isinstance(rule, RequireExports):
            return check_required_exports(self.interface, rule)
        if isinstance(rule, SharedTypes):
            return check_shared_types(self.interface, rule)
        raise TypeError(f"Unknown rule: {rule!r}")

    def verify(self, rules: Sequence[Rule]) -> list[Violation]:
        """Run every rule, concatenating violations in rule order.

        Returns:
            An empty list on success, otherwise every violation found.
        """
        violations: list[Violation] = []
        for rule in rules:
            found = self.check_rule(rule)
            logger.debug(f"{rule.kind} rule produced {len(found)} violations")
            violations.extend(found)

        logger.info(f"Verified {len(rules)} rules: {len(violations)} violations")
        return violations


def verify(interface: PackageInterface, rules: Sequence[Rule]) -> list[Violation]:
    """Convenience function to verify rules against an interface."""
    return ContractVerifier(interface).verify(rules)


def verify_file(
    path: str | Path,
    rules: Sequence[Rule],
    loader: InterfaceLoader | None = None,
) -> list[Violation]:
    """Load a package interface file and verify rules against it.

    A load failure is returned as a single InterfaceLoadFailure violation and
    no rule is evaluated.
    """
    loader = loader or InterfaceLoader()
    try:
        interface = loader.load(path)
    except InterfaceLoadError as e:
        logger.warning(str(e))
        return [InterfaceLoadFailure(path=e.path, reason=e.reason, detail=e.detail)]
    return verify(interface, rules)
