"""Rules service layer - contract rule models, constructors and YAML loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Any, Literal, Sequence, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from surface_contracts.core.errors import ContractLoadError
from surface_contracts.interface.schemas import UNLABELED

logger = logging.getLogger(__name__)


class _RuleModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# =============================================================================
# Parameter Specs
# =============================================================================


class LabeledParam(_RuleModel):
    """An expected parameter carrying a label."""

    kind: Literal["labeled"] = "labeled"
    label: str


class UnlabeledParam(_RuleModel):
    """An expected parameter without a label."""

    kind: Literal["unlabeled"] = "unlabeled"


ParamSpec = Annotated[Union[LabeledParam, UnlabeledParam], Field(discriminator="kind")]


def to_label(spec: LabeledParam | UnlabeledParam) -> str:
    """Label of a parameter spec, with "_" standing in for no label."""
    if isinstance(spec, LabeledParam):
        return spec.label
    if isinstance(spec, UnlabeledParam):
        return UNLABELED
    raise TypeError(f"Unknown parameter spec: {spec!r}")


def _coerce_param_specs(value: Any) -> Any:
    """Accept the shorthand forms: a string is a label, None is unlabeled."""
    if not isinstance(value, (list, tuple)):
        return value
    coerced = []
    for item in value:
        if item is None:
            coerced.append(UnlabeledParam())
        elif isinstance(item, str):
            coerced.append(LabeledParam(label=item))
        else:
            coerced.append(item)
    return coerced


class ExportSpec(_RuleModel):
    """A function a module is required to export."""

    name: str = Field(..., description="Function name")
    arity: int = Field(..., ge=0, description="Expected number of parameters")
    labels: tuple[ParamSpec, ...] = Field(default=(), description="Expected parameter labels")

    @field_validator("labels", mode="before")
    @classmethod
    def coerce_labels(cls, value: Any) -> Any:
        return _coerce_param_specs(value)


# =============================================================================
# Rules
# =============================================================================


class MirrorRule(_RuleModel):
    """Every function of `source` must be re-exposed by `target`.

    The target's labels must equal `prefix_params` followed by the source's
    labels, except for functions named in `exceptions`, which only need to
    exist.
    """

    kind: Literal["mirror"] = "mirror"
    source: str
    target: str
    prefix_params: tuple[ParamSpec, ...] = ()
    exceptions: tuple[str, ...] = ()

    @field_validator("prefix_params", mode="before")
    @classmethod
    def coerce_prefix_params(cls, value: Any) -> Any:
        return _coerce_param_specs(value)


class RequireExports(_RuleModel):
    """`module` must define each listed function with the given signature."""

    kind: Literal["require_exports"] = "require_exports"
    module: str
    exports: tuple[ExportSpec, ...] = ()


class SharedTypes(_RuleModel):
    """Each named type must exist, structurally equal, in both modules."""

    kind: Literal["shared_types"] = "shared_types"
    module_a: str
    module_b: str
    type_names: tuple[str, ...] = Field(default=(), alias="types")


Rule = Annotated[Union[MirrorRule, RequireExports, SharedTypes], Field(discriminator="kind")]

rule_adapter: TypeAdapter[Rule] = TypeAdapter(Rule)


# =============================================================================
# Constructors
# =============================================================================


def labeled(label: str) -> LabeledParam:
    return LabeledParam(label=label)


def unlabeled() -> UnlabeledParam:
    return UnlabeledParam()


def export(name: str, arity: int, labels: Sequence[LabeledParam | UnlabeledParam] = ()) -> ExportSpec:
    return ExportSpec(name=name, arity=arity, labels=tuple(labels))


def mirror(
    source: str,
    target: str,
    prefix_params: Sequence[LabeledParam | UnlabeledParam] = (),
) -> MirrorRule:
    """Build a mirror rule with no exceptions."""
    return MirrorRule(source=source, target=target, prefix_params=tuple(prefix_params))


def require_exports(module: str, exports: Sequence[ExportSpec]) -> RequireExports:
    return RequireExports(module=module, exports=tuple(exports))


def shared_types(module_a: str, module_b: str, type_names: Sequence[str]) -> SharedTypes:
    return SharedTypes(module_a=module_a, module_b=module_b, type_names=tuple(type_names))


def with_exceptions(rule: Rule, names: Sequence[str]) -> Rule:
    """Return a copy of a mirror rule with `names` added to its exceptions.

    Any other rule kind has no exceptions and is returned unchanged.
    """
    if not isinstance(rule, MirrorRule):
        logger.debug(f"with_exceptions ignored for {rule.kind} rule")
        return rule
    return rule.model_copy(update={"exceptions": rule.exceptions + tuple(names)})


# =============================================================================
# Contract Loader
# =============================================================================


class ContractLoader:
    """Loads contract rules from YAML files.

    A contract file is either a mapping with a top-level `rules` list or a
    bare list of rules. Each rule is keyed by `kind`.
    """

    def __init__(self, contracts_path: str | Path | None = None):
        self.contracts_path = Path(contracts_path) if contracts_path else None

    def load_file(self, path: str | Path | None = None) -> list[Rule]:
        """Load all rules from a contract file, in file order."""
        path = Path(path) if path else self.contracts_path
        if not path:
            raise ContractLoadError("No contract file specified")
        if not path.exists():
            raise ContractLoadError(f"Contract file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except OSError as e:
            raise ContractLoadError(f"Could not read contract file {path}: {e}") from e
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise ContractLoadError(f"Invalid YAML in {path}: {e}") from e

        rules = self.parse(content, source=str(path))
        logger.info(f"Loaded {len(rules)} contract rules from {path}")
        return rules

    def parse(self, content: Any, source: str = "<data>") -> list[Rule]:
        """Build rules from already-decoded contract data."""
        if content is None:
            return []
        if isinstance(content, dict):
            content = content.get("rules")
            if not isinstance(content, list):
                raise ContractLoadError(f"{source}: expected a top-level 'rules' list")
        if not isinstance(content, list):
            raise ContractLoadError(f"{source}: expected a list of rules")

        rules = []
        for idx, entry in enumerate(content):
            try:
                rules.append(rule_adapter.validate_python(entry))
            except ValidationError as e:
                raise ContractLoadError(f"{source}: rule {idx} is invalid: {e}") from e
        return rules


def load_rules(path: str | Path) -> list[Rule]:
    """Convenience function to load rules from a contract file."""
    return ContractLoader().load_file(path)
