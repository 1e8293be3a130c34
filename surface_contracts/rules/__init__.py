"""Rules domain - contract rule models, constructors and loading."""

from .service import (
    # Models
    LabeledParam,
    UnlabeledParam,
    ParamSpec,
    ExportSpec,
    MirrorRule,
    RequireExports,
    SharedTypes,
    Rule,
    rule_adapter,
    # Constructors
    labeled,
    unlabeled,
    export,
    mirror,
    require_exports,
    shared_types,
    with_exceptions,
    to_label,
    # Services
    ContractLoader,
    load_rules,
)

__all__ = [
    # Models
    "LabeledParam",
    "UnlabeledParam",
    "ParamSpec",
    "ExportSpec",
    "MirrorRule",
    "RequireExports",
    "SharedTypes",
    "Rule",
    "rule_adapter",
    # Constructors
    "labeled",
    "unlabeled",
    "export",
    "mirror",
    "require_exports",
    "shared_types",
    "with_exceptions",
    "to_label",
    # Services
    "ContractLoader",
    "load_rules",
]
