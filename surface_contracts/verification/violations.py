"""Violation models - the verification engine's only output.

Violations are plain frozen data, never exceptions. Each carries everything a
formatter needs to render a message without consulting the interface again.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _ViolationModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class MissingFunction(_ViolationModel):
    """A mirrored function is absent from the target module."""

    kind: Literal["missing_function"] = "missing_function"
    source_module: str
    target_module: str
    name: str


class ParameterMismatch(_ViolationModel):
    """A function's label sequence differs from the expected one."""

    kind: Literal["parameter_mismatch"] = "parameter_mismatch"
    module: str
    function: str
    expected: tuple[str, ...]
    actual: tuple[str, ...]


class MissingType(_ViolationModel):
    """A shared type is absent from one of the modules."""

    kind: Literal["missing_type"] = "missing_type"
    module: str
    name: str


class TypeMismatch(_ViolationModel):
    """A shared type is defined differently in the two modules."""

    kind: Literal["type_mismatch"] = "type_mismatch"
    module_a: str
    module_b: str
    name: str
    reason: str


class MissingExport(_ViolationModel):
    """A required function is absent from a module."""

    kind: Literal["missing_export"] = "missing_export"
    module: str
    name: str
    arity: int


class ModuleNotFound(_ViolationModel):
    """A rule names a module the package interface does not contain."""

    kind: Literal["module_not_found"] = "module_not_found"
    module: str


class InterfaceLoadFailure(_ViolationModel):
    """The package interface itself could not be loaded."""

    kind: Literal["interface_load_failure"] = "interface_load_failure"
    path: str
    reason: Literal["read", "decode"]
    detail: str


Violation = Annotated[
    Union[
        MissingFunction,
        ParameterMismatch,
        MissingType,
        TypeMismatch,
        MissingExport,
        ModuleNotFound,
        InterfaceLoadFailure,
    ],
    Field(discriminator="kind"),
]
