"""Pydantic models for verification API requests and responses."""

from pydantic import BaseModel, Field

from surface_contracts.interface import PackageInterface
from surface_contracts.rules import Rule
from .violations import Violation


class VerifyRequest(BaseModel):
    """Request to verify rules against a posted package interface."""

    interface: PackageInterface
    rules: list[Rule] = Field(default_factory=list)


class VerificationReport(BaseModel):
    """Result of a verification run."""

    ok: bool
    violation_count: int
    violations: list[Violation]
    counts: dict[str, int] = Field(default_factory=dict, description="Violations per kind")
    text: str = Field("", description="Formatted FAIL paragraphs, or a PASS line")
