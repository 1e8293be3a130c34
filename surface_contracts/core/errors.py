"""Exception types raised by the loaders.

The verification engine itself never raises for contract failures; those are
reported as violations. These exceptions only cover input acquisition.
"""

from __future__ import annotations

from typing import Literal


class SurfaceContractsError(Exception):
    """Base class for all errors raised by this package."""


class InterfaceLoadError(SurfaceContractsError):
    """The package interface could not be read or decoded.

    Attributes:
        path: The file that was being loaded.
        reason: "read" if the file could not be read, "decode" if it was read
            but its content is not a valid package interface.
        detail: The underlying error message.
    """

    def __init__(self, path: str, reason: Literal["read", "decode"], detail: str):
        self.path = path
        self.reason = reason
        self.detail = detail
        super().__init__(f"Could not {reason} package interface {path}: {detail}")


class ContractLoadError(SurfaceContractsError):
    """A contract (rules) file is missing or malformed."""
