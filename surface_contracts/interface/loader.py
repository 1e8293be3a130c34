"""Package interface loader.

Reads the JSON package-interface export from disk and validates it into a
PackageInterface. Failures are raised as InterfaceLoadError, distinguishing a
file that could not be read from one whose content does not decode.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from surface_contracts.core.errors import InterfaceLoadError
from .schemas import PackageInterface

logger = logging.getLogger(__name__)


class InterfaceLoader:
    """Loads package interfaces from JSON files or strings."""

    def load(self, path: str | Path) -> PackageInterface:
        """Load and validate a package interface file.

        Raises:
            InterfaceLoadError: reason "read" if the file cannot be read,
                "decode" if it is not valid JSON or fails validation.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
        except OSError as e:
            raise InterfaceLoadError(str(path), "read", str(e)) from e
        except UnicodeDecodeError as e:
            raise InterfaceLoadError(str(path), "decode", f"invalid UTF-8: {e}") from e

        interface = self.loads(content, source=str(path))
        logger.info(f"Loaded package interface {path}: {len(interface.modules)} modules")
        return interface

    def loads(self, content: str, source: str = "<string>") -> PackageInterface:
        """Decode and validate a package interface from a JSON string."""
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise InterfaceLoadError(source, "decode", f"invalid JSON: {e}") from e

        try:
            return PackageInterface.model_validate(data)
        except ValidationError as e:
            raise InterfaceLoadError(source, "decode", _summarize(e)) from e


def _summarize(error: ValidationError) -> str:
    """Condense a pydantic validation error to one line per problem."""
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        problems.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(problems)


def load_interface(path: str | Path) -> PackageInterface:
    """Convenience function to load a package interface file."""
    return InterfaceLoader().load(path)
