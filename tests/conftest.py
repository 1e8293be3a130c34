"""Pytest fixtures for test suite."""

import json

import pytest
from pathlib import Path
from typing import Any

from surface_contracts.interface import PackageInterface
from surface_contracts.rules import ContractLoader

from helpers import function, named, toggle_state


# =============================================================================
# Core Fixtures
# =============================================================================


@pytest.fixture
def interface_data() -> dict[str, Any]:
    """A package interface export, as decoded JSON, that satisfies contracts.yaml."""
    return {
        "name": "ui",
        "version": "1.4.0",
        "modules": {
            "ui/icon": {
                "documentation": ["Plain icons."],
                "functions": {
                    "icon": function("name"),
                    "sized": function("name", "size"),
                    "from_svg": function("svg"),
                },
            },
            "ui/themed/icon": {
                "functions": {
                    "icon": function("theme", "name"),
                    "sized": function("theme", "name", "size"),
                    "from_svg": function("svg"),
                    "preload": function("theme"),
                },
            },
            "ui/button": {
                "functions": {
                    "button": function("config", "label"),
                    "view": function(None),
                },
            },
            "ui/toggle": {
                "types": {"ToggleState": toggle_state(0, 0)},
            },
            "ui/themed/toggle": {
                "types": {
                    "ToggleState": {
                        "parameters": 1,
                        "constructors": list(reversed(toggle_state(7, 7)["constructors"])),
                    },
                },
                "type-aliases": {
                    "Handler": {"parameters": 0, "alias": named("Nil")},
                },
            },
        },
    }


@pytest.fixture
def package_interface(interface_data: dict[str, Any]) -> PackageInterface:
    """Validated package interface."""
    return PackageInterface.model_validate(interface_data)


@pytest.fixture
def interface_file(tmp_path: Path, interface_data: dict[str, Any]) -> Path:
    """Package interface written to a JSON file."""
    path = tmp_path / "package-interface.json"
    path.write_text(json.dumps(interface_data), encoding="utf-8")
    return path


@pytest.fixture
def contracts_file() -> Path:
    """Path to the repository's contract file."""
    return Path(__file__).parent.parent / "contracts.yaml"


@pytest.fixture
def contract_rules(contracts_file: Path) -> list:
    """Rules loaded from the repository's contract file."""
    return ContractLoader(contracts_file).load_file()
