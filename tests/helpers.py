"""Builders for package-interface JSON used across the test suite."""

from typing import Any


def named(name: str, module: str = "gleam", *parameters: dict) -> dict[str, Any]:
    """JSON for a named type reference."""
    return {
        "kind": "named",
        "package": "",
        "module": module,
        "name": name,
        "parameters": list(parameters),
    }


def variable(id: int) -> dict[str, Any]:
    return {"kind": "variable", "id": id}


STRING = named("String")


def function(*labels: str | None) -> dict[str, Any]:
    """JSON for a function taking String parameters with the given labels."""
    return {
        "parameters": [{"label": label, "type": STRING} for label in labels],
        "return": STRING,
    }


def toggle_state(on_var: int, off_var: int) -> dict[str, Any]:
    """JSON for a two-constructor ToggleState type using the given variable ids."""
    return {
        "parameters": 1,
        "constructors": [
            {"name": "On", "parameters": [{"label": "value", "type": variable(on_var)}]},
            {"name": "Off", "parameters": [{"label": "value", "type": variable(off_var)}]},
        ],
    }
