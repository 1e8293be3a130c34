"""Core package - Shared configuration and error types."""

from .config import Settings, get_settings, configure_logging
from .errors import SurfaceContractsError, InterfaceLoadError, ContractLoadError

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "configure_logging",
    # Errors
    "SurfaceContractsError",
    "InterfaceLoadError",
    "ContractLoadError",
]
