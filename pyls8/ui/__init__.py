"""Front ends for the LS-8 machine."""

from .console import AppConfig, ConsoleApp

__all__ = [
    "AppConfig",
    "ConsoleApp",
]
