"""Shared CLI utilities: console, Result types, paths and validators."""

from .console import console, print_error
from .types import Failure, Result, Success

__all__ = [
    "console",
    "print_error",
    "Success",
    "Failure",
    "Result",
]
