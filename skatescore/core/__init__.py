"""
Core Package - Skate Score Calculator
skatescore/core/__init__.py

Core infrastructure: exceptions, logging setup.
Shared instances live in skatescore.core.dependencies.
"""

from skatescore.core.exceptions import (
    IncompleteElementError,
    MissingGoeError,
    NotationError,
    ScaleOfValuesLoadError,
    ScoringException,
    UnknownElementError,
)
from skatescore.core.logging_config import configure_logging

__all__ = [
    # Logging
    "configure_logging",
    # Exceptions
    "IncompleteElementError",
    "MissingGoeError",
    "NotationError",
    "ScaleOfValuesLoadError",
    "ScoringException",
    "UnknownElementError",
]
