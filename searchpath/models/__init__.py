"""Shared typed data models for searchpath.

This package contains the enums and dataclasses used by the lookup engine and
its collaborators, kept apart to avoid circular imports.
"""

from .datatypes import (
    ClassifiedEntry,
    EntryKind,
    EntryRoute,
    FoundEntry,
    PathViolation,
    ViolationKind,
)

__all__ = [
    "ClassifiedEntry",
    "EntryKind",
    "EntryRoute",
    "FoundEntry",
    "PathViolation",
    "ViolationKind",
]
