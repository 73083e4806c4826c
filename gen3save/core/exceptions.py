"""
Custom Exception Hierarchy for the Gen 3 save decoder.

Provides structured error handling with specific exception types
for the failure modes of a decode pass. Everything raised here is fatal
for the current decode; non-fatal conditions (bad section signatures,
unmapped characters) are reported as data instead.

Usage:
    from gen3save.core.exceptions import Gen3SaveError, SectionNotFoundError

    try:
        result = parse_sav(path)
    except SectionNotFoundError as e:
        logger.error(f"Save is missing a required section: {e}")
"""

from __future__ import annotations

from typing import Optional


class Gen3SaveError(Exception):
    """
    Base exception for all save decoding errors.

    All custom exceptions inherit from this, allowing callers to catch
    every decoder failure with a single except clause.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# =============================================================================
# Save File Errors
# =============================================================================

class SaveFileError(Gen3SaveError):
    """Base class for errors loading the raw save file."""
    pass


class InvalidSaveSizeError(SaveFileError):
    """
    Raised when the file is too short to hold two full save slots.

    Checked at load time, before any slot or section parsing runs.
    """

    def __init__(
        self,
        actual: int,
        expected: int,
        message: Optional[str] = None,
    ):
        msg = message or f"File too small to be a valid .sav ({actual} bytes)"
        super().__init__(msg, {"actual": actual, "expected": expected})
        self.actual = actual
        self.expected = expected


class SaveFileReadError(SaveFileError):
    """Raised when the save file cannot be read from disk."""

    def __init__(
        self,
        path: str,
        reason: Optional[str] = None,
        message: Optional[str] = None,
    ):
        msg = message or f"Failed to read file: {path}"
        details = {"path": path}
        if reason:
            details["reason"] = reason
        super().__init__(msg, details)
        self.path = path
        self.reason = reason


# =============================================================================
# Structure Errors
# =============================================================================

class StructureError(Gen3SaveError):
    """Base class for errors in the slot/section layout."""
    pass


class SectionNotFoundError(StructureError):
    """
    Raised when a mandatory section id is absent from the active slot.

    Fatal for the whole decode: no partial results are returned.
    """

    def __init__(
        self,
        section_id: int,
        available: Optional[list[int]] = None,
        message: Optional[str] = None,
    ):
        msg = message or f"Section {section_id} not found"
        super().__init__(msg, {"section_id": section_id, "available": available or []})
        self.section_id = section_id
        self.available = available or []


# =============================================================================
# Data Errors
# =============================================================================

class DataError(Gen3SaveError):
    """Base class for data-related errors."""
    pass


class EntityNotFoundError(DataError):
    """Raised when a game entity (species, move, item) is not in the knowledge base."""

    def __init__(
        self,
        entity_type: str,
        entity_id: int,
        message: Optional[str] = None,
    ):
        msg = message or f"{entity_type} with ID {entity_id} not found"
        super().__init__(msg, {"type": entity_type, "id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id
