"""
Core Module - Data structures, enums, and exceptions.

This module provides the fundamental types used throughout the
save decoder.
"""

from __future__ import annotations

from .enums import (
    Substructure,
    Gender,
    AbilitySlot,
    RecordKind,
)

from .dataclasses import (
    Section,
    SaveSlot,
    IntegrityWarning,
    TrainerInfo,
    PartyPokemon,
    DecodeResult,
    NATURES,
    get_nature,
)

from .exceptions import (
    Gen3SaveError,
    SaveFileError,
    InvalidSaveSizeError,
    SaveFileReadError,
    StructureError,
    SectionNotFoundError,
    DataError,
    EntityNotFoundError,
)

__all__ = [
    # Enums
    "Substructure",
    "Gender",
    "AbilitySlot",
    "RecordKind",
    # Dataclasses
    "Section",
    "SaveSlot",
    "IntegrityWarning",
    "TrainerInfo",
    "PartyPokemon",
    "DecodeResult",
    "NATURES",
    "get_nature",
    # Exceptions
    "Gen3SaveError",
    "SaveFileError",
    "InvalidSaveSizeError",
    "SaveFileReadError",
    "StructureError",
    "SectionNotFoundError",
    "DataError",
    "EntityNotFoundError",
]
