"""
Gen 3 Save Reader.

Decodes Pokemon FireRed / LeafGreen .sav files into trainer and party
records:

- Active slot selection between the two redundant save slots
- Section lookup by footer id, with signature checks
- Party record decryption and substructure unshuffling
- Gen 3 text decoding

Usage:
    from gen3save import parse_sav, RecordKind

    result = parse_sav("firered.sav", RecordKind.PARTY)
    for mon in result.records:
        print(f"{mon.nickname}: species {mon.species_id}, Lv {mon.level}")
"""

from __future__ import annotations

# Package version
__version__ = "0.1.0"

# Configuration
from .config import config, Gen3SaveConfig, UserSettings

# Core enums and types
from .core.enums import AbilitySlot, Substructure, Gender, RecordKind
from .core.dataclasses import TrainerInfo, PartyPokemon, DecodeResult, IntegrityWarning

# Exceptions
from .core.exceptions import (
    Gen3SaveError,
    InvalidSaveSizeError,
    SaveFileReadError,
    SectionNotFoundError,
    EntityNotFoundError,
)

# Decoder (primary interface)
from .firered import SaveReader, parse_sav, decode_string, encode_string

__all__ = [
    # Version
    "__version__",
    # Config
    "config",
    "Gen3SaveConfig",
    "UserSettings",
    # Enums
    "Substructure",
    "Gender",
    "AbilitySlot",
    "RecordKind",
    # Records
    "TrainerInfo",
    "PartyPokemon",
    "DecodeResult",
    "IntegrityWarning",
    # Exceptions
    "Gen3SaveError",
    "InvalidSaveSizeError",
    "SaveFileReadError",
    "SectionNotFoundError",
    "EntityNotFoundError",
    # Decoder
    "SaveReader",
    "parse_sav",
    "decode_string",
    "encode_string",
]
