"""
Enumerations for the Gen 3 save decoder.

This module provides the enum types used throughout the codebase,
ensuring consistent representation of record roles and kinds.
"""

from __future__ import annotations

from enum import Enum, IntEnum


# =============================================================================
# Record Layout Enums
# =============================================================================

class Substructure(IntEnum):
    """Logical role of a 12-byte block in the encrypted payload."""
    GROWTH = 0   # Species, held item, experience
    ATTACKS = 1  # Move ids, PP bonuses
    EVS = 2      # Effort values and contest condition
    MISC = 3     # Pokerus, met location, IVs


class Gender(IntEnum):
    """Trainer gender flag as stored in section 0."""
    BOY = 0
    GIRL = 1

    @classmethod
    def from_flag(cls, flag: int) -> Gender:
        """Any nonzero flag is treated as GIRL."""
        return cls.BOY if flag == 0 else cls.GIRL

    @property
    def label(self) -> str:
        return "Boy" if self is Gender.BOY else "Girl"


class AbilitySlot(IntEnum):
    """Which of the species' abilities a Pokemon has."""
    PRIMARY = 0
    SECONDARY = 1
    HIDDEN = 2

    @classmethod
    def from_record(cls, personality: int, ability_bit: int) -> AbilitySlot:
        """The ability bit selects the hidden slot, otherwise PID parity decides."""
        if ability_bit:
            return cls.HIDDEN
        return cls.SECONDARY if personality % 2 else cls.PRIMARY

    @property
    def label(self) -> str:
        return self.name.capitalize()


# =============================================================================
# Decode Enums
# =============================================================================

class RecordKind(Enum):
    """Which record kind a decode pass should extract."""
    TRAINER = "trainer"
    PARTY = "party"
