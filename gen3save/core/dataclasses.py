from dataclasses import dataclass, field
from typing import List, Union

from .enums import AbilitySlot, Gender, RecordKind

NATURES = [
    "Hardy", "Lonely", "Brave", "Adamant", "Naughty",
    "Bold", "Docile", "Relaxed", "Impish", "Lax",
    "Timid", "Hasty", "Serious", "Jolly", "Naive",
    "Modest", "Mild", "Quiet", "Bashful", "Rash",
    "Calm", "Gentle", "Sassy", "Careful", "Quirky"
]

EV_LABELS = ["HP", "Atk", "Def", "Spe", "SpA", "SpD"]


def get_nature(pid: int) -> str:
    """Determines the nature based on the Personality Value (PID).

    Args:
        pid (int): The 32-bit personality value of the Pokémon.

    Returns:
        str: The name of the nature.
    """
    return NATURES[pid % 25]


@dataclass(frozen=True)
class Section:
    """One 4 KB block of a save slot, tagged by its footer.

    Attributes:
        physical_index (int): Position of the block inside its slot (0-13).
        section_id (int): Logical id read from the footer.
        save_index (int): Save counter read from the footer.
        signature (int): Footer signature, expected to be 0x08012025.
        checksum (int): Footer checksum (not verified).
        data (bytes): The full 4096-byte block, footer included.
    """
    physical_index: int
    section_id: int
    save_index: int
    signature: int
    checksum: int
    data: bytes = field(repr=False)


@dataclass(frozen=True)
class SaveSlot:
    """One of the two redundant copies of the section block."""
    offset: int
    sections: List[Section]

    @property
    def save_index(self) -> int:
        # The first physical section carries the counter used for slot selection
        return self.sections[0].save_index

    @property
    def label(self) -> str:
        return "A" if self.offset == 0 else "B"


@dataclass(frozen=True)
class IntegrityWarning:
    """A section whose signature did not match. Never fatal."""
    section_id: int
    physical_index: int
    expected: int
    actual: int

    def __str__(self) -> str:
        return (f"Section {self.section_id} (block {self.physical_index}): "
                f"bad signature 0x{self.actual:08X}, expected 0x{self.expected:08X}")


@dataclass
class TrainerInfo:
    name: str
    gender: Gender
    trainer_id: int
    secret_id: int


@dataclass
class PartyPokemon:
    """Represents one decoded roster record from the party section.

    Attributes:
        personality (int): Personality Value (PID), unencrypted.
        ot_id (int): Original trainer id word, unencrypted.
        nickname (str): Decoded nickname.
        ot_name (str): Decoded original trainer name.
        level (int): Current level.
        current_hp (int): Current HP.
        max_hp (int): Maximum HP.
        attack, defense, speed, sp_attack, sp_defense (int): Battle stats.
        species_id (int): Internal species id from the Growth block.
        experience (int): Total experience points from the Growth block.
        moves (List[int]): Move ids from the Attacks block, zeros removed.
        evs (List[int]): HP, Atk, Def, Spe, SpA, SpD effort values.
        item_id (int): Held item id (0 = none).
        friendship (int): Friendship value.
        pp_bonuses (int): Packed PP-up counters.
        ivs (List[int]): Individual values from the Misc block, same order as evs.
        is_egg (bool): Egg flag from the Misc block.
        ability_slot (AbilitySlot): Active ability slot of the species.
        checksum_valid (bool): Whether the decrypted payload matches its checksum.
    """
    personality: int
    ot_id: int
    nickname: str
    ot_name: str
    level: int
    current_hp: int
    max_hp: int
    attack: int
    defense: int
    speed: int
    sp_attack: int
    sp_defense: int
    species_id: int
    experience: int
    moves: List[int] = field(default_factory=list)
    evs: List[int] = field(default_factory=lambda: [0] * 6)

    # Extended Data
    item_id: int = 0
    friendship: int = 0
    pp_bonuses: int = 0
    ivs: List[int] = field(default_factory=lambda: [0] * 6)
    is_egg: bool = False
    ability_slot: AbilitySlot = AbilitySlot.PRIMARY
    checksum_valid: bool = True

    @property
    def nature(self) -> str:
        """Calculates the nature from the PID."""
        return get_nature(self.personality)

    @property
    def is_empty(self) -> bool:
        """Empty party slots have PID = 0."""
        return self.personality == 0


@dataclass
class DecodeResult:
    """Outcome of one decode pass over a save file.

    Attributes:
        kind (RecordKind): Which record kind was extracted.
        records (list): TrainerInfo (one) or PartyPokemon (up to six).
        warnings (List[IntegrityWarning]): Non-fatal signature mismatches.
        slot_offset (int): Byte offset of the active slot in the file.
        save_index (int): Save counter of the active slot.
    """
    kind: RecordKind
    records: List[Union[TrainerInfo, PartyPokemon]]
    warnings: List[IntegrityWarning] = field(default_factory=list)
    slot_offset: int = 0
    save_index: int = 0
