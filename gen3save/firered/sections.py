"""
Save slot and section handling.

The save holds two slots of 14 sections (4 KB each). Sections can be in
any physical order; the footer identifies which is which.
"""
import logging
from typing import Dict, Iterable, List

from ..core.dataclasses import IntegrityWarning, SaveSlot, Section
from ..core.exceptions import SectionNotFoundError
from .binary import read_u16, read_u32
from .constants import (
    SECTION_SIZE, SECTION_COUNT, SLOT_SIZE,
    SECTION_ID_OFFSET, SECTION_CHECKSUM_OFFSET,
    SECTION_SIGNATURE_OFFSET, SECTION_SAVE_INDEX_OFFSET,
    SECTION_SIGNATURE,
)

logger = logging.getLogger(__name__)


def parse_section(data: bytes, physical_index: int = 0) -> Section:
    """Reads the footer of one 4096-byte section block."""
    return Section(
        physical_index=physical_index,
        section_id=read_u16(data, SECTION_ID_OFFSET),
        save_index=read_u32(data, SECTION_SAVE_INDEX_OFFSET),
        signature=read_u32(data, SECTION_SIGNATURE_OFFSET),
        checksum=read_u16(data, SECTION_CHECKSUM_OFFSET),
        data=bytes(data),
    )


def parse_save_slot(raw: bytes, slot_offset: int) -> SaveSlot:
    """Splits one slot into its 14 sections, in physical order.

    Args:
        raw (bytes): The whole save file.
        slot_offset (int): 0 for slot A, SLOT_SIZE for slot B.

    Returns:
        SaveSlot: The slot with its sections.
    """
    sections = []
    for i in range(SECTION_COUNT):
        start = slot_offset + i * SECTION_SIZE
        sections.append(parse_section(raw[start:start + SECTION_SIZE], i))
    return SaveSlot(offset=slot_offset, sections=sections)


def locate_active_slot(raw: bytes) -> SaveSlot:
    """Picks the slot written most recently.

    The game alternates slots on every save, so the slot whose first section
    has the higher save index is the newest. Ties go to slot A. The counter
    is compared as a plain 32-bit value; wraparound is not handled.

    Args:
        raw (bytes): The whole save file (at least two slots long).

    Returns:
        SaveSlot: The active slot.
    """
    a = parse_save_slot(raw, 0)
    b = parse_save_slot(raw, SLOT_SIZE)
    active = a if a.save_index >= b.save_index else b
    logger.debug(f"Slot A save index: {a.save_index}, Slot B save index: {b.save_index}")
    logger.debug(f"Using slot {active.label}")
    return active


class SectionIndex:
    """Lookup of a slot's sections by logical id.

    Physical order is discarded. If two blocks claim the same id, the later
    one wins.
    """

    def __init__(self, sections: Iterable[Section]):
        self._sections: List[Section] = list(sections)
        self._by_id: Dict[int, Section] = {s.section_id: s for s in self._sections}

    @classmethod
    def from_slot(cls, slot: SaveSlot) -> "SectionIndex":
        return cls(slot.sections)

    def __contains__(self, section_id: int) -> bool:
        return section_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)

    @property
    def ids(self) -> List[int]:
        return sorted(self._by_id)

    @property
    def sections(self) -> List[Section]:
        """Sections in physical order."""
        return list(self._sections)

    def lookup(self, section_id: int) -> Section:
        """Returns the section with `section_id`.

        Raises:
            SectionNotFoundError: If no block in the slot carries that id.
        """
        try:
            return self._by_id[section_id]
        except KeyError:
            raise SectionNotFoundError(section_id, available=self.ids) from None

    def verify_signatures(self) -> List[IntegrityWarning]:
        """Checks every section footer against the expected signature.

        Mismatches are logged and returned; they never stop decoding.
        """
        warnings = []
        for s in self._sections:
            if s.signature == SECTION_SIGNATURE:
                logger.debug(f"Section {s.section_id:2d}: signature OK")
                continue
            warning = IntegrityWarning(
                section_id=s.section_id,
                physical_index=s.physical_index,
                expected=SECTION_SIGNATURE,
                actual=s.signature,
            )
            logger.warning(f"Section {s.section_id:2d}: signature BAD (0x{s.signature:08X})")
            warnings.append(warning)
        return warnings
