"""
Save Reader for Pokemon FireRed / LeafGreen.

Entry point used by the CLI and any other caller: load a .sav file (or its
bytes), pick the active slot, index its sections and extract trainer or
party records.

Usage:
    from gen3save.firered.reader import SaveReader, parse_sav

    reader = SaveReader.from_file("firered.sav")
    trainer = reader.read_trainer()
    party = reader.read_party()

    result = parse_sav("firered.sav", RecordKind.PARTY)
    for warning in result.warnings:
        print(warning)
"""
import logging
from pathlib import Path
from typing import List, Union

from ..core.dataclasses import DecodeResult, IntegrityWarning, PartyPokemon, TrainerInfo
from ..core.enums import RecordKind
from ..core.exceptions import InvalidSaveSizeError, SaveFileReadError
from .constants import SAVE_MIN_SIZE, SECTION_TRAINER_INFO, SECTION_TEAM_ITEMS
from .decoder import FireRedDecoder
from .sections import SectionIndex, locate_active_slot

logger = logging.getLogger(__name__)


def load_save(path: Union[str, Path]) -> bytes:
    """Reads a save file from disk.

    Raises:
        SaveFileReadError: If the file cannot be read.
    """
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise SaveFileReadError(str(path), reason=e.strerror or str(e)) from e


class SaveReader:
    """
    High-level reader over one immutable save image.

    The active slot and section index are computed once on construction;
    signature mismatches are collected in `warnings`.
    """

    def __init__(self, raw: bytes):
        raw = bytes(raw)
        if len(raw) < SAVE_MIN_SIZE:
            raise InvalidSaveSizeError(len(raw), SAVE_MIN_SIZE)

        self.raw = raw
        self.slot = locate_active_slot(raw)
        self.sections = SectionIndex.from_slot(self.slot)
        logger.debug(f"Indexed {len(self.sections)} sections in slot {self.slot.label}")
        self.warnings: List[IntegrityWarning] = self.sections.verify_signatures()
        self.decoder = FireRedDecoder()

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SaveReader":
        raw = load_save(path)
        logger.info(f"Loaded {path} ({len(raw)} bytes)")
        return cls(raw)

    def read_trainer(self) -> TrainerInfo:
        return self.decoder.decode_trainer(self.sections.lookup(SECTION_TRAINER_INFO))

    def read_party(self) -> List[PartyPokemon]:
        return self.decoder.decode_party(self.sections.lookup(SECTION_TEAM_ITEMS))

    def decode(self, kind: RecordKind) -> DecodeResult:
        """Extracts one record kind.

        Args:
            kind (RecordKind): TRAINER or PARTY.

        Returns:
            DecodeResult: Records plus the slot's integrity warnings.

        Raises:
            SectionNotFoundError: If the required section is missing.
        """
        if kind is RecordKind.TRAINER:
            records = [self.read_trainer()]
        else:
            records = self.read_party()
        return DecodeResult(
            kind=kind,
            records=records,
            warnings=list(self.warnings),
            slot_offset=self.slot.offset,
            save_index=self.slot.save_index,
        )


def parse_sav(path: Union[str, Path], kind: RecordKind = RecordKind.PARTY) -> DecodeResult:
    """Loads `path` and decodes the requested record kind in one call."""
    return SaveReader.from_file(path).decode(kind)
