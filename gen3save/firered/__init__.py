"""
FireRed save layout - decoding of .sav files.

Provides:
- SaveReader / parse_sav: Load a save and extract trainer or party records
- FireRedDecoder: Record extraction from sections 0 and 1
- SectionIndex: Section lookup by footer id
- Character map and decryption helpers
"""

from __future__ import annotations

from .charmap import decode_string, encode_string
from .decoder import FireRedDecoder
from .decryption import decrypt_pokemon, get_substructure
from .reader import SaveReader, load_save, parse_sav
from .sections import SectionIndex, locate_active_slot, parse_save_slot

__all__ = [
    "SaveReader",
    "load_save",
    "parse_sav",
    "FireRedDecoder",
    "SectionIndex",
    "locate_active_slot",
    "parse_save_slot",
    "decode_string",
    "encode_string",
    "decrypt_pokemon",
    "get_substructure",
]
