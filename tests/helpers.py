"""
Builders for synthetic FireRed save images used across the tests.

Everything is packed by hand with `struct` so the tests do not depend on
the code under test to produce their fixtures.
"""
import struct
from typing import Dict, List, Optional, Sequence

SECTION_SIZE = 0x1000
SECTION_COUNT = 14
SLOT_SIZE = SECTION_SIZE * SECTION_COUNT
SIGNATURE = 0x08012025

# Gen 3 text: "A"=0xBB, "a"=0xD5, "0"=0xA1
def encode_text(text: str, length: int) -> bytes:
    out = bytearray()
    for ch in text:
        if ch.isupper():
            out.append(0xBB + ord(ch) - ord('A'))
        elif ch.islower():
            out.append(0xD5 + ord(ch) - ord('a'))
        elif ch.isdigit():
            out.append(0xA1 + int(ch))
        elif ch == ' ':
            out.append(0x00)
        else:
            raise ValueError(ch)
    if len(out) < length:
        out.append(0xFF)
    out.extend(b'\xFF' * (length - len(out)))
    return bytes(out[:length])


def xor_words(data: bytes, key: int) -> bytes:
    out = bytearray()
    for i in range(0, len(data), 4):
        word = struct.unpack('<I', data[i:i + 4])[0]
        out += struct.pack('<I', word ^ key)
    return bytes(out)


def growth_block(species: int, experience: int, item: int = 0, friendship: int = 70) -> bytes:
    # species, item, exp, pp bonuses(unused here), friendship, 2 pad
    return struct.pack('<HHIBBxx', species, item, experience, 0, friendship)


def attacks_block(moves: Sequence[int], pp_bonuses: int = 0) -> bytes:
    padded = list(moves) + [0] * (4 - len(moves))
    return struct.pack('<HHHHBxxx', *padded, pp_bonuses)


def evs_block(evs: Sequence[int]) -> bytes:
    return bytes(evs) + b'\x00' * 6


def misc_block(ivs: Sequence[int] = (0,) * 6, egg: bool = False, ability_bit: int = 0) -> bytes:
    # pokerus, met location, origins, IV/egg/ability word, ribbons
    word = 0
    for i, iv in enumerate(ivs):
        word |= (iv & 0x1F) << (i * 5)
    word |= int(egg) << 30
    word |= (ability_bit & 1) << 31
    return struct.pack('<BBHII', 0, 0, 0, word, 0)


def build_pokemon(
    pid: int,
    otid: int,
    physical_blocks: List[bytes],
    nickname: str = "TEST",
    ot_name: str = "RED",
    level: int = 5,
    hp: int = 20,
    max_hp: int = 20,
    stats: Sequence[int] = (10, 11, 12, 13, 14),
    checksum: Optional[int] = None,
) -> bytes:
    """Builds an encrypted 100-byte party record.

    `physical_blocks` are the four 12-byte blocks in the order they are
    stored, i.e. already shuffled for `pid`.
    """
    plain = b''.join(physical_blocks)
    assert len(plain) == 48

    if checksum is None:
        checksum = sum(struct.unpack('<24H', plain)) & 0xFFFF

    header = (
        struct.pack('<II', pid, otid)
        + encode_text(nickname, 10)
        + struct.pack('<H', 0x0202)
        + encode_text(ot_name, 7)
        + b'\x00'
        + struct.pack('<H', checksum)
        + b'\x00\x00'
    )
    status = struct.pack('<IBBHHHHHHH', 0, level, 0, hp, max_hp, *stats)
    record = header + xor_words(plain, pid ^ otid) + status
    assert len(record) == 100
    return record


def build_section(
    section_id: int,
    save_index: int,
    payload: bytes = b'',
    signature: int = SIGNATURE,
) -> bytes:
    body = payload + b'\x00' * (0xFF4 - len(payload))
    footer = struct.pack('<HHII', section_id, 0, signature, save_index)
    data = body + footer
    assert len(data) == SECTION_SIZE
    return data


def build_slot(
    save_index: int,
    payloads: Optional[Dict[int, bytes]] = None,
    order: Optional[Sequence[int]] = None,
    bad_signatures: Sequence[int] = (),
) -> bytes:
    """A 14-section slot. `order` lists section ids by physical position."""
    payloads = payloads or {}
    order = list(order) if order is not None else list(range(SECTION_COUNT))
    blocks = []
    for section_id in order:
        signature = 0xDEADBEEF if section_id in bad_signatures else SIGNATURE
        blocks.append(build_section(section_id, save_index, payloads.get(section_id, b''), signature))
    return b''.join(blocks)


def trainer_payload(name: str = "ASH", gender: int = 0, trainer_id: int = 12345,
                    secret_id: int = 54321) -> bytes:
    return encode_text(name, 7) + b'\x00' + struct.pack('<BxHH', gender, trainer_id, secret_id)


def party_payload(count: int, records: Sequence[bytes]) -> bytes:
    return b'\x00' * 0x34 + struct.pack('<I', count) + b''.join(records)


def build_save(slot_a: bytes, slot_b: bytes, trailer: int = 0x4000) -> bytes:
    """Two slots plus the trailing region real 128 KB saves carry."""
    return slot_a + slot_b + b'\xFF' * trailer
