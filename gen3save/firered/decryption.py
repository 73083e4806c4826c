import struct

from ..core.enums import Substructure
from .binary import read_u32
from .constants import (
    POKEMON_SIZE_BYTES, PKM_PERSONALITY, PKM_OT_ID,
    PKM_DATA_START, PKM_DATA_END, SUBSTRUCT_SIZE_BYTES,
)

"""
Gen 3 Pokémon Encryption Logic.

Ref: https://bulbapedia.bulbagarden.net/wiki/Pok%C3%A9mon_data_structure_(Generation_III)

Key components:
1. XOR Encryption of bytes 32-79 with a 32-bit key (PID ^ OTID).
2. Data shuffling based on Personality Value (PID).
3. Checksum verification.
"""

# Entry [i] lists, for physical block 0..3, which substructure sits there.
# 0 = Growth, 1 = Attacks, 2 = EVs, 3 = Misc
SUBSTRUCTURE_ORDERS = (
    (0, 1, 2, 3), (0, 1, 3, 2), (0, 2, 1, 3), (0, 2, 3, 1), (0, 3, 1, 2), (0, 3, 2, 1),
    (1, 0, 2, 3), (1, 0, 3, 2), (1, 2, 0, 3), (1, 2, 3, 0), (1, 3, 0, 2), (1, 3, 2, 0),
    (2, 0, 1, 3), (2, 0, 3, 1), (2, 1, 0, 3), (2, 1, 3, 0), (2, 3, 0, 1), (2, 3, 1, 0),
    (3, 0, 1, 2), (3, 0, 2, 1), (3, 1, 0, 2), (3, 1, 2, 0), (3, 2, 0, 1), (3, 2, 1, 0),
)

def decrypt_data(data: bytes, key: int) -> bytes:
    """Decrypts a block of Pokémon data using a 32-bit XOR key.

    Args:
        data (bytes): The encrypted byte buffer (length must be multiple of 4).
        key (int): The 32-bit decryption key.

    Returns:
        bytes: The decrypted data.
    """
    decrypted = bytearray()
    for i in range(0, len(data), 4):
        chunk = struct.unpack('<I', data[i:i+4])[0]
        decrypted.extend(struct.pack('<I', chunk ^ key))
    return bytes(decrypted)

def get_encryption_key(record: bytes) -> int:
    return read_u32(record, PKM_PERSONALITY) ^ read_u32(record, PKM_OT_ID)

def decrypt_pokemon(record: bytes) -> bytes:
    """Returns a copy of a 100-byte record with its data block decrypted.

    Only bytes 32-79 change. XOR is its own inverse, so calling this on a
    decrypted record encrypts it again.

    Args:
        record (bytes): The raw 100-byte Pokémon structure.

    Returns:
        bytes: A new 100-byte buffer.

    Raises:
        ValueError: If record length is not 100 bytes.
    """
    if len(record) != POKEMON_SIZE_BYTES:
        raise ValueError(f"Pokemon record must be {POKEMON_SIZE_BYTES} bytes, got {len(record)}")

    record = bytes(record)
    key = get_encryption_key(record)
    payload = decrypt_data(record[PKM_DATA_START:PKM_DATA_END], key)
    return record[:PKM_DATA_START] + payload + record[PKM_DATA_END:]

def get_substructure_order(pid: int) -> tuple:
    """Determines the permutation order of substructures.

    The 48-byte data block is divided into 4 substructures (G, A, E, M) of 12 bytes.
    The order depends on PID % 24.

    Args:
        pid (int): Personality Value.

    Returns:
        tuple: 4 integers, the substructure held by each physical block.
    """
    return SUBSTRUCTURE_ORDERS[pid % 24]

def substructure_offset(pid: int, role: Substructure) -> int:
    """Byte offset inside the 100-byte record where `role` is stored."""
    position = get_substructure_order(pid).index(role)
    return PKM_DATA_START + position * SUBSTRUCT_SIZE_BYTES

def get_substructure(record: bytes, role: Substructure) -> bytes:
    """Returns the 12-byte substructure `role` from a decrypted record."""
    offset = substructure_offset(read_u32(record, PKM_PERSONALITY), role)
    return record[offset:offset + SUBSTRUCT_SIZE_BYTES]

def calculate_checksum(substructures: bytes) -> int:
    """Sum of all 16-bit words of the decrypted data block, truncated to 16 bits."""
    total = 0
    for i in range(0, len(substructures), 2):
        word = struct.unpack('<H', substructures[i:i+2])[0]
        total = (total + word) & 0xFFFF
    return total

def verify_checksum(substructures: bytes, original_checksum: int) -> bool:
    """Verifies that the decrypted data matches its checksum.

    The checksum does not depend on block order, so the still-shuffled
    48 bytes can be passed directly.

    Args:
        substructures (bytes): The 48-byte decrypted substructure data.
        original_checksum (int): The 16-bit checksum read from the Pokémon struct.

    Returns:
        bool: True if checksum calculates correctly.
    """
    return calculate_checksum(substructures) == original_checksum
