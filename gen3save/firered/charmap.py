"""
Gen 3 character encoding.

GBA Pokemon games use a proprietary single-byte encoding, not ASCII.
Only the printable subset needed for names is mapped; any other byte is
rendered as a visible ``[0xNN]`` placeholder so decoding never fails.
"""

from typing import Dict, Optional

STRING_TERMINATOR = 0xFF

CHAR_MAP: Dict[int, str] = {}


def _store(offset: int, symbols: str) -> None:
    for i, symbol in enumerate(symbols):
        CHAR_MAP[offset + i] = symbol


_store(0x00, " ")
_store(0xA1, "0123456789")
_store(0xAB, "!?.-")
_store(0xB5, "♂♀")
_store(0xBB, "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_store(0xD5, "abcdefghijklmnopqrstuvwxyz")

REVERSE_CHAR_MAP: Dict[str, int] = {symbol: code for code, symbol in CHAR_MAP.items()}


def decode_string(data: bytes) -> str:
    """Decodes a Gen 3 encoded string.

    Decoding stops at the first 0xFF terminator. Unmapped bytes are kept
    as ``[0xNN]`` placeholders.

    Args:
        data (bytes): Encoded bytes, usually a fixed-width name field.

    Returns:
        str: The decoded text.
    """
    s = ""
    for b in data:
        if b == STRING_TERMINATOR:
            break
        s += CHAR_MAP.get(b, f"[0x{b:02x}]")
    return s


def encode_string(text: str, length: Optional[int] = None) -> bytes:
    """Encodes text into the Gen 3 character set.

    A terminator is appended, then the result is padded with 0xFF up to
    ``length`` when one is given. Text that exactly fills ``length`` is
    stored without a terminator, as the game does.

    Args:
        text (str): Text made only of mapped characters.
        length (Optional[int]): Fixed field width.

    Returns:
        bytes: The encoded field.

    Raises:
        ValueError: If a character has no mapping or the text does not fit.
    """
    encoded = bytearray()
    for ch in text:
        if ch not in REVERSE_CHAR_MAP:
            raise ValueError(f"Character {ch!r} has no Gen 3 encoding")
        encoded.append(REVERSE_CHAR_MAP[ch])
    encoded.append(STRING_TERMINATOR)

    if length is not None:
        if len(text) > length:
            raise ValueError(f"Text {text!r} does not fit in {length} bytes")
        # A name that fills the whole field has no terminator
        del encoded[length:]
        encoded.extend([STRING_TERMINATOR] * (length - len(encoded)))
    return bytes(encoded)
