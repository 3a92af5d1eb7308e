"""Text and integer encodings used by first-generation Pokemon games."""

from __future__ import annotations

NAME_LENGTH = 10
TERMINATOR = 0x50
UNKNOWN = 0xFF

_PUNCT_TO_TABLE = {0x20: 0x7F, 0x21: 0xE7, 0x2E: 0xE8, 0x3F: 0xE6}
_TABLE_TO_PUNCT = {v: k for k, v in _PUNCT_TO_TABLE.items()}
_TABLE_TO_PUNCT[TERMINATOR] = 0x00


def ascii_to_table(c: int, to_upper: bool = False) -> int:
    """Map one ASCII code to the game's character table; unknown gives 0xFF."""
    if 0x41 <= c <= 0x5A:
        return c + 63
    if 0x61 <= c <= 0x7A:
        return c + 31 if to_upper else c + 63
    return _PUNCT_TO_TABLE.get(c, UNKNOWN)


def table_to_ascii(c: int) -> int:
    """Map one character-table code back to ASCII; the terminator gives 0."""
    if 0x41 + 63 <= c <= 0x5A + 63 or 0x61 + 63 <= c <= 0x7A + 63:
        return c - 63
    return _TABLE_TO_PUNCT.get(c, UNKNOWN)


def encode_name(text: str, to_upper: bool = False) -> bytes:
    """Encode up to ten characters as an eleven-byte terminated name."""
    encoded = bytes(ascii_to_table(ord(ch) & 0xFF, to_upper) for ch in text[:NAME_LENGTH])
    return encoded.ljust(NAME_LENGTH + 1, bytes([TERMINATOR]))


def decode_name(data: bytes) -> str:
    """Decode a name, stopping at the terminator or after ten characters."""
    chars = []
    for code in data[:NAME_LENGTH]:
        value = table_to_ascii(code)
        if value == 0:
            break
        chars.append(chr(value))
    return "".join(chars)


def uint24_to_bytes(value: int) -> bytes:
    """Big-endian three-byte form of ``value``, keeping its low 24 bits."""
    return bytes(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))


def uint16_to_bytes(value: int) -> bytes:
    """Big-endian two-byte form of ``value``, keeping its low 16 bits."""
    return bytes(((value >> 8) & 0xFF, value & 0xFF))