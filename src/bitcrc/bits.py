"""Helpers to derive bit streams from frame data and to render CRC values.

>>> bits_from_bytes(b"\\xa5")
[1, 0, 1, 0, 0, 1, 0, 1]
>>> int_from_bits([1, 0, 1])
5
>>> get_printable_crc_string(0x31C3, 16)
'hex [31c3]'
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from bitcrc.engine import register_mask, validate_degree

if TYPE_CHECKING:
    from collections.abc import Iterable


class PrintFormats(enum.IntEnum):
    HEX = 0
    DEC = 1
    BIN = 2


def bits_from_bytes(data: bytes | bytearray, msb_first: bool = True) -> list[int]:
    """Unpack raw bytes into a bit stream. By default, every byte is unpacked most significant
    bit first, which is the order expected by the non-reflected CRC model of this package."""
    bits = []
    if msb_first:
        shifts = range(7, -1, -1)
    else:
        shifts = range(8)
    for byte in data:
        bits.extend((byte >> shift) & 1 for shift in shifts)
    return bits


def bits_from_int(value: int, width: int) -> list[int]:
    """Unpack an unsigned integer into ``width`` bits, most significant bit first.

    >>> bits_from_int(6, 4)
    [0, 1, 1, 0]
    """
    if width < 0:
        raise ValueError(f"Invalid bit width {width}")
    if value < 0 or value >> width:
        raise ValueError(f"Passed value {value} does not fit into {width} bits or is negative")
    return [(value >> shift) & 1 for shift in range(width - 1, -1, -1)]


def int_from_bits(bits: Iterable[int]) -> int:
    """Pack a bit stream, most significant bit first, into an unsigned integer."""
    value = 0
    for bit in bits:
        value = (value << 1) | (bit & 1)
    return value


def crc_to_bytes(value: int, degree: int) -> bytes:
    """Convert a CRC value of width ``degree`` into big endian bytes. The byte length is the
    smallest number of bytes which can hold ``degree`` bits."""
    validate_degree(degree)
    if value < 0 or value & ~register_mask(degree):
        raise ValueError(f"Passed value {value} larger than allowed for degree {degree}")
    return value.to_bytes((degree + 7) // 8, byteorder="big")


def get_printable_crc_string(
    value: int, degree: int, print_format: PrintFormats = PrintFormats.HEX
) -> str:
    """Returns the CRC value as a zero-padded printable string in the given format."""
    validate_degree(degree)
    if print_format == PrintFormats.HEX:
        return f"hex [{value:0{(degree + 3) // 4}x}]"
    elif print_format == PrintFormats.DEC:
        return f"dec [{value}]"
    elif print_format == PrintFormats.BIN:
        return f"bin [{value:0{degree}b}]"
    raise ValueError(f"Unknown print format {print_format}")
