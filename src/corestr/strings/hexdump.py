"""Hexadecimal dumps of IEEE-754 bit patterns."""

import string
import struct


def float2hex(value: float) -> str:
    """Bit pattern of `value` as binary32, e.g. 1.0 -> '0x3f800000'.

    This reinterprets bits rather than printing the number, so -0.0 and
    0.0 (or NaNs with different payloads) give different strings.
    Raises OverflowError when `value` does not fit in binary32.
    """
    (bits,) = struct.unpack(">I", struct.pack(">f", value))
    return f"0x{bits:08x}"


def double2hex(value: float) -> str:
    """Bit pattern of `value` as binary64, e.g. 1.0 -> '0x3ff0000000000000'."""
    (bits,) = struct.unpack(">Q", struct.pack(">d", value))
    return f"0x{bits:016x}"


def _parse_bits(text: str, digits: int) -> int:
    raw = text[2:] if text[:2].lower() == "0x" else text
    if len(raw) != digits:
        raise ValueError(f"expected {digits} hex digits, got {text!r}")
    if not all(c in string.hexdigits for c in raw):
        raise ValueError(f"not a hex bit pattern: {text!r}")
    return int(raw, 16)


def hex2float(text: str) -> float:
    """Inverse of float2hex: '0x3f800000' -> 1.0."""
    return struct.unpack(">f", _parse_bits(text, 8).to_bytes(4, "big"))[0]


def hex2double(text: str) -> float:
    """Inverse of double2hex."""
    return struct.unpack(">d", _parse_bits(text, 16).to_bytes(8, "big"))[0]
