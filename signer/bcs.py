"""Minimal BCS (Binary Canonical Serialization) writer

Only the shapes needed for Sui personal messages and zkLogin signatures are
covered: ULEB128 lengths, u8, u64, byte vectors, strings and vectors of
those.
"""

from typing import Iterable


def uleb128(value: int) -> bytes:
    """Encode a non-negative integer as ULEB128"""
    if value < 0:
        raise ValueError("ULEB128 cannot encode negative values")
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def u8(value: int) -> bytes:
    return value.to_bytes(1, "little")


def u64(value: int) -> bytes:
    return value.to_bytes(8, "little")


def byte_vector(data: bytes) -> bytes:
    """vector<u8>"""
    return uleb128(len(data)) + data


def string(value: str) -> bytes:
    return byte_vector(value.encode("utf-8"))


def string_vector(values: Iterable[str]) -> bytes:
    values = list(values)
    return uleb128(len(values)) + b"".join(string(v) for v in values)
