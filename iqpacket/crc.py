"""CRC-16 checksum used to protect serial packets (polynomial 0x1021, seed 0xFFFF)."""

from __future__ import annotations

from collections.abc import Iterable

CRC_SEED = 0xFFFF


def byte_update_crc(crc: int, byte: int) -> int:
    """Fold one data byte into a running CRC and return the new CRC."""
    x = ((crc >> 8) ^ byte) & 0xFF
    x ^= x >> 4
    return ((crc << 8) ^ (x << 12) ^ (x << 5) ^ x) & 0xFFFF


def array_update_crc(crc: int, data: Iterable[int]) -> int:
    """Fold every byte of ``data`` into a running CRC and return the new CRC."""
    for byte in data:
        crc = byte_update_crc(crc, byte)
    return crc


def make_crc(data: Iterable[int]) -> int:
    """Compute the CRC of ``data`` starting from the standard seed."""
    return array_update_crc(CRC_SEED, data)