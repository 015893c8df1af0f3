"""
Byte-to-instruction decoding.

decode() is a pure total function over byte values: the eight command bytes
map to their instruction and every other byte maps to COMMENT. The lookup
table is built once at import time and is read-only afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from bfvm.schemas.instruction import CANONICAL_BYTES, Instruction


def _build_table() -> MappingProxyType[int, Instruction]:
    table = {byte: Instruction.COMMENT for byte in range(256)}
    for instruction, byte in CANONICAL_BYTES.items():
        if instruction is not Instruction.COMMENT:
            table[byte] = instruction
    return MappingProxyType(table)


_DECODE_TABLE = _build_table()


def decode(byte: int) -> Instruction:
    """Return the instruction for a single byte value (0-255)."""
    try:
        return _DECODE_TABLE[byte]
    except KeyError:
        raise ValueError(f"byte value must be in 0..255, got {byte!r}") from None


def decode_source(source: bytes) -> tuple[Instruction, ...]:
    """Decode every byte of *source* in order."""
    return tuple(_DECODE_TABLE[byte] for byte in source)


def encode(instructions: Iterable[Instruction]) -> bytes:
    """
    Spell *instructions* back out as source bytes.

    Each instruction becomes its canonical byte, so decoding the result
    reproduces the same sequence. Distinct comment bytes in an original
    source all come back as a space.
    """
    return bytes(CANONICAL_BYTES[instruction] for instruction in instructions)
