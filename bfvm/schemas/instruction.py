"""
Instruction schema for the tape machine.

Every byte of a program source decodes to exactly one Instruction. The eight
command bytes map to their own members; every other byte is a COMMENT and
has no effect when executed.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class Instruction(str, Enum):
    """Instruction kinds understood by the interpreter."""

    POINTER_INCREMENT = "POINTER_INCREMENT"
    POINTER_DECREMENT = "POINTER_DECREMENT"
    VALUE_INCREMENT = "VALUE_INCREMENT"
    VALUE_DECREMENT = "VALUE_DECREMENT"
    LOOP_BEGIN = "LOOP_BEGIN"
    LOOP_END = "LOOP_END"
    READ_BYTE = "READ_BYTE"
    WRITE_BYTE = "WRITE_BYTE"
    COMMENT = "COMMENT"

    @property
    def symbol(self) -> int:
        """Canonical source byte for this instruction."""
        return CANONICAL_BYTES[self]


# COMMENT has no command byte of its own; a space is its canonical spelling.
COMMENT_BYTE = 0x20

CANONICAL_BYTES: MappingProxyType[Instruction, int] = MappingProxyType(
    {
        Instruction.POINTER_INCREMENT: ord(">"),
        Instruction.POINTER_DECREMENT: ord("<"),
        Instruction.VALUE_INCREMENT: ord("+"),
        Instruction.VALUE_DECREMENT: ord("-"),
        Instruction.LOOP_BEGIN: ord("["),
        Instruction.LOOP_END: ord("]"),
        Instruction.READ_BYTE: ord(","),
        Instruction.WRITE_BYTE: ord("."),
        Instruction.COMMENT: COMMENT_BYTE,
    }
)
