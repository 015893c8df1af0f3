from .instruction import CANONICAL_BYTES, COMMENT_BYTE, Instruction

__all__ = [
    "Instruction",
    "CANONICAL_BYTES",
    "COMMENT_BYTE",
]
