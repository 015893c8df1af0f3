from .streams import (
    BinaryInput,
    BinaryOutput,
    BufferInput,
    BufferOutput,
    ByteInput,
    ByteOutput,
)

__all__ = [
    # Protocols
    "ByteInput",
    "ByteOutput",
    # File-backed streams
    "BinaryInput",
    "BinaryOutput",
    # In-memory streams
    "BufferInput",
    "BufferOutput",
]
