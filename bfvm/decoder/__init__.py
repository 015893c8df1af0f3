from .decoder import decode, decode_source, encode
from .loops import LoopCheck, build_jump_table, check_loops, find_unmatched_loops

__all__ = [
    "decode",
    "decode_source",
    "encode",
    "LoopCheck",
    "build_jump_table",
    "check_loops",
    "find_unmatched_loops",
]
