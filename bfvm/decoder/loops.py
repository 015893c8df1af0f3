"""
Static loop-balance check.

The engine only discovers an unbalanced loop when execution reaches it.
These helpers scan an instruction sequence once, ahead of time, and report
the same positions the engine would: the first ']' with no open '[', or the
'['s still open at the end of the sequence.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from bfvm.engine.errors import UnmatchedLoopBegin, UnmatchedLoopEnd
from bfvm.schemas.instruction import Instruction


@dataclass(frozen=True)
class LoopCheck:
    """Outcome of a static loop scan."""

    unmatched_end: int | None
    unmatched_begins: tuple[int, ...]

    @property
    def balanced(self) -> bool:
        return self.unmatched_end is None and not self.unmatched_begins


def _scan(instructions: Sequence[Instruction]) -> tuple[LoopCheck, dict[int, int]]:
    jump_table: dict[int, int] = {}
    stack: list[int] = []
    for position, instruction in enumerate(instructions):
        if instruction is Instruction.LOOP_BEGIN:
            stack.append(position)
        elif instruction is Instruction.LOOP_END:
            if not stack:
                # Execution would stop here, so later brackets are never reached.
                return LoopCheck(unmatched_end=position, unmatched_begins=()), jump_table
            start = stack.pop()
            jump_table[start] = position
            jump_table[position] = start
    return LoopCheck(unmatched_end=None, unmatched_begins=tuple(stack)), jump_table


def find_unmatched_loops(instructions: Sequence[Instruction]) -> LoopCheck:
    """Scan *instructions* and report any unbalanced loop brackets."""
    check, _ = _scan(instructions)
    return check


def check_loops(instructions: Sequence[Instruction]) -> None:
    """
    Raise the error the engine would eventually raise for unbalanced loops.

    UnmatchedLoopEnd takes priority: a stray ']' halts execution before the
    end of the program is reached.
    """
    check, _ = _scan(instructions)
    _raise_if_unbalanced(check)


def build_jump_table(instructions: Sequence[Instruction]) -> dict[int, int]:
    """Map every bracket position to the position of its partner."""
    check, jump_table = _scan(instructions)
    _raise_if_unbalanced(check)
    return jump_table


def _raise_if_unbalanced(check: LoopCheck) -> None:
    if check.unmatched_end is not None:
        raise UnmatchedLoopEnd(check.unmatched_end)
    if check.unmatched_begins:
        raise UnmatchedLoopBegin(check.unmatched_begins)
