"""
Error taxonomy for program execution.

Every error is raised at the instruction that causes it and ends the run.
Each carries enough context for a user-facing message:
  - UnmatchedLoopBegin: positions of every '[' still open at end of program
  - UnmatchedLoopEnd: position of the ']' that found no open '['
  - PointerOutOfBounds: which edge of the tape was crossed, and from where
  - NoInput: a ',' found the input stream exhausted or unreadable
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class InterpreterError(Exception):
    """Base class for every fault the interpreter can report."""


class UnmatchedLoopBegin(InterpreterError):
    """One or more loop-begin instructions never reached a matching loop-end.

    Attributes:
        positions: Instruction indices of the open loop-begins, in the order
            they were collected.
    """

    def __init__(self, positions: Iterable[int]) -> None:
        self.positions = tuple(positions)
        super().__init__(
            f"The '['s at these indices are unmatched: {list(self.positions)}"
        )


class UnmatchedLoopEnd(InterpreterError):
    """A loop-end instruction executed with no open loop-begin.

    Attributes:
        position: Instruction index of the offending loop-end.
    """

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"Unmatched ']' at character {position}")


class BoundsDirection(str, Enum):
    """Which end of the tape a pointer move tried to cross."""

    ABOVE = "ABOVE"
    BELOW = "BELOW"


class PointerOutOfBounds(InterpreterError):
    """A pointer move would leave the tape.

    Attributes:
        direction: ABOVE for a move past the last cell, BELOW for a move
            before cell 0.
        pointer: Data pointer at the time of the failed move (unchanged).
        tape_size: Length of the tape.
    """

    def __init__(self, direction: BoundsDirection, pointer: int, tape_size: int) -> None:
        self.direction = direction
        self.pointer = pointer
        self.tape_size = tape_size
        if direction is BoundsDirection.ABOVE:
            detail = f"cannot move right of cell {tape_size - 1}"
        else:
            detail = "cannot move left of cell 0"
        super().__init__(f"Data pointer out of bounds: {detail}")


class NoInput(InterpreterError):
    """A read instruction found no byte to read."""

    def __init__(self) -> None:
        super().__init__("No input given")
