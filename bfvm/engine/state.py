"""
Execution state for the interpreter.

Program holds the decoded instruction sequence together with its cursor: the
instruction pointer and the jump stack of currently open loop-begins.
ExecutionState is the single owned context a run mutates: program, tape,
data pointer and the two byte streams. Nothing here is process-global, so
any number of independent runs can coexist.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bfvm.io.streams import ByteInput, ByteOutput
from bfvm.schemas.instruction import Instruction

from .tape import Tape


@dataclass
class Program:
    """
    Instruction sequence plus execution cursor.

    Attributes:
        instructions: Decoded instructions; never modified after construction.
        instruction_pointer: Index of the next instruction to execute.
        jump_stack: Positions of loop-begins entered but not yet closed,
            oldest first.
    """

    instructions: tuple[Instruction, ...]
    instruction_pointer: int = 0
    jump_stack: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Accept any sequence at construction sites and freeze it.
        if not isinstance(self.instructions, tuple):
            self.instructions = tuple(self.instructions)
        if self.instruction_pointer < 0:
            raise ValueError(
                f"instruction_pointer must be >= 0, got {self.instruction_pointer}"
            )

    def __len__(self) -> int:
        return len(self.instructions)

    @property
    def finished(self) -> bool:
        return self.instruction_pointer >= len(self.instructions)

    @property
    def current(self) -> Instruction:
        return self.instructions[self.instruction_pointer]


@dataclass
class ExecutionState:
    """
    Everything one run owns.

    Attributes:
        program: Instructions and cursor.
        tape: Cell memory.
        input_stream: Where read instructions take bytes from.
        output_stream: Where write instructions send bytes.
        data_pointer: Index of the selected tape cell.
        steps: Number of instructions executed successfully so far.
    """

    program: Program
    tape: Tape
    input_stream: ByteInput
    output_stream: ByteOutput
    data_pointer: int = 0
    steps: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.data_pointer < self.tape.size:
            raise ValueError(
                f"data_pointer must be within 0..{self.tape.size - 1}, got {self.data_pointer}"
            )

    @property
    def current_cell(self) -> int:
        return self.tape[self.data_pointer]
