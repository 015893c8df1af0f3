"""
The execution engine.

Interpreter owns one ExecutionState and drives it one instruction at a time:

  1. Look up the instruction at the instruction pointer
  2. Execute it through operations.execute_instruction
  3. Move the instruction pointer: to the jump target a taken loop-end
     returned, otherwise one past the instruction just executed

run() repeats this until the instruction pointer runs off the end of the
program. A clean finish also needs an empty jump stack; any loop-begin
still open at that point is reported as UnmatchedLoopBegin.

The first error ends the run. It propagates to the caller unchanged, the
instruction pointer stays on the faulting instruction, and the engine moves
to the ERROR state. The engine does no logging and never retries.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from bfvm.io.streams import ByteInput, ByteOutput
from bfvm.schemas.instruction import Instruction

from .errors import InterpreterError, UnmatchedLoopBegin
from .operations import execute_instruction
from .state import ExecutionState, Program
from .tape import DEFAULT_TAPE_SIZE, Tape


class RunStatus(str, Enum):
    RUNNING = "RUNNING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class Interpreter:
    """
    Runs one program against one tape.

    Usage:
        itp = Interpreter(decode_source(b"++[->+<]"), BufferInput(), BufferOutput())
        itp.run()
        itp.tape[1]  # 2
    """

    def __init__(
        self,
        instructions: Sequence[Instruction],
        input_stream: ByteInput,
        output_stream: ByteOutput,
        tape_size: int = DEFAULT_TAPE_SIZE,
    ) -> None:
        self.state = ExecutionState(
            program=Program(tuple(instructions)),
            tape=Tape(tape_size),
            input_stream=input_stream,
            output_stream=output_stream,
        )
        self._status = RunStatus.RUNNING
        self._error: InterpreterError | None = None

    # ── Accessors ──────────────────────────────────────────────────────────────

    @property
    def program(self) -> Program:
        return self.state.program

    @property
    def tape(self) -> Tape:
        return self.state.tape

    @property
    def data_pointer(self) -> int:
        return self.state.data_pointer

    @property
    def instruction_pointer(self) -> int:
        return self.state.program.instruction_pointer

    @property
    def steps(self) -> int:
        return self.state.steps

    @property
    def status(self) -> RunStatus:
        return self._status

    @property
    def error(self) -> InterpreterError | None:
        """The error that halted the run, if any."""
        return self._error

    # ── Execution ──────────────────────────────────────────────────────────────

    def step(self) -> None:
        """Execute the instruction at the instruction pointer."""
        self._require_running()
        program = self.state.program
        if program.finished:
            raise RuntimeError("no instruction to step: the program has ended")
        try:
            target = execute_instruction(self.state, program.current)
        except InterpreterError as exc:
            self._halt(exc)
            raise
        program.instruction_pointer = (
            target if target is not None else program.instruction_pointer + 1
        )
        self.state.steps += 1

    def run(self) -> None:
        """
        Step until the program ends.

        Raises the first InterpreterError encountered, or UnmatchedLoopBegin
        if loops are still open when the end is reached.
        """
        self._require_running()
        program = self.state.program
        while not program.finished:
            self.step()
        if program.jump_stack:
            exc = UnmatchedLoopBegin(program.jump_stack)
            self._halt(exc)
            raise exc
        self._status = RunStatus.SUCCESS
        self.state.output_stream.flush()

    def _halt(self, exc: InterpreterError) -> None:
        self._status = RunStatus.ERROR
        self._error = exc
        self.state.output_stream.flush()

    def _require_running(self) -> None:
        if self._status is not RunStatus.RUNNING:
            raise RuntimeError(f"interpreter has already halted ({self._status.value})")
