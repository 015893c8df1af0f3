"""
Single-instruction execution for the interpreter.

Each instruction kind is dispatched to a handler that mutates the
ExecutionState in place. A handler returns the index the instruction pointer
should move to, or None to advance normally by one. Handlers that fail raise
an InterpreterError before touching any state.
"""

from __future__ import annotations

from collections.abc import Callable

from bfvm.schemas.instruction import Instruction

from .errors import BoundsDirection, NoInput, PointerOutOfBounds, UnmatchedLoopEnd
from .state import ExecutionState

_Handler = Callable[[ExecutionState], "int | None"]


def execute_instruction(state: ExecutionState, instruction: Instruction) -> int | None:
    """
    Apply *instruction* to *state*.

    Returns the jump target for a taken loop-end, otherwise None.
    """
    handler = _DISPATCH.get(instruction)
    if handler is None:
        raise ValueError(f"Unknown instruction: {instruction!r}")
    return handler(state)


def _exec_pointer_increment(state: ExecutionState) -> None:
    if state.data_pointer >= state.tape.size - 1:
        raise PointerOutOfBounds(BoundsDirection.ABOVE, state.data_pointer, state.tape.size)
    state.data_pointer += 1


def _exec_pointer_decrement(state: ExecutionState) -> None:
    if state.data_pointer == 0:
        raise PointerOutOfBounds(BoundsDirection.BELOW, state.data_pointer, state.tape.size)
    state.data_pointer -= 1


def _exec_value_increment(state: ExecutionState) -> None:
    state.tape.increment(state.data_pointer)


def _exec_value_decrement(state: ExecutionState) -> None:
    state.tape.decrement(state.data_pointer)


def _exec_loop_begin(state: ExecutionState) -> None:
    state.program.jump_stack.append(state.program.instruction_pointer)


def _exec_loop_end(state: ExecutionState) -> int | None:
    program = state.program
    if not program.jump_stack:
        raise UnmatchedLoopEnd(program.instruction_pointer)
    begin = program.jump_stack.pop()
    if state.current_cell != 0:
        # Land on the loop-begin itself so it re-enters the loop and is
        # pushed again for the next iteration.
        return begin
    return None


def _exec_read_byte(state: ExecutionState) -> None:
    try:
        value = state.input_stream.read_byte()
    except OSError as exc:
        raise NoInput() from exc
    if value is None:
        raise NoInput()
    state.tape[state.data_pointer] = value


def _exec_write_byte(state: ExecutionState) -> None:
    state.output_stream.write_byte(state.current_cell)


def _exec_comment(state: ExecutionState) -> None:
    return None


_DISPATCH: dict[Instruction, _Handler] = {
    Instruction.POINTER_INCREMENT: _exec_pointer_increment,
    Instruction.POINTER_DECREMENT: _exec_pointer_decrement,
    Instruction.VALUE_INCREMENT: _exec_value_increment,
    Instruction.VALUE_DECREMENT: _exec_value_decrement,
    Instruction.LOOP_BEGIN: _exec_loop_begin,
    Instruction.LOOP_END: _exec_loop_end,
    Instruction.READ_BYTE: _exec_read_byte,
    Instruction.WRITE_BYTE: _exec_write_byte,
    Instruction.COMMENT: _exec_comment,
}
