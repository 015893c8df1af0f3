from .errors import (
    BoundsDirection,
    InterpreterError,
    NoInput,
    PointerOutOfBounds,
    UnmatchedLoopBegin,
    UnmatchedLoopEnd,
)
from .interpreter import Interpreter, RunStatus
from .state import ExecutionState, Program
from .tape import DEFAULT_TAPE_SIZE, Tape

__all__ = [
    # Errors
    "InterpreterError",
    "UnmatchedLoopBegin",
    "UnmatchedLoopEnd",
    "PointerOutOfBounds",
    "BoundsDirection",
    "NoInput",
    # State
    "Program",
    "ExecutionState",
    "Tape",
    "DEFAULT_TAPE_SIZE",
    # Engine
    "Interpreter",
    "RunStatus",
]
