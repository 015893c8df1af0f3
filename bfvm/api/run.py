"""
Public run API.

run_source() decodes a program, optionally checks its loop brackets up
front, and executes it. It returns a RunReport whether or not execution
succeeds, so callers can inspect the final state after a fault.

run_file() adds source loading. Loader OSErrors are not interpreter errors
and propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from bfvm.config.settings import InterpreterConfig
from bfvm.decoder.decoder import decode_source
from bfvm.decoder.loops import check_loops
from bfvm.engine.errors import InterpreterError
from bfvm.engine.interpreter import Interpreter
from bfvm.io.streams import BufferInput, BufferOutput, ByteInput, ByteOutput
from bfvm.loader.source import load_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunReport:
    """Outcome of running a program.

    Attributes:
        passed: True only when the program ran to its end with no open loops.
        error: The InterpreterError that halted the run, or None.
        steps: Number of instructions executed successfully.
        data_pointer: Data pointer when execution stopped.
        tape: Snapshot of every tape cell when execution stopped.
        output: Bytes written by the program when no output stream was
            supplied; None when the caller supplied one.
    """

    passed: bool
    error: InterpreterError | None
    steps: int
    data_pointer: int
    tape: bytes
    output: bytes | None


def run_source(
    source: bytes,
    input_stream: ByteInput | None = None,
    output_stream: ByteOutput | None = None,
    config: InterpreterConfig | None = None,
) -> RunReport:
    """
    Decode and execute *source*.

    Parameters
    ----------
    source:
        Raw program bytes. Bytes other than the eight commands are comments.
    input_stream:
        Source for read instructions. Defaults to an empty in-memory buffer,
        so any read fails with NoInput.
    output_stream:
        Sink for write instructions. When None, output is captured and
        returned in ``RunReport.output``.
    config:
        Interpreter settings; defaults to ``InterpreterConfig()``.

    Returns
    -------
    RunReport
        Always returned for interpreter errors. Inspect ``passed`` and
        ``error`` for the outcome.
    """
    config = config or InterpreterConfig()
    captured = BufferOutput() if output_stream is None else None
    instructions = decode_source(source)
    logger.debug("Decoded %d instructions", len(instructions))

    interpreter = Interpreter(
        instructions,
        input_stream if input_stream is not None else BufferInput(),
        output_stream if output_stream is not None else captured,
        tape_size=config.tape_size,
    )

    try:
        if config.check_loops_upfront:
            check_loops(instructions)
        interpreter.run()
    except InterpreterError as exc:
        logger.info("Program halted after %d steps: %s", interpreter.steps, exc)
        return _report(interpreter, captured, error=exc)

    logger.info("Program completed after %d steps", interpreter.steps)
    return _report(interpreter, captured, error=None)


def run_file(
    path: str | Path,
    input_stream: ByteInput | None = None,
    output_stream: ByteOutput | None = None,
    config: InterpreterConfig | None = None,
) -> RunReport:
    """Load the program at *path* and run it. See run_source()."""
    return run_source(load_source(path), input_stream, output_stream, config)


def _report(
    interpreter: Interpreter,
    captured: BufferOutput | None,
    error: InterpreterError | None,
) -> RunReport:
    return RunReport(
        passed=error is None,
        error=error,
        steps=interpreter.steps,
        data_pointer=interpreter.data_pointer,
        tape=interpreter.tape.snapshot(),
        output=captured.getvalue() if captured is not None else None,
    )
