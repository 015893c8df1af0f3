"""
End-to-end tests: complete programs from source bytes to output.

Each program is run through the public API exactly as the command-line
driver runs it: raw source in, report and output bytes out.
"""

from __future__ import annotations

from bfvm.api.run import run_file, run_source
from bfvm.decoder.decoder import decode_source, encode
from bfvm.engine.errors import NoInput
from bfvm.io.streams import BufferInput

HELLO_WORLD = (
    b"++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    b">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)

COMMENTED_ADDITION = b"""
Add two digits read from input and print the sum digit
,>,                 read a and b
[-<+>]              move b onto a
<------------------------------------------------
.                   print a plus b as a digit
"""


class TestClassicPrograms:
    def test_hello_world(self):
        report = run_source(HELLO_WORLD)
        assert report.passed
        assert report.output == b"Hello World!\n"

    def test_commented_program(self):
        report = run_source(COMMENTED_ADDITION, input_stream=BufferInput(b"34"))
        assert report.passed
        assert report.output == b"7"

    def test_cat_until_input_runs_out(self):
        report = run_source(b",[.,]", input_stream=BufferInput(b"copy me"))
        assert isinstance(report.error, NoInput)
        assert report.output == b"copy me"


class TestSourceRoundTrip:
    def test_reencoded_program_behaves_the_same(self):
        reencoded = encode(decode_source(COMMENTED_ADDITION))
        original = run_source(COMMENTED_ADDITION, input_stream=BufferInput(b"25"))
        again = run_source(reencoded, input_stream=BufferInput(b"25"))
        assert original.output == again.output == b"7"
        assert original.steps == again.steps


class TestFromFile:
    def test_hello_world_file(self, tmp_path):
        path = tmp_path / "hello.bf"
        path.write_bytes(b"Hello program\n" + HELLO_WORLD + b"\n")
        report = run_file(path)
        assert report.output == b"Hello World!\n"
