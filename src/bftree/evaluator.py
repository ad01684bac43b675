from __future__ import annotations

import logging
from typing import BinaryIO, List, Optional, Sequence, Tuple

from .errors import make_input_exhausted_error
from .nodes import (
    Decrement,
    GetChar,
    Increment,
    Instruction,
    PrintChar,
    Repeat,
    ShiftLeft,
    ShiftRight,
)
from .tape import Tape

logger = logging.getLogger(__name__)

INPUT_MODES = ('line', 'byte')


class Evaluator:
    """
    Walks an instruction tree against a fresh tape.

    Input is read from a binary stream. In 'line' mode every ',' reads a
    whole line and keeps only its first byte; the rest of that line is
    dropped, not saved for the next ','. 'byte' mode reads exactly one byte
    per ','. Output is written one raw byte per '.'.

    Loops are run with an explicit stack of (body, resume index) frames
    rather than Python recursion, so nesting depth is bounded by memory
    and not by the interpreter's recursion limit.
    """

    def __init__(self, input_stream: BinaryIO, output_stream: BinaryIO, *, input_mode: str = 'line', flush: bool = True):
        if input_mode not in INPUT_MODES:
            raise ValueError(f"input_mode must be one of {INPUT_MODES}, got {input_mode!r}")
        self.input_stream = input_stream
        self.output_stream = output_stream
        self.input_mode = input_mode
        self.flush = flush
        self.steps = 0
        self.bytes_written = 0

    def run(self, program: Sequence[Instruction], tape: Optional[Tape] = None) -> Tape:
        tape = Tape() if tape is None else tape
        self.steps = 0
        self.bytes_written = 0

        frames: List[Tuple[Sequence[Instruction], int]] = []
        body: Sequence[Instruction] = program
        i = 0

        while True:
            if i == len(body):
                if not frames:
                    break
                # End of one pass through a Repeat body.
                if tape.read() != 0:
                    i = 0
                else:
                    body, i = frames.pop()
                continue

            node = body[i]
            i += 1

            if isinstance(node, Repeat):
                if tape.read() != 0:
                    frames.append((body, i))
                    body, i = node.body, 0
                continue

            self.steps += 1
            if isinstance(node, Increment):
                tape.increment()
            elif isinstance(node, Decrement):
                tape.decrement()
            elif isinstance(node, ShiftLeft):
                tape.shift_left()
            elif isinstance(node, ShiftRight):
                tape.shift_right()
            elif isinstance(node, PrintChar):
                self._write_byte(tape.read())
            elif isinstance(node, GetChar):
                tape.write(self._read_byte(tape))
            else:
                raise TypeError(f"Unknown instruction: {node!r}")

        logger.debug(
            "evaluated %d instructions, wrote %d bytes, tape length %d",
            self.steps, self.bytes_written, len(tape),
        )
        return tape

    def _write_byte(self, value: int) -> None:
        self.output_stream.write(bytes((value,)))
        self.bytes_written += 1
        if self.flush:
            self.output_stream.flush()

    def _read_byte(self, tape: Tape) -> int:
        if self.input_mode == 'byte':
            data = self.input_stream.read(1)
        else:
            data = self.input_stream.readline()
        if not data:
            raise make_input_exhausted_error(cursor=tape.cursor)
        return data[0]
