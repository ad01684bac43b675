from __future__ import annotations

import codecs
import io
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, List, Optional, Tuple

from .evaluator import INPUT_MODES, Evaluator
from .lexer import tokenize
from .nodes import Instruction
from .structurer import build
from .tape import Tape
from .validator import validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOptions:
    input_mode: str = 'line'
    flush: bool = True
    encoding: str = 'utf-8'

    @classmethod
    def from_env(cls) -> "RunOptions":
        input_mode = os.getenv('BFTREE_INPUT_MODE', 'line').lower()
        if input_mode not in INPUT_MODES:
            raise ValueError(f"BFTREE_INPUT_MODE must be one of {INPUT_MODES}, got {input_mode!r}")
        encoding = os.getenv('BFTREE_ENCODING', 'utf-8')
        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise ValueError(f"BFTREE_ENCODING names an unknown encoding: {encoding!r}") from e
        return cls(input_mode=input_mode, encoding=encoding)


@dataclass(frozen=True)
class RunResult:
    output: bytes
    cells: Tuple[int, ...]
    cursor: int
    steps: int


def parse_string(source: str) -> List[Instruction]:
    """Validate, lex and structure source into an instruction tree."""
    validate(source)
    ops = tokenize(source)
    logger.debug("lexed %d operations from %d characters", len(ops), len(source))
    return build(ops)


def run_string(
    source: str,
    *,
    options: Optional[RunOptions] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    tape: Optional[Tape] = None,
) -> RunResult:
    """
    Run a program to completion.

    stdin defaults to the process's binary stdin. When stdout is None the
    program's output is captured and only returned in the result.
    """
    program = parse_string(source)
    return execute(program, options=options, stdin=stdin, stdout=stdout, tape=tape)


def execute(
    program: List[Instruction],
    *,
    options: Optional[RunOptions] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    tape: Optional[Tape] = None,
) -> RunResult:
    opts = options or RunOptions()
    sink = io.BytesIO() if stdout is None else stdout
    evaluator = Evaluator(
        sys.stdin.buffer if stdin is None else stdin,
        sink,
        input_mode=opts.input_mode,
        flush=opts.flush,
    )
    final = evaluator.run(program, tape=tape)

    output = sink.getvalue() if stdout is None else b''
    return RunResult(
        output=output,
        cells=tuple(int(c) for c in final.cells()),
        cursor=final.cursor,
        steps=evaluator.steps,
    )


def run_file(path: str | Path, *, options: Optional[RunOptions] = None, **kwargs) -> RunResult:
    opts = options or RunOptions()
    p = Path(path)
    return run_string(p.read_text(encoding=opts.encoding), options=opts, **kwargs)


class Interpreter:
    """Holds one program's source and runs the full pipeline on it."""

    def __init__(self, source: str, options: Optional[RunOptions] = None):
        self.source = source
        self.options = options or RunOptions()
        self.program: List[Instruction] = []

    def run(self, stdin: Optional[BinaryIO] = None, stdout: Optional[BinaryIO] = None) -> RunResult:
        self.program = parse_string(self.source)
        return execute(self.program, options=self.options, stdin=stdin, stdout=stdout)
