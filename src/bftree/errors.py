from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


def _build_context(lines: List[str], line_no_1: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
    return "\n".join(out)


def _hint_for(message: str, *, kind: str) -> Optional[str]:
    msg = message.lower()
    if kind == 'validate':
        if "unmatched ']'" in msg:
            return 'Remove the extra "]" or add the "[" that should open this loop.'
        if "unmatched '['" in msg:
            return 'Close this loop with "]" before the end of the program.'
        return None
    if kind == 'input':
        return 'The program read past the end of its input. Supply more input.'
    return None


def locate(source: str, offset: int) -> Tuple[int, int]:
    """Return the 1-based (line, column) of a character offset in source."""
    line = source.count('\n', 0, offset) + 1
    column = offset - (source.rfind('\n', 0, offset) + 1) + 1
    return line, column


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class UnbalancedLoopError(BFError):
    line: int
    column: int
    context: str


@dataclass
class InputExhaustedError(BFError):
    cursor: int


def make_unbalanced_error(*, message: str, source: str, offset: int) -> UnbalancedLoopError:
    line, column = locate(source, offset)
    lines = source.split('\n')
    ctx = _build_context(lines, line)
    hint = _hint_for(message, kind='validate')
    hint_block = f"\nHint: {hint}" if hint else ""
    return UnbalancedLoopError(
        message=f"UnbalancedLoop: {message} (line {line}, column {column})\n{ctx}{hint_block}",
        line=line,
        column=column,
        context=ctx,
    )


def make_input_exhausted_error(*, cursor: int) -> InputExhaustedError:
    hint = _hint_for('', kind='input')
    return InputExhaustedError(
        message=f"InputExhausted: no input available for ',' at cell {cursor}\nHint: {hint}",
        cursor=cursor,
    )
