from __future__ import annotations

import logging
from typing import Iterable, List

from .lexer import Op
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

logger = logging.getLogger(__name__)

_LEAVES = {
    Op.INCREMENT: Increment,
    Op.DECREMENT: Decrement,
    Op.SHIFT_LEFT: ShiftLeft,
    Op.SHIFT_RIGHT: ShiftRight,
    Op.PRINT_CHAR: PrintChar,
    Op.GET_CHAR: GetChar,
}


def build(ops: Iterable[Op]) -> List[Instruction]:
    """
    Fold a flat token stream into an instruction tree.

    Each '[' ... ']' pair becomes one Repeat node owning the instructions
    between them. The token stream must already be validated: brackets are
    assumed balanced and only asserted, not re-checked.
    """
    stack: List[List[Instruction]] = []
    current: List[Instruction] = []

    for op in ops:
        if op is Op.LOOP_START:
            stack.append(current)
            current = []
        elif op is Op.LOOP_END:
            assert stack, "unbalanced token stream reached the structurer"
            body = tuple(current)
            current = stack.pop()
            current.append(Repeat(body))
        else:
            current.append(_LEAVES[op]())

    assert not stack, "unbalanced token stream reached the structurer"
    logger.debug("built %d top-level instructions", len(current))
    return current
