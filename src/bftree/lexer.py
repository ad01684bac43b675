from __future__ import annotations

from enum import Enum
from typing import List, Optional


class Op(Enum):
    INCREMENT = '+'
    DECREMENT = '-'
    SHIFT_LEFT = '<'
    SHIFT_RIGHT = '>'
    PRINT_CHAR = '.'
    GET_CHAR = ','
    LOOP_START = '['
    LOOP_END = ']'

    @classmethod
    def from_char(cls, ch: str) -> Optional["Op"]:
        return _CHAR_TO_OP.get(ch)


_CHAR_TO_OP = {op.value: op for op in Op}

OP_CHARS = frozenset(_CHAR_TO_OP)


def is_code_char(ch: str) -> bool:
    return ch in OP_CHARS


def tokenize(source: str) -> List[Op]:
    # Anything outside the eight command characters is comment text.
    return [_CHAR_TO_OP[ch] for ch in source if is_code_char(ch)]
