from __future__ import annotations

from typing import List

from .errors import make_unbalanced_error


def validate(source: str) -> None:
    """
    Reject programs whose loop brackets do not pair up.

    Scans every character once keeping a count of open loops. A ']' that
    would take the count below zero fails immediately, even if later
    characters would rebalance it. Any '[' still open at the end fails too.

    Raises:
        UnbalancedLoopError: pointing at the first stray ']' or at the
            innermost '[' left open.
    """
    open_offsets: List[int] = []
    for offset, ch in enumerate(source):
        if ch == '[':
            open_offsets.append(offset)
        elif ch == ']':
            if not open_offsets:
                raise make_unbalanced_error(message="unmatched ']'", source=source, offset=offset)
            open_offsets.pop()

    if open_offsets:
        raise make_unbalanced_error(message="unmatched '['", source=source, offset=open_offsets[-1])
