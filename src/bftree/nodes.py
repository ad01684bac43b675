from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union


# ---------------- Instruction tree ----------------
@dataclass(frozen=True)
class Increment:
    pass

@dataclass(frozen=True)
class Decrement:
    pass

@dataclass(frozen=True)
class ShiftLeft:
    pass

@dataclass(frozen=True)
class ShiftRight:
    pass

@dataclass(frozen=True)
class PrintChar:
    pass

@dataclass(frozen=True)
class GetChar:
    pass

@dataclass(frozen=True)
class Repeat:
    body: Tuple["Instruction", ...]  # runs while the current cell is nonzero

Instruction = Union[Increment, Decrement, ShiftLeft, ShiftRight, PrintChar, GetChar, Repeat]

_LEAF_CHARS = {
    Increment: "+",
    Decrement: "-",
    ShiftLeft: "<",
    ShiftRight: ">",
    PrintChar: ".",
    GetChar: ",",
}


# ---------------- Emit + counts ----------------
def emit(nodes: Sequence[Instruction]) -> str:
    """Render a tree back to canonical source (command characters only)."""
    out: List[str] = []
    for n in nodes:
        if isinstance(n, Repeat):
            out.append("[" + emit(n.body) + "]")
        else:
            out.append(_LEAF_CHARS[type(n)])
    return "".join(out)

def count_leaves(nodes: Sequence[Instruction]) -> int:
    c = 0
    for n in nodes:
        if isinstance(n, Repeat):
            c += count_leaves(n.body)
        else:
            c += 1
    return c

def max_depth(nodes: Sequence[Instruction]) -> int:
    """Deepest Repeat nesting; 0 for a loop-free tree."""
    depth = 0
    for n in nodes:
        if isinstance(n, Repeat):
            depth = max(depth, 1 + max_depth(n.body))
    return depth

def format_tree(nodes: Sequence[Instruction], depth: int = 0) -> str:
    """
    One instruction per line, indented two spaces per loop level:

        Increment
        Repeat:
          ShiftRight
          Increment
    """
    indent = "  " * depth
    lines: List[str] = []
    for n in nodes:
        if isinstance(n, Repeat):
            lines.append(f"{indent}Repeat:")
            inner = format_tree(n.body, depth + 1)
            if inner:
                lines.append(inner)
        else:
            lines.append(f"{indent}{type(n).__name__}")
    return "\n".join(lines)
