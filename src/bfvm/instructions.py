from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Tuple


class Instruction(Enum):
    RIGHT = '>'
    LEFT = '<'
    INC = '+'
    DEC = '-'
    PUT = '.'
    GET = ','
    BEGIN = '['
    END = ']'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_char(cls, ch: str) -> Optional['Instruction']:
        return _CHAR_TABLE.get(ch)


_CHAR_TABLE = {op.value: op for op in Instruction}

Program = Tuple[Instruction, ...]


def parse(source: str) -> Program:
    """Map source characters to instructions; everything else is a comment."""
    program = []
    for ch in source:
        op = _CHAR_TABLE.get(ch)
        if op is not None:
            program.append(op)
    return tuple(program)


def render(program: Iterable[Instruction]) -> str:
    return ''.join(op.value for op in program)
