from __future__ import annotations

import sys
from typing import IO, TYPE_CHECKING, List, Optional

from .config import DEFAULT_TRACE_WINDOW

if TYPE_CHECKING:
    from .vm import BFVM


class Tracer:
    """Renders one diagnostic line per step.

    Format::

        step 12 pc 5 '-' | ptr 1 |  10 [  3]   0    0  ...

    The window always starts at cell 0 and grows to include the active cell.
    """

    def __init__(self, stream: Optional[IO[str]] = None, window: int = DEFAULT_TRACE_WINDOW):
        self.stream = stream
        self.window = window

    def render(self, vm: 'BFVM') -> str:
        pc = vm.program_cursor
        op = vm.current_instruction
        op_text = f"'{op}'" if op is not None else 'END'
        ptr = vm.memory_cursor
        memory = vm.memory

        end = min(len(memory), max(self.window, ptr + 1))
        cells: List[str] = []
        for i in range(end):
            value = int(memory[i])
            cells.append(f"[{value:3d}]" if i == ptr else f" {value:3d} ")
        tail = ' ...' if end < len(memory) else ''
        return f"step {vm.steps} pc {pc} {op_text} | ptr {ptr} |{''.join(cells)}{tail}"

    def emit(self, vm: 'BFVM') -> None:
        stream = self.stream if self.stream is not None else sys.stderr
        stream.write(self.render(vm) + '\n')
