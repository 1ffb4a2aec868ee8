from __future__ import annotations

import sys
from typing import Any, Optional, Sequence

import numpy as np

from .config import VMConfig
from .errors import (
    make_bounds_error,
    make_bracket_error,
    make_input_error,
    make_output_error,
)
from .instructions import Instruction, Program
from .pointed import PointedBuffer
from .streams import read_byte, write_byte
from .tracer import Tracer


class BFVM:
    """Executes a parsed program against a fixed 8-bit tape.

    Loops are resolved by scanning the program for the matching bracket
    every time one is crossed; no jump table is built.
    """

    def __init__(
        self,
        program: Sequence[Instruction],
        verbose: Optional[bool] = None,
        *,
        stdin: Any = None,
        stdout: Any = None,
        config: Optional[VMConfig] = None,
        tracer: Optional[Tracer] = None,
    ):
        self.config = (config or VMConfig()).validate()
        self.verbose = self.config.verbose if verbose is None else bool(verbose)

        self.program: PointedBuffer = PointedBuffer(tuple(program))
        self.memory_tape: PointedBuffer = PointedBuffer(np.zeros(int(self.config.memory_size), dtype=np.uint8))

        self._view = self.memory_tape.items.view()
        self._view.flags.writeable = False

        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout
        self.tracer = tracer if tracer is not None else Tracer(window=self.config.trace_window)
        self.steps = 0

    # ---------------- state ----------------
    @property
    def finished(self) -> bool:
        return self.program.cursor >= len(self.program)

    @property
    def program_cursor(self) -> int:
        return self.program.cursor

    @property
    def memory_cursor(self) -> int:
        return self.memory_tape.cursor

    @property
    def memory(self) -> np.ndarray:
        return self._view

    @property
    def current_instruction(self) -> Optional[Instruction]:
        if self.finished:
            return None
        return self.program.read()

    def cell(self, index: int) -> int:
        return int(self.memory_tape[index])

    # ---------------- execution ----------------
    def run(self) -> None:
        while not self.finished:
            if self.verbose:
                self.tracer.emit(self)
            self.step()

    def step(self) -> None:
        op = self.program.read()
        self.steps += 1

        if op is Instruction.RIGHT:
            if self.memory_tape.cursor + 1 >= len(self.memory_tape):
                raise self._bounds_error('right')
            self.memory_tape.right()
            self.program.right()
        elif op is Instruction.LEFT:
            if self.memory_tape.cursor <= 0:
                raise self._bounds_error('left')
            self.memory_tape.left()
            self.program.right()
        elif op is Instruction.INC:
            self.memory_tape.write((int(self.memory_tape.read()) + 1) % 256)
            self.program.right()
        elif op is Instruction.DEC:
            self.memory_tape.write((int(self.memory_tape.read()) - 1) % 256)
            self.program.right()
        elif op is Instruction.PUT:
            self._put()
            self.program.right()
        elif op is Instruction.GET:
            self._get()
            self.program.right()
        elif op is Instruction.BEGIN:
            self._begin()
        elif op is Instruction.END:
            self._end()
        else:
            raise TypeError(f"Not an instruction: {op!r}")

    def _put(self) -> None:
        try:
            write_byte(self.stdout, int(self.memory_tape.read()))
        except (OSError, ValueError) as e:
            raise make_output_error(
                program=self.program.items, position=self.program.cursor, reason=str(e)
            ) from e

    def _get(self) -> None:
        value = read_byte(self.stdin)
        if value is None:
            raise make_input_error(program=self.program.items, position=self.program.cursor)
        self.memory_tape.write(value)

    def _begin(self) -> None:
        start = self.program.cursor
        self.program.right()
        if self.memory_tape.read() != 0:
            return

        depth = 0
        while True:
            if self.program.cursor >= len(self.program):
                raise make_bracket_error(program=self.program.items, position=start, bracket='[')
            op = self.program.read()
            self.program.right()
            if op is Instruction.BEGIN:
                depth += 1
            elif op is Instruction.END:
                depth -= 1
            if depth < 0:
                return

    def _end(self) -> None:
        start = self.program.cursor
        if self.memory_tape.read() == 0:
            self.program.right()
            return

        self.program.left()
        depth = 0
        while True:
            if self.program.cursor < 0:
                raise make_bracket_error(program=self.program.items, position=start, bracket=']')
            op = self.program.read()
            self.program.left()
            if op is Instruction.END:
                depth += 1
            elif op is Instruction.BEGIN:
                depth -= 1
            if depth < 0:
                # Cursor sits one before the matching '['; land on the first body instruction.
                self.program.right()
                self.program.right()
                return

    def _bounds_error(self, direction: str):
        return make_bounds_error(
            program=self.program.items,
            position=self.program.cursor,
            pointer=self.memory_tape.cursor,
            size=len(self.memory_tape),
            direction=direction,
        )
