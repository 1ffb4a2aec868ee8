from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


def _build_context(program: Sequence[object], position: int, *, context: int = 12) -> str:
    if not program:
        return "      | <empty program>"
    idx = min(max(0, position), len(program) - 1)
    start = max(0, idx - context)
    end = min(len(program), idx + context + 1)

    snippet = ''.join(str(op) for op in program[start:end])
    head = f"{start:5d} | "
    marker = ' ' * (len(head) + idx - start) + '^'
    return f"{head}{snippet}\n{marker}"


def _hint_for(kind: str, detail: str = '') -> Optional[str]:
    if kind == 'bounds':
        if detail == 'left':
            return 'The tape starts at cell 0; check for a "<" with no preceding ">".'
        return 'Increase the tape with --memory-size or check for a runaway ">" loop.'
    if kind == 'bracket':
        if detail == '[':
            return 'Every "[" needs a matching "]" later in the program.'
        return 'Every "]" needs a matching "[" earlier in the program.'
    if kind == 'input':
        return 'Supply more input bytes (for example with --input FILE).'
    return None


@dataclass
class BFVMError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class ConfigError(BFVMError):
    pass


@dataclass
class MemoryBoundsError(BFVMError):
    position: int
    pointer: int
    direction: str
    context: str


@dataclass
class UnbalancedBracketError(BFVMError):
    position: int
    bracket: str
    context: str


@dataclass
class InputExhaustedError(BFVMError):
    position: int
    context: str


@dataclass
class OutputSinkError(BFVMError):
    position: int
    context: str


def _format(kind_label: str, message: str, ctx: str, hint: Optional[str]) -> str:
    hint_block = f"\nHint: {hint}" if hint else ""
    return f"{kind_label}: {message}\n{ctx}{hint_block}"


def make_bounds_error(*, program: Sequence[object], position: int, pointer: int,
                      size: int, direction: str) -> MemoryBoundsError:
    ctx = _build_context(program, position)
    target = pointer - 1 if direction == 'left' else pointer + 1
    message = (f"memory cursor moved {direction} to cell {target}, "
               f"outside the tape [0, {size}) (instruction {position})")
    return MemoryBoundsError(
        message=_format('MemoryBoundsError', message, ctx, _hint_for('bounds', direction)),
        position=position,
        pointer=pointer,
        direction=direction,
        context=ctx,
    )


def make_bracket_error(*, program: Sequence[object], position: int, bracket: str) -> UnbalancedBracketError:
    ctx = _build_context(program, position)
    message = f"no matching bracket for '{bracket}' at instruction {position}"
    return UnbalancedBracketError(
        message=_format('UnbalancedBracketError', message, ctx, _hint_for('bracket', bracket)),
        position=position,
        bracket=bracket,
        context=ctx,
    )


def make_input_error(*, program: Sequence[object], position: int) -> InputExhaustedError:
    ctx = _build_context(program, position)
    message = f"input exhausted at instruction {position}"
    return InputExhaustedError(
        message=_format('InputExhaustedError', message, ctx, _hint_for('input')),
        position=position,
        context=ctx,
    )


def make_output_error(*, program: Sequence[object], position: int, reason: str) -> OutputSinkError:
    ctx = _build_context(program, position)
    message = f"output sink failed at instruction {position}: {reason}"
    return OutputSinkError(
        message=_format('OutputSinkError', message, ctx, None),
        position=position,
        context=ctx,
    )
