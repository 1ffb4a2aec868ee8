from .api import RunResult, run_file, run_string
from .config import VMConfig
from .errors import (
    BFVMError,
    ConfigError,
    InputExhaustedError,
    MemoryBoundsError,
    OutputSinkError,
    UnbalancedBracketError,
)
from .instructions import Instruction, parse, render
from .pointed import PointedBuffer
from .tracer import Tracer
from .vm import BFVM

__all__ = [
    'BFVM',
    'Instruction',
    'PointedBuffer',
    'Tracer',
    'VMConfig',
    'parse',
    'render',
    'RunResult',
    'run_string',
    'run_file',
    'BFVMError',
    'ConfigError',
    'InputExhaustedError',
    'MemoryBoundsError',
    'OutputSinkError',
    'UnbalancedBracketError',
]
