from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .config import VMConfig
from .instructions import parse
from .streams import as_input_stream
from .tracer import Tracer
from .vm import BFVM


@dataclass(frozen=True)
class RunResult:
    output: bytes
    memory: bytes
    memory_cursor: int
    steps: int

    @property
    def text(self) -> str:
        return self.output.decode('latin-1')


def run_string(source: str, *, stdin: Any = None, options: Optional[VMConfig] = None,
               tracer: Optional[Tracer] = None) -> RunResult:
    out = io.BytesIO()
    vm = BFVM(parse(source), stdin=as_input_stream(stdin), stdout=out, config=options, tracer=tracer)
    vm.run()
    return RunResult(
        output=out.getvalue(),
        memory=vm.memory.tobytes(),
        memory_cursor=vm.memory_cursor,
        steps=vm.steps,
    )


def run_file(path: str | Path, *, stdin: Any = None, options: Optional[VMConfig] = None,
             encoding: str = "utf-8") -> RunResult:
    p = Path(path)
    return run_string(p.read_text(encoding=encoding), stdin=stdin, options=options)
