from __future__ import annotations

import argparse
import sys
import time
from dataclasses import replace
from typing import List, Optional

from .config import VMConfig
from .errors import BFVMError
from .instructions import parse
from .vm import BFVM


def _dump_memory(vm: BFVM, cells: int = 64, width: int = 16) -> str:
    memory = vm.memory[:cells]
    rows = []
    for start in range(0, len(memory), width):
        row = " ".join(f"{int(v):3d}" for v in memory[start:start + width])
        rows.append(f"{start:5d} | {row}")
    return "\n".join(rows)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bfvm",
        description="Run a Brainfuck program on a fixed-size 8-bit tape.",
    )
    parser.add_argument("program", help="Path to the program source")
    parser.add_argument("-v", "--verbose", action="store_true", help="Trace every step to stderr")
    parser.add_argument("--memory-size", type=int, default=None, help="Tape length in cells (default 30000)")
    parser.add_argument("--trace-window", type=int, default=None, help="Cells shown per trace line (default 20)")
    parser.add_argument("--input", default=None, help="Read program input from FILE instead of stdin")
    parser.add_argument("--stats", action="store_true", help="Print step count, timing and a memory dump to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        with open(args.program, 'r', encoding='utf-8') as f:
            code = f.read()
    except OSError as e:
        print(f"Couldn't read program file: {e}", file=sys.stderr)
        return 1

    try:
        config = VMConfig.from_env()
        if args.memory_size is not None:
            config = replace(config, memory_size=args.memory_size)
        if args.trace_window is not None:
            config = replace(config, trace_window=args.trace_window)
        if args.verbose:
            config = replace(config, verbose=True)
        config.validate()
    except BFVMError as e:
        print(e, file=sys.stderr)
        return 2

    stdout = sys.stdout.buffer
    input_file = None
    try:
        if args.input is not None:
            try:
                input_file = open(args.input, 'rb')
            except OSError as e:
                print(f"Couldn't read input file: {e}", file=sys.stderr)
                return 1
        vm = BFVM(parse(code), stdin=input_file or sys.stdin.buffer, stdout=stdout, config=config)

        start = time.time()
        try:
            vm.run()
        except BFVMError as e:
            stdout.flush()
            print(f"\n{e}", file=sys.stderr)
            return 2
        end = time.time()
    finally:
        if input_file is not None:
            input_file.close()

    if args.stats:
        print("\n================", file=sys.stderr)
        print(f"Execution took {(end - start) * 1000:.2f} ms, {vm.steps} steps", file=sys.stderr)
        print(f"Memory cursor: {vm.memory_cursor}", file=sys.stderr)
        print(_dump_memory(vm), file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
