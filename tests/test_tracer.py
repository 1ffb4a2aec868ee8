#!/usr/bin/env python3
"""
Tracer rendering tests.
"""

import io
import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfvm import BFVM, Tracer, VMConfig, parse


def make_vm(source, memory_size=30000):
    return BFVM(parse(source), stdin=io.BytesIO(b''), stdout=io.BytesIO(),
                config=VMConfig(memory_size=memory_size))


def test_render_full_small_tape():
    trace = io.StringIO()
    vm = BFVM(parse("+>"), True, stdin=io.BytesIO(b''), stdout=io.BytesIO(),
              config=VMConfig(memory_size=3), tracer=Tracer(stream=trace))
    vm.run()
    assert trace.getvalue() == (
        "step 0 pc 0 '+' | ptr 0 |[  0]   0    0 \n"
        "step 1 pc 1 '>' | ptr 0 |[  1]   0    0 \n"
    )


def test_window_grows_to_active_cell():
    tracer = Tracer(window=4)
    vm = make_vm(">>>>>+")
    line = tracer.render(vm)
    assert line.count('[') == 1
    assert line.endswith(' ...')
    assert line.count('0') >= 4

    for _ in range(5):
        vm.step()
    line = tracer.render(vm)
    assert "ptr 5" in line
    assert line.split('|')[-1].rstrip(' .').endswith('[  0]')


def test_render_finished_program():
    vm = make_vm("+", memory_size=2)
    vm.run()
    assert Tracer().render(vm) == "step 1 pc 1 END | ptr 0 |[  1]   0 "


def test_render_does_not_mutate():
    vm = make_vm("+++>")
    vm.step()
    before = (vm.program_cursor, vm.memory_cursor, vm.steps, vm.memory.tobytes())
    Tracer().render(vm)
    Tracer(stream=io.StringIO()).emit(vm)
    assert (vm.program_cursor, vm.memory_cursor, vm.steps, vm.memory.tobytes()) == before


def test_emit_defaults_to_stderr(capsys):
    vm = make_vm("+", memory_size=1)
    Tracer().emit(vm)
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err == "step 0 pc 0 '+' | ptr 0 |[  0]\n"
