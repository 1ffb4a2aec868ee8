#!/usr/bin/env python3
"""
Error message and context tests.
"""

import io
import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfvm import BFVM, BFVMError, MemoryBoundsError, UnbalancedBracketError, parse


def run(source):
    BFVM(parse(source), stdin=io.BytesIO(b''), stdout=io.BytesIO()).run()


def test_bracket_error_context_points_at_bracket():
    with pytest.raises(UnbalancedBracketError) as info:
        run("+]")
    err = info.value
    head, marker = err.context.splitlines()
    assert head == "    0 | +]"
    assert marker.index('^') == len("    0 | ") + 1


def test_error_message_has_kind_and_hint():
    with pytest.raises(BFVMError) as info:
        run("[")
    text = str(info.value)
    assert text.startswith("UnbalancedBracketError: no matching bracket for '[' at instruction 0")
    assert "Hint:" in text


def test_context_window_is_clipped():
    source = "+" * 40 + "<"
    with pytest.raises(MemoryBoundsError) as info:
        run(source)
    head, marker = info.value.context.splitlines()
    assert head.startswith("   28 | ")
    assert head.endswith("+<")
    assert marker.endswith('^')
    assert len(marker) == len(head)


def test_bounds_message_names_target_cell():
    with pytest.raises(MemoryBoundsError) as info:
        run("<")
    assert "cell -1" in str(info.value)
