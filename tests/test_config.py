#!/usr/bin/env python3
"""
Configuration tests.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfvm import BFVM, ConfigError, VMConfig, parse


def test_defaults():
    config = VMConfig()
    assert config.memory_size == 30000
    assert config.trace_window == 20
    assert config.verbose is False


def test_from_env():
    config = VMConfig.from_env({'BFVM_MEMORY_SIZE': '20', 'BFVM_VERBOSE': 'yes'})
    assert config.memory_size == 20
    assert config.trace_window == 20
    assert config.verbose is True


def test_from_env_rejects_garbage():
    with pytest.raises(ConfigError):
        VMConfig.from_env({'BFVM_MEMORY_SIZE': 'lots'})
    with pytest.raises(ConfigError):
        VMConfig.from_env({'BFVM_TRACE_WINDOW': '0'})


def test_engine_rejects_empty_tape():
    with pytest.raises(ConfigError):
        BFVM(parse("+"), config=VMConfig(memory_size=0))


def test_engine_uses_configured_size_and_verbosity():
    vm = BFVM(parse("+"), config=VMConfig(memory_size=20, verbose=True))
    assert len(vm.memory) == 20
    assert vm.verbose is True
    vm = BFVM(parse("+"), False, config=VMConfig(verbose=True))
    assert vm.verbose is False
