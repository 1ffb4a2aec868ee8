from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigError

DEFAULT_MEMORY_SIZE = 30000
DEFAULT_TRACE_WINDOW = 20


@dataclass(frozen=True)
class VMConfig:
    memory_size: int = DEFAULT_MEMORY_SIZE
    trace_window: int = DEFAULT_TRACE_WINDOW
    verbose: bool = False

    def validate(self) -> 'VMConfig':
        if int(self.memory_size) < 1:
            raise ConfigError(message=f"ConfigError: memory_size must be at least 1, got {self.memory_size}")
        if int(self.trace_window) < 1:
            raise ConfigError(message=f"ConfigError: trace_window must be at least 1, got {self.trace_window}")
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'VMConfig':
        env = os.environ if environ is None else environ
        try:
            memory_size = int(env.get('BFVM_MEMORY_SIZE', DEFAULT_MEMORY_SIZE))
            trace_window = int(env.get('BFVM_TRACE_WINDOW', DEFAULT_TRACE_WINDOW))
        except ValueError as e:
            raise ConfigError(message=f"ConfigError: {e}") from e
        verbose = env.get('BFVM_VERBOSE', '').strip().lower() in ('1', 'true', 'yes', 'on')
        return cls(memory_size=memory_size, trace_window=trace_window, verbose=verbose).validate()
