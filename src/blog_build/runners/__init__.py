"""
Runners layer - Execution engines for task graphs.

Runners resolve a target's prerequisites and execute the tasks,
reporting progress through callbacks.
"""

from .base import RunnerCallbacks, RunnerProtocol, RunnerResult
from .sequential import SequentialRunner

__all__ = [
    "RunnerCallbacks",
    "RunnerProtocol",
    "RunnerResult",
    "SequentialRunner",
]
