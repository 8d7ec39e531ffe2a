"""Base runner classes and protocols."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..workflow import TaskGraph


@dataclass
class RunnerResult:
    """Result of running a target."""

    success: bool
    target: str
    order: list[str] = field(default_factory=list)
    tasks_completed: int = 0
    tasks_failed: int = 0
    tasks_skipped: int = 0
    errors: list[str] = field(default_factory=list)


@dataclass
class RunnerCallbacks:
    """
    Callbacks for runner progress reporting.

    Allows CLI to display progress without coupling runner to Rich/UI.
    All callbacks are optional - if None, no callback is made.
    """

    on_run_start: Callable[[str, list[str]], None] | None = None  # target, order
    on_run_complete: Callable[[RunnerResult], None] | None = None

    on_task_start: Callable[[str, str], None] | None = None  # name, description
    on_task_complete: Callable[[str, bool], None] | None = None  # name, success


class RunnerProtocol(Protocol):
    """Protocol for task graph runners."""

    def run(
        self, graph: "TaskGraph", target: str | None = None, callbacks: RunnerCallbacks | None = None
    ) -> RunnerResult:
        """
        Execute a target and its prerequisites.

        Args:
            graph: Task graph holding the target
            target: Task name (graph default when None)
            callbacks: Optional callbacks for progress reporting

        Returns:
            RunnerResult with execution summary
        """
        ...
