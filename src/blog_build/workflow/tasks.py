"""Task definitions for the build task graph."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from ..errors import CyclicDependencyError, DuplicateTaskError, UnknownTargetError


class TaskStatus(Enum):
    """Status of a task in a run."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class Task:
    """
    A named unit of work in the task graph.

    A task with no action only groups its dependencies (e.g. Default).
    """

    name: str
    action: Callable[[], object] | None = None
    # Names of tasks that must run first, in declaration order
    depends_on: list[str] = field(default_factory=list)
    description: str = ""
    # Runtime state (set by runner)
    status: TaskStatus = TaskStatus.PENDING
    error: str | None = None


@dataclass
class TaskGraph:
    """
    Registered tasks keyed by name.

    The graph defines WHAT can run, not HOW to execute it.
    """

    name: str
    description: str = ""
    default_target: str | None = None
    tasks: dict[str, Task] = field(default_factory=dict)

    def register(
        self,
        name: str,
        depends_on: list[str] | None = None,
        action: Callable[[], object] | None = None,
        description: str = "",
    ) -> Task:
        """Register a task. Names must be unique."""
        if name in self.tasks:
            raise DuplicateTaskError(f"Task already registered: {name}")
        task = Task(name=name, action=action, depends_on=list(depends_on or []), description=description)
        self.tasks[name] = task
        return task

    def get_task(self, name: str) -> Task | None:
        """Get a task by name."""
        return self.tasks.get(name)

    def names(self) -> list[str]:
        """Registered task names in registration order."""
        return list(self.tasks)

    def resolve(self, target: str) -> list[str]:
        """
        Compute execution order for a target.

        Depth-first over declared dependencies, post-order, so every
        prerequisite comes before its dependents and each task appears once.

        Raises:
            UnknownTargetError: target or a declared dependency is not registered
            CyclicDependencyError: dependencies loop back on themselves
        """
        order: list[str] = []
        visiting: list[str] = []

        def visit(name: str) -> None:
            if name in order:
                return
            if name in visiting:
                raise CyclicDependencyError(visiting[visiting.index(name) :] + [name])
            task = self.tasks.get(name)
            if task is None:
                raise UnknownTargetError(name, self.names())
            visiting.append(name)
            for dep in task.depends_on:
                visit(dep)
            visiting.pop()
            order.append(name)

        visit(target)
        return order

    def reset(self) -> None:
        """Clear runtime state so the graph can be run again."""
        for task in self.tasks.values():
            task.status = TaskStatus.PENDING
            task.error = None
