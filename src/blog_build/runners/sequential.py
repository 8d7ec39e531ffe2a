"""Sequential runner - Executes a target's tasks one at a time."""

import logging

from ..errors import UnknownTargetError
from ..workflow import TaskGraph, TaskStatus
from .base import RunnerCallbacks, RunnerResult

logger = logging.getLogger(__name__)


class SequentialRunner:
    """
    Sequential task graph runner.

    Resolves the target's prerequisites, then executes each task once,
    in dependency order. A failing action stops the run and its exception
    propagates to the caller after the remaining tasks are marked skipped.
    """

    def __init__(self, dry_run: bool = False):
        """
        Initialize the runner.

        Args:
            dry_run: If True, resolve and report the order without running actions
        """
        self.dry_run = dry_run

    def run(
        self, graph: TaskGraph, target: str | None = None, callbacks: RunnerCallbacks | None = None
    ) -> RunnerResult:
        """
        Execute a target.

        Args:
            graph: Task graph holding the target
            target: Task name (graph default when None)
            callbacks: Optional callbacks for progress reporting

        Returns:
            RunnerResult with execution summary

        Raises:
            UnknownTargetError: target not registered (nothing is run)
            CyclicDependencyError: dependencies loop (nothing is run)
            Exception: whatever a task action raised
        """
        cb = callbacks or RunnerCallbacks()
        target = target or graph.default_target
        if target is None:
            raise UnknownTargetError("<none>", graph.names())

        # Resolution raises before any side effect
        order = graph.resolve(target)
        graph.reset()

        logger.debug("Resolved %s -> %s", target, " -> ".join(order))
        if cb.on_run_start:
            cb.on_run_start(target, order)

        result = RunnerResult(success=True, target=target, order=order)

        for index, name in enumerate(order):
            task = graph.tasks[name]

            if self.dry_run:
                task.status = TaskStatus.SKIPPED
                result.tasks_skipped += 1
                continue

            if cb.on_task_start:
                cb.on_task_start(task.name, task.description)

            task.status = TaskStatus.RUNNING
            logger.info("Task %s started", task.name)

            try:
                if task.action is not None:
                    task.action()
            except BaseException as e:
                task.status = TaskStatus.FAILED
                task.error = str(e) or type(e).__name__
                result.tasks_failed += 1
                result.errors.append(f"Task {task.name}: {task.error}")
                result.success = False

                for remaining in order[index + 1 :]:
                    graph.tasks[remaining].status = TaskStatus.SKIPPED
                    result.tasks_skipped += 1

                if cb.on_task_complete:
                    cb.on_task_complete(task.name, False)
                if cb.on_run_complete:
                    cb.on_run_complete(result)
                raise

            task.status = TaskStatus.COMPLETED
            result.tasks_completed += 1
            logger.info("Task %s completed", task.name)

            if cb.on_task_complete:
                cb.on_task_complete(task.name, True)

        if cb.on_run_complete:
            cb.on_run_complete(result)

        return result
