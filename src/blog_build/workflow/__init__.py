"""
Workflow layer - Task and task graph definitions.

Task graphs are DATA STRUCTURES that define what to do.
They do NOT execute anything - that's the runner's job.
"""

from .site import build_configuration, create_site_workflow
from .tasks import Task, TaskGraph, TaskStatus

__all__ = [
    "Task",
    "TaskGraph",
    "TaskStatus",
    "build_configuration",
    "create_site_workflow",
]
