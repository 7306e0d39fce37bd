"""Iteration domain package.

Sprints and milestones inside a project. Deleting an iteration keeps its
tickets and clears their iteration reference.
"""

from worklog.domain.iteration.events import IterationCreated, IterationDeleted, IterationUpdated
from worklog.domain.iteration.models import Iteration, IterationType

__all__ = [
    "Iteration",
    "IterationCreated",
    "IterationDeleted",
    "IterationType",
    "IterationUpdated",
]
