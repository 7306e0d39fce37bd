"""Project domain package.

A project owns tickets and iterations; deleting it removes both.
"""

from worklog.domain.project.events import ProjectCreated, ProjectDeleted, ProjectUpdated
from worklog.domain.project.models import Project, ProjectSummary

__all__ = [
    "Project",
    "ProjectCreated",
    "ProjectDeleted",
    "ProjectSummary",
    "ProjectUpdated",
]
