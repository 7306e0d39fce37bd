"""Project application service.

Validates project input against the store and applies changes to the
in-memory store. Nothing here touches the disk; callers save through
WorklogRepository.
"""

from worklog.domain.project import (
    Project,
    ProjectCreated,
    ProjectDeleted,
    ProjectSummary,
    ProjectUpdated,
)
from worklog.domain.shared import Err, Ok, Result, flat_map
from worklog.infrastructure.storage.store import WorklogStore


def validate_project_name(
    store: WorklogStore,
    name: str,
    exclude_id: str | None = None,
) -> Result[str, str]:
    """Check a project name is non-empty and not used by another project.

    Args:
        store: Store to check uniqueness against.
        name: Proposed name.
        exclude_id: Project being renamed, ignored in the uniqueness check.

    Returns:
        Ok(stripped name) or Err(str) with the reason.
    """
    cleaned = name.strip()
    if not cleaned:
        return Err("Project name cannot be empty")

    existing = store.find_project_by_name(cleaned)
    if existing is not None and existing.id != exclude_id:
        return Err(f"A project named '{cleaned}' already exists")

    return Ok(cleaned)


def create_project(
    store: WorklogStore,
    name: str,
    detail: str = "",
) -> Result[tuple[Project, ProjectCreated], str]:
    """Create a project and add it to the store.

    Returns:
        Ok((Project, ProjectCreated)) on success, or
        Err(str) with validation error message.
    """

    def add(cleaned: str) -> Result[tuple[Project, ProjectCreated], str]:
        project = store.add_project(Project(name=cleaned, detail=detail))
        return Ok((project, ProjectCreated(project_id=project.id, name=project.name)))

    return flat_map(validate_project_name(store, name), add)


def update_project(
    store: WorklogStore,
    project_id: str,
    name: str | None = None,
    detail: str | None = None,
) -> Result[tuple[Project, ProjectUpdated], str]:
    """Rename a project and/or change its detail.

    Fields left as None keep their current value.
    """
    project = store.find_project(project_id)
    if project is None:
        return Err(f"Project not found: {project_id}")

    new_name = project.name
    if name is not None:
        checked = validate_project_name(store, name, exclude_id=project.id)
        if isinstance(checked, Err):
            return checked
        new_name = checked.value

    project.name = new_name
    if detail is not None:
        project.detail = detail

    return Ok((project, ProjectUpdated(project_id=project.id, name=project.name)))


def delete_project(store: WorklogStore, project_id: str) -> Result[ProjectDeleted, str]:
    """Delete a project with its tickets, iterations and their entries."""
    result = store.delete_project(project_id)
    if isinstance(result, Err):
        return result

    counts = result.value
    return Ok(
        ProjectDeleted(
            project_id=project_id,
            tickets_deleted=counts.tickets,
            iterations_deleted=counts.iterations,
            entries_deleted=counts.entries,
        )
    )


def resolve_project(store: WorklogStore, ref: str) -> Result[Project, str]:
    """Find a project by exact name or by ID."""
    project = store.find_project_by_name(ref.strip()) or store.find_project(ref)
    if project is None:
        return Err(f"Project not found: {ref}")
    return Ok(project)


def get_project_summary(store: WorklogStore, project: Project) -> ProjectSummary:
    """Summarize a project's tickets, iterations and logged hours."""
    tickets = store.list_tickets(project_id=project.id)
    return ProjectSummary(
        id=project.id,
        name=project.name,
        detail=project.detail,
        ticket_count=len(tickets),
        iteration_count=len(store.list_iterations(project_id=project.id)),
        total_hours=sum(store.ticket_hours(t.id) for t in tickets),
    )
