"""Iteration application service.

Creates, edits and deletes sprints and milestones in the in-memory
store. Deleting keeps the iteration's tickets and detaches them.
"""

from datetime import date

from worklog.domain.iteration import (
    Iteration,
    IterationCreated,
    IterationDeleted,
    IterationType,
    IterationUpdated,
)
from worklog.domain.shared import Err, Ok, Result
from worklog.infrastructure.storage.store import WorklogStore


def validate_iteration(name: str, start_date: date, due_date: date) -> Result[str, str]:
    """Check the name is non-empty and the due date is after the start.

    Returns:
        Ok(stripped name) or Err(str) with the reason.
    """
    cleaned = name.strip()
    if not cleaned:
        return Err("Iteration name cannot be empty")
    if due_date <= start_date:
        return Err("Due date must be after the start date")
    return Ok(cleaned)


def create_iteration(
    store: WorklogStore,
    project_id: str | None,
    name: str,
    start_date: date,
    due_date: date,
    iteration_type: IterationType = IterationType.SPRINT,
) -> Result[tuple[Iteration, IterationCreated], str]:
    """Create an iteration, optionally inside a project."""
    if project_id is not None and store.find_project(project_id) is None:
        return Err(f"Project not found: {project_id}")

    checked = validate_iteration(name, start_date, due_date)
    if isinstance(checked, Err):
        return checked

    iteration = store.add_iteration(
        Iteration(
            name=checked.value,
            type=iteration_type,
            start_date=start_date,
            due_date=due_date,
            project_id=project_id,
        )
    )
    event = IterationCreated(
        iteration_id=iteration.id,
        project_id=project_id,
        name=iteration.name,
    )
    return Ok((iteration, event))


def update_iteration(
    store: WorklogStore,
    iteration_id: str,
    name: str | None = None,
    start_date: date | None = None,
    due_date: date | None = None,
    iteration_type: IterationType | None = None,
) -> Result[tuple[Iteration, IterationUpdated], str]:
    """Edit an iteration. Fields left as None keep their current value."""
    iteration = store.find_iteration(iteration_id)
    if iteration is None:
        return Err(f"Iteration not found: {iteration_id}")

    new_start = start_date or iteration.start_date
    new_due = due_date or iteration.due_date
    checked = validate_iteration(
        name if name is not None else iteration.name,
        new_start,
        new_due,
    )
    if isinstance(checked, Err):
        return checked

    iteration.name = checked.value
    iteration.start_date = new_start
    iteration.due_date = new_due
    if iteration_type is not None:
        iteration.type = iteration_type

    return Ok((iteration, IterationUpdated(iteration_id=iteration.id, name=iteration.name)))


def delete_iteration(store: WorklogStore, iteration_id: str) -> Result[IterationDeleted, str]:
    """Delete an iteration; its tickets stay, without an iteration."""
    result = store.delete_iteration(iteration_id)
    if isinstance(result, Err):
        return result
    return Ok(
        IterationDeleted(
            iteration_id=iteration_id,
            tickets_detached=result.value.tickets_detached,
        )
    )


def resolve_iteration(
    store: WorklogStore,
    ref: str,
    project_id: str | None = None,
) -> Result[Iteration, str]:
    """Find an iteration by ID, or by name within a project.

    Args:
        store: Store to search.
        ref: Iteration ID or name.
        project_id: Restrict name matches to this project.
    """
    iteration = store.find_iteration(ref)
    if iteration is not None:
        return Ok(iteration)

    matches = [i for i in store.list_iterations(project_id) if i.name == ref.strip()]
    if not matches:
        return Err(f"Iteration not found: {ref}")
    if len(matches) > 1:
        return Err(f"Iteration name '{ref}' is ambiguous; pass a project or the iteration ID")
    return Ok(matches[0])
