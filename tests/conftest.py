"""Shared fixtures for Worklog tests."""

from datetime import date, datetime, timedelta

import pytest

from worklog.domain.entry import TimeEntry
from worklog.domain.iteration import Iteration
from worklog.domain.project import Project
from worklog.domain.ticket import Ticket
from worklog.infrastructure.storage import WorklogStore


class FakeClock:
    """Manually advanced clock for the timer."""

    def __init__(self, start: datetime = datetime(2024, 3, 1, 9, 0, 0)) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> WorklogStore:
    return WorklogStore()


@pytest.fixture
def populated(store):
    """Two projects, one sprint, three tickets, four entries.

    Website (P1): sprint "Sprint 1", tickets WEB-1 (in sprint) and WEB-2
    Mobile (P2): ticket APP-1
    """
    web = store.add_project(Project(name="Website"))
    mobile = store.add_project(Project(name="Mobile"))
    sprint = store.add_iteration(
        Iteration(
            name="Sprint 1",
            start_date=date(2024, 3, 1),
            due_date=date(2024, 3, 15),
            project_id=web.id,
        )
    )
    web1 = store.add_ticket(
        Ticket(ticket_id="WEB-1", name="Login page", project_id=web.id, iteration_id=sprint.id)
    )
    web2 = store.add_ticket(Ticket(ticket_id="WEB-2", name="Footer links", project_id=web.id))
    app1 = store.add_ticket(Ticket(ticket_id="APP-1", name="Push setup", project_id=mobile.id))

    base = datetime(2024, 3, 4, 9, 0)
    entries = [
        store.add_entry(TimeEntry(hours=1.0, ticket_id=web1.id, logged_at=base, note="kickoff")),
        store.add_entry(TimeEntry(hours=2.5, ticket_id=web1.id, logged_at=base + timedelta(hours=3))),
        store.add_entry(TimeEntry(hours=0.5, ticket_id=web2.id, logged_at=base + timedelta(days=1))),
        store.add_entry(TimeEntry(hours=2.0, ticket_id=app1.id, logged_at=base + timedelta(days=2))),
    ]

    return {
        "store": store,
        "web": web,
        "mobile": mobile,
        "sprint": sprint,
        "web1": web1,
        "web2": web2,
        "app1": app1,
        "entries": entries,
    }
