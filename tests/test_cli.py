"""Tests for the Typer CLI."""

import json

import pytest
from typer.testing import CliRunner

from worklog import __version__
from worklog.domain.timer import Timer
from worklog.infrastructure.storage import WorklogRepository
from worklog.interfaces.cli import app
from worklog.interfaces.cli.commands import timer as timer_command

runner = CliRunner()


@pytest.fixture
def cli(tmp_path, monkeypatch):
    """Invoke the CLI against a fresh data directory."""
    monkeypatch.delenv("WORKLOG_PROJECT", raising=False)

    def invoke(*args, input=None):
        return runner.invoke(app, ["--data-dir", str(tmp_path), *args], input=input)

    return invoke


@pytest.fixture
def seeded(cli):
    """A project with one sprint and one ticket."""
    assert cli("project", "add", "Website", "-d", "Marketing site").exit_code == 0
    assert cli(
        "iteration", "add", "Sprint 1", "-p", "Website", "--start", "2024-03-01", "--due", "2024-03-15"
    ).exit_code == 0
    assert cli("ticket", "add", "WEB-1", "Login page", "-p", "Website", "-i", "Sprint 1").exit_code == 0
    return cli


def load(tmp_path):
    return WorklogRepository(tmp_path / "worklog.json").load().value


class TestGlobalOptions:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_data_dir_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("WORKLOG_HOME", str(tmp_path / "home"))
        result = runner.invoke(app, ["project", "add", "Website"])
        assert result.exit_code == 0
        assert (tmp_path / "home" / "worklog.json").exists()

    def test_db_path(self, cli, tmp_path):
        result = cli("db", "path")
        assert str(tmp_path / "worklog.json") in result.output
        assert "worklog_old.json" in result.output


class TestProjectCommands:
    def test_add_and_list(self, seeded):
        result = seeded("project", "list")
        assert result.exit_code == 0
        assert "Website" in result.output

    def test_duplicate_name_fails(self, seeded):
        result = seeded("project", "add", "Website")
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_show(self, seeded):
        result = seeded("project", "show", "Website")
        assert "Sprint 1" in result.output
        assert "WEB-1" in result.output

    def test_edit(self, seeded, tmp_path):
        assert seeded("project", "edit", "Website", "--name", "Site").exit_code == 0
        assert [p.name for p in load(tmp_path).list_projects()] == ["Site"]

    def test_delete_cascades(self, seeded, tmp_path):
        seeded("log", "WEB-1", "-H", "1", "-m", "0")

        result = seeded("project", "delete", "Website", "--yes")

        assert result.exit_code == 0
        assert "1 tickets, 1 iterations, 1 time entries" in result.output
        store = load(tmp_path)
        assert store.tickets == {} and store.entries == {} and store.iterations == {}

    def test_delete_declined(self, seeded, tmp_path):
        result = seeded("project", "delete", "Website", input="n\n")
        assert "Cancelled" in result.output
        assert len(load(tmp_path).projects) == 1


class TestIterationCommands:
    def test_due_before_start_fails(self, seeded):
        result = seeded("iteration", "add", "Bad", "--start", "2024-03-10", "--due", "2024-03-01")
        assert result.exit_code == 1
        assert "after the start" in result.output

    def test_bad_date(self, seeded):
        result = seeded("iteration", "add", "Bad", "--start", "March")
        assert result.exit_code != 0

    def test_list(self, seeded):
        result = seeded("iteration", "list", "-p", "Website")
        assert "Sprint 1" in result.output

    def test_delete_keeps_tickets(self, seeded, tmp_path):
        result = seeded("iteration", "delete", "Sprint 1", "-p", "Website", "--yes")
        assert result.exit_code == 0
        ticket = load(tmp_path).find_ticket_by_key("WEB-1")
        assert ticket is not None
        assert ticket.iteration_id is None


class TestTicketCommands:
    def test_list_and_show(self, seeded):
        assert "Login page" in seeded("ticket", "list", "-p", "Website").output
        shown = seeded("ticket", "show", "WEB-1")
        assert "Sprint 1" in shown.output
        assert "Website" in shown.output

    def test_duplicate_id_fails(self, seeded):
        result = seeded("ticket", "add", "WEB-1", "Again")
        assert result.exit_code == 1

    def test_edit_clears_iteration(self, seeded, tmp_path):
        result = seeded("ticket", "edit", "WEB-1", "--iteration", "none", "--id", "WEB-100")
        assert result.exit_code == 0
        ticket = load(tmp_path).find_ticket_by_key("WEB-100")
        assert ticket.iteration_id is None

    def test_delete(self, seeded, tmp_path):
        seeded("log", "WEB-1", "-H", "1", "-m", "0")
        result = seeded("ticket", "delete", "WEB-1", "--yes")
        assert "1 time entries removed" in result.output
        assert load(tmp_path).entries == {}

    def test_import_file(self, seeded, tmp_path):
        source = tmp_path / "tickets.txt"
        source.write_text("A-1 | Fix bug | urgent\nA-2 | Polish UI\n\nWEB-1 | Taken\n", encoding="utf-8")

        result = seeded("ticket", "import", str(source), "-p", "Website", "--yes")

        assert result.exit_code == 0
        assert "Imported 2 tickets" in result.output
        assert "Skipped WEB-1" in result.output
        store = load(tmp_path)
        assert store.find_ticket_by_key("A-1").detail == "urgent"
        assert store.find_ticket_by_key("A-2").detail == ""

    def test_import_stdin(self, seeded, tmp_path):
        result = seeded("ticket", "import", "-", input="B-1 | From stdin\n")
        assert result.exit_code == 0
        assert load(tmp_path).find_ticket_by_key("B-1") is not None

    def test_import_non_utf8_file_is_reported(self, seeded, tmp_path):
        source = tmp_path / "t.txt"
        source.write_bytes(b"A-1 | Fix \xff bug\n")

        result = seeded("ticket", "import", str(source), "--yes")

        assert result.exit_code == 2
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert "UTF-8" in result.output
        assert load(tmp_path).find_ticket_by_key("A-1") is None


class TestLogAndEntries:
    def test_log_uses_settings_defaults(self, seeded, tmp_path):
        result = seeded("log", "WEB-1")
        assert result.exit_code == 0
        assert "Logged 0h 30min 0s on WEB-1" in result.output
        assert [e.hours for e in load(tmp_path).entries.values()] == [0.5]

    def test_zero_rejected(self, seeded, tmp_path):
        result = seeded("log", "WEB-1", "-H", "0", "-m", "0")
        assert result.exit_code == 1
        assert "greater than zero" in result.output
        assert load(tmp_path).entries == {}

    def test_minutes_out_of_range(self, seeded):
        assert seeded("log", "WEB-1", "-m", "75").exit_code == 1

    def test_unknown_ticket(self, seeded):
        result = seeded("log", "NOPE-1")
        assert result.exit_code == 1
        assert "Ticket not found" in result.output

    def test_list_edit_delete(self, seeded, tmp_path):
        seeded("log", "WEB-1", "-H", "1", "-m", "0", "-n", "kickoff")
        entry = next(iter(load(tmp_path).entries.values()))

        listed = seeded("entry", "list")
        assert entry.id[:8] in listed.output
        assert "kickoff" in listed.output

        edited = seeded("entry", "edit", entry.id[:8], "-m", "15")
        assert edited.exit_code == 0
        assert load(tmp_path).find_entry(entry.id).hours == 1.25
        assert load(tmp_path).find_entry(entry.id).note == "kickoff"

        assert seeded("entry", "delete", entry.id[:8], "--yes").exit_code == 0
        assert load(tmp_path).entries == {}


class TestReportCommand:
    def test_grouped_report(self, seeded):
        seeded("log", "WEB-1", "-H", "1", "-m", "0")
        seeded("log", "WEB-1", "-H", "2", "-m", "30")

        result = seeded("report", "--group", "ticket")

        assert result.exit_code == 0
        assert "Login page" in result.output
        assert "3h 30min 0s" in result.output

    def test_no_matches(self, seeded):
        result = seeded("report", "--search", "nothing")
        assert "No time entries match" in result.output

    def test_csv(self, seeded, tmp_path):
        seeded("log", "WEB-1", "-H", "1", "-m", "0")
        destination = tmp_path / "report.csv"

        result = seeded("report", "-g", "project", "--csv", str(destination))

        assert result.exit_code == 0
        assert "Wrote 1 rows" in result.output
        assert "Website" in destination.read_text(encoding="utf-8")


class TestTimerCommand:
    def test_logs_session_on_ctrl_c(self, seeded, tmp_path, clock, monkeypatch):
        monkeypatch.setattr(timer_command, "Timer", lambda: Timer(clock=clock))
        ticks = []

        def fake_sleep(seconds):
            if len(ticks) == 3:
                raise KeyboardInterrupt
            ticks.append(seconds)
            clock.advance(seconds)

        monkeypatch.setattr(timer_command.time, "sleep", fake_sleep)

        result = seeded("timer", "WEB-1", "-n", "focus")

        assert result.exit_code == 0
        assert "Logged 0h 0min 3s on WEB-1" in result.output
        entry = next(iter(load(tmp_path).entries.values()))
        assert entry.note == "focus"
        assert entry.hours == pytest.approx(3 / 3600)

    def test_immediate_stop_logs_nothing(self, seeded, tmp_path, clock, monkeypatch):
        monkeypatch.setattr(timer_command, "Timer", lambda: Timer(clock=clock))

        def interrupt(seconds):
            raise KeyboardInterrupt

        monkeypatch.setattr(timer_command.time, "sleep", interrupt)

        result = seeded("timer", "WEB-1")

        assert "Nothing logged" in result.output
        assert load(tmp_path).entries == {}

    def test_clock_skew_reports_zero_duration(self, seeded, tmp_path, clock, monkeypatch):
        monkeypatch.setattr(timer_command, "Timer", lambda: Timer(clock=clock))

        def skew_then_interrupt(seconds):
            clock.advance(-5)
            raise KeyboardInterrupt

        monkeypatch.setattr(timer_command.time, "sleep", skew_then_interrupt)

        result = seeded("timer", "WEB-1")

        assert "Nothing logged (0h 0min 0s)" in result.output
        assert load(tmp_path).entries == {}


class TestDatabaseCommands:
    def test_export_then_import(self, seeded, tmp_path):
        exported = tmp_path / "export.json"
        assert seeded("db", "export", str(exported)).exit_code == 0
        assert json.loads(exported.read_text(encoding="utf-8"))["tickets"][0]["ticket_id"] == "WEB-1"

        seeded("ticket", "delete", "WEB-1", "--yes")
        result = seeded("db", "import", str(exported), "--yes")

        assert result.exit_code == 0
        assert "Imported 1 tickets" in result.output
        assert "Restart" in result.output
        assert load(tmp_path).find_ticket_by_key("WEB-1") is not None
        assert (tmp_path / "worklog_old.json").exists()

    def test_import_invalid_file(self, seeded, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("not json", encoding="utf-8")

        result = seeded("db", "import", str(bad), "--yes")

        assert result.exit_code == 1
        assert load(tmp_path).find_ticket_by_key("WEB-1") is not None
