"""Tests for the bulk ticket text format."""

from worklog.domain.ticket import TicketDraft, parse_bulk_tickets


class TestParseBulkTickets:
    def test_three_and_two_field_lines(self):
        drafts = parse_bulk_tickets("A-1 | Fix bug | urgent\nA-2 | Polish UI")
        assert drafts == [
            TicketDraft("A-1", "Fix bug", "urgent"),
            TicketDraft("A-2", "Polish UI", ""),
        ]

    def test_skips_blank_and_single_field_lines(self):
        drafts = parse_bulk_tickets("\n   \nJUST-AN-ID\nB-1 | Title\n")
        assert [d.ticket_id for d in drafts] == ["B-1"]

    def test_skips_empty_title(self):
        assert parse_bulk_tickets("C-1 |   | detail") == []

    def test_trims_whitespace(self):
        drafts = parse_bulk_tickets("   D-1   |  Spaced title  |  spaced detail  ")
        assert drafts == [TicketDraft("D-1", "Spaced title", "spaced detail")]

    def test_extra_fields_keep_third_as_detail(self):
        drafts = parse_bulk_tickets("E-1 | Title | detail | ignored")
        assert drafts[0].detail == "detail"

    def test_empty_id_is_kept_for_validation(self):
        drafts = parse_bulk_tickets(" | Title without id")
        assert drafts == [TicketDraft("", "Title without id", "")]

    def test_windows_line_endings(self):
        drafts = parse_bulk_tickets("F-1 | One\r\nF-2 | Two\r\n")
        assert [d.name for d in drafts] == ["One", "Two"]
