"""
Tests for utility functions.
"""

import json

from telemost_cli.models import ConferenceInfo, Hosts, LiveStream
from telemost_cli.utils import (
    OutputFormat,
    format_cohosts,
    format_conference_detail,
    print_error,
    print_json,
    print_success,
    print_table,
)


class TestPrintFunctions:
    """Tests for print_* utility functions."""

    def test_print_success(self, capsys):
        print_success("Operation completed")
        captured = capsys.readouterr()
        assert "Operation completed" in captured.out

    def test_print_error_with_details(self, capsys):
        print_error("Error occurred", details="Additional info here")
        captured = capsys.readouterr()
        assert "Error occurred" in captured.err
        assert "Additional info here" in captured.err

    def test_print_json_keeps_unicode(self, capsys):
        print_json({"message": "Конференция"})
        assert "Конференция" in capsys.readouterr().out

    def test_print_table(self, capsys):
        print_table(["Name", "Email"], [["Alice", "alice@yandex.ru"]])
        out = capsys.readouterr().out
        assert "Name" in out
        assert "alice@yandex.ru" in out

    def test_print_empty_table(self, capsys):
        print_table(["X", "Y"], [])
        out = capsys.readouterr().out
        assert "X" in out
        assert "Y" in out


class TestFormatConference:
    """Tests for conference formatting."""

    def test_table(self, capsys):
        info = ConferenceInfo(
            id="12345678901234",
            join_url="https://telemost.yandex.ru/j/12345678901234",
            live_stream=LiveStream(watch_url="https://telemost.yandex.ru/live/abc"),
        )
        format_conference_detail(info, OutputFormat.TABLE)
        out = capsys.readouterr().out
        assert "12345678901234" in out
        assert "https://telemost.yandex.ru/live/abc" in out

    def test_json(self, capsys):
        info = ConferenceInfo(id="12345678901234")
        format_conference_detail(info, OutputFormat.JSON)
        data = json.loads(capsys.readouterr().out)
        assert data["id"] == "12345678901234"

    def test_cohosts_json(self, capsys):
        format_cohosts(Hosts.from_emails(["a@yandex.ru"]), OutputFormat.JSON)
        assert json.loads(capsys.readouterr().out) == ["a@yandex.ru"]

    def test_no_cohosts(self, capsys):
        format_cohosts(Hosts(), OutputFormat.TABLE)
        assert "No cohosts" in capsys.readouterr().out
