"""Tests for output formatting."""

import json
import re
from datetime import date, datetime
from io import StringIO
from uuid import uuid4

import pytest
from rich.console import Console

from bar_logistics.output_formatter import JSONEncoder, OutputFormatter


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    ansi_escape = re.compile(r"\x1b\[[0-9;]*m")
    return ansi_escape.sub("", text)


@pytest.fixture
def rich_formatter():
    """Formatter writing Rich output to a buffer."""
    formatter = OutputFormatter(json_mode=False)
    formatter.console = Console(file=StringIO(), force_terminal=True, width=120)
    return formatter


def rendered(formatter: OutputFormatter) -> str:
    return strip_ansi(formatter.console.file.getvalue())


class TestJSONEncoder:
    """Tests for JSONEncoder."""

    def test_encode_uuid(self):
        test_id = uuid4()
        assert str(test_id) in json.dumps({"id": test_id}, cls=JSONEncoder)

    def test_encode_datetime(self):
        result = json.dumps({"at": datetime(2024, 3, 4, 18, 30)}, cls=JSONEncoder)
        assert "2024-03-04T18:30:00" in result

    def test_encode_date(self):
        assert "2024-03-04" in json.dumps({"day": date(2024, 3, 4)}, cls=JSONEncoder)


class TestOutputFormatterJSON:
    """Tests for JSON output mode."""

    def test_json_output(self, capsys):
        formatter = OutputFormatter(json_mode=True)
        formatter.output({"success": True, "data": {"test": "value"}})
        data = json.loads(capsys.readouterr().out)
        assert data["data"]["test"] == "value"

    def test_json_error(self, capsys):
        formatter = OutputFormatter(json_mode=True)
        formatter.error("Event not found", error_code="EVENT_NOT_FOUND")
        data = json.loads(capsys.readouterr().out)
        assert data["success"] is False
        assert data["error"] == "Event not found"
        assert data["error_code"] == "EVENT_NOT_FOUND"

    def test_json_success(self, capsys):
        formatter = OutputFormatter(json_mode=True)
        formatter.success("Removed", data={"count": 1})
        data = json.loads(capsys.readouterr().out)
        assert data["message"] == "Removed"
        assert data["data"]["count"] == 1

    def test_json_warning(self, capsys):
        formatter = OutputFormatter(json_mode=True)
        formatter.warning("Careful")
        assert json.loads(capsys.readouterr().out)["warning"] == "Careful"


class TestOutputFormatterRich:
    """Tests for Rich output mode."""

    def test_rich_error_output(self, rich_formatter):
        rich_formatter.error("Test error message")
        assert "Test error message" in rendered(rich_formatter)

    def test_rich_success_output(self, rich_formatter):
        rich_formatter.success("Test success message")
        assert "Test success message" in rendered(rich_formatter)

    def test_render_inventory(self, rich_formatter):
        rich_formatter.output(
            {
                "success": True,
                "data": {
                    "inventory": [
                        {
                            "id": str(uuid4()),
                            "name": "Premium Vodka",
                            "category": "Distillate",
                            "quantity": 12.0,
                            "min_stock": 5.0,
                            "unit": "un",
                        }
                    ]
                },
            }
        )
        output = rendered(rich_formatter)
        assert "Premium Vodka" in output
        assert "Distillate" in output

    def test_render_empty_inventory(self, rich_formatter):
        rich_formatter.output({"success": True, "data": {"inventory": []}})
        assert "No items" in rendered(rich_formatter)

    def test_render_report(self, rich_formatter):
        rich_formatter.output(
            {
                "success": True,
                "data": {
                    "report": [
                        {
                            "name": "Lime",
                            "needed": 10.0,
                            "stock": 6.0,
                            "unit": "un",
                            "balance": -4.0,
                            "status": "deficit",
                        }
                    ],
                    "window_days": 7,
                },
            }
        )
        output = rendered(rich_formatter)
        assert "Lime" in output
        assert "-4" in output
        assert "DEFICIT" in output

    def test_render_empty_report(self, rich_formatter):
        rich_formatter.output({"success": True, "data": {"report": [], "window_days": 7}})
        assert "No demand" in rendered(rich_formatter)

    def test_render_schedule(self, rich_formatter):
        rich_formatter.output(
            {
                "success": True,
                "data": {
                    "schedule": [
                        {"day": "2024-03-04", "events": [{"name": "Gala", "time": "19:00"}]},
                        {"day": "2024-03-05", "events": []},
                    ]
                },
            }
        )
        output = rendered(rich_formatter)
        assert "Mon 04/03" in output
        assert "Gala" in output

    def test_render_shares(self, rich_formatter):
        rich_formatter.output(
            {
                "success": True,
                "data": {
                    "category": "Distillate",
                    "shares": {
                        "total_quantity": 20.0,
                        "segments": [
                            {
                                "name": "Premium Vodka",
                                "quantity": 12.0,
                                "percent": 60.0,
                                "start": 0.0,
                                "end": 60.0,
                                "color": "#64ffda",
                            }
                        ],
                    },
                },
            }
        )
        output = rendered(rich_formatter)
        assert "Premium Vodka" in output
        assert "60.0%" in output

    def test_render_event(self, rich_formatter):
        rich_formatter.output(
            {
                "success": True,
                "data": {
                    "event": {
                        "id": str(uuid4()),
                        "name": "Silva Wedding",
                        "date": "2024-03-09",
                        "time": "19:00",
                        "drink_menu": ["Moscow Mule"],
                        "checklist": [
                            {
                                "name": "Ice",
                                "category": "Supply",
                                "quantity_needed": 40.0,
                                "quantity_packed": 0.0,
                                "is_packed": True,
                                "notes": "",
                            }
                        ],
                        "staff": [],
                    },
                    "progress": {"packed": 1, "total": 1, "percent": 100},
                },
            },
            "Loaded",
        )
        output = rendered(rich_formatter)
        assert "Silva Wedding" in output
        assert "Moscow Mule" in output
        assert "1/1 (100%)" in output
        assert "Ice" in output
