"""Output formatting for CLI and programmatic use."""

import json
from datetime import date, datetime, time
from typing import Any
from uuid import UUID

from rich.console import Console
from rich.panel import Panel
from rich.table import Table


class JSONEncoder(json.JSONEncoder):
    """Custom JSON encoder for output."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, UUID):
            return str(obj)
        if isinstance(obj, datetime):
            return obj.isoformat()
        if isinstance(obj, date):
            return obj.isoformat()
        if isinstance(obj, time):
            return obj.isoformat()
        return super().default(obj)


def _qty(value: float) -> str:
    return f"{value:g}"


class OutputFormatter:
    """Formats output for both Rich terminal and JSON modes."""

    def __init__(self, json_mode: bool = False):
        """Initialize formatter.

        Args:
            json_mode: If True, output JSON instead of Rich formatting
        """
        self.json_mode = json_mode
        self.console = Console()

    def output(self, data: dict[str, Any], message: str = "") -> None:
        """Output data in appropriate format.

        Args:
            data: Data to output
            message: Optional message for Rich mode
        """
        if self.json_mode:
            self._output_json(data)
        else:
            self._output_rich(data, message)

    def _output_json(self, data: dict[str, Any]) -> None:
        """Output as JSON to stdout."""
        print(json.dumps(data, cls=JSONEncoder, indent=2))

    def _output_rich(self, data: dict[str, Any], message: str) -> None:
        """Output with Rich formatting."""
        if message:
            self.console.print(f"[green]✓[/green] {message}")

        payload = data.get("data", {})
        if "report" in payload:
            self._render_report(data)
        elif "schedule" in payload:
            self._render_schedule(data)
        elif "shares" in payload:
            self._render_shares(data)
        elif "event" in payload:
            self._render_event(data)
        elif "events" in payload:
            self._render_events(data)
        elif "inventory" in payload:
            self._render_inventory(data)
        elif "low_stock" in payload:
            self._render_low_stock(data)
        elif "category_totals" in payload:
            self._render_category_totals(data)
        elif "recipes" in payload:
            self._render_recipes(data)

    def _render_inventory(self, data: dict) -> None:
        """Render inventory list."""
        items = data["data"]["inventory"]

        if not items:
            self.console.print("[dim]No items in inventory[/dim]")
            return

        table = Table(title="Bar Inventory", show_header=True, header_style="bold cyan")
        table.add_column("ID", style="dim", no_wrap=True)
        table.add_column("Item", style="cyan")
        table.add_column("Category", style="yellow")
        table.add_column("Qty", justify="right")
        table.add_column("Min", justify="right")
        table.add_column("Unit")

        for item in items:
            low = item["quantity"] <= item.get("min_stock", 0)
            qty_style = "red" if low else "green"
            table.add_row(
                str(item["id"])[:8],
                item["name"],
                item.get("category", "Other"),
                f"[{qty_style}]{_qty(item['quantity'])}[/{qty_style}]",
                _qty(item.get("min_stock", 0)),
                item.get("unit", "un"),
            )

        self.console.print(table)

    def _render_low_stock(self, data: dict) -> None:
        """Render items needing replenishment."""
        items = data["data"]["low_stock"]

        if not items:
            self.console.print("[dim]Nothing needs replenishment[/dim]")
            return

        self.console.print("\n[bold yellow]Needs Replenishment[/bold yellow]")

        table = Table(show_header=True, header_style="bold")
        table.add_column("Item")
        table.add_column("Qty", justify="right", style="red")
        table.add_column("Min", justify="right")
        table.add_column("Unit")

        for item in items:
            table.add_row(
                item["name"],
                _qty(item["quantity"]),
                _qty(item.get("min_stock", 0)),
                item.get("unit", "un"),
            )

        self.console.print(table)

    def _render_category_totals(self, data: dict) -> None:
        """Render stock totals per category."""
        totals = data["data"]["category_totals"]

        table = Table(title="Stock by Category", show_header=True, header_style="bold cyan")
        table.add_column("Category", style="yellow")
        table.add_column("Total", justify="right")

        for category, total in totals.items():
            table.add_row(category, _qty(total))

        self.console.print(table)

    def _render_recipes(self, data: dict) -> None:
        """Render the recipe book."""
        recipes = data["data"]["recipes"]

        if not recipes:
            self.console.print("[dim]No recipes yet[/dim]")
            return

        for recipe in recipes:
            lines = [
                f"  {_qty(ing['amount'])} {ing['unit']} {ing['name']}"
                for ing in recipe.get("ingredients", [])
            ]
            body = f"[bold]{recipe['name']}[/bold] ({recipe.get('category') or '-'})\n"
            body += f"Glass: {recipe.get('glassware') or '-'}\n"
            body += "\n".join(lines)
            if recipe.get("instructions"):
                body += f"\n\n{recipe['instructions']}"
            self.console.print(Panel(body, subtitle=str(recipe["id"])[:8], border_style="cyan"))

    def _render_events(self, data: dict) -> None:
        """Render event list."""
        events = data["data"]["events"]

        if not events:
            self.console.print("[dim]No events planned[/dim]")
            return

        table = Table(title="Events", show_header=True, header_style="bold cyan")
        table.add_column("ID", style="dim", no_wrap=True)
        table.add_column("Date", style="green")
        table.add_column("Time")
        table.add_column("Event", style="cyan")
        table.add_column("Client")
        table.add_column("Guests", justify="right")
        table.add_column("Status", style="yellow")

        for event in events:
            table.add_row(
                str(event["id"])[:8],
                event["date"],
                event.get("time", ""),
                event["name"],
                event.get("client_name") or "-",
                str(event.get("guest_count", 0)),
                event.get("status", "Draft"),
            )

        self.console.print(table)

    def _render_event(self, data: dict) -> None:
        """Render one event with its checklist, menu and staff."""
        event = data["data"]["event"]

        header = f"""[bold]{event["name"]}[/bold]

Client: {event.get("client_name") or "-"}
When: {event["date"]} {event.get("time", "")}
Where: {event.get("location") or "-"}
Type: {event.get("event_type", "Other")}  Guests: {event.get("guest_count", 0)}
Status: {event.get("status", "Draft")}"""

        if event.get("drink_menu"):
            header += "\nMenu: " + ", ".join(event["drink_menu"])

        progress = data["data"].get("progress")
        if progress:
            header += f"\nPacked: {progress['packed']}/{progress['total']} ({progress['percent']}%)"

        self.console.print(Panel(header, title="Event", border_style="green"))

        checklist = event.get("checklist", [])
        if checklist:
            table = Table(title="Checklist", show_header=True, header_style="bold cyan")
            table.add_column("#", justify="right", style="dim")
            table.add_column("Item", style="cyan")
            table.add_column("Category", style="yellow")
            table.add_column("Needed", justify="right")
            table.add_column("Packed", justify="right")
            table.add_column("", justify="center")
            table.add_column("Notes", style="dim")

            for i, item in enumerate(checklist):
                mark = "[green]✓[/green]" if item.get("is_packed") else "○"
                table.add_row(
                    str(i),
                    item["name"],
                    item["category"],
                    _qty(item.get("quantity_needed", 0)),
                    _qty(item.get("quantity_packed", 0)),
                    mark,
                    item.get("notes", ""),
                )
            self.console.print(table)
        else:
            self.console.print("[dim]Checklist is empty[/dim]")

        staff = event.get("staff", [])
        if staff:
            table = Table(title="Staff", show_header=True, header_style="bold cyan")
            table.add_column("ID", style="dim", no_wrap=True)
            table.add_column("Name")
            table.add_column("Role", style="yellow")
            table.add_column("Shift")
            for shift in staff:
                table.add_row(
                    str(shift["id"])[:8],
                    shift["name"],
                    shift["role"],
                    f"{shift['start_time']} - {shift['end_time']}",
                )
            self.console.print(table)

    def _render_report(self, data: dict) -> None:
        """Render the logistics report."""
        entries = data["data"]["report"]
        days = data["data"].get("window_days", 7)

        if not entries:
            self.console.print(f"[dim]No demand from events in the next {days} days[/dim]")
            return

        table = Table(
            title=f"Stock Flow - next {days} days", show_header=True, header_style="bold cyan"
        )
        table.add_column("Item", style="cyan")
        table.add_column("Needed", justify="right")
        table.add_column("In Stock", justify="right")
        table.add_column("Balance", justify="right")
        table.add_column("Unit")
        table.add_column("Status")

        for entry in entries:
            deficit = entry["status"] == "deficit"
            style = "red" if deficit else "green"
            table.add_row(
                entry["name"],
                _qty(entry["needed"]),
                _qty(entry["stock"]),
                f"[{style}]{entry['balance']:+g}[/{style}]",
                entry["unit"],
                "[red]DEFICIT[/red]" if deficit else "[green]OK[/green]",
            )

        self.console.print(table)

    def _render_schedule(self, data: dict) -> None:
        """Render the day-by-day schedule."""
        schedule = data["data"]["schedule"]
        total = sum(len(day["events"]) for day in schedule)

        table = Table(
            title=f"Schedule: {total} events / {len(schedule)} days",
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("Day", style="green")
        table.add_column("Events")

        for day in schedule:
            day_value = date.fromisoformat(str(day["day"]))
            events = ", ".join(f"{e.get('time', '')} {e['name']}" for e in day["events"])
            table.add_row(day_value.strftime("%a %d/%m"), events or "[dim]-[/dim]")

        self.console.print(table)

    def _render_shares(self, data: dict) -> None:
        """Render a proportional breakdown."""
        shares = data["data"]["shares"]
        category = data["data"].get("category", "")

        if not shares["segments"]:
            self.console.print(f"[dim]No items in {category}[/dim]")
            return

        table = Table(
            title=f"{category}: {_qty(shares['total_quantity'])} total",
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("", no_wrap=True)
        table.add_column("Item")
        table.add_column("Qty", justify="right")
        table.add_column("Share", justify="right")

        for segment in shares["segments"]:
            table.add_row(
                f"[{segment['color']}]■[/{segment['color']}]",
                segment["name"],
                _qty(segment["quantity"]),
                f"{segment['percent']:.1f}%",
            )

        self.console.print(table)

    def error(self, message: str, error_code: str | None = None) -> None:
        """Output error message.

        Args:
            message: Error message
            error_code: Optional machine-readable code
        """
        if self.json_mode:
            output: dict[str, Any] = {"success": False, "error": message}
            if error_code:
                output["error_code"] = error_code
            print(json.dumps(output))
        else:
            self.console.print(f"[red]✗ Error:[/red] {message}")

    def success(self, message: str, data: dict | None = None) -> None:
        """Output success message.

        Args:
            message: Success message
            data: Optional data to include
        """
        if self.json_mode:
            output: dict[str, Any] = {"success": True, "message": message}
            if data:
                output["data"] = data
            print(json.dumps(output, cls=JSONEncoder))
        else:
            self.console.print(f"[green]✓[/green] {message}")

    def warning(self, message: str) -> None:
        """Output warning message.

        Args:
            message: Warning message
        """
        if self.json_mode:
            print(json.dumps({"warning": message}))
        else:
            self.console.print(f"[yellow]⚠[/yellow] {message}")
