"""CLI entry point for Bar Logistics."""

import logging
import os
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from .config import ConfigManager
from .dashboard import Dashboard
from .data_store import DataStore
from .event_manager import (
    ChecklistItemNotFoundError,
    EventManager,
    EventNotFoundError,
    ShiftNotFoundError,
)
from .inventory_manager import InventoryManager
from .models import ChecklistCategory, EventStatus, EventType, Ingredient, StaffRole, Unit
from .output_formatter import OutputFormatter
from .recipe_manager import RecipeManager
from .suggestions import (
    OpenAISuggestionProvider,
    SuggestionProvider,
    parse_suggestions,
    request_suggestions,
)

app = typer.Typer(
    name="bar",
    help="Bar and event logistics: stock, recipes, event checklists and staffing",
    no_args_is_help=True,
)

# Global state for formatter and config (set by callback)
formatter: OutputFormatter = OutputFormatter()
config: ConfigManager | None = None
data_store: DataStore | None = None
inventory_manager: InventoryManager | None = None
recipe_manager: RecipeManager | None = None
event_manager: EventManager | None = None


def get_config() -> ConfigManager:
    """Get or create ConfigManager instance."""
    global config
    if config is None:
        config = ConfigManager()
    return config


def get_data_store() -> DataStore:
    """Get or create DataStore instance using config values."""
    global data_store
    if data_store is None:
        data_store = DataStore(data_dir=get_config().data.storage_dir)
    return data_store


def get_inventory_manager() -> InventoryManager:
    """Get or create InventoryManager instance."""
    global inventory_manager
    if inventory_manager is None:
        inventory_manager = InventoryManager(get_data_store())
    return inventory_manager


def get_recipe_manager() -> RecipeManager:
    """Get or create RecipeManager instance."""
    global recipe_manager
    if recipe_manager is None:
        recipe_manager = RecipeManager(get_data_store())
    return recipe_manager


def get_event_manager() -> EventManager:
    """Get or create EventManager instance."""
    global event_manager
    if event_manager is None:
        event_manager = EventManager(get_data_store(), get_config().defaults)
    return event_manager


def get_dashboard() -> Dashboard:
    """Create a Dashboard over the current data store."""
    cfg = get_config()
    return Dashboard(get_data_store(), cfg.dashboard, cfg.defaults)


def get_suggestion_provider() -> SuggestionProvider:
    """Create the configured checklist suggestion provider."""
    ai = get_config().ai
    return OpenAISuggestionProvider(
        model=ai.model,
        api_key=os.getenv(ai.api_key_env),
        base_url=ai.base_url or None,
        temperature=ai.temperature,
    )


def _fail(message: str, error_code: str | None = None) -> typer.Exit:
    formatter.error(message, error_code=error_code)
    return typer.Exit(code=1)


@app.callback()
def main(
    json_output: Annotated[
        bool, typer.Option("--json", help="Output as JSON for programmatic use")
    ] = False,
    data_dir: Annotated[Path | None, typer.Option("--data-dir", help="Data directory path")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Bar Logistics CLI - plan events and keep the bar stocked."""
    global formatter, config, data_store, inventory_manager, recipe_manager, event_manager

    formatter = OutputFormatter(json_mode=json_output)

    # Load config early
    config = ConfigManager()

    level = logging.DEBUG if verbose else getattr(logging, config.logging.level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    # CLI --data-dir overrides config, which overrides default
    effective_data_dir = data_dir if data_dir else config.data.storage_dir

    data_store = DataStore(data_dir=effective_data_dir)
    inventory_manager = InventoryManager(data_store)
    recipe_manager = RecipeManager(data_store)
    event_manager = EventManager(data_store, config.defaults)


# --- Inventory subcommand group ---
inv_app = typer.Typer(help="Inventory management commands")
app.add_typer(inv_app, name="inventory")


@inv_app.command("add")
def inv_add(
    name: Annotated[str, typer.Argument(help="Item name")],
    quantity: Annotated[float, typer.Option("--quantity", "-q", help="Quantity on hand")] = 0.0,
    unit: Annotated[Unit, typer.Option("--unit", "-u", help="Unit of measurement")] = Unit.UNIT,
    category: Annotated[
        str | None, typer.Option("--category", "-c", help="Category, e.g. Distillate")
    ] = None,
    min_stock: Annotated[float, typer.Option("--min", help="Minimum stock")] = 0.0,
) -> None:
    """Add an item to inventory."""
    try:
        item = get_inventory_manager().add_item(
            name=name,
            quantity=quantity,
            unit=unit,
            category=category or get_config().defaults.inventory_category,
            min_stock=min_stock,
        )
        output_data = {
            "success": True,
            "message": f"Added {name} to inventory",
            "data": {"inventory_item": item.model_dump(mode="json")},
        }
        formatter.output(output_data, output_data["message"])
    except (ValueError, ValidationError) as e:
        raise _fail(str(e), "INVALID_INPUT")
    except Exception as e:
        raise _fail(str(e))


@inv_app.command("list")
def inv_list(
    category: Annotated[
        str | None, typer.Option("--category", "-c", help="Filter by category")
    ] = None,
) -> None:
    """View inventory."""
    try:
        items = get_inventory_manager().get_inventory(category=category)
        output_data = {
            "success": True,
            "data": {
                "inventory": [i.model_dump(mode="json") for i in items],
                "count": len(items),
            },
        }
        formatter.output(output_data, f"{len(items)} items in inventory")
    except Exception as e:
        raise _fail(str(e))


@inv_app.command("remove")
def inv_remove(
    item_id: Annotated[str, typer.Argument(help="Item ID to remove")],
) -> None:
    """Remove an item from inventory."""
    try:
        removed = get_inventory_manager().remove_item(item_id)
        output_data = {
            "success": True,
            "message": f"Removed {removed.name} from inventory",
            "data": {"inventory_item": removed.model_dump(mode="json")},
        }
        formatter.output(output_data, output_data["message"])
    except ValueError as e:
        raise _fail(str(e), "ITEM_NOT_FOUND")
    except Exception as e:
        raise _fail(str(e))


@inv_app.command("use")
def inv_use(
    item_id: Annotated[str, typer.Argument(help="Item ID")],
    quantity: Annotated[float, typer.Option("--quantity", "-q", help="Amount used")] = 1.0,
) -> None:
    """Take stock out of inventory."""
    try:
        updated = get_inventory_manager().update_quantity(item_id, delta=-quantity)
        output_data = {
            "success": True,
            "message": f"Used {quantity:g} of {updated.name} (remaining: {updated.quantity:g})",
            "data": {"inventory_item": updated.model_dump(mode="json")},
        }
        formatter.output(output_data, output_data["message"])
    except ValueError as e:
        raise _fail(str(e), "ITEM_NOT_FOUND")
    except Exception as e:
        raise _fail(str(e))


@inv_app.command("set")
def inv_set(
    item_id: Annotated[str, typer.Argument(help="Item ID")],
    name: Annotated[str | None, typer.Option("--name", help="New name")] = None,
    quantity: Annotated[float | None, typer.Option("--quantity", "-q", help="New quantity")] = None,
    unit: Annotated[Unit | None, typer.Option("--unit", "-u", help="New unit")] = None,
    category: Annotated[str | None, typer.Option("--category", "-c", help="New category")] = None,
    min_stock: Annotated[float | None, typer.Option("--min", help="New minimum stock")] = None,
) -> None:
    """Edit an inventory item."""
    try:
        updated = get_inventory_manager().update_item(
            item_id,
            name=name,
            quantity=quantity,
            unit=unit,
            category=category,
            min_stock=min_stock,
        )
        output_data = {
            "success": True,
            "message": f"Updated {updated.name}",
            "data": {"inventory_item": updated.model_dump(mode="json")},
        }
        formatter.output(output_data, output_data["message"])
    except ValidationError as e:
        raise _fail(str(e), "INVALID_INPUT")
    except ValueError as e:
        raise _fail(str(e), "ITEM_NOT_FOUND")
    except Exception as e:
        raise _fail(str(e))


@inv_app.command("low-stock")
def inv_low_stock() -> None:
    """View items at or below their minimum stock."""
    try:
        items = get_inventory_manager().get_low_stock()
        output_data = {
            "success": True,
            "data": {
                "low_stock": [i.model_dump(mode="json") for i in items],
                "count": len(items),
            },
        }
        formatter.output(output_data, f"{len(items)} items need replenishment")
    except Exception as e:
        raise _fail(str(e))


@inv_app.command("totals")
def inv_totals() -> None:
    """View total stock per category."""
    try:
        totals = get_inventory_manager().category_totals()
        formatter.output({"success": True, "data": {"category_totals": totals}})
    except Exception as e:
        raise _fail(str(e))


# --- Recipe subcommand group ---
recipe_app = typer.Typer(help="Recipe book commands")
app.add_typer(recipe_app, name="recipe")


def _parse_ingredient(value: str) -> Ingredient:
    """Parse ``name:amount[:unit]``."""
    parts = [p.strip() for p in value.split(":")]
    if len(parts) not in (2, 3):
        raise ValueError(f"Ingredient must look like name:amount[:unit], got {value!r}")
    unit = Unit(parts[2]) if len(parts) == 3 else Unit.ML
    return Ingredient(name=parts[0], amount=float(parts[1]), unit=unit)


@recipe_app.command("add")
def recipe_add(
    name: Annotated[str, typer.Argument(help="Recipe name")],
    ingredient: Annotated[
        list[str] | None,
        typer.Option("--ingredient", "-i", help="Ingredient as name:amount[:unit]"),
    ] = None,
    instructions: Annotated[str, typer.Option("--instructions", help="Method")] = "",
    glassware: Annotated[str, typer.Option("--glass", help="Glassware")] = "",
    category: Annotated[str, typer.Option("--category", "-c", help="Recipe category")] = "",
) -> None:
    """Add a recipe."""
    try:
        ingredients = [_parse_ingredient(i) for i in ingredient or []]
        recipe = get_recipe_manager().add_recipe(
            name=name,
            ingredients=ingredients,
            instructions=instructions,
            glassware=glassware,
            category=category,
        )
        output_data = {
            "success": True,
            "message": f"Added recipe {name}",
            "data": {"recipe": recipe.model_dump(mode="json")},
        }
        formatter.output(output_data, output_data["message"])
    except ValueError as e:
        raise _fail(str(e), "INVALID_INPUT")
    except Exception as e:
        raise _fail(str(e))


@recipe_app.command("list")
def recipe_list(
    category: Annotated[
        str | None, typer.Option("--category", "-c", help="Filter by category")
    ] = None,
) -> None:
    """View the recipe book."""
    try:
        recipes = get_recipe_manager().get_recipes(category=category)
        output_data = {
            "success": True,
            "data": {
                "recipes": [r.model_dump(mode="json") for r in recipes],
                "count": len(recipes),
            },
        }
        formatter.output(output_data)
    except Exception as e:
        raise _fail(str(e))


@recipe_app.command("remove")
def recipe_remove(
    recipe_id: Annotated[str, typer.Argument(help="Recipe ID to remove")],
) -> None:
    """Remove a recipe."""
    try:
        removed = get_recipe_manager().remove_recipe(recipe_id)
        formatter.success(f"Removed recipe {removed.name}", {"recipe_id": str(removed.id)})
    except ValueError as e:
        raise _fail(str(e), "RECIPE_NOT_FOUND")
    except Exception as e:
        raise _fail(str(e))


@recipe_app.command("edit")
def recipe_edit(
    recipe_id: Annotated[str, typer.Argument(help="Recipe ID")],
    name: Annotated[str | None, typer.Option("--name", help="New name")] = None,
    ingredient: Annotated[
        list[str] | None,
        typer.Option("--ingredient", "-i", help="Replace ingredients, each name:amount[:unit]"),
    ] = None,
    instructions: Annotated[str | None, typer.Option("--instructions", help="Method")] = None,
    glassware: Annotated[str | None, typer.Option("--glass", help="Glassware")] = None,
    category: Annotated[
        str | None, typer.Option("--category", "-c", help="Recipe category")
    ] = None,
) -> None:
    """Edit a recipe."""
    try:
        ingredients = [_parse_ingredient(i) for i in ingredient] if ingredient else None
    except ValueError as e:
        raise _fail(str(e), "INVALID_INPUT")

    try:
        recipe = get_recipe_manager().update_recipe(
            recipe_id,
            name=name,
            ingredients=ingredients,
            instructions=instructions,
            glassware=glassware,
            category=category,
        )
        output_data = {
            "success": True,
            "message": f"Updated recipe {recipe.name}",
            "data": {"recipe": recipe.model_dump(mode="json")},
        }
        formatter.output(output_data, output_data["message"])
    except ValueError as e:
        raise _fail(str(e), "RECIPE_NOT_FOUND")
    except Exception as e:
        raise _fail(str(e))


# --- Event subcommand group ---
event_app = typer.Typer(help="Event planning commands")
app.add_typer(event_app, name="event")


def _event_output(event_id: str, message: str) -> None:
    mgr = get_event_manager()
    event = mgr.get_event(event_id)
    progress = mgr.packing_progress(event.id)
    output_data = {
        "success": True,
        "message": message,
        "data": {
            "event": event.model_dump(mode="json"),
            "progress": {
                "packed": progress.packed,
                "total": progress.total,
                "percent": progress.percent,
            },
        },
    }
    formatter.output(output_data, message)


@event_app.command("create")
def event_create(
    name: Annotated[str, typer.Argument(help="Event name")],
    date: Annotated[str, typer.Option("--date", "-d", help="Event date (YYYY-MM-DD)")],
    client: Annotated[str, typer.Option("--client", help="Client name")] = "",
    time: Annotated[str | None, typer.Option("--time", "-t", help="Start time (HH:MM)")] = None,
    location: Annotated[str, typer.Option("--location", "-l", help="Venue")] = "",
    event_type: Annotated[
        EventType, typer.Option("--type", help="Kind of event")
    ] = EventType.OTHER,
    guests: Annotated[int, typer.Option("--guests", "-g", help="Guest count")] = 0,
    bartenders: Annotated[int, typer.Option("--bartenders", help="Bartender count")] = 0,
    drink: Annotated[
        list[str] | None, typer.Option("--drink", help="Drink for the menu (repeatable)")
    ] = None,
) -> None:
    """Create a draft event plan."""
    try:
        event = get_event_manager().create_event(
            name=name,
            date=date,
            client_name=client,
            time=time,
            location=location,
            event_type=event_type,
            guest_count=guests,
            bartender_count=bartenders,
            drink_menu=drink,
        )
        _event_output(str(event.id), f"Created event {event.name} on {event.date}")
    except (ValueError, ValidationError) as e:
        raise _fail(str(e), "INVALID_INPUT")
    except Exception as e:
        raise _fail(str(e))


@event_app.command("list")
def event_list(
    status: Annotated[
        EventStatus | None, typer.Option("--status", help="Filter by status")
    ] = None,
) -> None:
    """List events by date."""
    try:
        events = get_event_manager().list_events(status=status)
        output_data = {
            "success": True,
            "data": {
                "events": [e.model_dump(mode="json") for e in events],
                "count": len(events),
            },
        }
        formatter.output(output_data)
    except Exception as e:
        raise _fail(str(e))


@event_app.command("show")
def event_show(
    event_id: Annotated[str, typer.Argument(help="Event ID")],
) -> None:
    """Show an event with checklist, menu and staff."""
    try:
        _event_output(event_id, "")
    except EventNotFoundError as e:
        raise _fail(str(e), "EVENT_NOT_FOUND")
    except Exception as e:
        raise _fail(str(e))


@event_app.command("remove")
def event_remove(
    event_id: Annotated[str, typer.Argument(help="Event ID")],
) -> None:
    """Delete an event."""
    try:
        removed = get_event_manager().remove_event(event_id)
        formatter.success(f"Removed event {removed.name}", {"event_id": str(removed.id)})
    except EventNotFoundError as e:
        raise _fail(str(e), "EVENT_NOT_FOUND")
    except Exception as e:
        raise _fail(str(e))


@event_app.command("status")
def event_status(
    event_id: Annotated[str, typer.Argument(help="Event ID")],
    status: Annotated[EventStatus, typer.Argument(help="New status")],
) -> None:
    """Change an event's status."""
    try:
        event = get_event_manager().set_status(event_id, status)
        _event_output(str(event.id), f"{event.name} is now {status.value}")
    except EventNotFoundError as e:
        raise _fail(str(e), "EVENT_NOT_FOUND")
    except Exception as e:
        raise _fail(str(e))


@event_app.command("edit")
def event_edit(
    event_id: Annotated[str, typer.Argument(help="Event ID")],
    name: Annotated[str | None, typer.Option("--name", help="New name")] = None,
    date: Annotated[
        str | None, typer.Option("--date", "-d", help="Event date (YYYY-MM-DD)")
    ] = None,
    client: Annotated[str | None, typer.Option("--client", help="Client name")] = None,
    time: Annotated[str | None, typer.Option("--time", "-t", help="Start time (HH:MM)")] = None,
    location: Annotated[str | None, typer.Option("--location", "-l", help="Venue")] = None,
    event_type: Annotated[
        EventType | None, typer.Option("--type", help="Kind of event")
    ] = None,
    guests: Annotated[int | None, typer.Option("--guests", "-g", help="Guest count")] = None,
    bartenders: Annotated[
        int | None, typer.Option("--bartenders", help="Bartender count")
    ] = None,
) -> None:
    """Edit event details, keeping its checklist, menu and staff."""
    try:
        event = get_event_manager().update_event(
            event_id,
            name=name,
            date=date,
            client_name=client,
            time=time,
            location=location,
            event_type=event_type,
            guest_count=guests,
            bartender_count=bartenders,
        )
        _event_output(str(event.id), f"Updated event {event.name}")
    except EventNotFoundError as e:
        raise _fail(str(e), "EVENT_NOT_FOUND")
    except (ValueError, ValidationError) as e:
        raise _fail(str(e), "INVALID_INPUT")
    except Exception as e:
        raise _fail(str(e))


# --- Checklist subcommand group ---
checklist_app = typer.Typer(help="Event checklist commands")
app.add_typer(checklist_app, name="checklist")


@checklist_app.command("add")
def checklist_add(
    event_id: Annotated[str, typer.Argument(help="Event ID")],
    name: Annotated[str, typer.Argument(help="Item name")],
    category: Annotated[ChecklistCategory, typer.Option("--category", "-c", help="Category")],
    quantity: Annotated[float, typer.Option("--quantity", "-q", help="Quantity needed")] = 0.0,
    notes: Annotated[str, typer.Option("--notes", "-n", help="Notes")] = "",
) -> None:
    """Add a line to an event checklist."""
    try:
        item = get_event_manager().add_checklist_item(
            event_id, name=name, category=category, quantity_needed=quantity, notes=notes
        )
        _event_output(event_id, f"Added {item.name} to checklist")
    except EventNotFoundError as e:
        raise _fail(str(e), "EVENT_NOT_FOUND")
    except Exception as e:
        raise _fail(str(e))


@checklist_app.command("update")
def checklist_update(
    event_id: Annotated[str, typer.Argument(help="Event ID")],
    index: Annotated[int, typer.Argument(help="Checklist position")],
    name: Annotated[str | None, typer.Option("--name", help="New name")] = None,
    category: Annotated[
        ChecklistCategory | None, typer.Option("--category", "-c", help="New category")
    ] = None,
    quantity: Annotated[
        float | None, typer.Option("--quantity", "-q", help="Quantity needed")
    ] = None,
    packed_quantity: Annotated[
        float | None, typer.Option("--packed", help="Quantity packed")
    ] = None,
    notes: Annotated[str | None, typer.Option("--notes", "-n", help="Notes")] = None,
) -> None:
    """Edit a checklist line."""
    try:
        item = get_event_manager().update_checklist_item(
            event_id,
            index,
            name=name,
            category=category,
            quantity_needed=quantity,
            quantity_packed=packed_quantity,
            notes=notes,
        )
        _event_output(event_id, f"Updated {item.name}")
    except EventNotFoundError as e:
        raise _fail(str(e), "EVENT_NOT_FOUND")
    except ChecklistItemNotFoundError as e:
        raise _fail(str(e), "ITEM_NOT_FOUND")
    except Exception as e:
        raise _fail(str(e))


@checklist_app.command("remove")
def checklist_remove(
    event_id: Annotated[str, typer.Argument(help="Event ID")],
    index: Annotated[int, typer.Argument(help="Checklist position")],
) -> None:
    """Remove a checklist line."""
    try:
        removed = get_event_manager().remove_checklist_item(event_id, index)
        _event_output(event_id, f"Removed {removed.name} from checklist")
    except EventNotFoundError as e:
        raise _fail(str(e), "EVENT_NOT_FOUND")
    except ChecklistItemNotFoundError as e:
        raise _fail(str(e), "ITEM_NOT_FOUND")
    except Exception as e:
        raise _fail(str(e))


@checklist_app.command("pack")
def checklist_pack(
    event_id: Annotated[str, typer.Argument(help="Event ID")],
    index: Annotated[int, typer.Argument(help="Checklist position")],
) -> None:
    """Toggle whether a checklist line is packed."""
    try:
        item = get_event_manager().toggle_packed(event_id, index)
        state = "packed" if item.is_packed else "unpacked"
        _event_output(event_id, f"Marked {item.name} as {state}")
    except EventNotFoundError as e:
        raise _fail(str(e), "EVENT_NOT_FOUND")
    except ChecklistItemNotFoundError as e:
        raise _fail(str(e), "ITEM_NOT_FOUND")
    except Exception as e:
        raise _fail(str(e))


@checklist_app.command("suggest")
def checklist_suggest(
    event_id: Annotated[str, typer.Argument(help="Event ID")],
    payload_file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Read a suggestion payload instead of asking the model"),
    ] = None,
) -> None:
    """Merge suggested lines into an event checklist.

    Existing lines only get their needed quantity updated; packing state and
    notes are kept.
    """
    try:
        mgr = get_event_manager()
        event = mgr.get_event(event_id)

        if payload_file is not None:
            suggestions = parse_suggestions(payload_file.read_text())
        else:
            suggestions = request_suggestions(
                get_suggestion_provider(), event.guest_count, event.event_type
            )

        if not suggestions:
            _event_output(str(event.id), "No usable suggestions; checklist unchanged")
            return

        mgr.apply_suggestions(event.id, suggestions)
        _event_output(str(event.id), f"Merged {len(suggestions)} suggestions into checklist")
    except EventNotFoundError as e:
        raise _fail(str(e), "EVENT_NOT_FOUND")
    except ValueError as e:
        raise _fail(str(e), "INVALID_INPUT")
    except Exception as e:
        raise _fail(str(e))


# --- Drink menu subcommand group ---
menu_app = typer.Typer(help="Event drink menu commands")
app.add_typer(menu_app, name="menu")


@menu_app.command("add")
def menu_add(
    event_id: Annotated[str, typer.Argument(help="Event ID")],
    drink: Annotated[str, typer.Argument(help="Drink name")],
) -> None:
    """Add a drink to an event menu."""
    try:
        get_event_manager().add_drink(event_id, drink)
        _event_output(event_id, f"Added {drink} to the menu")
    except EventNotFoundError as e:
        raise _fail(str(e), "EVENT_NOT_FOUND")
    except Exception as e:
        raise _fail(str(e))


@menu_app.command("remove")
def menu_remove(
    event_id: Annotated[str, typer.Argument(help="Event ID")],
    index: Annotated[int, typer.Argument(help="Menu position")],
) -> None:
    """Remove a drink from an event menu."""
    try:
        removed = get_event_manager().remove_drink(event_id, index)
        _event_output(event_id, f"Removed {removed} from the menu")
    except EventNotFoundError as e:
        raise _fail(str(e), "EVENT_NOT_FOUND")
    except IndexError as e:
        raise _fail(str(e), "ITEM_NOT_FOUND")
    except Exception as e:
        raise _fail(str(e))


@menu_app.command("update")
def menu_update(
    event_id: Annotated[str, typer.Argument(help="Event ID")],
    index: Annotated[int, typer.Argument(help="Menu position")],
    drink: Annotated[str, typer.Argument(help="New drink name")],
) -> None:
    """Replace a drink on an event menu."""
    try:
        get_event_manager().update_drink(event_id, index, drink)
        _event_output(event_id, f"Menu position {index} is now {drink.strip()}")
    except EventNotFoundError as e:
        raise _fail(str(e), "EVENT_NOT_FOUND")
    except IndexError as e:
        raise _fail(str(e), "ITEM_NOT_FOUND")
    except ValueError as e:
        raise _fail(str(e), "INVALID_INPUT")
    except Exception as e:
        raise _fail(str(e))


# --- Staff subcommand group ---
staff_app = typer.Typer(help="Event staffing commands")
app.add_typer(staff_app, name="staff")


@staff_app.command("add")
def staff_add(
    event_id: Annotated[str, typer.Argument(help="Event ID")],
    name: Annotated[str, typer.Argument(help="Staff member name")],
    role: Annotated[StaffRole, typer.Option("--role", "-r", help="Role")] = StaffRole.BARTENDER,
    start: Annotated[str | None, typer.Option("--start", help="Shift start (HH:MM)")] = None,
    end: Annotated[str | None, typer.Option("--end", help="Shift end (HH:MM)")] = None,
    rate: Annotated[float | None, typer.Option("--rate", help="Hourly rate")] = None,
    shift_id: Annotated[
        str | None, typer.Option("--id", help="Replace the shift with this ID")
    ] = None,
) -> None:
    """Add or replace a shift on an event roster."""
    try:
        shift = get_event_manager().save_shift(
            event_id,
            name=name,
            role=role,
            start_time=start,
            end_time=end,
            hourly_rate=rate,
            shift_id=shift_id,
        )
        _event_output(event_id, f"Scheduled {shift.name} as {shift.role.value}")
    except EventNotFoundError as e:
        raise _fail(str(e), "EVENT_NOT_FOUND")
    except ValueError as e:
        raise _fail(str(e), "INVALID_INPUT")
    except Exception as e:
        raise _fail(str(e))


@staff_app.command("remove")
def staff_remove(
    event_id: Annotated[str, typer.Argument(help="Event ID")],
    shift_id: Annotated[str, typer.Argument(help="Shift ID")],
) -> None:
    """Take a shift off an event roster."""
    try:
        removed = get_event_manager().remove_shift(event_id, shift_id)
        _event_output(event_id, f"Removed {removed.name} from the roster")
    except EventNotFoundError as e:
        raise _fail(str(e), "EVENT_NOT_FOUND")
    except ShiftNotFoundError as e:
        raise _fail(str(e), "SHIFT_NOT_FOUND")
    except Exception as e:
        raise _fail(str(e))


# --- Dashboard views ---


@app.command()
def report() -> None:
    """Stock flow: demand of upcoming events against inventory."""
    try:
        dashboard = get_dashboard()
        entries = dashboard.logistics_report()
        output_data = {
            "success": True,
            "data": {
                "report": [e.to_dict() for e in entries],
                "window_days": dashboard.config.window_days,
                "deficits": sum(1 for e in entries if e.is_deficit),
            },
        }
        formatter.output(output_data)
    except Exception as e:
        raise _fail(str(e))


@app.command()
def schedule() -> None:
    """Events for each day of the coming window."""
    try:
        days = get_dashboard().weekly_schedule()
        output_data = {
            "success": True,
            "data": {"schedule": [d.model_dump(mode="json") for d in days]},
        }
        formatter.output(output_data)
    except Exception as e:
        raise _fail(str(e))


@app.command()
def shares(
    category: Annotated[
        str | None, typer.Option("--category", "-c", help="Inventory category")
    ] = None,
) -> None:
    """Share of each item within an inventory category."""
    try:
        dashboard = get_dashboard()
        category = category or dashboard.config.share_category
        breakdown = dashboard.inventory_shares(category)
        output_data = {
            "success": True,
            "data": {
                "category": category,
                "shares": breakdown.model_dump(mode="json"),
                "gradient": breakdown.gradient,
            },
        }
        formatter.output(output_data)
    except Exception as e:
        raise _fail(str(e))


if __name__ == "__main__":
    app()
