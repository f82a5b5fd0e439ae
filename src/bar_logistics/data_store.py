"""Data persistence for Bar Logistics.

Events, inventory and recipes are kept as JSON arrays in a data directory.
Records are read and written whole; callers always work on a full snapshot.
"""

import json
from collections.abc import Sequence
from datetime import date, datetime, time
from pathlib import Path
from typing import Any, TypeVar
from uuid import UUID

from pydantic import BaseModel

from .models import EventPlan, Ingredient, InventoryItem, Recipe, Unit

RecordT = TypeVar("RecordT", bound=BaseModel)


class JSONEncoder(json.JSONEncoder):
    """Custom JSON encoder for our data types."""

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


def seed_inventory() -> list[InventoryItem]:
    """Starter stock used until an inventory has been saved."""
    return [
        InventoryItem(name="Premium Vodka", category="Distillate", quantity=12, min_stock=5),
        InventoryItem(name="London Dry Gin", category="Distillate", quantity=8, min_stock=3),
        InventoryItem(
            name="Simple Syrup", category="Syrup", quantity=5, min_stock=2, unit=Unit.L
        ),
        InventoryItem(name="Tahiti Lime", category="Supply", quantity=50, min_stock=20),
        InventoryItem(name="Gin Glass", category="Glassware", quantity=100, min_stock=100),
        InventoryItem(name="Highball Glass", category="Glassware", quantity=150, min_stock=50),
    ]


def seed_recipes() -> list[Recipe]:
    """Starter recipes used until recipes have been saved."""
    return [
        Recipe(
            name="Moscow Mule",
            category="Classic",
            glassware="Copper Mug",
            instructions=(
                "1. Fill the mug with ice.\n"
                "2. Add vodka and lime.\n"
                "3. Top with ginger foam."
            ),
            ingredients=[
                Ingredient(name="Vodka", amount=50, unit=Unit.ML),
                Ingredient(name="Lime Juice", amount=20, unit=Unit.ML),
                Ingredient(name="Ginger Syrup", amount=30, unit=Unit.ML),
            ],
        )
    ]


class DataStore:
    """Manages JSON file persistence for bar data."""

    def __init__(self, data_dir: Path | None = None, seed: bool = True):
        """Initialize data store.

        Args:
            data_dir: Directory for data files. Defaults to ./data
            seed: Write starter inventory and recipes on first load
        """
        self.data_dir = data_dir or Path.cwd() / "data"
        self.seed = seed
        self._ensure_directories()

    def _ensure_directories(self) -> None:
        """Create necessary directories if they don't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _events_path(self) -> Path:
        """Path to events file."""
        return self.data_dir / "events.json"

    def _inventory_path(self) -> Path:
        """Path to inventory file."""
        return self.data_dir / "inventory.json"

    def _recipes_path(self) -> Path:
        """Path to recipes file."""
        return self.data_dir / "recipes.json"

    def _read(self, path: Path, model: type[RecordT]) -> list[RecordT] | None:
        if not path.exists():
            return None

        with open(path) as f:
            data = json.load(f)

        return [model.model_validate(record) for record in data]

    def _write(self, path: Path, records: Sequence[BaseModel]) -> None:
        with open(path, "w") as f:
            json.dump([r.model_dump() for r in records], f, cls=JSONEncoder, indent=2)

    # --- Event Operations ---

    def load_events(self) -> list[EventPlan]:
        """Load all event plans.

        Fields missing from older records take their model defaults.

        Returns:
            List of EventPlan, empty if none saved yet
        """
        return self._read(self._events_path(), EventPlan) or []

    def save_events(self, events: list[EventPlan]) -> None:
        """Save all event plans.

        Args:
            events: List of EventPlan to save
        """
        self._write(self._events_path(), events)

    def get_event(self, event_id: UUID) -> EventPlan | None:
        """Get an event by ID.

        Args:
            event_id: UUID of the event

        Returns:
            EventPlan if found, None otherwise
        """
        for event in self.load_events():
            if event.id == event_id:
                return event
        return None

    def upsert_event(self, event: EventPlan) -> None:
        """Replace the event with the same ID, or append it.

        Args:
            event: EventPlan to save
        """
        event.updated_at = datetime.now()
        self.save_events(_upsert(self.load_events(), event))

    def delete_event(self, event_id: UUID) -> bool:
        """Delete an event.

        Returns:
            True if an event was removed
        """
        events = self.load_events()
        remaining = [e for e in events if e.id != event_id]
        self.save_events(remaining)
        return len(remaining) != len(events)

    # --- Inventory Operations ---

    def load_inventory(self) -> list[InventoryItem]:
        """Load inventory items.

        Returns:
            List of InventoryItem. Seed stock is written on first load.
        """
        items = self._read(self._inventory_path(), InventoryItem)
        if items is None:
            items = seed_inventory() if self.seed else []
            self.save_inventory(items)
        return items

    def save_inventory(self, items: list[InventoryItem]) -> None:
        """Save inventory items.

        Args:
            items: List of InventoryItem to save
        """
        self._write(self._inventory_path(), items)

    def get_inventory_item(self, item_id: UUID) -> InventoryItem | None:
        """Get an inventory item by ID."""
        for item in self.load_inventory():
            if item.id == item_id:
                return item
        return None

    def upsert_inventory_item(self, item: InventoryItem) -> None:
        """Replace the inventory item with the same ID, or append it."""
        item.updated_at = datetime.now()
        self.save_inventory(_upsert(self.load_inventory(), item))

    def delete_inventory_item(self, item_id: UUID) -> bool:
        """Delete an inventory item.

        Returns:
            True if an item was removed
        """
        items = self.load_inventory()
        remaining = [i for i in items if i.id != item_id]
        self.save_inventory(remaining)
        return len(remaining) != len(items)

    # --- Recipe Operations ---

    def load_recipes(self) -> list[Recipe]:
        """Load recipes.

        Returns:
            List of Recipe. Seed recipes are written on first load.
        """
        recipes = self._read(self._recipes_path(), Recipe)
        if recipes is None:
            recipes = seed_recipes() if self.seed else []
            self.save_recipes(recipes)
        return recipes

    def save_recipes(self, recipes: list[Recipe]) -> None:
        """Save recipes."""
        self._write(self._recipes_path(), recipes)

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Get a recipe by ID."""
        for recipe in self.load_recipes():
            if recipe.id == recipe_id:
                return recipe
        return None

    def upsert_recipe(self, recipe: Recipe) -> None:
        """Replace the recipe with the same ID, or append it."""
        self.save_recipes(_upsert(self.load_recipes(), recipe))

    def delete_recipe(self, recipe_id: UUID) -> bool:
        """Delete a recipe.

        Returns:
            True if a recipe was removed
        """
        recipes = self.load_recipes()
        remaining = [r for r in recipes if r.id != recipe_id]
        self.save_recipes(remaining)
        return len(remaining) != len(recipes)


def _upsert(records: list[RecordT], record: RecordT) -> list[RecordT]:
    for i, existing in enumerate(records):
        if existing.id == record.id:  # type: ignore[attr-defined]
            records[i] = record
            return records
    records.append(record)
    return records
