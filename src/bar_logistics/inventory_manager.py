"""Inventory management for Bar Logistics."""

from datetime import datetime
from uuid import UUID

from .data_store import DataStore
from .models import InventoryItem, Unit


class InventoryManager:
    """Manages bar stock."""

    def __init__(self, data_store: DataStore | None = None):
        self.data_store = data_store or DataStore()

    def add_item(
        self,
        name: str,
        quantity: float = 0.0,
        unit: Unit = Unit.UNIT,
        category: str = "Other",
        min_stock: float = 0.0,
    ) -> InventoryItem:
        """Add an item to inventory.

        Args:
            name: Name of the item
            quantity: Quantity in stock
            unit: Unit of measurement
            category: Stock category, e.g. "Distillate"
            min_stock: Replenish when quantity drops to this

        Returns:
            The created InventoryItem
        """
        item = InventoryItem(
            name=name,
            quantity=quantity,
            unit=unit,
            category=category,
            min_stock=min_stock,
        )

        inventory = self.data_store.load_inventory()
        inventory.append(item)
        self.data_store.save_inventory(inventory)
        return item

    def remove_item(self, item_id: str | UUID) -> InventoryItem:
        """Remove an item from inventory.

        Args:
            item_id: UUID of item to remove

        Returns:
            The removed item

        Raises:
            ValueError: If item not found
        """
        if isinstance(item_id, str):
            item_id = UUID(item_id)

        inventory = self.data_store.load_inventory()
        for i, item in enumerate(inventory):
            if item.id == item_id:
                removed = inventory.pop(i)
                self.data_store.save_inventory(inventory)
                return removed

        raise ValueError(f"Inventory item not found: {item_id}")

    def update_quantity(
        self,
        item_id: str | UUID,
        quantity: float | None = None,
        delta: float | None = None,
    ) -> InventoryItem:
        """Update item quantity.

        Args:
            item_id: UUID of item
            quantity: Set absolute quantity
            delta: Add/subtract from current quantity

        Returns:
            Updated item

        Raises:
            ValueError: If item not found or invalid args
        """
        if isinstance(item_id, str):
            item_id = UUID(item_id)

        if quantity is None and delta is None:
            raise ValueError("Must provide quantity or delta")
        if quantity is not None and quantity < 0:
            raise ValueError("Quantity cannot be negative")

        inventory = self.data_store.load_inventory()
        for item in inventory:
            if item.id == item_id:
                if quantity is not None:
                    item.quantity = quantity
                elif delta is not None:
                    item.quantity = max(0, item.quantity + delta)
                item.updated_at = datetime.now()
                self.data_store.save_inventory(inventory)
                return item

        raise ValueError(f"Inventory item not found: {item_id}")

    def update_item(
        self,
        item_id: str | UUID,
        name: str | None = None,
        quantity: float | None = None,
        unit: Unit | None = None,
        category: str | None = None,
        min_stock: float | None = None,
    ) -> InventoryItem:
        """Update editable inventory fields.

        None leaves a field unchanged.

        Raises:
            ValueError: If item not found or a quantity is negative
        """
        if isinstance(item_id, str):
            item_id = UUID(item_id)

        inventory = self.data_store.load_inventory()
        for i, item in enumerate(inventory):
            if item.id == item_id:
                changes = {
                    "name": name,
                    "quantity": quantity,
                    "unit": unit,
                    "category": category,
                    "min_stock": min_stock,
                }
                data = item.model_dump()
                data.update({k: v for k, v in changes.items() if v is not None})
                data["updated_at"] = datetime.now()
                # re-validate so negative stock is rejected
                updated = InventoryItem.model_validate(data)

                inventory[i] = updated
                self.data_store.save_inventory(inventory)
                return updated

        raise ValueError(f"Inventory item not found: {item_id}")

    def get_inventory(self, category: str | None = None) -> list[InventoryItem]:
        """Get inventory items, optionally for one category.

        Args:
            category: Filter by category (case-insensitive)

        Returns:
            List of matching inventory items
        """
        inventory = self.data_store.load_inventory()

        if category:
            inventory = [i for i in inventory if i.category.lower() == category.lower()]

        return inventory

    def get_low_stock(self) -> list[InventoryItem]:
        """Get items at or below their minimum stock.

        Returns:
            List of items needing replenishment
        """
        inventory = self.data_store.load_inventory()
        return [i for i in inventory if i.needs_replenishment]

    def category_totals(self) -> dict[str, float]:
        """Total quantity on hand per category.

        Returns:
            Dict mapping category -> summed quantity, in first-seen order
        """
        totals: dict[str, float] = {}
        for item in self.data_store.load_inventory():
            totals[item.category] = totals.get(item.category, 0) + item.quantity
        return totals
