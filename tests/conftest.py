"""Shared test fixtures for Bar Logistics."""

from datetime import date

import pytest

from bar_logistics.data_store import DataStore
from bar_logistics.event_manager import EventManager
from bar_logistics.inventory_manager import InventoryManager
from bar_logistics.models import (
    ChecklistCategory,
    ChecklistItem,
    EventPlan,
    InventoryItem,
    SuggestedItem,
    Unit,
)
from bar_logistics.recipe_manager import RecipeManager


@pytest.fixture
def temp_data_dir(tmp_path):
    """Create a temporary data directory."""
    data_dir = tmp_path / "test_data"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def data_store(temp_data_dir):
    """Create an empty DataStore with temporary directory."""
    return DataStore(data_dir=temp_data_dir, seed=False)


@pytest.fixture
def inv_manager(data_store):
    """Create an InventoryManager with test data store."""
    return InventoryManager(data_store=data_store)


@pytest.fixture
def recipe_manager(data_store):
    """Create a RecipeManager with test data store."""
    return RecipeManager(data_store=data_store)


@pytest.fixture
def event_manager(data_store):
    """Create an EventManager with test data store."""
    return EventManager(data_store=data_store)


@pytest.fixture
def monday():
    """A fixed Monday to anchor calendar windows."""
    return date(2024, 3, 4)


def make_event(name: str, day: str, *lines: tuple[str, float], **kwargs) -> EventPlan:
    """Build an event whose checklist holds (name, quantity) supply lines."""
    checklist = [
        ChecklistItem(name=n, category=ChecklistCategory.SUPPLY, quantity_needed=q)
        for n, q in lines
    ]
    return EventPlan(name=name, date=day, checklist=checklist, **kwargs)


def make_stock(name: str, quantity: float, unit: Unit = Unit.UNIT, **kwargs) -> InventoryItem:
    """Build an inventory item."""
    return InventoryItem(name=name, quantity=quantity, unit=unit, **kwargs)


def make_suggestion(name: str, category: ChecklistCategory, quantity: float, notes: str = ""):
    """Build a suggested checklist line."""
    return SuggestedItem(name=name, category=category, quantity_needed=quantity, notes=notes)
