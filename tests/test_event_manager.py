"""Tests for event manager module."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from conftest import make_suggestion

from bar_logistics.config import DefaultsConfig
from bar_logistics.event_manager import (
    ChecklistItemNotFoundError,
    EventManager,
    EventNotFoundError,
    ShiftNotFoundError,
    compute_packing_progress,
    validate_event_date,
)
from bar_logistics.models import (
    ChecklistCategory,
    ChecklistItem,
    EventStatus,
    EventType,
    StaffRole,
)

SUPPLY = ChecklistCategory.SUPPLY
BEVERAGE = ChecklistCategory.BEVERAGE


@pytest.fixture
def wedding(event_manager):
    """A wedding with an empty checklist."""
    return event_manager.create_event(
        name="Silva Wedding",
        date="2024-03-09",
        client_name="Ana Silva",
        event_type=EventType.WEDDING,
        guest_count=120,
    )


class TestValidateEventDate:
    """Tests for validate_event_date."""

    def test_valid(self):
        assert validate_event_date("2024-02-29") == "2024-02-29"

    @pytest.mark.parametrize("value", ["", "tomorrow", "2024-02-30", "2023-02-29", "2024-13-01"])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            validate_event_date(value)


class TestCreateEvent:
    """Tests for creating events."""

    def test_create(self, event_manager, wedding):
        assert wedding.status == EventStatus.DRAFT
        assert wedding.time == "19:00"
        assert event_manager.get_event(wedding.id).client_name == "Ana Silva"

    def test_default_time_from_config(self, data_store):
        manager = EventManager(data_store, DefaultsConfig(event_time="20:30"))
        event = manager.create_event(name="Launch", date="2024-03-05")
        assert event.time == "20:30"

    def test_blank_name(self, event_manager):
        with pytest.raises(ValueError):
            event_manager.create_event(name="  ", date="2024-03-05")

    def test_invalid_date(self, event_manager):
        with pytest.raises(ValueError):
            event_manager.create_event(name="Party", date="05/03/2024")


class TestUpdateEvent:
    """Tests for editing event details."""

    def test_update_keeps_plan(self, event_manager, wedding):
        """Changing the guest count keeps checklist, menu, staff and status."""
        event_manager.add_checklist_item(wedding.id, "Ice", SUPPLY, 40)
        event_manager.add_drink(wedding.id, "Negroni")
        event_manager.save_shift(wedding.id, "Bruno")
        event_manager.set_status(wedding.id, EventStatus.CONFIRMED)

        updated = event_manager.update_event(str(wedding.id), guest_count=80, location="Barn")

        assert updated.id == wedding.id
        assert updated.guest_count == 80
        assert updated.location == "Barn"
        assert updated.name == "Silva Wedding"
        stored = event_manager.get_event(wedding.id)
        assert stored.guest_count == 80
        assert stored.status == EventStatus.CONFIRMED
        assert [i.name for i in stored.checklist] == ["Ice"]
        assert stored.drink_menu == ["Negroni"]
        assert [s.name for s in stored.staff] == ["Bruno"]

    def test_update_date(self, event_manager, wedding):
        updated = event_manager.update_event(wedding.id, date=" 2024-03-16 ")
        assert updated.date == "2024-03-16"

    @pytest.mark.parametrize("value", ["2024-02-30", "next saturday", "2024-0_3-04"])
    def test_invalid_date(self, event_manager, wedding, value):
        with pytest.raises(ValueError):
            event_manager.update_event(wedding.id, date=value)
        assert event_manager.get_event(wedding.id).date == "2024-03-09"

    def test_negative_guest_count(self, event_manager, wedding):
        with pytest.raises(ValidationError):
            event_manager.update_event(wedding.id, guest_count=-1)
        assert event_manager.get_event(wedding.id).guest_count == 120

    def test_blank_name(self, event_manager, wedding):
        with pytest.raises(ValueError):
            event_manager.update_event(wedding.id, name="  ")

    def test_missing_event(self, event_manager):
        with pytest.raises(EventNotFoundError):
            event_manager.update_event(uuid4(), guest_count=10)


class TestEventQueries:
    """Tests for listing and fetching events."""

    def test_list_sorted_by_date(self, event_manager):
        event_manager.create_event(name="Later", date="2024-03-10")
        event_manager.create_event(name="Late show", date="2024-03-04", time="22:00")
        event_manager.create_event(name="Early show", date="2024-03-04", time="18:00")
        names = [e.name for e in event_manager.list_events()]
        assert names == ["Early show", "Late show", "Later"]

    def test_filter_by_status(self, event_manager, wedding):
        other = event_manager.create_event(name="Party", date="2024-03-05")
        event_manager.set_status(other.id, EventStatus.CONFIRMED)
        confirmed = event_manager.list_events(status=EventStatus.CONFIRMED)
        assert [e.name for e in confirmed] == ["Party"]

    def test_get_missing(self, event_manager):
        with pytest.raises(EventNotFoundError):
            event_manager.get_event(uuid4())

    def test_remove(self, event_manager, wedding):
        event_manager.remove_event(str(wedding.id))
        assert event_manager.list_events() == []
        with pytest.raises(EventNotFoundError):
            event_manager.remove_event(wedding.id)


class TestChecklist:
    """Tests for checklist editing."""

    def test_add_and_toggle(self, event_manager, wedding):
        event_manager.add_checklist_item(wedding.id, "Ice", SUPPLY, quantity_needed=40)
        item = event_manager.toggle_packed(wedding.id, 0)
        assert item.is_packed is True
        assert event_manager.get_event(wedding.id).checklist[0].is_packed is True

        item = event_manager.toggle_packed(wedding.id, 0)
        assert item.is_packed is False

    def test_update_line(self, event_manager, wedding):
        event_manager.add_checklist_item(wedding.id, "Ice", SUPPLY, quantity_needed=40)
        item = event_manager.update_checklist_item(wedding.id, 0, quantity_packed=25, notes="2 bags")
        assert item.quantity_packed == 25
        assert item.notes == "2 bags"
        assert item.quantity_needed == 40

    def test_remove_line(self, event_manager, wedding):
        event_manager.add_checklist_item(wedding.id, "Ice", SUPPLY)
        event_manager.add_checklist_item(wedding.id, "Gin", BEVERAGE)
        removed = event_manager.remove_checklist_item(wedding.id, 0)
        assert removed.name == "Ice"
        assert [i.name for i in event_manager.get_event(wedding.id).checklist] == ["Gin"]

    @pytest.mark.parametrize("index", [-1, 0, 3])
    def test_bad_index(self, event_manager, wedding, index):
        with pytest.raises(ChecklistItemNotFoundError):
            event_manager.toggle_packed(wedding.id, index)


class TestApplySuggestions:
    """Tests for merging suggestions into a saved event."""

    def test_merge_keeps_packed_lines(self, event_manager, wedding):
        event_manager.add_checklist_item(wedding.id, "Ice", SUPPLY, quantity_needed=20)
        event_manager.toggle_packed(wedding.id, 0)

        event = event_manager.apply_suggestions(
            wedding.id,
            [make_suggestion("Ice", SUPPLY, 60), make_suggestion("Vodka", BEVERAGE, 6)],
        )

        saved = event_manager.get_event(wedding.id)
        assert saved.checklist == event.checklist
        assert saved.checklist[0].quantity_needed == 60
        assert saved.checklist[0].is_packed is True
        assert saved.checklist[1].name == "Vodka"
        assert saved.checklist[1].is_packed is False

    def test_empty_suggestions_leave_event(self, event_manager, wedding):
        before = event_manager.get_event(wedding.id)
        event_manager.apply_suggestions(wedding.id, [])
        after = event_manager.get_event(wedding.id)
        assert after.updated_at == before.updated_at


class TestPackingProgress:
    """Tests for packing progress."""

    def test_progress(self, event_manager, wedding):
        for name in ("Ice", "Lime", "Mint"):
            event_manager.add_checklist_item(wedding.id, name, SUPPLY)
        event_manager.add_checklist_item(wedding.id, "Gin", BEVERAGE)
        event_manager.toggle_packed(wedding.id, 0)
        event_manager.toggle_packed(wedding.id, 3)

        progress = event_manager.packing_progress(wedding.id)
        assert progress.packed == 2
        assert progress.total == 4
        assert progress.percent == 50
        assert progress.by_category["Supply"].packed == 1
        assert progress.by_category["Supply"].total == 3
        assert progress.by_category["Beverage"].is_complete

    def test_selected_categories(self):
        checklist = [ChecklistItem(name="Ice", category=SUPPLY, is_packed=True)]
        progress = compute_packing_progress(checklist, [SUPPLY])
        assert list(progress.by_category) == ["Supply"]


class TestDrinkMenu:
    """Tests for drink menu editing."""

    def test_add_and_remove(self, event_manager, wedding):
        event_manager.add_drink(wedding.id, "Moscow Mule")
        event_manager.add_drink(wedding.id, "Negroni")
        assert event_manager.remove_drink(wedding.id, 0) == "Moscow Mule"
        assert event_manager.get_event(wedding.id).drink_menu == ["Negroni"]

    def test_remove_bad_index(self, event_manager, wedding):
        with pytest.raises(IndexError):
            event_manager.remove_drink(wedding.id, 0)

    def test_update(self, event_manager, wedding):
        event_manager.add_drink(wedding.id, "Moscow Mule")
        event_manager.add_drink(wedding.id, "Negroni")
        event = event_manager.update_drink(wedding.id, 1, " Boulevardier ")
        assert event.drink_menu == ["Moscow Mule", "Boulevardier"]
        assert event_manager.get_event(wedding.id).drink_menu == ["Moscow Mule", "Boulevardier"]

    def test_update_bad_index(self, event_manager, wedding):
        event_manager.add_drink(wedding.id, "Negroni")
        with pytest.raises(IndexError):
            event_manager.update_drink(wedding.id, 1, "Spritz")
        with pytest.raises(IndexError):
            event_manager.update_drink(wedding.id, -1, "Spritz")

    def test_update_blank(self, event_manager, wedding):
        event_manager.add_drink(wedding.id, "Negroni")
        with pytest.raises(ValueError):
            event_manager.update_drink(wedding.id, 0, "  ")
        assert event_manager.get_event(wedding.id).drink_menu == ["Negroni"]


class TestStaff:
    """Tests for staff rosters."""

    def test_add_shift_with_defaults(self, event_manager, wedding):
        shift = event_manager.save_shift(wedding.id, "Bruno")
        assert shift.role == StaffRole.BARTENDER
        assert shift.start_time == "18:00"
        assert shift.end_time == "02:00"
        assert len(event_manager.get_event(wedding.id).staff) == 1

    def test_replace_shift(self, event_manager, wedding):
        shift = event_manager.save_shift(wedding.id, "Bruno")
        event_manager.save_shift(
            wedding.id, "Bruno", role=StaffRole.BAR_MANAGER, shift_id=str(shift.id)
        )
        staff = event_manager.get_event(wedding.id).staff
        assert len(staff) == 1
        assert staff[0].role == StaffRole.BAR_MANAGER

    def test_remove_shift(self, event_manager, wedding):
        shift = event_manager.save_shift(wedding.id, "Bruno")
        removed = event_manager.remove_shift(wedding.id, str(shift.id))
        assert removed.name == "Bruno"
        with pytest.raises(ShiftNotFoundError):
            event_manager.remove_shift(wedding.id, shift.id)

    def test_blank_name(self, event_manager, wedding):
        with pytest.raises(ValueError):
            event_manager.save_shift(wedding.id, " ")
