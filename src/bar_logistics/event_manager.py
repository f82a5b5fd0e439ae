"""Event plan management: checklists, drink menus and staff rosters."""

import logging
from collections.abc import Iterable
from datetime import date
from uuid import UUID

from .calendar_window import parse_date_parts
from .checklist_merge import merge_suggestions
from .config import DefaultsConfig
from .data_store import DataStore
from .models import (
    ChecklistCategory,
    ChecklistItem,
    EventPlan,
    EventStatus,
    EventType,
    PackingProgress,
    StaffRole,
    StaffShift,
    SuggestedItem,
)

logger = logging.getLogger(__name__)


class EventNotFoundError(LookupError):
    """Raised when an event is not found."""

    def __init__(self, event_id: UUID | str):
        self.event_id = event_id
        super().__init__(f"Event with ID '{event_id}' not found")


class ChecklistItemNotFoundError(LookupError):
    """Raised when a checklist position does not exist."""

    def __init__(self, event_id: UUID, index: int):
        self.event_id = event_id
        self.index = index
        super().__init__(f"Event '{event_id}' has no checklist item at position {index}")


class ShiftNotFoundError(LookupError):
    """Raised when a staff shift is not on the roster."""

    def __init__(self, shift_id: UUID | str):
        self.shift_id = shift_id
        super().__init__(f"Shift with ID '{shift_id}' not found")


def validate_event_date(value: str) -> str:
    """Check that a date string is a real ``YYYY-MM-DD`` calendar date.

    Raises:
        ValueError: If the string is malformed or not a real date
    """
    parts = parse_date_parts(value)
    if parts is None:
        raise ValueError(f"Invalid event date {value!r}, expected YYYY-MM-DD")
    date(*parts)  # rejects 2024-02-30 and friends
    return value.strip()


def compute_packing_progress(
    checklist: Iterable[ChecklistItem],
    categories: Iterable[ChecklistCategory] | None = None,
) -> PackingProgress:
    """Count packed lines overall and per category.

    Args:
        checklist: Checklist lines
        categories: Categories to break down. Defaults to all categories.

    Returns:
        PackingProgress with a per-category breakdown
    """
    items = list(checklist)
    by_category = {}
    for category in categories or ChecklistCategory:
        lines = [i for i in items if i.category == category]
        by_category[category.value] = PackingProgress(
            packed=sum(1 for i in lines if i.is_packed), total=len(lines)
        )

    return PackingProgress(
        packed=sum(1 for i in items if i.is_packed),
        total=len(items),
        by_category=by_category,
    )


def _event_sort_key(event: EventPlan) -> tuple:
    # malformed dates sort last
    return (parse_date_parts(event.date) or (9999, 99, 99), event.time)


class EventManager:
    """Manages event plans."""

    def __init__(
        self,
        data_store: DataStore | None = None,
        defaults: DefaultsConfig | None = None,
    ):
        """Initialize event manager.

        Args:
            data_store: DataStore instance. Creates new one if not provided.
            defaults: Default event time and shift hours
        """
        self.data_store = data_store or DataStore()
        self.defaults = defaults or DefaultsConfig()

    def _require(self, event_id: UUID | str) -> EventPlan:
        if isinstance(event_id, str):
            event_id = UUID(event_id)

        event = self.data_store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def _checklist_line(self, event: EventPlan, index: int) -> ChecklistItem:
        if not 0 <= index < len(event.checklist):
            raise ChecklistItemNotFoundError(event.id, index)
        return event.checklist[index]

    # --- Events ---

    def create_event(
        self,
        name: str,
        date: str,
        client_name: str = "",
        time: str | None = None,
        location: str = "",
        event_type: EventType = EventType.OTHER,
        guest_count: int = 0,
        bartender_count: int = 0,
        drink_menu: list[str] | None = None,
    ) -> EventPlan:
        """Create a draft event plan.

        Args:
            name: Event name
            date: Event date as YYYY-MM-DD
            client_name: Who booked the event
            time: Start time as HH:MM
            location: Venue
            event_type: Kind of event
            guest_count: Expected guests
            bartender_count: Planned bartenders
            drink_menu: Drinks to serve

        Returns:
            The created EventPlan

        Raises:
            ValueError: If name is blank or date is invalid
        """
        if not name.strip():
            raise ValueError("Event name is required")

        event = EventPlan(
            name=name.strip(),
            client_name=client_name,
            date=validate_event_date(date),
            time=time or self.defaults.event_time,
            location=location,
            event_type=event_type,
            guest_count=guest_count,
            bartender_count=bartender_count,
            drink_menu=drink_menu or [],
        )
        self.data_store.upsert_event(event)
        return event

    def get_event(self, event_id: UUID | str) -> EventPlan:
        """Get an event by ID.

        Raises:
            EventNotFoundError: If event not found
        """
        return self._require(event_id)

    def list_events(self, status: EventStatus | None = None) -> list[EventPlan]:
        """List events by date, optionally filtered by status."""
        events = self.data_store.load_events()
        if status:
            events = [e for e in events if e.status == status]
        return sorted(events, key=_event_sort_key)

    def remove_event(self, event_id: UUID | str) -> EventPlan:
        """Delete an event.

        Raises:
            EventNotFoundError: If event not found
        """
        event = self._require(event_id)
        self.data_store.delete_event(event.id)
        return event

    def update_event(
        self,
        event_id: UUID | str,
        name: str | None = None,
        date: str | None = None,
        client_name: str | None = None,
        time: str | None = None,
        location: str | None = None,
        event_type: EventType | None = None,
        guest_count: int | None = None,
        bartender_count: int | None = None,
    ) -> EventPlan:
        """Edit event details in place. None leaves a field unchanged.

        Checklist, drink menu and staff are kept.

        Raises:
            EventNotFoundError: If event not found
            ValueError: If name is blank or date is invalid
            ValidationError: If a count is negative
        """
        event = self._require(event_id)

        changes = {
            "client_name": client_name,
            "time": time,
            "location": location,
            "event_type": event_type,
            "guest_count": guest_count,
            "bartender_count": bartender_count,
        }
        if name is not None:
            if not name.strip():
                raise ValueError("Event name is required")
            changes["name"] = name.strip()
        if date is not None:
            changes["date"] = validate_event_date(date)

        data = event.model_dump()
        data.update({k: v for k, v in changes.items() if v is not None})
        # re-validate so a negative guest count is rejected
        updated = EventPlan.model_validate(data)

        self.data_store.upsert_event(updated)
        return updated

    def set_status(self, event_id: UUID | str, status: EventStatus) -> EventPlan:
        """Move an event to a new status."""
        event = self._require(event_id)
        event.status = status
        self.data_store.upsert_event(event)
        return event

    # --- Checklist ---

    def add_checklist_item(
        self,
        event_id: UUID | str,
        name: str,
        category: ChecklistCategory,
        quantity_needed: float = 0.0,
        notes: str = "",
    ) -> ChecklistItem:
        """Append an unpacked line to an event's checklist."""
        event = self._require(event_id)
        item = ChecklistItem(
            name=name,
            category=category,
            quantity_needed=quantity_needed,
            notes=notes,
        )
        event.checklist.append(item)
        self.data_store.upsert_event(event)
        return item

    def update_checklist_item(
        self,
        event_id: UUID | str,
        index: int,
        name: str | None = None,
        category: ChecklistCategory | None = None,
        quantity_needed: float | None = None,
        quantity_packed: float | None = None,
        notes: str | None = None,
    ) -> ChecklistItem:
        """Edit a checklist line in place. None leaves a field unchanged.

        Raises:
            EventNotFoundError: If event not found
            ChecklistItemNotFoundError: If index is out of range
        """
        event = self._require(event_id)
        item = self._checklist_line(event, index)

        if name is not None:
            item.name = name
        if category is not None:
            item.category = category
        if quantity_needed is not None:
            item.quantity_needed = quantity_needed
        if quantity_packed is not None:
            item.quantity_packed = quantity_packed
        if notes is not None:
            item.notes = notes

        self.data_store.upsert_event(event)
        return item

    def remove_checklist_item(self, event_id: UUID | str, index: int) -> ChecklistItem:
        """Remove a checklist line by position."""
        event = self._require(event_id)
        self._checklist_line(event, index)
        removed = event.checklist.pop(index)
        self.data_store.upsert_event(event)
        return removed

    def toggle_packed(self, event_id: UUID | str, index: int) -> ChecklistItem:
        """Flip the packed flag of a checklist line."""
        event = self._require(event_id)
        item = self._checklist_line(event, index)
        item.is_packed = not item.is_packed
        self.data_store.upsert_event(event)
        return item

    def apply_suggestions(
        self, event_id: UUID | str, suggestions: list[SuggestedItem]
    ) -> EventPlan:
        """Merge suggested lines into an event's checklist and save it.

        An empty suggestion list leaves the event untouched.
        """
        event = self._require(event_id)
        if not suggestions:
            logger.info("No suggestions for event %s, checklist left as is", event.id)
            return event

        event.checklist = merge_suggestions(event.checklist, suggestions)
        self.data_store.upsert_event(event)
        return event

    def packing_progress(self, event_id: UUID | str) -> PackingProgress:
        """Packing progress of an event's checklist."""
        return compute_packing_progress(self._require(event_id).checklist)

    # --- Drink menu ---

    def add_drink(self, event_id: UUID | str, drink: str) -> EventPlan:
        """Add a drink to the event menu."""
        event = self._require(event_id)
        event.drink_menu.append(drink)
        self.data_store.upsert_event(event)
        return event

    def update_drink(self, event_id: UUID | str, index: int, drink: str) -> EventPlan:
        """Replace the drink at a menu position.

        Raises:
            IndexError: If index is out of range
            ValueError: If drink is blank
        """
        if not drink.strip():
            raise ValueError("Drink name is required")

        event = self._require(event_id)
        if not 0 <= index < len(event.drink_menu):
            raise IndexError(f"Drink menu has no entry at position {index}")
        event.drink_menu[index] = drink.strip()
        self.data_store.upsert_event(event)
        return event

    def remove_drink(self, event_id: UUID | str, index: int) -> str:
        """Remove a drink from the menu by position.

        Raises:
            IndexError: If index is out of range
        """
        event = self._require(event_id)
        if not 0 <= index < len(event.drink_menu):
            raise IndexError(f"Drink menu has no entry at position {index}")
        removed = event.drink_menu.pop(index)
        self.data_store.upsert_event(event)
        return removed

    # --- Staff ---

    def save_shift(
        self,
        event_id: UUID | str,
        name: str,
        role: StaffRole = StaffRole.BARTENDER,
        start_time: str | None = None,
        end_time: str | None = None,
        hourly_rate: float | None = None,
        shift_id: UUID | str | None = None,
    ) -> StaffShift:
        """Add a shift to the roster, or replace the one with ``shift_id``.

        Raises:
            EventNotFoundError: If event not found
            ValueError: If name is blank
        """
        if not name.strip():
            raise ValueError("Staff name is required")

        event = self._require(event_id)
        shift = StaffShift(
            name=name.strip(),
            role=role,
            start_time=start_time or self.defaults.shift_start,
            end_time=end_time or self.defaults.shift_end,
            hourly_rate=hourly_rate or 0.0,
        )
        if shift_id is not None:
            shift.id = UUID(str(shift_id))

        for i, existing in enumerate(event.staff):
            if existing.id == shift.id:
                event.staff[i] = shift
                break
        else:
            event.staff.append(shift)

        self.data_store.upsert_event(event)
        return shift

    def remove_shift(self, event_id: UUID | str, shift_id: UUID | str) -> StaffShift:
        """Take a shift off the roster.

        Raises:
            EventNotFoundError: If event not found
            ShiftNotFoundError: If shift not on the roster
        """
        if isinstance(shift_id, str):
            shift_id = UUID(shift_id)

        event = self._require(event_id)
        for i, shift in enumerate(event.staff):
            if shift.id == shift_id:
                removed = event.staff.pop(i)
                self.data_store.upsert_event(event)
                return removed

        raise ShiftNotFoundError(shift_id)
