"""Core data models for Bar Logistics."""

import math
from datetime import date, datetime
from enum import Enum
from uuid import UUID, uuid4

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Unit(str, Enum):
    """Units of measure for stock and ingredients."""

    ML = "ml"
    L = "l"
    OZ = "oz"
    UNIT = "un"
    KG = "kg"
    G = "g"


class EventType(str, Enum):
    """Kinds of events the bar is booked for."""

    WEDDING = "Wedding"
    BIRTHDAY = "Birthday"
    CORPORATE = "Corporate"
    OTHER = "Other"


class EventStatus(str, Enum):
    """Lifecycle of an event plan."""

    DRAFT = "Draft"
    CONFIRMED = "Confirmed"
    COMPLETED = "Completed"


class ChecklistCategory(str, Enum):
    """Closed set of checklist categories."""

    BEVERAGE = "Beverage"
    SUPPLY = "Supply"
    SYRUP = "Syrup"
    GLASSWARE = "Glassware"
    UTENSIL = "Utensil"
    STRUCTURE = "Structure"
    ENTERTAINMENT = "Entertainment"


class StaffRole(str, Enum):
    """Roles on an event staff roster."""

    BARTENDER = "Bartender"
    BARBACK = "Barback"
    BAR_MANAGER = "Bar Manager"
    WAITER = "Waiter"


class StockStatus(str, Enum):
    """Outcome of reconciling demand against stock."""

    SUFFICIENT = "sufficient"
    DEFICIT = "deficit"


class InventoryItem(BaseModel):
    """A stocked item in the bar inventory."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    category: str = "Other"
    quantity: float = Field(default=0.0, ge=0)
    min_stock: float = Field(default=0.0, ge=0)
    unit: Unit = Unit.UNIT
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def needs_replenishment(self) -> bool:
        """Check if stock is at or below the minimum."""
        return self.quantity <= self.min_stock


class Ingredient(BaseModel):
    """An ingredient line of a recipe."""

    name: str
    amount: float
    unit: Unit = Unit.ML


class Recipe(BaseModel):
    """A drink recipe."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    ingredients: list[Ingredient] = Field(default_factory=list)
    instructions: str = ""
    glassware: str = ""
    category: str = ""


class ChecklistItem(BaseModel):
    """A quantified logistics line tied to one event."""

    name: str
    category: ChecklistCategory
    quantity_needed: float = 0.0
    quantity_packed: float = 0.0
    is_packed: bool = False
    notes: str = ""


class SuggestedItem(BaseModel):
    """A checklist line proposed by the suggestion service.

    Packing fields are intentionally absent: the service never decides
    what has been packed.
    """

    name: str
    category: ChecklistCategory
    quantity_needed: float = Field(
        default=0.0, validation_alias=AliasChoices("quantity_needed", "quantityNeeded")
    )
    notes: str = ""


class StaffShift(BaseModel):
    """A staff member scheduled for an event."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    role: StaffRole = StaffRole.BARTENDER
    start_time: str = "18:00"  # HH:MM
    end_time: str = "02:00"
    hourly_rate: float | None = None


class EventPlan(BaseModel):
    """An event with its checklist, drink menu and staff roster."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    client_name: str = ""
    date: str  # "YYYY-MM-DD", no timezone
    time: str = "19:00"
    location: str = ""
    event_type: EventType = EventType.OTHER
    guest_count: int = Field(default=0, ge=0)
    bartender_count: int = 0
    drink_menu: list[str] = Field(default_factory=list)
    status: EventStatus = EventStatus.DRAFT
    checklist: list[ChecklistItem] = Field(default_factory=list)
    staff: list[StaffShift] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


# --- Derived view values ---


class LogisticsReportEntry(BaseModel):
    """Aggregated demand for one item set against current stock."""

    model_config = ConfigDict(frozen=True)

    name: str
    needed: float
    stock: float = 0.0
    unit: str = Unit.UNIT.value

    @property
    def balance(self) -> float:
        """Stock left after covering demand (negative means short)."""
        return self.stock - self.needed

    @property
    def status(self) -> StockStatus:
        if self.balance >= 0:
            return StockStatus.SUFFICIENT
        return StockStatus.DEFICIT

    @property
    def is_deficit(self) -> bool:
        return self.status == StockStatus.DEFICIT

    def to_dict(self) -> dict:
        """Serialize including the derived balance and status."""
        data = self.model_dump(mode="json")
        data["balance"] = self.balance
        data["status"] = self.status.value
        return data


class ShareSegment(BaseModel):
    """One slice of a proportional breakdown."""

    model_config = ConfigDict(frozen=True)

    item_id: UUID | None = None
    name: str
    quantity: float
    percent: float
    start: float
    end: float
    color: str


class ShareBreakdown(BaseModel):
    """Cumulative share segments for a subset of inventory."""

    model_config = ConfigDict(frozen=True)

    total_quantity: float = 0.0
    segments: list[ShareSegment] = Field(default_factory=list)

    @property
    def gradient(self) -> str:
        """Conic-gradient stops, e.g. ``"#64ffda 0% 50%, #3b82f6 50% 100%"``."""
        return ", ".join(f"{s.color} {s.start}% {s.end}%" for s in self.segments)


class DaySchedule(BaseModel):
    """Events falling on one day of a calendar window."""

    day: date
    events: list[EventPlan] = Field(default_factory=list)


class PackingProgress(BaseModel):
    """Packed vs. total checklist lines."""

    packed: int = 0
    total: int = 0
    by_category: dict[str, "PackingProgress"] = Field(default_factory=dict)

    @property
    def percent(self) -> int:
        if self.total == 0:
            return 0
        # half-up, so 12.5% reads as 13%
        return math.floor(self.packed / self.total * 100 + 0.5)

    @property
    def is_complete(self) -> bool:
        return self.total > 0 and self.packed == self.total
