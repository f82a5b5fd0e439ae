"""Bar Logistics - Stock, recipes and event planning for mobile bar operators."""

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
from .logistics import aggregate_demand, build_logistics_report, reconcile_stock
from .checklist_merge import merge_suggestions
from .models import (
    ChecklistCategory,
    ChecklistItem,
    DaySchedule,
    EventPlan,
    EventStatus,
    EventType,
    Ingredient,
    InventoryItem,
    LogisticsReportEntry,
    PackingProgress,
    Recipe,
    ShareBreakdown,
    ShareSegment,
    StaffRole,
    StaffShift,
    StockStatus,
    SuggestedItem,
    Unit,
)
from .output_formatter import OutputFormatter
from .recipe_manager import RecipeManager
from .share_calculator import compute_shares
from .suggestions import OpenAISuggestionProvider, SuggestionProvider, parse_suggestions

__version__ = "0.1.0"

__all__ = [
    "aggregate_demand",
    "build_logistics_report",
    "ChecklistCategory",
    "ChecklistItem",
    "ChecklistItemNotFoundError",
    "compute_shares",
    "ConfigManager",
    "Dashboard",
    "DataStore",
    "DaySchedule",
    "EventManager",
    "EventNotFoundError",
    "EventPlan",
    "EventStatus",
    "EventType",
    "Ingredient",
    "InventoryItem",
    "InventoryManager",
    "LogisticsReportEntry",
    "merge_suggestions",
    "OpenAISuggestionProvider",
    "OutputFormatter",
    "PackingProgress",
    "parse_suggestions",
    "Recipe",
    "RecipeManager",
    "reconcile_stock",
    "ShareBreakdown",
    "ShareSegment",
    "ShiftNotFoundError",
    "StaffRole",
    "StaffShift",
    "StockStatus",
    "SuggestedItem",
    "SuggestionProvider",
    "Unit",
]
