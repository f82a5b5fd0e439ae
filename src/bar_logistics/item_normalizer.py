"""Shared item name normalization utilities."""

from .models import ChecklistCategory, ChecklistItem, SuggestedItem


def normalize_item_name(item_name: str) -> str:
    """Normalize a checklist name into its demand key (trimmed, case kept)."""
    return item_name.strip()


def stock_match_key(item_name: str) -> str:
    """Case-insensitive key used to find an item's stock."""
    return item_name.lower()


def checklist_key(item: ChecklistItem | SuggestedItem) -> tuple[str, ChecklistCategory]:
    """Merge identity of a checklist line: lower-cased name, exact category."""
    return item.name.lower(), item.category
