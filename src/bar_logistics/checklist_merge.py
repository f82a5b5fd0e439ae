"""Merging suggested items into a hand-edited checklist.

Two rules decide what happens to packing state:

* update keeps packing state: a suggestion that matches an existing line
  only replaces its ``quantity_needed``;
* append resets packing state: a new line always starts unpacked with
  nothing packed, whatever the suggestion carried.
"""

import logging
from collections.abc import Iterable, Sequence

from .item_normalizer import checklist_key
from .models import ChecklistItem, SuggestedItem

logger = logging.getLogger(__name__)


def update_from_suggestion(existing: ChecklistItem, suggestion: SuggestedItem) -> ChecklistItem:
    """Copy an existing line with the suggested quantity."""
    return existing.model_copy(update={"quantity_needed": suggestion.quantity_needed})


def new_checklist_item(suggestion: SuggestedItem | ChecklistItem) -> ChecklistItem:
    """Build a fresh, unpacked checklist line from a suggestion."""
    return ChecklistItem(
        name=suggestion.name,
        category=suggestion.category,
        quantity_needed=suggestion.quantity_needed,
        quantity_packed=0,
        is_packed=False,
        notes=suggestion.notes,
    )


def merge_suggestions(
    checklist: Sequence[ChecklistItem],
    suggestions: Iterable[SuggestedItem],
) -> list[ChecklistItem]:
    """Upsert suggestions into a checklist.

    Lines are matched on (lower-cased name, category). Existing lines keep
    their order; new lines are appended in suggestion order. The inputs are
    not modified and merging the same suggestions again changes nothing.

    Args:
        checklist: Current checklist of an event
        suggestions: Suggested lines

    Returns:
        The merged checklist as new objects
    """
    merged = [item.model_copy() for item in checklist]
    positions: dict[tuple, int] = {}
    for i, item in enumerate(merged):
        positions.setdefault(checklist_key(item), i)

    updated = added = 0
    for suggestion in suggestions:
        key = checklist_key(suggestion)
        pos = positions.get(key)
        if pos is None:
            positions[key] = len(merged)
            merged.append(new_checklist_item(suggestion))
            added += 1
        else:
            merged[pos] = update_from_suggestion(merged[pos], suggestion)
            updated += 1

    logger.debug("Merged suggestions: %d updated, %d added", updated, added)
    return merged
