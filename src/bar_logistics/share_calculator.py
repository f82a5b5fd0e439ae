"""Proportional share breakdown for ring charts."""

from collections.abc import Iterable, Sequence

from .models import InventoryItem, ShareBreakdown, ShareSegment

DEFAULT_PALETTE = (
    "#64ffda",  # cyan
    "#3b82f6",  # blue 500
    "#1d4ed8",  # blue 700
    "#818cf8",  # indigo
    "#c084fc",  # purple
    "#94a3b8",  # slate
)


def share_percent(quantity: float, total: float) -> float:
    """Percentage of total, 0 when the total is 0."""
    if total == 0:
        return 0.0
    return quantity * 100 / total


def compute_shares(
    items: Iterable[InventoryItem],
    palette: Sequence[str] = DEFAULT_PALETTE,
) -> ShareBreakdown:
    """Split a subset of inventory into cumulative percentage segments.

    Items are ranked by quantity, largest first, and coloured by rank,
    cycling through the palette.

    Args:
        items: Inventory subset, e.g. one category
        palette: Ordered colours

    Returns:
        ShareBreakdown with one segment per item

    Raises:
        ValueError: If the palette is empty
    """
    if not palette:
        raise ValueError("Palette must contain at least one colour")

    ranked = sorted(items, key=lambda i: i.quantity, reverse=True)
    total = sum(i.quantity for i in ranked)

    segments = []
    cumulative = 0.0
    for rank, item in enumerate(ranked):
        percent = share_percent(item.quantity, total)
        start = cumulative
        cumulative += percent
        segments.append(
            ShareSegment(
                item_id=item.id,
                name=item.name,
                quantity=item.quantity,
                percent=percent,
                start=start,
                end=cumulative,
                color=palette[rank % len(palette)],
            )
        )

    return ShareBreakdown(total_quantity=total, segments=segments)
