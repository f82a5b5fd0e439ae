"""Demand aggregation and stock reconciliation for upcoming events."""

import logging
from collections.abc import Iterable, Mapping
from datetime import date

from .calendar_window import DEFAULT_WINDOW_DAYS, events_in_window, window_days
from .item_normalizer import normalize_item_name, stock_match_key
from .models import EventPlan, InventoryItem, LogisticsReportEntry, Unit

logger = logging.getLogger(__name__)

DEFAULT_REPORT_LIMIT = 5
DEFAULT_UNIT = Unit.UNIT.value


def aggregate_demand(events: Iterable[EventPlan]) -> dict[str, float]:
    """Sum quantity needed per item name across event checklists.

    Names are trimmed and otherwise used verbatim as keys. Quantities are
    added as-is, including zero and negative values.

    Args:
        events: Events whose checklists make up the demand

    Returns:
        Dict mapping item name -> total quantity needed, in first-seen order
    """
    demand: dict[str, float] = {}
    for event in events:
        for item in event.checklist:
            key = normalize_item_name(item.name)
            demand[key] = demand.get(key, 0) + item.quantity_needed
    return demand


def index_inventory(inventory: Iterable[InventoryItem]) -> dict[str, InventoryItem]:
    """Index inventory by case-insensitive name; the first duplicate wins."""
    index: dict[str, InventoryItem] = {}
    for item in inventory:
        index.setdefault(stock_match_key(item.name), item)
    return index


def reconcile_stock(
    demand: Mapping[str, float],
    inventory: Iterable[InventoryItem],
    limit: int = DEFAULT_REPORT_LIMIT,
    default_unit: str = DEFAULT_UNIT,
) -> list[LogisticsReportEntry]:
    """Join aggregated demand against inventory.

    Unmatched names get zero stock and ``default_unit``. Entries with no
    positive demand are dropped and the rest ranked by demand, largest first.

    Args:
        demand: Output of aggregate_demand
        inventory: Full inventory snapshot
        limit: Maximum number of entries returned
        default_unit: Unit reported when no inventory item matches

    Returns:
        Top ``limit`` report entries
    """
    stock_index = index_inventory(inventory)

    entries = []
    for name, needed in demand.items():
        if needed <= 0:
            continue
        match = stock_index.get(stock_match_key(name))
        if match is None:
            logger.debug("No inventory match for %r, assuming zero stock", name)
            entries.append(LogisticsReportEntry(name=name, needed=needed, unit=default_unit))
        else:
            entries.append(
                LogisticsReportEntry(
                    name=name,
                    needed=needed,
                    stock=match.quantity,
                    unit=match.unit.value,
                )
            )

    entries.sort(key=lambda e: e.needed, reverse=True)
    return entries[: max(limit, 0)]


def build_logistics_report(
    events: Iterable[EventPlan],
    inventory: Iterable[InventoryItem],
    today: date | None = None,
    days: int = DEFAULT_WINDOW_DAYS,
    limit: int = DEFAULT_REPORT_LIMIT,
    default_unit: str = DEFAULT_UNIT,
) -> list[LogisticsReportEntry]:
    """Reconcile stock against the demand of events in the coming window."""
    window = window_days(today, days)
    upcoming = events_in_window(events, window)
    demand = aggregate_demand(upcoming)
    report = reconcile_stock(demand, inventory, limit=limit, default_unit=default_unit)

    logger.debug(
        "Logistics pass: %d events in %d-day window, %d items demanded, %d deficits",
        len(upcoming),
        days,
        len(demand),
        sum(1 for entry in report if entry.is_deficit),
    )
    return report
