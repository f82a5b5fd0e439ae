"""Dashboard views computed from the current data snapshot."""

from datetime import date

from .calendar_window import schedule_by_day, window_days
from .config import DashboardConfig, DefaultsConfig
from .data_store import DataStore
from .logistics import build_logistics_report
from .models import DaySchedule, LogisticsReportEntry, ShareBreakdown
from .share_calculator import compute_shares


class Dashboard:
    """Runs the reconciliation engine over whatever the data store holds now.

    Nothing is cached: every call reads a fresh snapshot.
    """

    def __init__(
        self,
        data_store: DataStore | None = None,
        config: DashboardConfig | None = None,
        defaults: DefaultsConfig | None = None,
    ):
        self.data_store = data_store or DataStore()
        self.config = config or DashboardConfig()
        self.defaults = defaults or DefaultsConfig()

    def weekly_schedule(self, today: date | None = None) -> list[DaySchedule]:
        """Events grouped by day over the configured window."""
        days = window_days(today, self.config.window_days)
        return schedule_by_day(self.data_store.load_events(), days)

    def logistics_report(self, today: date | None = None) -> list[LogisticsReportEntry]:
        """Top demanded items of upcoming events against stock."""
        return build_logistics_report(
            self.data_store.load_events(),
            self.data_store.load_inventory(),
            today=today,
            days=self.config.window_days,
            limit=self.config.report_limit,
            default_unit=self.defaults.unit,
        )

    def inventory_shares(self, category: str | None = None) -> ShareBreakdown:
        """Share of each item within one inventory category."""
        category = category or self.config.share_category
        subset = [
            i for i in self.data_store.load_inventory() if i.category.lower() == category.lower()
        ]
        return compute_shares(subset, self.config.palette)
