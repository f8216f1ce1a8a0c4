"""
Report kinds offered to the caller.

Each kind names the API resource it reads, the chart it is drawn as, and the
table header used by both the terminal table and the exported document.
"""
from __future__ import annotations

import enum
from typing import List, Tuple

from report_engine.domain.models import ChartKind


class ReportKind(str, enum.Enum):
    USERS = "users"
    ANNOUNCEMENTS = "announcements"

    @property
    def resource(self) -> str:
        """API resource name (`GET /<resource>`)."""
        return self.value

    @property
    def display_name(self) -> str:
        return _TITLES[self]

    @property
    def chart_kind(self) -> ChartKind:
        return ChartKind.LINE if self is ReportKind.USERS else ChartKind.BAR

    @property
    def table_header(self) -> List[str]:
        return list(_HEADERS[self])


_TITLES = {
    ReportKind.USERS: "User Registration Trends",
    ReportKind.ANNOUNCEMENTS: "Announcement Activity",
}

_HEADERS: dict[ReportKind, Tuple[str, ...]] = {
    ReportKind.USERS: ("Name", "Role", "Registered At"),
    ReportKind.ANNOUNCEMENTS: ("Message", "Sender", "Sent At"),
}


__all__ = ["ReportKind"]
