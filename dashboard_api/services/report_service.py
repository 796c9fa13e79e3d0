"""Report aggregation utilities.

This module keeps report calculations out of the routes.

Design goals:
- Pure functions over the immutable dataset (no Flask imports here).
- Stable traversal order: company -> team -> member -> activity.
- Return simple dicts/lists ready for JSON.

NOTE: Date parameters are validated by the routes before they reach this
module. Malformed *activity* dates are simply excluded by the range filter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from dashboard_api.models import Activity, Dataset
from dashboard_api.utils.validation import is_date_in_range

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
#  Date range handling
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DateRange:
    """Optional inclusive bounds as YYYY-MM-DD strings."""

    start: Optional[str] = None
    end: Optional[str] = None

    @property
    def is_set(self) -> bool:
        return bool(self.start or self.end)

    def contains(self, activity_date: str) -> bool:
        return is_date_in_range(activity_date, self.start, self.end)

    def as_dict(self) -> Dict[str, str]:
        """Only the bounds that were supplied, keyed the way the API echoes them."""
        out: Dict[str, str] = {}
        if self.start:
            out["startDate"] = self.start
        if self.end:
            out["endDate"] = self.end
        return out


# -----------------------------------------------------------------------------
#  Flattening
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FlatActivity:
    date: str
    type: str
    hours: float
    tags: Tuple[str, ...]
    member_id: str
    member_name: str
    team_id: str
    team_name: str
    company_id: str
    company_name: str


@dataclass(frozen=True)
class FlatMember:
    member_id: str
    name: str
    activities: Tuple[Activity, ...]
    team_id: str
    team_name: str
    company_id: str
    company_name: str


def filter_activities(activities: Iterable[Any], date_range: Optional[DateRange] = None) -> List[Any]:
    """Keep activities whose `date` falls inside the range (all of them if no range)."""
    if date_range is None or not date_range.is_set:
        # Still drop unparseable dates so filtering stays idempotent.
        return [a for a in activities if is_date_in_range(a.date)]
    return [a for a in activities if date_range.contains(a.date)]


def flatten_activities(dataset: Dataset, date_range: Optional[DateRange] = None) -> List[FlatActivity]:
    """Every activity in range, enriched with its member/team/company context."""
    rows: List[FlatActivity] = []
    for company in dataset:
        for team in company.teams:
            for member in team.members:
                for activity in filter_activities(member.activities, date_range):
                    rows.append(
                        FlatActivity(
                            date=activity.date,
                            type=activity.type,
                            hours=activity.hours,
                            tags=activity.tags,
                            member_id=member.member_id,
                            member_name=member.name,
                            team_id=team.team_id,
                            team_name=team.name,
                            company_id=company.company_id,
                            company_name=company.name,
                        )
                    )
    return rows


def flatten_members(dataset: Dataset) -> List[FlatMember]:
    rows: List[FlatMember] = []
    for company in dataset:
        for team in company.teams:
            for member in team.members:
                rows.append(
                    FlatMember(
                        member_id=member.member_id,
                        name=member.name,
                        activities=member.activities,
                        team_id=team.team_id,
                        team_name=team.name,
                        company_id=company.company_id,
                        company_name=company.name,
                    )
                )
    return rows


def find_member_by_id(dataset: Dataset, member_id: str) -> Optional[FlatMember]:
    for member in flatten_members(dataset):
        if member.member_id == member_id:
            return member
    return None


# -----------------------------------------------------------------------------
#  Aggregation
# -----------------------------------------------------------------------------

def total_hours(activities: Iterable[Any]) -> float:
    return sum(a.hours for a in activities)


def get_activity_type_totals(activities: Iterable[FlatActivity]) -> List[Dict[str, Any]]:
    """Group by activity type: summed hours and distinct contributing members.

    Sorted by total hours, highest first. Ties keep first-encounter order.
    """
    groups: Dict[str, Dict[str, Any]] = {}
    for activity in activities:
        group = groups.get(activity.type)
        if group is None:
            group = {"type": activity.type, "totalHours": 0, "member_ids": set()}
            groups[activity.type] = group
        group["totalHours"] += activity.hours
        group["member_ids"].add(activity.member_id)

    totals = [
        {"type": g["type"], "totalHours": g["totalHours"], "members": len(g["member_ids"])}
        for g in groups.values()
    ]
    # sorted() is stable, so equal totals stay in encounter order
    return sorted(totals, key=lambda row: row["totalHours"], reverse=True)


def get_daily_breakdown(activities: Iterable[Any]) -> List[Dict[str, Any]]:
    """Group by date: activity types logged that day (duplicates kept) and summed hours."""
    days: Dict[str, Dict[str, Any]] = {}
    for activity in activities:
        day = days.get(activity.date)
        if day is None:
            day = {"date": activity.date, "activities": [], "hours": 0}
            days[activity.date] = day
        day["activities"].append(activity.type)
        day["hours"] += activity.hours

    # YYYY-MM-DD sorts lexicographically in chronological order
    return sorted(days.values(), key=lambda row: row["date"])


# -----------------------------------------------------------------------------
#  Reports
# -----------------------------------------------------------------------------

def build_overview_report(dataset: Dataset, date_range: Optional[DateRange] = None) -> Dict[str, Any]:
    date_range = date_range or DateRange()
    activities = flatten_activities(dataset, date_range)

    report: Dict[str, Any] = {
        "totalCompanies": len(dataset),
        "totalTeams": sum(len(company.teams) for company in dataset),
        "totalMembers": len(flatten_members(dataset)),
        "totalActivities": len(activities),
        "totalHours": total_hours(activities),
        "topActivityTypes": get_activity_type_totals(activities),
    }
    if date_range.is_set:
        report["dateFilter"] = date_range.as_dict()

    logger.debug(
        "Overview report: %s activities, %s hours (filter=%s)",
        report["totalActivities"],
        report["totalHours"],
        date_range.as_dict() or None,
    )
    return report


def build_member_report(member: FlatMember, date_range: Optional[DateRange] = None) -> Dict[str, Any]:
    date_range = date_range or DateRange()
    activities: Sequence[Activity] = filter_activities(member.activities, date_range)

    report: Dict[str, Any] = {
        "memberId": member.member_id,
        "name": member.name,
    }

    if not activities:
        suffix = " in the specified date range" if date_range.is_set else ""
        report["totalHours"] = 0
        report["dailyBreakdown"] = []
        report["message"] = f"No activities found for this member{suffix}"
    else:
        report["totalHours"] = total_hours(activities)
        report["dailyBreakdown"] = get_daily_breakdown(activities)

    if date_range.is_set:
        report["dateFilter"] = date_range.as_dict()
    return report
