"""In-memory data model for the productivity dashboard.

The hierarchy is Company -> Team -> Member -> Activity. Every record is a
frozen dataclass holding tuples, so a dataset built at startup can be shared
by every request without copying.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple


@dataclass(frozen=True)
class Activity:
    date: str
    type: str
    hours: float
    tags: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # NaN fails every comparison, so test the positive form
        if not self.hours >= 0:
            raise ValueError(f"Activity hours must be non-negative (got {self.hours!r})")


@dataclass(frozen=True)
class Member:
    member_id: str
    name: str
    activities: Tuple[Activity, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Team:
    team_id: str
    name: str
    members: Tuple[Member, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Company:
    company_id: str
    name: str
    teams: Tuple[Team, ...] = field(default_factory=tuple)


Dataset = Tuple[Company, ...]


def _activities(rows: Iterable[tuple]) -> Tuple[Activity, ...]:
    """Build activities from (date, type, hours, tags) rows."""
    return tuple(Activity(date=d, type=t, hours=h, tags=tuple(tags)) for d, t, h, tags in rows)


def build_sample_dataset() -> Dataset:
    """Return the bundled demo dataset (two companies, three teams, five members)."""
    return (
        Company(
            company_id="comp_1",
            name="Alpha Inc",
            teams=(
                Team(
                    team_id="team_1",
                    name="Engineering",
                    members=(
                        Member(
                            member_id="mem_1",
                            name="Alice",
                            activities=_activities([
                                ("2024-03-01", "coding", 5, ["feature", "frontend"]),
                                ("2024-03-02", "meeting", 2, ["planning"]),
                                ("2024-03-03", "review", 1, ["code"]),
                            ]),
                        ),
                        Member(
                            member_id="mem_2",
                            name="Bob",
                            activities=_activities([
                                ("2024-03-01", "coding", 6, ["bugfix"]),
                                ("2024-03-03", "meeting", 3, ["sync"]),
                            ]),
                        ),
                    ),
                ),
                Team(
                    team_id="team_2",
                    name="Design",
                    members=(
                        Member(
                            member_id="mem_3",
                            name="Carol",
                            activities=_activities([
                                ("2024-03-02", "design", 4, ["ui", "figma"]),
                                ("2024-03-03", "meeting", 2, ["handoff"]),
                            ]),
                        ),
                    ),
                ),
            ),
        ),
        Company(
            company_id="comp_2",
            name="Beta LLC",
            teams=(
                Team(
                    team_id="team_3",
                    name="Marketing",
                    members=(
                        Member(
                            member_id="mem_4",
                            name="Dan",
                            activities=_activities([
                                ("2024-03-01", "content", 3, ["blog"]),
                                ("2024-03-02", "seo", 2, ["keyword"]),
                            ]),
                        ),
                        Member(
                            member_id="mem_5",
                            name="Eve",
                            activities=_activities([
                                ("2024-03-01", "content", 4, ["social"]),
                                ("2024-03-03", "meeting", 2, ["sync"]),
                            ]),
                        ),
                    ),
                ),
            ),
        ),
    )
