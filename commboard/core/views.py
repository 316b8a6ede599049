"""
CommBoard Derived Views

Pure functions over collection snapshots: date partitioning, search
filtering, activity ranking and tallies. Inputs are never mutated.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

from ..db.models import (
    ActivityItem,
    Announcement,
    Category,
    Contact,
    Event,
    Posting,
    Priority,
)

ALL_CATEGORIES = "all"

RECENT_PER_COLLECTION = 3
RECENT_ACTIVITY_LIMIT = 10


@dataclass
class BoardStats:
    """Admin dashboard tallies."""
    announcements: int = 0
    events: int = 0
    postings: int = 0
    contacts: int = 0
    high_priority_announcements: int = 0
    upcoming_events: int = 0
    sell_postings: int = 0
    emergency_contacts: int = 0

    @property
    def community_posts(self) -> int:
        return self.announcements + self.events + self.postings


def partition_events(events: Iterable[Event], today: date) -> tuple[list[Event], list[Event]]:
    """
    Split events into (upcoming, past).

    An event dated today counts as upcoming. Both lists are sorted by
    date ascending; sorted() is stable, so same-day events keep their
    original order.
    """
    ordered = sorted(events, key=lambda e: e.date)
    upcoming = [e for e in ordered if e.date >= today]
    past = [e for e in ordered if e.date < today]
    return upcoming, past


def filter_postings(
    postings: Iterable[Posting],
    search: str = "",
    category: str = ALL_CATEGORIES
) -> list[Posting]:
    """
    Keep postings matching the search term and category.

    The search is a case-insensitive substring test on title and
    description. Category "all" matches every posting.
    """
    term = search.lower()
    result = []
    for posting in postings:
        matches_search = term in posting.title.lower() or term in posting.description.lower()
        matches_category = category == ALL_CATEGORIES or posting.category.value == category
        if matches_search and matches_category:
            result.append(posting)
    return result


def sort_by_created(records: Iterable, newest_first: bool = True) -> list:
    """Sort records on created_at."""
    return sorted(records, key=lambda r: r.created_at, reverse=newest_first)


def recent_activity(
    announcements: Sequence[Announcement],
    events: Sequence[Event],
    postings: Sequence[Posting],
    per_collection: int = RECENT_PER_COLLECTION,
    limit: int = RECENT_ACTIVITY_LIMIT
) -> list[ActivityItem]:
    """
    Merge the newest items of each collection into one feed.

    Takes up to ``per_collection`` newest records from each collection,
    orders the union newest first and truncates to ``limit``.
    """
    items = []
    for kind, records in (
        ("announcement", announcements),
        ("event", events),
        ("posting", postings),
    ):
        for record in sort_by_created(records)[:per_collection]:
            items.append(ActivityItem(type=kind, title=record.title, created_at=record.created_at))

    return sort_by_created(items)[:limit]


def count_by_priority(announcements: Iterable[Announcement]) -> dict[str, int]:
    """Tally announcements per priority. Every priority is present."""
    counts = {p.value: 0 for p in Priority}
    for announcement in announcements:
        counts[announcement.priority.value] += 1
    return counts


def count_upcoming_events(events: Iterable[Event], today: date) -> int:
    return sum(1 for e in events if e.date >= today)


def count_by_category(postings: Iterable[Posting]) -> dict[str, int]:
    """Tally postings per category, plus the "all" total."""
    counts = {ALL_CATEGORIES: 0}
    counts.update({c.value: 0 for c in Category})
    for posting in postings:
        counts[ALL_CATEGORIES] += 1
        counts[posting.category.value] += 1
    return counts


def count_matching(records: Iterable, field_name: str, value: str) -> int:
    """Count records whose text field equals value, ignoring case."""
    target = value.lower()
    total = 0
    for record in records:
        field_value = getattr(record, field_name)
        if field_value is not None and str(field_value).lower() == target:
            total += 1
    return total


def compute_stats(
    announcements: Sequence[Announcement],
    events: Sequence[Event],
    postings: Sequence[Posting],
    contacts: Sequence[Contact],
    today: date
) -> BoardStats:
    """Build the admin dashboard tallies."""
    return BoardStats(
        announcements=len(announcements),
        events=len(events),
        postings=len(postings),
        contacts=len(contacts),
        high_priority_announcements=count_by_priority(announcements)[Priority.HIGH.value],
        upcoming_events=count_upcoming_events(events, today),
        sell_postings=count_by_category(postings)[Category.SELL.value],
        emergency_contacts=count_matching(contacts, "department", "emergency"),
    )
