"""
CommBoard Data Models

Dataclasses representing stored records, with conversion to and from the
JSON shapes kept in the key/value store.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Any, Optional


class Role(Enum):
    """Identity role enumeration."""
    ADMIN = "admin"
    USER = "user"


class Priority(Enum):
    """Announcement priority enumeration."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Category(Enum):
    """Marketplace posting category enumeration."""
    BUY = "buy"
    SELL = "sell"
    RENT = "rent"


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, treating naive values as UTC."""
    # fromisoformat() only accepts the trailing Z from 3.11 on
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def isoformat_utc(value: datetime) -> str:
    """Format a timestamp as ISO-8601 in UTC with a Z suffix."""
    utc = value.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def parse_date(value: str) -> date:
    """Parse a YYYY-MM-DD calendar date."""
    return date.fromisoformat(value)


def parse_time(value: str) -> time:
    """Parse an HH:MM (or HH:MM:SS) clock time."""
    return time.fromisoformat(value)


def format_clock_time(value: time) -> str:
    """Format a clock time as HH:MM, keeping seconds only when present."""
    if value.second or value.microsecond:
        return value.isoformat()
    return value.strftime("%H:%M")


def _text(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be text, got {type(value).__name__}")
    return value


def _optional_text(data: dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"'{key}' must be text, got {type(value).__name__}")
    return value


def _text_list(data: dict[str, Any], key: str) -> list[str]:
    values = data.get(key) or []
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ValueError(f"'{key}' must be a list of text")
    return list(values)


@dataclass(frozen=True)
class Identity:
    """Authenticated community member."""
    id: str
    name: str
    email: str
    role: Role = Role.USER
    is_authenticated: bool = True

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "isAuthenticated": self.is_authenticated,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Identity":
        authenticated = data.get("isAuthenticated", True)
        if not isinstance(authenticated, bool):
            raise ValueError("'isAuthenticated' must be true or false")
        return cls(
            id=_text(data, "id"),
            name=_text(data, "name"),
            email=_text(data, "email"),
            role=Role(data["role"]),
            is_authenticated=authenticated,
        )


@dataclass
class Announcement:
    """Community announcement."""
    id: str
    title: str
    content: str
    author: str
    created_at: datetime
    priority: Priority = Priority.MEDIUM

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "author": self.author,
            "createdAt": isoformat_utc(self.created_at),
            "priority": self.priority.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Announcement":
        return cls(
            id=_text(data, "id"),
            title=_text(data, "title"),
            content=_text(data, "content"),
            author=_text(data, "author"),
            created_at=parse_timestamp(data["createdAt"]),
            priority=Priority(data["priority"]),
        )


@dataclass
class Event:
    """Community event."""
    id: str
    title: str
    description: str
    date: date
    time: time
    location: str
    organizer: str
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "date": self.date.isoformat(),
            "time": format_clock_time(self.time),
            "location": self.location,
            "organizer": self.organizer,
            "createdAt": isoformat_utc(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Event":
        return cls(
            id=_text(data, "id"),
            title=_text(data, "title"),
            description=_text(data, "description"),
            date=parse_date(data["date"]),
            time=parse_time(data["time"]),
            location=_text(data, "location"),
            organizer=_text(data, "organizer"),
            created_at=parse_timestamp(data["createdAt"]),
        )


@dataclass
class Posting:
    """Marketplace posting."""
    id: str
    title: str
    description: str
    category: Category
    contact: str
    author: str
    created_at: datetime
    price: Optional[str] = None  # Free-form text, e.g. "Rs.12000/month"
    images: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category.value,
            "contact": self.contact,
            "author": self.author,
            "createdAt": isoformat_utc(self.created_at),
        }
        if self.price is not None:
            data["price"] = self.price
        if self.images:
            data["images"] = list(self.images)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Posting":
        return cls(
            id=_text(data, "id"),
            title=_text(data, "title"),
            description=_text(data, "description"),
            category=Category(data["category"]),
            contact=_text(data, "contact"),
            author=_text(data, "author"),
            created_at=parse_timestamp(data["createdAt"]),
            price=_optional_text(data, "price"),
            images=_text_list(data, "images"),
        )


@dataclass
class Contact:
    """Important community contact."""
    id: str
    name: str
    role: str
    phone: str
    department: str
    email: Optional[str] = None
    availability: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data = {
            "id": self.id,
            "name": self.name,
            "role": self.role,
            "phone": self.phone,
            "department": self.department,
        }
        if self.email is not None:
            data["email"] = self.email
        if self.availability is not None:
            data["availability"] = self.availability
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contact":
        return cls(
            id=_text(data, "id"),
            name=_text(data, "name"),
            role=_text(data, "role"),
            phone=_text(data, "phone"),
            department=_text(data, "department"),
            email=_optional_text(data, "email"),
            availability=_optional_text(data, "availability"),
        )


@dataclass
class ActivityItem:
    """Entry in the admin recent-activity feed."""
    type: str  # announcement | event | posting
    title: str
    created_at: datetime


@dataclass
class ClearResult:
    """Outcome of clearing several keys independently."""
    cleared: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)  # key -> error

    @property
    def ok(self) -> bool:
        return not self.failed
