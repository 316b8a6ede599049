"""
CommBoard Command Handlers

Each handler takes the parsed arguments and an open CommunityBoard,
prints its output and returns an exit code.
"""

import getpass
import logging
from pathlib import Path

from ..core.board import CommunityBoard
from ..utils.formatting import (
    format_event_date,
    format_event_time,
    format_timestamp,
    pad_right,
    truncate,
)

logger = logging.getLogger(__name__)


def confirm(message: str) -> bool:
    """Get yes/no confirmation."""
    result = input(f"{message} [y/N]: ").strip().lower()
    return result in ('y', 'yes')


def _fail(error: str) -> int:
    print(f"Error: {error}")
    return 1


# === Session ===

def cmd_login(args, board: CommunityBoard) -> int:
    password = args.password if args.password is not None else getpass.getpass("Password: ")
    identity, error = board.session.login(args.email, password)
    if not identity:
        return _fail(error)
    print(f"Logged in as {identity.name} ({identity.role.value})")
    return 0


def cmd_logout(args, board: CommunityBoard) -> int:
    board.session.logout()
    print("Logged out.")
    return 0


def cmd_whoami(args, board: CommunityBoard) -> int:
    identity = board.session.current
    if not identity:
        print("Not logged in.")
        return 1
    print(f"{identity.name} <{identity.email}> ({identity.role.value})")
    return 0


# === Announcements ===

def cmd_announcements(args, board: CommunityBoard) -> int:
    service = board.announcements

    if args.action == "post":
        announcement, error = service.create(args.title, args.content, args.priority or "medium")
        if not announcement:
            return _fail(error)
        print(f"Posted announcement {announcement.id}")
        return 0

    announcements = service.list_announcements()
    if args.priority:
        announcements = [a for a in announcements if a.priority.value == args.priority]

    if not announcements:
        print("No announcements yet.")
        return 0

    for a in announcements:
        print(f"[{a.priority.value.upper():6}] {a.title}")
        print(f"         by {a.author} on {format_timestamp(a.created_at)}")
        print(f"         {truncate(a.content, 72)}")
    return 0


# === Events ===

def _print_event(event):
    print(f"  {event.title}")
    print(
        f"    {format_event_date(event.date)} {format_event_time(event.time)} "
        f"@ {event.location} ({event.organizer})"
    )


def cmd_events(args, board: CommunityBoard) -> int:
    service = board.events

    if args.action == "add":
        event, error = service.create(
            args.title, args.description, args.date, args.time, args.location
        )
        if not event:
            return _fail(error)
        print(f"Added event {event.id}")
        return 0

    upcoming, past = service.partition()
    if not upcoming and not past:
        print("No events scheduled.")
        return 0

    if upcoming and not args.past:
        print("Upcoming Events")
        for event in upcoming:
            _print_event(event)

    if past and not args.upcoming:
        print("Past Events")
        for event in past:
            _print_event(event)
    return 0


# === Marketplace ===

def cmd_market(args, board: CommunityBoard) -> int:
    service = board.marketplace

    if args.action == "post":
        posting, error = service.create(
            args.title, args.description, args.category, args.contact, args.price
        )
        if not posting:
            return _fail(error)
        print(f"Published posting {posting.id}")
        return 0

    counts = service.category_counts()
    print(
        f"All ({counts['all']})  For Sale ({counts['sell']})  "
        f"Wanted ({counts['buy']})  For Rent ({counts['rent']})"
    )

    postings = service.search(args.search, args.category)
    if not postings:
        if args.search or args.category != "all":
            print("No postings found. Try adjusting your search or filter criteria.")
        else:
            print("No postings yet.")
        return 0

    for p in postings:
        price = f" - {p.price}" if p.price else ""
        print(f"[{p.category.value.upper():4}] {p.title}{price}")
        print(f"       {p.author}, {format_timestamp(p.created_at)}; contact: {p.contact}")
    return 0


# === Contacts ===

def cmd_contacts(args, board: CommunityBoard) -> int:
    service = board.contacts

    if args.action == "add":
        contact, error = service.create(
            args.name, args.role, args.phone, args.department,
            email=args.email, availability=args.availability
        )
        if not contact:
            return _fail(error)
        print(f"Added contact {contact.id}")
        return 0

    contacts = service.by_department(args.department) if args.department else service.list_contacts()
    if not contacts:
        print("No contacts listed.")
        return 0

    for c in contacts:
        extra = ", ".join(x for x in (c.email, c.availability) if x)
        print(f"{pad_right(c.name, 24)} {pad_right(c.role, 18)} {c.phone}  [{c.department}]")
        if extra:
            print(f"  {extra}")
    return 0


# === Admin ===

def cmd_admin(args, board: CommunityBoard) -> int:
    service = board.admin

    if args.action == "clear":
        ask = (lambda _message: True) if args.yes else confirm
        result, error = service.clear_all_data(ask, include_session=args.include_session)
        if result is None:
            return _fail(error)
        if not result.ok:
            for key, reason in result.failed.items():
                print(f"Failed to clear {key}: {reason}")
            return 1
        print(f"Cleared: {', '.join(result.cleared)}")
        return 0

    if args.action == "activity":
        items, error = service.recent_activity()
        if items is None:
            return _fail(error)
        if not items:
            print("No recent activity.")
        for item in items:
            print(f"{pad_right(item.type.capitalize(), 13)} {pad_right(item.title, 40)} "
                  f"{format_timestamp(item.created_at)}")
        return 0

    stats, error = service.stats()
    if stats is None:
        return _fail(error)
    print(f"Announcements:  {stats.announcements} ({stats.high_priority_announcements} high priority)")
    print(f"Events:         {stats.events} ({stats.upcoming_events} upcoming)")
    print(f"Marketplace:    {stats.postings} ({stats.sell_postings} for sale)")
    print(f"Contacts:       {stats.contacts} ({stats.emergency_contacts} emergency)")
    print(f"Community posts: {stats.community_posts}")
    return 0


# === Config ===

def run_config(args) -> int:
    """Show, validate or create the configuration file."""
    from ..config import load_config, create_default_config

    config_path: Path = args.config

    if args.init:
        if config_path.exists():
            return _fail(f"{config_path} already exists.")
        create_default_config(config_path)
        print(f"Wrote default configuration to {config_path}")
        return 0

    config = load_config(config_path)

    if args.validate:
        errors = config.validate()
        if errors:
            print("Configuration errors:")
            for err in errors:
                print(f"  - {err}")
            return 1
        print("Configuration is valid.")
        return 0

    import toml
    print(toml.dumps(config._to_dict()))
    return 0


COMMANDS = {
    "login": cmd_login,
    "logout": cmd_logout,
    "whoami": cmd_whoami,
    "announcements": cmd_announcements,
    "events": cmd_events,
    "market": cmd_market,
    "contacts": cmd_contacts,
    "admin": cmd_admin,
}
