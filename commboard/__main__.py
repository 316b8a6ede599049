"""
CommBoard Entry Point

Usage:
    python -m commboard login EMAIL        # Start a session
    python -m commboard market list        # Browse the marketplace
    python -m commboard config --show      # Show current config
    python -m commboard --help             # Show help
"""

import argparse
import sys
import logging
from pathlib import Path

from . import __version__


def setup_logging(level: str, log_file: str | None = None):
    """Configure logging for the application."""
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    handlers = [logging.StreamHandler()]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=log_format,
        handlers=handlers
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commboard",
        description="CommBoard - Community bulletin board"
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"CommBoard {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=Path("config.toml"),
        help="Path to configuration file (default: config.toml)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: from config)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Session
    login_parser = subparsers.add_parser("login", help="Log in")
    login_parser.add_argument("email")
    login_parser.add_argument("--password", help="Password (prompted if omitted)")
    subparsers.add_parser("logout", help="Log out")
    subparsers.add_parser("whoami", help="Show the current session")

    # Announcements
    ann_parser = subparsers.add_parser("announcements", help="Community announcements")
    ann_parser.add_argument("action", nargs="?", choices=["list", "post"], default="list")
    ann_parser.add_argument("--title")
    ann_parser.add_argument("--content")
    ann_parser.add_argument("--priority", choices=["high", "medium", "low"])

    # Events
    ev_parser = subparsers.add_parser("events", help="Community events")
    ev_parser.add_argument("action", nargs="?", choices=["list", "add"], default="list")
    ev_parser.add_argument("--title")
    ev_parser.add_argument("--description")
    ev_parser.add_argument("--date", help="YYYY-MM-DD")
    ev_parser.add_argument("--time", help="HH:MM")
    ev_parser.add_argument("--location")
    window = ev_parser.add_mutually_exclusive_group()
    window.add_argument("--upcoming", action="store_true", help="Only upcoming events")
    window.add_argument("--past", action="store_true", help="Only past events")

    # Marketplace
    mk_parser = subparsers.add_parser("market", help="Community marketplace")
    mk_parser.add_argument("action", nargs="?", choices=["list", "post"], default="list")
    mk_parser.add_argument("--search", default="", help="Text to search for")
    mk_parser.add_argument(
        "--category",
        choices=["all", "buy", "sell", "rent"],
        default="all",
    )
    mk_parser.add_argument("--title")
    mk_parser.add_argument("--description")
    mk_parser.add_argument("--contact")
    mk_parser.add_argument("--price")

    # Contacts
    ct_parser = subparsers.add_parser("contacts", help="Important contacts")
    ct_parser.add_argument("action", nargs="?", choices=["list", "add"], default="list")
    ct_parser.add_argument("--name")
    ct_parser.add_argument("--role")
    ct_parser.add_argument("--phone")
    ct_parser.add_argument("--department")
    ct_parser.add_argument("--email")
    ct_parser.add_argument("--availability")

    # Admin
    adm_parser = subparsers.add_parser("admin", help="Admin dashboard")
    adm_parser.add_argument(
        "action", nargs="?", choices=["stats", "activity", "clear"], default="stats"
    )
    adm_parser.add_argument("--yes", action="store_true", help="Skip clear confirmation")
    adm_parser.add_argument(
        "--include-session", action="store_true", help="Also end the current session on clear"
    )

    # Config
    config_parser = subparsers.add_parser("config", help="Configuration")
    config_group = config_parser.add_mutually_exclusive_group()
    config_group.add_argument("--show", action="store_true", help="Show current config")
    config_group.add_argument("--validate", action="store_true", help="Validate config")
    config_group.add_argument("--init", action="store_true", help="Write a default config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CommBoard."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "config":
        setup_logging(args.log_level or "INFO")
        from .cli.commands import run_config
        return run_config(args)

    from .config import load_config
    from .core.board import CommunityBoard
    from .cli.commands import COMMANDS

    config = load_config(args.config)
    setup_logging(args.log_level or config.logging.level, config.logging.file or None)
    logger = logging.getLogger("commboard")

    errors = config.validate()
    if errors:
        for err in errors:
            logger.error(f"Config: {err}")
        return 1

    try:
        with CommunityBoard(config) as board:
            return COMMANDS[args.command](args, board)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
