"""
Utility functions for Telemost CLI.
"""

import json
import logging
import sys
from enum import Enum
from typing import Any, List, Optional, Sequence

import click

from .models import ConferenceInfo, Hosts


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for CLI commands.

    Args:
        verbose: Show debug messages (including HTTP requests)
        quiet: Show errors only
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(level)

    logging.getLogger("urllib3").setLevel(logging.DEBUG if verbose else logging.WARNING)


def print_success(message: str) -> None:
    click.secho(f"✓ {message}", fg="green")


def print_error(message: str, details: Optional[str] = None) -> None:
    click.secho(f"✗ {message}", fg="red", err=True)
    if details:
        click.echo(f"  {details}", err=True)


def print_warning(message: str) -> None:
    click.secho(f"! {message}", fg="yellow")


def print_info(message: str) -> None:
    click.echo(message)


def print_json(data: Any, indent: int = 2) -> None:
    click.echo(json.dumps(data, indent=indent, ensure_ascii=False))


def print_table(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    """Print rows as a plain text table."""
    cells = [[str(value) for value in row] for row in rows]
    widths = [len(h) for h in headers]

    for row in cells:
        for i, value in enumerate(row):
            widths[i] = max(widths[i], len(value))

    click.echo("  ".join(h.ljust(widths[i]) for i, h in enumerate(headers)))
    click.echo("  ".join("-" * w for w in widths))

    for row in cells:
        click.echo("  ".join(value.ljust(widths[i]) for i, value in enumerate(row)))


def confirm_action(message: str, default: bool = False) -> bool:
    return click.confirm(message, default=default)


def format_conference_detail(info: ConferenceInfo, fmt: OutputFormat) -> None:
    """Print conference info."""
    if fmt == OutputFormat.JSON:
        print_json(info.to_dict())
        return

    rows = [
        ("ID", info.id),
        ("Join URL", info.join_url),
        ("Waiting room", info.waiting_room_level or "-"),
        ("SIP URI (meeting)", info.sip_uri_meeting or "-"),
        ("SIP URI (Telemost)", info.sip_uri_telemost or "-"),
        ("SIP ID", info.sip_id or "-"),
    ]

    stream = info.live_stream
    if stream is not None:
        rows.extend([
            ("Stream URL", stream.watch_url or "-"),
            ("Stream access", stream.access_level or "-"),
            ("Stream title", stream.title or "-"),
            ("Stream description", stream.description or "-"),
        ])

    if info.cohosts:
        rows.append(("Cohosts", ", ".join(Hosts(info.cohosts).flatten())))

    click.echo()
    for name, value in rows:
        click.echo(f"  {name + ':':<20} {value}")


def format_cohosts(hosts: Hosts, fmt: OutputFormat) -> None:
    """Print co-host list."""
    if fmt == OutputFormat.JSON:
        print_json(hosts.flatten())
        return

    emails: List[str] = hosts.flatten()
    if not emails:
        print_info("No cohosts.")
        return

    print_table(["Email"], [[email] for email in emails])
