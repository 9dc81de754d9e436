"""
Conference commands for Telemost CLI.

Commands:
- create: Create a conference
- get: Show conference info
- update: Change conference settings
- delete: Cancel a conference
"""

import sys
from typing import Optional, Tuple

import click

from ..api import TelemostClient
from ..exceptions import TelemostError
from ..models import ACCESS_LEVELS, ROOM_LEVELS, Conference, LiveStream
from ..utils import (
    OutputFormat,
    confirm_action,
    format_conference_detail,
    print_error,
    print_info,
    print_success,
    setup_logging,
)
from . import common_options, pass_context, require_config, TelemostContext


def conference_options(f):
    """Options describing conference settings."""
    f = click.option(
        '--cohost', '-c', 'cohosts',
        multiple=True,
        help='Co-host email (can be repeated)'
    )(f)
    f = click.option('--stream-description', help='Live stream description')(f)
    f = click.option('--stream-title', help='Live stream title')(f)
    f = click.option(
        '--stream-access-level',
        type=click.Choice(ACCESS_LEVELS),
        help='Who can watch the live stream'
    )(f)
    f = click.option(
        '--waiting-room-level', '-w',
        type=click.Choice(ROOM_LEVELS),
        help='Who goes through the waiting room'
    )(f)
    return f


def build_conference(
    waiting_room_level: Optional[str],
    stream_access_level: Optional[str],
    stream_title: Optional[str],
    stream_description: Optional[str],
    cohosts: Tuple[str, ...],
) -> Conference:
    """Build conference settings from command line options."""
    conf = Conference(waiting_room_level=waiting_room_level or "")

    if stream_access_level or stream_title or stream_description:
        conf.live_stream = LiveStream(
            access_level=stream_access_level or "",
            title=stream_title or "",
            description=stream_description or "",
        )

    return conf.with_cohosts(*cohosts)


def register_conference_commands(cli: click.Group) -> None:
    """Register conference commands with the CLI."""

    @cli.command('create')
    @common_options
    @conference_options
    @pass_context
    @require_config
    def create_conference(
        ctx: TelemostContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        waiting_room_level: Optional[str],
        stream_access_level: Optional[str],
        stream_title: Optional[str],
        stream_description: Optional[str],
        cohosts: Tuple[str, ...],
    ):
        """
        Create a new conference.

        \b
        Examples:
          telemost create
          telemost create -w ORGANIZATION -c user@yandex.ru
          telemost create --stream-access-level PUBLIC --stream-title "Town hall"
        """
        setup_logging(verbose, quiet)
        fmt = OutputFormat(output_format)

        conf = build_conference(
            waiting_room_level, stream_access_level, stream_title, stream_description, cohosts
        )

        try:
            with TelemostClient(config=ctx.config_manager.get()) as client:
                info = client.create(conf)
        except TelemostError as e:
            print_error(str(e))
            sys.exit(1)

        if fmt == OutputFormat.TABLE and not quiet:
            print_success(f"Conference created: {info.id}")
        format_conference_detail(info, fmt)

    @cli.command('get')
    @common_options
    @click.argument('conference_id')
    @click.option('--cohosts', 'show_cohosts', is_flag=True, help='Show conference co-hosts')
    @pass_context
    @require_config
    def get_conference(
        ctx: TelemostContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        conference_id: str,
        show_cohosts: bool
    ):
        """
        Show conference info.

        \b
        Examples:
          telemost get 12345678901234
          telemost get 12345678901234 --cohosts
          telemost get 12345678901234 --format json
        """
        setup_logging(verbose, quiet)
        fmt = OutputFormat(output_format)

        try:
            with TelemostClient(config=ctx.config_manager.get()) as client:
                info = client.get(conference_id)

                if show_cohosts:
                    info.cohosts = client.get_cohosts(conference_id)

        except TelemostError as e:
            print_error(str(e))
            sys.exit(1)

        format_conference_detail(info, fmt)

    @cli.command('update')
    @common_options
    @click.argument('conference_id')
    @conference_options
    @pass_context
    @require_config
    def update_conference(
        ctx: TelemostContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        conference_id: str,
        waiting_room_level: Optional[str],
        stream_access_level: Optional[str],
        stream_title: Optional[str],
        stream_description: Optional[str],
        cohosts: Tuple[str, ...],
    ):
        """
        Update conference settings.

        Only given settings are changed.

        \b
        Examples:
          telemost update 12345678901234 -w PUBLIC
          telemost update 12345678901234 --stream-title "New title"
        """
        setup_logging(verbose, quiet)
        fmt = OutputFormat(output_format)

        conf = build_conference(
            waiting_room_level, stream_access_level, stream_title, stream_description, cohosts
        )

        try:
            with TelemostClient(config=ctx.config_manager.get()) as client:
                info = client.update(conference_id, conf)
        except TelemostError as e:
            print_error(str(e))
            sys.exit(1)

        if fmt == OutputFormat.TABLE and not quiet:
            print_success(f"Conference updated: {conference_id}")
        format_conference_detail(info, fmt)

    @cli.command('delete')
    @common_options
    @click.argument('conference_id')
    @click.option('--yes', '-y', is_flag=True, help='Skip confirmation')
    @pass_context
    @require_config
    def delete_conference(
        ctx: TelemostContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        conference_id: str,
        yes: bool
    ):
        """
        Cancel a conference.

        \b
        Examples:
          telemost delete 12345678901234
          telemost delete 12345678901234 --yes
        """
        setup_logging(verbose, quiet)

        if not yes:
            if not confirm_action(f"Delete conference {conference_id}?"):
                print_info("Cancelled.")
                return

        try:
            with TelemostClient(config=ctx.config_manager.get()) as client:
                client.delete(conference_id)
        except TelemostError as e:
            print_error(str(e))
            sys.exit(1)

        print_success(f"Conference deleted: {conference_id}")
