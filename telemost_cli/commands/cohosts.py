"""
Co-host commands for Telemost CLI.
"""
import sys
from typing import Tuple

import click

from ..api import TelemostClient
from ..exceptions import TelemostError
from ..utils import (
    OutputFormat,
    confirm_action,
    format_cohosts,
    print_error,
    print_info,
    print_success,
    setup_logging,
)
from . import common_options, pass_context, require_config, TelemostContext


def register_cohost_commands(cli: click.Group) -> None:
    """Register co-host commands with the CLI."""

    @cli.group('cohosts')
    def cohosts():
        """Manage conference co-hosts."""
        pass

    @cohosts.command('list')
    @common_options
    @click.argument('conference_id')
    @pass_context
    @require_config
    def list_cohosts(
        ctx: TelemostContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        conference_id: str
    ):
        """List conference co-hosts."""
        setup_logging(verbose, quiet)

        try:
            with TelemostClient(config=ctx.config_manager.get()) as client:
                hosts = client.get_cohosts(conference_id)
        except TelemostError as e:
            print_error(str(e))
            sys.exit(1)

        format_cohosts(hosts, OutputFormat(output_format))

    @cohosts.command('add')
    @common_options
    @click.argument('conference_id')
    @click.argument('emails', nargs=-1, required=True)
    @pass_context
    @require_config
    def add_cohosts(
        ctx: TelemostContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        conference_id: str,
        emails: Tuple[str, ...]
    ):
        """
        Add co-hosts to a conference.

        \b
        Examples:
          telemost cohosts add 12345678901234 user1@yandex.ru user2@yandex.ru
        """
        setup_logging(verbose, quiet)

        try:
            with TelemostClient(config=ctx.config_manager.get()) as client:
                client.add_cohosts(conference_id, list(emails))
        except TelemostError as e:
            print_error(str(e))
            sys.exit(1)

        print_success(f"Added {len(emails)} cohost(s) to {conference_id}")

    @cohosts.command('set')
    @common_options
    @click.argument('conference_id')
    @click.argument('emails', nargs=-1, required=True)
    @pass_context
    @require_config
    def set_cohosts(
        ctx: TelemostContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        conference_id: str,
        emails: Tuple[str, ...]
    ):
        """
        Replace all co-hosts of a conference.

        \b
        Examples:
          telemost cohosts set 12345678901234 user1@yandex.ru
        """
        setup_logging(verbose, quiet)

        try:
            with TelemostClient(config=ctx.config_manager.get()) as client:
                client.update_cohosts(conference_id, list(emails))
        except TelemostError as e:
            print_error(str(e))
            sys.exit(1)

        print_success(f"Cohosts of {conference_id} replaced")

    @cohosts.command('remove')
    @common_options
    @click.argument('conference_id')
    @click.argument('emails', nargs=-1, required=True)
    @click.option('--yes', '-y', is_flag=True, help='Skip confirmation')
    @pass_context
    @require_config
    def remove_cohosts(
        ctx: TelemostContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        conference_id: str,
        emails: Tuple[str, ...],
        yes: bool
    ):
        """
        Remove co-hosts from a conference.

        \b
        Examples:
          telemost cohosts remove 12345678901234 user1@yandex.ru --yes
        """
        setup_logging(verbose, quiet)

        if not yes:
            if not confirm_action(f"Remove {len(emails)} cohost(s) from {conference_id}?"):
                print_info("Cancelled.")
                return

        try:
            with TelemostClient(config=ctx.config_manager.get()) as client:
                client.delete_cohosts(conference_id, list(emails))
        except TelemostError as e:
            print_error(str(e))
            sys.exit(1)

        print_success(f"Removed {len(emails)} cohost(s) from {conference_id}")
