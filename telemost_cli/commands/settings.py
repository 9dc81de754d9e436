"""
Configuration/settings commands for Telemost CLI.

Commands:
- configure: Configure CLI settings
- config-clear: Clear all configuration
"""

import sys
from typing import Optional

import click

from ..config import DEFAULT_API_URL
from ..exceptions import TelemostError
from . import (
    TelemostContext,
    pass_context,
    print_error,
    print_success,
    print_info,
)


def _mask(token: str) -> str:
    if not token:
        return '(not configured)'
    if len(token) <= 8:
        return '*' * len(token)
    return f"{token[:4]}{'*' * 10}...{token[-4:]}"


def register_settings_commands(cli: click.Group) -> None:
    """Register configuration commands with the CLI."""

    @cli.command('configure')
    @click.option('--token', help='OAuth token for the Telemost API')
    @click.option('--api-url', help=f'API endpoint URL (default: {DEFAULT_API_URL})')
    @click.option('--timeout', '-t', type=int, help='Request timeout in seconds')
    @click.option('--no-verify-ssl', is_flag=True, help='Disable SSL certificate verification')
    @click.option('--app-name', help='Application name reported in the user agent')
    @click.option('--app-version', help='Application version reported in the user agent')
    @click.option('--show', is_flag=True, help='Show current configuration')
    @pass_context
    def configure(
        ctx: TelemostContext,
        token: Optional[str],
        api_url: Optional[str],
        timeout: Optional[int],
        no_verify_ssl: bool,
        app_name: Optional[str],
        app_version: Optional[str],
        show: bool
    ):
        """
        Configure Telemost CLI settings.

        \b
        Examples:
          telemost configure --token y0_AgAAAA...
          telemost configure --timeout 60
          telemost configure --show
        """
        config_manager = ctx.config_manager

        if show:
            config = config_manager.get()
            click.echo("\nCurrent Configuration:")
            click.echo(f"  API URL:      {config.api_url}")
            click.echo(f"  Token:        {_mask(config.token)}")
            click.echo(f"  Timeout:      {config.timeout}s")
            click.echo(f"  Verify SSL:   {config.verify_ssl}")
            click.echo(f"  User agent:   {config.app_name or '-'}/{config.app_version or '-'}")
            click.echo(f"  Config Path:  {config_manager.get_config_path()}")
            return

        updates = {}
        if token:
            updates['token'] = token
        if api_url:
            updates['api_url'] = api_url
        if timeout:
            updates['timeout'] = timeout
        if no_verify_ssl:
            updates['verify_ssl'] = False
        if app_name is not None:
            updates['app_name'] = app_name
        if app_version is not None:
            updates['app_version'] = app_version

        if not updates:
            print_info("No changes made.")
            return

        try:
            config_manager.update(**updates)
        except TelemostError as e:
            print_error(str(e), e.details)
            sys.exit(1)

        print_success("Configuration saved successfully.")

    @cli.command('config-clear')
    @click.confirmation_option(prompt='Are you sure you want to clear all configuration?')
    @pass_context
    def config_clear(ctx: TelemostContext):
        """Clear all stored configuration."""
        ctx.config_manager.clear()
        print_success("Configuration cleared.")
