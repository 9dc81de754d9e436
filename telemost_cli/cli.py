"""
Telemost CLI - Command Line Interface for the Yandex Telemost API.

This module provides the main CLI entry point. Commands live in the
commands package:
- Configuration management
- Conference operations (create, get, update, delete)
- Co-host management
"""

import sys
import logging
from pathlib import Path
from typing import Optional

import click

from . import __version__, __prog_name__
from .config import get_config_manager
from .commands import TelemostContext
from .commands.settings import register_settings_commands
from .commands.conferences import register_conference_commands
from .commands.cohosts import register_cohost_commands
from .utils import print_error

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name=__prog_name__)
@click.option(
    '--config-dir',
    type=click.Path(path_type=Path),
    envvar='TELEMOST_CONFIG_DIR',
    help='Custom configuration directory'
)
@click.pass_context
def cli(ctx, config_dir: Optional[Path]):
    """
    Telemost CLI - Yandex Telemost conference management tool.

    \b
    Quick Start:
      1. Save your OAuth token:    telemost configure --token y0_AgAAAA...
      2. Create a conference:      telemost create -w ORGANIZATION
      3. Add co-hosts:             telemost cohosts add ID user@yandex.ru

    \b
    Environment Variables:
      TELEMOST_TOKEN       - OAuth token
      TELEMOST_API_URL     - API endpoint URL
      TELEMOST_CONFIG_DIR  - Custom configuration directory
    """
    ctx.ensure_object(TelemostContext)
    ctx.obj.config_manager = get_config_manager(config_dir)


register_settings_commands(cli)
register_conference_commands(cli)
register_cohost_commands(cli)


def main():
    """Main entry point for the CLI."""
    try:
        cli(auto_envvar_prefix='TELEMOST')
    except KeyboardInterrupt:
        click.echo("\nAborted.")
        sys.exit(130)
    except Exception as e:
        logger.exception("Unexpected error")
        print_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
