"""
Command-line interface for release-candidate.

This module provides the main CLI entry point and handles global options,
configuration loading, and command registration.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from release_candidate.config import load_config
from release_candidate.__version__ import __version__
from release_candidate.context import ReleaseCandidateContext
from release_candidate.exceptions import ConfigError, ReleaseCandidateError
from release_candidate.utils.console import (
    print_error,
    print_warning,
    reconfigure_console,
)
from release_candidate.utils.logger import (
    get_logger,
    level_for_verbosity,
    setup_logging,
)

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar="RELEASE_CANDIDATE_CONFIG",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="RELEASE_CANDIDATE_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="release-candidate",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """release-candidate: derive release versions from project versions.

    \b
    Available commands:
      release-candidate version    Print or write the release version

    \b
    Examples:
      release-candidate version
      release-candidate version -f "{{ api_version }}.{{ timestamp('yyyyMMdd') }}"
      release-candidate -v version --output-uri file:///tmp/version.properties

    Use ``release-candidate COMMAND --help`` for command-specific options.
    """
    _configure_logging(verbose)

    # Respect NO_COLOR for downstream libraries
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    rc_ctx = ReleaseCandidateContext()
    rc_ctx.config_path = config or loaded_config.source_path
    rc_ctx.color = color
    rc_ctx.verbose = verbose
    rc_ctx.config = loaded_config
    ctx.obj = rc_ctx

    logger.debug("release-candidate v%s", __version__)
    logger.debug("Config path: %s", rc_ctx.config_path)
    if loaded_config.source_path:
        logger.debug("Loaded configuration: %s", loaded_config.to_log_dict())
    logger.debug("Verbosity: %s | Color: %s", verbose, color)


def _configure_logging(verbose: int) -> None:
    """Configure logging level based on verbosity flags."""
    level = level_for_verbosity(verbose)
    setup_logging(level=level, verbose=verbose >= 2)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))


# Register CLI subcommands
from release_candidate.commands.version import version  # noqa: E402

cli.add_command(version)


def main() -> int:
    """Main entry point for the release-candidate CLI.

    Returns:
        Exit code:
            0   Success
            1   Unhandled or application error
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        cli(standalone_mode=False)
        return 0

    except click.exceptions.Exit as exc:
        return exc.exit_code

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except click.Abort:
        print_warning("Operation cancelled by user")
        return 130

    except ReleaseCandidateError as exc:
        print_error(str(exc))
        logger.debug(
            "ReleaseCandidateError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except KeyboardInterrupt:
        print_warning("\nOperation cancelled by user")
        return 130

    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
