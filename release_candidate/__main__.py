"""
Executable module for release-candidate.

Running:
    python -m release_candidate

is equivalent to:
    release-candidate

This module simply forwards execution to the CLI entrypoint defined in
`release_candidate.cli`.
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Explain on stderr why the CLI could not be loaded."""
    sys.stderr.write("release-candidate CLI could not be loaded.\n")
    sys.stderr.write(f"Python version : {sys.version}\n")
    try:
        from release_candidate.__version__ import __version__

        sys.stderr.write(f"release-candidate version: {__version__}\n")
    except ImportError:
        sys.stderr.write("release-candidate version: <unknown>\n")
    sys.stderr.write("\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """
    Main entrypoint when executing `python -m release_candidate`.

    Returns:
        Exit code returned by the CLI, or 1 if it cannot be imported.
    """
    try:
        # Import lazily so dependencies are only loaded during CLI use
        from release_candidate.cli import main as cli_main
    except ImportError as exc:
        _print_startup_error(exc)
        return 1

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
