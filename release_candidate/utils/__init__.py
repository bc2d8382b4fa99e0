"""
Utility helpers for release-candidate.

This package provides reusable utilities used across release-candidate,
including:

- Console output helpers (Rich-based)
- Logging configuration and retrieval
- Filesystem safety helpers
- Timestamp pattern formatting (Babel-based)
- ``${property}`` interpolation
- Output delivery

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from release_candidate.utils.logger import (
    disable_logging,
    get_logger,
    is_logging_configured,
    level_for_verbosity,
    setup_logging,
)

# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------

from release_candidate.utils.console import (
    print_error,
    print_success,
    print_warning,
    reconfigure_console,
)

# ---------------------------------------------------------------------------
# Filesystem and output utilities
# ---------------------------------------------------------------------------

from release_candidate.utils.filesystem import safe_read_file, safe_write_file
from release_candidate.utils.output import emit, resolve_output_target

# ---------------------------------------------------------------------------
# Template helpers
# ---------------------------------------------------------------------------

from release_candidate.utils.timestamp import format_timestamp
from release_candidate.utils.properties import (
    interpolate_properties,
    parse_definitions,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    "disable_logging",
    "is_logging_configured",
    "level_for_verbosity",
    # Console
    "print_error",
    "print_success",
    "print_warning",
    "reconfigure_console",
    # Filesystem / output
    "safe_read_file",
    "safe_write_file",
    "emit",
    "resolve_output_target",
    # Template helpers
    "format_timestamp",
    "interpolate_properties",
    "parse_definitions",
]
