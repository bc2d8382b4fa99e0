"""
release-candidate version information.

Single source of truth for the package version. The structured metadata is
derived with the package's own version parser, the same one applied to
project versions.

Examples:
    0.1.0
    0.1.0-dev0
    1.0.0-rc1
"""

from __future__ import annotations

from release_candidate.models.version import parse_version

__version__ = "0.1.0"

_parsed = parse_version(__version__)

VERSION_INFO = {
    "release": _parsed.numeric_release,
    "qualifier": _parsed.qualifier,
    "is_dev": bool(_parsed.qualifier and _parsed.qualifier.startswith("dev")),
}

VERSION_STRING = f"release-candidate {__version__}"
