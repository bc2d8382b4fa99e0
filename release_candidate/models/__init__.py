"""
Data model exports for release-candidate.

Example:
    >>> from release_candidate.models import TemplateContext, parse_version
    >>> ctx = TemplateContext(parse_version("1.2.0-beta-SNAPSHOT"))
"""

from __future__ import annotations

from release_candidate.models.version import VersionIdentifier, parse_version
from release_candidate.models.template import (
    Clock,
    TemplateContext,
    TokenResolver,
    fixed_clock,
    memoized_clock,
    system_clock,
)

__all__ = [
    "VersionIdentifier",
    "parse_version",
    "Clock",
    "TemplateContext",
    "TokenResolver",
    "fixed_clock",
    "memoized_clock",
    "system_clock",
]
