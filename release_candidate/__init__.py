"""
release-candidate: derive release version numbers from project versions.

Given the current project version (``1.2.0-beta-SNAPSHOT``) and a template
(``{{ api_version }}.{{ timestamp('yyyyMMdd') }}``), release-candidate
computes the release version (``1.2.0.20150801``) and emits it to stdout or
a file in a format a build server understands.

Library usage::

    >>> from release_candidate import TemplateContext, parse_version, render
    >>> render("{{ qualified_api_version }}", TemplateContext(parse_version("1.2.0-beta-SNAPSHOT")))
    '1.2.0-beta'
"""

from __future__ import annotations

from release_candidate.__version__ import __version__
from release_candidate.core import prepare_release, render
from release_candidate.models import TemplateContext, VersionIdentifier, parse_version
from release_candidate.exceptions import (
    InvalidTimestampPatternError,
    ReleaseCandidateError,
    TemplateError,
    TemplateSyntaxError,
    UnknownTokenError,
)

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "release-candidate Contributors"
__license__ = "Apache-2.0"
__description__ = "Derive release version numbers from project versions and templates."

__all__ = [
    "__version__",
    "parse_version",
    "render",
    "prepare_release",
    "TemplateContext",
    "VersionIdentifier",
    "ReleaseCandidateError",
    "TemplateError",
    "TemplateSyntaxError",
    "UnknownTokenError",
    "InvalidTimestampPatternError",
]
