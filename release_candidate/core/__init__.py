"""
Core functionality exports for release-candidate.

Importing from here keeps user-facing imports clean and stable:

    from release_candidate.core import render, prepare_release
"""

from __future__ import annotations

from release_candidate.core.scanner import (
    LiteralSegment,
    ScannerState,
    Segment,
    TemplateScanner,
    TokenSegment,
    scan,
)
from release_candidate.core.renderer import normalize_template, render
from release_candidate.core.project import discover_project_file, read_project_version
from release_candidate.core.release import (
    ReleaseCandidate,
    prepare_release,
    release_version,
    render_output,
)

__all__ = [
    "LiteralSegment",
    "ScannerState",
    "Segment",
    "TemplateScanner",
    "TokenSegment",
    "scan",
    "normalize_template",
    "render",
    "discover_project_file",
    "read_project_version",
    "ReleaseCandidate",
    "prepare_release",
    "release_version",
    "render_output",
]
