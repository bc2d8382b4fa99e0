"""Release version pipeline.

Composes parsing and rendering into the two steps a run performs:

1. :func:`release_version` turns the project version into the release
   version using ``release_version_format``.
2. :func:`render_output` renders ``output_template`` with the release
   version bound to ``{{ version }}`` (and ``api_version`` etc. derived
   from it).

``${name}`` placeholders left by the renderer are resolved from
``properties`` after each step. Both steps share one clock reading when
:func:`prepare_release` is used, so a timestamp in the version and in the
output agree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from release_candidate.config import ReleaseCandidateConfig
from release_candidate.core.renderer import render
from release_candidate.models import (
    Clock,
    TemplateContext,
    VersionIdentifier,
    memoized_clock,
    parse_version,
    system_clock,
)
from release_candidate.utils.logger import get_logger
from release_candidate.utils.properties import interpolate_properties

logger = get_logger("release")


@dataclass(frozen=True)
class ReleaseCandidate:
    """
    Outcome of one run.

    Attributes:
        project_version: Parsed current project version.
        release_version: Parsed rendered release version.
        output: Rendered output text, ready for delivery.
    """

    project_version: VersionIdentifier
    release_version: VersionIdentifier
    output: str


def release_version(
    project_version: str,
    config: ReleaseCandidateConfig,
    *,
    clock: Optional[Clock] = None,
    properties: Optional[Mapping[str, str]] = None,
) -> str:
    """Render the release version for ``project_version``.

    With ``release_version_format`` set to
    ``{{ api_version }}.{{ timestamp('yyyyMMdd') }}``, project version
    ``1.2.0-beta-SNAPSHOT`` built on 2015-08-01 yields ``1.2.0.20150801``.
    """
    context = TemplateContext(parse_version(project_version), clock or system_clock)
    rendered = render(config.release_version_format, context)
    return interpolate_properties(rendered, properties or {})


def render_output(
    release: str,
    config: ReleaseCandidateConfig,
    *,
    clock: Optional[Clock] = None,
    properties: Optional[Mapping[str, str]] = None,
) -> str:
    """Render ``output_template`` for an already computed release version."""
    context = TemplateContext(parse_version(release), clock or system_clock)
    rendered = render(config.output_template, context)
    return interpolate_properties(rendered, properties or {})


def prepare_release(
    project_version: str,
    config: ReleaseCandidateConfig,
    *,
    clock: Optional[Clock] = None,
    properties: Optional[Mapping[str, str]] = None,
) -> ReleaseCandidate:
    """Compute the release version and the output text in one go.

    Args:
        project_version: Current project version, e.g. ``1.2.0-beta-SNAPSHOT``.
        config: Templates to apply.
        clock: Time source for ``timestamp`` tokens; read at most once.
        properties: ``${name}`` definitions.

    Returns:
        The parsed versions and the rendered output.

    Raises:
        TemplateError: Either template fails to render.
    """
    shared_clock = memoized_clock(clock or system_clock)

    release = release_version(
        project_version, config, clock=shared_clock, properties=properties
    )
    logger.info("Release version: %s", release)

    output = render_output(release, config, clock=shared_clock, properties=properties)

    return ReleaseCandidate(
        project_version=parse_version(project_version),
        release_version=parse_version(release),
        output=output,
    )
