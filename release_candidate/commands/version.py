"""Version command implementation for release-candidate.

Computes the release version of the current project and emits it through
the output template.

The command orchestrates:

1. **Configuration**: file values merged with environment and CLI options.
2. **Project version**: ``--project-version``, or read from ``--project``
   / an auto-discovered ``pom.xml`` or ``pyproject.toml``.
3. **Release pipeline**: ``release_version_format`` is rendered against the
   project version, then ``output_template`` against the release version.
4. **Delivery**: stdout, or the file named by ``--output-uri``.

Typical usage::

    # Leave the version as it is
    $ release-candidate version --project-version 1.2.0-beta-SNAPSHOT
    1.2.0-beta-SNAPSHOT

    # API version plus a build timestamp
    $ release-candidate version -f "{{ api_version }}.{{ timestamp('yyyyMMdd') }}"
    1.2.0.20150801

    # Build properties from the CI server
    $ release-candidate version -f "{{ qualified_api_version }}-build.${build_number}" -D build_number=176
    1.2.0-beta-build.176

    # Property file for Jenkins EnvInject
    $ release-candidate version -t "PROJECT_VERSION={{ version }}" \\
        -o file:///var/ci/workspace/project.properties
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from release_candidate.config import ReleaseCandidateConfig
from release_candidate.context import ReleaseCandidateContext, pass_context
from release_candidate.core import (
    discover_project_file,
    prepare_release,
    read_project_version,
)
from release_candidate.exceptions import ProjectError, ReleaseCandidateError
from release_candidate.utils import (
    emit,
    get_logger,
    parse_definitions,
    print_error,
    print_success,
)

logger = get_logger("commands.version")


@click.command()
@click.option(
    "--project-version",
    "-V",
    "project_version",
    help="Current project version; skips reading a project descriptor.",
)
@click.option(
    "--project",
    "-p",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="pom.xml or pyproject.toml to read the project version from.",
)
@click.option(
    "--release-version-format",
    "-f",
    help="Template turning the project version into the release version.",
    envvar="RELEASE_CANDIDATE_VERSION_FORMAT",
)
@click.option(
    "--output-template",
    "-t",
    help="Template structuring the output; {{ version }} is the release version.",
    envvar="RELEASE_CANDIDATE_OUTPUT_TEMPLATE",
)
@click.option(
    "--output-uri",
    "-o",
    help="'stdout' or an absolute file:// URI.",
    envvar="RELEASE_CANDIDATE_OUTPUT_URI",
)
@click.option(
    "--encoding",
    "-e",
    help="Encoding used when reading and writing files.",
    envvar="RELEASE_CANDIDATE_ENCODING",
)
@click.option(
    "--define",
    "-D",
    "definitions",
    multiple=True,
    metavar="NAME=VALUE",
    help="Define a ${NAME} property (can be repeated).",
)
@pass_context
def version(
    ctx: ReleaseCandidateContext,
    project_version: Optional[str],
    project: Optional[Path],
    release_version_format: Optional[str],
    output_template: Optional[str],
    output_uri: Optional[str],
    encoding: Optional[str],
    definitions: Tuple[str, ...],
) -> None:
    """Print or write the release version of the current project.

    \b
    Tokens available in both templates:
      {{ version }}                 full version      1.2.0-beta-SNAPSHOT
      {{ api_version }}             numeric release   1.2.0
      {{ qualified_api_version }}   plus qualifier    1.2.0-beta
      {{ timestamp('yyyyMMdd') }}   build time        20150801

    Exits 0 on success and 1 if the version cannot be determined, a
    template is invalid or the output cannot be written.
    """
    try:
        config = ctx.effective_config().merged(
            release_version_format=release_version_format,
            output_template=output_template,
            output_uri=output_uri,
            encoding=encoding,
        )
        properties = parse_definitions(definitions)
        current = project_version or _project_version_from_descriptor(project, config)

        candidate = prepare_release(current, config, properties=properties)
        target = emit(candidate.output, config.output_uri, encoding=config.encoding)

    except ReleaseCandidateError as e:
        print_error(f"{e}")
        logger.debug("Version command failed", exc_info=True)
        sys.exit(1)

    if target is not None:
        print_success(
            f"Release version {candidate.release_version} written to {target}"
        )


def _project_version_from_descriptor(
    project: Optional[Path],
    config: ReleaseCandidateConfig,
) -> str:
    """Read the current version from ``project`` or a discovered descriptor."""
    descriptor = project or discover_project_file()
    if descriptor is None:
        raise ProjectError(
            "No pom.xml or pyproject.toml found; use --project or --project-version"
        )
    return read_project_version(descriptor, encoding=config.encoding)
