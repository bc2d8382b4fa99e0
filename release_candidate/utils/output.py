"""
Output delivery for release-candidate.

The rendered output goes either to standard output (``stdout``) or to a
file named by an absolute ``file://`` URI, for example
``file:///home/ci/project/project.properties``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

import click

from release_candidate.constants import DEFAULT_ENCODING, STDOUT_URI
from release_candidate.exceptions import ConfigError
from release_candidate.utils.filesystem import safe_write_file
from release_candidate.utils.logger import get_logger

logger = get_logger("output")


def resolve_output_target(uri: str) -> Optional[Path]:
    """Translate an output URI into a file path.

    Args:
        uri: ``stdout`` (any case) or an absolute ``file://`` URI.

    Returns:
        ``None`` for standard output, otherwise the target file path.

    Raises:
        ConfigError: Unsupported scheme, relative path, or missing path.
    """
    candidate = uri.strip()
    if candidate.lower() == STDOUT_URI:
        return None

    parsed = urlparse(candidate)
    if parsed.scheme != "file":
        raise ConfigError(
            f"Unsupported output URI {uri!r}: use 'stdout' or an absolute file:// URI",
            option="output_uri",
        )

    if parsed.netloc not in ("", "localhost"):
        raise ConfigError(
            f"Output URI {uri!r} must not name a remote host",
            option="output_uri",
        )

    path = Path(unquote(parsed.path))
    if not parsed.path or not path.is_absolute():
        raise ConfigError(
            f"Output URI {uri!r} must contain an absolute path",
            option="output_uri",
        )

    return path


def emit(text: str, uri: str, *, encoding: str = DEFAULT_ENCODING) -> Optional[Path]:
    """Deliver ``text`` to the destination named by ``uri``.

    Args:
        text: Rendered output.
        uri: Output URI, see :func:`resolve_output_target`.
        encoding: Encoding used for file targets.

    Returns:
        The file written, or ``None`` when printing to standard output.
    """
    target = resolve_output_target(uri)

    if target is None:
        click.echo(text)
        return None

    logger.info("Writing output to %s", target)
    return safe_write_file(target, text, encoding=encoding)
