"""
Version data model for release-candidate.

A project version such as ``1.2.0-beta-SNAPSHOT`` is decomposed into a
numeric release (``1.2.0``), a qualifier (``beta``) and build metadata
(``SNAPSHOT``). Parsing is best-effort: any string is accepted and
malformed input simply populates fewer components.

Example::

    >>> v = parse_version("1.2.0-beta-SNAPSHOT")
    >>> v.api_version()
    '1.2.0'
    >>> v.qualified_api_version()
    '1.2.0-beta'
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Tuple

from release_candidate.constants import DEFAULT_QUALIFIER_SEPARATORS

_NUMERIC_RUN = re.compile(r"[0-9]+(?:\.[0-9]+)*")


@dataclass(frozen=True)
class VersionIdentifier:
    """
    Structured view of one version string.

    Attributes:
        raw: The original version string.
        numeric_release: Leading dot-separated integers, e.g. ``(1, 2, 0)``.
        qualifier: First separator-delimited segment after the numeric run.
        build_metadata: Everything after the qualifier, or the whole
            unrecognized suffix.
        separator: Separator that introduced the qualifier, ``None`` when
            the suffix followed the numeric run directly.
    """

    raw: str
    numeric_release: Tuple[int, ...] = ()
    qualifier: Optional[str] = None
    build_metadata: Optional[str] = None
    separator: Optional[str] = None

    # Numeric run exactly as written (keeps zero padding such as ``2015.08``)
    _release_text: str = field(default="", repr=False, compare=False)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def full_version(self) -> str:
        """Return the version exactly as it was given."""
        return self.raw

    def api_version(self) -> str:
        """Return the numeric release only, or ``""`` if there is none."""
        return self._release_text

    def qualified_api_version(self) -> str:
        """Return the numeric release followed by ``-qualifier`` if present."""
        if self.qualifier is None:
            return self.api_version()
        return f"{self.api_version()}-{self.qualifier}"

    def compose(self) -> str:
        """Re-derive a version string from the parsed components.

        Parsing the result yields the same components as this instance.
        """
        if self.separator is None:
            return self._release_text + (self.build_metadata or "")

        composed = f"{self._release_text}{self.separator}{self.qualifier or ''}"
        if self.build_metadata is not None:
            composed += f"{self.separator}{self.build_metadata}"
        return composed

    def __str__(self) -> str:
        return self.raw


def parse_version(
    raw: str,
    *,
    separators: str = DEFAULT_QUALIFIER_SEPARATORS,
) -> VersionIdentifier:
    """Decompose ``raw`` into a :class:`VersionIdentifier`.

    Never fails for string input. The leading run of dot-separated integers
    becomes the numeric release. A suffix starting with one of
    ``separators`` is split at that separator into the qualifier (up to
    the next occurrence of the same separator) and the build metadata (the
    rest, verbatim). Any other suffix, and the whole string when it has no
    numeric run, is kept as build metadata.

    Args:
        raw: Version string to parse.
        separators: Characters accepted between numeric run, qualifier
            and build metadata.

    Returns:
        The parsed, immutable identifier.

    Raises:
        TypeError: ``raw`` is not a string.
    """
    if not isinstance(raw, str):
        raise TypeError(f"version must be a string, got {type(raw).__name__}")

    match = _NUMERIC_RUN.match(raw)
    if match is None:
        return VersionIdentifier(raw=raw, build_metadata=raw or None)

    release_text = match.group(0)
    numeric = tuple(int(part) for part in release_text.split("."))
    suffix = raw[match.end():]

    if not suffix:
        return VersionIdentifier(
            raw=raw,
            numeric_release=numeric,
            _release_text=release_text,
        )

    separator = suffix[0]
    if not separators or separator not in separators:
        return VersionIdentifier(
            raw=raw,
            numeric_release=numeric,
            build_metadata=suffix,
            _release_text=release_text,
        )

    qualifier, metadata = _split_qualifier(suffix[1:], separator)
    return VersionIdentifier(
        raw=raw,
        numeric_release=numeric,
        qualifier=qualifier,
        build_metadata=metadata,
        separator=separator,
        _release_text=release_text,
    )


def _split_qualifier(
    remainder: str, separator: str
) -> Tuple[Optional[str], Optional[str]]:
    """Split ``remainder`` at the first ``separator`` into qualifier/metadata."""
    qualifier, _, metadata = remainder.partition(separator)
    return qualifier or None, metadata or None
