"""
Token resolution context for template rendering.

A :class:`TemplateContext` binds a :class:`VersionIdentifier` and a clock.
:meth:`TemplateContext.resolvers` builds the name → resolver mapping for a
single render call; the ``timestamp`` resolver reads the clock at most once
per mapping, so one render produces one consistent timestamp.
"""

from __future__ import annotations

from datetime import datetime
from dataclasses import dataclass, field
from typing import Callable, Dict, Mapping, Optional

from release_candidate.constants import (
    DEFAULT_TIMESTAMP_LOCALE,
    TOKEN_API_VERSION,
    TOKEN_QUALIFIED_API_VERSION,
    TOKEN_TIMESTAMP,
    TOKEN_VERSION,
)
from release_candidate.utils.timestamp import format_timestamp
from release_candidate.models.version import VersionIdentifier

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Return the current local time, aware of the local timezone."""
    return datetime.now().astimezone()


def fixed_clock(moment: datetime) -> Clock:
    """Return a clock that always reports ``moment``."""
    return lambda: moment


def memoized_clock(clock: Clock) -> Clock:
    """Wrap ``clock`` so that it is read once and then replayed."""
    reading: Dict[str, datetime] = {}

    def read() -> datetime:
        if "now" not in reading:
            reading["now"] = clock()
        return reading["now"]

    return read


@dataclass(frozen=True)
class TokenResolver:
    """
    A named token and the function producing its value.

    Attributes:
        name: Token name as written in templates.
        func: Zero-argument callable, or one-argument callable when
            ``takes_argument`` is set.
        takes_argument: Whether the token is written ``name('arg')``.
    """

    name: str
    func: Callable[..., str]
    takes_argument: bool = False

    def resolve(self, argument: Optional[str] = None) -> str:
        if self.takes_argument:
            return self.func(argument)
        return self.func()


@dataclass(frozen=True)
class TemplateContext:
    """
    Values available to a template.

    Attributes:
        version: Version backing ``version``, ``api_version`` and
            ``qualified_api_version``.
        clock: Source of the current time for ``timestamp``.
        locale: Locale used for textual timestamp fields.
    """

    version: VersionIdentifier
    clock: Clock = field(default=system_clock, compare=False)
    locale: str = DEFAULT_TIMESTAMP_LOCALE

    def resolvers(self) -> Mapping[str, TokenResolver]:
        """Build the token table for one render call."""
        version = self.version
        now = memoized_clock(self.clock)

        def timestamp(pattern: str) -> str:
            return format_timestamp(now(), pattern, locale=self.locale)

        table = (
            TokenResolver(TOKEN_VERSION, version.full_version),
            TokenResolver(TOKEN_API_VERSION, version.api_version),
            TokenResolver(TOKEN_QUALIFIED_API_VERSION, version.qualified_api_version),
            TokenResolver(TOKEN_TIMESTAMP, timestamp, takes_argument=True),
        )
        return {resolver.name: resolver for resolver in table}
