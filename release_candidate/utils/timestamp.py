"""Timestamp formatting for the ``timestamp('pattern')`` token.

Patterns use the letter-coded convention of Joda-Time and Java's
``SimpleDateFormat`` (``yyyyMMdd``, ``HH:mm:ss``, quoted literals such as
``yyyy'T'HH``). Formatting is delegated to Babel's LDML implementation,
which shares that syntax. Two letters differ between the conventions and
are translated before formatting: Joda's ``Y`` (year of era) is LDML's
``y`` and Joda's ``x`` (week year) is LDML's ``Y``. Fraction-of-second
fields (``S``, ``SSS``) are cut off like Joda cuts them rather than
rounded, so they are rendered here and handed to Babel as literal digits.
"""

from __future__ import annotations

import string
from datetime import datetime
from typing import List, Set

from babel.dates import PATTERN_CHARS, format_datetime

from release_candidate.constants import DEFAULT_TIMESTAMP_LOCALE
from release_candidate.exceptions import InvalidTimestampPatternError

_JODA_TO_LDML = {"Y": "y", "x": "Y"}
_FRACTION = "S"


def _fraction_digits(microsecond: int, width: int) -> str:
    """Return the first ``width`` digits of the second's fraction.

    Digits are cut off, never rounded, and padded with zeros past
    microsecond precision.
    """
    return f"{microsecond:06d}"[:width].ljust(width, "0")


def _translate(pattern: str, microsecond: int = 0) -> str:
    """Validate a Joda-style ``pattern`` and return its LDML equivalent.

    Quoted text is copied unchanged; a doubled quote toggles the quoted
    state twice and so leaves it as it was. Unquoted ``S`` runs are
    replaced by the truncated fraction of ``microsecond``; digits are
    literal text in LDML.
    """
    if not pattern:
        raise InvalidTimestampPatternError(pattern, reason="empty pattern")

    quoted = False
    illegal: Set[str] = set()
    translated: List[str] = []
    pos = 0

    while pos < len(pattern):
        char = pattern[pos]
        pos += 1

        if char == "'":
            quoted = not quoted
        elif not quoted and char == _FRACTION:
            width = 1
            while pos < len(pattern) and pattern[pos] == _FRACTION:
                width += 1
                pos += 1
            char = _fraction_digits(microsecond, width)
        elif not quoted and char in string.ascii_letters:
            if char not in PATTERN_CHARS:
                illegal.add(char)
            char = _JODA_TO_LDML.get(char, char)
        translated.append(char)

    if quoted:
        raise InvalidTimestampPatternError(pattern, reason="unterminated quote")
    if illegal:
        raise InvalidTimestampPatternError(
            pattern,
            reason=f"illegal pattern letters: {''.join(sorted(illegal))}",
        )

    return "".join(translated)


def format_timestamp(
    now: datetime,
    pattern: str,
    *,
    locale: str = DEFAULT_TIMESTAMP_LOCALE,
) -> str:
    """Format ``now`` according to a Joda-style date/time ``pattern``.

    Args:
        now: Moment to format. Zone fields (``Z``, ``zzzz``) need an aware
            value; a naive one is formatted as UTC.
        pattern: Pattern such as ``yyyyMMdd`` or ``yyyy-MM-dd'T'HH:mm``.
        locale: Locale for textual fields such as ``MMM`` or ``EEE``.

    Returns:
        The formatted timestamp.

    Raises:
        InvalidTimestampPatternError: ``pattern`` is empty, contains
            letters that are not pattern fields, or uses an unsupported
            field width.
    """
    ldml = _translate(pattern, now.microsecond)

    try:
        return format_datetime(now, format=ldml, locale=locale)
    except (KeyError, ValueError) as exc:
        raise InvalidTimestampPatternError(pattern, reason=str(exc)) from exc
