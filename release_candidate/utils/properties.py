"""
Build property interpolation for release-candidate.

Templates may contain ``${name}`` placeholders alongside ``{{ token }}``
references, e.g. ``{{ qualified_api_version }}-build.${build_number}``.
The template renderer leaves them untouched; this module resolves them
afterwards from ``-D name=value`` definitions given on the command line.
Placeholders without a definition are kept verbatim so a later stage (a
build tool, a shell) can still expand them.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, Mapping

from release_candidate.exceptions import ConfigError

_PLACEHOLDER = re.compile(r"\$\{([^{}]+)\}")


def parse_definitions(definitions: Iterable[str]) -> Dict[str, str]:
    """Parse ``name=value`` strings into a property mapping.

    Later definitions of the same name win. The value may itself contain
    ``=`` and may be empty.

    Args:
        definitions: Raw ``-D`` arguments.

    Returns:
        Mapping of property name to value.

    Raises:
        ConfigError: An entry has no ``=`` or an empty name.
    """
    properties: Dict[str, str] = {}

    for definition in definitions:
        name, found, value = definition.partition("=")
        name = name.strip()
        if not found or not name:
            raise ConfigError(
                f"Invalid property definition {definition!r}, expected name=value",
                option="define",
            )
        properties[name] = value

    return properties


def interpolate_properties(text: str, properties: Mapping[str, str]) -> str:
    """Replace ``${name}`` placeholders that have a definition.

    Example::

        >>> interpolate_properties("1.2.0-build.${build_number}", {"build_number": "176"})
        '1.2.0-build.176'
        >>> interpolate_properties("${unknown}", {})
        '${unknown}'
    """
    if not properties:
        return text

    def substitute(match: "re.Match[str]") -> str:
        name = match.group(1).strip()
        return properties.get(name, match.group(0))

    return _PLACEHOLDER.sub(substitute, text)
