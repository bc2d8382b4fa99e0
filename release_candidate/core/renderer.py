"""Template rendering for release-candidate.

Resolves the segments produced by :mod:`release_candidate.core.scanner`
against a :class:`TemplateContext`::

    >>> ctx = TemplateContext(parse_version("1.2.0-beta-SNAPSHOT"))
    >>> render("{{ qualified_api_version }}-build.${build_number}", ctx)
    '1.2.0-beta-build.${build_number}'

Rendering is all-or-nothing: the first unknown token, syntax problem or
invalid timestamp pattern raises and no partial output is returned.
"""

from __future__ import annotations

import re
from typing import List, Optional

from release_candidate.core.scanner import LiteralSegment, scan
from release_candidate.exceptions import TemplateSyntaxError, UnknownTokenError
from release_candidate.models.template import TemplateContext
from release_candidate.utils.logger import get_logger

logger = get_logger("renderer")

_LEADING_WHITESPACE = re.compile(r"^\s+", re.MULTILINE)


def normalize_template(template: str) -> str:
    """Strip leading whitespace from every line and drop blank lines.

    Lets a multi-line template be indented for readability in a
    configuration file without the indentation reaching the output::

        >>> normalize_template("\\n  PROJECT_VERSION={{ version }}\\n")
        'PROJECT_VERSION={{ version }}\\n'
    """
    return _LEADING_WHITESPACE.sub("", template)


def _kept_offsets(template: str) -> List[int]:
    """Map each character of the normalized template to its offset in ``template``."""
    offsets: List[int] = []
    start = 0
    for match in _LEADING_WHITESPACE.finditer(template):
        offsets.extend(range(start, match.start()))
        start = match.end()
    offsets.extend(range(start, len(template)))
    return offsets


def _original_position(
    offsets: List[int], position: Optional[int], length: int
) -> Optional[int]:
    if position is None:
        return None
    if position < len(offsets):
        return offsets[position]
    return length


def render(template: str, context: TemplateContext) -> str:
    """Render ``template`` with the tokens available in ``context``.

    Error positions are offsets into ``template`` as written, before the
    indentation was stripped.

    Args:
        template: Template text containing ``{{ token }}`` references.
        context: Version and clock the tokens resolve against.

    Returns:
        The rendered string.

    Raises:
        TemplateSyntaxError: Malformed delimiters, or a token used with the
            wrong number of arguments.
        UnknownTokenError: A token name that is not recognized.
        InvalidTimestampPatternError: A bad ``timestamp`` pattern.
    """
    normalized = normalize_template(template)
    offsets = _kept_offsets(template)

    def position_of(position: Optional[int]) -> Optional[int]:
        return _original_position(offsets, position, len(template))

    try:
        segments = scan(normalized)
    except TemplateSyntaxError as exc:
        raise TemplateSyntaxError(
            exc.message,
            position=position_of(exc.position),
            template=template,
        ) from exc

    resolvers = context.resolvers()

    output: List[str] = []
    for segment in segments:
        if isinstance(segment, LiteralSegment):
            output.append(segment.text)
            continue

        resolver = resolvers.get(segment.name)
        if resolver is None:
            raise UnknownTokenError(
                segment.name, position=position_of(segment.position)
            )

        if resolver.takes_argument and not segment.has_argument:
            raise TemplateSyntaxError(
                f"Token '{segment.name}' requires an argument, "
                f"e.g. {{{{ {segment.name}('...') }}}}",
                position=position_of(segment.position),
                template=template,
            )
        if segment.has_argument and not resolver.takes_argument:
            raise TemplateSyntaxError(
                f"Token '{segment.name}' does not take an argument",
                position=position_of(segment.position),
                template=template,
            )

        output.append(resolver.resolve(segment.argument))

    rendered = "".join(output)
    logger.debug("Rendered %r as %r", template, rendered)
    return rendered
