"""Template scanner for ``{{ token }}`` substitutions.

Splits a template into literal text and token references. The grammar is
deliberately tiny::

    template  := (literal | token)*
    token     := "{{" ws name ws "}}"
               | "{{" ws name "(" ws quoted ws ")" ws "}}"
    name      := [A-Za-z_][A-Za-z0-9_]*
    quoted    := "'" [^']* "'" | '"' [^"]* '"'

Anything outside the delimiters, ``${property}`` placeholders included, is
literal text. The scanner is a three-state machine (``LITERAL``,
``IN_TOKEN_NAME``, ``IN_TOKEN_ARG``); reaching the end of input in any
state but ``LITERAL`` is a :class:`TemplateSyntaxError`.

Typical usage::

    segments = TemplateScanner("v{{ api_version }}").scan()
    # [LiteralSegment(text='v', position=0),
    #  TokenSegment(name='api_version', argument=None, position=1)]
"""

from __future__ import annotations

import re
import enum
from dataclasses import dataclass
from typing import List, Optional, Union

from release_candidate.constants import TOKEN_CLOSE, TOKEN_OPEN
from release_candidate.exceptions import TemplateSyntaxError

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_QUOTES = ("'", '"')


class ScannerState(enum.Enum):
    LITERAL = "literal"
    IN_TOKEN_NAME = "in_token_name"
    IN_TOKEN_ARG = "in_token_arg"


@dataclass(frozen=True)
class LiteralSegment:
    """Text copied to the output unchanged."""

    text: str
    position: int


@dataclass(frozen=True)
class TokenSegment:
    """
    A token reference.

    Attributes:
        name: Token identifier.
        argument: Quoted argument for ``name('arg')`` tokens, ``None`` for
            bare ``name`` tokens.
        position: Offset of the opening ``{{``.
    """

    name: str
    argument: Optional[str]
    position: int

    @property
    def has_argument(self) -> bool:
        return self.argument is not None


Segment = Union[LiteralSegment, TokenSegment]


class TemplateScanner:
    """Single-use scanner turning a template string into segments.

    Example::

        >>> TemplateScanner("{{ timestamp('yyyy') }}").scan()
        [TokenSegment(name='timestamp', argument='yyyy', position=0)]
    """

    def __init__(self, template: str) -> None:
        self.template = template
        self.state = ScannerState.LITERAL
        self._pos = 0
        self._segments: List[Segment] = []

        # Current literal run
        self._literal: List[str] = []
        self._literal_start = 0

        # Current token
        self._token_start = 0
        self._name: Optional[str] = None
        self._name_end = 0
        self._argument: Optional[str] = None
        self._argument_closed = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def scan(self) -> List[Segment]:
        """Scan the whole template.

        Returns:
            Literal and token segments in template order. Adjacent literal
            text is merged into one segment; empty literals are omitted.

        Raises:
            TemplateSyntaxError: Unmatched delimiters or a malformed token.
        """
        steps = {
            ScannerState.LITERAL: self._step_literal,
            ScannerState.IN_TOKEN_NAME: self._step_name,
            ScannerState.IN_TOKEN_ARG: self._step_argument,
        }

        while self._pos < len(self.template):
            steps[self.state]()

        if self.state is not ScannerState.LITERAL:
            raise self._error(
                f"Unterminated token: missing '{TOKEN_CLOSE}'",
                self._token_start,
            )

        self._flush_literal()
        return self._segments

    # ------------------------------------------------------------------
    # State handlers
    # ------------------------------------------------------------------

    def _step_literal(self) -> None:
        if self._at(TOKEN_OPEN):
            self._flush_literal()
            self._begin_token()
            return

        if self._at(TOKEN_CLOSE):
            raise self._error(
                f"Unmatched '{TOKEN_CLOSE}' without opening '{TOKEN_OPEN}'",
                self._pos,
            )

        if not self._literal:
            self._literal_start = self._pos
        self._literal.append(self.template[self._pos])
        self._pos += 1

    def _step_name(self) -> None:
        if self._skip_whitespace():
            return

        if self._name is None:
            match = _IDENTIFIER.match(self.template, self._pos)
            if match is None:
                found = "'}}'" if self._at(TOKEN_CLOSE) else repr(self._char())
                raise self._error(f"Expected token name, found {found}", self._pos)
            self._name = match.group(0)
            self._pos = self._name_end = match.end()
            return

        if self._at(TOKEN_CLOSE):
            self._end_token()
        elif self._char() == "(" and self._pos == self._name_end:
            self._pos += 1
            self.state = ScannerState.IN_TOKEN_ARG
        elif self._char() == "(":
            raise self._error(
                f"Unexpected whitespace between '{self._name}' and '('",
                self._name_end,
            )
        else:
            raise self._error(
                f"Unexpected {self._char()!r} after token name '{self._name}'",
                self._pos,
            )

    def _step_argument(self) -> None:
        if self._skip_whitespace():
            return

        if self._argument is None:
            self._read_quoted()
        elif not self._argument_closed:
            if self._char() != ")":
                raise self._error(
                    f"Expected ')' to close the argument of '{self._name}'",
                    self._pos,
                )
            self._argument_closed = True
            self._pos += 1
        elif self._at(TOKEN_CLOSE):
            self._end_token()
        else:
            raise self._error(
                f"Expected '{TOKEN_CLOSE}' after '{self._name}(...)'",
                self._pos,
            )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _read_quoted(self) -> None:
        quote = self._char()
        if quote not in _QUOTES:
            raise self._error(
                f"Expected a quoted argument for '{self._name}'",
                self._pos,
            )

        end = self.template.find(quote, self._pos + 1)
        if end < 0:
            raise self._error("Unterminated string argument", self._pos)

        self._argument = self.template[self._pos + 1:end]
        self._pos = end + 1

    def _begin_token(self) -> None:
        self._token_start = self._pos
        self._name = None
        self._argument = None
        self._argument_closed = False
        self._pos += len(TOKEN_OPEN)
        self.state = ScannerState.IN_TOKEN_NAME

    def _end_token(self) -> None:
        assert self._name is not None
        self._segments.append(
            TokenSegment(self._name, self._argument, self._token_start)
        )
        self._pos += len(TOKEN_CLOSE)
        self.state = ScannerState.LITERAL

    def _flush_literal(self) -> None:
        if self._literal:
            self._segments.append(
                LiteralSegment("".join(self._literal), self._literal_start)
            )
            self._literal = []

    def _skip_whitespace(self) -> bool:
        if self._char().isspace():
            self._pos += 1
            return True
        return False

    def _at(self, delimiter: str) -> bool:
        return self.template.startswith(delimiter, self._pos)

    def _char(self) -> str:
        return self.template[self._pos]

    def _error(self, message: str, position: int) -> TemplateSyntaxError:
        return TemplateSyntaxError(message, position=position, template=self.template)


def scan(template: str) -> List[Segment]:
    """Scan ``template`` into literal and token segments."""
    return TemplateScanner(template).scan()
