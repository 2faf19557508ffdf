"""Flat text encoding shared by every shape record.

A scene is a run of whitespace-separated tokens:

    circle   <x> <y> <radius> <r> <g> <b>
    polygon  <n> <x1> <y1> ... <xn> <yn> <r> <g> <b>
    line     <x> <y> <dx> <dy> <r> <g> <b>
    ellipse  <x> <y> <rx> <ry> <r> <g> <b>
    annotation <len> <text...>

This module holds the token-level pieces: number formatting, record
assembly, a position-aware token reader and parsers that report failure
by returning None instead of raising.
"""

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal

from patchwork.types import Color

ANNOTATION_KEYWORD = "annotation"

_TOKEN_RE = re.compile(r"\S+")
_TWO_PLACES = Decimal("0.01")
# Wide enough for any finite double at two decimal places
_DECIMAL_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def format_float(value: float) -> str:
    """Format a float with exactly two decimals.

    Rounds half up on the shortest decimal form of the float, so 1.005
    becomes "1.01" even though its binary value is slightly below it.
    Negative zero prints as "0.00"; nan and inf print as Python spells them.
    """
    if not math.isfinite(value):
        return str(value)
    quantized = Decimal(repr(float(value))).quantize(_TWO_PLACES, context=_DECIMAL_CONTEXT)
    if quantized.is_zero():
        quantized = abs(quantized)
    return format(quantized, "f")


def encode_record(kind: str, fields: Iterable[str], color: Color) -> str:
    """Join a record keyword, its fields and the color channels."""
    return " ".join([kind, *fields, str(color.r), str(color.g), str(color.b)])


def encode_annotation(text: str) -> str:
    """Annotation trailer: keyword, character count, text."""
    return f"{ANNOTATION_KEYWORD} {len(text)} {text}"


def parse_float(token: str | None) -> float | None:
    """Parse a float token, None when missing or malformed."""
    if token is None:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def parse_int(token: str | None) -> int | None:
    """Parse an integer token, None when missing or malformed."""
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


@dataclass(frozen=True)
class ParseIssue:
    """A record the decoder had to drop.

    Attributes:
        position: Character offset where the record started
        record: Record keyword being decoded
        token: Offending token (None when input ended early)
        reason: Human-readable explanation
    """

    position: int
    record: str
    token: str | None
    reason: str


class TokenReader:
    """Reads whitespace-separated tokens while tracking the character position.

    The position is kept so raw text (an annotation) can be read verbatim
    between tokens.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self.position = 0

    @property
    def exhausted(self) -> bool:
        return _TOKEN_RE.search(self._text, self.position) is None

    def next_token(self) -> str | None:
        """Return the next token, or None at end of input."""
        match = _TOKEN_RE.search(self._text, self.position)
        if match is None:
            self.position = len(self._text)
            return None
        self.position = match.end()
        return match.group()

    def read_line(self, size: int) -> str:
        """Read raw characters like a bounded line read of a size-byte buffer.

        At most size - 1 characters are returned. A newline ends the read
        early and is consumed but not returned.
        """
        limit = max(size - 1, 0)
        end = min(self.position + limit, len(self._text))
        newline = self._text.find("\n", self.position, end)
        if newline != -1:
            chunk = self._text[self.position : newline]
            self.position = newline + 1
        else:
            chunk = self._text[self.position : end]
            self.position = end
        return chunk

    def skip_to(self, keywords: Iterable[str]) -> None:
        """Move to the start of the next token that is one of keywords."""
        wanted = set(keywords)
        for match in _TOKEN_RE.finditer(self._text, self.position):
            if match.group() in wanted:
                self.position = match.start()
                return
        self.position = len(self._text)
