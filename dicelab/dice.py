"""Dice notation parser.

Supports comma-separated terms of the form XdY, XdY+Z, XdY-Z.
Examples: d20, 2d6+2, 3d10, 2d6+2,3d10, 8d10+6.

The count may be omitted (defaults to 1) or zero; sides must be positive.
Blank terms left by stray commas are ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_WHITESPACE = " \t\n\r"


class InvalidSpecification(ValueError):
    """Raised when a dice notation is invalid."""

    def __init__(self, message: str, text: str) -> None:
        super().__init__(message)
        self.text = text


@dataclass(frozen=True)
class DieGroup:
    """One additive term: ``count`` dice of ``sides`` faces plus ``modifier``."""

    count: int = 1
    sides: int = 6
    modifier: int = 0


@dataclass(frozen=True)
class Parsed:
    groups: tuple[DieGroup, ...]

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> tuple[DieGroup, ...]:
        return self.groups


@dataclass(frozen=True)
class ParseFailure:
    error: InvalidSpecification

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> tuple[DieGroup, ...]:
        raise self.error


ParseResult = Parsed | ParseFailure


def _to_int(text: str, token: str, what: str) -> int:
    # int() also accepts underscores and non-ASCII digits, neither of which is notation.
    if "_" in text or not text.isascii():
        raise InvalidSpecification(f"Invalid {what} in {token!r}", token)
    try:
        return int(text)
    except ValueError:
        raise InvalidSpecification(f"Invalid {what} in {token!r}", token) from None


def parse_token(token: str) -> DieGroup:
    """Parse a single term such as ``"3d10-2"`` into a DieGroup.

    Args:
        token: One comma-separated segment, untrimmed.

    Returns:
        The parsed DieGroup.

    Raises:
        InvalidSpecification: If the term is blank, has no dice separator, or
            any of its numbers is malformed or out of range.
    """
    trimmed = token.strip(_WHITESPACE)
    if not trimmed:
        raise InvalidSpecification("Empty dice term", token)

    sep = next((i for i, ch in enumerate(trimmed) if ch in "dD"), -1)
    if sep < 0:
        raise InvalidSpecification(f"Missing dice separator in {trimmed!r}", token)

    count_text = trimmed[:sep]
    rest = trimmed[sep + 1 :]

    count = 1
    if count_text:
        count = _to_int(count_text, trimmed, "dice count")
        if count < 0:
            raise InvalidSpecification(f"Negative dice count in {trimmed!r}", token)

    sign_at = next((i for i, ch in enumerate(rest) if ch in "+-"), -1)
    if sign_at < 0:
        sides_text, modifier_text = rest, ""
    else:
        sides_text, modifier_text = rest[:sign_at], rest[sign_at:]

    if not sides_text:
        raise InvalidSpecification(f"Missing sides in {trimmed!r}", token)
    sides = _to_int(sides_text, trimmed, "sides")
    if sides <= 0:
        raise InvalidSpecification(f"Sides must be positive in {trimmed!r}", token)

    modifier = 0
    if modifier_text:
        modifier = _to_int(modifier_text, trimmed, "modifier")

    return DieGroup(count=count, sides=sides, modifier=modifier)


def parse_specification(text: str) -> tuple[DieGroup, ...]:
    """Parse a full comma-separated specification.

    Raises:
        InvalidSpecification: On the first invalid term, or if the text holds
            no terms at all.
    """
    groups = tuple(
        parse_token(segment) for segment in text.split(",") if segment.strip(_WHITESPACE)
    )
    if not groups:
        raise InvalidSpecification(f"No dice terms in {text!r}", text)
    return groups


def parse(text: str) -> ParseResult:
    """Parse ``text`` without raising; inspect ``.ok`` on the result."""
    try:
        return Parsed(parse_specification(text))
    except InvalidSpecification as exc:
        logger.debug("Rejected dice specification %r: %s", text, exc)
        return ParseFailure(exc)


def render_group(group: DieGroup) -> str:
    text = f"{group.count}d{group.sides}"
    if group.modifier > 0:
        text += f"+{group.modifier}"
    elif group.modifier < 0:
        text += str(group.modifier)
    return text


def render(groups: Iterable[DieGroup]) -> str:
    """Render groups back to canonical notation, e.g. ``"2d6+2,3d10"``."""
    return ",".join(render_group(g) for g in groups)
