"""Tokenising and strict numeric casts for XYZ lines."""

from __future__ import annotations

import logging
import math
import re

from xyzformat.elements import MAX_ATOMIC_NUMBER, ElementService

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def split_tokens(line: str) -> list[str]:
    """Split *line* on runs of whitespace, discarding empty tokens."""
    return line.split()


def parse_int(token: str) -> int:
    """Parse a whole token as a decimal integer.

    Unlike :func:`int`, underscores and trailing text are rejected, so
    ``"12abc"`` and ``"1_000"`` fail instead of being read as numbers.

    Raises:
        ValueError: If *token* is not entirely an optionally signed
            decimal integer.
    """
    token = token.strip()
    if not _INT_RE.fullmatch(token):
        raise ValueError(f"not an integer: {token!r}")
    return int(token)


def parse_float(token: str) -> float:
    """Parse a whole token as a finite decimal floating-point number.

    Raises:
        ValueError: If *token* is not entirely a decimal number, or
            names ``nan`` or ``inf``.
    """
    token = token.strip()
    if not _FLOAT_RE.fullmatch(token):
        raise ValueError(f"not a number: {token!r}")
    value = float(token)
    if not math.isfinite(value):
        # Huge exponents such as 1e999 overflow to inf.
        raise ValueError(f"number out of range: {token!r}")
    return value


def resolve_element(token: str, elements: ElementService) -> int:
    """Resolve the element column of an atom line to an atomic number.

    A token starting with a letter is looked up as an element symbol.
    Anything else is read as an atomic number.  Tokens that resolve to
    nothing give ``0`` (unknown element) rather than an error.

    Args:
        token: The first token of an atom line.
        elements: Element service used for symbol lookup.

    Returns:
        The atomic number, or ``0`` if the token is not recognised.
    """
    if token[0].isalpha():
        atomic_number = elements.symbol_to_atomic_number(token)
        if atomic_number == 0:
            logger.warning("Unknown element symbol %r", token)
        return atomic_number
    try:
        atomic_number = parse_int(token)
    except ValueError:
        logger.warning("Unrecognised element token %r", token)
        return 0
    if not 0 <= atomic_number <= MAX_ATOMIC_NUMBER:
        logger.warning("Atomic number %d out of range", atomic_number)
        return 0
    return atomic_number
