"""Errors raised while reading or writing XYZ data.

Every error is terminal: the reader never returns a partial molecule.
All subclasses derive from :class:`ParseError`, itself a
:class:`ValueError`, so callers can catch either.
"""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for structural and lexical XYZ errors.

    Attributes:
        message: Human-readable description of the problem.
        line_number: 1-based input line number, or ``None`` when the
            error is not tied to a line.
        line: Raw content of the offending line, or ``None``.
    """

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        self.message = message
        self.line_number = line_number
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        text = self.message
        if self.line_number is not None:
            text = f"line {self.line_number}: {text}"
        if self.line is not None:
            text = f"{text}: {self.line!r}"
        return text


class InvalidHeaderError(ParseError):
    """The atom-count line is missing or is not an unsigned integer."""


class TooFewTokensError(ParseError):
    """An atom line has fewer than the four required tokens."""


class MalformedCoordinateError(ParseError):
    """A coordinate token is not a finite number.

    Attributes:
        token: The coordinate token that failed to parse.
    """

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        line: str | None = None,
        token: str | None = None,
    ) -> None:
        self.token = token
        super().__init__(message, line_number, line)


class AtomCountMismatchError(ParseError):
    """Fewer atoms were read than the header declared.

    Attributes:
        expected: The declared atom count.
        found: The number of atoms actually read.
    """

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        line: str | None = None,
        expected: int = 0,
        found: int = 0,
    ) -> None:
        self.expected = expected
        self.found = found
        super().__init__(message, line_number, line)


class InvalidAtomError(ParseError):
    """An atom has no element symbol and cannot be written.

    Attributes:
        atom_index: 0-based index of the offending atom.
    """

    def __init__(self, message: str, atom_index: int) -> None:
        self.atom_index = atom_index
        super().__init__(message)
