"""XYZ decoder: atom count, comment, atom block, then optional frames."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

import numpy as np

from xyzformat._constants import FILE_EXTENSIONS, MAX_ATOM_COUNT
from xyzformat.elements import PERIODIC_TABLE, ElementService
from xyzformat.io.errors import (
    AtomCountMismatchError,
    InvalidHeaderError,
    MalformedCoordinateError,
    TooFewTokensError,
)
from xyzformat.io.lines import LineReader
from xyzformat.io.tokens import (
    parse_float,
    parse_int,
    resolve_element,
    split_tokens,
)
from xyzformat.model import Molecule, MoleculeBuilder, MoleculeSnapshot
from xyzformat.settings import PerceptionSettings

logger = logging.getLogger(__name__)

ENCODING = "latin-1"
"""Text encoding used when reading from or writing to a path."""


@dataclass
class _DecodeState:
    """Running state owned by a single :func:`decode` call."""

    declared: int
    frames_read: int = 0


def decode(
    stream: Iterable[str],
    *,
    builder: MoleculeBuilder | None = None,
    elements: ElementService | None = None,
    settings: PerceptionSettings | None = None,
) -> MoleculeSnapshot:
    """Decode XYZ text into a molecule snapshot.

    The first block sets the atoms and their frame 0 positions.  After
    it, each further block whose header repeats the declared atom count
    is read as an extra frame.  A missing line, a line that is not an
    integer, or a different count after a block ends the trajectory
    quietly; this format has no end-of-animation marker.

    Args:
        stream: Lines of XYZ text, e.g. an open text file, an
            :class:`io.StringIO`, a list of lines, or a whole string.
        builder: Molecule to populate.  Defaults to a fresh
            :class:`~xyzformat.model.Molecule`.
        elements: Element service for symbol lookup.  Defaults to the
            built-in periodic table.
        settings: Bond-perception settings.  Defaults to
            :class:`~xyzformat.settings.PerceptionSettings` defaults.

    Returns:
        The populated snapshot, with perceived bonds unless
        ``settings.perceive_bonds`` is ``False``.

    Raises:
        InvalidHeaderError: If the first line is not an unsigned
            integer.
        TooFewTokensError: If an atom line has fewer than four tokens.
        MalformedCoordinateError: If a coordinate is not a finite
            number.
        AtomCountMismatchError: If the stream ends before a block has
            supplied every declared atom.
    """
    if isinstance(stream, str):
        stream = io.StringIO(stream, newline=None)
    if elements is None:
        elements = PERIODIC_TABLE
    if builder is None:
        builder = Molecule(elements)
    if settings is None:
        settings = PerceptionSettings()

    reader = LineReader(stream)
    state = _DecodeState(declared=_read_header(reader))

    comment = reader.next_line()
    if comment is not None and comment.strip():
        builder.set_name(comment.strip())

    _read_atoms(reader, builder, elements, state.declared)
    if builder.atom_count() != state.declared:
        found = builder.atom_count()
        raise AtomCountMismatchError(
            f"expected {state.declared} atom(s) but read {found}; "
            f"error parsing atom at index {found}",
            line_number=3 + found,
            expected=state.declared,
            found=found,
        )

    initial_positions = builder.positions(0)
    while _next_frame_follows(reader, state.declared):
        label = reader.next_line()
        positions = _read_positions(reader, state)
        if state.frames_read == 0:
            builder.set_frame(initial_positions, 0)
        state.frames_read += 1
        builder.set_frame(
            positions, state.frames_read,
            label=label.strip() if label is not None else "",
        )

    logger.debug(
        "Decoded %d atom(s) with %d extra frame(s)",
        state.declared, state.frames_read,
    )

    if settings.perceive_bonds:
        builder.perceive_bonds_from_geometry(settings)
    return builder.to_snapshot()


def read_xyz(
    source: str | Path | TextIO,
    **kwargs,
) -> MoleculeSnapshot:
    """Read an XYZ file from a path, an open stream, or inline content.

    A string containing no newline that names an existing file is read
    as a path; any other string is treated as XYZ content, except a
    single-line string ending in an XYZ file extension, which must name
    an existing file.

    Args:
        source: Path, open text stream, or XYZ text.
        **kwargs: Passed to :func:`decode`.

    Returns:
        The decoded snapshot.

    Raises:
        FileNotFoundError: If *source* looks like an XYZ file name but
            no such file exists.
    """
    if isinstance(source, str) and "\n" not in source:
        path = Path(source)
        if path.is_file():
            source = path
        elif path.suffix.lower().lstrip(".") in FILE_EXTENSIONS:
            raise FileNotFoundError(f"no such XYZ file: {source!r}")
    if isinstance(source, Path):
        with source.open(encoding=ENCODING) as handle:
            return decode(handle, **kwargs)
    return decode(source, **kwargs)


def _read_header(reader: LineReader) -> int:
    line = reader.next_line()
    if line is None:
        raise InvalidHeaderError("missing atom count", line_number=1)
    try:
        count = parse_int(line)
    except ValueError:
        raise InvalidHeaderError(
            "error parsing number of atoms", line_number=1, line=line,
        ) from None
    if count < 0:
        raise InvalidHeaderError(
            "number of atoms must not be negative", line_number=1, line=line,
        )
    if count > MAX_ATOM_COUNT:
        raise InvalidHeaderError(
            f"number of atoms exceeds {MAX_ATOM_COUNT}",
            line_number=1, line=line,
        )
    return count


def _read_atoms(
    reader: LineReader,
    builder: MoleculeBuilder,
    elements: ElementService,
    n_atoms: int,
) -> None:
    """Add up to *n_atoms* atoms; stops early only at end of stream."""
    for _ in range(n_atoms):
        line = reader.next_line()
        if line is None:
            return
        tokens = _atom_tokens(line, reader.line_number)
        atomic_number = resolve_element(tokens[0], elements)
        xyz = _parse_xyz(tokens, line, reader.line_number)
        handle = builder.add_atom(atomic_number)
        builder.set_position(handle, xyz)


def _next_frame_follows(reader: LineReader, declared: int) -> bool:
    """Consume a frame header if the next line repeats *declared*."""
    line = reader.next_line()
    if line is None:
        logger.debug("No further frames: end of stream")
        return False
    try:
        count = parse_int(line)
    except ValueError:
        logger.debug("No further frames: %r is not an atom count", line)
        reader.push_back(line)
        return False
    if count != declared:
        logger.debug(
            "No further frames: atom count %d differs from %d",
            count, declared,
        )
        reader.push_back(line)
        return False
    return True


def _read_positions(reader: LineReader, state: _DecodeState) -> np.ndarray:
    """Read one frame's positions; element tokens are not re-checked."""
    n_atoms = state.declared
    positions = np.empty((n_atoms, 3))
    for i in range(n_atoms):
        line = reader.next_line()
        if line is None:
            raise AtomCountMismatchError(
                f"frame {state.frames_read + 1} ended after {i} of "
                f"{n_atoms} atom(s)",
                line_number=reader.line_number + 1,
                expected=n_atoms,
                found=i,
            )
        tokens = _atom_tokens(line, reader.line_number)
        positions[i] = _parse_xyz(tokens, line, reader.line_number)
    return positions


def _atom_tokens(line: str, line_number: int) -> list[str]:
    tokens = split_tokens(line)
    if len(tokens) < 4:
        raise TooFewTokensError(
            "not enough tokens in this line",
            line_number=line_number, line=line,
        )
    return tokens


def _parse_xyz(
    tokens: list[str],
    line: str,
    line_number: int,
) -> tuple[float, float, float]:
    values = []
    for token in tokens[1:4]:
        try:
            values.append(parse_float(token))
        except ValueError:
            raise MalformedCoordinateError(
                f"invalid coordinate {token!r}",
                line_number=line_number, line=line, token=token,
            ) from None
    return values[0], values[1], values[2]
