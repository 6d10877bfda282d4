"""XYZ encoder: one atom count, one comment line, one line per atom."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from xyzformat._constants import DEFAULT_COMMENT
from xyzformat.elements import PERIODIC_TABLE, ElementService
from xyzformat.io.errors import InvalidAtomError
from xyzformat.io.reader import ENCODING
from xyzformat.model import MoleculeSnapshot


def format_atom_line(symbol: str, x: float, y: float, z: float) -> str:
    """Format one atom line: symbol in 3 columns, coordinates in 10.5f."""
    return f"{symbol:<3} {x:>10.5f} {y:>10.5f} {z:>10.5f}\n"


def encode(
    snapshot: MoleculeSnapshot,
    *,
    elements: ElementService | None = None,
) -> str:
    """Encode the frame 0 geometry of *snapshot* as XYZ text.

    Extra frames are not written, so decoding the output of a
    trajectory gives back its first frame only.

    Args:
        snapshot: The molecule to write.
        elements: Element service for symbol lookup.  Defaults to the
            built-in periodic table.

    Returns:
        The XYZ text, newline-terminated.

    Raises:
        InvalidAtomError: If an atom's atomic number has no symbol.
    """
    if elements is None:
        elements = PERIODIC_TABLE

    lines = [
        f"{snapshot.n_atoms}\n",
        f"{snapshot.name or DEFAULT_COMMENT}\n",
    ]
    for i, atom in enumerate(snapshot.atoms):
        symbol = elements.atomic_number_to_symbol(atom.atomic_number)
        if not symbol:
            raise InvalidAtomError(
                f"internal error: atom {i} has atomic number "
                f"{atom.atomic_number}, which has no element symbol",
                atom_index=i,
            )
        x, y, z = atom.position
        lines.append(format_atom_line(symbol, x, y, z))
    return "".join(lines)


def write_xyz(
    snapshot: MoleculeSnapshot,
    destination: str | Path | TextIO,
    **kwargs,
) -> None:
    """Write *snapshot* to a path or an open text stream.

    The text is fully encoded before anything is written, so a failed
    encode leaves *destination* untouched.

    Args:
        snapshot: The molecule to write.
        destination: File path, or a writable text stream.
        **kwargs: Passed to :func:`encode`.
    """
    text = encode(snapshot, **kwargs)
    if isinstance(destination, (str, Path)):
        Path(destination).write_text(text, encoding=ENCODING)
    else:
        destination.write(text)
