"""Reading and writing the XYZ coordinate format."""

from xyzformat.io.errors import (
    AtomCountMismatchError,
    InvalidAtomError,
    InvalidHeaderError,
    MalformedCoordinateError,
    ParseError,
    TooFewTokensError,
)
from xyzformat.io.lines import LineReader
from xyzformat.io.reader import decode, read_xyz
from xyzformat.io.tokens import (
    parse_float,
    parse_int,
    resolve_element,
    split_tokens,
)
from xyzformat.io.writer import encode, format_atom_line, write_xyz
from xyzformat.io.xyz_format import XyzFormat

__all__ = [
    "AtomCountMismatchError",
    "InvalidAtomError",
    "InvalidHeaderError",
    "LineReader",
    "MalformedCoordinateError",
    "ParseError",
    "TooFewTokensError",
    "XyzFormat",
    "decode",
    "encode",
    "format_atom_line",
    "parse_float",
    "parse_int",
    "read_xyz",
    "resolve_element",
    "split_tokens",
    "write_xyz",
]
