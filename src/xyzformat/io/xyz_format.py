from __future__ import annotations

from pathlib import Path
from typing import ClassVar, TextIO

from xyzformat._constants import FILE_EXTENSIONS, FORMAT_NAME, MIME_TYPES
from xyzformat.elements import ElementService
from xyzformat.io.reader import decode, read_xyz
from xyzformat.io.writer import encode, write_xyz
from xyzformat.model import MoleculeSnapshot
from xyzformat.settings import PerceptionSettings


class XyzFormat:
    """Format descriptor bundling the XYZ reader and writer.

    Carries the static metadata a format registry needs to pick this
    handler (name, extensions, MIME types) and forwards reads and
    writes to :func:`~xyzformat.io.read_xyz` and
    :func:`~xyzformat.io.write_xyz`.  No content sniffing is done.

    Args:
        elements: Element service used for both reading and writing.
        settings: Bond-perception settings applied on every read.
    """

    name: ClassVar[str] = FORMAT_NAME
    file_extensions: ClassVar[tuple[str, ...]] = FILE_EXTENSIONS
    mime_types: ClassVar[tuple[str, ...]] = MIME_TYPES

    def __init__(
        self,
        elements: ElementService | None = None,
        settings: PerceptionSettings | None = None,
    ) -> None:
        self.elements = elements
        self.settings = settings

    @classmethod
    def can_handle(cls, path: str | Path) -> bool:
        """Return ``True`` if *path* has an XYZ file extension."""
        suffix = Path(path).suffix.lower().lstrip(".")
        return suffix in cls.file_extensions

    def read(self, source: str | Path | TextIO) -> MoleculeSnapshot:
        """Read a snapshot from a path, stream, or inline content."""
        return read_xyz(source, elements=self.elements, settings=self.settings)

    def read_string(self, text: str) -> MoleculeSnapshot:
        """Read a snapshot from XYZ text."""
        return decode(text, elements=self.elements, settings=self.settings)

    def write(
        self,
        snapshot: MoleculeSnapshot,
        destination: str | Path | TextIO,
    ) -> None:
        """Write *snapshot* to a path or stream."""
        write_xyz(snapshot, destination, elements=self.elements)

    def write_string(self, snapshot: MoleculeSnapshot) -> str:
        """Return *snapshot* encoded as XYZ text."""
        return encode(snapshot, elements=self.elements)
