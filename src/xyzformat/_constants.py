"""Shared constants used across the model and I/O layers."""

FORMAT_NAME: str = "XYZ"
"""Human-readable name of the format."""

FILE_EXTENSIONS: tuple[str, ...] = ("xyz",)
"""File extensions advertised for the format (without the leading dot)."""

MIME_TYPES: tuple[str, ...] = ("chemical/x-xyz",)
"""MIME types advertised for the format."""

DEFAULT_COMMENT: str = "XYZ file generated by xyzformat."
"""Comment line written when a snapshot carries no name."""

MAX_ATOM_COUNT: int = 2**31 - 1
"""Largest declared atom count accepted on a header line."""
