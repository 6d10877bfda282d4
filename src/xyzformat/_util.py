"""Serialisation helpers shared by settings dataclasses."""

from __future__ import annotations

import dataclasses

_defaults_cache: dict[type, dict] = {}


def _field_defaults(cls: type) -> dict:
    """Return ``{field_name: default}`` for the plain defaults of a dataclass.

    Fields without a default, and fields built by ``default_factory``,
    are left out; their ``default`` is ``MISSING`` in both cases.
    ``to_dict()`` implementations use this to skip fields that still
    hold their default value.  Results are cached per class.
    """
    if cls not in _defaults_cache:
        _defaults_cache[cls] = {
            f.name: f.default
            for f in dataclasses.fields(cls)
            if f.default is not dataclasses.MISSING
        }
    return _defaults_cache[cls]
