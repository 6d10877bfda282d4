"""Bond-perception settings and their JSON save/load."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from xyzformat._util import _field_defaults

_VALID_KEYS = frozenset({
    "perceive_bonds", "tolerance", "min_distance", "radius_overrides",
})


@dataclass
class PerceptionSettings:
    """Parameters for geometric bond perception after a decode.

    Two atoms are bonded when their distance ``d`` satisfies
    ``min_distance < d <= r_a + r_b + tolerance``, where ``r_a`` and
    ``r_b`` are covalent radii.

    Attributes:
        perceive_bonds: Whether the reader runs bond perception at all.
        tolerance: Distance added to the sum of covalent radii
            (angstroms).
        min_distance: Pairs this close or closer are never bonded
            (angstroms).  Guards against overlapping duplicate atoms.
        radius_overrides: Per-element covalent radii that replace the
            tabulated values, keyed by element symbol.
    """

    perceive_bonds: bool = True
    tolerance: float = 0.45
    min_distance: float = 0.32
    radius_overrides: dict[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.tolerance < 0:
            raise ValueError(
                f"tolerance must be non-negative, got {self.tolerance}"
            )
        if self.min_distance < 0:
            raise ValueError(
                f"min_distance must be non-negative, got {self.min_distance}"
            )
        for symbol, radius in self.radius_overrides.items():
            if radius <= 0:
                raise ValueError(
                    f"radius override for {symbol!r} must be positive, "
                    f"got {radius}"
                )

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.
        """
        defaults = _field_defaults(type(self))
        d: dict = {
            name: getattr(self, name)
            for name, default in defaults.items()
            if getattr(self, name) != default
        }
        if self.radius_overrides:
            d["radius_overrides"] = dict(self.radius_overrides)
        return d

    @classmethod
    def from_dict(cls, d: dict) -> PerceptionSettings:
        """Deserialise from a dictionary.

        Missing fields use their defaults.

        Raises:
            ValueError: If *d* contains unknown keys.
        """
        unknown = set(d) - _VALID_KEYS
        if unknown:
            raise ValueError(
                f"unknown keys in perception settings: {sorted(unknown)}"
            )
        return cls(
            perceive_bonds=d.get("perceive_bonds", True),
            tolerance=d.get("tolerance", 0.45),
            min_distance=d.get("min_distance", 0.32),
            radius_overrides=dict(d.get("radius_overrides", {})),
        )


def save_settings(path: str | Path, settings: PerceptionSettings) -> None:
    """Save perception settings to a JSON file.

    Only non-default fields are written.  The file is human-readable
    with two-space indentation.

    Args:
        path: Destination file path.
        settings: Settings to save.
    """
    Path(path).write_text(json.dumps(settings.to_dict(), indent=2) + "\n")


def load_settings(path: str | Path) -> PerceptionSettings:
    """Load perception settings from a JSON file.

    Args:
        path: Source file path.

    Returns:
        The parsed :class:`PerceptionSettings`.

    Raises:
        ValueError: If the file contains unknown keys or invalid values.
    """
    data = json.loads(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError(
            f"perception settings must be a JSON object, got "
            f"{type(data).__name__}"
        )
    return PerceptionSettings.from_dict(data)
