"""Demo script: read a CH4 trajectory, report it, and write frame 0 back out."""

import logging
from pathlib import Path

from xyzformat import read_xyz, write_xyz

FIXTURES = Path(__file__).resolve().parent.parent / "tests" / "fixtures"
OUTPUT = Path(__file__).resolve().parent / "ch4_frame0.xyz"


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    snapshot = read_xyz(FIXTURES / "ch4_traj.xyz")
    print(f"Loaded {snapshot.name!r}: {snapshot.n_atoms} atoms, "
          f"{snapshot.n_frames} frame(s)")
    print(f"Symbols: {snapshot.symbols}")
    print(f"Bonds: {[(b.index_a, b.index_b) for b in snapshot.bonds]}")
    for i, frame in enumerate(snapshot.frames, start=1):
        print(f"Frame {i} ({frame.label!r}): C at {frame.coords[0]}")

    write_xyz(snapshot, OUTPUT)
    print(f"Wrote frame 0 to {OUTPUT}")


if __name__ == "__main__":
    main()
