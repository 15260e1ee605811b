"""Writing of the final primitive state to data files."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from gphydro.config import DENSP, NUM_VAR, PRES, VELX, Config

OUTPUT_FILES = (
    ("Density.dat", DENSP),
    ("VelocityX.dat", VELX),
    ("Pressure.dat", PRES),
)


def format_row(values) -> str:
    """Format values as one line, each written with %.9g and a trailing space."""
    return "".join("%.9g " % float(v) for v in values) + "\n"


def write_results(prims, config: Config, directory="OutputData") -> list[Path]:
    """Write density, velocity and pressure of the interior cells.

    Each quantity goes to its own file in ``directory``, which must exist.
    Returns the paths written.
    """
    p = np.asarray(prims, dtype=float)
    if p.shape != (NUM_VAR, config.xdim):
        raise ValueError(f"state must have shape ({NUM_VAR}, {config.xdim})")
    base = Path(directory)
    interior = p[:, config.xstart : config.xend]
    paths = []
    for name, row in OUTPUT_FILES:
        path = base / name
        with path.open("w") as handle:
            handle.write(format_row(interior[row]))
        paths.append(path)
    return paths