"""Initial conditions of the test problems."""

from __future__ import annotations

import numpy as np

from gphydro.config import Config
from gphydro.eos import prims_to_cons


def _cell_offsets(config: Config) -> np.ndarray:
    return np.arange(config.xdim, dtype=float) - config.xstart


def shu_osher(config: Config) -> tuple[np.ndarray, np.ndarray]:
    """Shu-Osher shock-entropy wave interaction.

    Returns the cell-centre coordinates, running from -4.5 at the first
    interior face, and the conserved state including ghost cells.
    """
    dx = config.dx
    x = -4.5 + (dx * 0.5 + dx * _cell_offsets(config))
    shocked = x + 4.5 <= 0.5
    prims = np.stack(
        [
            np.where(shocked, 3.857143, 1.0 + 0.2 * np.sin(5.0 * x)),
            np.where(shocked, 2.629369, 0.0),
            np.where(shocked, 10.33333, 1.0),
        ]
    )
    return x, prims_to_cons(prims, config.gamma)


def shock_tube(config: Config) -> tuple[np.ndarray, np.ndarray]:
    """Sod shock tube with the discontinuity at x = 0.5.

    Returns the cell-centre coordinates and the conserved state including
    ghost cells.
    """
    dx = config.dx
    x = config.x0 + dx * _cell_offsets(config) + 0.5 * dx
    left = x <= 0.5
    prims = np.stack(
        [
            np.where(left, 1.0, 0.125),
            np.zeros_like(x),
            np.where(left, 1.0, 0.1),
        ]
    )
    return x, prims_to_cons(prims, config.gamma)