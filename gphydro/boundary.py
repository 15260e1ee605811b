"""Boundary conditions applied to the ghost cells of a conserved state."""

from __future__ import annotations

import numpy as np

from gphydro.config import DEFAULT_GAMMA, NGC, NUM_VAR
from gphydro.eos import prims_to_cons

# Post-shock inflow state of the Shu-Osher problem.
SHU_OSHER_INFLOW = (3.857143, 2.629369, 10.333333333)


def _checked(cons, ngc: int) -> np.ndarray:
    array = np.array(cons, dtype=float)
    if array.ndim != 2 or array.shape[0] != NUM_VAR:
        raise ValueError(f"state must have shape ({NUM_VAR}, n)")
    if ngc < 0:
        raise ValueError("ngc must not be negative")
    if array.shape[1] < 2 * ngc + 1:
        raise ValueError("domain has no interior cells")
    return array


def neumann(cons, ngc: int = NGC) -> np.ndarray:
    """Return a copy of ``cons`` with zero-gradient ghost cells on both sides."""
    u = _checked(cons, ngc)
    n = u.shape[1]
    u[:, :ngc] = u[:, ngc : ngc + 1]
    u[:, n - ngc :] = u[:, n - ngc - 1 : n - ngc]
    return u


def shu_osher(cons, ngc: int = NGC, gamma: float = DEFAULT_GAMMA) -> np.ndarray:
    """Return a copy of ``cons`` with a fixed inflow on the left, outflow on the right."""
    u = _checked(cons, ngc)
    n = u.shape[1]
    inflow = prims_to_cons(np.array(SHU_OSHER_INFLOW), gamma)
    u[:, :ngc] = inflow[:, np.newaxis]
    u[:, n - ngc :] = u[:, n - ngc - 1 : n - ngc]
    return u