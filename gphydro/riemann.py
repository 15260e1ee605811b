"""HLL approximate Riemann solver for the 1-D Euler equations."""

from __future__ import annotations

import numpy as np

from gphydro.config import DEFAULT_GAMMA, NUM_VAR, VELX
from gphydro.eos import cons_to_prims, physical_flux, sound_speed


def _conserved(values) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.ndim == 0 or array.shape[0] != NUM_VAR:
        raise ValueError(f"state must have {NUM_VAR} variables on its first axis")
    return array


def hll_interface(cons_left, cons_right, gamma: float = DEFAULT_GAMMA) -> np.ndarray:
    """HLL flux across interfaces between left and right conserved states.

    Both states have the three conserved variables on their first axis and
    the same trailing shape; the flux has that shape too.
    """
    ul = _conserved(cons_left)
    ur = _conserved(cons_right)
    if ul.shape != ur.shape:
        raise ValueError("left and right states must have the same shape")

    pl = cons_to_prims(ul, gamma)
    pr = cons_to_prims(ur, gamma)
    cl = sound_speed(pl, gamma)
    cr = sound_speed(pr, gamma)

    sl = np.minimum(pl[VELX] - cl, pr[VELX] - cr)
    sr = np.maximum(pl[VELX] + cl, pr[VELX] + cr)

    fl = physical_flux(pl, ul, gamma)
    fr = physical_flux(pr, ur, gamma)
    with np.errstate(divide="ignore", invalid="ignore"):
        star = (sr * fl - sl * fr + sl * sr * (ur - ul)) / (sr - sl)

    return np.where(0.0 <= sl, fl, np.where(0.0 <= sr, star, fr))


def hll(left_faces, right_faces, start: int, stop: int, gamma: float = DEFAULT_GAMMA) -> np.ndarray:
    """Interface fluxes for the faces between cells i and i+1, i in [start, stop).

    ``left_faces`` and ``right_faces`` are the reconstructed values at the
    left and right face of every cell, each of shape ``(3, n)``. Entry ``i``
    of the result is the flux leaving cell ``i`` through its right face;
    entries outside the range are zero.
    """
    lf = _conserved(left_faces)
    rf = _conserved(right_faces)
    if lf.ndim != 2 or lf.shape != rf.shape:
        raise ValueError(f"face arrays must both have shape ({NUM_VAR}, n)")
    n = lf.shape[1]
    if start > stop:
        raise ValueError("start must not be after stop")
    if start < 0 or stop + 1 > n:
        raise ValueError(f"interfaces {start}..{stop - 1} do not fit a domain of {n} cells")

    flux = np.zeros_like(lf)
    flux[:, start:stop] = hll_interface(rf[:, start:stop], lf[:, start + 1 : stop + 1], gamma)
    return flux