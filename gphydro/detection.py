"""Detection of troubled cells for the MOOD order-reduction loop."""

from __future__ import annotations

import numpy as np

from gphydro.config import DEFAULT_GAMMA, DENS, MOMX, NUM_VAR
from gphydro.eos import pressure

SHOCK_THRESHOLD = 5.0
MACH_THRESHOLD = 0.2
ORDER_STEP = 2


class MoodError(RuntimeError):
    """Raised when a troubled cell has no lower order left to fall back to."""


def _state(values, name: str) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.ndim != 2 or array.shape[0] != NUM_VAR:
        raise ValueError(f"{name} must have shape ({NUM_VAR}, n)")
    return array


def detect_troubled(
    cons, reference, orders, dx: float, gamma: float = DEFAULT_GAMMA
) -> np.ndarray:
    """Flag the cells of a candidate update that must be recomputed.

    ``cons`` is the candidate conserved state and ``reference`` the state it
    was computed from. A cell is troubled when its candidate density or
    pressure is not positive, or when the reference state shows a strong
    compressive shock there and the candidate density leaves the range of
    its neighbours. Cells already at order 1 and the two outermost cells on
    each side are never flagged. Returns one boolean per cell.
    """
    u = _state(cons, "cons")
    ref = _state(reference, "reference")
    if u.shape != ref.shape:
        raise ValueError("cons and reference must have the same shape")
    n = u.shape[1]
    ords = np.asarray(orders)
    if ords.shape != (n,):
        raise ValueError("orders must hold one entry per cell")
    if not dx > 0.0:
        raise ValueError("dx must be positive")

    troubled = np.zeros(n, dtype=bool)
    if n < 5:
        return troubled

    c = slice(2, n - 2)
    lft = slice(1, n - 3)
    rgt = slice(3, n - 1)

    with np.errstate(all="ignore"):
        dens = u[DENS, c]
        p = pressure(u[:, c], gamma)
        unphysical = ~(dens > 0.0) | ~(p > 0.0)

        rd = ref[DENS]
        rm = ref[MOMX]
        div_v = (rm[rgt] - rm[lft]) / dx * (0.5 / rd[c]) - 0.5 * (
            rm[c] * (rd[rgt] - rd[lft]) / dx
        ) / rd[c] ** 2

        p_ref = pressure(ref, gamma)
        ca = p_ref[c] * gamma / rd[c]
        mach = np.sqrt((rm[c] ** 2 / rd[c] ** 2) / ca)

        p_left = p_ref[lft]
        p_right = p_ref[rgt]
        grad_p = 0.5 * (np.abs(p_right - p_left) / np.fmin(p_left, p_right)) / dx

        shock = (div_v < -dx * dx) & (mach > MACH_THRESHOLD) & (grad_p > SHOCK_THRESHOLD)

        ul, um, ur = rd[lft], rd[c], rd[rgt]
        local_min = np.fmin(np.fmin(ul, um), ur)
        local_max = np.fmax(np.fmin(ul, um), ur)
        not_plateau = (local_max - local_min) > dx * dx * dx
        outside = (dens > local_max) | (dens < local_min)

        flagged = unphysical | (shock & not_plateau & outside)

    troubled[c] = flagged & (ords[c] != 1)
    return troubled


def lower_orders(troubled, orders) -> np.ndarray:
    """Return new orders with every troubled cell lowered by one step.

    Raises MoodError when a troubled cell would drop below order zero.
    """
    flags = np.asarray(troubled, dtype=bool)
    ords = np.array(orders, dtype=int)
    if flags.shape != ords.shape or ords.ndim != 1:
        raise ValueError("troubled and orders must be 1-D arrays of equal length")
    ords[flags] -= ORDER_STEP
    if np.any(ords[flags] < 0):
        raise MoodError("a troubled cell is already at the lowest order")
    return ords