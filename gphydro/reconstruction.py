"""Face reconstruction of cell-averaged conserved variables.

Each reconstruction takes a conserved state of shape ``(3, n)`` and a cell
range ``[start, stop)``. It returns two arrays of the same shape as the
state. The first holds the value at the left face of each cell and the
second the value at the right face. Entries outside the range are zero.
"""

from __future__ import annotations

import numpy as np

from gphydro.config import NUM_VAR

_WENO_EPS = 1e-36


def _state(cons) -> np.ndarray:
    array = np.asarray(cons, dtype=float)
    if array.ndim != 2 or array.shape[0] != NUM_VAR:
        raise ValueError(f"state must have shape ({NUM_VAR}, n)")
    return array


def _check_range(u: np.ndarray, start: int, stop: int, margin: int) -> None:
    n = u.shape[1]
    if start > stop:
        raise ValueError("start must not be after stop")
    if start - margin < 0 or stop + margin > n:
        raise ValueError(
            f"cells {start}..{stop - 1} need {margin} neighbouring cells on "
            f"each side inside a domain of {n} cells"
        )


def _weights(weights, size: int | None = None) -> np.ndarray:
    w = np.asarray(weights, dtype=float)
    if w.ndim != 1 or w.size % 2 != 1:
        raise ValueError("weights must be a 1-D array of odd length")
    if size is not None and w.size != size:
        raise ValueError(f"expected {size} weights, got {w.size}")
    return w


def _stencil_sum(u: np.ndarray, start: int, stop: int, weights: np.ndarray) -> np.ndarray:
    radius = weights.size // 2
    return sum(
        w * u[:, start - radius + k : stop - radius + k]
        for k, w in enumerate(weights)
    )


def _faces(u: np.ndarray, start: int, stop: int, left, right) -> tuple[np.ndarray, np.ndarray]:
    left_faces = np.zeros_like(u)
    right_faces = np.zeros_like(u)
    left_faces[:, start:stop] = left
    right_faces[:, start:stop] = right
    return left_faces, right_faces


def reconstruct_fog(cons, start: int, stop: int) -> tuple[np.ndarray, np.ndarray]:
    """First-order Godunov: both faces take the cell average."""
    u = _state(cons)
    _check_range(u, start, stop, 0)
    cells = u[:, start:stop]
    return _faces(u, start, stop, cells, cells)


def reconstruct_weno(cons, start: int, stop: int) -> tuple[np.ndarray, np.ndarray]:
    """Fifth-order WENO reconstruction of both faces of each cell."""
    u = _state(cons)
    _check_range(u, start, stop, 2)
    um2 = u[:, start - 2 : stop - 2]
    um1 = u[:, start - 1 : stop - 1]
    u0 = u[:, start:stop]
    up1 = u[:, start + 1 : stop + 1]
    up2 = u[:, start + 2 : stop + 2]

    p1l = (-1.0 / 6.0) * um2 + (5.0 / 6.0) * um1 + (1.0 / 3.0) * u0
    p1r = (1.0 / 3.0) * um2 + (-7.0 / 6.0) * um1 + (11.0 / 6.0) * u0
    p2l = (1.0 / 3.0) * um1 + (5.0 / 6.0) * u0 + (-1.0 / 6.0) * up1
    p2r = (-1.0 / 6.0) * um1 + (5.0 / 6.0) * u0 + (1.0 / 3.0) * up1
    p3l = (11.0 / 6.0) * u0 + (-7.0 / 6.0) * up1 + (1.0 / 3.0) * up2
    p3r = (1.0 / 3.0) * u0 + (5.0 / 6.0) * up1 + (-1.0 / 6.0) * up2

    beta1 = (13.0 / 12.0) * (um2 - 2.0 * um1 + u0) ** 2 + 0.25 * (
        um2 - 4.0 * um1 + 3.0 * u0
    ) ** 2
    beta2 = (13.0 / 12.0) * (um1 - 2.0 * u0 + up1) ** 2 + 0.25 * (um1 - up1) ** 2
    beta3 = (13.0 / 12.0) * (u0 - 2.0 * up1 + up2) ** 2 + 0.25 * (
        3.0 * u0 - 4.0 * up1 + up2
    ) ** 2

    w1l = 0.3 / (_WENO_EPS + beta1)
    w1r = 0.1 / (_WENO_EPS + beta1)
    w2l = 0.6 / (_WENO_EPS + beta2)
    w2r = 0.6 / (_WENO_EPS + beta2)
    w3l = 0.1 / (_WENO_EPS + beta3)
    w3r = 0.3 / (_WENO_EPS + beta3)

    left = (w1l * p1l + w2l * p2l + w3l * p3l) / (w1l + w2l + w3l)
    right = (w1r * p1r + w2r * p2r + w3r * p3r) / (w1r + w2r + w3r)
    return _faces(u, start, stop, left, right)


def reconstruct_gp(
    cons, start: int, stop: int, left_weights, right_weights
) -> tuple[np.ndarray, np.ndarray]:
    """Gaussian-process reconstruction with precomputed stencil weights.

    ``left_weights`` predict the left face and ``right_weights`` the right
    face from the centred stencil of ``len(weights)`` cells.
    """
    u = _state(cons)
    wl = _weights(left_weights)
    wr = _weights(right_weights, wl.size)
    _check_range(u, start, stop, wl.size // 2)
    left = _stencil_sum(u, start, stop, wl)
    right = _stencil_sum(u, start, stop, wr)
    return _faces(u, start, stop, left, right)


def reconstruct_mood(
    cons, start: int, stop: int, orders, r1_weights, r2_weights
) -> tuple[np.ndarray, np.ndarray]:
    """Order-adaptive reconstruction used by the MOOD scheme.

    Each face uses the lower of the orders of the two cells sharing it:
    order 5 uses the radius-2 GP weights, order 3 the radius-1 GP weights,
    and anything else the cell average. ``r1_weights`` and ``r2_weights``
    are ``(left, right)`` pairs of weight arrays.
    """
    u = _state(cons)
    ords = np.asarray(orders)
    if ords.ndim != 1 or ords.size != u.shape[1]:
        raise ValueError("orders must hold one entry per cell")
    r1_left, r1_right = (_weights(w, 3) for w in r1_weights)
    r2_left, r2_right = (_weights(w, 5) for w in r2_weights)
    _check_range(u, start, stop, 1)

    centre = ords[start:stop]
    left_order = np.minimum(centre, ords[start - 1 : stop - 1])
    right_order = np.minimum(centre, ords[start + 1 : stop + 1])

    cells = u[:, start:stop]
    left = cells.copy()
    right = cells.copy()

    use_r1_left = left_order == 3
    use_r1_right = right_order == 3
    if use_r1_left.any() or use_r1_right.any():
        left = np.where(use_r1_left, _stencil_sum(u, start, stop, r1_left), left)
        right = np.where(use_r1_right, _stencil_sum(u, start, stop, r1_right), right)

    use_r2_left = left_order == 5
    use_r2_right = right_order == 5
    if use_r2_left.any() or use_r2_right.any():
        _check_range(u, start, stop, 2)
        left = np.where(use_r2_left, _stencil_sum(u, start, stop, r2_left), left)
        right = np.where(use_r2_right, _stencil_sum(u, start, stop, r2_right), right)

    return _faces(u, start, stop, left, right)