"""Time step selection from the CFL condition."""

from __future__ import annotations

import numpy as np

from gphydro.config import NUM_VAR, VELX, Config
from gphydro.eos import cons_to_prims, sound_speed

_SPEED_FLOOR = 1e-100


def signal_speeds(prims, cs) -> tuple[np.ndarray, np.ndarray]:
    """Return the slowest and fastest signal speeds, u - c and u + c."""
    p = np.asarray(prims, dtype=float)
    if p.ndim == 0 or p.shape[0] != NUM_VAR:
        raise ValueError(f"state must have {NUM_VAR} variables on its first axis")
    c = np.asarray(cs, dtype=float)
    u = p[VELX]
    return u - c, u + c


def find_dt(
    cons, config: Config, t: float | None = None, dt_sim: float = 1e-10
) -> tuple[float, float]:
    """Return the next time step and the updated slow-start limit.

    The step is ``cfl * dx`` over the largest ``|u| + c`` among the interior
    cells and one ghost cell on each side, clipped so that ``t + dt`` does
    not pass ``config.tn``. With slow start the step is further capped by
    ``dt_sim``, which then doubles.
    """
    u = np.asarray(cons, dtype=float)
    if u.shape != (NUM_VAR, config.xdim):
        raise ValueError(f"state must have shape ({NUM_VAR}, {config.xdim})")
    if t is None:
        t = config.t0

    prims = cons_to_prims(u, config.gamma)
    cs = sound_speed(prims, config.gamma)
    speeds = np.abs(prims[VELX]) + cs

    window = speeds[config.xstart - 1 : config.xend + 1]
    finite = window[~np.isnan(window)]
    fastest = max(_SPEED_FLOOR, float(finite.max())) if finite.size else _SPEED_FLOOR

    dt = config.cfl * (config.dx / fastest)
    if t + dt > config.tn:
        dt = config.tn - t

    if config.slow_start and dt > dt_sim:
        dt = dt_sim
        dt_sim *= 2.0
    return dt, dt_sim