"""Ideal-gas conversions and physical fluxes for the 1-D Euler equations.

States are arrays whose first axis holds the three variables: density,
momentum and total energy for conserved states; density, velocity and
pressure for primitive states. Any trailing shape is allowed.
"""

from __future__ import annotations

import numpy as np

from gphydro.config import DEFAULT_GAMMA, NUM_VAR


def _state(values) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.ndim == 0 or array.shape[0] != NUM_VAR:
        raise ValueError(f"state must have {NUM_VAR} variables on its first axis")
    return array


def prims_to_cons(prims, gamma: float = DEFAULT_GAMMA) -> np.ndarray:
    """Convert density, velocity and pressure to conserved variables."""
    d, vx, p = _state(prims)
    e = p / ((gamma - 1.0) * d)
    return np.stack([d, d * vx, vx * vx * d * 0.5 + e * d])


def cons_to_prims(cons, gamma: float = DEFAULT_GAMMA) -> np.ndarray:
    """Convert density, momentum and energy to primitive variables."""
    d, mx, energy = _state(cons)
    vx = mx / d
    e = energy / d - 0.5 * vx * vx
    return np.stack([d, vx, (gamma - 1.0) * d * e])


def pressure(cons, gamma: float = DEFAULT_GAMMA) -> np.ndarray:
    """Pressure of a conserved state."""
    d, mx, energy = _state(cons)
    return (gamma - 1.0) * (energy - 0.5 * mx * mx / d)


def sound_speed(prims, gamma: float = DEFAULT_GAMMA) -> np.ndarray:
    """Adiabatic sound speed of a primitive state."""
    d, _, p = _state(prims)
    ratio = np.asarray(p * gamma / d)
    if np.any(~(ratio >= 0.0)):
        raise ValueError("sound speed of a state with negative or invalid pressure")
    return np.sqrt(ratio)


def physical_flux(prims, cons, gamma: float = DEFAULT_GAMMA) -> np.ndarray:
    """Euler flux of a state given in both primitive and conserved form."""
    d, vx, p = _state(prims)
    mx = _state(cons)[1]
    return np.stack(
        [
            mx,
            mx * vx + p,
            (p / (gamma - 1.0) + 0.5 * vx * vx * d + p) * vx,
        ]
    )