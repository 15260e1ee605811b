"""Run parameters for the one-dimensional hydrodynamics solver."""

from __future__ import annotations

import enum
from dataclasses import dataclass

NUM_VAR = 3
NGC = 3
DEFAULT_GAMMA = 1.4

# Row indices of the conserved state.
DENS = 0
MOMX = 1
ENER = 2

# Row indices of the primitive state.
DENSP = 0
VELX = 1
PRES = 2


class ReconMethod(enum.Enum):
    """Spatial reconstruction scheme."""

    WENO = 1
    FOG = 2
    GPR1 = 3
    GPR2 = 4
    MOOD531 = 5


class Problem(enum.Enum):
    """Test problem that sets the initial and boundary conditions."""

    SHUOSHER = 1
    SHOCKTUBE = 2


@dataclass(frozen=True)
class Config:
    """Grid, time and scheme parameters of a run."""

    nx: int = 1000
    x0: float = 0.0
    xn: float = 9.0
    t0: float = 0.0
    tn: float = 1.8
    method: ReconMethod = ReconMethod.WENO
    problem: Problem = Problem.SHUOSHER
    cfl: float = 0.8
    rk_order: int = 3
    ell: float = 6.0
    mood_order: int = 5
    slow_start: bool = False
    gamma: float = DEFAULT_GAMMA
    ngc: int = NGC

    def __post_init__(self) -> None:
        if self.nx < 1:
            raise ValueError("nx must be at least 1")
        if not self.xn > self.x0:
            raise ValueError("xn must be greater than x0")
        if self.tn < self.t0:
            raise ValueError("tn must not be before t0")
        if not self.cfl > 0.0:
            raise ValueError("cfl must be positive")
        if self.rk_order not in (1, 3):
            raise ValueError("rk_order must be 1 or 3")
        if not self.ell > 0.0:
            raise ValueError("ell must be positive")
        if not self.gamma > 1.0:
            raise ValueError("gamma must be greater than 1")
        if self.ngc < NGC:
            raise ValueError(f"at least {NGC} ghost cells are required")

    @property
    def dx(self) -> float:
        """Cell width."""
        return (self.xn - self.x0) / self.nx

    @property
    def xdim(self) -> int:
        """Number of cells including ghost cells on both sides."""
        return 2 * self.ngc + self.nx

    @property
    def xstart(self) -> int:
        """Index of the first interior cell."""
        return self.ngc

    @property
    def xend(self) -> int:
        """Index one past the last interior cell."""
        return self.xdim - self.ngc