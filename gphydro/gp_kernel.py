"""Gaussian-process reconstruction weights for cell-averaged data."""

from __future__ import annotations

import math

import numpy as np

from gphydro.cholesky import cholesky_decompose, cholesky_solve

_SQRT_PI = math.sqrt(math.pi)
_FACE_POSITION = {"left": -0.5, "right": 0.5}


class GPKernel:
    """Squared-exponential kernel integrated over unit-width cells."""

    def __init__(self, ell: float = 6.0) -> None:
        if not ell > 0.0:
            raise ValueError("ell must be positive")
        self.ell = float(ell)
        self.sigdel = self.ell * math.sqrt(2.0)

    def covariance(self, x: float, y: float) -> float:
        """Covariance between the cell averages of cells centred at x and y."""
        d = y - x
        yxp = (d + 1.0) / self.sigdel
        yxn = d / self.sigdel
        yxm = (d - 1.0) / self.sigdel
        return (
            _SQRT_PI
            * self.ell
            * self.ell
            * (
                yxp * math.erf(yxp)
                + yxm * math.erf(yxm)
                - 2.0 * (yxn * math.erf(yxn) + math.exp(-yxn * yxn) / _SQRT_PI)
                + (math.exp(-yxp * yxp) + math.exp(-yxm * yxm)) / _SQRT_PI
            )
        )

    def prediction_vector(self, x: float, side: str) -> float:
        """Covariance between the cell average at x and the value on a face.

        ``side`` is ``"left"`` for the face at -1/2 or ``"right"`` for +1/2.
        """
        try:
            t = _FACE_POSITION[side]
        except KeyError:
            raise ValueError(f"side must be 'left' or 'right', not {side!r}") from None
        diff = (
            math.erf((t - x + 0.5) / self.sigdel)
            - math.erf((t - x - 0.5) / self.sigdel)
        )
        return self.ell * math.sqrt(0.5 * math.pi) * diff

    def weights(self, radius: int) -> tuple[np.ndarray, np.ndarray]:
        """Return normalised weights predicting the left and right face values.

        Both arrays have ``2 * radius + 1`` entries and apply to the stencil
        of cells from ``-radius`` to ``+radius`` around the centre cell.
        """
        if isinstance(radius, bool) or not isinstance(radius, int) or radius < 0:
            raise ValueError("radius must be a non-negative integer")
        stencil = np.arange(-radius, radius + 1, dtype=float)
        cov = np.array([[self.covariance(a, b) for b in stencil] for a in stencil])
        rhs = np.array(
            [[self.prediction_vector(s, side) for s in stencil] for side in ("left", "right")]
        )
        solution = cholesky_solve(cholesky_decompose(cov), rhs)
        solution /= solution.sum(axis=1, keepdims=True)
        return solution[0], solution[1]