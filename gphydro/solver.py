"""Finite-volume solver for the one-dimensional Euler equations."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional

import numpy as np

from gphydro import boundary, initial
from gphydro.config import Config, Problem, ReconMethod
from gphydro.detection import detect_troubled, lower_orders
from gphydro.eos import cons_to_prims
from gphydro.gp_kernel import GPKernel
from gphydro.output import write_results
from gphydro.reconstruction import (
    reconstruct_fog,
    reconstruct_gp,
    reconstruct_mood,
    reconstruct_weno,
)
from gphydro.riemann import hll
from gphydro.timestep import find_dt

ProgressCallback = Callable[[int, float], None]


class Domain:
    """Conserved state on a uniform grid together with its time integrator."""

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config if config is not None else Config()
        cfg = self.config

        if cfg.problem is Problem.SHUOSHER:
            self.x, cons = initial.shu_osher(cfg)
        else:
            self.x, cons = initial.shock_tube(cfg)

        self.t = cfg.t0
        self.dt = 0.0
        self.dt_sim = 1e-10
        self.steps = 0

        kernel = GPKernel(cfg.ell)
        self._r1 = kernel.weights(1) if cfg.method in (ReconMethod.GPR1, ReconMethod.MOOD531) else None
        self._r2 = kernel.weights(2) if cfg.method in (ReconMethod.GPR2, ReconMethod.MOOD531) else None
        self.orders = np.full(cfg.xdim, cfg.mood_order, dtype=int)

        self.cons = self._apply_boundary(cons)

    def primitives(self) -> np.ndarray:
        """Density, velocity and pressure of every cell, ghost cells included."""
        return cons_to_prims(self.cons, self.config.gamma)

    def _apply_boundary(self, cons: np.ndarray) -> np.ndarray:
        cfg = self.config
        if cfg.problem is Problem.SHUOSHER:
            return boundary.shu_osher(cons, cfg.ngc, cfg.gamma)
        return boundary.neumann(cons, cfg.ngc)

    def _reconstruct(self, u: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        cfg = self.config
        start, stop = cfg.xstart - 1, cfg.xend + 1
        method = cfg.method
        if method is ReconMethod.FOG:
            return reconstruct_fog(u, start, stop)
        if method is ReconMethod.WENO:
            return reconstruct_weno(u, start, stop)
        if method is ReconMethod.GPR1:
            return reconstruct_gp(u, start, stop, *self._r1)
        if method is ReconMethod.GPR2:
            return reconstruct_gp(u, start, stop, *self._r2)
        return reconstruct_mood(u, start, stop, self.orders, self._r1, self._r2)

    def _update(self, u: np.ndarray, faces: tuple[np.ndarray, np.ndarray]) -> np.ndarray:
        cfg = self.config
        s, e = cfg.xstart, cfg.xend
        left_faces, right_faces = faces
        flux = hll(left_faces, right_faces, s - 1, e + 1, cfg.gamma)
        updated = u.copy()
        updated[:, s:e] -= (self.dt / cfg.dx) * (flux[:, s:e] - flux[:, s - 1 : e - 1])
        return updated

    def _mood_update(self, u: np.ndarray) -> np.ndarray:
        cfg = self.config
        while True:
            candidate = self._update(u, self._reconstruct(u))
            troubled = detect_troubled(candidate, u, self.orders, cfg.dx, cfg.gamma)
            if not troubled.any():
                return candidate
            self.orders = lower_orders(troubled, self.orders)

    def forward_euler(self) -> None:
        """Advance the state by one forward Euler stage of length ``dt``."""
        reference = self.cons
        if self.config.method is ReconMethod.MOOD531:
            candidate = self._mood_update(reference)
        else:
            candidate = self._update(reference, self._reconstruct(reference))
        self.cons = self._apply_boundary(candidate)

    def rk3(self) -> None:
        """Advance by ``dt`` with the three-stage strong-stability-preserving scheme."""
        start = self.cons.copy()
        self.forward_euler()
        self.forward_euler()
        self.cons = 0.75 * start + 0.25 * self.cons
        self.forward_euler()
        self.cons = (1.0 / 3.0) * start + (2.0 / 3.0) * self.cons

    def step(self) -> float:
        """Choose a time step, advance the solution by it and return it."""
        cfg = self.config
        self.dt, self.dt_sim = find_dt(self.cons, cfg, self.t, self.dt_sim)
        self.t += self.dt
        self.orders = np.full(cfg.xdim, cfg.mood_order, dtype=int)
        if cfg.rk_order == 3:
            self.rk3()
        else:
            self.forward_euler()
        self.steps += 1
        return self.dt

    def run(self, progress: Optional[ProgressCallback] = None) -> np.ndarray:
        """Step until the final time is reached and return the primitive state.

        ``progress`` is called with the percentage done and the current time
        whenever the whole-number percentage grows.
        """
        tn = self.config.tn
        reported = 0
        while True:
            self.step()
            if progress is not None and tn > 0.0:
                percent = int(100 * self.t / tn)
                if percent > reported:
                    progress(percent, self.t)
                    reported = percent
            if not self.t < tn:
                break
        return self.primitives()


def _build_parser() -> argparse.ArgumentParser:
    defaults = Config()
    parser = argparse.ArgumentParser(
        prog="gphydro", description="Solve a one-dimensional Euler test problem."
    )
    parser.add_argument("--nx", type=int, default=defaults.nx, help="number of interior cells")
    parser.add_argument("--tn", type=float, default=defaults.tn, help="final time")
    parser.add_argument(
        "--method",
        choices=[m.name.lower() for m in ReconMethod],
        default=defaults.method.name.lower(),
        help="spatial reconstruction",
    )
    parser.add_argument(
        "--problem",
        choices=[p.name.lower() for p in Problem],
        default=defaults.problem.name.lower(),
        help="test problem",
    )
    parser.add_argument("--cfl", type=float, default=defaults.cfl)
    parser.add_argument("--rk", type=int, choices=(1, 3), default=defaults.rk_order)
    parser.add_argument("--ell", type=float, default=defaults.ell)
    parser.add_argument("--gamma", type=float, default=defaults.gamma)
    parser.add_argument("--slow-start", action="store_true")
    parser.add_argument("--output", default="OutputData", help="directory for the data files")
    parser.add_argument("--quiet", action="store_true", help="do not report progress")
    return parser


def main(argv=None) -> int:
    """Run a simulation from the command line and write its final state."""
    args = _build_parser().parse_args(argv)
    problem = Problem[args.problem.upper()]
    x0, xn = (0.0, 9.0) if problem is Problem.SHUOSHER else (0.0, 1.0)
    try:
        config = Config(
            nx=args.nx,
            x0=x0,
            xn=xn,
            tn=args.tn,
            method=ReconMethod[args.method.upper()],
            problem=problem,
            cfl=args.cfl,
            rk_order=args.rk,
            ell=args.ell,
            gamma=args.gamma,
            slow_start=args.slow_start,
        )
    except ValueError as exc:
        print(f"Invalid parameters: {exc}", file=sys.stderr)
        return 2

    domain = Domain(config)

    def report(percent: int, t: float) -> None:
        print(f"We are {percent}% done, The time is {t:.15g}")

    prims = domain.run(None if args.quiet else report)
    try:
        write_results(prims, config, args.output)
    except OSError:
        print("There was an issue with the file printing!", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())