# gphydro

A one-dimensional solver for the Euler equations of an ideal gas. It uses
finite volumes on a uniform grid with ghost cells and an HLL approximate
Riemann solver. The solution is advanced in time with the three-stage
strong-stability-preserving Runge–Kutta scheme (RK3) or with forward Euler.
The time step follows from the CFL condition.

Cell faces are reconstructed with one of these methods (`ReconMethod`):

- **FOG**: first-order Godunov, piecewise constant.
- **WENO**: fifth-order weighted essentially non-oscillatory.
- **GPR1 / GPR2**: Gaussian-process reconstruction with a squared-exponential
  kernel, stencil radius 1 or 2.
- **MOOD531**: a posteriori order reduction. Each face starts with GP radius 2
  (order 5). Where a cell is flagged as troubled, the order drops to GP
  radius 1 (order 3) and then to first order. A cell is troubled when its
  density or pressure is not positive, or when it sits on a strong
  compressive shock and its density leaves the range of its neighbours.

Two test problems are built in (`Problem`):

- **SHUOSHER**: the Shu–Osher shock/entropy-wave interaction, with a fixed
  inflow on the left and outflow on the right;
- **SHOCKTUBE**: the Sod shock tube with the discontinuity at x = 0.5 and
  zero-gradient boundaries.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
gphydro
```

This runs the default case to the final time 1.8: Shu–Osher on [0, 9] with
1000 cells, WENO reconstruction and RK3. Progress is printed as the
whole-number percentage grows. At the end, the density, x-velocity and
pressure of the interior cells are written to `Density.dat`,
`VelocityX.dat` and `Pressure.dat` in the output directory. Each file holds
one line of values. The directory must already exist; if a file cannot be
written, the command prints an error and exits with status 1.

Options:

- `--nx N`: number of interior cells (default 1000)
- `--tn T`: final time (default 1.8)
- `--method {weno,fog,gpr1,gpr2,mood531}`: reconstruction (default `weno`)
- `--problem {shuosher,shocktube}`: test problem (default `shuosher`). The
  domain is [0, 9] for Shu–Osher and [0, 1] for the shock tube.
- `--cfl C`: CFL number (default 0.8)
- `--rk {1,3}`: forward Euler or RK3 (default 3)
- `--ell L`: GP kernel length scale (default 6.0)
- `--gamma G`: ratio of specific heats (default 1.4)
- `--slow-start`: cap the first steps at 1e-10 and double the cap after each
  step
- `--output DIR`: directory for the data files (default `OutputData`)
- `--quiet`: do not print progress

Invalid parameters are reported and the command exits with status 2.

Example:

```
mkdir -p OutputData
gphydro --problem shocktube --nx 200 --tn 0.2 --method mood531
```

## Library use

```python
from gphydro.config import Config, Problem, ReconMethod
from gphydro.solver import Domain

config = Config(nx=200, xn=1.0, tn=0.2,
                problem=Problem.SHOCKTUBE, method=ReconMethod.GPR2)
domain = Domain(config)
prims = domain.run()          # rows: density, velocity, pressure

# or step by step
domain = Domain(config)
dt = domain.step()
print(domain.t, domain.primitives()[0])
```

`Domain.run` takes an optional callable `progress(percent, t)`. The state
arrays have shape `(3, nx + 2 * ngc)` and include the ghost cells.

The building blocks can also be used on their own:

- `gphydro.config`: `Config` (grid, time and scheme parameters, with `dx`,
  `xdim`, `xstart` and `xend`), and the `ReconMethod` and `Problem` enums.
- `gphydro.cholesky`: `cholesky_decompose` and `cholesky_solve` for
  symmetric positive definite systems.
- `gphydro.gp_kernel.GPKernel`: cell-integrated kernel covariances and the
  normalised left and right face weights for a stencil radius (`weights`).
- `gphydro.eos`: `prims_to_cons`, `cons_to_prims`, `pressure`,
  `sound_speed` and `physical_flux` for an ideal gas.
- `gphydro.reconstruction`: `reconstruct_fog`, `reconstruct_weno`,
  `reconstruct_gp` and `reconstruct_mood`.
- `gphydro.riemann`: `hll_interface` and `hll` for the interface fluxes.
- `gphydro.boundary`: `neumann` and `shu_osher` ghost-cell fills.
- `gphydro.initial`: `shu_osher` and `shock_tube` initial states.
- `gphydro.detection`: `detect_troubled`, `lower_orders` and `MoodError`.
- `gphydro.timestep`: `signal_speeds` and `find_dt`.
- `gphydro.output`: `format_row` and `write_results`.

## Limitations

- Only one space dimension and only the ideal-gas equation of state.
- Only the two built-in test problems. Other initial or boundary conditions
  have to be set up through the library.
- Results are written as plain text files of the final state. There is no
  plotting, no intermediate output and no restart from saved data.