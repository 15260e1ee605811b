import numpy as np

from gphydro.config import Config, Problem
from gphydro.eos import cons_to_prims
from gphydro.initial import shock_tube, shu_osher


def _shu_config():
    return Config(nx=90, x0=0.0, xn=9.0)


def _tube_config():
    return Config(nx=10, x0=0.0, xn=1.0, problem=Problem.SHOCKTUBE)


def test_shu_osher_shapes_and_spacing():
    config = _shu_config()
    x, cons = shu_osher(config)
    assert x.shape == (config.xdim,)
    assert cons.shape == (3, config.xdim)
    np.testing.assert_allclose(np.diff(x), config.dx)
    np.testing.assert_allclose(x[config.xstart], -4.5 + 0.5 * config.dx)


def test_shu_osher_shocked_region():
    config = _shu_config()
    x, cons = shu_osher(config)
    prims = cons_to_prims(cons, config.gamma)
    shocked = x + 4.5 <= 0.5
    assert shocked.any()
    np.testing.assert_allclose(prims[0, shocked], 3.857143)
    np.testing.assert_allclose(prims[1, shocked], 2.629369)
    np.testing.assert_allclose(prims[2, shocked], 10.33333)


def test_shu_osher_entropy_wave_region():
    config = _shu_config()
    x, cons = shu_osher(config)
    prims = cons_to_prims(cons, config.gamma)
    ahead = x + 4.5 > 0.5
    assert ahead.any()
    assert np.all(np.abs(prims[0, ahead] - 1.0) <= 0.2 + 1e-12)
    np.testing.assert_allclose(prims[1, ahead], 0.0, atol=1e-14)
    np.testing.assert_allclose(prims[2, ahead], 1.0)


def test_shock_tube_states():
    config = _tube_config()
    x, cons = shock_tube(config)
    prims = cons_to_prims(cons, config.gamma)
    left = x <= 0.5
    assert left.sum() == config.xstart + 5
    np.testing.assert_allclose(prims[0, left], 1.0)
    np.testing.assert_allclose(prims[2, left], 1.0)
    np.testing.assert_allclose(prims[0, ~left], 0.125)
    np.testing.assert_allclose(prims[2, ~left], 0.1)
    np.testing.assert_allclose(cons[1], 0.0, atol=0.0)


def test_shock_tube_coordinates():
    config = _tube_config()
    x, _ = shock_tube(config)
    np.testing.assert_allclose(x[config.xstart], config.x0 + 0.5 * config.dx)
    np.testing.assert_allclose(x[config.xend - 1], config.xn - 0.5 * config.dx)