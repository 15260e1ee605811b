import numpy as np
import pytest

from gphydro.gp_kernel import GPKernel
from gphydro.reconstruction import (
    reconstruct_fog,
    reconstruct_gp,
    reconstruct_mood,
    reconstruct_weno,
)

N = 12


def _linear_state():
    x = np.arange(N, dtype=float)
    return np.stack([x, 2.0 * x + 1.0, -x + 5.0])


def _wavy_state():
    x = np.arange(N, dtype=float)
    return np.stack([1.0 + 0.2 * np.sin(x), np.cos(x), 2.0 + x**2 / 10.0])


@pytest.fixture(scope="module")
def kernel_weights():
    kernel = GPKernel(6.0)
    return kernel.weights(1), kernel.weights(2)


def test_fog_copies_cells_in_range():
    u = _wavy_state()
    left, right = reconstruct_fog(u, 2, 9)
    np.testing.assert_array_equal(left[:, 2:9], u[:, 2:9])
    np.testing.assert_array_equal(right[:, 2:9], u[:, 2:9])
    assert np.all(left[:, :2] == 0.0)
    assert np.all(right[:, 9:] == 0.0)


def test_weno_constant_state_is_preserved():
    u = np.full((3, N), 3.25)
    left, right = reconstruct_weno(u, 2, N - 2)
    np.testing.assert_allclose(left[:, 2 : N - 2], 3.25)
    np.testing.assert_allclose(right[:, 2 : N - 2], 3.25)


def test_weno_linear_state_is_exact_at_faces():
    u = _linear_state()
    left, right = reconstruct_weno(u, 2, N - 2)
    # For linear data each face value is the mean of the two adjacent cells.
    np.testing.assert_allclose(
        left[:, 2 : N - 2], 0.5 * (u[:, 1 : N - 3] + u[:, 2 : N - 2])
    )
    np.testing.assert_allclose(
        right[:, 2 : N - 2], 0.5 * (u[:, 2 : N - 2] + u[:, 3 : N - 1])
    )


def test_weno_needs_two_neighbours():
    with pytest.raises(ValueError):
        reconstruct_weno(_wavy_state(), 1, N - 2)
    with pytest.raises(ValueError):
        reconstruct_weno(_wavy_state(), 2, N - 1)


def test_gp_identity_weights_give_cell_values():
    u = _wavy_state()
    left, right = reconstruct_gp(u, 1, N - 1, [0.0, 1.0, 0.0], [0.0, 1.0, 0.0])
    np.testing.assert_array_equal(left[:, 1 : N - 1], u[:, 1 : N - 1])
    np.testing.assert_array_equal(right[:, 1 : N - 1], u[:, 1 : N - 1])


def test_gp_one_sided_weights_pick_neighbours():
    u = _wavy_state()
    left, right = reconstruct_gp(u, 1, N - 1, [1.0, 0.0, 0.0], [0.0, 0.0, 1.0])
    np.testing.assert_array_equal(left[:, 1 : N - 1], u[:, 0 : N - 2])
    np.testing.assert_array_equal(right[:, 1 : N - 1], u[:, 2:N])


@pytest.mark.parametrize("radius", [1, 2])
def test_gp_kernel_weights_preserve_constants(kernel_weights, radius):
    wl, wr = kernel_weights[radius - 1]
    u = np.full((3, N), -1.5)
    left, right = reconstruct_gp(u, radius, N - radius, wl, wr)
    np.testing.assert_allclose(left[:, radius : N - radius], -1.5)
    np.testing.assert_allclose(right[:, radius : N - radius], -1.5)


def test_gp_mirror_symmetry(kernel_weights):
    wl, wr = kernel_weights[1]
    u = _wavy_state()
    left, right = reconstruct_gp(u, 2, N - 2, wl, wr)
    mirrored = u[:, ::-1]
    mleft, mright = reconstruct_gp(mirrored, 2, N - 2, wl, wr)
    np.testing.assert_allclose(mleft[:, 2 : N - 2], right[:, 2 : N - 2][:, ::-1])
    np.testing.assert_allclose(mright[:, 2 : N - 2], left[:, 2 : N - 2][:, ::-1])


def test_gp_rejects_bad_weights():
    u = _wavy_state()
    with pytest.raises(ValueError):
        reconstruct_gp(u, 2, N - 2, [0.5, 0.5], [0.5, 0.5])
    with pytest.raises(ValueError):
        reconstruct_gp(u, 2, N - 2, [0.0, 1.0, 0.0], [0.0, 0.0, 1.0, 0.0, 0.0])


def test_rejects_bad_state_shape():
    with pytest.raises(ValueError):
        reconstruct_fog(np.zeros((2, N)), 0, N)
    with pytest.raises(ValueError):
        reconstruct_weno(np.zeros(N), 2, N - 2)


def test_mood_order_one_matches_fog(kernel_weights):
    r1, r2 = kernel_weights
    u = _wavy_state()
    orders = np.ones(N, dtype=int)
    left, right = reconstruct_mood(u, 1, N - 1, orders, r1, r2)
    fleft, fright = reconstruct_fog(u, 1, N - 1)
    np.testing.assert_array_equal(left, fleft)
    np.testing.assert_array_equal(right, fright)


def test_mood_order_five_matches_gp_radius_two(kernel_weights):
    r1, r2 = kernel_weights
    u = _wavy_state()
    orders = np.full(N, 5)
    left, right = reconstruct_mood(u, 2, N - 2, orders, r1, r2)
    gleft, gright = reconstruct_gp(u, 2, N - 2, *r2)
    np.testing.assert_allclose(left, gleft)
    np.testing.assert_allclose(right, gright)


def test_mood_uses_lower_order_of_face_neighbours(kernel_weights):
    r1, r2 = kernel_weights
    u = _wavy_state()
    orders = np.full(N, 5)
    orders[5] = 3
    orders[8] = 1
    left, right = reconstruct_mood(u, 2, N - 2, orders, r1, r2)
    g1left, g1right = reconstruct_gp(u, 2, N - 2, *r1)
    g2left, g2right = reconstruct_gp(u, 2, N - 2, *r2)

    assert left[0, 4] == pytest.approx(g2left[0, 4])
    assert right[0, 4] == pytest.approx(g1right[0, 4])
    assert left[0, 5] == pytest.approx(g1left[0, 5])
    assert right[0, 5] == pytest.approx(g1right[0, 5])
    assert left[0, 6] == pytest.approx(g1left[0, 6])
    assert right[0, 7] == u[0, 7]
    assert left[0, 8] == u[0, 8]
    assert right[0, 8] == u[0, 8]
    assert left[0, 9] == u[0, 9]


def test_mood_without_order_five_needs_one_neighbour(kernel_weights):
    r1, r2 = kernel_weights
    u = _wavy_state()
    orders = np.full(N, 3)
    left, right = reconstruct_mood(u, 1, N - 1, orders, r1, r2)
    gleft, gright = reconstruct_gp(u, 1, N - 1, *r1)
    np.testing.assert_allclose(left, gleft)
    np.testing.assert_allclose(right, gright)


def test_mood_order_five_near_edge_is_rejected(kernel_weights):
    r1, r2 = kernel_weights
    with pytest.raises(ValueError):
        reconstruct_mood(_wavy_state(), 1, N - 1, np.full(N, 5), r1, r2)


def test_mood_rejects_orders_of_wrong_length(kernel_weights):
    r1, r2 = kernel_weights
    with pytest.raises(ValueError):
        reconstruct_mood(_wavy_state(), 2, N - 2, np.full(N - 1, 5), r1, r2)


def test_mood_rejects_wrong_stencil_sizes(kernel_weights):
    r1, r2 = kernel_weights
    with pytest.raises(ValueError):
        reconstruct_mood(_wavy_state(), 2, N - 2, np.full(N, 5), r2, r1)