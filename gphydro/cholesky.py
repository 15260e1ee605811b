"""Cholesky factorisation and solves for symmetric positive definite matrices."""

from __future__ import annotations

import math

import numpy as np


def cholesky_decompose(matrix) -> np.ndarray:
    """Return the upper triangular factor U with U.T @ U equal to ``matrix``.

    Only the diagonal and the upper triangle of ``matrix`` are read.
    """
    a = np.array(matrix, dtype=float)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise ValueError("matrix must be square")
    n = a.shape[0]
    u = np.zeros_like(a)
    for i in range(n):
        column = u[:i, i]
        diag = a[i, i] - column @ column
        if not diag > 0.0:
            raise ValueError("matrix is not positive definite")
        u[i, i] = math.sqrt(diag)
        u[i, i + 1 :] = (a[i, i + 1 :] - column @ u[:i, i + 1 :]) / u[i, i]
    return u


def cholesky_solve(factor, rhs) -> np.ndarray:
    """Solve (U.T @ U) x = b for each right-hand side.

    ``rhs`` is either one vector or a 2-D array holding one right-hand side
    per row; the result has the same shape.
    """
    u = np.asarray(factor, dtype=float)
    if u.ndim != 2 or u.shape[0] != u.shape[1]:
        raise ValueError("factor must be square")
    n = u.shape[0]
    b = np.array(rhs, dtype=float)
    single = b.ndim == 1
    x = np.atleast_2d(b).copy()
    if x.ndim != 2 or x.shape[1] != n:
        raise ValueError("right-hand side does not match the factor")
    if np.any(np.diag(u) == 0.0):
        raise ValueError("factor is singular")

    for j in range(n):
        x[:, j] = (x[:, j] - x[:, :j] @ u[:j, j]) / u[j, j]
    for j in reversed(range(n)):
        x[:, j] = (x[:, j] - x[:, j + 1 :] @ u[j, j + 1 :]) / u[j, j]
    return x[0] if single else x