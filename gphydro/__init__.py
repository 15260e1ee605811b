"""One-dimensional finite-volume Euler solver with WENO, Gaussian-process and MOOD reconstructions."""

__version__ = "0.1.0"