"""Linear algebra helpers for least-squares coefficient construction.

Local polynomial fits are solved through an orthonormal basis of the
polynomial space instead of the normal equations. Forming ``X^T X`` squares
the condition number of the Vandermonde matrix, which for windows of a few
dozen samples and orders above ten is already beyond double precision.

The basis is the ``Q`` factor of the Vandermonde matrix on the sample points,
built column by column with Gram-Schmidt: each new column is ``z * q_{p-1}``
orthogonalized against the previous ones (the Arnoldi form of the QR
factorization). The powers ``z**p`` are never formed.

Brubeck, P. D., Nakatsukasa, Y., & Trefethen, L. N. (2021). Vandermonde with
Arnoldi. SIAM Review, 63(2), 405-415.
"""

from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "orthonormal_polynomial_basis",
    "projection_weights",
]


def _warn_if_not_orthonormal(q: np.ndarray, tol: float, warn_context: str) -> None:
    """Emits a ``RuntimeWarning`` when the columns of ``q`` lost orthogonality."""
    err = float(np.max(np.abs(q.T @ q - np.eye(q.shape[1])))) if q.size else 0.0
    if (not np.isfinite(err)) or (err > tol):
        warnings.warn(
            f"In {warn_context}, the polynomial basis is ill-conditioned "
            f"(orthogonality error≈{err:.2e}); results may be unstable.",
            RuntimeWarning,
        )


def orthonormal_polynomial_basis(
    points: ArrayLike,
    order: int,
    *,
    rank_tol: float = 1e-10,
    orth_tol: float = 1e-8,
    warn_context: str = "polynomial basis",
) -> NDArray[np.float64]:
    """Returns an orthonormal basis of the polynomials of degree <= ``order``.

    Column ``p`` of the result is a degree ``p`` polynomial evaluated at
    ``points``; the columns are orthonormal with respect to the plain dot
    product over the points. The result equals, up to column signs, the ``Q``
    factor of ``np.vander(points, order + 1, increasing=True)``.

    Each column is orthogonalized twice against the previous ones (classical
    Gram-Schmidt with reorthogonalization), which keeps the basis orthonormal
    to working precision.

    Args:
        points: 1D array of sample locations.
        order: Maximum polynomial degree.
        rank_tol: A new column whose norm after orthogonalization is at most
            ``rank_tol`` times its norm before is treated as linearly
            dependent on the previous ones.
        orth_tol: Orthogonality error above which a warning is emitted.
        warn_context: Short label included in warning and error messages.

    Returns:
        Array of shape ``(len(points), order + 1)``.

    Raises:
        ValueError: If ``points`` is not 1D or ``order`` is negative or
            exceeds the number of points minus one.
        numpy.linalg.LinAlgError: If the points do not determine a polynomial
            of degree ``order`` (fewer than ``order + 1`` distinct points).
    """
    z = np.asarray(points, dtype=float)
    if z.ndim != 1 or z.size == 0:
        raise ValueError(f"points must be a non-empty 1D array; got shape {z.shape}.")
    n = z.size
    if order < 0:
        raise ValueError(f"order must be non-negative; got {order}.")
    if order + 1 > n:
        raise ValueError(
            f"order {order} needs at least {order + 1} points but only {n} were given; "
            "the fit is underdetermined."
        )

    q = np.empty((n, order + 1), dtype=float)
    q[:, 0] = 1.0 / np.sqrt(n)
    for p in range(1, order + 1):
        v = z * q[:, p - 1]
        before = float(np.linalg.norm(v))
        prev = q[:, :p]
        for _ in range(2):
            v = v - prev @ (prev.T @ v)
        after = float(np.linalg.norm(v))
        if after <= rank_tol * before or after == 0.0:
            raise np.linalg.LinAlgError(
                f"In {warn_context}, the Vandermonde matrix is rank deficient "
                f"(column {p} depends on the previous ones)."
            )
        q[:, p] = v / after

    _warn_if_not_orthonormal(q, orth_tol, warn_context)
    return q


def projection_weights(basis: ArrayLike, row: int) -> NDArray[np.float64]:
    """Returns row ``row`` of the orthogonal projector ``Q Q^T``.

    For the basis of :func:`orthonormal_polynomial_basis`, ``Q Q^T`` is the
    hat matrix ``X (X^T X)^{-1} X^T`` of the polynomial least-squares fit, so
    the returned weights map observations to the fitted value at point
    ``row``.

    Args:
        basis: Array of shape ``(n, r)`` with orthonormal columns.
        row: Index of the point at which the fit is evaluated.

    Returns:
        Array of shape ``(n,)``.
    """
    q = np.asarray(basis, dtype=float)
    if q.ndim != 2:
        raise ValueError(f"basis must be 2D; got ndim={q.ndim}.")
    return q @ q[row]
