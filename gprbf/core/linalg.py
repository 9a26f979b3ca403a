# gprbf/core/linalg.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Linear-algebra utilities shared across gprbf.core modules.

The posterior computations never form an explicit inverse. A
symmetric positive-definite matrix A is factored once as A = L Lᵀ and
the factor is reused for every right-hand side.
"""
import gprbf.num as gnp
from gprbf.config import get_config, get_logger
from gprbf.errors import SingularMatrix

_logger = get_logger()


class CholeskySolver:
    """Solve A X = B for a symmetric positive-definite A.

    Parameters
    ----------
    A : array_like, shape (n, n)
        Symmetric matrix, expected to be positive definite. Only its
        lower triangle is read.
    pivot_rtol : float, optional
        Relative tolerance on the squared pivots: the factorization is
        rejected when ``min(diag(L))**2 <= pivot_rtol * max(diag(A))``.
        Defaults to the configured value, or ``n * eps`` when unset.

    Raises
    ------
    SingularMatrix
        If A is not numerically positive definite.

    Examples
    --------
    >>> solver = CholeskySolver(A)
    >>> alpha = solver.solve(y)
    >>> V = solver.solve_lower(Kxt)
    """

    def __init__(self, A, pivot_rtol=None):
        A = gnp.asarray(A)
        if A.ndim != 2 or A.shape[0] != A.shape[1]:
            raise ValueError(f"A must be a square matrix, got shape {A.shape}")
        self.n = A.shape[0]
        if pivot_rtol is None:
            pivot_rtol = get_config().pivot_rtol
        if pivot_rtol is None:
            eps, _ = gnp.float_info()
            pivot_rtol = max(self.n, 1) * eps
        self.pivot_rtol = pivot_rtol
        self._L = self._factor(A)

    def _factor(self, A):
        if self.n == 0:
            return gnp.zeros((0, 0))
        if not gnp.all(gnp.isfinite(A)):
            raise SingularMatrix("matrix contains non-finite values")
        try:
            L, _ = gnp.cho_factor(A, lower=True, check_finite=False)
        except Exception as exc:
            if gnp._is_linalg_exception(exc):
                _logger.debug("Cholesky factorization failed (n=%d): %s", self.n, exc)
                raise SingularMatrix(
                    f"matrix of size {self.n} is not positive definite: {exc}"
                ) from exc
            raise
        # cho_factor leaves garbage in the unused triangle
        L = gnp.tril(L)
        pivots = gnp.diag(L)
        threshold = self.pivot_rtol * gnp.max(gnp.diag(A))
        smallest = gnp.min(pivots) ** 2
        if not smallest > threshold:
            _logger.debug(
                "Cholesky pivot %.3e below threshold %.3e (n=%d)",
                smallest, threshold, self.n,
            )
            raise SingularMatrix(
                f"matrix of size {self.n} is numerically singular "
                f"(smallest squared pivot {smallest:.3e} <= {threshold:.3e})"
            )
        return L

    @property
    def factor(self):
        """Lower-triangular factor L with A = L Lᵀ."""
        return self._L

    def solve(self, B):
        """Return A^{-1} B for B of shape (n,) or (n, k)."""
        B = gnp.asarray(B)
        self._check_rhs(B)
        if B.size == 0:
            return gnp.zeros(B.shape)
        return gnp.cho_solve((self._L, True), B, check_finite=False)

    def solve_lower(self, B):
        """Return L^{-1} B for B of shape (n,) or (n, k)."""
        B = gnp.asarray(B)
        self._check_rhs(B)
        if B.size == 0:
            return gnp.zeros(B.shape)
        return gnp.solve_triangular(self._L, B, lower=True, check_finite=False)

    def logdet(self):
        """log det A = 2 sum(log diag L)."""
        return 2.0 * gnp.sum(gnp.log(gnp.diag(self._L)))

    def diag_inverse(self):
        """Return diag(A^{-1}).

        If A = L Lᵀ then A^{-1} = L^{-T} L^{-1}; with T = L^{-1}, the
        diagonal is the column-wise sum of squares of T.
        """
        T = self.solve_lower(gnp.eye(self.n))
        return gnp.sum(T * T, axis=0)

    def _check_rhs(self, B):
        if B.ndim not in (1, 2) or B.shape[0] != self.n:
            raise ValueError(
                f"right-hand side of shape {B.shape} does not match a system of size {self.n}"
            )


def cholesky_solve(A, B):
    """Solve A X = B with a Cholesky factorization; return (X, L)."""
    solver = CholeskySolver(A)
    return solver.solve(B), solver.factor
