"""Small dense matrix helpers built on numpy."""

import numpy as np


class SingularMatrixError(ValueError):
    """Raised when a matrix has no inverse."""


def _square(matrix):
    matrix = np.asarray(matrix, dtype=float)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError(f"expected a square matrix, got shape {matrix.shape}")
    return matrix


def multiply(a, b):
    """Matrix product a @ b."""
    return np.asarray(a, dtype=float) @ np.asarray(b, dtype=float)


def transpose(matrix):
    """Return the transpose of a matrix."""
    return np.asarray(matrix, dtype=float).T.copy()


def hadamard(a, b):
    """Element-wise product of two matrices of the same shape."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.shape != b.shape:
        raise ValueError(f"shape mismatch: {a.shape} and {b.shape}")
    return a * b


def cofactor(matrix, row, column):
    """Return the minor of `matrix` with `row` and `column` removed."""
    matrix = _square(matrix)
    return np.delete(np.delete(matrix, row, axis=0), column, axis=1)


def determinant(matrix):
    """Determinant of a square matrix."""
    matrix = _square(matrix)
    if matrix.shape[0] == 1:
        return float(matrix[0, 0])
    return float(np.linalg.det(matrix))


def adjoint(matrix):
    """Adjugate: the transpose of the signed cofactor matrix."""
    matrix = _square(matrix)
    n = matrix.shape[0]
    if n == 1:
        return np.ones((1, 1))
    adj = np.empty((n, n))
    for i, j in np.ndindex(n, n):
        sign = 1.0 if (i + j) % 2 == 0 else -1.0
        adj[j, i] = sign * determinant(cofactor(matrix, i, j))
    return adj


def inverse(matrix):
    """Inverse through adj(A) / det(A); raises SingularMatrixError if none exists."""
    matrix = _square(matrix)
    det = determinant(matrix)
    if det == 0 or np.linalg.matrix_rank(matrix) < matrix.shape[0]:
        raise SingularMatrixError("matrix is singular")
    return adjoint(matrix) / det


def format_matrix(matrix):
    """Render a matrix as text, one row per line, followed by a blank line."""
    rows = np.atleast_2d(np.asarray(matrix, dtype=float))
    lines = ("".join(f" {value:4f}" for value in row) + "\n" for row in rows)
    return "".join(lines) + "\n"