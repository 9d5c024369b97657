################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from __future__ import annotations

import numbers
from typing import List
from typing import Optional
from typing import Sequence
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from matrix_kinematics.config.matrix_params import MatrixParams


class MatrixError(Exception):
    """Base class for matrix failures."""


class DimensionMismatchError(MatrixError):
    """Raised when operand shapes are incompatible for an operation."""


class MatrixShapeError(MatrixError, ValueError):
    """Raised when a matrix cannot be built with the requested shape."""


class Matrix:
    """Dense, mutable matrix of double-precision values.

    Responsibility:
        Hold a fixed-size rows x cols block of floats and provide the basic
        arithmetic needed to compose homogeneous transforms.

    Inputs/outputs:
        - Elements are addressed as m[i, j] with 0 <= i < rows and
          0 <= j < cols.
        - Every arithmetic operation returns a new Matrix; operands are never
          modified and no two matrices share storage.

    Operators:
        - -m, m1 + m2, m1 - m2
        - m1 * m2 and m1 @ m2 for the matrix product
        - n * m and m * n for scalar multiplication

    Determinism and edge cases:
        - The product is a plain triple loop, row-major over the output with
          the inner reduction over the shared dimension.
        - NaN and Inf propagate through arithmetic unchanged.
        - Index bounds are not checked beyond what list indexing does.
    """

    __slots__ = ("_rows", "_cols", "_data")

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, cols: int) -> None:
        Matrix._validate_dimension(rows, "rows")
        Matrix._validate_dimension(cols, "cols")
        self._rows: int = int(rows)
        self._cols: int = int(cols)
        self._data: List[List[float]] = [
            [0.0 for _ in range(self._cols)] for _ in range(self._rows)
        ]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._cols

    @property
    def T(self) -> Matrix:
        """Return the transpose as a new matrix."""
        return Matrix.transpose(self)

    def __getitem__(self, index: Tuple[int, int]) -> float:
        i, j = index
        return self._data[i][j]

    def __setitem__(self, index: Tuple[int, int], value: float) -> None:
        i, j = index
        self._data[i][j] = float(value)

    def copy(self) -> Matrix:
        """Return a copy with identical shape and values."""
        m: Matrix = Matrix(self._rows, self._cols)
        for i in range(self._rows):
            for j in range(self._cols):
                m._data[i][j] = self._data[i][j]
        return m

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Matrix:
        return self.copy()

    def row(self, i: int) -> List[float]:
        return list(self._data[i])

    def col(self, j: int) -> List[float]:
        return [self._data[i][j] for i in range(self._rows)]

    def to_list(self) -> List[List[float]]:
        return [list(row) for row in self._data]

    def to_numpy(self) -> NDArray[np.float64]:
        """Return the values as a (rows, cols) float64 array."""
        return np.array(self._data, dtype=np.float64)

    @staticmethod
    def from_rows(rows: Sequence[Sequence[float]]) -> Matrix:
        """Build a matrix from a non-empty rectangular sequence of rows."""
        if len(rows) == 0:
            raise MatrixShapeError("from_rows requires at least one row")
        cols: int = len(rows[0])
        for row in rows:
            if len(row) != cols:
                raise MatrixShapeError("from_rows requires a rectangular matrix")
        m: Matrix = Matrix(len(rows), cols)
        for i, row in enumerate(rows):
            for j, value in enumerate(row):
                m[i, j] = value
        return m

    @staticmethod
    def from_numpy(array: NDArray[np.float64]) -> Matrix:
        """Build a matrix from a two-dimensional array."""
        values: NDArray[np.float64] = np.asarray(array, dtype=np.float64)
        if values.ndim != 2:
            raise MatrixShapeError(f"from_numpy expects a 2-D array, got {values.ndim}-D")
        return Matrix.from_rows(values.tolist())

    @staticmethod
    def column(values: Sequence[float]) -> Matrix:
        """Build an n x 1 column vector."""
        return Matrix.from_rows([[value] for value in values])

    @staticmethod
    def zeros(rows: int, cols: int) -> Matrix:
        m: Matrix = Matrix(rows, cols)
        for i in range(rows):
            for j in range(cols):
                m[i, j] = 0.0
        return m

    @staticmethod
    def identity(n: int) -> Matrix:
        m: Matrix = Matrix.zeros(n, n)
        for i in range(n):
            m[i, i] = 1.0
        return m

    @staticmethod
    def transpose(m: Matrix) -> Matrix:
        t: Matrix = Matrix(m.cols, m.rows)
        for i in range(m.rows):
            for j in range(m.cols):
                t[j, i] = m[i, j]
        return t

    @staticmethod
    def multiply(m1: Matrix, m2: Matrix) -> Matrix:
        """Return the matrix product m1 * m2."""
        if m1.cols != m2.rows:
            raise DimensionMismatchError(
                "Matrixes cannot be multiplied because of their dimensions!"
            )
        result: Matrix = Matrix.zeros(m1.rows, m2.cols)
        for i in range(result.rows):
            for j in range(result.cols):
                acc: float = 0.0
                for k in range(m1.cols):
                    acc += m1[i, k] * m2[k, j]
                result[i, j] = acc
        return result

    @staticmethod
    def scalar_multiply(n: float, m: Matrix) -> Matrix:
        r: Matrix = Matrix(m.rows, m.cols)
        for i in range(m.rows):
            for j in range(m.cols):
                r[i, j] = m[i, j] * n
        return r

    @staticmethod
    def add(m1: Matrix, m2: Matrix) -> Matrix:
        """Return the elementwise sum m1 + m2."""
        if m1.rows != m2.rows or m1.cols != m2.cols:
            raise DimensionMismatchError("Matrices must have the same dimensions!")
        r: Matrix = Matrix(m1.rows, m1.cols)
        for i in range(r.rows):
            for j in range(r.cols):
                r[i, j] = m1[i, j] + m2[i, j]
        return r

    @staticmethod
    def subtract(m1: Matrix, m2: Matrix) -> Matrix:
        return Matrix.add(m1, Matrix.scalar_multiply(-1.0, m2))

    def __neg__(self) -> Matrix:
        return Matrix.scalar_multiply(-1.0, self)

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix.add(self, other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix.subtract(self, other)

    def __mul__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            return Matrix.multiply(self, other)
        if isinstance(other, numbers.Real):
            return Matrix.scalar_multiply(float(other), self)
        return NotImplemented

    def __rmul__(self, other: object) -> Matrix:
        if isinstance(other, numbers.Real):
            return Matrix.scalar_multiply(float(other), self)
        return NotImplemented

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix.multiply(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    def is_close(self, other: Matrix, atol: Optional[float] = None) -> bool:
        """Return True when shapes match and all elements are within atol."""
        tol: float = MatrixParams.defaults().compare_atol if atol is None else atol
        if self.shape != other.shape:
            return False
        for i in range(self._rows):
            for j in range(self._cols):
                if abs(self._data[i][j] - other._data[i][j]) > tol:
                    return False
        return True

    def to_text(self, params: Optional[MatrixParams] = None) -> str:
        """Render every element as fixed-width text, one row per line."""
        fmt: MatrixParams = MatrixParams.defaults() if params is None else params
        fmt_spec: str = f"{fmt.format_width}.{fmt.format_precision}f"
        s: str = ""
        for i in range(self._rows):
            for j in range(self._cols):
                s += format(self._data[i][j], fmt_spec) + " "
            s += fmt.line_terminator
        return s

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Matrix({self._rows}x{self._cols}, {self._data!r})"

    @staticmethod
    def _validate_dimension(value: int, name: str) -> None:
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise MatrixShapeError(f"{name} must be an int")
        if value <= 0:
            raise MatrixShapeError(f"{name} must be > 0, got {value}")
