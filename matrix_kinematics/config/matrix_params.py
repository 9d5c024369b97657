################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration for matrix text rendering and approximate comparison."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping


# Field width of each rendered element
FORMAT_WIDTH: int = 6
# Number of decimal places of each rendered element
FORMAT_PRECISION: int = 3
# Terminator appended after every rendered row
LINE_TERMINATOR: str = "\r\n"
# Absolute tolerance used by Matrix.is_close
COMPARE_ATOL: float = 1e-9


class MatrixParamsError(ValueError):
    """Raised when matrix parameters are invalid."""


@dataclass(frozen=True, slots=True)
class MatrixParams:
    """Parameters shared by the matrix core.

    Data contract:
        - format_width: minimum characters per element, right aligned.
        - format_precision: digits after the decimal point.
        - line_terminator: appended after each row, including the last.
        - compare_atol: default absolute tolerance for is_close.

    The defaults reproduce the fixed debug layout "{value:6.3f} " per
    element with CR+LF row terminators.
    """

    format_width: int
    format_precision: int
    line_terminator: str
    compare_atol: float

    @staticmethod
    def defaults() -> MatrixParams:
        """Return the stable default parameter set."""
        params: MatrixParams = MatrixParams(
            format_width=FORMAT_WIDTH,
            format_precision=FORMAT_PRECISION,
            line_terminator=LINE_TERMINATOR,
            compare_atol=COMPARE_ATOL,
        )
        params.validate()
        return params

    @classmethod
    def from_dict(cls, params: Mapping[str, object]) -> MatrixParams:
        """Construct parameters from a mapping, rejecting unknown keys."""
        if not isinstance(params, Mapping):
            raise MatrixParamsError("params must be a mapping")
        unknown_keys: list[str] = sorted(set(params.keys()) - set(cls._field_order()))
        if unknown_keys:
            raise MatrixParamsError(f"unknown parameter: {unknown_keys[0]}")
        defaults: MatrixParams = cls.defaults()
        result: MatrixParams = cls(
            format_width=cls._as_int(
                "format_width",
                params.get("format_width", defaults.format_width),
            ),
            format_precision=cls._as_int(
                "format_precision",
                params.get("format_precision", defaults.format_precision),
            ),
            line_terminator=cls._as_str(
                "line_terminator",
                params.get("line_terminator", defaults.line_terminator),
            ),
            compare_atol=cls._as_float(
                "compare_atol",
                params.get("compare_atol", defaults.compare_atol),
            ),
        )
        result.validate()
        return result

    def validate(self) -> None:
        """Validate parameters and raise MatrixParamsError on failure."""
        if self.format_width < 1:
            raise MatrixParamsError("format_width must be >= 1")
        if self.format_precision < 0:
            raise MatrixParamsError("format_precision must be >= 0")
        if not self.line_terminator:
            raise MatrixParamsError("line_terminator must be non-empty")
        if not math.isfinite(self.compare_atol) or self.compare_atol < 0.0:
            raise MatrixParamsError("compare_atol must be finite and >= 0")

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict representation."""
        return {
            "format_width": self.format_width,
            "format_precision": self.format_precision,
            "line_terminator": self.line_terminator,
            "compare_atol": self.compare_atol,
        }

    @staticmethod
    def _as_float(name: str, value: object) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise MatrixParamsError(f"{name} must be a float")
        return float(value)

    @staticmethod
    def _as_int(name: str, value: object) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise MatrixParamsError(f"{name} must be an int")
        return int(value)

    @staticmethod
    def _as_str(name: str, value: object) -> str:
        if not isinstance(value, str):
            raise MatrixParamsError(f"{name} must be a string")
        return value

    @staticmethod
    def _field_order() -> list[str]:
        return [
            "format_width",
            "format_precision",
            "line_terminator",
            "compare_atol",
        ]
