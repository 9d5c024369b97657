################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Denavit-Hartenberg parameters for one joint of a kinematic chain."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence
from typing import Tuple


@dataclass(frozen=True, slots=True)
class DhParameters:
    """Standard DH row (theta, d, a, alpha).

    Fields:
        theta: joint angle about the previous z axis in radians
        d: offset along the previous z axis
        a: link length along the new x axis
        alpha: link twist about the new x axis in radians
    """

    theta: float
    d: float
    a: float
    alpha: float

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> DhParameters:
        """Build from a (theta, d, a, alpha) sequence."""
        if len(values) != 4:
            raise ValueError(
                f"DH parameters expect 4 values (theta, d, a, alpha), got {len(values)}"
            )
        return cls(
            theta=float(values[0]),
            d=float(values[1]),
            a=float(values[2]),
            alpha=float(values[3]),
        )

    @classmethod
    def from_degrees(
        cls, theta_deg: float, d: float, a: float, alpha_deg: float
    ) -> DhParameters:
        """Build from angles given in degrees."""
        return cls(
            theta=math.radians(theta_deg),
            d=float(d),
            a=float(a),
            alpha=math.radians(alpha_deg),
        )

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return self.theta, self.d, self.a, self.alpha
