################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dense matrices and 4x4 homogeneous transforms for robot kinematics."""

from __future__ import annotations

from matrix_kinematics.config.matrix_params import MatrixParams
from matrix_kinematics.config.matrix_params import MatrixParamsError
from matrix_kinematics.kinematics_types.dh_parameters import DhParameters
from matrix_kinematics.math_utils.matrix import DimensionMismatchError
from matrix_kinematics.math_utils.matrix import Matrix
from matrix_kinematics.math_utils.matrix import MatrixError
from matrix_kinematics.math_utils.matrix import MatrixShapeError
from matrix_kinematics.math_utils.transforms import HomogeneousTransforms


__all__ = [
    "DhParameters",
    "DimensionMismatchError",
    "HomogeneousTransforms",
    "Matrix",
    "MatrixError",
    "MatrixParams",
    "MatrixParamsError",
    "MatrixShapeError",
]
