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

import logging
import math
from typing import List
from typing import Sequence
from typing import Union

from matrix_kinematics.kinematics_types.dh_parameters import DhParameters
from matrix_kinematics.math_utils.matrix import Matrix


_LOG: logging.Logger = logging.getLogger(__name__)


DhRow = Union[DhParameters, Sequence[float]]


class HomogeneousTransforms:
    """4x4 homogeneous transforms for serial-chain kinematics.

    Responsibility:
        Build rotation, translation and Denavit-Hartenberg transforms as
        Matrix instances and compose them into base-to-end-effector poses.

    Inputs/outputs:
        - Every builder returns a new 4x4 Matrix starting from identity, so
          the last row is always [0, 0, 0, 1].
        - Angles are in radians.
        - Points are 3-vectors, lifted to [x, y, z, 1] for application.

    Frames and units:
        - Right-handed axes. A transform T_AB maps p_B to p_A as
          [p_A; 1] = T_AB * [p_B; 1].
        - Translation units are whatever the caller uses for d and a.

    Equations:
        Rotation about z:
            [[c, -s, 0, 0], [s, c, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]]

        Euler composition (roll, pitch, yaw applied to a column vector):
            R = Rx(roll) * Ry(pitch) * Rz(yaw)

        Standard DH joint transform:
            [[cθ, -sθ cα,  sθ sα, a cθ],
             [sθ,  cθ cα, -cθ sα, a sθ],
             [0,   sα,     cα,    d   ],
             [0,   0,      0,     1   ]]

        Chain:
            T = I * T_1 * T_2 * ... * T_n
    """

    @staticmethod
    def rotation_x(angle: float) -> Matrix:
        m: Matrix = Matrix.identity(4)
        c: float = math.cos(angle)
        s: float = math.sin(angle)
        m[1, 1] = c
        m[1, 2] = -s

        m[2, 1] = s
        m[2, 2] = c
        return m

    @staticmethod
    def rotation_y(angle: float) -> Matrix:
        m: Matrix = Matrix.identity(4)
        c: float = math.cos(angle)
        s: float = math.sin(angle)
        m[0, 0] = c
        m[0, 2] = s

        m[2, 0] = -s
        m[2, 2] = c
        return m

    @staticmethod
    def rotation_z(angle: float) -> Matrix:
        m: Matrix = Matrix.identity(4)
        c: float = math.cos(angle)
        s: float = math.sin(angle)
        m[0, 0] = c
        m[0, 1] = -s

        m[1, 0] = s
        m[1, 1] = c
        return m

    @staticmethod
    def translation(x: float, y: float, z: float) -> Matrix:
        m: Matrix = Matrix.identity(4)
        m[0, 3] = x
        m[1, 3] = y
        m[2, 3] = z
        return m

    @staticmethod
    def euler_rotation(yaw: float, pitch: float, roll: float) -> Matrix:
        """Rotation from ZYX Euler angles."""
        return (
            HomogeneousTransforms.rotation_x(roll)
            * HomogeneousTransforms.rotation_y(pitch)
            * HomogeneousTransforms.rotation_z(yaw)
        )

    @staticmethod
    def dh_joint(params: DhRow) -> Matrix:
        """Transform from one joint frame to the next."""
        dh: DhParameters = HomogeneousTransforms._as_dh(params)
        ct: float = math.cos(dh.theta)
        st: float = math.sin(dh.theta)
        ca: float = math.cos(dh.alpha)
        sa: float = math.sin(dh.alpha)

        joint_t: Matrix = Matrix.identity(4)
        joint_t[0, 0] = ct
        joint_t[0, 1] = -st * ca
        joint_t[0, 2] = st * sa
        joint_t[0, 3] = dh.a * ct

        joint_t[1, 0] = st
        joint_t[1, 1] = ct * ca
        joint_t[1, 2] = -ct * sa
        joint_t[1, 3] = dh.a * st

        joint_t[2, 0] = 0.0
        joint_t[2, 1] = sa
        joint_t[2, 2] = ca
        joint_t[2, 3] = dh.d
        return joint_t

    @staticmethod
    def dh_chain(params: Sequence[DhRow]) -> Matrix:
        """End-effector pose in the base frame for joints ordered base first.

        An empty chain yields the 4x4 identity.
        """
        joints: List[DhParameters] = [HomogeneousTransforms._as_dh(row) for row in params]
        _LOG.debug("Composing DH chain with %d joints", len(joints))

        t: Matrix = Matrix.identity(4)
        for joint in joints:
            t = t * HomogeneousTransforms.dh_joint(joint)
        return t

    @staticmethod
    def apply(transform: Matrix, point: Sequence[float]) -> List[float]:
        """Map a 3D point through a 4x4 transform."""
        HomogeneousTransforms._validate_transform(transform, "apply")
        if len(point) != 3:
            raise ValueError("apply expects length-3 point")
        lifted: Matrix = Matrix.column([point[0], point[1], point[2], 1.0])
        mapped: Matrix = transform * lifted
        return [mapped[0, 0], mapped[1, 0], mapped[2, 0]]

    @staticmethod
    def position(transform: Matrix) -> List[float]:
        """Return the translation column of a 4x4 transform."""
        HomogeneousTransforms._validate_transform(transform, "position")
        return [transform[0, 3], transform[1, 3], transform[2, 3]]

    @staticmethod
    def _as_dh(params: DhRow) -> DhParameters:
        if isinstance(params, DhParameters):
            return params
        return DhParameters.from_sequence(params)

    @staticmethod
    def _validate_transform(transform: Matrix, name: str) -> None:
        if transform.shape != (4, 4):
            raise ValueError(f"{name} expects 4x4 transform")
