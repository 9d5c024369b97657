################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Value types for kinematic chains."""

from __future__ import annotations

from matrix_kinematics.kinematics_types.dh_parameters import DhParameters


__all__ = [
    "DhParameters",
]
