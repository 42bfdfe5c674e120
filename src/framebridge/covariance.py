"""
Covariance helpers.

Pose covariances travel as a flat, row-major list of 36 floats describing a 6x6
matrix over (x, y, z, rotation about X, rotation about Y, rotation about Z).
"""

from typing import List, Sequence

import numpy as np

from .kinematics import RigidTransform

_DIM = 6


def covariance_row_major_to_nested(covariance: Sequence[float]) -> List[List[float]]:
    """
    Reshapes a flat row-major covariance into 6 rows of 6 columns.

    Row `i` holds elements `[6i .. 6i+5]`. Neither the length, the symmetry nor the
    positive semi-definiteness of the input is checked: a short input yields short
    rows, extra elements are ignored.
    """
    return [list(covariance[i * _DIM : (i + 1) * _DIM]) for i in range(_DIM)]


def covariance_nested_to_row_major(matrix: Sequence[Sequence[float]]) -> List[float]:
    """Flattens a nested 6x6 covariance back into row-major order."""
    return [value for row in matrix for value in row]


def transform_covariance(
    covariance: Sequence[float], transform: RigidTransform
) -> List[float]:
    """
    Expresses a pose covariance in the target frame of `transform`.

    Only the rotation matters: the covariance is mapped as `B @ C @ B.T` with
    `B = blockdiag(R, R)`, rotating the translational and the rotational blocks
    (and their cross terms) alike.

    Args:
        covariance: Flat row-major 6x6 covariance (36 values).
        transform: The transform whose rotation is applied.

    Returns:
        The rotated covariance, flat and row-major.
    """
    cov = np.asarray(covariance, dtype=np.float64).reshape(_DIM, _DIM)

    basis = np.zeros((_DIM, _DIM))
    basis[:3, :3] = transform.rotation
    basis[3:, 3:] = transform.rotation

    return (basis @ cov @ basis.T).reshape(-1).tolist()
