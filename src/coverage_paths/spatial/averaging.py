"""Compute weighted averages of 3D orientations."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from coverage_paths.spatial.rotations import Quaternion

OptionalWeights = Sequence[float] | None


def average_quaternions(qs: Sequence[Quaternion], weights: OptionalWeights = None) -> Quaternion:
    """Compute a maximum-likelihood average of quaternions.

    Stacks the quaternions as columns of a 4xN matrix Q and returns the principal eigenvector
    of the symmetric matrix M = Q W Q^T.
        Reference: Method 2 from this answer: https://math.stackexchange.com/a/3435296/614782
        See also: Markley et al., "Averaging Quaternions" (2007)

    Limitations: if several eigenvalues tie for the maximum, the first of the tied eigenvectors
    is returned, which is one of several equally valid answers. Rotations spread evenly through
    rotation space yield a valid but not very meaningful average. The sign of the result is not
    normalized (q and -q express the same rotation).

    :param qs: Collection of unit quaternions representing 3D rotations
    :param weights: Optional sequence of per-quaternion weights (defaults to uniform weighting)
    :return: Quaternion result of the weighted average
    """
    if not qs:
        raise ValueError(f"Cannot compute average of zero quaternions: {qs}.")
    if weights is None:
        weights = [1.0] * len(qs)
    if len(qs) != len(weights):
        lq = len(qs)
        lw = len(weights)
        raise ValueError(f"Quaternions and weights must have the same length, got {lq} and {lw}.")

    q_matrix = np.column_stack([q.to_array() for q in qs])  # (4, N)
    matrix = (q_matrix * np.asarray(weights, dtype=float)) @ q_matrix.T  # Symmetric (4, 4)

    # eigh returns eigenvalues in ascending order; argmax takes the first of any tied maxima
    eigenvalues, eigenvectors = np.linalg.eigh(matrix)
    largest_idx = int(np.argmax(eigenvalues))
    principal = eigenvectors[:, largest_idx]
    return Quaternion.from_array(principal)
