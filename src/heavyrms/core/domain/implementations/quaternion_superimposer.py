"""Least-squares rigid superposition and RMSD evaluation of atom mappings."""

import logging
import math
import warnings
from typing import Callable, List, Optional, Tuple
import numpy as np
from ...exceptions import DegenerateInputWarning
from ..interfaces.isomorphism_mapper import Mapping
from ..models.molecular_graph import MolecularGraph

logger = logging.getLogger(__name__)

RotationFit = Callable[[np.ndarray, np.ndarray], np.ndarray]


def centroid(coords: np.ndarray) -> np.ndarray:
    """Mean position of an (N, 3) coordinate array."""
    return coords.mean(axis=0)


def center(coords: np.ndarray) -> np.ndarray:
    """Return a copy of ``coords`` translated so its centroid is the origin."""
    if len(coords) == 0:
        return coords.copy()
    return coords - centroid(coords)


def quaternion_fit(ref_coords: np.ndarray, test_coords: np.ndarray) -> np.ndarray:
    """
    Optimal rotation of centered ``test_coords`` onto centered ``ref_coords``.

    The rotation is the unit quaternion maximising the overlap of the two
    point sets, found as the eigenvector of the largest eigenvalue of the
    symmetric 4x4 key matrix built from their cross-covariance (Horn, 1987).
    The result is always a proper rotation.

    Args:
        ref_coords: (N, 3) centered reference coordinates
        test_coords: (N, 3) centered test coordinates

    Returns:
        3x3 rotation matrix ``R`` such that ``test_coords @ R.T`` best
        overlays ``ref_coords``
    """
    s = np.dot(test_coords.T, ref_coords)
    sxx, sxy, sxz = s[0]
    syx, syy, syz = s[1]
    szx, szy, szz = s[2]

    key = np.array(
        [
            [sxx + syy + szz, syz - szy, szx - sxz, sxy - syx],
            [syz - szy, sxx - syy - szz, sxy + syx, szx + sxz],
            [szx - sxz, sxy + syx, -sxx + syy - szz, syz + szy],
            [sxy - syx, szx + sxz, syz + szy, -sxx - syy + szz],
        ]
    )

    # eigh returns eigenvalues in ascending order
    _, eigenvectors = np.linalg.eigh(key)
    q0, qx, qy, qz = eigenvectors[:, -1]

    return np.array(
        [
            [
                q0 * q0 + qx * qx - qy * qy - qz * qz,
                2.0 * (qx * qy - q0 * qz),
                2.0 * (qx * qz + q0 * qy),
            ],
            [
                2.0 * (qy * qx + q0 * qz),
                q0 * q0 - qx * qx + qy * qy - qz * qz,
                2.0 * (qy * qz - q0 * qx),
            ],
            [
                2.0 * (qz * qx - q0 * qy),
                2.0 * (qz * qy + q0 * qx),
                q0 * q0 - qx * qx - qy * qy + qz * qz,
            ],
        ]
    )


def kabsch_fit(ref_coords: np.ndarray, test_coords: np.ndarray) -> np.ndarray:
    """Same contract as ``quaternion_fit``, solved by SVD."""
    correlation_matrix = np.dot(test_coords.T, ref_coords)
    U, _, Vt = np.linalg.svd(correlation_matrix)

    # Ensure right-handed coordinate system
    d = np.sign(np.linalg.det(np.dot(U, Vt)))
    if d == 0:
        d = 1.0
    D = np.diag([1.0, 1.0, d])
    return np.dot(np.dot(U, D), Vt).T


def rotate_coords(coords: np.ndarray, rotation: np.ndarray) -> np.ndarray:
    """Apply ``rotation`` to every row of ``coords``."""
    return np.dot(coords, rotation.T)


def calc_rms(ref_coords: np.ndarray, test_coords: np.ndarray) -> float:
    """Root-mean-square distance between paired rows; 0.0 for empty input."""
    n = len(ref_coords)
    if n == 0:
        return 0.0
    diff = ref_coords - test_coords
    return math.sqrt(float(np.sum(diff * diff)) / n)


class RMSDMappingEvaluator:
    """Visitor that scores every mapping and keeps the lowest RMSD.

    Instances are meant to be passed to ``IsomorphismMapper.map_generic``.
    They never request an early stop so the full mapping space is scored.
    """

    def __init__(
        self,
        reference: MolecularGraph,
        test: MolecularGraph,
        minimize: bool = False,
        fit: Optional[RotationFit] = None,
    ):
        self.reference = reference
        self.test = test
        self.minimize = minimize
        self.fit = fit or quaternion_fit
        self.best_rmsd = math.inf
        self.best_mapping: List[Tuple[int, int]] = []
        self.num_mappings = 0
        self._ref_coords = reference.get_coordinates()
        self._test_coords = test.get_coordinates()

    def evaluate(self, mapping: Mapping) -> float:
        """RMSD of a single mapping, after superposition if minimizing."""
        if not mapping:
            message = (
                f"No heavy atoms to compare between {self.reference.title!r} "
                f"and {self.test.title!r}"
            )
            logger.warning(message)
            warnings.warn(message, DegenerateInputWarning, stacklevel=2)
            return 0.0

        ref_coords = self._ref_coords[[r for r, _ in mapping]]
        test_coords = self._test_coords[[t for _, t in mapping]]

        if self.minimize:
            ref_coords = center(ref_coords)
            test_coords = center(test_coords)
            rotation = self.fit(ref_coords, test_coords)
            test_coords = rotate_coords(test_coords, rotation)

        return calc_rms(ref_coords, test_coords)

    def __call__(self, mapping: Mapping) -> bool:
        self.num_mappings += 1
        rmsd = self.evaluate(mapping)
        if rmsd < self.best_rmsd:
            self.best_rmsd = rmsd
            self.best_mapping = list(mapping)
        # check all possible mappings
        return False
