"""Matching of test structures against a fixed reference structure."""

import logging
from typing import Optional, Type
from ..domain.implementations.backtracking_isomorphism_mapper import (
    BacktrackingIsomorphismMapper,
)
from ..domain.implementations.quaternion_superimposer import RMSDMappingEvaluator
from ..domain.interfaces.isomorphism_mapper import IsomorphismMapper
from ..domain.models.comparison_result import ComparisonResult
from ..domain.models.molecular_graph import MolecularGraph
from .query_compiler import QueryCompiler
from .structure_normalizer import StructureNormalizer

logger = logging.getLogger(__name__)


class Matcher:
    """
    Compute atom correspondences between a reference and test structures.

    The reference query is compiled once on construction and reused for
    every test structure. Both the reference and the test structures must
    already be normalized.
    """

    def __init__(
        self,
        reference: MolecularGraph,
        mapper_class: Optional[Type[IsomorphismMapper]] = None,
    ):
        self.reference = reference
        self.query = QueryCompiler().compile(reference)
        self.mapper = (mapper_class or BacktrackingIsomorphismMapper)(self.query)

    def compare(self, test: MolecularGraph, minimize: bool = False) -> ComparisonResult:
        """
        Exhaustively map ``test`` onto the reference and score every mapping.

        Args:
            test: Normalized test structure
            minimize: Superimpose each mapping before measuring the RMSD

        Returns:
            ComparisonResult holding the lowest RMSD, or infinity when no
            correspondence exists
        """
        evaluator = RMSDMappingEvaluator(self.reference, test, minimize)
        self.mapper.map_generic(evaluator, test)

        if not evaluator.num_mappings:
            logger.info(
                "No atom correspondence between %r and %r",
                self.reference.title,
                test.title,
            )

        return ComparisonResult(
            title=test.title,
            rmsd=evaluator.best_rmsd,
            num_mappings=evaluator.num_mappings,
            matched_atoms=len(evaluator.best_mapping),
            minimized=minimize,
            best_mapping=evaluator.best_mapping,
        )

    def compute_rmsd(self, test: MolecularGraph, minimize: bool = False) -> float:
        """Lowest RMSD over all mappings; infinity if unmatchable."""
        return self.compare(test, minimize).rmsd


def compare_one(
    reference: MolecularGraph, test: MolecularGraph, minimize: bool = False
) -> float:
    """
    Heavy-atom RMSD between two structures of the same compound.

    Both structures are normalized first, so raw structures may be passed.

    Args:
        reference: Reference structure
        test: Structure to compare
        minimize: Superimpose before measuring

    Returns:
        Minimum RMSD over all atom correspondences, or ``float("inf")``
    """
    normalizer = StructureNormalizer()
    matcher = Matcher(normalizer.normalize(reference))
    return matcher.compute_rmsd(normalizer.normalize(test), minimize)
