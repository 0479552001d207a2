"""Service driving reference structures against streams of test structures."""

import logging
from typing import Iterable, Iterator, Optional

from tqdm import tqdm

from ..config import ComparisonSettings
from ..domain.models.comparison_result import ComparisonResult
from ..domain.models.molecular_graph import MolecularGraph
from .matcher import Matcher
from .structure_normalizer import StructureNormalizer

logger = logging.getLogger(__name__)


class ComparisonService:
    """Service for comparing test structures to reference structures."""

    def __init__(self, settings: Optional[ComparisonSettings] = None):
        """Initialize service with comparison settings."""
        self.settings = (settings or ComparisonSettings()).validate()
        self._normalizer = StructureNormalizer()

    def compare_streams(
        self,
        references: Iterable[MolecularGraph],
        tests: Iterable[MolecularGraph],
    ) -> Iterator[ComparisonResult]:
        """
        Compare a stream of test structures to a stream of references.

        Both streams are consumed lazily. By default the i-th test structure
        is compared to the i-th reference. With ``first_only`` every test
        structure is compared to the first reference. A test structure
        without atoms ends the current reference's turn, and the run ends
        when the test structures run out.

        Args:
            references: Reference structures
            tests: Test structures

        Yields:
            One ComparisonResult per compared test structure
        """
        test_iter = iter(
            tqdm(
                tests,
                desc="Comparing",
                unit="structure",
                disable=not self.settings.show_progress,
            )
        )

        for reference in references:
            matcher = Matcher(
                self._normalizer.normalize(reference), self.settings.mapper_class
            )
            while True:
                test = next(test_iter, None)
                if test is None:
                    return
                if test.is_empty():
                    logger.info("Empty test structure; skipping to next reference")
                    break
                result = matcher.compare(
                    self._normalizer.normalize(test), self.settings.minimize
                )
                logger.debug(
                    "%r vs %r: rmsd=%s over %d mapping(s)",
                    reference.title,
                    test.title,
                    result.rmsd,
                    result.num_mappings,
                )
                yield result
                if not self.settings.first_only:
                    break

            if self.settings.first_only:
                return

    def compare_files(
        self, reference_path: str, test_path: str
    ) -> Iterator[ComparisonResult]:
        """
        Compare the structures of two files.

        Args:
            reference_path: File holding the reference structure(s)
            test_path: File holding the test structure(s)

        Yields:
            One ComparisonResult per compared test structure
        """
        from ...infrastructure.repositories.structure_repository import (
            StructureRepository,
        )

        references = StructureRepository(
            reference_path, skip_malformed=self.settings.skip_malformed
        )
        tests = StructureRepository(
            test_path, skip_malformed=self.settings.skip_malformed
        )
        return self.compare_streams(references, tests)
