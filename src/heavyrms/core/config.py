"""Settings shared by the comparison service and the command line."""

import argparse
from dataclasses import dataclass
from typing import Type

from .domain.implementations import MAPPERS
from .domain.interfaces.isomorphism_mapper import IsomorphismMapper


@dataclass
class ComparisonSettings:
    """Options controlling how structures are compared."""

    minimize: bool = False
    first_only: bool = False
    mapper: str = "backtracking"
    skip_malformed: bool = False
    show_progress: bool = False

    def validate(self) -> "ComparisonSettings":
        """
        Check the settings for consistency.

        Raises:
            ValueError: If the mapper name is not registered
        """
        if self.mapper not in MAPPERS:
            raise ValueError(
                f"Unknown mapper {self.mapper!r}; choose from {', '.join(sorted(MAPPERS))}"
            )
        return self

    @property
    def mapper_class(self) -> Type[IsomorphismMapper]:
        return MAPPERS[self.mapper]

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ComparisonSettings":
        """Build settings from parsed command-line arguments."""
        return cls(
            minimize=args.minimize,
            first_only=args.firstonly,
            mapper=args.mapper,
            skip_malformed=args.skip_malformed,
            show_progress=args.progress,
        ).validate()
