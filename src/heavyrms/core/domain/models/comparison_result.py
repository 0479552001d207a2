"""Domain model for structure comparison results."""

import math
from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class ComparisonResult:
    """Contains the outcome of comparing one test structure to a reference."""

    title: str
    rmsd: float
    num_mappings: int = 0
    matched_atoms: int = 0
    minimized: bool = False
    best_mapping: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def comparable(self) -> bool:
        """False when no atom correspondence exists."""
        return math.isfinite(self.rmsd)
