#!/usr/bin/env python3
# src/heavyrms/core/domain/models/atom.py

"""
Domain model representing an atom in a molecular structure.
"""

from dataclasses import dataclass
from typing import Tuple

HYDROGEN_SYMBOLS = frozenset({"H", "D", "T"})


@dataclass(frozen=True)
class Atom:
    """Represents an atom in a molecular structure."""

    atom_id: int
    element: str
    coordinates: Tuple[float, float, float]
    atomic_number: int = 0
    name: str = ""
    aromatic: bool = False
    in_ring: bool = False

    @property
    def is_hydrogen(self) -> bool:
        """Whether this atom is a hydrogen (or one of its isotopes)."""
        if self.atomic_number:
            return self.atomic_number == 1
        return self.element.strip().capitalize() in HYDROGEN_SYMBOLS
