#!/usr/bin/env python3
# src/heavyrms/core/domain/models/bond.py

"""
Domain model representing a chemical bond between atoms.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple


class BondType(Enum):
    """Enumeration of possible bond types."""

    SINGLE = auto()
    DOUBLE = auto()
    TRIPLE = auto()
    AROMATIC = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class Bond:
    """Represents a chemical bond between two atoms.

    The pair is unordered; only connectivity is used for matching.
    """

    atom1_id: int
    atom2_id: int
    bond_type: BondType = BondType.SINGLE
    bond_order: float = 1.0
    aromatic: bool = False
    in_ring: bool = False

    @property
    def key(self) -> Tuple[int, int]:
        """Order-independent identifier of the bonded pair."""
        return (min(self.atom1_id, self.atom2_id), max(self.atom1_id, self.atom2_id))
