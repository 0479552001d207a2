"""Domain model classes."""

from .atom import Atom
from .bond import Bond, BondType
from .molecular_graph import MolecularGraph
from .query import Query
from .comparison_result import ComparisonResult

__all__ = [
    "Atom",
    "Bond",
    "BondType",
    "MolecularGraph",
    "Query",
    "ComparisonResult",
]
