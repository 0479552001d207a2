"""Core domain models and interfaces."""

from .models.atom import Atom
from .models.bond import Bond, BondType
from .models.molecular_graph import MolecularGraph
from .models.query import Query
from .models.comparison_result import ComparisonResult
from .interfaces.isomorphism_mapper import IsomorphismMapper

__all__ = [
    "Atom",
    "Bond",
    "BondType",
    "MolecularGraph",
    "Query",
    "ComparisonResult",
    "IsomorphismMapper",
]
