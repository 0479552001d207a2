"""Core domain models, interfaces and services for heavy-atom RMSD computation."""

from .domain.models.atom import Atom
from .domain.models.bond import Bond, BondType
from .domain.models.molecular_graph import MolecularGraph
from .domain.models.comparison_result import ComparisonResult
from .domain.interfaces.isomorphism_mapper import IsomorphismMapper
from .config import ComparisonSettings
from .services.matcher import Matcher, compare_one
from .services.comparison_service import ComparisonService

__all__ = [
    "Atom",
    "Bond",
    "BondType",
    "MolecularGraph",
    "ComparisonResult",
    "IsomorphismMapper",
    "ComparisonSettings",
    "Matcher",
    "compare_one",
    "ComparisonService",
]
