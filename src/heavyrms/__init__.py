"""Heavy-atom RMSD between chemically identical molecular structures."""

from .core import (
    Atom,
    Bond,
    BondType,
    ComparisonResult,
    ComparisonService,
    ComparisonSettings,
    Matcher,
    MolecularGraph,
    compare_one,
)

__version__ = "0.1.0"

__all__ = [
    "Atom",
    "Bond",
    "BondType",
    "ComparisonResult",
    "ComparisonService",
    "ComparisonSettings",
    "Matcher",
    "MolecularGraph",
    "compare_one",
]
