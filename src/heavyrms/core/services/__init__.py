"""Services for heavy-atom structure comparison."""

from .structure_normalizer import StructureNormalizer, normalize
from .query_compiler import QueryCompiler, compile_molecule_query
from .matcher import Matcher, compare_one
from .comparison_service import ComparisonService

__all__ = [
    "StructureNormalizer",
    "normalize",
    "QueryCompiler",
    "compile_molecule_query",
    "Matcher",
    "compare_one",
    "ComparisonService",
]
