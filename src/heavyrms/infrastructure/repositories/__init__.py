"""Repository implementations."""

from .structure_repository import StructureRepository, detect_format, from_rdkit_mol

__all__ = ["StructureRepository", "detect_format", "from_rdkit_mol"]
