"""Domain interfaces."""

from .isomorphism_mapper import IsomorphismMapper, Mapping, MappingVisitor

__all__ = ["IsomorphismMapper", "Mapping", "MappingVisitor"]
