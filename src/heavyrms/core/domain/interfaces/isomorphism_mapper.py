"""Interface for atom correspondence enumeration strategies."""

from abc import ABC, abstractmethod
from typing import Callable, List, Tuple
from ..models.molecular_graph import MolecularGraph
from ..models.query import Query

Mapping = List[Tuple[int, int]]
MappingVisitor = Callable[[Mapping], bool]


class IsomorphismMapper(ABC):
    """Abstract base class for isomorphism search strategies.

    A mapper is bound to one compiled query and can be run against any
    number of test graphs.
    """

    def __init__(self, query: Query):
        self.query = query

    @abstractmethod
    def map_generic(self, visit: MappingVisitor, target: MolecularGraph) -> int:
        """
        Enumerate every atom bijection between the query and ``target``.

        Args:
            visit: Called once per mapping with ``(query_index, target_index)``
                pairs ordered by query index; a truthy return stops the search
            target: Normalized test structure

        Returns:
            Number of mappings passed to ``visit``
        """
        pass

    def is_feasible(self, target: MolecularGraph) -> bool:
        """Cheap invariants that every isomorphic target must share."""
        query = self.query
        if target.num_atoms != query.num_atoms:
            return False
        if target.num_bonds != query.num_bonds:
            return False
        degrees = tuple(sorted(target.degree(i) for i in range(target.num_atoms)))
        if degrees != query.degree_sequence:
            return False
        elements: dict = {}
        for atom in target.atoms:
            elements[atom.element] = elements.get(atom.element, 0) + 1
        return tuple(sorted(elements.items())) == query.element_counts
