"""Domain model for a compiled topological query."""

from dataclasses import dataclass
from typing import FrozenSet, Tuple
import networkx as nx


@dataclass(frozen=True)
class Query:
    """Precompiled description of a reference graph's topology.

    ``order`` lists the reference atoms in the sequence the search assigns
    them; ``constraints[k]`` holds the atoms from ``order[:k]`` that are
    bonded to ``order[k]``.
    """

    elements: Tuple[str, ...]
    degrees: Tuple[int, ...]
    adjacency: Tuple[FrozenSet[int], ...]
    order: Tuple[int, ...]
    constraints: Tuple[Tuple[int, ...], ...]
    num_bonds: int
    degree_sequence: Tuple[int, ...]
    element_counts: Tuple[Tuple[str, int], ...]
    graph: nx.Graph

    @property
    def num_atoms(self) -> int:
        return len(self.elements)
