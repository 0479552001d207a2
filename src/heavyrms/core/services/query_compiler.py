"""Service compiling a reference structure into a reusable search query."""

import logging
from collections import Counter
from typing import Dict, List, Set, Tuple
from ..domain.models.molecular_graph import MolecularGraph
from ..domain.models.query import Query

logger = logging.getLogger(__name__)


class QueryCompiler:
    """
    Turn a normalized reference graph into a ``Query``.

    The search order starts from the rarest kind of atom (by element and
    degree) and grows depth first through bonded neighbours, preferring
    atoms with the most already-placed neighbours. Rare, well-constrained
    atoms placed early keep the number of candidates per step small.
    """

    def compile(self, graph: MolecularGraph) -> Query:
        """
        Compile ``graph`` into a query.

        Args:
            graph: Normalized reference structure

        Returns:
            Query describing the reference topology
        """
        n = graph.num_atoms
        elements = tuple(atom.element for atom in graph.atoms)
        degrees = tuple(graph.degree(i) for i in range(n))
        adjacency = tuple(frozenset(graph.neighbors(i)) for i in range(n))

        class_sizes = Counter(zip(elements, degrees))
        rarity = [class_sizes[(elements[i], degrees[i])] for i in range(n)]

        order = self._search_order(n, adjacency, degrees, rarity)
        position = {atom: k for k, atom in enumerate(order)}
        constraints = tuple(
            tuple(
                sorted(
                    (nbr for nbr in adjacency[atom] if position[nbr] < k),
                    key=position.__getitem__,
                )
            )
            for k, atom in enumerate(order)
        )

        query = Query(
            elements=elements,
            degrees=degrees,
            adjacency=adjacency,
            order=tuple(order),
            constraints=constraints,
            num_bonds=graph.num_bonds,
            degree_sequence=tuple(sorted(degrees)),
            element_counts=tuple(sorted(Counter(elements).items())),
            graph=graph.to_networkx(),
        )
        logger.debug(
            "Compiled query for %r: %d atoms, %d bonds",
            graph.title,
            query.num_atoms,
            query.num_bonds,
        )
        return query

    @staticmethod
    def _search_order(
        n: int,
        adjacency: Tuple[frozenset, ...],
        degrees: Tuple[int, ...],
        rarity: List[int],
    ) -> List[int]:
        order: List[int] = []
        placed: Set[int] = set()
        placed_neighbors: Dict[int, int] = {i: 0 for i in range(n)}

        def place(atom: int) -> None:
            order.append(atom)
            placed.add(atom)
            for nbr in adjacency[atom]:
                placed_neighbors[nbr] += 1

        while len(order) < n:
            # Seed a new connected component
            seed = min(
                (i for i in range(n) if i not in placed),
                key=lambda i: (rarity[i], -degrees[i], i),
            )
            place(seed)
            stack = [seed]
            while stack:
                frontier = [nbr for nbr in adjacency[stack[-1]] if nbr not in placed]
                if not frontier:
                    stack.pop()
                    continue
                nxt = min(
                    frontier,
                    key=lambda i: (-placed_neighbors[i], rarity[i], -degrees[i], i),
                )
                place(nxt)
                stack.append(nxt)
        return order


def compile_molecule_query(graph: MolecularGraph) -> Query:
    """Module-level shortcut for ``QueryCompiler().compile``."""
    return QueryCompiler().compile(graph)
