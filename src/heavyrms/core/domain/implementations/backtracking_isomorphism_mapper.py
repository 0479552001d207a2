"""Depth-first backtracking enumeration of molecular graph isomorphisms."""

import logging
from typing import List, Optional
from ..interfaces.isomorphism_mapper import IsomorphismMapper, MappingVisitor
from ..models.molecular_graph import MolecularGraph

logger = logging.getLogger(__name__)


class BacktrackingIsomorphismMapper(IsomorphismMapper):
    """Mapper that extends partial mappings along the compiled query order.

    Each query position is tried against every unused target atom with the
    same element and degree that is bonded to the images of all previously
    placed query neighbours. Because the bond counts are equal, a complete
    assignment that satisfies these constraints is an isomorphism.
    """

    def map_generic(self, visit: MappingVisitor, target: MolecularGraph) -> int:
        """Run the search against ``target``; see ``IsomorphismMapper``."""
        if not self.is_feasible(target):
            logger.debug("Rejected %r: graph invariants differ from query", target)
            return 0

        query = self.query
        n = query.num_atoms
        assignment: List[Optional[int]] = [None] * n
        used = [False] * n
        candidates_by_class = {}
        for index, atom in enumerate(target.atoms):
            key = (atom.element, target.degree(index))
            candidates_by_class.setdefault(key, []).append(index)

        found = 0

        def emit() -> bool:
            nonlocal found
            found += 1
            mapping = [(q, assignment[q]) for q in range(n)]
            return bool(visit(mapping))

        def extend(depth: int) -> bool:
            if depth == n:
                return emit()

            q_atom = query.order[depth]
            constraints = query.constraints[depth]
            if constraints:
                # Restrict to neighbours of an already mapped neighbour
                anchor = assignment[constraints[0]]
                pool = sorted(target.neighbors(anchor))
            else:
                pool = candidates_by_class.get(
                    (query.elements[q_atom], query.degrees[q_atom]), []
                )

            for t_atom in pool:
                if used[t_atom]:
                    continue
                if target.atoms[t_atom].element != query.elements[q_atom]:
                    continue
                if target.degree(t_atom) != query.degrees[q_atom]:
                    continue
                if any(
                    not target.has_bond(assignment[c], t_atom) for c in constraints[1:]
                ):
                    continue

                assignment[q_atom] = t_atom
                used[t_atom] = True
                if extend(depth + 1):
                    return True
                used[t_atom] = False
                assignment[q_atom] = None
            return False

        stopped = extend(0)
        logger.debug(
            "Enumerated %d mapping(s) for %r%s",
            found,
            target.title,
            " (stopped early)" if stopped else "",
        )
        return found
