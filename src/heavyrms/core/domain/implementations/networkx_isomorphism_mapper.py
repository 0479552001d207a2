"""Implementation of isomorphism enumeration using NetworkX's VF2 matcher."""

import logging
from networkx.algorithms import isomorphism
from ..interfaces.isomorphism_mapper import IsomorphismMapper, MappingVisitor
from ..models.molecular_graph import MolecularGraph

logger = logging.getLogger(__name__)


class NetworkXIsomorphismMapper(IsomorphismMapper):
    """Mapper that delegates the search to ``GraphMatcher.isomorphisms_iter``."""

    def map_generic(self, visit: MappingVisitor, target: MolecularGraph) -> int:
        """Run the search against ``target``; see ``IsomorphismMapper``."""
        if not self.is_feasible(target):
            logger.debug("Rejected %r: graph invariants differ from query", target)
            return 0

        # Node match function that requires matching elements
        node_match = isomorphism.categorical_node_match("element", None)
        matcher = isomorphism.GraphMatcher(
            self.query.graph, target.to_networkx(), node_match=node_match
        )

        found = 0
        for match in matcher.isomorphisms_iter():
            found += 1
            mapping = sorted(match.items())
            if visit(mapping):
                logger.debug("Search stopped by visitor after %d mapping(s)", found)
                break
        return found
