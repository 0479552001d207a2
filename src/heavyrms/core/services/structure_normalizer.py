"""Service that reduces a structure to its heavy-atom connectivity."""

import logging
from dataclasses import replace
from ..domain.models.bond import Bond, BondType
from ..domain.models.molecular_graph import MolecularGraph

logger = logging.getLogger(__name__)


class StructureNormalizer:
    """
    Prepare structures for heavy-atom comparison.

    Aromaticity and ring membership are not reliable enough across
    independently generated structures to decide whether two of them are
    the same compound, so they are overwritten with uniform values and only
    the bonding topology of the heavy atoms is left to drive matching.
    """

    def normalize(self, graph: MolecularGraph) -> MolecularGraph:
        """
        Return a normalized copy of ``graph``.

        Hydrogens and their bonds are removed and the remaining atoms are
        re-indexed in their original order. Every atom and bond is marked
        non-aromatic and in-ring, and every bond becomes a single bond.

        Args:
            graph: Structure to normalize; left unchanged

        Returns:
            New MolecularGraph with perception flags set
        """
        new_index = {}
        atoms = []
        for old_index, atom in enumerate(graph.atoms):
            if atom.is_hydrogen:
                continue
            new_index[old_index] = len(atoms)
            atoms.append(
                replace(atom, atom_id=len(atoms), aromatic=False, in_ring=True)
            )

        bonds = []
        seen = set()
        for bond in graph.bonds:
            if bond.atom1_id not in new_index or bond.atom2_id not in new_index:
                continue
            a, b = new_index[bond.atom1_id], new_index[bond.atom2_id]
            key = (min(a, b), max(a, b))
            if a == b or key in seen:
                continue
            seen.add(key)
            bonds.append(
                Bond(
                    atom1_id=a,
                    atom2_id=b,
                    bond_type=BondType.SINGLE,
                    bond_order=1.0,
                    aromatic=False,
                    in_ring=True,
                )
            )

        removed = graph.num_atoms - len(atoms)
        if removed:
            logger.debug("Removed %d hydrogen(s) from %r", removed, graph.title)

        normalized = MolecularGraph(atoms, bonds, graph.title)
        # avoid recomputing perception downstream
        normalized.aromaticity_perceived = True
        normalized.rings_perceived = True
        normalized.hybridization_perceived = True
        return normalized


def normalize(graph: MolecularGraph) -> MolecularGraph:
    """Module-level shortcut for ``StructureNormalizer().normalize``."""
    return StructureNormalizer().normalize(graph)
