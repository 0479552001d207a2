#!/usr/bin/env python3
# src/heavyrms/core/domain/models/molecular_graph.py

"""
Domain model representing a molecular structure as a graph.
"""

from typing import Dict, List, Set
import networkx as nx
import numpy as np
from .atom import Atom
from .bond import Bond


class MolecularGraph:
    """Graph representation of a molecular structure."""

    def __init__(self, atoms: List[Atom], bonds: List[Bond], title: str = ""):
        """
        Initialize a MolecularGraph.

        Args:
            atoms: List of Atom objects, indexed by position
            bonds: List of Bond objects referring to atom positions
            title: Name of the structure as read from its source file
        """
        self.atoms = list(atoms)
        self.bonds = list(bonds)
        self.title = title
        self.aromaticity_perceived = False
        self.rings_perceived = False
        self.hybridization_perceived = False
        self._adjacency: Dict[int, Set[int]] = {}
        self._rebuild_adjacency()

    def _rebuild_adjacency(self) -> None:
        self._adjacency = {i: set() for i in range(len(self.atoms))}
        for bond in self.bonds:
            if bond.atom1_id == bond.atom2_id:
                continue
            self._adjacency[bond.atom1_id].add(bond.atom2_id)
            self._adjacency[bond.atom2_id].add(bond.atom1_id)

    @property
    def num_atoms(self) -> int:
        return len(self.atoms)

    @property
    def num_bonds(self) -> int:
        """Number of distinct bonded pairs."""
        return sum(len(n) for n in self._adjacency.values()) // 2

    def is_empty(self) -> bool:
        return not self.atoms

    def neighbors(self, index: int) -> Set[int]:
        """Indices of the atoms bonded to atom ``index``."""
        return self._adjacency[index]

    def degree(self, index: int) -> int:
        return len(self._adjacency[index])

    def has_bond(self, i: int, j: int) -> bool:
        return j in self._adjacency.get(i, ())

    def get_coordinates(self) -> np.ndarray:
        """Get coordinates of all atoms in the graph.

        Returns:
            numpy array of shape (n_atoms, 3) containing xyz coordinates
        """
        if not self.atoms:
            return np.zeros((0, 3), dtype=float)
        return np.array([atom.coordinates for atom in self.atoms], dtype=float)

    def to_networkx(self) -> nx.Graph:
        """Convert to a NetworkX graph with element labels on the nodes."""
        graph = nx.Graph()
        for index, atom in enumerate(self.atoms):
            graph.add_node(index, element=atom.element)
        for i, neighbors in self._adjacency.items():
            for j in neighbors:
                if i < j:
                    graph.add_edge(i, j)
        return graph

    def __repr__(self) -> str:
        return (
            f"MolecularGraph(title={self.title!r}, atoms={self.num_atoms}, "
            f"bonds={self.num_bonds})"
        )
