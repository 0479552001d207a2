"""Shared fixtures for heavyrms tests."""

from typing import List, Sequence, Tuple

import numpy as np
import pytest

from heavyrms.core.domain.models.atom import Atom
from heavyrms.core.domain.models.bond import Bond, BondType
from heavyrms.core.domain.models.molecular_graph import MolecularGraph


def make_graph(
    elements: Sequence[str],
    coords: Sequence[Sequence[float]],
    bonds: Sequence[Tuple[int, int]],
    title: str = "mol",
) -> MolecularGraph:
    """Build a MolecularGraph from plain lists."""
    atoms = [
        Atom(atom_id=i, element=e, coordinates=tuple(float(c) for c in xyz))
        for i, (e, xyz) in enumerate(zip(elements, coords))
    ]
    return MolecularGraph(atoms, [Bond(a, b) for a, b in bonds], title)


def permute_graph(graph: MolecularGraph, order: List[int], title: str = "") -> MolecularGraph:
    """Reorder atoms so that new atom ``k`` is old atom ``order[k]``."""
    new_index = {old: new for new, old in enumerate(order)}
    atoms = [
        Atom(
            atom_id=new,
            element=graph.atoms[old].element,
            coordinates=graph.atoms[old].coordinates,
        )
        for new, old in enumerate(order)
    ]
    bonds = [
        Bond(new_index[b.atom1_id], new_index[b.atom2_id], b.bond_type, b.bond_order)
        for b in graph.bonds
    ]
    return MolecularGraph(atoms, bonds, title or graph.title)


def transform_graph(
    graph: MolecularGraph, rotation: np.ndarray, translation: Sequence[float]
) -> MolecularGraph:
    """Rigidly move every atom of ``graph``."""
    coords = graph.get_coordinates() @ rotation.T + np.asarray(translation)
    atoms = [
        Atom(atom_id=a.atom_id, element=a.element, coordinates=tuple(xyz))
        for a, xyz in zip(graph.atoms, coords)
    ]
    return MolecularGraph(atoms, list(graph.bonds), graph.title)


def rotation_matrix(axis: Sequence[float], angle: float) -> np.ndarray:
    """Rotation about ``axis`` by ``angle`` radians (Rodrigues)."""
    axis = np.asarray(axis, dtype=float)
    axis = axis / np.linalg.norm(axis)
    x, y, z = axis
    k = np.array([[0, -z, y], [z, 0, -x], [-y, x, 0]])
    return np.eye(3) + np.sin(angle) * k + (1 - np.cos(angle)) * (k @ k)


@pytest.fixture
def diatomic():
    """Two bonded atoms on the x axis."""
    return make_graph(["C", "C"], [(0, 0, 0), (1, 0, 0)], [(0, 1)], "diatomic")


@pytest.fixture
def tert_butanol():
    """Heavy-atom tert-butanol: a carbon with three equivalent methyls."""
    return make_graph(
        ["C", "C", "C", "C", "O"],
        [
            (0.0, 0.0, 0.0),
            (1.5, 0.1, 0.0),
            (-0.7, 1.3, 0.2),
            (-0.6, -1.2, 0.7),
            (-0.2, -0.3, -1.4),
        ],
        [(0, 1), (0, 2), (0, 3), (0, 4)],
        "tert-butanol",
    )


@pytest.fixture
def aminoethanol():
    """N-C-C-O chain without symmetry."""
    return make_graph(
        ["N", "C", "C", "O"],
        [(0.0, 0.0, 0.0), (1.4, 0.2, 0.0), (2.1, 1.4, 0.5), (3.5, 1.3, 0.9)],
        [(0, 1), (1, 2), (2, 3)],
        "aminoethanol",
    )


@pytest.fixture
def methanol_with_hydrogens():
    """Methanol including hydrogens and a marked-aromatic bond."""
    graph = make_graph(
        ["C", "O", "H", "H", "H", "H"],
        [
            (0.0, 0.0, 0.0),
            (1.4, 0.0, 0.0),
            (-0.4, 1.0, 0.0),
            (-0.4, -0.5, 0.9),
            (-0.4, -0.5, -0.9),
            (1.7, 0.9, 0.0),
        ],
        [(0, 2), (0, 3), (0, 4), (1, 5)],
        "methanol",
    )
    graph.bonds.insert(
        0, Bond(0, 1, BondType.AROMATIC, 1.5, aromatic=True, in_ring=False)
    )
    graph = MolecularGraph(graph.atoms, graph.bonds, graph.title)
    return graph


@pytest.fixture
def benzene():
    """Heavy-atom benzene ring, twelve automorphisms."""
    angles = np.arange(6) * np.pi / 3
    coords = [(1.39 * np.cos(a), 1.39 * np.sin(a), 0.0) for a in angles]
    bonds = [(i, (i + 1) % 6) for i in range(6)]
    return make_graph(["C"] * 6, coords, bonds, "benzene")
