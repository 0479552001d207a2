# src/heavyrms/infrastructure/repositories/structure_repository.py
"""Repository reading molecular structures from chemical structure files."""

import gzip
import logging
import os
import re
from typing import Iterator, List, Optional, Tuple

from rdkit import Chem
from rdkit.Chem import rdDetermineBonds

from ...core.domain.models.atom import Atom
from ...core.domain.models.bond import Bond, BondType
from ...core.domain.models.molecular_graph import MolecularGraph
from ...core.exceptions import (
    StructureParseError,
    StructureReadError,
    UnsupportedFormatError,
)
from ...core.interfaces.repository import Repository

logger = logging.getLogger(__name__)

FORMATS = {
    ".sdf": "sdf",
    ".sd": "sdf",
    ".mol": "sdf",
    ".mol2": "mol2",
    ".pdb": "pdb",
    ".ent": "pdb",
    ".xyz": "xyz",
}

_BOND_TYPES = {
    Chem.BondType.SINGLE: BondType.SINGLE,
    Chem.BondType.DOUBLE: BondType.DOUBLE,
    Chem.BondType.TRIPLE: BondType.TRIPLE,
    Chem.BondType.AROMATIC: BondType.AROMATIC,
}

_MOL2_HEADER = re.compile(r"^@<TRIPOS>MOLECULE", re.MULTILINE)


def detect_format(path: str) -> Tuple[str, bool]:
    """
    Determine the structure format from a file name.

    Args:
        path: File path, optionally ending in ``.gz``

    Returns:
        Tuple of format name and whether the file is gzip compressed

    Raises:
        UnsupportedFormatError: If the extension is not recognised
    """
    name = path.lower()
    compressed = name.endswith(".gz")
    if compressed:
        name = name[: -len(".gz")]
    ext = os.path.splitext(name)[1]
    if ext not in FORMATS:
        raise UnsupportedFormatError(f"Cannot read structure format of {path}")
    return FORMATS[ext], compressed


def from_rdkit_mol(mol: Chem.Mol, title: Optional[str] = None) -> MolecularGraph:
    """
    Convert an RDKit molecule with a 3D conformer to a MolecularGraph.

    Args:
        mol: RDKit molecule; ring information is not required
        title: Structure name; defaults to the molecule's ``_Name`` property

    Returns:
        MolecularGraph with one Atom per RDKit atom

    Raises:
        ValueError: If the molecule has atoms but no coordinates
    """
    if title is None:
        title = mol.GetProp("_Name") if mol.HasProp("_Name") else ""

    if mol.GetNumAtoms() == 0:
        return MolecularGraph([], [], title)
    if mol.GetNumConformers() == 0:
        raise ValueError(f"Structure {title!r} has no coordinates")

    positions = mol.GetConformer().GetPositions()
    atoms: List[Atom] = []
    for rdatom in mol.GetAtoms():
        idx = rdatom.GetIdx()
        info = rdatom.GetPDBResidueInfo()
        atoms.append(
            Atom(
                atom_id=idx,
                element=rdatom.GetSymbol(),
                coordinates=tuple(float(c) for c in positions[idx]),
                atomic_number=rdatom.GetAtomicNum(),
                name=info.GetName().strip() if info is not None else "",
                aromatic=rdatom.GetIsAromatic(),
            )
        )

    bonds = [
        Bond(
            atom1_id=rdbond.GetBeginAtomIdx(),
            atom2_id=rdbond.GetEndAtomIdx(),
            bond_type=_BOND_TYPES.get(rdbond.GetBondType(), BondType.UNKNOWN),
            bond_order=rdbond.GetBondTypeAsDouble(),
            aromatic=rdbond.GetIsAromatic(),
        )
        for rdbond in mol.GetBonds()
    ]
    return MolecularGraph(atoms, bonds, title)


class StructureRepository(Repository[MolecularGraph]):
    """Lazy, restartable reader for the structures in one file."""

    def __init__(self, path: str, skip_malformed: bool = False):
        """
        Initialize repository for a structure file.

        Args:
            path: SDF/MOL, MOL2, PDB or XYZ file, optionally gzip compressed
            skip_malformed: Log and skip unreadable records instead of raising

        Raises:
            UnsupportedFormatError: If the file extension is not recognised
        """
        self.path = path
        self.skip_malformed = skip_malformed
        self.format, self.compressed = detect_format(path)

    def __iter__(self) -> Iterator[MolecularGraph]:
        if not os.path.isfile(self.path):
            raise StructureReadError(f"Cannot read structure file: {self.path}")

        readers = {
            "sdf": self._read_sdf,
            "mol2": self._read_mol2,
            "pdb": self._read_pdb,
            "xyz": self._read_xyz,
        }
        try:
            for index, mol in enumerate(readers[self.format]()):
                graph = self._convert(index, mol)
                if graph is not None:
                    yield graph
        except (OSError, EOFError, UnicodeDecodeError, SystemError) as e:
            raise StructureReadError(f"Cannot read structure file: {self.path}") from e

    def _convert(self, index: int, mol: Optional[Chem.Mol]) -> Optional[MolecularGraph]:
        try:
            if mol is None:
                raise ValueError("RDKit could not parse the record")
            if self.format == "xyz":
                rdDetermineBonds.DetermineConnectivity(mol)
            return from_rdkit_mol(mol)
        except (ValueError, RuntimeError) as e:
            if not self.skip_malformed:
                raise StructureParseError(self.path, index, str(e)) from e
            logger.warning(f"Skipping record {index} of {self.path}: {str(e)}")
            return None

    def _open_binary(self):
        if self.compressed:
            return gzip.open(self.path, "rb")
        return open(self.path, "rb")

    def _read_text(self) -> str:
        if self.compressed:
            with gzip.open(self.path, "rt") as f:
                return f.read()
        with open(self.path, "r") as f:
            return f.read()

    def _read_sdf(self) -> Iterator[Optional[Chem.Mol]]:
        with self._open_binary() as f:
            supplier = Chem.ForwardSDMolSupplier(f, sanitize=False, removeHs=False)
            for mol in supplier:
                yield mol

    def _read_mol2(self) -> Iterator[Optional[Chem.Mol]]:
        text = self._read_text()
        starts = [m.start() for m in _MOL2_HEADER.finditer(text)]
        for begin, end in zip(starts, starts[1:] + [len(text)]):
            yield Chem.MolFromMol2Block(
                text[begin:end], sanitize=False, removeHs=False
            )

    def _read_pdb(self) -> Iterator[Optional[Chem.Mol]]:
        text = self._read_text()
        # CONECT records usually follow the last model but apply to all
        conect = [line for line in text.splitlines() if line.startswith("CONECT")]
        header: List[str] = []
        model: List[str] = []

        for line in text.splitlines():
            record = line[:6].strip()
            if record == "MODEL":
                model = []
            elif record == "ENDMDL":
                yield self._pdb_block(header, model, conect)
                model = []
            elif record in ("ATOM", "HETATM", "TER"):
                model.append(line)
            elif record not in ("CONECT", "END", "MASTER") and not model:
                header.append(line)

        if model:
            yield self._pdb_block(header, model, conect)

    @staticmethod
    def _pdb_block(header: List[str], model: List[str], conect: List[str]) -> Optional[Chem.Mol]:
        block = "\n".join(header + model + conect + ["END", ""])
        return Chem.MolFromPDBBlock(
            block, sanitize=False, removeHs=False, proximityBonding=not conect
        )

    def _read_xyz(self) -> Iterator[Optional[Chem.Mol]]:
        lines = self._read_text().splitlines()
        position = 0
        while position < len(lines):
            if not lines[position].strip():
                position += 1
                continue
            try:
                count = int(lines[position].split()[0])
            except ValueError:
                yield None
                return
            block = lines[position : position + count + 2]
            position += count + 2
            mol = Chem.MolFromXYZBlock("\n".join(block) + "\n")
            if mol is not None:
                mol.SetProp("_Name", block[1].strip() if len(block) > 1 else "")
            yield mol
