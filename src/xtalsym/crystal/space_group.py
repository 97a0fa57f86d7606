from dataclasses import dataclass
from functools import cached_property
import logging
import numbers
import threading
import time
from typing import Optional, Tuple

import numpy as np

from xtalsym.util.text import hermann_mauguin_unicode
from .hall import centering_multiplicity, expand_hall_symbol
from .lattice import CrystalSystem, satisfies
from .laue import (
    LaueSystem,
    asu_representative,
    equivalent_reflections,
    friedel_rotations,
    in_asu,
)
from .names import number_for_short_name, short_name_for_pdb_name
from .point_group import PointGroup
from .sgdata import SG_DATA
from .symmetry_operation import SymmetryOperation

LOG = logging.getLogger(__name__)

CENTERING_TO_LATT = {
    "P": 1,
    "I": 2,
    "R": 3,
    "F": 4,
    "A": 5,
    "B": 6,
    "C": 7,
}


class SpaceGroupNotFound(ValueError):
    "Raised when a space group number or symbol does not match any of the 230 space groups"


@dataclass(frozen=True)
class SpaceGroup:
    """
    Represent a crystallographic space group: its international tables
    number, symbols, classification and the full list of symmetry
    operations in fractional coordinates (identity first).

    Instances in the catalog are shared and immutable; callers needing
    a custom set of operators should construct their own `SpaceGroup`.

    Attributes:
        number (int): the international tables number, between [1, 230]
        short_name (str): the short symbol e.g. 'P212121'
        pdb_name (str): the PDB-convention symbol e.g. 'P 21 21 21'
        point_group_name (str): the point group symbol e.g. '222'
        crystal_system (CrystalSystem): the crystal system
        laue_system (LaueSystem): the Laue class used for reflection asymmetric units
        num_sym_equiv (int): the number of symmetry operations including centring
        num_primitive_sym_equiv (int): the number of symmetry operations per primitive cell
        symmetry_operations (Tuple[SymmetryOperation, ...]): the symmetry operations
        hall_symbol (str): the Hall symbol the operations were generated from, if any
    """

    number: int
    short_name: str
    pdb_name: str
    point_group_name: str
    crystal_system: CrystalSystem
    laue_system: LaueSystem
    num_sym_equiv: int
    num_primitive_sym_equiv: int
    symmetry_operations: Tuple[SymmetryOperation, ...]
    hall_symbol: str = ""

    def __post_init__(self):
        object.__setattr__(self, "symmetry_operations", tuple(self.symmetry_operations))
        if len(self.symmetry_operations) != self.num_sym_equiv:
            raise ValueError(
                "Space group {} has {} symmetry operations, expected {}".format(
                    self.short_name, len(self.symmetry_operations), self.num_sym_equiv
                )
            )
        if self.num_primitive_sym_equiv < 1 or (
            self.num_sym_equiv % self.num_primitive_sym_equiv
        ):
            raise ValueError(
                "Number of symmetry operations {} is not a multiple of {}".format(
                    self.num_sym_equiv, self.num_primitive_sym_equiv
                )
            )
        if not self.symmetry_operations[0].is_identity():
            raise ValueError(
                "The first symmetry operation of {} must be the identity".format(
                    self.short_name
                )
            )

    @property
    def symops(self):
        "alias for `self.symmetry_operations`"
        return self.symmetry_operations

    @property
    def symbol(self) -> str:
        "alias for `self.short_name`"
        return self.short_name

    @property
    def symbol_unicode(self) -> str:
        "the space group symbol with unicode subscripts and overlines e.g. P2₁2₁2₁"
        tokens = self.pdb_name.split()
        if self.crystal_system is CrystalSystem.MONOCLINIC:
            tokens = tokens[:1] + [x for x in tokens[1:] if x != "1"]
        return hermann_mauguin_unicode([self.centering] + tokens[1:])

    @property
    def centering(self) -> str:
        "the lattice centring letter, one of P, A, B, C, I, F or R"
        return self.short_name[0]

    @property
    def centering_multiplicity(self) -> int:
        "the number of lattice points per unit cell"
        return self.num_sym_equiv // self.num_primitive_sym_equiv

    @property
    def latt(self) -> int:
        """
        The SHELX LATT number associated with this space group. Returns
        a negative if there is no inversion.

        Options are
        ```
        1: P,
        2: I,
        3: rhombohedral obverse on hexagonal axes,
        4: F,
        5: A,
        6: B,
        7: C
        ```

        Returns:
            int: the SHELX LATT number of this space group
        """
        latt = CENTERING_TO_LATT[self.centering]
        return latt if self.is_centrosymmetric else -latt

    @property
    def lattice_type(self) -> str:
        "the lattice type of this space group e.g. hexagonal, cubic etc."
        if self.crystal_system is CrystalSystem.TRIGONAL:
            return CrystalSystem.HEXAGONAL.value
        return self.crystal_system.value

    @property
    def point_group(self) -> PointGroup:
        "the point group of this space group"
        return PointGroup.from_symbol(self.point_group_name)

    @property
    def is_centrosymmetric(self) -> bool:
        "True if this space group contains an inversion centre"
        inversion = SymmetryOperation.identity().inverted().rotation
        return any(s.rotation == inversion for s in self.symmetry_operations)

    @property
    def is_sohncke(self) -> bool:
        "True if this space group contains only proper rotations, i.e. admits chiral structures"
        return all(s.determinant == 1 for s in self.symmetry_operations)

    @property
    def cif_section(self) -> str:
        "Representation of the SpaceGroup in CIF files"
        return "\n".join(
            "{} {}".format(i, sym.cif_form)
            for i, sym in enumerate(self.symmetry_operations, start=1)
        )

    @cached_property
    def reciprocal_rotations(self) -> Tuple[SymmetryOperation, ...]:
        "the Laue group of this space group: distinct rotations and their negatives"
        return friedel_rotations(self.symmetry_operations)

    def __len__(self):
        return len(self.symmetry_operations)

    def __repr__(self):
        return "<{} {}: {}>".format(self.__class__.__name__, self.number, self.short_name)

    def is_compatible_cell(self, a, b, c, alpha, beta, gamma, tolerance=0.0) -> bool:
        """
        Check unit cell parameters (angles in degrees) against the metric
        constraints of this space group's crystal system.
        See `xtalsym.crystal.lattice.satisfies`.
        """
        return satisfies(self.crystal_system, a, b, c, alpha, beta, gamma, tolerance=tolerance)

    def in_asu(self, h: int, k: int, l: int) -> bool:
        "True if the Miller indices lie in the reciprocal asymmetric unit of this space group"
        return in_asu(self.laue_system, h, k, l)

    def asu_reflection(self, hkl) -> Tuple[int, int, int]:
        """
        The symmetry equivalent of the given Miller indices (including
        Friedel mates) that lies in the asymmetric unit.

        Args:
            hkl (Sequence[int]): the Miller indices

        Returns:
            Tuple[int, int, int]: the asymmetric unit representative
        """
        return asu_representative(self.laue_system, hkl, self.reciprocal_rotations)

    def symmetry_equivalent_reflections(self, hkl):
        "The distinct reflections equivalent to hkl, including Friedel mates"
        return equivalent_reflections(hkl, self.reciprocal_rotations)

    def apply_all_symops(self, coordinates: np.ndarray):
        """
        For a given set of coordinates, apply all symmetry
        operations in this space group, yielding a set subject
        to only translational symmetry (i.e. a unit cell).
        Assumes the input coordinates are fractional.

        Args:
            coordinates (np.ndarray): (N, 3) set of fractional coordinates

        Returns:
            Tuple[np.ndarray, np.ndarray]: a (MxN) array of generator symop indices
                and an (MxN, 3) array of coordinates where M is the number of symmetry
                operations in this space group.
        """
        coordinates = np.asarray(coordinates, dtype=np.float64)
        nsites = len(coordinates)
        transformed = np.empty((nsites * len(self), 3))
        generator_symop = np.empty(nsites * len(self), dtype=np.int32)
        for i, s in enumerate(self.symmetry_operations):
            transformed[i * nsites : (i + 1) * nsites] = s.apply_array(coordinates)
            generator_symop[i * nsites : (i + 1) * nsites] = i
        return generator_symop, transformed

    @classmethod
    def from_number(cls, number: int) -> "SpaceGroup":
        """
        The catalog space group with the given international tables number.

        Raises:
            SpaceGroupNotFound: if the number is not between [1, 230]
        """
        sg = get_catalog().by_number(number)
        if sg is None:
            raise SpaceGroupNotFound(f"Space group number must be between [1, 230], got {number}")
        return sg

    @classmethod
    def from_symbol(cls, symbol: str) -> "SpaceGroup":
        """
        The catalog space group with the given short symbol (e.g. 'P21/c')
        or PDB symbol (e.g. 'P 1 21/c 1').

        Raises:
            SpaceGroupNotFound: if the symbol matches no space group
        """
        sg = get_catalog().by_name(short_name_for_pdb_name(symbol.strip()))
        if sg is None:
            raise SpaceGroupNotFound(f"Could not find matching space group for '{symbol}'")
        return sg


def _space_group_from_row(row) -> SpaceGroup:
    symops = expand_hall_symbol(row.hall)
    rotations = {s.rotation for s in symops}
    multiplicity = centering_multiplicity(row.hall.split()[0])
    if (
        len(symops) != row.nsym
        or len(rotations) != row.nprim
        or row.nsym != row.nprim * multiplicity
    ):
        raise RuntimeError(
            "Space group {} ({}): Hall symbol '{}' gives {} symops with {} rotations, "
            "expected {} and {}".format(
                row.number, row.short, row.hall, len(symops), len(rotations), row.nsym, row.nprim
            )
        )
    return SpaceGroup(
        number=row.number,
        short_name=row.short,
        pdb_name=row.pdb,
        point_group_name=row.pointgroup,
        crystal_system=CrystalSystem(row.system),
        laue_system=LaueSystem(row.laue),
        num_sym_equiv=row.nsym,
        num_primitive_sym_equiv=row.nprim,
        symmetry_operations=tuple(symops),
        hall_symbol=row.hall,
    )


class SpaceGroupCatalog:
    """
    The 230 space groups, indexed by international tables number.

    Lookups never raise: `by_number` and `by_name` return None for
    numbers or names that do not match a space group.
    """

    def __init__(self, space_groups):
        self._space_groups = tuple(space_groups)
        for i, sg in enumerate(self._space_groups, start=1):
            if sg.number != i:
                raise ValueError(f"Space group at position {i} has number {sg.number}")

    @classmethod
    def from_table(cls, rows=SG_DATA) -> "SpaceGroupCatalog":
        "Build the catalog, expanding the symmetry operations of every row"
        t1 = time.time()
        catalog = cls(_space_group_from_row(row) for row in rows)
        t2 = time.time()
        LOG.debug("Built catalog of %d space groups in %.3fs", len(catalog), t2 - t1)
        return catalog

    def by_number(self, number) -> Optional[SpaceGroup]:
        """
        Args:
            number (int): the international tables number

        Returns:
            Optional[SpaceGroup]: the space group, or None if `number` is not between [1, 230]
        """
        if isinstance(number, bool) or not isinstance(number, numbers.Integral):
            LOG.debug("Invalid space group number: %r", number)
            return None
        if number < 1 or number > len(self._space_groups):
            LOG.debug("No space group with number %d", number)
            return None
        return self._space_groups[number - 1]

    def by_name(self, name: str) -> Optional[SpaceGroup]:
        """
        Args:
            name (str): the short symbol e.g. 'P212121', compared case-insensitively

        Returns:
            Optional[SpaceGroup]: the space group, or None if there is no such symbol
        """
        number = number_for_short_name(name)
        if number < 0:
            return None
        return self.by_number(number)

    @property
    def numbers(self):
        return range(1, len(self._space_groups) + 1)

    def __iter__(self):
        return iter(self._space_groups)

    def __len__(self):
        return len(self._space_groups)

    def __repr__(self):
        return "<{}: {} space groups>".format(self.__class__.__name__, len(self))


_CATALOG = None
_CATALOG_LOCK = threading.Lock()


def get_catalog() -> SpaceGroupCatalog:
    "The process-wide space group catalog, built on first use"
    global _CATALOG
    if _CATALOG is None:
        with _CATALOG_LOCK:
            if _CATALOG is None:
                _CATALOG = SpaceGroupCatalog.from_table()
    return _CATALOG


def by_number(number) -> Optional[SpaceGroup]:
    "See `SpaceGroupCatalog.by_number`"
    return get_catalog().by_number(number)


def by_name(name: str) -> Optional[SpaceGroup]:
    "See `SpaceGroupCatalog.by_name`"
    return get_catalog().by_name(name)
