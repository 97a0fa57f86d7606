"""
This module implements the symmetry of 3D periodic crystals: the
230 space groups (`SpaceGroup`, `SpaceGroupCatalog`), symmetry operations
in fractional coordinates (`SymmetryOperation`), point groups (`PointGroup`),
metric constraints of the crystal systems (`CrystalSystem`, `satisfies`) and
reciprocal space asymmetric units of the Laue classes (`LaueSystem`, `in_asu`).
"""

from .lattice import CrystalSystem, constrain_parameters, satisfies
from .laue import LaueSystem, asu_mask, in_asu
from .names import number_for_short_name, short_name_for_pdb_name
from .point_group import PointGroup
from .space_group import (
    SpaceGroup,
    SpaceGroupCatalog,
    SpaceGroupNotFound,
    by_name,
    by_number,
    get_catalog,
)
from .symmetry_operation import SymmetryOperation, compose

__all__ = [
    "CrystalSystem",
    "LaueSystem",
    "PointGroup",
    "SpaceGroup",
    "SpaceGroupCatalog",
    "SpaceGroupNotFound",
    "SymmetryOperation",
    "asu_mask",
    "by_name",
    "by_number",
    "compose",
    "constrain_parameters",
    "get_catalog",
    "in_asu",
    "number_for_short_name",
    "satisfies",
    "short_name_for_pdb_name",
]
