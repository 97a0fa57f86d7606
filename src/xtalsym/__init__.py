from .crystal import (
    CrystalSystem,
    LaueSystem,
    SpaceGroup,
    SpaceGroupCatalog,
    SymmetryOperation,
    get_catalog,
)

__all__ = [
    "CrystalSystem",
    "LaueSystem",
    "SpaceGroup",
    "SpaceGroupCatalog",
    "SymmetryOperation",
    "get_catalog",
]
