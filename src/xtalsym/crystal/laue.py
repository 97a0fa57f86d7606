"""
Reciprocal space asymmetric units of the Laue classes.

Each Laue class tag names a Laue group in a particular setting (the
digits give the order of the axes along a, b and c, letters name
diagonal axes and rhombohedral or 60 degree settings). For every tag,
`in_asu` accepts exactly one member of each orbit of Miller indices
under the Laue group, including Friedel mates (h, k, l) ~ (-h, -k, -l).

The rules are written with `&`, `|` and explicit parentheses so that
they work both on Python integers and element-wise on numpy arrays.
"""
from enum import Enum
from functools import lru_cache
import logging

import numpy as np

from .symmetry_operation import SymmetryOperation, generate_group

LOG = logging.getLogger(__name__)


class LaueSystem(Enum):
    L111 = "L111"
    L112 = "L112"
    L121 = "L121"
    L211 = "L211"
    L21U = "L21U"
    L21V = "L21V"
    L21W = "L21W"
    L21X = "L21X"
    L21Y = "L21Y"
    L21Z = "L21Z"
    L222 = "L222"
    L22U = "L22U"
    L22V = "L22V"
    L22W = "L22W"
    L114 = "L114"
    L141 = "L141"
    L411 = "L411"
    L224 = "L224"
    L242 = "L242"
    L422 = "L422"
    L113 = "L113"
    L131 = "L131"
    L311 = "L311"
    L11T = "L11T"
    L1T1 = "L1T1"
    LT11 = "LT11"
    L31A = "L31A"
    L31B = "L31B"
    L31C = "L31C"
    L31D = "L31D"
    L223 = "L223"
    L232 = "L232"
    L322 = "L322"
    L32A = "L32A"
    L32B = "L32B"
    L32C = "L32C"
    L32D = "L32D"
    L32U = "L32U"
    L32V = "L32V"
    L32W = "L32W"
    L32X = "L32X"
    L32Y = "L32Y"
    L32Z = "L32Z"
    LM3B = "LM3B"
    LM3M = "LM3M"


# generators of each Laue group besides the Friedel inversion
LAUE_GENERATORS = {
    LaueSystem.L111: (),
    LaueSystem.L112: ("-x,-y,z",),
    LaueSystem.L121: ("-x,y,-z",),
    LaueSystem.L211: ("x,-y,-z",),
    LaueSystem.L21U: ("y,x,-z",),
    LaueSystem.L21V: ("z,-y,x",),
    LaueSystem.L21W: ("-x,z,y",),
    LaueSystem.L21X: ("-y,-x,-z",),
    LaueSystem.L21Y: ("-z,-y,-x",),
    LaueSystem.L21Z: ("-x,-z,-y",),
    LaueSystem.L222: ("-x,-y,z", "x,-y,-z"),
    LaueSystem.L22U: ("-x,-y,z", "y,x,-z"),
    LaueSystem.L22V: ("-x,y,-z", "z,-y,x"),
    LaueSystem.L22W: ("x,-y,-z", "-x,z,y"),
    LaueSystem.L114: ("-y,x,z",),
    LaueSystem.L141: ("z,y,-x",),
    LaueSystem.L411: ("x,-z,y",),
    LaueSystem.L224: ("-y,x,z", "x,-y,-z"),
    LaueSystem.L242: ("z,y,-x", "x,-y,-z"),
    LaueSystem.L422: ("x,-z,y", "-x,y,-z"),
    LaueSystem.L113: ("-y,x-y,z",),
    LaueSystem.L131: ("-x+z,y,-x",),
    LaueSystem.L311: ("x,-z,y-z",),
    LaueSystem.L11T: ("-x-y,x,z",),
    LaueSystem.L1T1: ("z,y,-x-z",),
    LaueSystem.LT11: ("x,-y-z,y",),
    LaueSystem.L31A: ("z,x,y",),
    LaueSystem.L31B: ("-z,-x,y",),
    LaueSystem.L31C: ("z,-x,-y",),
    LaueSystem.L31D: ("-z,x,-y",),
    LaueSystem.L223: ("-y,x-y,z", "-y,-x,-z"),
    LaueSystem.L232: ("-x+z,y,-x", "-z,-y,-x"),
    LaueSystem.L322: ("x,-z,y-z", "-x,-z,-y"),
    LaueSystem.L32A: ("z,x,y", "-y,-x,-z"),
    LaueSystem.L32B: ("-z,-x,y", "y,x,-z"),
    LaueSystem.L32C: ("z,-x,-y", "y,x,-z"),
    LaueSystem.L32D: ("-z,x,-y", "-y,-x,-z"),
    LaueSystem.L32U: ("-y,x-y,z", "y,x,-z"),
    LaueSystem.L32V: ("-x+z,y,-x", "z,-y,x"),
    LaueSystem.L32W: ("x,-z,y-z", "-x,z,y"),
    LaueSystem.L32X: ("-x-y,x,z", "y,x,-z"),
    LaueSystem.L32Y: ("z,y,-x-z", "z,-y,x"),
    LaueSystem.L32Z: ("x,-y-z,y", "-x,z,y"),
    LaueSystem.LM3B: ("z,x,y", "-x,-y,z", "x,-y,-z"),
    LaueSystem.LM3M: ("z,x,y", "-y,x,z"),
}


def _rhombohedral_3(h, k, l):
    return ((k - l >= 0) & (l - h > 0)) | ((h == l) & (k == l) & (h + k + l >= 0))


def _rhombohedral_3m(h, k, l):
    s = h + k + l
    return (h >= k) & (k >= l) & ((s > 0) | ((s == 0) & (k <= 0)))


_ASU_RULES = {
    LaueSystem.L111: lambda h, k, l: (l > 0) | ((l == 0) & ((h > 0) | ((h == 0) & (k >= 0)))),
    LaueSystem.L112: lambda h, k, l: (l >= 0) & ((h > 0) | ((h == 0) & (k >= 0))),
    LaueSystem.L121: lambda h, k, l: (k >= 0) & ((l > 0) | ((l == 0) & (h >= 0))),
    LaueSystem.L211: lambda h, k, l: (h >= 0) & ((k > 0) | ((k == 0) & (l >= 0))),
    LaueSystem.L21U: lambda h, k, l: (h + k >= 0) & ((l > 0) | ((l == 0) & (h - k >= 0))),
    LaueSystem.L21V: lambda h, k, l: (l + h >= 0) & ((k > 0) | ((k == 0) & (l - h >= 0))),
    LaueSystem.L21W: lambda h, k, l: (k + l >= 0) & ((h > 0) | ((h == 0) & (k - l >= 0))),
    LaueSystem.L21X: lambda h, k, l: (h - k >= 0) & ((l > 0) | ((l == 0) & (h + k >= 0))),
    LaueSystem.L21Y: lambda h, k, l: (l - h >= 0) & ((k > 0) | ((k == 0) & (l + h >= 0))),
    LaueSystem.L21Z: lambda h, k, l: (k - l >= 0) & ((h > 0) | ((h == 0) & (k + l >= 0))),
    LaueSystem.L222: lambda h, k, l: (h >= 0) & (k >= 0) & (l >= 0),
    LaueSystem.L22U: lambda h, k, l: (k - h >= 0) & (k + h >= 0) & (l >= 0),
    LaueSystem.L22V: lambda h, k, l: (h - l >= 0) & (h + l >= 0) & (k >= 0),
    LaueSystem.L22W: lambda h, k, l: (l - k >= 0) & (l + k >= 0) & (h >= 0),
    LaueSystem.L114: lambda h, k, l: (l >= 0) & (((h >= 0) & (k > 0)) | ((h == 0) & (k == 0))),
    LaueSystem.L141: lambda h, k, l: (k >= 0) & (((l >= 0) & (h > 0)) | ((l == 0) & (h == 0))),
    LaueSystem.L411: lambda h, k, l: (h >= 0) & (((k >= 0) & (l > 0)) | ((k == 0) & (l == 0))),
    LaueSystem.L224: lambda h, k, l: (h >= k) & (k >= 0) & (l >= 0),
    LaueSystem.L242: lambda h, k, l: (l >= h) & (h >= 0) & (k >= 0),
    LaueSystem.L422: lambda h, k, l: (k >= l) & (l >= 0) & (h >= 0),
    LaueSystem.L113: lambda h, k, l: ((h >= 0) & (k > 0)) | ((h == 0) & (k == 0) & (l >= 0)),
    LaueSystem.L131: lambda h, k, l: ((l >= 0) & (h > 0)) | ((l == 0) & (h == 0) & (k >= 0)),
    LaueSystem.L311: lambda h, k, l: ((k >= 0) & (l > 0)) | ((k == 0) & (l == 0) & (h >= 0)),
    LaueSystem.L11T: lambda h, k, l: ((h <= 0) & (k > 0)) | ((h == 0) & (k == 0) & (l >= 0)),
    LaueSystem.L1T1: lambda h, k, l: ((l <= 0) & (h > 0)) | ((l == 0) & (h == 0) & (k >= 0)),
    LaueSystem.LT11: lambda h, k, l: ((k <= 0) & (l > 0)) | ((k == 0) & (l == 0) & (h >= 0)),
    LaueSystem.L31A: lambda h, k, l: _rhombohedral_3(h, k, l),
    LaueSystem.L31B: lambda h, k, l: _rhombohedral_3(-h, k, l),
    LaueSystem.L31C: lambda h, k, l: _rhombohedral_3(h, -k, l),
    LaueSystem.L31D: lambda h, k, l: _rhombohedral_3(h, k, -l),
    LaueSystem.L223: lambda h, k, l: (h >= k) & (k >= 0) & ((k > 0) | (l >= 0)),
    LaueSystem.L232: lambda h, k, l: (l >= h) & (h >= 0) & ((h > 0) | (k >= 0)),
    LaueSystem.L322: lambda h, k, l: (k >= l) & (l >= 0) & ((l > 0) | (h >= 0)),
    LaueSystem.L32A: lambda h, k, l: _rhombohedral_3m(h, k, l),
    LaueSystem.L32B: lambda h, k, l: _rhombohedral_3m(-h, k, l),
    LaueSystem.L32C: lambda h, k, l: _rhombohedral_3m(h, -k, l),
    LaueSystem.L32D: lambda h, k, l: _rhombohedral_3m(h, k, -l),
    LaueSystem.L32U: lambda h, k, l: (h >= k) & (k >= 0) & ((h > k) | (l >= 0)),
    LaueSystem.L32V: lambda h, k, l: (l >= h) & (h >= 0) & ((l > h) | (k >= 0)),
    LaueSystem.L32W: lambda h, k, l: (k >= l) & (l >= 0) & ((k > l) | (h >= 0)),
    LaueSystem.L32X: lambda h, k, l: (k >= 0) & (h >= k + k) & ((k > 0) | (l >= 0)),
    LaueSystem.L32Y: lambda h, k, l: (h >= 0) & (l >= h + h) & ((h > 0) | (k >= 0)),
    LaueSystem.L32Z: lambda h, k, l: (l >= 0) & (k >= l + l) & ((l > 0) | (h >= 0)),
    LaueSystem.LM3B: lambda h, k, l: (h >= 0) & (((l >= h) & (k > h)) | ((l == h) & (k == h))),
    LaueSystem.LM3M: lambda h, k, l: (k >= l) & (l >= h) & (h >= 0),
}

for _table in (_ASU_RULES, LAUE_GENERATORS):
    if set(_table) != set(LaueSystem):
        raise RuntimeError(
            "Laue classes without asymmetric unit data: {}".format(
                sorted(x.name for x in set(LaueSystem) - set(_table))
            )
        )


def as_laue_system(laue) -> LaueSystem:
    """
    Convert a Laue class tag e.g. 'L222' to a `LaueSystem`.

    Raises:
        ValueError: if the tag is not a known Laue class
    """
    if isinstance(laue, LaueSystem):
        return laue
    try:
        return LaueSystem(str(laue).strip().upper())
    except ValueError:
        raise ValueError(f"Unknown Laue class: '{laue}'") from None


def in_asu(laue, h: int, k: int, l: int) -> bool:
    """
    Test whether the Miller indices (h, k, l) are the representative of
    their symmetry orbit in the reciprocal space asymmetric unit of a
    Laue class.

    >>> in_asu(LaueSystem.L222, 1, 2, 3)
    True
    >>> in_asu("L222", -1, 2, 3)
    False

    Args:
        laue (LaueSystem | str): the Laue class
        h, k, l (int): the Miller indices

    Returns:
        bool: True if (h, k, l) lies in the asymmetric unit
    """
    return bool(_ASU_RULES[as_laue_system(laue)](h, k, l))


def asu_mask(laue, hkl) -> np.ndarray:
    """
    Vectorised form of `in_asu`.

    Args:
        laue (LaueSystem | str): the Laue class
        hkl (array_like): (..., 3) integer array of Miller indices

    Returns:
        np.ndarray: boolean array of shape (...) true where the indices
            lie in the asymmetric unit
    """
    hkl = np.asarray(hkl, dtype=np.int64)
    rule = _ASU_RULES[as_laue_system(laue)]
    return np.asarray(rule(hkl[..., 0], hkl[..., 1], hkl[..., 2]), dtype=bool)


def friedel_rotations(symmetry_operations):
    """
    The distinct rotations of a set of symmetry operations together with
    their negatives, i.e. the Laue group acting on Miller indices.

    Args:
        symmetry_operations (Iterable[SymmetryOperation]): the operations

    Returns:
        Tuple[SymmetryOperation, ...]: pure rotations, identity first
    """
    rotations = {}
    for symop in symmetry_operations:
        proper = SymmetryOperation(symop.rotation)
        for r in (proper, proper.inverted()):
            rotations.setdefault(r.rotation, r)
    return tuple(rotations.values())


@lru_cache(maxsize=None)
def laue_group_rotations(laue):
    """
    The rotations of the Laue group named by a Laue class tag,
    identity first, including the inversion.

    Args:
        laue (LaueSystem | str): the Laue class

    Returns:
        Tuple[SymmetryOperation, ...]: the rotations of the Laue group
    """
    laue = as_laue_system(laue)
    generators = [SymmetryOperation.from_string_code(g) for g in LAUE_GENERATORS[laue]]
    generators.append(SymmetryOperation.identity().inverted())
    return tuple(generate_group(generators))


def equivalent_reflections(hkl, rotations):
    """
    The distinct images of Miller indices under a set of rotations.

    Args:
        hkl (Sequence[int]): the Miller indices
        rotations (Iterable[SymmetryOperation]): e.g. from `friedel_rotations`

    Returns:
        List[Tuple[int, int, int]]: sorted distinct symmetry equivalent indices
    """
    return sorted({r.rotate_hkl(hkl) for r in rotations})


def asu_representative(laue, hkl, rotations=None):
    """
    Map Miller indices onto the member of their orbit that lies in the
    asymmetric unit of a Laue class.

    Args:
        laue (LaueSystem | str): the Laue class
        hkl (Sequence[int]): the Miller indices
        rotations (Iterable[SymmetryOperation], optional): the rotations generating
            the orbit, defaults to `laue_group_rotations(laue)`

    Returns:
        Tuple[int, int, int]: the asymmetric unit representative
    """
    laue = as_laue_system(laue)
    if rotations is None:
        rotations = laue_group_rotations(laue)
    rule = _ASU_RULES[laue]
    for r in rotations:
        image = r.rotate_hkl(hkl)
        if rule(*image):
            return image
    raise RuntimeError(f"No member of the orbit of {tuple(hkl)} lies in the {laue.value} asymmetric unit")
