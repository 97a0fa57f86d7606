"""
Metric constraints of the 7 crystal systems on unit cell parameters
(lengths a, b, c and angles alpha, beta, gamma in degrees).
"""
from enum import Enum
import logging

LOG = logging.getLogger(__name__)


class CrystalSystem(Enum):
    TRICLINIC = "triclinic"
    MONOCLINIC = "monoclinic"
    ORTHORHOMBIC = "orthorhombic"
    TETRAGONAL = "tetragonal"
    TRIGONAL = "trigonal"
    HEXAGONAL = "hexagonal"
    CUBIC = "cubic"

    @classmethod
    def from_space_group_number(cls, number: int) -> "CrystalSystem":
        "The crystal system of the space group with the given international tables number"
        if number <= 0 or number >= 231:
            raise ValueError("International spacegroup number must be between 1-230")
        if number <= 2:
            return cls.TRICLINIC
        if number <= 15:
            return cls.MONOCLINIC
        if number <= 74:
            return cls.ORTHORHOMBIC
        if number <= 142:
            return cls.TETRAGONAL
        if number <= 167:
            return cls.TRIGONAL
        if number <= 194:
            return cls.HEXAGONAL
        return cls.CUBIC


def as_crystal_system(system) -> CrystalSystem:
    """
    Convert a crystal system name e.g. 'Cubic' to a `CrystalSystem`.

    Raises:
        ValueError: if the name is not one of the 7 crystal systems
    """
    if isinstance(system, CrystalSystem):
        return system
    try:
        return CrystalSystem(str(system).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown crystal system: '{system}'") from None


def _eq(x, y, tolerance):
    return abs(x - y) <= tolerance


def _triclinic(a, b, c, alpha, beta, gamma, tol):
    return True


def _monoclinic(a, b, c, alpha, beta, gamma, tol):
    # only two angles are forced equal, which one depends on the unique axis
    return _eq(alpha, beta, tol) or _eq(alpha, gamma, tol)


def _orthorhombic(a, b, c, alpha, beta, gamma, tol):
    return _eq(alpha, 90.0, tol) and _eq(beta, 90.0, tol) and _eq(gamma, 90.0, tol)


def _tetragonal(a, b, c, alpha, beta, gamma, tol):
    return _eq(a, b, tol) and _orthorhombic(a, b, c, alpha, beta, gamma, tol)


def _rhombohedral_axes(a, b, c, alpha, beta, gamma, tol):
    return (
        _eq(a, b, tol)
        and _eq(b, c, tol)
        and _eq(alpha, beta, tol)
        and _eq(beta, gamma, tol)
    )


def _hexagonal(a, b, c, alpha, beta, gamma, tol):
    return (
        _eq(a, b, tol)
        and _eq(alpha, 90.0, tol)
        and _eq(beta, 90.0, tol)
        and _eq(gamma, 120.0, tol)
    )


def _trigonal(a, b, c, alpha, beta, gamma, tol):
    return _rhombohedral_axes(a, b, c, alpha, beta, gamma, tol) or _hexagonal(
        a, b, c, alpha, beta, gamma, tol
    )


def _cubic(a, b, c, alpha, beta, gamma, tol):
    return (
        _eq(a, b, tol)
        and _eq(b, c, tol)
        and _orthorhombic(a, b, c, alpha, beta, gamma, tol)
    )


_SYSTEM_RULES = {
    CrystalSystem.TRICLINIC: _triclinic,
    CrystalSystem.MONOCLINIC: _monoclinic,
    CrystalSystem.ORTHORHOMBIC: _orthorhombic,
    CrystalSystem.TETRAGONAL: _tetragonal,
    CrystalSystem.TRIGONAL: _trigonal,
    CrystalSystem.HEXAGONAL: _hexagonal,
    CrystalSystem.CUBIC: _cubic,
}

if set(_SYSTEM_RULES) != set(CrystalSystem):
    raise RuntimeError(
        "Missing lattice rules for crystal systems: {}".format(
            set(CrystalSystem) - set(_SYSTEM_RULES)
        )
    )


def satisfies(system, a, b, c, alpha, beta, gamma, tolerance=0.0) -> bool:
    """
    Check whether unit cell parameters satisfy the metric constraints
    of a crystal system.

    Equalities hold when values differ by at most `tolerance`, so the
    default is exact equality; pass a tolerance for measured parameters.
    Monoclinic cells only require alpha == beta or alpha == gamma, and
    trigonal cells may be on rhombohedral or hexagonal axes.

    >>> satisfies(CrystalSystem.CUBIC, 5, 5, 5, 90, 90, 90)
    True
    >>> satisfies("hexagonal", 4, 4, 7, 90, 90, 120)
    True

    Args:
        system (CrystalSystem | str): the crystal system
        a, b, c (float): the cell lengths
        alpha, beta, gamma (float): the cell angles, in degrees
        tolerance (float, optional): allowed absolute deviation for each equality

    Returns:
        bool: True if the parameters are consistent with the crystal system
    """
    rule = _SYSTEM_RULES[as_crystal_system(system)]
    return rule(a, b, c, alpha, beta, gamma, tolerance)


def _mean(*values):
    return sum(values) / len(values)


def constrain_parameters(system, a, b, c, alpha, beta, gamma, tolerance=0.0):
    """
    Adjust unit cell parameters so that they satisfy the metric
    constraints of a crystal system: lengths that must be equal are
    replaced by their mean, and constrained angles are set to 90 or 120.

    Monoclinic cells use the unique axis b convention (alpha = gamma = 90).
    Trigonal cells stay on rhombohedral axes when their lengths and angles
    are already (within `tolerance`) pairwise equal, and are otherwise
    placed on hexagonal axes.

    Args:
        system (CrystalSystem | str): the crystal system
        a, b, c (float): the cell lengths
        alpha, beta, gamma (float): the cell angles, in degrees
        tolerance (float, optional): tolerance used to recognise rhombohedral axes

    Returns:
        Tuple[float, ...]: the constrained (a, b, c, alpha, beta, gamma)
    """
    system = as_crystal_system(system)
    original = (a, b, c, alpha, beta, gamma)
    if system is CrystalSystem.MONOCLINIC:
        alpha = gamma = 90.0
    elif system is CrystalSystem.ORTHORHOMBIC:
        alpha = beta = gamma = 90.0
    elif system is CrystalSystem.TETRAGONAL:
        a = b = _mean(a, b)
        alpha = beta = gamma = 90.0
    elif system is CrystalSystem.TRIGONAL and _rhombohedral_axes(
        a, b, c, alpha, beta, gamma, tolerance
    ):
        a = b = c = _mean(a, b, c)
        alpha = beta = gamma = _mean(alpha, beta, gamma)
    elif system in (CrystalSystem.TRIGONAL, CrystalSystem.HEXAGONAL):
        a = b = _mean(a, b)
        alpha = beta = 90.0
        gamma = 120.0
    elif system is CrystalSystem.CUBIC:
        a = b = c = _mean(a, b, c)
        alpha = beta = gamma = 90.0
    result = (a, b, c, alpha, beta, gamma)
    if result != original:
        LOG.debug("Constrained %s cell parameters %s to %s", system.value, original, result)
    return result
