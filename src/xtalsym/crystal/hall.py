"""
Expansion of Hall space group symbols (Hall, 1981) into the full list
of symmetry operations, e.g. `-P 2ac 2n` for Pnma.

A Hall symbol lists the lattice (with a leading `-` for centrosymmetric
groups), followed by up to four generator tokens of the form
`[-]N[screw][axis][translations]`, optionally followed by an origin
shift `(vx vy vz)` in units of 1/12.

See http://cci.lbl.gov/sginfo/hall_symbols.html for the notation.
"""
from collections import namedtuple
from fractions import Fraction
import logging
import re

from .symmetry_operation import SymmetryOperation, generate_group

LOG = logging.getLogger(__name__)

_HALL_TOKEN_REGEX = re.compile(r"^(-?)([12346])([1-5]?)([xyz'\"*]?)([abcnuvwd]*)$")
_ORIGIN_SHIFT_REGEX = re.compile(r"\(\s*(-?\d+)\s+(-?\d+)\s+(-?\d+)\s*\)")

_0 = Fraction(0)
_1_2 = Fraction(1, 2)
_1_3 = Fraction(1, 3)
_2_3 = Fraction(2, 3)
_1_4 = Fraction(1, 4)

HALL_LATTICE_TRANSLATIONS = {
    "P": (),
    "A": ((_0, _1_2, _1_2),),
    "B": ((_1_2, _0, _1_2),),
    "C": ((_1_2, _1_2, _0),),
    "I": ((_1_2, _1_2, _1_2),),
    "R": ((_2_3, _1_3, _1_3), (_1_3, _2_3, _2_3)),  # obverse, hexagonal axes
    "F": ((_0, _1_2, _1_2), (_1_2, _0, _1_2), (_1_2, _1_2, _0)),
}

HALL_TRANSLATION_SYMBOLS = {
    "a": (_1_2, _0, _0),
    "b": (_0, _1_2, _0),
    "c": (_0, _0, _1_2),
    "n": (_1_2, _1_2, _1_2),
    "u": (_1_4, _0, _0),
    "v": (_0, _1_4, _0),
    "w": (_0, _0, _1_4),
    "d": (_1_4, _1_4, _1_4),
}

_PRINCIPAL_ROTATIONS = {
    (2, "x"): ((1, 0, 0), (0, -1, 0), (0, 0, -1)),
    (2, "y"): ((-1, 0, 0), (0, 1, 0), (0, 0, -1)),
    (2, "z"): ((-1, 0, 0), (0, -1, 0), (0, 0, 1)),
    (3, "x"): ((1, 0, 0), (0, 0, -1), (0, 1, -1)),
    (3, "y"): ((-1, 0, 1), (0, 1, 0), (-1, 0, 0)),
    (3, "z"): ((0, -1, 0), (1, -1, 0), (0, 0, 1)),
    (4, "x"): ((1, 0, 0), (0, 0, -1), (0, 1, 0)),
    (4, "y"): ((0, 0, 1), (0, 1, 0), (-1, 0, 0)),
    (4, "z"): ((0, -1, 0), (1, 0, 0), (0, 0, 1)),
    (6, "x"): ((1, 0, 0), (0, 1, -1), (0, 1, 0)),
    (6, "y"): ((0, 0, 1), (0, 1, 0), (-1, 0, 1)),
    (6, "z"): ((1, -1, 0), (1, 0, 0), (0, 0, 1)),
}

# two-fold axes along face diagonals, relative to the preceding principal axis
_DIAGONAL_ROTATIONS = {
    ("'", "x"): ((-1, 0, 0), (0, 0, -1), (0, -1, 0)),
    ("'", "y"): ((0, 0, -1), (0, -1, 0), (-1, 0, 0)),
    ("'", "z"): ((0, -1, 0), (-1, 0, 0), (0, 0, -1)),
    ('"', "x"): ((-1, 0, 0), (0, 0, 1), (0, 1, 0)),
    ('"', "y"): ((0, 0, 1), (0, -1, 0), (1, 0, 0)),
    ('"', "z"): ((0, 1, 0), (1, 0, 0), (0, 0, -1)),
}

# three-fold axis along the body diagonal
_BODY_DIAGONAL_ROTATION = ((0, 0, 1), (1, 0, 0), (0, 1, 0))

_IDENTITY = ((1, 0, 0), (0, 1, 0), (0, 0, 1))

HallSymbol = namedtuple("HallSymbol", "symbol centric lattice generators origin_shift")


def _default_axis(position, order, previous_order):
    if position == 0:
        return "z"
    if position == 1 and order == 2:
        if previous_order in (2, 4):
            return "x"
        if previous_order in (3, 6):
            return "'"
    if position == 2 and order == 3:
        return "*"
    return None


def _generator_rotation(order, axis, principal_axis):
    if order == 1:
        return _IDENTITY
    if axis in "xyz":
        return _PRINCIPAL_ROTATIONS[(order, axis)]
    if axis in ("'", '"') and order == 2:
        return _DIAGONAL_ROTATIONS[(axis, principal_axis)]
    if axis == "*" and order == 3:
        return _BODY_DIAGONAL_ROTATION
    return None


def _shift_origin(symop, shift):
    # t' = t + v - R.v
    rotated = SymmetryOperation(symop.rotation).apply(shift)
    return SymmetryOperation(
        symop.rotation,
        tuple(t + v - r for t, v, r in zip(symop.translation, shift, rotated)),
    )


def parse_hall_symbol(symbol: str) -> HallSymbol:
    """
    Parse a Hall symbol into its lattice and generating symmetry operations.

    Args:
        symbol (str): the Hall symbol e.g. '-P 2ac 2n' or 'P 31 2c (0 0 1)'

    Returns:
        HallSymbol: the parsed symbol, with `generators` including the
            inversion for centric lattices and the origin shift applied

    Raises:
        ValueError: if the symbol is malformed
    """
    text = symbol.strip()
    origin_shift = (_0, _0, _0)
    match = _ORIGIN_SHIFT_REGEX.search(text)
    if match is not None:
        origin_shift = tuple(Fraction(int(x), 12) for x in match.groups())
        text = text[: match.start()].strip()

    tokens = text.split()
    if not tokens:
        raise ValueError(f"Empty Hall symbol: '{symbol}'")
    centric = tokens[0].startswith("-")
    lattice = tokens[0].lstrip("-").upper()
    if lattice not in HALL_LATTICE_TRANSLATIONS:
        raise ValueError(f"Unknown lattice symbol '{tokens[0]}' in Hall symbol '{symbol}'")

    generators = []
    if centric:
        generators.append(SymmetryOperation.identity().inverted())

    previous_order = None
    principal_axis = "z"
    for position, token in enumerate(tokens[1:]):
        match = _HALL_TOKEN_REGEX.match(token)
        if match is None:
            raise ValueError(f"Invalid token '{token}' in Hall symbol '{symbol}'")
        improper, order, screw, axis, translation_symbols = match.groups()
        order = int(order)
        axis = axis or _default_axis(position, order, previous_order)
        if axis is None and order != 1:
            raise ValueError(f"Cannot infer axis of '{token}' in Hall symbol '{symbol}'")
        rotation = _generator_rotation(order, axis, principal_axis)
        if rotation is None:
            raise ValueError(f"Invalid rotation '{token}' in Hall symbol '{symbol}'")

        translation = [_0, _0, _0]
        for c in translation_symbols:
            translation = [t + v for t, v in zip(translation, HALL_TRANSLATION_SYMBOLS[c])]
        if screw:
            if order == 1 or axis not in "xyz":
                raise ValueError(f"Invalid screw axis '{token}' in Hall symbol '{symbol}'")
            translation["xyz".index(axis)] += Fraction(int(screw), order)

        symop = SymmetryOperation(rotation, translation)
        if improper:
            symop = SymmetryOperation(symop.inverted().rotation, translation)
        generators.append(symop)

        previous_order = order
        if order != 1 and axis in "xyz":
            principal_axis = axis

    if any(origin_shift):
        generators = [_shift_origin(g, origin_shift) for g in generators]

    return HallSymbol(symbol, centric, lattice, tuple(generators), origin_shift)


def expand_hall_symbol(symbol: str):
    """
    Generate the full list of symmetry operations described by
    a Hall symbol, identity first.

    The first `len(result) // centering_multiplicity(lattice)` operations
    are the representatives modulo lattice centring, followed by their
    centred copies.

    Args:
        symbol (str): the Hall symbol

    Returns:
        List[SymmetryOperation]: the symmetry operations of the space group
    """
    hall = parse_hall_symbol(symbol)
    symops = generate_group(hall.generators, HALL_LATTICE_TRANSLATIONS[hall.lattice])
    LOG.debug("Hall symbol '%s' expanded to %d symops", symbol, len(symops))
    return symops


def centering_multiplicity(lattice: str) -> int:
    "Number of lattice points per cell for the given lattice symbol"
    return 1 + len(HALL_LATTICE_TRANSLATIONS[lattice.lstrip("-").upper()])
