from fractions import Fraction
import logging
import numbers
import re
from typing import Iterable, List, Sequence, Tuple

import numpy as np

LOG = logging.getLogger(__name__)

SYMM_STR_TERM_REGEX = re.compile(r"([+-]?)(\d*\.\d+|\d+(?:/\d+)?|[xyz])")

_SYMBOLS = "xyz"
_IDENTITY_ROTATION = ((1, 0, 0), (0, 1, 0), (0, 0, 1))

Rotation = Tuple[Tuple[int, int, int], Tuple[int, int, int], Tuple[int, int, int]]
Translation = Tuple[Fraction, Fraction, Fraction]


def _as_fraction(value) -> Fraction:
    if isinstance(value, Fraction):
        return value
    if isinstance(value, numbers.Integral):
        return Fraction(int(value))
    if isinstance(value, str):
        return Fraction(value)
    # translations are rational with denominators dividing 24
    snapped = Fraction(float(value)).limit_denominator(24)
    if 24 % snapped.denominator or abs(float(value) - snapped) > 1e-6:
        raise ValueError(f"Translation {value} is not a multiple of 1/24")
    return snapped


def _as_int(value) -> int:
    result = int(round(value))
    if result != value:
        raise ValueError(f"Rotation matrix entries must be integers, got {value}")
    return result


def _as_rotation(rotation) -> Rotation:
    rows = [tuple(_as_int(x) for x in row) for row in rotation]
    if len(rows) != 3 or any(len(row) != 3 for row in rows):
        raise ValueError("Rotation must be a (3, 3) matrix")
    return tuple(rows)


def _as_translation(translation) -> Translation:
    vector = tuple(_as_fraction(x) for x in translation)
    if len(vector) != 3:
        raise ValueError("Translation must be a vector of length 3")
    return vector


def encode_symm_str(rotation, translation) -> str:
    """
    Encode a rotation matrix and (rational) translation vector
    into string form e.g. 1/2-x,+z-1/3,-y-1/6

    >>> encode_symm_str(((-1, 0, 0), (0, 0, 1), (0, 1, 0)), (0, Fraction(1, 2), Fraction(1, 3)))
    '-x,1/2+z,1/3+y'
    >>> encode_symm_str(((0, -1, 0), (1, -1, 0), (0, 0, 1)), (0, 0, Fraction(2, 3)))
    '-y,+x-y,2/3+z'

    Args:
        rotation (array_like): (3,3) integer matrix encoding the rotation component
            of the symmetry operation
        translation (array_like): (3) vector of rational numbers encoding the translation component
            of the symmetry operation

    Returns:
        str: the encoded symmetry operation
    """
    res = []
    for i in (0, 1, 2):
        t = _as_fraction(translation[i])
        v = ""
        if t != 0:
            v += str(t)
        for j in (0, 1, 2):
            c = rotation[i][j]
            if c != 0:
                s = "-" if c < 0 else "+"
                if abs(c) != 1:
                    s += str(abs(c))
                v += s + _SYMBOLS[j]
        res.append(v)
    return ",".join(res)


def decode_symm_str(s: str) -> Tuple[Rotation, Translation]:
    """
    Decode a symmetry operation represented in the string
    form e.g. '1/2 + x, y, -z -0.25' into an integer rotation matrix
    and an exact translation vector, reduced into [0, 1).

    >>> encode_symm_str(*decode_symm_str("x,y,z"))
    '+x,+y,+z'
    >>> encode_symm_str(*decode_symm_str("1/2 - x,y-0.25,z"))
    '1/2-x,3/4+y,+z'

    Args:
        s (str): the encoded symmetry operation string

    Returns:
        Tuple[Rotation, Translation]: a (3,3) rotation matrix and a (3) translation vector

    Raises:
        ValueError: if the string is not a valid symmetry operation
    """
    tokens = s.lower().replace(" ", "").split(",")
    if len(tokens) != 3:
        raise ValueError(f"Expected 3 comma separated components in '{s}'")
    rotation = [[0, 0, 0], [0, 0, 0], [0, 0, 0]]
    translation = [Fraction(0), Fraction(0), Fraction(0)]
    for i, row in enumerate(tokens):
        position = 0
        for match in SYMM_STR_TERM_REGEX.finditer(row):
            if match.start() != position:
                break
            # every term after the first needs a sign, so "2x" and "x1/2" are rejected
            if position and not match.group(1):
                raise ValueError(
                    f"Missing sign before '{match.group(2)}' in '{row}' of '{s}'"
                )
            position = match.end()
            sign = -1 if match.group(1) == "-" else 1
            symbol = match.group(2)
            if symbol in ("x", "y", "z"):
                rotation[i][_SYMBOLS.index(symbol)] += sign
            else:
                translation[i] += sign * Fraction(symbol)
        if position == 0 or position != len(row):
            raise ValueError(f"Could not parse component '{row}' of '{s}'")
    return (
        tuple(tuple(row) for row in rotation),
        tuple(t % 1 for t in translation),
    )


def decode_symm_int(coded_integer: int) -> Tuple[Rotation, Translation]:
    """
    Decode an integer encoded symmetry operation.

    The rotation is stored as nine base-3 digits (each element is one of
    {-1, 0, 1}) and the reduced translation as three base-24 digits, in
    units of 1/24, so every translation occurring in the 230 space groups
    is representable.

    >>> encode_symm_str(*decode_symm_int(16484))
    '+x,+y,+z'

    Args:
        coded_integer (int): integer encoding a symmetry operation

    Returns:
        Tuple[Rotation, Translation]: (3,3) rotation matrix, (3) translation vector
    """
    r = coded_integer % 19683  # 19683 = 3**9
    shift = 6561  # 6561 = 3**8
    rotation = [[0, 0, 0], [0, 0, 0], [0, 0, 0]]
    for i in (0, 1, 2):
        for j in (0, 1, 2):
            rotation[i][j] = (r % (shift * 3)) // shift - 1
            shift //= 3

    t = coded_integer // 19683
    shift = 576  # 576 = 24**2
    translation = []
    for i in (0, 1, 2):
        translation.append(Fraction((t % (shift * 24)) // shift, 24))
        shift //= 24
    return tuple(tuple(row) for row in rotation), tuple(translation)


def encode_symm_int(rotation, translation) -> int:
    """
    Encode a symmetry operation as an integer from a rotation matrix
    and translation vector. See `decode_symm_int` for the layout.

    >>> encode_symm_int(((1, 0, 0), (0, 1, 0), (0, 0, 1)), (0, 0, 0))
    16484
    >>> encode_symm_int(((-1, 0, 0), (0, -1, 0), (0, 0, 1)), (Fraction(1, 2), 0, Fraction(1, 2)))
    136288292

    Args:
        rotation (array_like): (3,3) matrix of -1, 0, or 1s
        translation (array_like): (3) vector of rational numbers with denominators dividing 24

    Returns:
        int: the encoded symmetry operation

    Raises:
        ValueError: if the operation cannot be packed
    """
    r = 0
    shift = 1
    for i in (2, 1, 0):
        for j in (2, 1, 0):
            c = rotation[i][j]
            if c not in (-1, 0, 1):
                raise ValueError(f"Cannot encode rotation element {c}")
            r += (c + 1) * shift
            shift *= 3
    t = 0
    shift = 1
    for i in (2, 1, 0):
        v = (_as_fraction(translation[i]) % 1) * 24
        if v.denominator != 1:
            raise ValueError(f"Cannot encode translation {translation[i]}")
        t += int(v) * shift
        shift *= 24
    return r + t * 19683


class SymmetryOperation:
    """
    Class to represent a crystallographic symmetry operation,
    composed of a rotation and a translation. Instances are immutable,
    and all arithmetic is exact: rotations are integer matrices and
    translations are `Fraction` vectors.

    Attributes:
        rotation (Rotation): (3, 3) integer rotation matrix in fractional coordinates
        translation (Translation): (3) translation vector in fractional coordinates
    """

    def __init__(self, rotation, translation=(0, 0, 0)):
        """
        Construct a new symmetry operation from a rotation matrix and
        a translation vector. The translation is not reduced modulo 1.

        Arguments:
            rotation (array_like): (3, 3) integer rotation matrix
            translation (array_like, optional): (3) translation vector, floats must be
                within 1e-6 of a multiple of 1/24 and are converted to that fraction

        Returns:
            SymmetryOperation: a new SymmetryOperation
        """
        self._rotation = _as_rotation(rotation)
        self._translation = _as_translation(translation)

    @property
    def rotation(self) -> Rotation:
        "The (3, 3) integer rotation matrix, as a tuple of rows"
        return self._rotation

    @property
    def translation(self) -> Translation:
        "The (3) exact translation vector"
        return self._translation

    @property
    def rotation_matrix(self) -> np.ndarray:
        "The rotation as a (3, 3) integer numpy array"
        return np.array(self._rotation, dtype=np.int64)

    @property
    def seitz_matrix(self) -> np.ndarray:
        "The Seitz matrix form of this SymmetryOperation"
        s = np.eye(4, dtype=np.float64)
        s[:3, :3] = self._rotation
        s[:3, 3] = [float(t) for t in self._translation]
        return s

    @property
    def determinant(self) -> int:
        "Determinant of the rotation, +1 for proper and -1 for improper operations"
        (a, b, c), (d, e, f), (g, h, i) = self._rotation
        return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)

    @property
    def integer_code(self) -> int:
        "Represent the reduced form of this SymmetryOperation as a packed integer"
        return encode_symm_int(self._rotation, self._translation)

    @property
    def cif_form(self) -> str:
        "Represent this SymmetryOperation in string form e.g. '+x,+y,+z'"
        return str(self)

    def apply(self, point):
        """
        Apply this symmetry operation to a single fractional coordinate
        triple, i.e. `rotation . point + translation`.

        No reduction modulo 1 is performed: callers that need coordinates
        inside the unit cell must reduce them explicitly.

        Args:
            point (Sequence): (3) coordinates, integers or fractions give exact results

        Returns:
            tuple: the transformed coordinates
        """
        return tuple(
            sum(r * p for r, p in zip(row, point)) + t
            for row, t in zip(self._rotation, self._translation)
        )

    def apply_array(self, coordinates: np.ndarray) -> np.ndarray:
        """
        Apply this symmetry operation to a set of fractional coordinates.

        Args:
            coordinates (np.ndarray): (N,3) or (N,4) array of fractional coordinates or homogeneous
                fractional coordinates.

        Returns:
            np.ndarray: (N, 3) or (N, 4) array of transformed coordinates
        """
        coordinates = np.asarray(coordinates, dtype=np.float64)
        seitz = self.seitz_matrix
        if coordinates.shape[1] == 4:
            return np.dot(coordinates, seitz.T)
        return np.dot(coordinates, seitz[:3, :3].T) + seitz[:3, 3]

    def rotate_hkl(self, hkl) -> Tuple[int, int, int]:
        """
        Apply the rotation part of this operation to Miller indices.

        Reflections transform as row vectors, so the image of (h, k, l)
        is (h, k, l) . R and the translation only contributes a phase.

        Args:
            hkl (Sequence[int]): the Miller indices

        Returns:
            Tuple[int, int, int]: the rotated Miller indices
        """
        r = self._rotation
        return tuple(sum(hkl[i] * r[i][j] for i in (0, 1, 2)) for j in (0, 1, 2))

    def compose(self, other: "SymmetryOperation") -> "SymmetryOperation":
        """
        The operation equivalent to applying `other` first, then `self`.

        The rotation is R_self . R_other and the translation is
        R_self . t_other + t_self; no reduction modulo 1 is performed.

        Args:
            other (SymmetryOperation): the operation applied first

        Returns:
            SymmetryOperation: the product of the two operations
        """
        r1, r2 = self._rotation, other._rotation
        rotation = tuple(
            tuple(sum(r1[i][k] * r2[k][j] for k in (0, 1, 2)) for j in (0, 1, 2))
            for i in (0, 1, 2)
        )
        return SymmetryOperation(rotation, self.apply(other._translation))

    def reduced(self) -> "SymmetryOperation":
        "A copy of this symmetry operation with translation reduced into [0, 1)"
        return SymmetryOperation(self._rotation, tuple(t % 1 for t in self._translation))

    def inverted(self) -> "SymmetryOperation":
        """
        A copy of this symmetry operation under inversion

        Returns:
            SymmetryOperation: an inverted copy of this symmetry operation
        """
        return SymmetryOperation(
            tuple(tuple(-x for x in row) for row in self._rotation),
            tuple(-t for t in self._translation),
        )

    def __add__(self, value):
        """
        Add a vector to this symmetry operation's translation vector.

        Returns:
            SymmetryOperation: a copy of this symmetry operation under additional translation
        """
        value = _as_translation(value)
        return SymmetryOperation(
            self._rotation, tuple(t + v for t, v in zip(self._translation, value))
        )

    def __sub__(self, value):
        """
        Subtract a vector from this symmetry operation's translation.

        Returns:
            SymmetryOperation: a copy of this symmetry operation under additional translation
        """
        value = _as_translation(value)
        return SymmetryOperation(
            self._rotation, tuple(t - v for t, v in zip(self._translation, value))
        )

    def __matmul__(self, other):
        return self.compose(other)

    def __str__(self):
        return encode_symm_str(self._rotation, self._translation)

    def _key(self):
        return (self._rotation, self._translation)

    def __lt__(self, other):
        return self._key() < other._key()

    def __eq__(self, other):
        if not isinstance(other, SymmetryOperation):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return "<{}: {}>".format(self.__class__.__name__, self)

    def __call__(self, coordinates):
        if isinstance(coordinates, np.ndarray):
            return self.apply_array(coordinates)
        return self.apply(coordinates)

    @classmethod
    def from_integer_code(cls, code: int):
        """
        Alternative constructor from an integer-encoded
        symmetry operation e.g. 16484

        See also the `encode_symm_int`, `decode_symm_int` methods.

        Args:
            code (int): integer-encoded symmetry operation

        Returns:
            SymmetryOperation: a new symmetry operation from the provided integer code
        """
        return cls(*decode_symm_int(code))

    @classmethod
    def from_string_code(cls, code: str):
        """
        Alternative constructor from a string encoded
        symmetry operation e.g. '+x,+y,+z'.

        See also the `encode_symm_str`, `decode_symm_str` methods.

        Args:
            code (str): string-encoded symmetry operation

        Returns:
            SymmetryOperation: a new symmetry operation from the provided string code
        """
        return cls(*decode_symm_str(code))

    def is_identity(self) -> bool:
        "Returns true if this is the identity symmetry operation '+x,+y,+z'"
        return self._rotation == _IDENTITY_ROTATION and not any(self._translation)

    @classmethod
    def identity(cls):
        "Alternative constructor for the the identity symop i.e. x,y,z"
        return cls(_IDENTITY_ROTATION)


def compose(a: SymmetryOperation, b: SymmetryOperation) -> SymmetryOperation:
    "Product of two symmetry operations, `b` applied first. See `SymmetryOperation.compose`"
    return a.compose(b)


def _is_lattice_translation(vector, centering) -> bool:
    vector = tuple(t % 1 for t in vector)
    if not any(vector):
        return True
    return any(vector == tuple(_as_fraction(c) % 1 for c in v) for v in centering)


def generate_group(
    generators: Iterable[SymmetryOperation], centering: Sequence = ()
) -> List[SymmetryOperation]:
    """
    Generate the full list of symmetry operations for a space group
    from a set of generators and the centring vectors of its lattice.

    Operations are identified by their rotation: the closure yields one
    representative (with translation reduced into [0, 1)) per rotation,
    starting with the identity and continuing in breadth-first order.
    The centred copies of every representative follow, one block per
    centring vector.

    Args:
        generators (Iterable[SymmetryOperation]): generators of the group
        centering (Sequence, optional): centring translation vectors of the lattice

    Returns:
        List[SymmetryOperation]: the representatives followed by their centred copies

    Raises:
        ValueError: if two products share a rotation but differ by a
            translation that is not a lattice translation
    """
    generators = [g.reduced() for g in generators]
    identity = SymmetryOperation.identity()
    representatives = {identity.rotation: identity}
    queue = [identity]
    while queue:
        current = queue.pop(0)
        for generator in generators:
            product = generator.compose(current).reduced()
            existing = representatives.get(product.rotation)
            if existing is None:
                representatives[product.rotation] = product
                queue.append(product)
                continue
            difference = tuple(
                a - b for a, b in zip(product.translation, existing.translation)
            )
            if not _is_lattice_translation(difference, centering):
                raise ValueError(
                    "Generators are not closed under composition: {} and {}".format(
                        product, existing
                    )
                )

    primitive = list(representatives.values())
    symops = list(primitive)
    for vector in centering:
        symops.extend((op + vector).reduced() for op in primitive)
    LOG.debug(
        "Generated %d symops (%d primitive) from %d generators",
        len(symops),
        len(primitive),
        len(generators),
    )
    return symops
