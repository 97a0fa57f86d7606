from dataclasses import dataclass


@dataclass(frozen=True)
class PointGroup:
    """
    Crystallographic point group metadata, in the setting used by the
    space group catalog (unique axis b for monoclinic groups, hexagonal
    axes for trigonal groups).

    Attributes:
        number (int): the point group number, between [1, 32]
        symbol (str): the Hermann-Mauguin symbol e.g. '-42m'
        schoenflies (str): the Schoenflies symbol e.g. 'D2d'
        crystal_system (str): the crystal system e.g. 'tetragonal'
        laue_group (str): the Hermann-Mauguin symbol of the Laue group
        order (int): the number of point symmetry operations
    """

    number: int
    symbol: str
    schoenflies: str
    crystal_system: str
    laue_group: str
    order: int

    def __repr__(self):
        return f"<PointGroup: {self.symbol}>"

    @property
    def is_centrosymmetric(self) -> bool:
        "True if this point group is its own Laue group"
        return self.symbol == self.laue_group

    @classmethod
    def from_number(cls, number):
        """
        The point group with the given number, between [1, 32]. Numbers with
        more than one setting (e.g. 18: 32, 312 and 321) give the first,
        unqualified setting; use `from_symbol` for the others.
        """
        if number < 1 or number > 32:
            raise ValueError("Point group number must be between [1, 32]")
        return POINT_GROUP_FROM_NUMBER[number][0]

    @classmethod
    def from_symbol(cls, symbol):
        if symbol not in POINT_GROUP_FROM_SYMBOL:
            raise ValueError(f"Unknown point group symbol: '{symbol}'")
        return POINT_GROUP_FROM_SYMBOL[symbol]


POINT_GROUP_DATA = (
    PointGroup(1, "1", "C1", "triclinic", "-1", 1),
    PointGroup(2, "-1", "Ci", "triclinic", "-1", 2),
    PointGroup(3, "2", "C2", "monoclinic", "2/m", 2),
    PointGroup(4, "m", "Cs", "monoclinic", "2/m", 2),
    PointGroup(5, "2/m", "C2h", "monoclinic", "2/m", 4),
    PointGroup(6, "222", "D2", "orthorhombic", "mmm", 4),
    PointGroup(7, "mm2", "C2v", "orthorhombic", "mmm", 4),
    PointGroup(8, "mmm", "D2h", "orthorhombic", "mmm", 8),
    PointGroup(9, "4", "C4", "tetragonal", "4/m", 4),
    PointGroup(10, "-4", "S4", "tetragonal", "4/m", 4),
    PointGroup(11, "4/m", "C4h", "tetragonal", "4/m", 8),
    PointGroup(12, "422", "D4", "tetragonal", "4/mmm", 8),
    PointGroup(13, "4mm", "C4v", "tetragonal", "4/mmm", 8),
    PointGroup(14, "-42m", "D2d", "tetragonal", "4/mmm", 8),
    PointGroup(14, "-4m2", "D2d", "tetragonal", "4/mmm", 8),
    PointGroup(15, "4/mmm", "D4h", "tetragonal", "4/mmm", 16),
    PointGroup(16, "3", "C3", "trigonal", "-3", 3),
    PointGroup(17, "-3", "C3i", "trigonal", "-3", 6),
    PointGroup(18, "32", "D3", "trigonal", "-3m", 6),
    PointGroup(18, "312", "D3", "trigonal", "-31m", 6),
    PointGroup(18, "321", "D3", "trigonal", "-3m1", 6),
    PointGroup(19, "3m", "C3v", "trigonal", "-3m", 6),
    PointGroup(19, "31m", "C3v", "trigonal", "-31m", 6),
    PointGroup(19, "3m1", "C3v", "trigonal", "-3m1", 6),
    PointGroup(20, "-3m", "D3d", "trigonal", "-3m", 12),
    PointGroup(20, "-31m", "D3d", "trigonal", "-31m", 12),
    PointGroup(20, "-3m1", "D3d", "trigonal", "-3m1", 12),
    PointGroup(21, "6", "C6", "hexagonal", "6/m", 6),
    PointGroup(22, "-6", "C3h", "hexagonal", "6/m", 6),
    PointGroup(23, "6/m", "C6h", "hexagonal", "6/m", 12),
    PointGroup(24, "622", "D6", "hexagonal", "6/mmm", 12),
    PointGroup(25, "6mm", "C6v", "hexagonal", "6/mmm", 12),
    PointGroup(26, "-6m2", "D3h", "hexagonal", "6/mmm", 12),
    PointGroup(26, "-62m", "D3h", "hexagonal", "6/mmm", 12),
    PointGroup(27, "6/mmm", "D6h", "hexagonal", "6/mmm", 24),
    PointGroup(28, "23", "T", "cubic", "m-3", 12),
    PointGroup(29, "m-3", "Th", "cubic", "m-3", 24),
    PointGroup(30, "432", "O", "cubic", "m-3m", 24),
    PointGroup(31, "-43m", "Td", "cubic", "m-3m", 24),
    PointGroup(32, "m-3m", "Oh", "cubic", "m-3m", 48),
)

POINT_GROUP_FROM_NUMBER = {
    i: [x for x in POINT_GROUP_DATA if x.number == i] for i in range(1, 33)
}

POINT_GROUP_FROM_SYMBOL = {x.symbol: x for x in POINT_GROUP_DATA}
