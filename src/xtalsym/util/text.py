import re

# unicode subscript digits are contiguous from U+2080
SUBSCRIPT_MAP = {str(i): chr(0x2080 + i) for i in range(10)}
_SUBSCRIPT_TABLE = str.maketrans(SUBSCRIPT_MAP)

_HM_TOKEN_REGEX = re.compile(r"^(-?)(\d)(\d?)(.*)$")


def subscript(x: str) -> str:
    """
    Write the digits in the provided string as unicode
    subscripts, leaving other characters unchanged.

    Args:
        x (str): the string to be converted

    Returns:
        str: the converted string
    """
    return x.translate(_SUBSCRIPT_TABLE)


def overline(x: str) -> str:
    "Place a combining overline over every character of `x`, e.g. '3' gives '3̅'"
    return "".join(f"{c}̅" for c in x)


def hermann_mauguin_unicode(tokens) -> str:
    """
    Join the tokens of a Hermann-Mauguin symbol, writing screw axes with
    subscripts and rotoinversion axes with overlines, e.g.
    ('P', '21/c') gives 'P2₁/c' and ('F', 'm', '-3', 'm') gives 'Fm3̅m'.

    Args:
        tokens (Iterable[str]): the space separated parts of the symbol

    Returns:
        str: the formatted symbol
    """
    result = []
    for token in tokens:
        m = _HM_TOKEN_REGEX.match(token)
        if m is None:
            result.append(token)
            continue
        bar, axis, screw, rest = m.groups()
        axis = overline(axis) if bar else axis
        result.append(axis + subscript(screw) + rest)
    return "".join(result)
