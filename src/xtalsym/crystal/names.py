"""
Lookup between space group numbers, short symbols (e.g. 'P212121')
and PDB-convention symbols (e.g. 'P 21 21 21').

Both name tables are ordered by space group number, so index i of either
table corresponds to space group number i + 1.
"""
import logging

from .sgdata import SG_DATA

LOG = logging.getLogger(__name__)

SHORT_NAMES = tuple(x.short for x in SG_DATA)
PDB_NAMES = tuple(x.pdb for x in SG_DATA)


def number_for_short_name(name: str) -> int:
    """
    The space group number for a short space group symbol, compared
    case-insensitively.

    >>> number_for_short_name("p212121")
    19

    Args:
        name (str): the short symbol e.g. 'P21/c'

    Returns:
        int: the space group number, or -1 if the symbol is unknown
    """
    name = name.lower()
    for i, short in enumerate(SHORT_NAMES):
        if short.lower() == name:
            return i + 1
    LOG.debug("No space group with short name '%s'", name)
    return -1


def short_name_for_pdb_name(pdb_name: str) -> str:
    """
    The short space group symbol for a PDB-convention symbol, compared
    case-insensitively. Unknown symbols are returned unchanged, so either
    naming convention can be passed through this function.

    >>> short_name_for_pdb_name("P 1 21 1")
    'P21'
    >>> short_name_for_pdb_name("P21")
    'P21'

    Args:
        pdb_name (str): the PDB symbol e.g. 'P 1 21 1'

    Returns:
        str: the matching short symbol, or `pdb_name` if there is none
    """
    lower = pdb_name.lower()
    for i, pdb in enumerate(PDB_NAMES):
        if pdb.lower() == lower:
            return SHORT_NAMES[i]
    LOG.debug("'%s' is not a PDB space group name", pdb_name)
    return pdb_name
