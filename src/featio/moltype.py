# This source code is part of the featio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "featio"
__all__ = [
    "MolType",
    "STRING_TO_MOLTYPE",
    "moltype_from_string",
    "moltype_to_string",
    "register_moltype",
]

from enum import Enum, auto


class MolType(Enum):
    """
    This enum type describes the kind of molecule a sequence or a
    feature belongs to.

        - **UNDEFINED** - No (known) molecule type
        - **DNA** - Deoxyribonucleic acid
        - **RNA** - Ribonucleic acid
        - **PROTEIN** - Peptide chain
    """

    UNDEFINED = auto()
    DNA = auto()
    RNA = auto()
    PROTEIN = auto()


# Maps the names used in 'Type' and sequence directives
# to molecule types
STRING_TO_MOLTYPE = {
    "DNA": MolType.DNA,
    "RNA": MolType.RNA,
    "Protein": MolType.PROTEIN,
}

_MOLTYPE_TO_STRING = {
    MolType.UNDEFINED: "Undefined",
    MolType.DNA: "DNA",
    MolType.RNA: "RNA",
    MolType.PROTEIN: "Protein",
}


def moltype_from_string(name):
    """
    Look up the molecule type for the given name.

    Parameters
    ----------
    name : str or bytes
        The name of the molecule type, as used in GFF directives.

    Returns
    -------
    moltype : MolType
        The corresponding molecule type.
        :attr:`MolType.UNDEFINED` if the name is unknown.

    Examples
    --------

    >>> print(moltype_from_string("Protein"))
    MolType.PROTEIN
    >>> print(moltype_from_string("Glycan"))
    MolType.UNDEFINED
    """
    if isinstance(name, bytes):
        name = name.decode("UTF-8", errors="replace")
    return STRING_TO_MOLTYPE.get(name, MolType.UNDEFINED)


def moltype_to_string(moltype):
    """
    Get the canonical name of a molecule type, as it is written into
    sequence directives.
    """
    return _MOLTYPE_TO_STRING[moltype]


def register_moltype(name, moltype):
    """
    Add an alternative name for a molecule type to the lookup table.

    The canonical name used for writing is not affected.

    Parameters
    ----------
    name : str
        The new name.
    moltype : MolType
        The molecule type the name refers to.

    Examples
    --------

    >>> register_moltype("mRNA", MolType.RNA)
    >>> print(moltype_from_string("mRNA"))
    MolType.RNA
    """
    if not isinstance(moltype, MolType):
        raise TypeError(
            f"Expected 'MolType', but got '{type(moltype).__name__}'"
        )
    STRING_TO_MOLTYPE[name] = moltype
