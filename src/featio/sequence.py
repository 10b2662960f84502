# This source code is part of the featio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "featio"
__all__ = ["Sequence"]

import numpy as np
from .file import as_bytes
from .moltype import MolType


class Sequence:
    """
    A raw sequence with an identifier, as embedded in GFF files via the
    ``##DNA``, ``##RNA`` and ``##Protein`` directives.

    Internally the sequence is stored as *NumPy* :class:`ndarray` of
    bytes (the *sequence code*).
    No alphabet is enforced: every symbol, that appears in the embedded
    sequence block, is kept as it is.

    Parameters
    ----------
    id : bytes or str
        The identifier of the sequence.
    sequence : bytes or str or ndarray, dtype=uint8, optional
        The sequence symbols.
        By default the sequence is empty.
    moltype : MolType, optional
        The molecule type of the sequence.

    Attributes
    ----------
    id : bytes
        The identifier of the sequence.
    code : ndarray, dtype=uint8
        The sequence code.
    moltype : MolType
        The molecule type of the sequence.

    Examples
    --------

    >>> dna = Sequence("seq1", "ACGTGGTT")
    >>> print(dna)
    ACGTGGTT
    >>> print(len(dna))
    8
    >>> print(bytes(dna[2:4]))
    b'GT'
    """

    def __init__(self, id, sequence=b"", moltype=MolType.DNA):
        self.id = as_bytes(id)
        self.moltype = moltype
        if isinstance(sequence, np.ndarray):
            self.code = sequence.astype(np.uint8, copy=True)
        else:
            # 'frombuffer()' returns a read-only view -> copy
            self.code = np.frombuffer(as_bytes(sequence), dtype=np.uint8).copy()

    def __repr__(self):
        return (
            f"Sequence({self.id!r}, {bytes(self)!r}, "
            f"moltype=MolType.{self.moltype.name})"
        )

    def __str__(self):
        return self.code.tobytes().decode("ASCII", errors="replace")

    def __bytes__(self):
        return self.code.tobytes()

    def __len__(self):
        return len(self.code)

    def __getitem__(self, index):
        sub_code = self.code[index]
        if isinstance(sub_code, np.ndarray):
            return Sequence(self.id, sub_code, self.moltype)
        else:
            return chr(sub_code)

    def __add__(self, sequence):
        if self.moltype != sequence.moltype:
            raise ValueError("The molecule types of the sequences differ")
        return Sequence(
            self.id, np.concatenate((self.code, sequence.code)), self.moltype
        )

    def __eq__(self, item):
        if not isinstance(item, Sequence):
            return False
        return (
            self.id == item.id
            and self.moltype == item.moltype
            and np.array_equal(self.code, item.code)
        )
