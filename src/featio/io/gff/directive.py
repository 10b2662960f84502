# This source code is part of the featio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "featio.io.gff"
__all__ = [
    "Directive",
    "VersionDirective",
    "SourceVersionDirective",
    "DateDirective",
    "TypeDirective",
    "SequenceRegionDirective",
    "SequenceDirective",
    "OpaqueDirective",
]

from dataclasses import dataclass, field
from datetime import datetime
from ...feature import SequenceRegion
from ...moltype import MolType
from ...sequence import Sequence


@dataclass(frozen=True)
class Directive:
    """
    Base class for all events a :class:`GFFReader` produces for
    directive (``##``) lines.

    Attributes
    ----------
    line : bytes
        The directive line without the leading ``##``.
    """

    line: bytes


@dataclass(frozen=True)
class VersionDirective(Directive):
    """
    ``##gff-version``: The format version of the following lines.
    """

    version: int = 2


@dataclass(frozen=True)
class SourceVersionDirective(Directive):
    """
    ``##source-version``: The version of the program that created the
    file.
    """

    source_version: bytes = b""


@dataclass(frozen=True)
class DateDirective(Directive):
    """
    ``##date``: The creation date of the file.
    """

    date: datetime = None


@dataclass(frozen=True)
class TypeDirective(Directive):
    """
    ``##Type``: The molecule type of the following features.
    """

    moltype: MolType = MolType.UNDEFINED


@dataclass(frozen=True)
class SequenceRegionDirective(Directive):
    """
    ``##sequence-region``: The extent of a reference sequence.
    """

    region: SequenceRegion = None


@dataclass(frozen=True)
class SequenceDirective(Directive):
    """
    ``##DNA``, ``##RNA`` or ``##Protein``: A sequence embedded into the
    file.

    The :attr:`line` only contains the opening directive line, the
    sequence itself is stored in :attr:`sequence`.
    """

    # Sequence objects are not hashable
    sequence: Sequence = field(default=None, hash=False)


@dataclass(frozen=True)
class OpaqueDirective(Directive):
    """
    Any directive not interpreted by the reader.
    """

    pass
