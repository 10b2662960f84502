# This source code is part of the featio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "featio"
__all__ = ["Strand", "FeatureRecord", "SequenceRegion"]

from enum import IntEnum
from .file import as_bytes
from .moltype import MolType


class Strand(IntEnum):
    """
    This enum type describes the strand of a feature.

        - **FORWARD** - ``+`` in GFF
        - **NONE** - ``.`` in GFF, the feature is not stranded
        - **REVERSE** - ``-`` in GFF
    """

    FORWARD = 1
    NONE = 0
    REVERSE = -1


class FeatureRecord:
    """
    A :class:`FeatureRecord` represents a single feature line of a GFF
    file.

    Text fields are stored as :class:`bytes`, as they are treated as
    opaque by the reader and the writer.
    :class:`str` values given to the constructor are encoded as UTF-8.

    The start coordinate is always stored 0-based, irrespective of the
    coordinate base of the file the record was read from or is written
    to.
    The end coordinate is stored as it is.

    Parameters
    ----------
    location : bytes or str
        The ID of the reference sequence, e.g. a chromosome name.
    source : bytes or str
        The source of the annotation. May be empty.
    type : bytes or str
        The kind of the feature (e.g. ``CDS``).
    start, end : int
        The coordinates of the feature.
    score : float, optional
        The score of the feature.
    strand : Strand, optional
        The strand of the feature.
    frame : int, optional
        The reading frame offset (0, 1 or 2), -1 if unset.
    moltype : MolType, optional
        The molecule type the feature belongs to.
    attributes : bytes or str, optional
        The raw attributes column.
    comments : bytes or str, optional
        A trailing free-text comment, ``None`` if there is none.

    Attributes
    ----------
    location, source, type, start, end, score, strand, frame, moltype, attributes, comments
        Same as the parameters.

    Examples
    --------

    >>> record = FeatureRecord("chr1", "curated", "exon", 4, 10)
    >>> print(record.location)
    b'chr1'
    >>> print(record.strand.name)
    NONE
    """

    def __init__(self, location, source, type, start, end, score=0.0,
                 strand=Strand.NONE, frame=-1, moltype=MolType.DNA,
                 attributes=b"", comments=None):
        self.location = as_bytes(location)
        self.source = as_bytes(source)
        self.type = as_bytes(type)
        self.start = int(start)
        self.end = int(end)
        self.score = float(score)
        self.strand = Strand(strand)
        self.frame = int(frame)
        self.moltype = moltype
        self.attributes = as_bytes(attributes)
        self.comments = as_bytes(comments) if comments is not None else None

    def __repr__(self):
        return (
            f"FeatureRecord({self.location!r}, {self.source!r}, "
            f"{self.type!r}, {self.start}, {self.end}, score={self.score}, "
            f"strand=Strand.{self.strand.name}, frame={self.frame}, "
            f"moltype=MolType.{self.moltype.name}, "
            f"attributes={self.attributes!r}, comments={self.comments!r})"
        )

    def _fields(self):
        return (
            self.location, self.source, self.type, self.start, self.end,
            self.score, self.strand, self.frame, self.moltype,
            self.attributes, self.comments
        )

    def __eq__(self, item):
        if not isinstance(item, FeatureRecord):
            return False
        return self._fields() == item._fields()


class SequenceRegion:
    """
    The extent of a reference sequence, as given by the
    ``##sequence-region`` directive.

    Objects of this class are immutable.

    Parameters
    ----------
    id : bytes or str
        The ID of the reference sequence.
    start : int
        The 0-based start coordinate.
    end : int
        The end coordinate.
    """

    def __init__(self, id, start, end):
        self._id = as_bytes(id)
        self._start = int(start)
        self._end = int(end)

    @property
    def id(self):
        return self._id

    @property
    def start(self):
        return self._start

    @property
    def end(self):
        return self._end

    def __repr__(self):
        return f"SequenceRegion({self._id!r}, {self._start}, {self._end})"

    def __eq__(self, item):
        if not isinstance(item, SequenceRegion):
            return False
        return (
            self._id == item._id
            and self._start == item._start
            and self._end == item._end
        )

    def __hash__(self):
        return hash((self._id, self._start, self._end))
