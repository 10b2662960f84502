# This source code is part of the featio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "featio.io.gff"
__all__ = ["GFFReader", "GFFWriter", "DEFAULT_VERSION", "DEFAULT_ONE_BASED"]

from datetime import datetime
import io
import re
import warnings
import numpy as np
from ...feature import FeatureRecord, SequenceRegion, Strand
from ...file import InvalidFileError, StreamFile, as_bytes, is_open_compatible
from ...moltype import MolType, moltype_from_string, moltype_to_string
from ...sequence import Sequence
from ..fasta.file import FastaWriter
from .directive import (
    Directive,
    VersionDirective,
    SourceVersionDirective,
    DateDirective,
    TypeDirective,
    SequenceRegionDirective,
    SequenceDirective,
    OpaqueDirective,
)


DEFAULT_VERSION = 2
DEFAULT_ONE_BASED = True

# Column indices of a feature line
_SEQNAME = 0
_SOURCE = 1
_FEATURE = 2
_START = 3
_END = 4
_SCORE = 5
_STRAND = 6
_FRAME = 7
_ATTRIBUTES = 8
_COMMENTS = 9
_N_COLUMNS = 10

_CHAR_TO_STRAND = {
    b"+": Strand.FORWARD,
    b".": Strand.NONE,
    b"-": Strand.REVERSE,
}
_STRAND_TO_CHAR = {strand: char for char, strand in _CHAR_TO_STRAND.items()}

_SEQUENCE_DIRECTIVES = (b"DNA", b"RNA", b"Protein")

# Numbers without digit separators or surrounding whitespace
_INT_PATTERN = re.compile(rb"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    rb"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE
)


class GFFReader(StreamFile):
    """
    This class reads feature records and directives from a binary
    stream in *General Feature Format* (GFF).

    Each call of :meth:`read()` consumes lines from the stream until a
    feature line or a directive line is found and returns the
    corresponding :class:`FeatureRecord` or :class:`Directive`.
    Empty lines and comment lines (single ``#``) are skipped.
    The reader can also be used as iterator.

    Directives may change the state of the reader, which is visible
    via its attributes and affects the interpretation of the following
    lines:
    ``##gff-version`` sets :attr:`version`,
    ``##source-version`` sets :attr:`source_version`,
    ``##date`` sets :attr:`date` and
    ``##Type`` sets :attr:`moltype`, which is inherited by all
    following feature records.

    Malformed numeric columns of feature lines do not raise an
    exception, but are replaced by default values:
    0 for *start* and *end*, 0.0 for *score*, -1 (unset) for *frame*
    and :attr:`Strand.NONE` for *strand*.
    In contrast, malformed directives raise an
    :class:`InvalidFileError`.

    Parameters
    ----------
    file : file-like object or str
        The binary stream to read from.
        Alternatively a file path can be supplied.
    version : int, optional
        The format version that is assumed until a ``##gff-version``
        directive is read.
        It is also used, if the ``##gff-version`` directive contains
        no valid version number.
    one_based : bool, optional
        If true, the *start* column is expected to be 1-based and is
        converted into the 0-based :attr:`FeatureRecord.start`.
    time_format : str, optional
        The :func:`datetime.strptime()` format of the ``##date``
        directive.
        Required if the file contains such a directive.
    moltype : MolType, optional
        The molecule type that is assumed until a ``##Type`` directive
        is read.

    Attributes
    ----------
    version : int
        The current format version.
    one_based : bool
        Whether the *start* column is 1-based.
    time_format : str
        The format of the ``##date`` directive.
    moltype : MolType
        The current molecule type.
    source_version : bytes
        The source version from the last ``##source-version``
        directive, ``None`` if no such directive was read.
    date : datetime
        The date from the last ``##date`` directive, ``None`` if no
        such directive was read.

    Examples
    --------

    >>> from io import BytesIO
    >>> stream = BytesIO(
    ...     b"##gff-version 2\\n"
    ...     b"# A comment\\n"
    ...     b"chr1\\tcurated\\texon\\t5\\t10\\tNA\\t+\\t.\\tgene_id 1\\n"
    ... )
    >>> reader = GFFReader(stream)
    >>> print(reader.read())
    VersionDirective(line=b'gff-version 2', version=2)
    >>> record = reader.read()
    >>> print(record.start, record.end, record.score, record.strand.name)
    4 10 0.0 FORWARD
    >>> print(reader.read())
    None
    """

    def __init__(self, file, version=DEFAULT_VERSION,
                 one_based=DEFAULT_ONE_BASED, time_format=None,
                 moltype=MolType.DNA):
        super().__init__(file, "rb")
        self._default_version = version
        self.version = version
        self.one_based = one_based
        self.time_format = time_format
        self.moltype = moltype
        self.source_version = None
        self.date = None
        self._line_number = 0

    def read(self):
        """
        Read the next feature record or directive.

        Returns
        -------
        item : FeatureRecord or Directive or None
            The next item in the stream.
            ``None`` if the end of the stream is reached.

        Raises
        ------
        InvalidFileError
            If a directive is malformed.
        """
        while True:
            line = self._readline()
            if len(line) == 0:
                # End of stream
                return None
            stripped = line.strip()
            if len(stripped) == 0:
                continue
            if stripped.startswith(b"##"):
                return self._parse_directive(stripped[2:])
            if stripped.startswith(b"#"):
                continue
            # Leading tabs belong to empty columns
            return self._parse_record(line.rstrip())

    def rewind(self):
        """
        Set the position of the reader back to the start of the stream.

        The reader state, i.e. the information obtained from directives,
        is not reset.

        Raises
        ------
        io.UnsupportedOperation
            If the underlying stream is not seekable.
        """
        seekable = getattr(self._stream, "seekable", None)
        if seekable is None or not seekable():
            raise io.UnsupportedOperation(
                "Cannot rewind, the underlying stream is not seekable"
            )
        self._stream.seek(0)
        self._line_number = 0

    def __iter__(self):
        return self

    def __next__(self):
        item = self.read()
        if item is None:
            raise StopIteration
        return item

    @staticmethod
    def read_iter(file, **kwargs):
        """
        Create an iterator over each feature record and directive of
        the given GFF file.

        Parameters
        ----------
        file : file-like object or str
            The file to be read.
            Alternatively a file path can be supplied.
        **kwargs
            Additional parameters for the :class:`GFFReader`.

        Yields
        ------
        item : FeatureRecord or Directive
            The current item in the file.
        """
        reader = GFFReader(file, **kwargs)
        try:
            yield from reader
        finally:
            # Only close the file if it was opened by the reader
            if is_open_compatible(file):
                reader.close()

    def _readline(self):
        line = self._stream.readline()
        if len(line) > 0:
            self._line_number += 1
        return line

    def _error(self, message, line):
        return InvalidFileError(message, line, self._line_number)

    def _parse_record(self, line):
        columns = line.split(b"\t", _N_COLUMNS - 1)
        n_columns = len(columns)
        # Missing columns are treated like empty columns
        columns += [b""] * (_N_COLUMNS - n_columns)

        start = _parse_int(columns[_START], 0)
        if self.one_based and start > 0:
            start -= 1
        end = _parse_int(columns[_END], 0)
        score = _parse_float(columns[_SCORE], 0.0)
        strand = _CHAR_TO_STRAND.get(columns[_STRAND], Strand.NONE)
        frame = _parse_int(columns[_FRAME], -1)
        if frame not in (0, 1, 2):
            frame = -1
        comments = columns[_COMMENTS] if n_columns > _COMMENTS else None

        return FeatureRecord(
            location = columns[_SEQNAME],
            source = columns[_SOURCE],
            type = columns[_FEATURE],
            start = start,
            end = end,
            score = score,
            strand = strand,
            frame = frame,
            moltype = self.moltype,
            attributes = columns[_ATTRIBUTES],
            comments = comments,
        )

    def _parse_directive(self, line):
        fields = line.split()
        if len(fields) == 0:
            return OpaqueDirective(line)
        name = fields[0]

        if name == b"gff-version":
            try:
                self.version = int(fields[1])
            except (IndexError, ValueError):
                self.version = self._default_version
            return VersionDirective(line, self.version)

        elif name == b"source-version":
            if len(fields) < 2:
                raise self._error(
                    "Incomplete source-version directive", b"##" + line
                )
            self.source_version = b" ".join(fields[1:])
            return SourceVersionDirective(line, self.source_version)

        elif name == b"date":
            if len(fields) < 2:
                raise self._error("Incomplete date directive", b"##" + line)
            if self.time_format is None:
                raise self._error(
                    "A time format is required to parse the date directive",
                    b"##" + line
                )
            try:
                self.date = datetime.strptime(
                    b" ".join(fields[1:]).decode("UTF-8"), self.time_format
                )
            except ValueError as e:
                raise self._error(
                    f"Invalid date directive: {e}", b"##" + line
                ) from e
            return DateDirective(line, self.date)

        elif name == b"Type":
            if len(fields) < 2:
                raise self._error("Incomplete Type directive", b"##" + line)
            self.moltype = moltype_from_string(fields[1])
            if self.moltype == MolType.UNDEFINED:
                warnings.warn(
                    f"Unknown molecule type {fields[1].decode(errors='replace')!r}"
                    f" in line {self._line_number}, the type is undefined"
                )
            return TypeDirective(line, self.moltype)

        elif name == b"sequence-region":
            if len(fields) < 4:
                raise self._error(
                    "Incomplete sequence-region directive", b"##" + line
                )
            start = _parse_int(fields[2], None)
            end = _parse_int(fields[3], None)
            if start is None or end is None:
                raise self._error(
                    "Invalid coordinates in sequence-region directive",
                    b"##" + line
                )
            if self.one_based and start > 0:
                start -= 1
            return SequenceRegionDirective(
                line, SequenceRegion(fields[1], start, end)
            )

        elif name in _SEQUENCE_DIRECTIVES:
            if len(fields) < 2:
                raise self._error(
                    f"Incomplete {name.decode()} directive", b"##" + line
                )
            sequence = self._read_sequence(name, fields[1])
            return SequenceDirective(line, sequence)

        else:
            return OpaqueDirective(line)

    def _read_sequence(self, moltype_name, id):
        """
        Read the lines of an embedded sequence block up to the
        ``##end-<moltype>`` line.
        """
        terminator = b"end-" + moltype_name
        chunks = []
        while True:
            line = self._readline()
            if len(line) == 0:
                raise self._error(
                    f"Unexpected end of file in {moltype_name.decode()} "
                    f"sequence block", None
                )
            line = line.rstrip(b"\r\n")
            if len(line) == 0:
                continue
            if not line.startswith(b"##"):
                raise self._error("Corrupt sequence block", line)
            line = line[2:].strip()
            if line == terminator:
                break
            # Remove all whitespace within the sequence line
            chunks.append(b"".join(line.split()))
        return Sequence(id, b"".join(chunks), moltype_from_string(moltype_name))


class GFFWriter(StreamFile):
    """
    This class writes feature records, directives and comments into a
    binary stream in *General Feature Format* (GFF).

    The formatting mirrors the interpretation of :class:`GFFReader`:
    The 0-based :attr:`FeatureRecord.start` is converted to 1-based
    coordinates, if `one_based` is true.
    The *strand* is only written for DNA features, otherwise ``.`` is
    written.
    The *frame* is only written, if it is 0, 1 or 2 and the feature is
    a DNA feature or the format version is lower than 2, otherwise
    ``.`` is written.

    Parameters
    ----------
    file : file-like object or str
        The binary stream to write to.
        Alternatively a file path can be supplied.
    version : int, optional
        The format version.
    chars_per_line : int, optional
        The number of symbols in a line of embedded sequences.
    header : bool, optional
        If true, a ``##gff-version`` directive is written immediately.
    one_based : bool, optional
        If true, the *start* column is written 1-based.
    float_format : {'g', 'f', 'e'}, optional
        The notation of the *score* column, as in :func:`format()`.
    precision : int, optional
        The number of digits of the *score* column.
        A negative value gives the shortest representation that is read
        back as the same value.
        In this case the 'g' notation uses the scientific notation for
        decimal exponents below -4 or above 5.

    Attributes
    ----------
    version, chars_per_line, one_based, float_format, precision
        Same as the parameters.

    Examples
    --------

    >>> from io import BytesIO
    >>> from featio import FeatureRecord, Strand
    >>> stream = BytesIO()
    >>> writer = GFFWriter(stream, header=True)
    >>> record = FeatureRecord(
    ...     "chr1", "curated", "CDS", 4, 10, score=0.5,
    ...     strand=Strand.REVERSE, frame=1, attributes="gene_id 1"
    ... )
    >>> n = writer.write(record)
    >>> n = writer.write_comment("Done")
    >>> print(stream.getvalue().decode().replace("\\t", " "))
    ##gff-version 2
    chr1 curated CDS 5 10 0.5 - 1 gene_id 1
    # Done
    <BLANKLINE>
    """

    def __init__(self, file, version=DEFAULT_VERSION, chars_per_line=60,
                 header=False, one_based=DEFAULT_ONE_BASED, float_format="g",
                 precision=-1):
        super().__init__(file, "wb")
        if float_format not in ("g", "f", "e"):
            raise ValueError(f"Unknown float format '{float_format}'")
        self.version = version
        self.chars_per_line = chars_per_line
        self.one_based = one_based
        self.float_format = float_format
        self.precision = precision
        if header:
            self.write_metadata(f"gff-version {version}")

    def format_record(self, record):
        """
        Convert a feature record into a GFF line.

        Parameters
        ----------
        record : FeatureRecord
            The record to be converted.

        Returns
        -------
        line : bytes
            The GFF line, without line break.
        """
        start = self._to_file_start(record.start)
        if record.moltype == MolType.DNA:
            strand = _STRAND_TO_CHAR.get(record.strand, b".")
        else:
            strand = b"."
        if record.frame in (0, 1, 2) and (
            record.moltype == MolType.DNA or self.version < 2
        ):
            frame = b"%d" % record.frame
        else:
            frame = b"."
        attributes = record.attributes
        if record.comments:
            attributes += b" #" + record.comments

        return b"\t".join([
            record.location,
            record.source,
            record.type,
            b"%d" % start,
            b"%d" % record.end,
            self._format_score(record.score),
            strand,
            frame,
            attributes,
        ])

    def write(self, record):
        """
        Write a single feature record.

        Parameters
        ----------
        record : FeatureRecord
            The record to be written.

        Returns
        -------
        n : int
            The number of bytes written.
        """
        return self._stream.write(self.format_record(record) + b"\n")

    def write_metadata(self, metadata):
        """
        Write a directive.

        Parameters
        ----------
        metadata : str or bytes or Sequence or SequenceRegion
            The content of the directive.
            A string is written as it is, prefixed with ``##``.
            A :class:`Sequence` is written as embedded sequence block,
            using a ``##DNA``, ``##RNA`` or ``##Protein`` directive,
            depending on its molecule type.
            A :class:`SequenceRegion` is written as
            ``##sequence-region`` directive.
            Other objects are not written.

        Returns
        -------
        n : int
            The number of bytes written.
        """
        if isinstance(metadata, (str, bytes)):
            return self._stream.write(b"##" + as_bytes(metadata) + b"\n")

        elif isinstance(metadata, Sequence):
            name = moltype_to_string(metadata.moltype).encode("ASCII")
            fasta_writer = FastaWriter(
                self._stream, self.chars_per_line,
                id_prefix = b"##" + name + b" ",
                seq_prefix = b"##"
            )
            n = fasta_writer.write(metadata)
            n += self._stream.write(b"##end-" + name + b"\n")
            return n

        elif isinstance(metadata, SequenceRegion):
            return self._stream.write(
                b"##sequence-region %s %d %d\n" % (
                    metadata.id,
                    self._to_file_start(metadata.start),
                    metadata.end
                )
            )

        else:
            warnings.warn(
                f"Metadata of type '{type(metadata).__name__}' "
                f"is not supported, nothing is written"
            )
            return 0

    def write_directive(self, directive):
        """
        Write a directive, that was obtained from a :class:`GFFReader`.

        Sequence blocks and sequence regions are written according to
        the settings of this writer, all other directives are written
        as they were read.

        Parameters
        ----------
        directive : Directive
            The directive to be written.

        Returns
        -------
        n : int
            The number of bytes written.
        """
        if isinstance(directive, SequenceDirective):
            return self.write_metadata(directive.sequence)
        elif isinstance(directive, SequenceRegionDirective):
            return self.write_metadata(directive.region)
        elif isinstance(directive, Directive):
            return self.write_metadata(directive.line)
        else:
            raise TypeError(
                f"Expected 'Directive', but got '{type(directive).__name__}'"
            )

    def write_comment(self, comment):
        """
        Write a comment line.

        Parameters
        ----------
        comment : str or bytes
            The comment text, without the leading ``#``.

        Returns
        -------
        n : int
            The number of bytes written.
        """
        return self._stream.write(b"# " + as_bytes(comment) + b"\n")

    def close(self):
        """
        Flush the underlying stream and close it afterwards.

        If flushing fails, the exception is raised and the stream is
        not closed.
        """
        self._stream.flush()
        self._stream.close()

    @staticmethod
    def write_iter(file, items, **kwargs):
        """
        Iterate over the given `items` and write each item into the
        specified `file`.

        Parameters
        ----------
        file : file-like object or str
            The file to be written to.
            Alternatively a file path can be supplied.
        items : iterable object of FeatureRecord or Directive
            The feature records and directives to be written, e.g.
            obtained from :meth:`GFFReader.read_iter()`.
        **kwargs
            Additional parameters for the :class:`GFFWriter`.
        """
        writer = GFFWriter(file, **kwargs)
        try:
            for item in items:
                if isinstance(item, FeatureRecord):
                    writer.write(item)
                else:
                    writer.write_directive(item)
        finally:
            # Only close the file if it was opened by the writer
            if is_open_compatible(file):
                writer.close()
            else:
                writer.stream.flush()

    def _to_file_start(self, start):
        if self.one_based and start >= 0:
            return start + 1
        return start

    def _format_score(self, score):
        if self.precision < 0:
            # Shortest representation that is parsed into the same value
            if self.float_format == "f":
                string = np.format_float_positional(score, trim="0")
            elif self.float_format == "e":
                string = np.format_float_scientific(score, trim="0")
            elif not np.isfinite(score):
                string = repr(float(score))
            else:
                # Scientific notation for exponents below -4 or above 5
                string = np.format_float_scientific(score, trim="-")
                exponent = int(string.split("e")[1])
                if -4 <= exponent < 6:
                    string = np.format_float_positional(score, trim="-")
        else:
            string = format(score, f".{self.precision}{self.float_format}")
        return string.encode("ASCII")


def _parse_int(value, default):
    if _INT_PATTERN.fullmatch(value) is None:
        return default
    return int(value)


def _parse_float(value, default):
    if _FLOAT_PATTERN.fullmatch(value) is None:
        return default
    return float(value)
