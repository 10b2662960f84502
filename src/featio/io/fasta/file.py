# This source code is part of the featio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "featio.io.fasta"
__all__ = ["FastaWriter"]

from ...file import StreamFile, as_bytes, is_open_compatible, wrap_bytes


class FastaWriter(StreamFile):
    """
    This class writes :class:`Sequence` objects in FASTA layout into a
    binary stream.

    Each sequence is written as a header line, consisting of the
    `id_prefix` and the sequence ID, followed by the sequence symbols,
    wrapped after `chars_per_line` symbols.
    Each sequence line starts with the `seq_prefix`.

    Parameters
    ----------
    file : file-like object or str
        The binary stream to write to.
        Alternatively a file path can be supplied.
    chars_per_line : int, optional
        The number of symbols in a line containing sequence data
        after which a line break is inserted.
        Default is 80.
    id_prefix : bytes or str, optional
        The prefix of the header line.
        Default is ``>``.
    seq_prefix : bytes or str, optional
        The prefix of each sequence line.
        By default sequence lines have no prefix.

    Examples
    --------

    >>> from io import BytesIO
    >>> from featio import Sequence
    >>> stream = BytesIO()
    >>> writer = FastaWriter(stream, chars_per_line=4, seq_prefix="##")
    >>> writer.write(Sequence("seq1", "ACGTGGT"))
    19
    >>> print(stream.getvalue().decode())
    >seq1
    ##ACGT
    ##GGT
    <BLANKLINE>
    """

    def __init__(self, file, chars_per_line=80, id_prefix=b">",
                 seq_prefix=b""):
        super().__init__(file, "wb")
        if chars_per_line < 1:
            raise ValueError("At least one symbol per line is required")
        self.chars_per_line = chars_per_line
        self.id_prefix = as_bytes(id_prefix)
        self.seq_prefix = as_bytes(seq_prefix)

    def lines(self, sequence):
        """
        Create the lines for the given sequence, without line breaks.

        Parameters
        ----------
        sequence : Sequence
            The sequence to create the lines for.

        Yields
        ------
        line : bytes
            The header line, followed by the sequence lines.
        """
        yield self.id_prefix + sequence.id.replace(b"\n", b"").strip()
        for line in wrap_bytes(bytes(sequence), self.chars_per_line):
            yield self.seq_prefix + line

    def write(self, sequence):
        """
        Write a single sequence.

        Parameters
        ----------
        sequence : Sequence
            The sequence to write.

        Returns
        -------
        n : int
            The number of bytes written.
        """
        n = 0
        for line in self.lines(sequence):
            n += self._stream.write(line + b"\n")
        return n

    @staticmethod
    def write_iter(file, sequences, chars_per_line=80):
        """
        Iterate over the given `sequences` and write each sequence into
        the specified `file` as plain FASTA.

        Parameters
        ----------
        file : file-like object or str
            The file to be written to.
            Alternatively a file path can be supplied.
        sequences : iterable object of Sequence
            The sequences to be written into the file.
        chars_per_line : int, optional
            The number of symbols in a line containing sequence data
            after which a line break is inserted.
        """
        writer = FastaWriter(file, chars_per_line)
        try:
            for sequence in sequences:
                writer.write(sequence)
        finally:
            # Only close the file if it was opened by the writer
            if is_open_compatible(file):
                writer.close()
