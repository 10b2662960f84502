# This source code is part of the featio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This subpackage is used for writing :class:`Sequence` objects in a
FASTA-like multi-line layout.

The :class:`FastaWriter` is not restricted to plain FASTA files:
The prefixes of the header line and of the sequence lines are
configurable, so that the same layout can be embedded into other
formats, like the sequence directives of GFF files.
"""

__name__ = "featio.io.fasta"

from .file import *
