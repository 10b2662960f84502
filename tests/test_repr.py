# This source code is part of the featio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
from featio import FeatureRecord, MolType, Sequence, SequenceRegion, Strand


@pytest.mark.parametrize(
    "repr_object",
    [
        FeatureRecord(b"chr1", b"curated", b"exon", 4, 10),
        FeatureRecord(
            b"chr1", b"", b"CDS", 4, 10, score=0.25, strand=Strand.REVERSE,
            frame=2, moltype=MolType.RNA, attributes=b'gene_id "g1"',
            comments=b"note"
        ),
        SequenceRegion(b"chr1", 0, 1000),
        Sequence(b"seq1", b"ACGT", MolType.PROTEIN),
        Sequence(b"empty"),
    ],
)
def test_repr(repr_object):
    assert eval(repr(repr_object)) == repr_object
