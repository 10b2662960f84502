# This source code is part of the featio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
import featio
from featio import FeatureRecord, MolType, SequenceRegion, Strand


def test_string_fields():
    """
    String values are stored as bytes.
    """
    record = FeatureRecord(
        "chr1", "curated", "exon", 4, 10, attributes="ID=e1", comments="c"
    )
    assert record.location == b"chr1"
    assert record.source == b"curated"
    assert record.type == b"exon"
    assert record.attributes == b"ID=e1"
    assert record.comments == b"c"


def test_defaults():
    record = FeatureRecord(b"chr1", b"", b"exon", 4, 10)
    assert record.score == 0.0
    assert record.strand == Strand.NONE
    assert record.frame == -1
    assert record.moltype == MolType.DNA
    assert record.attributes == b""
    assert record.comments is None


def test_strand_values():
    assert [int(strand) for strand in (
        Strand.FORWARD, Strand.NONE, Strand.REVERSE
    )] == [1, 0, -1]
    record = FeatureRecord(b"chr1", b"", b"exon", 4, 10, strand=-1)
    assert record.strand is Strand.REVERSE


def test_equality():
    record = FeatureRecord(b"chr1", b"src", b"exon", 4, 10, score=1.0)
    assert record == FeatureRecord("chr1", "src", "exon", 4, 10, score=1)
    assert record != FeatureRecord("chr1", "src", "exon", 5, 10, score=1)
    assert record != "chr1"


def test_sequence_region():
    region = SequenceRegion("chr1", 0, 1000)
    assert region.id == b"chr1"
    assert region == SequenceRegion(b"chr1", 0, 1000)
    assert hash(region) == hash(SequenceRegion(b"chr1", 0, 1000))
    with pytest.raises(AttributeError):
        region.start = 1


@pytest.mark.parametrize(
    "name, exp_moltype",
    [
        ("DNA",     MolType.DNA),
        (b"RNA",    MolType.RNA),
        ("Protein", MolType.PROTEIN),
        ("protein", MolType.UNDEFINED),
        ("",        MolType.UNDEFINED),
    ]
)
def test_moltype_lookup(name, exp_moltype):
    assert featio.moltype_from_string(name) == exp_moltype


def test_moltype_names():
    for name in ["DNA", "RNA", "Protein"]:
        moltype = featio.moltype_from_string(name)
        assert featio.moltype_to_string(moltype) == name


def test_register_moltype():
    featio.register_moltype("cDNA", MolType.DNA)
    try:
        assert featio.moltype_from_string("cDNA") == MolType.DNA
        # The canonical name is unaffected
        assert featio.moltype_to_string(MolType.DNA) == "DNA"
    finally:
        del featio.STRING_TO_MOLTYPE["cDNA"]
    with pytest.raises(TypeError):
        featio.register_moltype("cDNA", "DNA")
