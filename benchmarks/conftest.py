import io
import pytest
from featio import FeatureRecord, Strand
import featio.io.gff as gff


@pytest.fixture(scope="session")
def records():
    """
    A large number of feature records, to avoid biasing the benchmarks
    with the creation time of the records.
    """
    return [
        FeatureRecord(
            b"chr1", b"curated", b"exon", i * 100, i * 100 + 50,
            score=i / 7, strand=Strand.FORWARD, frame=i % 3,
            attributes=b'gene_id "g%d"' % i
        )
        for i in range(10000)
    ]


@pytest.fixture(scope="session")
def gff_data(records):
    stream = io.BytesIO()
    gff.GFFWriter.write_iter(stream, records, header=True)
    return stream.getvalue()
