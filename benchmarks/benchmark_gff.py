import io
import pytest
import featio.io.gff as gff


@pytest.mark.benchmark
def benchmark_read(gff_data):
    for _ in gff.GFFReader(io.BytesIO(gff_data)):
        pass


@pytest.mark.benchmark
def benchmark_write(records):
    writer = gff.GFFWriter(io.BytesIO())
    for record in records:
        writer.write(record)
