# This source code is part of the featio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import io
import pytest


class UnseekableStream(io.BytesIO):
    """
    A binary stream that does not support random access, like a pipe.
    """

    def seekable(self):
        return False


@pytest.fixture
def unseekable_stream():
    def create(data):
        return UnseekableStream(data)
    return create
