# This source code is part of the featio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

from importlib.metadata import version
import featio


def test_version():
    """
    Check if the version of the package is the version of the
    distribution.
    """
    assert featio.__version__ == version("featio")
