# This source code is part of the featio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for reading and writing feature related file formats.
"""

__name__ = "featio.io"
