# This source code is part of the featio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This is the top-level package of *featio*.
It provides the data model shared by the file readers and writers in
:mod:`featio.io`: feature records, sequence regions, embedded
sequences and molecule types, as well as the base classes for streamed
files.
"""

__version__ = "0.1.0"
__name__ = "featio"

from .file import *
from .moltype import *
from .feature import *
from .sequence import *
