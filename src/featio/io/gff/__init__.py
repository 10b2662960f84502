# This source code is part of the featio package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This subpackage is used for reading and writing sequence features in
the *General Feature Format* (GFF).

It provides the :class:`GFFReader` and the :class:`GFFWriter`, which
process GFF files line by line as a stream of
:class:`FeatureRecord` objects and :class:`Directive` events.

The supported directives are ``##gff-version``, ``##source-version``,
``##date``, ``##Type``, ``##sequence-region`` and the embedded sequence
blocks ``##DNA``, ``##RNA`` and ``##Protein``.
All other directives are passed through as :class:`OpaqueDirective`.
Comment lines are skipped when reading.

.. note: The *attributes* column is not parsed, it is kept as raw
   bytes, as its format differs between the versions of GFF.
"""

__name__ = "featio.io.gff"

from .directive import *
from .file import *
