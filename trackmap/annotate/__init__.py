"""
Sub-package Documentation
==========================

Reference Files
-----------------

All reference files are (optionally gzip compressed) fasta files. The coordinates of each record are read
from its header (see :class:`~trackmap.annotate.feature.FastaRecord`)

+-------------------------------------+-------------------------------------------------------+
| option                              | content                                               |
+=====================================+=======================================================+
| ``chromosomes``                     | the chromosome assemblies (glob/brace expression)     |
+-------------------------------------+-------------------------------------------------------+
| ``orf_genomic``, ``orf_coding``     | genomic and coding ranges of the open reading frames  |
+-------------------------------------+-------------------------------------------------------+
| ``rna_genomic``, ``rna_coding``     | genomic and coding ranges of the RNA genes            |
+-------------------------------------+-------------------------------------------------------+
| ``other_genomic``                   | genomic ranges of all other features                  |
+-------------------------------------+-------------------------------------------------------+
| ``utr5``, ``utr3``                  | the untranslated regions of the ORFs                  |
+-------------------------------------+-------------------------------------------------------+

Output
---------

The profile table is copied with four columns appended per track: ``Type N``, ``Subtype N``,
``Systematic name N`` and ``Standard name N``
"""
from . import constants
from . import file_io
