from ..constants import cast_boolean, positive_int
from ..util import WeakTrackmapNamespace


DEFAULTS = WeakTrackmapNamespace()
"""
- :term:`max_tracks`
- :term:`include_other_features`
- :term:`anchor_workers`
"""
DEFAULTS.add(
    'max_tracks', 10, cast_type=positive_int,
    defn='the number of parallel tracks available for placing overlapping features. Features which overlap '
    'features on every track are reported and left out of the annotation')
DEFAULTS.add(
    'include_other_features', False, cast_type=cast_boolean,
    defn='place features from the other features catalog on tracks using their primary range. By default only '
    'ORF and RNA features are placed')
DEFAULTS.add(
    'anchor_workers', 1, cast_type=positive_int,
    defn='number of processes used to search for the chromosome sequences within the genome')

PROFILE_SEQUENCE_COLUMN = 1
""":class:`int`: index of the column holding the nucleotide in the rows of the profile table"""

ANNOTATION_COLUMNS = ['Type', 'Subtype', 'Systematic name', 'Standard name']
""":class:`list` of :class:`str`: the columns appended to the profile table for each track"""
