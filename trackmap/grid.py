"""
Composes the per-position, per-track annotation of the genome

The grid is built by applying paint operations in order. The first operation of a feature writes its
category and names (with an unknown subtype) over its whole span. The following operations only overwrite the
subtype: untranslated regions, then exons, then introns
"""
from collections import namedtuple

import numpy as np

from .annotate.constants import ANNOTATION_COLUMNS
from .annotate.file_io import open_text
from .constants import SUBTYPE
from .error import InputFormatError, TranslationError
from .util import DEVNULL

SUBTYPE_LABELS = SUBTYPE.values()
SUBTYPE_CODES = {label: code for code, label in enumerate(SUBTYPE_LABELS)}
EMPTY_LABELS = ('', '', '')

PaintOperation = namedtuple('PaintOperation', ['track', 'span', 'subtype', 'labels'])
"""
- ``track``: the track to paint
- ``span``: the absolute (0-based, inclusive) positions to paint
- ``subtype``: the subtype label written to every cell of the span
- ``labels``: tuple of category, systematic name and standard name. None to leave them unchanged
"""


def paint_operations(feature, track, span, category, translator, warn=DEVNULL):
    """
    Args:
        feature (Feature): the feature to paint
        track (int): the track assigned to the feature
        span (Interval): the (extended) absolute span of the feature
        category (FEATURE_CATEGORY): the category written for the feature
        translator (Translator): converts the sub-ranges of the feature to absolute positions

    Returns:
        :class:`list` of :class:`PaintOperation`: the operations in the order they must be applied
    """
    operations = [
        PaintOperation(track, span, SUBTYPE.UNKNOWN, (category, feature.systematic_name, feature.standard_name))
    ]
    layers = [
        (SUBTYPE.UTR5, [feature.utr5] if feature.utr5 is not None else []),
        (SUBTYPE.UTR3, [feature.utr3] if feature.utr3 is not None else []),
        (SUBTYPE.EXON, feature.coding_ranges),
        (SUBTYPE.INTRON, feature.noncoding_ranges),
    ]
    for subtype, genomic_ranges in layers:
        for genomic_range in genomic_ranges:
            try:
                sub_span = translator.translate_range(genomic_range)
            except TranslationError as err:
                warn('skipping', subtype, 'of', feature.name, repr(err))
                continue
            operations.append(PaintOperation(track, sub_span, subtype, None))
    return operations


class AnnotationGrid:
    """
    the annotation of every genome position on every track. Each cell holds a category, subtype, systematic name
    and standard name which are all empty until painted

    Internally the subtype is stored as a code per cell and the category and names as an index into the table of
    painted labels
    """

    def __init__(self, length, track_count):
        """
        Args:
            length (int): the number of positions of the genome
            track_count (int): the number of tracks
        """
        self.length = length
        self.track_count = track_count
        self.labels = [EMPTY_LABELS]
        self.label_index = np.zeros((track_count, length), dtype=np.int32)
        self.subtype_code = np.zeros((track_count, length), dtype=np.uint8)

    def _add_labels(self, labels):
        self.labels.append(tuple(labels))
        return len(self.labels) - 1

    def paint(self, operation):
        """
        apply a single paint operation

        Raises:
            IndexError: the operation is outside of the grid
        """
        start, end = operation.span
        if start < 0 or end >= self.length:
            raise IndexError('span is outside of the genome', operation.span, self.length)
        if operation.track < 0 or operation.track >= self.track_count:
            raise IndexError('track is outside of the grid', operation.track, self.track_count)
        if operation.labels is not None:
            self.label_index[operation.track, start:end + 1] = self._add_labels(operation.labels)
        self.subtype_code[operation.track, start:end + 1] = SUBTYPE_CODES[operation.subtype]

    def freeze(self):
        """
        make the grid read-only
        """
        self.label_index.setflags(write=False)
        self.subtype_code.setflags(write=False)
        return self

    def cell(self, position, track):
        """
        Returns:
            :class:`tuple` of :class:`str`: the category, subtype, systematic name and standard name of a cell
        """
        category, systematic_name, standard_name = self.labels[self.label_index[track, position]]
        return (category, SUBTYPE_LABELS[self.subtype_code[track, position]], systematic_name, standard_name)

    def row(self, position):
        """
        Returns:
            :class:`list` of :class:`str`: the four fields of every track for a single position
        """
        fields = []
        for track in range(self.track_count):
            fields.extend(self.cell(position, track))
        return fields

    def iter_row_suffixes(self, chunk_size=65536):
        """
        Yields:
            str: for each position, the tab-prefixed fields of every track as appended to the profile table
        """
        cache = {}
        for chunk_start in range(0, self.length, chunk_size):
            chunk_end = min(self.length, chunk_start + chunk_size)
            labels = self.label_index[:, chunk_start:chunk_end].T.tolist()
            subtypes = self.subtype_code[:, chunk_start:chunk_end].T.tolist()
            for label_row, subtype_row in zip(labels, subtypes):
                suffix = []
                for label, subtype in zip(label_row, subtype_row):
                    key = (label, subtype)
                    if key not in cache:
                        category, systematic_name, standard_name = self.labels[label]
                        cache[key] = '\t' + '\t'.join([category, SUBTYPE_LABELS[subtype], systematic_name, standard_name])
                    suffix.append(cache[key])
                yield ''.join(suffix)

    def header_suffix(self):
        """
        Example:
            >>> AnnotationGrid(10, 1).header_suffix()
            '\\tType 1\\tSubtype 1\\tSystematic name 1\\tStandard name 1'
        """
        suffix = []
        for track in range(self.track_count):
            for column in ANNOTATION_COLUMNS:
                suffix.append('\t{} {}'.format(column, track + 1))
        return ''.join(suffix)

    def __len__(self):
        return self.length


def compose_grid(length, features, spans, assignment, catalog, translator, warn=DEVNULL):
    """
    Args:
        length (int): the length of the genome
        features (:class:`list` of :class:`Feature`): the features in discovery order
        spans (:class:`dict` of :class:`Interval` by :class:`str`): the (extended) span of each feature
        assignment (TrackAssignment): the track of each feature
        catalog (FeatureCatalog): used to classify the features
        translator (Translator): converts the sub-ranges of the features

    Returns:
        AnnotationGrid: the read-only grid
    """
    grid = AnnotationGrid(length, assignment.track_count)
    for feature in features:
        if feature.name not in assignment or feature.name not in spans:
            continue
        for operation in paint_operations(
            feature, assignment[feature.name], spans[feature.name], catalog.category_of(feature.name),
            translator, warn=warn
        ):
            grid.paint(operation)
    return grid.freeze()


def write_annotated_table(input_filename, output_filename, grid):
    """
    copy the profile table and append the annotation columns of every track. The output is gzip compressed when
    the filename ends with .gz

    Raises:
        InputFormatError: the number of rows of the profile table does not match the grid
    """
    rows = grid.iter_row_suffixes()
    with open_text(input_filename) as fin, open_text(output_filename, 'wt') as fout:
        for lineno, line in enumerate(fin):
            line = line.rstrip('\r\n')
            if lineno == 0:
                fout.write(line + grid.header_suffix() + '\n')
                continue
            suffix = next(rows, None)
            if suffix is None:
                raise InputFormatError('profile table has more rows than the genome has positions', lineno + 1)
            fout.write(line + suffix + '\n')
    if next(rows, None) is not None:
        raise InputFormatError('profile table has fewer rows than the genome has positions', input_filename)
