from collections import namedtuple
import os
import time

from .constants import DEFAULTS
from .file_io import CATALOG_FILES, REFERENCE_DEFAULTS, ReferenceFile, build_feature_catalog
from ..anchor import resolve_anchors
from ..grid import compose_grid, write_annotated_table
from ..track import assign_tracks, build_overlap_graph, compute_spans
from ..translate import Translator
from ..util import DEVNULL, LOG, WARN, bash_expands, mkdirp

AnnotationResult = namedtuple('AnnotationResult', ['anchors', 'spans', 'graph', 'assignment', 'grid'])


def annotate_genome(
    genome, chromosome_sequences, catalog,
    max_tracks=DEFAULTS.max_tracks,
    include_other_features=DEFAULTS.include_other_features,
    anchor_workers=DEFAULTS.anchor_workers,
    log=DEVNULL,
    warn=DEVNULL
):
    """
    runs every stage of the annotation of a genome

    Args:
        genome (str): the genome sequence (uppercase, T replaced by U)
        chromosome_sequences (:class:`dict` of :class:`str` by :class:`str`): the sequence of each chromosome
        catalog (:class:`~trackmap.annotate.file_io.FeatureCatalog`): the features to place
        max_tracks (int): the number of tracks available
        include_other_features (bool): also place features from the other features catalog
        anchor_workers (int): the number of processes used for the chromosome search

    Returns:
        AnnotationResult: the intermediate tables of each stage and the final read-only grid
    """
    log('resolving chromosome anchors', time_stamp=True)
    anchors = resolve_anchors(genome, chromosome_sequences, workers=anchor_workers, log=log.indent(), warn=warn)
    translator = Translator(anchors)

    log('computing feature spans', time_stamp=True)
    spans = compute_spans(catalog.features, translator, include_other_features=include_other_features, warn=warn)
    log('placed', len(spans), 'of', len(catalog), 'features on the genome', indent_level=1)

    log('building the overlap graph', time_stamp=True)
    graph = build_overlap_graph(spans)
    log('graph has', graph.number_of_nodes(), 'nodes and', graph.number_of_edges(), 'edges', indent_level=1)

    log('assigning tracks', time_stamp=True)
    assignment = assign_tracks(list(spans), graph, max_tracks, warn=warn)
    log('assigned', len(assignment), 'features to', assignment.track_count, 'tracks', indent_level=1)
    if assignment.exhausted:
        log(len(assignment.exhausted), 'features were left out (no free track)', indent_level=1)

    log('composing the annotation grid', time_stamp=True)
    grid = compose_grid(len(genome), catalog.features, spans, assignment, catalog, translator, warn=warn)
    return AnnotationResult(anchors, spans, graph, assignment, grid)


def reference_paths(reference_dir, name):
    """
    resolve a reference file name (or glob/brace expression) against the reference directory

    Returns:
        :class:`list` of :class:`str`: the matching files

    Raises:
        FileNotFoundError: no file matches the expression
    """
    return bash_expands(os.path.join(reference_dir, name))


def main(
    input, output,
    reference_dir=REFERENCE_DEFAULTS.reference_dir,
    chromosomes=REFERENCE_DEFAULTS.chromosomes,
    orf_genomic=REFERENCE_DEFAULTS.orf_genomic,
    orf_coding=REFERENCE_DEFAULTS.orf_coding,
    rna_genomic=REFERENCE_DEFAULTS.rna_genomic,
    rna_coding=REFERENCE_DEFAULTS.rna_coding,
    other_genomic=REFERENCE_DEFAULTS.other_genomic,
    utr5=REFERENCE_DEFAULTS.utr5,
    utr3=REFERENCE_DEFAULTS.utr3,
    max_tracks=DEFAULTS.max_tracks,
    include_other_features=DEFAULTS.include_other_features,
    anchor_workers=DEFAULTS.anchor_workers,
    start_time=int(time.time()),
    **kwargs
):
    """
    Args:
        input (str): path to the (gzip compressed) profile table of the genome
        output (str): path to the annotated table. Compressed when the name ends with .gz
        reference_dir (str): directory the reference file names are resolved against
        chromosomes (str): glob expression matching the chromosome assembly files
        orf_genomic (str): genomic ranges of the ORFs
        orf_coding (str): coding ranges of the ORFs
        rna_genomic (str): genomic ranges of the RNA genes
        rna_coding (str): coding ranges of the RNA genes
        other_genomic (str): genomic ranges of the other features
        utr5 (str): the 5' untranslated regions
        utr3 (str): the 3' untranslated regions
    """
    catalog_names = {
        'orf_genomic': orf_genomic,
        'orf_coding': orf_coding,
        'rna_genomic': rna_genomic,
        'rna_coding': rna_coding,
        'other_genomic': other_genomic,
        'utr5': utr5,
        'utr3': utr3,
    }
    # error early on missing input files
    profile = ReferenceFile('profile', input, assert_exists=True)
    chromosome_file = ReferenceFile('chromosomes', *reference_paths(reference_dir, chromosomes))
    catalog_files = {
        name: ReferenceFile('features', *reference_paths(reference_dir, catalog_names[name]))
        for name in CATALOG_FILES
    }

    genome = profile.load().content
    LOG('genome length:', len(genome), indent_level=1)
    chromosome_sequences = chromosome_file.load().content
    LOG('loaded', len(chromosome_sequences), 'chromosomes', indent_level=1)
    records = {name: rfile.load().content for name, rfile in catalog_files.items()}
    catalog = build_feature_catalog(warn=WARN, **records)
    LOG('loaded', len(catalog), 'features', indent_level=1)

    result = annotate_genome(
        genome, chromosome_sequences, catalog,
        max_tracks=max_tracks,
        include_other_features=include_other_features,
        anchor_workers=anchor_workers,
        log=LOG,
        warn=WARN
    )

    if os.path.dirname(output):
        mkdirp(os.path.dirname(output))
    LOG('writing:', output, time_stamp=True)
    write_annotated_table(input, output, result.grid)
    return result
