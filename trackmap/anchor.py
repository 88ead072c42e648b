"""
Locates the chromosome assemblies within the concatenated genome sequence
"""
from concurrent import futures

from .constants import CHROMOSOME
from .error import MissingAnchorError
from .util import DEVNULL


class AnchorTable:
    """
    read-only mapping of chromosome to the absolute (0-based) offset of its first base within the genome

    Example:
        >>> anchors = AnchorTable({'I': (0, 230218), 'II': (230218, 813184)})
        >>> anchors['II']
        230218
        >>> anchors.length('II')
        813184
    """

    def __init__(self, anchors=None):
        """
        Args:
            anchors (:class:`dict` of :class:`tuple` of :class:`int` by :class:`str`): offset and length by chromosome
        """
        self._anchors = {}
        for chrom, (offset, length) in (anchors or {}).items():
            self._anchors[CHROMOSOME.enforce(chrom)] = (int(offset), int(length))

    def __getitem__(self, chrom):
        return self._anchors[chrom][0]

    def length(self, chrom):
        """*int*: the number of bases of the anchored chromosome"""
        return self._anchors[chrom][1]

    def get(self, chrom, default=None):
        try:
            return self[chrom]
        except KeyError:
            return default

    def __contains__(self, chrom):
        return chrom in self._anchors

    def __iter__(self):
        return iter(self._anchors)

    def __len__(self):
        return len(self._anchors)

    def items(self):
        return [(chrom, self[chrom]) for chrom in self]

    def __eq__(self, other):
        return isinstance(other, AnchorTable) and self._anchors == other._anchors

    def __repr__(self):
        return 'AnchorTable({})'.format(', '.join(['{}={}'.format(c, o) for c, o in self.items()]))


_WORKER_GENOME = None


def _set_worker_genome(genome):
    global _WORKER_GENOME
    _WORKER_GENOME = genome


def _find_in_worker_genome(chrom, sequence):
    return find_anchor(_WORKER_GENOME, chrom, sequence)


def find_anchor(genome, chrom, sequence):
    """
    exact search for the first occurrence of a chromosome sequence in the genome

    Returns:
        :class:`tuple`: the chromosome, the 0-based offset (or None if not found) and the chromosome length

    Example:
        >>> find_anchor('GGAUGCAUGC', 'I', 'AUGCAUGC')
        ('I', 2, 8)
    """
    if not sequence:
        return chrom, None, 0
    offset = genome.find(sequence)
    return chrom, (offset if offset >= 0 else None), len(sequence)


def resolve_anchors(genome, chromosome_sequences, workers=1, log=DEVNULL, warn=DEVNULL):
    """
    search for every chromosome sequence in the genome. The searches are independent and are run in a pool of
    processes when more than one worker is requested. Chromosomes which cannot be found are reported and left out
    of the resulting table

    Args:
        genome (str): the absolute genome sequence
        chromosome_sequences (:class:`dict` of :class:`str` by :class:`str`): the sequence of each chromosome
        workers (int): the number of processes to use for the search

    Returns:
        AnchorTable: the offsets of the chromosomes that were found
    """
    results = []
    if workers > 1 and len(chromosome_sequences) > 1:
        with futures.ProcessPoolExecutor(
            max_workers=workers, initializer=_set_worker_genome, initargs=(genome, )
        ) as pool:
            jobs = [
                pool.submit(_find_in_worker_genome, chrom, seq) for chrom, seq in chromosome_sequences.items()
            ]
            results = [job.result() for job in jobs]
    else:
        for chrom, seq in chromosome_sequences.items():
            results.append(find_anchor(genome, chrom, seq))

    anchors = {}
    for chrom, offset, length in results:
        if offset is None:
            warn('features on the chromosome will be dropped:', repr(
                MissingAnchorError('chromosome sequence not found in the genome', chrom)))
            continue
        log('anchored chromosome', chrom, 'at', offset)
        anchors[chrom] = (offset, length)
    return AnchorTable(anchors)
