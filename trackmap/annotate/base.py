import re

from ..constants import CHROMOSOME
from ..interval import Interval

MITO_ALIASES = {'mito', 'm', 'mt', 'mitochondrion', 'mitochondrial'}


def chromosome_name(name):
    """
    Normalize the different spellings used by the reference files to a member of :attr:`~trackmap.constants.CHROMOSOME`

    Raises:
        KeyError: the name does not correspond to any chromosome

    Example:
        >>> chromosome_name('chrIV')
        'IV'
        >>> chromosome_name('chrmt')
        'Mito'
    """
    normalized = re.sub('^chr', '', str(name).strip(), flags=re.IGNORECASE)
    if normalized.lower() in MITO_ALIASES:
        return CHROMOSOME.MITO
    return CHROMOSOME.enforce(normalized.upper())


class GenomicRange:

    def __init__(self, chromosome, start, end):
        """
        Args:
            chromosome (str): the chromosome this range is on
            start (int): start of the range (1-based, inclusive)
            end (int): end of the range (1-based, inclusive)

        Note:
            reference files list ranges on the reverse strand from high to low. The positions are swapped
            so that the start is always the lower position

        Example:
            >>> GenomicRange('I', 2169, 1807)
            GenomicRange(I:1807-2169)
        """
        start, end = int(start), int(end)
        if start > end:
            start, end = end, start
        self.chromosome = chromosome_name(chromosome)
        self.position = Interval(start, end)

    @property
    def start(self):
        """*int*: the start position"""
        return self.position.start

    @property
    def end(self):
        """*int*: the end position"""
        return self.position.end

    def __getitem__(self, index):
        return self.position[index]

    def __len__(self):
        return len(self.position)

    def key(self):
        """:class:`tuple`: a tuple representing the items expected to be unique. for hashing and comparing"""
        return (self.chromosome, self.start, self.end)

    def __eq__(self, other):
        if not hasattr(other, 'key'):
            return False
        return self.key() == other.key()

    def __lt__(self, other):
        return self.key() < other.key()

    def __hash__(self):
        return hash(self.key())

    def __repr__(self):
        return 'GenomicRange({}:{}-{})'.format(self.chromosome, self.start, self.end)
