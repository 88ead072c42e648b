import re

from .base import GenomicRange
from ..constants import CHROMOSOME, FASTA_TYPE, FEATURE_CATEGORY, reverse_complement, transcribe
from ..error import MalformedHeaderError

CHROMOSOME_HEADER = re.compile(r'\[chromosome=([IVX]+)\]')
MITO_CHROMOSOME_HEADER = re.compile(r'\[location=mitochondrion\]')
GENE_HEADER = re.compile(r'Chr ([IVX]+|Mito) from (\d+)-(\d+)')
GENE_CODING_HEADER = re.compile(r'Chr ([IVX]+|Mito) from ((?:\d+-\d+,?)+)')
UTR_HEADER = re.compile(r'range=chr([IVX]+|M|mt):(\d+)-(\d+)')
RANGE_PAIR = re.compile(r'(\d+)-(\d+)')


class FastaRecord:
    """
    A single record of one of the reference fasta files. All of the coordinate metadata of a record is
    encoded in its header. Three header grammars are recognized

    chromosome assemblies

    .. code-block:: text

        >ref|NC_001133| [org=Saccharomyces cerevisiae] [strain=S288C] [moltype=genomic] [chromosome=I]

    genes (ORF, RNA, other features). Coding files list every coding sub-range

    .. code-block:: text

        >YAL003W EFB1 SGDID:S000000003, Chr I from 142174-142253,142620-143160, Genome Release 64-3-1, ...

    untranslated regions

    .. code-block:: text

        >sacCer3_ct_UTR5_SGD_YAL067C_id001 range=chrI:9016-9049 5'pad=0 3'pad=0 strand=- repeatMasking=none
    """

    def __init__(self, header, sequence='', filename=None):
        """
        Args:
            header (str): the full header line, with or without the leading '>'
            sequence (str): the sequence of the record as given in the file
            filename (str): the file the record was read from
        """
        self.header = re.sub(r'^>', '', header.strip())
        self.raw_sequence = transcribe(sequence)
        self.filename = filename

    @property
    def fasta_type(self):
        """:attr:`~trackmap.constants.FASTA_TYPE`: the grammar of the header of this record"""
        if self.header.startswith('sacCer3'):
            return FASTA_TYPE.UTR
        elif self.header.startswith('tpg') or self.header.startswith('ref'):
            return FASTA_TYPE.CHROMOSOME
        return FASTA_TYPE.GENE

    def is_reverse(self):
        if self.fasta_type == FASTA_TYPE.GENE:
            return 'reverse complement' in self.header
        elif self.fasta_type == FASTA_TYPE.UTR:
            return 'strand=-' in self.header
        return False

    @property
    def sequence(self):
        """*str*: the sequence of the record on the strand the feature is on"""
        if self.is_reverse():
            return reverse_complement(self.raw_sequence)
        return self.raw_sequence

    @property
    def chromosome(self):
        if self.fasta_type != FASTA_TYPE.CHROMOSOME:
            return self.genomic_range().chromosome
        match = CHROMOSOME_HEADER.search(self.header)
        if match:
            try:
                return CHROMOSOME.enforce(match.group(1))
            except KeyError:
                raise MalformedHeaderError('unknown chromosome', self.header)
        if MITO_CHROMOSOME_HEADER.search(self.header):
            return CHROMOSOME.MITO
        raise MalformedHeaderError('failed to find the chromosome in the header', self.header)

    def genomic_range(self):
        """
        Returns:
            GenomicRange: the range this record covers

        Raises:
            MalformedHeaderError: the header does not contain the expected range information
        """
        if self.fasta_type == FASTA_TYPE.CHROMOSOME:
            return GenomicRange(self.chromosome, 1, len(self.raw_sequence))

        regex = UTR_HEADER if self.fasta_type == FASTA_TYPE.UTR else GENE_HEADER
        match = regex.search(self.header)
        if not match:
            raise MalformedHeaderError('failed to find the genomic range in the {} header'.format(self.fasta_type), self.header)
        try:
            return GenomicRange(match.group(1), match.group(2), match.group(3))
        except KeyError:
            raise MalformedHeaderError('unknown chromosome', self.header)

    def coding_ranges(self):
        """
        Returns:
            :class:`list` of :class:`GenomicRange`: the coding sub-ranges of a gene sorted by genomic position
                or None for other record types
        """
        if self.fasta_type != FASTA_TYPE.GENE:
            return None
        match = GENE_CODING_HEADER.search(self.header)
        if not match:
            raise MalformedHeaderError('failed to find the coding ranges in the gene header', self.header)
        result = []
        for start, end in RANGE_PAIR.findall(match.group(2)):
            try:
                result.append(GenomicRange(match.group(1), start, end))
            except KeyError:
                raise MalformedHeaderError('unknown chromosome', self.header)
        return sorted(result, key=lambda r: (r.start, r.end))

    @property
    def systematic_name(self):
        if self.fasta_type == FASTA_TYPE.CHROMOSOME:
            return 'chr{}'.format(self.chromosome)
        elif self.fasta_type == FASTA_TYPE.UTR:
            fields = self.header.split('_')
            if len(fields) < 5 or not fields[4].split():
                raise MalformedHeaderError('failed to find the systematic name in the utr header', self.header)
            return fields[4].split()[0]
        fields = self.header.split()
        if not fields:
            raise MalformedHeaderError('empty gene header', self.header)
        return fields[0]

    @property
    def standard_name(self):
        if self.fasta_type == FASTA_TYPE.GENE:
            fields = self.header.split()
            if len(fields) < 2:
                raise MalformedHeaderError('failed to find the standard name in the gene header', self.header)
            return fields[1]
        return self.systematic_name

    def __repr__(self):
        return '{}({}, {})'.format(self.__class__.__name__, self.fasta_type, repr(self.header))


class Feature:
    """
    a gene or other genomic feature with its sub-structure (coding ranges and untranslated regions)
    """

    def __init__(
        self, name, category, genomic_range,
        coding_ranges=None, utr5=None, utr3=None, standard_name=None
    ):
        """
        Args:
            name (str): the systematic name. Also used as the unique identifier of the feature
            category (FEATURE_CATEGORY): the catalog this feature was loaded from
            genomic_range (GenomicRange): the primary range of the feature
            coding_ranges (:class:`list` of :class:`GenomicRange`): the exons
            utr5 (GenomicRange): the 5' untranslated region
            utr3 (GenomicRange): the 3' untranslated region
            standard_name (str): the common name of the feature, defaults to the systematic name

        Example:
            >>> Feature('YAL003W', 'ORF', GenomicRange('I', 142174, 143160), standard_name='EFB1')
        """
        self.name = name
        self.category = FEATURE_CATEGORY.enforce(category)
        self.genomic_range = genomic_range
        self.coding_ranges = sorted(coding_ranges or [], key=lambda r: (r.start, r.end))
        self.utr5 = utr5
        self.utr3 = utr3
        self.standard_name = name if standard_name is None else standard_name

    @property
    def systematic_name(self):
        return self.name

    @property
    def chromosome(self):
        return self.genomic_range.chromosome

    @property
    def noncoding_ranges(self):
        """
        :class:`list` of :class:`GenomicRange`: the introns between consecutive coding ranges. Each intron
        includes the last position of the previous coding range and the first position of the next one

        Example:
            >>> f = Feature('YAL003W', 'ORF', GenomicRange('I', 142174, 143160), coding_ranges=[
            ...     GenomicRange('I', 142174, 142253), GenomicRange('I', 142620, 143160)])
            >>> f.noncoding_ranges
            [GenomicRange(I:142253-142620)]
        """
        result = []
        for prev, curr in zip(self.coding_ranges, self.coding_ranges[1:]):
            result.append(GenomicRange(curr.chromosome, prev.end, curr.start))
        return result

    def __repr__(self):
        return 'Feature({}, {}, {})'.format(self.name, self.category, self.genomic_range)
