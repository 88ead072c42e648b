"""
module which holds all functions relating to loading reference files
"""
import gzip
import os

from Bio import SeqIO

from .constants import PROFILE_SEQUENCE_COLUMN
from .feature import FastaRecord, Feature
from ..constants import FEATURE_CATEGORY, transcribe
from ..error import DuplicateRecordError, InputFormatError, MalformedHeaderError
from ..util import DEVNULL, LOG, WeakTrackmapNamespace


REFERENCE_DEFAULTS = WeakTrackmapNamespace()
REFERENCE_DEFAULTS.add(
    'reference_dir', 'data',
    defn='directory holding the reference files. Relative reference file names are resolved against it')
REFERENCE_DEFAULTS.add(
    'chromosomes', 'chr*.fsa.gz',
    defn='glob/brace expression matching the chromosome assembly fasta files')
REFERENCE_DEFAULTS.add('orf_genomic', 'orf_genomic.fasta.gz', defn='fasta file of the genomic ranges of the ORFs')
REFERENCE_DEFAULTS.add('orf_coding', 'orf_coding.fasta.gz', defn='fasta file of the coding ranges of the ORFs')
REFERENCE_DEFAULTS.add('rna_genomic', 'rna_genomic.fasta.gz', defn='fasta file of the genomic ranges of the RNA genes')
REFERENCE_DEFAULTS.add('rna_coding', 'rna_coding.fasta.gz', defn='fasta file of the coding ranges of the RNA genes')
REFERENCE_DEFAULTS.add(
    'other_genomic', 'other_features_genomic.fasta.gz',
    defn='fasta file of the genomic ranges of all other features')
REFERENCE_DEFAULTS.add('utr5', 'SGD_all_ORFs_5prime_UTRs.fsa.gz', defn='fasta file of the 5\' untranslated regions')
REFERENCE_DEFAULTS.add('utr3', 'SGD_all_ORFs_3prime_UTRs.fsa.gz', defn='fasta file of the 3\' untranslated regions')

CATALOG_FILES = ['orf_genomic', 'orf_coding', 'rna_genomic', 'rna_coding', 'other_genomic', 'utr5', 'utr3']


def open_text(filename, mode='rt'):
    """
    open a plain or gzip compressed (by extension) text file
    """
    if str(filename).endswith('.gz'):
        return gzip.open(filename, mode)
    return open(filename, mode.replace('t', ''))


def load_profile_genome(filename):
    """
    reads the genome sequence from a per-base profile table. The first row is a header. Every following
    row describes a single position of the genome with the nucleotide in the second column

    .. code-block:: text

        position    nucleotide  reactivity
        1           a           0.12
        2           t           0.54

    Args:
        filename (str): path to the (optionally gzip compressed) whitespace delimited table

    Returns:
        str: the genome sequence, uppercase with T replaced by U

    Raises:
        InputFormatError: a row does not have a nucleotide column
    """
    sequence = []
    with open_text(filename) as fh:
        for lineno, line in enumerate(fh):
            if lineno == 0:
                continue
            fields = line.split()
            if len(fields) <= PROFILE_SEQUENCE_COLUMN:
                raise InputFormatError('row {} has no nucleotide column'.format(lineno + 1), line.rstrip('\r\n'))
            sequence.append(fields[PROFILE_SEQUENCE_COLUMN])
    return transcribe(''.join(sequence))


def load_fasta(*filepaths):
    """
    Args:
        filepaths (list of str): the paths to the (optionally gzip compressed) fasta files

    Returns:
        :class:`dict` of :class:`~trackmap.annotate.feature.FastaRecord` by :class:`str`: the records keyed by
        systematic name in the order they appear in the files

    Raises:
        DuplicateRecordError: two records have the same systematic name
        MalformedHeaderError: the systematic name cannot be found in the header of a record
    """
    records = {}
    for filename in filepaths:
        with open_text(filename) as fh:
            for seqrec in SeqIO.parse(fh, 'fasta'):
                record = FastaRecord(seqrec.description, str(seqrec.seq), filename=filename)
                try:
                    name = record.systematic_name
                except MalformedHeaderError as err:
                    err.filename = filename
                    raise err
                if name in records:
                    raise DuplicateRecordError('Duplicate record name', name, filename)
                records[name] = record
    return records


def load_chromosomes(*filepaths):
    """
    Args:
        filepaths (list of str): the chromosome assembly fasta files

    Returns:
        :class:`dict` of :class:`str` by :class:`str`: the chromosome sequences keyed by chromosome
    """
    sequences = {}
    for record in load_fasta(*filepaths).values():
        try:
            chrom = record.chromosome
        except MalformedHeaderError as err:
            err.filename = record.filename
            raise err
        if chrom in sequences:
            raise DuplicateRecordError('Duplicate chromosome', chrom, record.filename)
        sequences[chrom] = record.sequence
    return sequences


class FeatureCatalog:
    """
    holds the features in the order they were discovered (ORF, then RNA, then other features)
    """

    def __init__(self):
        self.features = []
        self.members = {category: set() for category in FEATURE_CATEGORY.values()}
        self._by_name = {}

    def add(self, feature, warn=DEVNULL):
        """
        Returns:
            bool: False if a feature with the same name was already added and the input was ignored
        """
        if feature.name in self._by_name:
            warn(
                'ignoring duplicate feature', feature.name, 'from the', feature.category,
                'catalog (first seen in the', self._by_name[feature.name].category, 'catalog)')
            return False
        self._by_name[feature.name] = feature
        self.features.append(feature)
        self.members[feature.category].add(feature.name)
        return True

    def category_of(self, name):
        """
        classify a feature by the catalog it belongs to

        Example:
            >>> catalog.category_of('YAL003W')
            'ORF'
        """
        if name in self.members[FEATURE_CATEGORY.ORF]:
            return FEATURE_CATEGORY.ORF
        elif name in self.members[FEATURE_CATEGORY.RNA]:
            return FEATURE_CATEGORY.RNA
        return FEATURE_CATEGORY.OTHER

    def __getitem__(self, name):
        return self._by_name[name]

    def __contains__(self, name):
        return name in self._by_name

    def __iter__(self):
        return iter(self.features)

    def __len__(self):
        return len(self.features)


def _parse_header(record, parse):
    try:
        return parse(record)
    except MalformedHeaderError as err:
        err.filename = err.filename or record.filename
        raise err


def build_feature_catalog(
    orf_genomic=None, orf_coding=None, rna_genomic=None, rna_coding=None, other_genomic=None,
    utr5=None, utr3=None, warn=DEVNULL
):
    """
    combine the records of the reference fasta files into features

    Args:
        orf_genomic (dict): records of the genomic ranges of the ORFs by name
        orf_coding (dict): records of the coding ranges of the ORFs by name
        rna_genomic (dict): records of the genomic ranges of the RNA genes by name
        rna_coding (dict): records of the coding ranges of the RNA genes by name
        other_genomic (dict): records of the genomic ranges of all other features by name
        utr5 (dict): records of the 5' untranslated regions by name
        utr3 (dict): records of the 3' untranslated regions by name

    Returns:
        FeatureCatalog: the features in discovery order
    """
    utr5 = utr5 or {}
    utr3 = utr3 or {}
    catalog = FeatureCatalog()

    for category, genomic, coding in [
        (FEATURE_CATEGORY.ORF, orf_genomic, orf_coding),
        (FEATURE_CATEGORY.RNA, rna_genomic, rna_coding),
        (FEATURE_CATEGORY.OTHER, other_genomic, None),
    ]:
        coding = coding or {}
        for name, record in (genomic or {}).items():
            coding_ranges = None
            if name in coding:
                coding_ranges = _parse_header(coding[name], FastaRecord.coding_ranges)
            utrs = [None, None]
            if category != FEATURE_CATEGORY.OTHER:
                for i, utr_records in enumerate([utr5, utr3]):
                    if name in utr_records:
                        utrs[i] = _parse_header(utr_records[name], FastaRecord.genomic_range)
            feature = Feature(
                name, category, _parse_header(record, FastaRecord.genomic_range),
                coding_ranges=coding_ranges,
                utr5=utrs[0],
                utr3=utrs[1],
                standard_name=_parse_header(record, lambda r: r.standard_name)
            )
            catalog.add(feature, warn=warn)
    return catalog


class ReferenceFile:

    CACHE = {}  # store loaded file to avoid re-loading

    LOAD_FUNCTIONS = {
        'profile': load_profile_genome,
        'chromosomes': load_chromosomes,
        'features': load_fasta,
    }
    """:class:`dict`: Mapping of file types to load functions"""

    def __init__(self, file_type, *filepaths, assert_exists=False):
        """
        Args:
            *filepaths (str): list of paths to load
            file_type (str): Type of file to load
            assert_exists (bool=False): check that all files exist

        Raises
            FileNotFoundError: when assert_exists and an input does not exist
        """
        self.name = list(filepaths)
        self.file_type = file_type
        self.key = (file_type, tuple(self.name))
        self.content = None
        self.loader = self.LOAD_FUNCTIONS[self.file_type]
        if assert_exists:
            self.files_exist()

    def __repr__(self):
        cls = self.__class__.__name__
        return '{}(file_type={}, files={}, loaded={})'.format(cls, self.file_type, self.name, self.content is not None)

    def files_exist(self):
        for filename in self.name:
            if not os.path.exists(filename):
                raise FileNotFoundError('Missing file', filename, self)

    def load(self):
        """
        load (or return) the contents of a reference file and add it to the cache
        """
        if self.content is not None:
            return self
        if self.key in ReferenceFile.CACHE:
            LOG('cached content:', self.name)
            self.content = ReferenceFile.CACHE[self.key].content
            return self
        self.files_exist()
        try:
            LOG('loading:', self.name, time_stamp=True)
            self.content = self.loader(*self.name)
            ReferenceFile.CACHE[self.key] = self
        except MalformedHeaderError as err:
            err.filename = err.filename or ', '.join(self.name)
            raise err
        except (DuplicateRecordError, InputFormatError, OSError) as err:
            message = 'Error in loading files: {}. {}'.format(', '.join(self.name), err)
            raise err.__class__(message) from err
        return self
