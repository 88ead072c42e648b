import gzip


def write_lines(filename, lines):
    """
    write lines to a plain or gzip compressed (by extension) text file
    """
    filename = str(filename)
    if filename.endswith('.gz'):
        fh = gzip.open(filename, 'wt')
    else:
        fh = open(filename, 'w')
    with fh:
        for line in lines:
            fh.write(line + '\n')
    return filename


def write_fasta(filename, records):
    """
    Args:
        records (:class:`list` of :class:`tuple`): header (without the '>') and sequence of each record
    """
    lines = []
    for header, seq in records:
        lines.append('>' + header)
        for i in range(0, len(seq), 60):
            lines.append(seq[i:i + 60])
    return write_lines(filename, lines)


def write_profile(filename, sequence, lowercase=True):
    """
    write a per-base profile table for a genome sequence
    """
    lines = ['position\tnucleotide\treactivity']
    for i, base in enumerate(sequence):
        lines.append('{}\t{}\t{:.2f}'.format(i + 1, base.lower() if lowercase else base, (i % 7) / 10))
    return write_lines(filename, lines)


def read_lines(filename):
    filename = str(filename)
    if filename.endswith('.gz'):
        fh = gzip.open(filename, 'rt')
    else:
        fh = open(filename, 'r')
    with fh:
        return [line.rstrip('\n') for line in fh]


def gene_header(name, standard_name, chrom, ranges, reverse=False):
    """
    build a gene header in the format of the reference catalogs

    Example:
        >>> gene_header('YAL003W', 'EFB1', 'I', [(142174, 142253), (142620, 143160)])
        'YAL003W EFB1 SGDID:S000000003, Chr I from 142174-142253,142620-143160, Genome Release 64-3-1, Verified ORF'
    """
    header = '{} {} SGDID:S000000003, Chr {} from {}, Genome Release 64-3-1'.format(
        name, standard_name, chrom, ','.join(['{}-{}'.format(s, t) for s, t in ranges]))
    if reverse:
        header += ', reverse complement'
    return header + ', Verified ORF'


def utr_header(name, chrom, start, end, prime=5, reverse=False):
    return 'sacCer3_ct_UTR{}_SGD_{}_id001 range=chr{}:{}-{} 5\'pad=0 3\'pad=0 strand={} repeatMasking=none'.format(
        prime, name, chrom, start, end, '-' if reverse else '+')


def chromosome_header(chrom):
    if chrom == 'Mito':
        return 'ref|NC_001224| [org=Saccharomyces cerevisiae] [strain=S288C] [moltype=genomic] [location=mitochondrion]'
    return 'ref|NC_0011{:02d}| [org=Saccharomyces cerevisiae] [strain=S288C] [moltype=genomic] [chromosome={}]'.format(
        len(chrom), chrom)
