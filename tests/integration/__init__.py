from ..util import chromosome_header, gene_header, utr_header, write_fasta, write_lines, write_profile

ARGUMENT_ERROR = 2

CHROMOSOME_I = 'ATGCATGCAT'
CHROMOSOME_II = 'GGGAAACCCTTTGGGAAACC'
CHROMOSOME_III = 'TTTTTTTTTTTT'
GENOME = 'CC' + CHROMOSOME_I + CHROMOSOME_II
"""
absolute layout of the mock genome

- chromosome I: 2-11
- chromosome II: 12-31
- chromosome III: not part of the genome
"""


def build_reference_dir(dirname):
    """
    write a mock set of reference files

    - YAL001C: ORF on chromosome I (2-5), absolute 3-6
    - YBL001W: ORF on chromosome II (3-15) with two exons (3-6, 10-15) and a 5' UTR (1-2), absolute 12-26
    - YBR001R: RNA gene on chromosome II (5-8) overlapping YBL001W, absolute 16-19
    - YCL001W: ORF on chromosome III which is never anchored
    - CEN2: other feature on chromosome II (1-20)
    """
    dirname = str(dirname)
    write_fasta(dirname + '/chrI.fsa.gz', [(chromosome_header('I'), CHROMOSOME_I)])
    write_fasta(dirname + '/chrII.fsa.gz', [(chromosome_header('II'), CHROMOSOME_II)])
    write_fasta(dirname + '/chrIII.fsa.gz', [(chromosome_header('III'), CHROMOSOME_III)])
    write_fasta(dirname + '/orf_genomic.fasta.gz', [
        (gene_header('YAL001C', 'TFC3', 'I', [(5, 2)], reverse=True), 'ATGC'),
        (gene_header('YBL001W', 'ECM15', 'II', [(3, 15)]), 'GAAACCCTTTGGG'),
        (gene_header('YCL001W', 'RER1', 'III', [(1, 5)]), 'TTTTT'),
    ])
    write_fasta(dirname + '/orf_coding.fasta.gz', [
        (gene_header('YAL001C', 'TFC3', 'I', [(5, 2)], reverse=True), 'ATGC'),
        (gene_header('YBL001W', 'ECM15', 'II', [(3, 6), (10, 15)]), 'GAAATTTGGG'),
        (gene_header('YCL001W', 'RER1', 'III', [(1, 5)]), 'TTTTT'),
    ])
    write_fasta(dirname + '/rna_genomic.fasta.gz', [
        (gene_header('YBR001R', 'SNR1', 'II', [(5, 8)]), 'AACC'),
    ])
    write_lines(dirname + '/rna_coding.fasta.gz', [])
    write_fasta(dirname + '/other_features_genomic.fasta.gz', [
        (gene_header('CEN2', 'CEN2', 'II', [(1, 20)]), CHROMOSOME_II),
    ])
    write_fasta(dirname + '/SGD_all_ORFs_5prime_UTRs.fsa.gz', [
        (utr_header('YBL001W', 'II', 1, 2), 'GG'),
    ])
    write_lines(dirname + '/SGD_all_ORFs_3prime_UTRs.fsa.gz', [])
    return dirname


def build_profile(filename):
    return write_profile(str(filename), GENOME)
