from .error import TranslationError
from .interval import Interval


class Translator:
    """
    converts chromosome-relative (1-based) positions into absolute (0-based) offsets of the genome sequence
    """

    def __init__(self, anchors):
        """
        Args:
            anchors (AnchorTable): the offsets of the chromosomes within the genome
        """
        self.anchors = anchors

    def translate(self, chrom, position):
        """
        Args:
            chrom (str): the chromosome
            position (int): the position on the chromosome (1-based)

        Returns:
            int: the absolute position in the genome (0-based)

        Raises:
            TranslationError: the chromosome was not anchored or the position is outside of the chromosome

        Example:
            >>> Translator(AnchorTable({'I': (100, 50)})).translate('I', 1)
            100
        """
        if chrom not in self.anchors:
            raise TranslationError('chromosome was not anchored in the genome', chrom)
        position = int(position)
        if position < 1 or position > self.anchors.length(chrom):
            raise TranslationError('position is outside of the chromosome', chrom, position)
        return self.anchors[chrom] + position - 1

    def translate_range(self, genomic_range):
        """
        Args:
            genomic_range (GenomicRange): the range to translate

        Returns:
            Interval: the absolute span (0-based, inclusive)

        Raises:
            TranslationError: either end of the range could not be translated
        """
        return Interval(
            self.translate(genomic_range.chromosome, genomic_range.start),
            self.translate(genomic_range.chromosome, genomic_range.end)
        )
