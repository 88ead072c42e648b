import logging
import unittest

import pytest

from trackmap.anchor import AnchorTable, find_anchor, resolve_anchors
from trackmap.annotate.base import GenomicRange
from trackmap.error import TranslationError
from trackmap.interval import Interval
from trackmap.translate import Translator
from trackmap.util import WARN


class TestFindAnchor(unittest.TestCase):

    def test_found(self):
        self.assertEqual(('I', 2, 8), find_anchor('GGAUGCAUGC', 'I', 'AUGCAUGC'))

    def test_first_occurrence(self):
        self.assertEqual(('I', 0, 2), find_anchor('AUGAUG', 'I', 'AU'))

    def test_not_found(self):
        self.assertEqual(('II', None, 3), find_anchor('GGAUGCAUGC', 'II', 'CCC'))

    def test_empty_sequence(self):
        self.assertEqual(('II', None, 0), find_anchor('GGAUGCAUGC', 'II', ''))


class TestResolveAnchors:

    def test_all_found(self):
        anchors = resolve_anchors('AUGCAUGCGGGCCC', {'I': 'AUGCAUGC', 'II': 'GGGCCC'})
        assert anchors['I'] == 0
        assert anchors['II'] == 8
        assert anchors.length('II') == 6
        assert len(anchors) == 2

    def test_missing_chromosome_is_omitted(self, caplog):
        with caplog.at_level(logging.WARNING):
            anchors = resolve_anchors('AUGCAUGC', {'I': 'AUGCAUGC', 'II': 'GGGCCC'}, warn=WARN)
        assert 'II' not in anchors
        assert 'I' in anchors
        assert any(['MissingAnchorError' in r.getMessage() for r in caplog.records])

    def test_process_pool(self):
        genome = 'CC' + 'AUGCAUGC' + 'GGGCCCUUU' + 'AAAAAAG'
        sequential = resolve_anchors(genome, {'I': 'AUGCAUGC', 'II': 'GGGCCCUUU', 'III': 'AAAAAAG', 'IV': 'CGCG'})
        parallel = resolve_anchors(
            genome, {'I': 'AUGCAUGC', 'II': 'GGGCCCUUU', 'III': 'AAAAAAG', 'IV': 'CGCG'}, workers=2)
        assert sequential == parallel
        assert parallel['III'] == 19
        assert 'IV' not in parallel


class TestAnchorTable:

    def test_read_only_mapping(self):
        anchors = AnchorTable({'I': (0, 230218), 'II': (230218, 813184)})
        assert anchors['II'] == 230218
        assert anchors.get('III') is None
        assert anchors.get('III', -1) == -1
        assert list(anchors) == ['I', 'II']
        assert anchors.items() == [('I', 0), ('II', 230218)]

    def test_invalid_chromosome(self):
        with pytest.raises(KeyError):
            AnchorTable({'chrI': (0, 10)})

    def test_repr(self):
        assert repr(AnchorTable({'I': (5, 10)})) == 'AnchorTable(I=5)'


class TestTranslator:

    def setup_method(self):
        self.translator = Translator(AnchorTable({'I': (100, 50), 'II': (150, 20)}))

    def test_first_position_is_anchor(self):
        assert self.translator.translate('I', 1) == 100
        assert self.translator.translate('II', 1) == 150

    def test_last_position(self):
        assert self.translator.translate('I', 50) == 149

    def test_past_end(self):
        with pytest.raises(TranslationError):
            self.translator.translate('I', 51)

    def test_before_start(self):
        with pytest.raises(TranslationError):
            self.translator.translate('I', 0)

    def test_not_anchored(self):
        with pytest.raises(TranslationError):
            self.translator.translate('III', 1)

    def test_translate_range(self):
        assert self.translator.translate_range(GenomicRange('II', 3, 7)) == Interval(152, 156)

    def test_translate_range_fails_as_whole(self):
        with pytest.raises(TranslationError):
            self.translator.translate_range(GenomicRange('II', 15, 25))
