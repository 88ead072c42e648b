import unittest

from trackmap.interval import Interval


class TestInterval(unittest.TestCase):

    def test___init__error(self):
        with self.assertRaises(AttributeError):
            Interval(4, 3)

    def test___init__single_position(self):
        self.assertEqual(Interval(5, 5), Interval(5))

    def test___contains__(self):
        self.assertTrue(Interval(1, 2) in Interval(1, 7))
        self.assertFalse(Interval(1, 7) in Interval(1, 2))
        self.assertTrue(1 in Interval(1, 7))
        self.assertTrue(7 in Interval(1, 7))
        self.assertFalse(0 in Interval(1, 7))

    def test_eq(self):
        self.assertEqual(Interval(1, 2), Interval(1, 2))
        self.assertEqual(Interval(1, 2), (1, 2))
        self.assertNotEqual(Interval(1, 2), Interval(1, 3))
        self.assertNotEqual(Interval(1, 2), None)

    def test___get_item__(self):
        temp = Interval(1, 2)
        self.assertEqual(1, temp[0])
        self.assertEqual(2, temp[1])
        with self.assertRaises(IndexError):
            temp[2]
        with self.assertRaises(IndexError):
            temp[-1]
        with self.assertRaises(IndexError):
            temp['1b']

    def test___iter__(self):
        start, end = Interval(3, 9)
        self.assertEqual(3, start)
        self.assertEqual(9, end)

    def test___len__(self):
        self.assertEqual(1, len(Interval(1)))
        self.assertEqual(11, len(Interval(1, 11)))

    def test___lt__(self):
        self.assertTrue(Interval(1, 2) < Interval(2, 3))
        self.assertTrue(Interval(1, 2) < Interval(1, 3))
        self.assertFalse(Interval(1, 3) < Interval(1, 3))
        self.assertEqual([Interval(1, 2), Interval(1, 5), Interval(3, 4)], sorted(
            [Interval(3, 4), Interval(1, 5), Interval(1, 2)]))

    def test_hash(self):
        self.assertEqual(1, len({Interval(1, 2), Interval(1, 2)}))

    def test_union(self):
        self.assertEqual(Interval(1, 21), Interval.union((1, 2), (4, 6), (4, 9), (20, 21)))
        self.assertEqual(Interval(4, 9), Interval.union(Interval(4, 9)))
        with self.assertRaises(AttributeError):
            Interval.union()

    def test_repr(self):
        self.assertEqual('Interval(1, 21)', repr(Interval(1, 21)))


class TestInteriorOverlaps:

    def test_partial_overlap(self):
        assert Interval.interior_overlaps(Interval(10, 20), Interval(15, 25))
        assert Interval.interior_overlaps(Interval(15, 25), Interval(10, 20))

    def test_containment(self):
        assert Interval.interior_overlaps(Interval(10, 30), Interval(15, 25))
        assert Interval.interior_overlaps(Interval(15, 25), Interval(10, 30))

    def test_shared_start_with_interior_end(self):
        assert Interval.interior_overlaps(Interval(10, 30), Interval(10, 20))

    def test_identical(self):
        assert not Interval.interior_overlaps(Interval(10, 20), Interval(10, 20))

    def test_touching(self):
        assert not Interval.interior_overlaps(Interval(10, 20), Interval(20, 30))
        assert not Interval.interior_overlaps(Interval(20, 30), Interval(10, 20))

    def test_disjoint(self):
        assert not Interval.interior_overlaps(Interval(10, 20), Interval(30, 40))

    def test_tuples(self):
        assert Interval.interior_overlaps((1, 10), (5, 6))
