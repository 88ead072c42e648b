class Interval:
    """
    closed integer interval. Both the start and the end positions are included
    """

    def __init__(self, start, end=None):
        """
        Args:
            start (int): the start of the interval (inclusive)
            end (int): the end of the interval (inclusive)
        """
        self.start = int(start)
        self.end = int(end) if end is not None else self.start
        if self.start > self.end:
            raise AttributeError('interval start > end is not allowed', self.start, self.end)

    def __getitem__(self, index):
        try:
            index = int(index)
        except ValueError:
            raise IndexError('index input accessor must be an integer', index)
        if index == 0:
            return self.start
        elif index == 1:
            return self.end
        raise IndexError('index input accessor is out of bounds: 1 or 2 only', index)

    def __iter__(self):
        return iter((self.start, self.end))

    @classmethod
    def interior_overlaps(cls, first, other):
        """
        checks if an endpoint of either interval lies strictly inside the other interval

        Intervals which only share a boundary position are not considered overlapping by this
        test, and neither are two intervals with identical start and end positions

        Args:
            first (Interval): an interval to be compared
            other (Interval): an interval to be compared

        Example:
            >>> Interval.interior_overlaps(Interval(10, 20), Interval(15, 25))
            True
            >>> Interval.interior_overlaps(Interval(10, 20), Interval(20, 25))
            False
            >>> Interval.interior_overlaps((10, 20), (10, 20))
            False
        """
        start_i, end_i = first[0], first[1]
        start_j, end_j = other[0], other[1]
        return any([
            start_i < start_j < end_i,
            start_i < end_j < end_i,
            start_j < start_i < end_j,
            start_j < end_i < end_j,
        ])

    @classmethod
    def union(cls, *intervals):
        """
        returns the union of the set of input intervals

        Example:
            >>> Interval.union((1, 2), (4, 6), (4, 9), (20, 21))
            Interval(1, 21)
        """
        if len(intervals) < 1:
            raise AttributeError('cannot compute the union of an empty set of intervals')
        return Interval(min([i[0] for i in intervals]), max([i[1] for i in intervals]))

    def __len__(self):
        """
        the length of the interval

        Example:
            >>> len(Interval(1, 11))
            11
        """
        return self.length()

    def length(self):
        return self.end - self.start + 1

    def __lt__(self, other):
        if self[0] < other[0]:
            return True
        elif self[0] == other[0] and self[1] < other[1]:
            return True
        return False

    def __eq__(self, other):
        try:
            return self[0] == other[0] and self[1] == other[1]
        except (TypeError, IndexError):
            return False

    def __hash__(self):
        return hash((self.start, self.end))

    def __contains__(self, other):
        try:
            if other[0] >= self[0] and other[1] <= self[1]:
                return True
        except TypeError:
            if other >= self[0] and other <= self[1]:
                return True
        return False

    def __repr__(self):
        return '{}({}, {})'.format(self.__class__.__name__, self.start, self.end)
