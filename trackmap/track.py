"""
Places overlapping features on separate tracks

Features are nodes of an overlap graph. Two features are adjacent when an end of the absolute span of one
lies strictly inside the span of the other. The graph is colored greedily in discovery order and the color
of a feature is the track it is drawn on
"""
import networkx as nx

from .constants import FEATURE_CATEGORY
from .error import TrackExhaustionError, TranslationError
from .interval import Interval
from .util import DEVNULL


def compute_spans(features, translator, include_other_features=False, warn=DEVNULL):
    """
    compute the absolute span of each feature. The span of an ORF or RNA feature is extended to cover its
    untranslated regions

    Args:
        features (:class:`list` of :class:`~trackmap.annotate.feature.Feature`): features in discovery order
        translator (Translator): converts chromosome positions to absolute positions
        include_other_features (bool): also compute (unextended) spans for features of the other category

    Returns:
        :class:`dict` of :class:`Interval` by :class:`str`: span by feature name in discovery order. Features
        which are excluded or whose primary range cannot be translated are missing
    """
    spans = {}
    for feature in features:
        if feature.category == FEATURE_CATEGORY.OTHER and not include_other_features:
            continue
        try:
            span = translator.translate_range(feature.genomic_range)
        except TranslationError as err:
            warn('dropping feature', feature.name, repr(err))
            continue
        if feature.category != FEATURE_CATEGORY.OTHER:
            pieces = [span]
            for utr in [feature.utr5, feature.utr3]:
                if utr is None:
                    continue
                try:
                    pieces.append(translator.translate_range(utr))
                except TranslationError as err:
                    warn('ignoring untranslated region of', feature.name, repr(err))
            span = Interval.union(*pieces)
        spans[feature.name] = span
    return spans


def build_overlap_graph(spans):
    """
    Args:
        spans (:class:`dict` of :class:`Interval` by :class:`str`): the absolute span of each feature

    Returns:
        networkx.Graph: a node per feature and an edge between features whose spans overlap

    Note:
        spans which only share an end position, and identical spans, are not connected (see
        :func:`~trackmap.interval.Interval.interior_overlaps`)
    """
    graph = nx.Graph()
    graph.add_nodes_from(spans)
    ordered = sorted(spans.items(), key=lambda item: item[1].start)

    for i, (name, span) in enumerate(ordered):
        for other_name, other_span in ordered[i + 1:]:
            if other_span.start >= span.end:
                break  # no later span can have an end point strictly inside this one
            if Interval.interior_overlaps(span, other_span):
                graph.add_edge(name, other_name)
    return graph


class TrackAssignment:
    """
    the track of each placed feature and the features that could not be placed
    """

    def __init__(self, tracks, exhausted=None, max_tracks=None):
        """
        Args:
            tracks (:class:`dict` of :class:`int` by :class:`str`): track by feature name
            exhausted (:class:`list` of :class:`TrackExhaustionError`): features without a track
            max_tracks (int): the size of the track pool
        """
        self.tracks = tracks
        self.exhausted = [] if exhausted is None else exhausted
        self.max_tracks = max_tracks

    @property
    def track_count(self):
        """*int*: the number of tracks in use (the highest assigned track + 1)"""
        if not self.tracks:
            return 0
        return max(self.tracks.values()) + 1

    def __getitem__(self, name):
        return self.tracks[name]

    def get(self, name, default=None):
        return self.tracks.get(name, default)

    def __contains__(self, name):
        return name in self.tracks

    def __len__(self):
        return len(self.tracks)

    def items(self):
        return self.tracks.items()


def assign_tracks(order, graph, max_tracks, warn=DEVNULL):
    """
    greedy coloring of the overlap graph. Each feature (in the given order) gets the lowest track not already
    taken by one of its neighbours

    Args:
        order (:class:`list` of :class:`str`): feature names in the order they should be placed
        graph (networkx.Graph): the overlap graph
        max_tracks (int): the number of available tracks

    Returns:
        TrackAssignment: the assigned tracks. Features which could not be placed are reported
    """
    tracks = {}
    exhausted = []

    for name in order:
        if name not in graph:
            continue
        used = {tracks[neighbour] for neighbour in graph.neighbors(name) if neighbour in tracks}
        for track in range(max_tracks):
            if track not in used:
                tracks[name] = track
                break
        else:
            err = TrackExhaustionError(name, max_tracks)
            warn('excluding feature:', err)
            exhausted.append(err)
    return TrackAssignment(tracks, exhausted, max_tracks)
