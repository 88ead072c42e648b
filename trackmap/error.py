class MissingAnchorError(KeyError):
    """
    raised when the sequence of a chromosome cannot be located within the genome string
    """
    pass


class TranslationError(KeyError):
    """
    raised when a chromosome-relative position cannot be converted to an absolute genome position

    for example if the chromosome was never anchored or the position lies outside of the chromosome
    """
    pass


class TrackExhaustionError(Exception):
    """
    raised when every track is already in use by the overlapping neighbours of a feature
    """

    def __init__(self, feature_id, max_tracks):
        Exception.__init__(
            self, 'no free track for feature {} (all {} tracks used by overlapping features)'.format(
                feature_id, max_tracks))
        self.feature_id = feature_id
        self.max_tracks = max_tracks


class MalformedHeaderError(ValueError):
    """
    raised when the header of a reference record does not match the expected grammar
    """

    def __init__(self, message, header, filename=None):
        ValueError.__init__(self, message, header)
        self.message = message
        self.header = header
        self.filename = filename

    def __str__(self):
        if self.filename:
            return '{} in {}: {!r}'.format(self.message, self.filename, self.header)
        return '{}: {!r}'.format(self.message, self.header)


class DuplicateRecordError(KeyError):
    pass


class InputFormatError(ValueError):
    """
    raised when a row of a tabular input file does not have the expected form
    """
    pass
