"""
Error taxonomy for the zoo population pipeline.

Missing or unreadable input files surface as the built-in OSError family
(FileNotFoundError for missing inputs). Everything wrong with the content of
an input file derives from ZooDataError.
"""


class ZooDataError(Exception):
    """Base exception for bad input data."""
    pass


class FormatError(ZooDataError, ValueError):
    """Raised when a line, segment or date does not match the expected layout."""
    pass


class NumericParseError(FormatError):
    """Raised when a numeric field (weight) cannot be read."""
    pass


class UnsupportedSpeciesError(ZooDataError, ValueError):
    """Raised for species outside hyena, lion, tiger and bear."""
    pass
