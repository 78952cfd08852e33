"""Exceptions raised before any grid is allocated."""


class DomainColoringError(Exception):
    """Base class for errors raised by domaincoloring."""


class InvalidAxes(DomainColoringError, ValueError):
    """The axis specification does not describe a non-degenerate rectangle."""


class InvalidResolution(DomainColoringError, ValueError):
    """The pixel specification is not a pair of positive integers."""
