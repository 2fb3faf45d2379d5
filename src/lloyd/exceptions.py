"""Exceptions raised by the lloyd package."""


class ConfigurationError(ValueError):
    """A clustering run was configured with invalid data or options.

    Raised synchronously at construction time (or while resolving the
    initial centroids). Never raised while iterating.
    """
    pass
