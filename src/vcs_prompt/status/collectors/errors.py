"""Errors raised by status collectors."""


class StatusCollectionError(Exception):
    """Status for this invocation could not be collected.

    Wraps whatever the backend raised (available as __cause__). Nothing
    partial is returned alongside it.
    """
