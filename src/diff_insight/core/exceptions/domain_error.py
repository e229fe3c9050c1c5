class DomainError(Exception):
    """
    Base class for all diff-insight exceptions.
    Callers analyzing many files catch this to isolate one bad patch from the batch.
    """

    pass
