"""Errors raised by gradebook queries."""


class EmptyDatasetError(ValueError):
    """Raised when an aggregate query has no grades or students to aggregate.

    Parameters
    ----------
    query : str
        The name of the query that could not be answered.

    """

    def __init__(self, query: str):
        self.query = query
        super().__init__(f'Cannot compute "{query}" of an empty gradebook.')
