class QueryError(Exception):
    """Raised for invalid search index configuration or queries."""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.cause = cause
