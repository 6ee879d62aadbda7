# datasources/exceptions.py

from typing import Optional


class DataSourceError(Exception):
    pass


class DataSourceUnavailable(DataSourceError):
    pass


class QueryTimeout(DataSourceError):
    pass


class InvalidQuery(DataSourceError):
    pass


class NotFound(InvalidQuery):
    pass


class MissingCredentials(DataSourceError):
    pass


class EmptyResponse(DataSourceError):
    pass


class RateLimited(DataSourceError):
    def __init__(self, message: str, retry_after: Optional[float] = None):
        super().__init__(message)
        self.retry_after = retry_after
