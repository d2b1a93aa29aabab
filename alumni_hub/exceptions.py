"""
Domain Exceptions

Raised by the service layer and translated to HTTP errors by the routers.
"""


class AlumniHubError(Exception):
    """Base class for application errors"""


class RecordNotFoundError(AlumniHubError):
    """A record with the requested identifier does not exist"""

    def __init__(self, kind: str, record_id: str):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} '{record_id}' not found")


class DuplicateRecordError(AlumniHubError):
    """A unique attribute is already taken"""


class InvalidOperationError(AlumniHubError):
    """The request is well-formed but not allowed in the current state"""


class SearchPreconditionError(ValueError):
    """The search core was called without an input it requires"""


class AccessDeniedError(AlumniHubError):
    """The acting user may not touch this record"""
