class NotFoundException(Exception):
    def __init__(self, resource: str, identifier: str, status_code: int = 404):
        self.resource = resource
        self.identifier = identifier
        self.status_code = status_code

    def __str__(self):
        return f"{self.resource} '{self.identifier}' not found"


class InvalidArgument(Exception):
    status_code = 400


class BookingConflict(Exception):
    status_code = 409


class StorageUnavailable(Exception):
    status_code = 503


class ConditionalWriteFailed(Exception):
    pass
